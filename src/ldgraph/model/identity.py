from __future__ import annotations

import logging
import random
import uuid
from collections.abc import Callable, Iterable
from typing import Any

from ldgraph.errors import LocalIdExhaustedError

from .accessors import short_id
from .containers import GRAPH_FIELD, ID_FIELD, TYPE_FIELD, GraphContainer, Node
from .keys import KeyResolver

logger = logging.getLogger(__name__)


def uuid_token() -> str:
    return str(uuid.uuid4())


class IdentityGenerator:
    """Builds persistent locators and container-scoped local ids.

    Persistent locators look like `<domain><api_root><resource_path><token>`,
    e.g. http://sample.domain/api/v1/meta/b35fc8ee-1f65-4884-afc4-593e5fa0aa47.
    Local ids look like `_:stored1554` and are only unique within one container.
    """

    def __init__(
        self,
        resolver: KeyResolver,
        domain: str,
        api_root: str,
        resource_path: str = "/meta/",
        *,
        token_factory: Callable[[], str] = uuid_token,
        local_id_prefix: str = "_:stored",
        local_id_space: int = 10000,
        max_local_id_attempts: int = 100000,
        rng: random.Random | None = None,
    ):
        if local_id_space <= 0:
            raise ValueError("local_id_space must be > 0")
        self.resolver = resolver
        self.domain = domain
        self.api_root = api_root
        self.resource_path = resource_path
        self.token_factory = token_factory
        self.local_id_prefix = local_id_prefix
        self.local_id_space = local_id_space
        self.max_local_id_attempts = max_local_id_attempts
        self._rng = rng or random.Random()

    def is_locator(self, value: str) -> bool:
        return self.resource_path.lower() in value.lower()

    def uri_for(self, value: Any) -> str:
        """Locator for a token, a node/container, or a list of those.

        Lists are consumed from the front (popped in place) until an entry
        yields a non-empty id. Strings already containing the resource path
        are returned unchanged.
        """

        if isinstance(value, list):
            token = ""
            while value and not token:
                token = self._token_of(value.pop(0))
            value = token
        elif not isinstance(value, str):
            value = self._token_of(value)

        if self.is_locator(value):
            return value
        return f"{self.domain}{self.api_root}{self.resource_path}{value}"

    @staticmethod
    def _token_of(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return short_id(value)

    def create_blank(
        self, type_: str, keys: Iterable[str] | None = None, wrap: bool = True
    ) -> dict[str, Any]:
        """New node with a fresh persistent id, its type and empty predicates.

        create_blank("display#Scenario", ["displayName"]) returns
        {'@graph': [{'@id': 'http://sample.domain/api/v1/meta/aa5f...',
                     '@type': 'http://sample.domain/ontologies/display#Scenario',
                     'http://sample.domain/ontologies/core#displayName': ['']}]}
        """

        node: Node = {
            ID_FIELD: self.uri_for(self.token_factory()),
            TYPE_FIELD: self.resolver.resolve(type_),
        }
        for key in keys or []:
            node[self.resolver.resolve(key)] = [""]
        return {GRAPH_FIELD: [node]} if wrap else node

    def fresh_local_id(self, container: Any) -> str:
        existing = set(GraphContainer.of(container).ids())
        for _ in range(self.max_local_id_attempts):
            candidate = f"{self.local_id_prefix}{self._rng.randrange(self.local_id_space)}"
            if candidate not in existing:
                return candidate
        logger.warning(
            f"Local id space exhausted: {len(existing)} ids, {self.max_local_id_attempts} attempts"
        )
        raise LocalIdExhaustedError(self.max_local_id_attempts)
