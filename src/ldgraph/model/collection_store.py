from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .accessors import get, get_value
from .containers import ID_FIELD, TYPE_FIELD, GraphContainer, Node, is_reference
from .identity import IdentityGenerator
from .keys import KeyResolver
from .locator import locate

logger = logging.getLogger(__name__)

DEFAULT_ELEMENT_KEY = "element"

Fetcher = Callable[[Any], Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class EnrichmentResult:
    """Completion signal of one element fetch."""

    index: int
    ok: bool
    error: BaseException | None = None


class Subset(list):
    """Elements read from a collection node, plus their pending enrichment.

    Elements without their own `@id` are fetched through `fetcher` and
    written back into the same position. Fetches start right away when an
    event loop is running, otherwise on `settle()`. Until `settle()` returns
    the list may be partially enriched; a failed fetch leaves its placeholder.
    """

    def __init__(self, elements: Iterable[Any] = (), fetcher: Fetcher | None = None):
        super().__init__(elements)
        self.fetcher = fetcher
        self._queued: list[int] = []
        self._tasks: dict[int, asyncio.Task] = {}

    @property
    def pending(self) -> int:
        return len(self._queued) + sum(1 for t in self._tasks.values() if not t.done())

    def enrich(self) -> None:
        if self.fetcher is None:
            raise ValueError("enrichment requires a fetcher")
        self._queued = [i for i, item in enumerate(self) if not is_reference(item)]
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return
        self._start()

    def _start(self) -> None:
        for index in self._queued:
            task = asyncio.ensure_future(self._fetch(index, self[index]))
            task.add_done_callback(lambda t, i=index: self._report(i, t))
            self._tasks[index] = task
        self._queued = []

    async def _fetch(self, index: int, item: Any) -> None:
        self[index] = await self.fetcher(item)

    @staticmethod
    def _report(index: int, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.warning(f"Enrichment of element {index} failed: {error}")

    async def settle(self) -> list[EnrichmentResult]:
        """Wait for every fetch and return one completion signal per element fetched."""
        self._start()
        indexes = list(self._tasks)
        outcomes = await asyncio.gather(*(self._tasks[i] for i in indexes), return_exceptions=True)
        self._tasks.clear()
        return [
            EnrichmentResult(i, False, outcome)
            if isinstance(outcome, BaseException)
            else EnrichmentResult(i, True)
            for i, outcome in zip(indexes, outcomes)
        ]


def find_by_id(container: Any, node_id: str) -> Node | None:
    for node in GraphContainer.of(container).nodes:
        if isinstance(node, dict) and node.get(ID_FIELD) == node_id:
            return node
    return None


def extract_or_peek(
    container: Any,
    key: str,
    resolver: KeyResolver,
    *,
    remove: bool = False,
    supply: bool = False,
    element_key: str | None = None,
    fetcher: Fetcher | None = None,
) -> Subset:
    """Elements of the collection node the subject links to under `key`.

    With `remove` the collection node leaves the container and the subject
    loses its link. With `supply` elements lacking an `@id` are enriched
    through `fetcher` (see `Subset`). Missing links or nodes yield an empty
    subset.
    """

    subset = Subset(fetcher=fetcher)
    if container is None or not key:
        return subset

    c = GraphContainer.of(container)
    ref = get_value(c, key, resolver)
    if not is_reference(ref):
        return subset

    index = next(
        (i for i, node in enumerate(c.nodes) if isinstance(node, dict) and node.get(ID_FIELD) == ref[ID_FIELD]),
        None,
    )
    if index is None:
        logger.debug(f"Collection {ref[ID_FIELD]} linked by {key} is not in the container")
        return subset

    collection = c.nodes[index]
    if remove:
        c.require_sequence().pop(index)
        locate(c).pop(resolver.resolve(key), None)
        logger.debug(f"Extracted collection {ref[ID_FIELD]} from {key}")

    elements = get(collection, element_key or DEFAULT_ELEMENT_KEY, resolver)
    if not isinstance(elements, list):
        return subset

    subset.extend(item for item in elements if item)
    if supply:
        subset.enrich()
    return subset


def store(
    container: Any,
    key: str,
    type_: str,
    body: Mapping[str, Any] | None,
    resolver: KeyResolver,
    identity: IdentityGenerator,
) -> str:
    """Append an auxiliary node under a fresh local id and link the subject to it.

    store(graph, "display#collections", "access#CollectionSet", {"foo": 42})
    returns e.g. "_:stored1554"; the subject now holds
    `display#collections: [{"@id": "_:stored1554"}]` and the node
    `{"@id": "_:stored1554", "@type": ".../access#CollectionSet", "foo": 42}`
    is appended.
    """

    c = GraphContainer.of(container)
    nodes = c.require_sequence()
    local_id = identity.fresh_local_id(c)
    node: Node = {ID_FIELD: local_id, TYPE_FIELD: resolver.resolve(type_)}
    node.update(body or {})

    locate(c)[resolver.resolve(key)] = [{ID_FIELD: local_id}]
    nodes.append(node)
    logger.debug(f"Stored {node[TYPE_FIELD]} as {local_id} under {key}")
    return local_id


def wrap_and_store(
    container: Any,
    element_ids: Iterable[Any] | None,
    key: str,
    collection_type: str,
    resolver: KeyResolver,
    identity: IdentityGenerator,
    *,
    element_type: str | None = None,
    element_key: str | None = None,
) -> str | None:
    """Store ids as a collection node linked under `key`.

    An empty list is not represented: `key` is removed from the subject and
    None is returned.
    """

    element_ids = list(element_ids or [])
    if not element_ids:
        subject = locate(container)
        if isinstance(subject, dict):
            subject.pop(resolver.resolve(key), None)
        return None

    elements = []
    for item in element_ids:
        ref: Node = {ID_FIELD: identity.uri_for(item)}
        if element_type:
            ref[TYPE_FIELD] = resolver.resolve(element_type)
        elements.append(ref)

    body = {resolver.resolve(element_key or DEFAULT_ELEMENT_KEY): elements}
    return store(container, key, collection_type, body, resolver, identity)
