from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .clients import AssetClient, GraphStoreClient
from .model import accessors, collection_store
from .model.collection_store import Fetcher, Subset
from .model.containers import GraphContainer, Node
from .model.identity import IdentityGenerator, uuid_token
from .model.inline import inline
from .model.keys import KeyResolver
from .model.locator import local_id_pattern, locate, persistent_id_pattern
from .settings import LinkedGraphSettings
from .settings import settings as default_settings
from .urls import compile_relative_url, compile_url


class LinkedGraph:
    """One entry point for the graph model and its HTTP collaborators.

    Every method accepts any container shape: a server response
    (`{"@graph": [...]}`), bound view state (`{"_graph": [...]}`) or a bare
    node. Keys are short names such as 'displayName' or 'display#collections'
    and are expanded with the configured ontology namespaces.
    """

    def __init__(
        self,
        resolver: KeyResolver,
        identity: IdentityGenerator,
        *,
        domain: str,
        api_root: str,
        display_namespace: str = "display#",
        element_key: str = collection_store.DEFAULT_ELEMENT_KEY,
        assets: AssetClient | None = None,
        graph_store: GraphStoreClient | None = None,
    ):
        self.resolver = resolver
        self.identity = identity
        self.domain = domain
        self.api_root = api_root
        self.display_prefix = resolver.prefix(display_namespace)
        self.element_key = element_key
        self.assets = assets
        self.graph_store = graph_store
        self._persistent = persistent_id_pattern(identity.resource_path)
        self._local = local_id_pattern(identity.local_id_prefix)

    @classmethod
    def from_settings(
        cls,
        settings: LinkedGraphSettings | None = None,
        *,
        token_factory: Callable[[], str] = uuid_token,
        with_clients: bool = True,
    ) -> LinkedGraph:
        settings = settings or default_settings
        resolver = KeyResolver(settings.ontology_base, settings.core_namespace)
        identity = IdentityGenerator(
            resolver,
            settings.domain,
            settings.api_root,
            settings.resource_path,
            token_factory=token_factory,
            local_id_prefix=settings.local_id_prefix,
            local_id_space=settings.local_id_space,
            max_local_id_attempts=settings.max_local_id_attempts,
        )
        assets = graph_store = None
        if with_clients:
            assets = AssetClient(identity, api_key=settings.api_key, read_timeout_s=settings.http_timeout_s)
            graph_store = GraphStoreClient(api_key=settings.api_key, read_timeout_s=settings.http_timeout_s)
        return cls(
            resolver,
            identity,
            domain=settings.domain,
            api_root=settings.api_root,
            display_namespace=settings.display_namespace,
            element_key=settings.element_key,
            assets=assets,
            graph_store=graph_store,
        )

    async def aclose(self):
        if self.assets is not None:
            await self.assets.aclose()
        if self.graph_store is not None:
            await self.graph_store.aclose()

    # --- keys / urls ---

    def key(self, key: str) -> str:
        return self.resolver.resolve(key)

    def compile_url(self, tail: str) -> str:
        return compile_url(tail, self.domain, self.api_root)

    def compile_relative_url(self, tail: str) -> str:
        return compile_relative_url(tail, self.domain, self.api_root)

    # --- subject and accessors ---

    def locate(self, container: Any) -> Any:
        return locate(container, persistent=self._persistent, local=self._local)

    def _corrected(self, container: Any) -> Any:
        # subject first under the configured id patterns before delegating
        if container is not None:
            self.locate(container)
        return container

    def get(self, container: Any, key: str, *, fallback: str | None = None) -> Any | None:
        return accessors.get(self._corrected(container), key, self.resolver, fallback=fallback)

    def get_value(self, container: Any, key: str, *, fallback: str | None = None) -> Any | None:
        return accessors.get_value(self._corrected(container), key, self.resolver, fallback=fallback)

    def set(self, container: Any, key: str, value: Any) -> None:
        accessors.set_value(self._corrected(container), key, value, self.resolver)

    # --- identity ---

    def uri_for(self, value: Any) -> str:
        return self.identity.uri_for(value)

    def create_blank(self, type_: str, keys: Iterable[str] | None = None, wrap: bool = True) -> Node:
        return self.identity.create_blank(type_, keys, wrap)

    def fresh_local_id(self, container: Any) -> str:
        return self.identity.fresh_local_id(container)

    def graph_ids(self, container: Any) -> list[str | None]:
        return GraphContainer.of(container).ids()

    # --- collections ---

    def find_by_id(self, container: Any, node_id: str) -> Node | None:
        return collection_store.find_by_id(container, node_id)

    def extract_or_peek(
        self,
        container: Any,
        key: str,
        *,
        remove: bool = False,
        supply: bool = False,
        element_key: str | None = None,
        fetcher: Fetcher | None = None,
    ) -> Subset:
        return collection_store.extract_or_peek(
            self._corrected(container),
            key,
            self.resolver,
            remove=remove,
            supply=supply,
            element_key=element_key or self.element_key,
            fetcher=fetcher or self.assets,
        )

    def get_subset(
        self, container: Any, key: str, supply: bool = False, element_key: str | None = None
    ) -> Subset:
        """Non-destructive read of a collection."""
        return self.extract_or_peek(container, key, supply=supply, element_key=element_key)

    def extract_subset(self, container: Any, key: str, element_key: str | None = None) -> Subset:
        """Remove a collection from the graph and enrich its elements."""
        return self.extract_or_peek(container, key, remove=True, supply=True, element_key=element_key)

    def store(self, container: Any, key: str, type_: str, body: dict[str, Any] | None = None) -> str:
        return collection_store.store(self._corrected(container), key, type_, body, self.resolver, self.identity)

    def wrap_and_store(
        self,
        container: Any,
        element_ids: Iterable[Any] | None,
        key: str,
        collection_type: str,
        element_type: str | None = None,
    ) -> str | None:
        return collection_store.wrap_and_store(
            self._corrected(container),
            element_ids,
            key,
            collection_type,
            self.resolver,
            self.identity,
            element_type=element_type,
            element_key=self.element_key,
        )

    def inline(self, container: Any, source: Any = None) -> list[str]:
        return inline(container, source, local=self._local, persistent=self._persistent)

    # --- transport ---

    async def supply(self, container: Any, key: str) -> Any:
        """Load the asset referenced under the display-namespace predicate `key`.

        Returns None when the subject has no such reference.
        """
        if self.assets is None:
            raise RuntimeError("LinkedGraph was built without an asset client")
        subject = self.locate(container)
        values = subject.get(self.display_prefix + key) if isinstance(subject, dict) else None
        ref = values[0] if isinstance(values, list) and values else None
        if not ref:
            return None
        return await self.assets.get_asset(ref)

    async def save(self, container: Any) -> bool:
        if self.graph_store is None:
            raise RuntimeError("LinkedGraph was built without a graph store client")
        self.locate(container)
        return await self.graph_store.save(container)
