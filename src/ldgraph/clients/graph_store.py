from __future__ import annotations

import logging
from typing import Any

import httpx

from ldgraph.errors import TransportError
from ldgraph.http import graph_client, retry_transient
from ldgraph.model.containers import ID_FIELD, GraphContainer
from ldgraph.model.locator import locate

logger = logging.getLogger(__name__)


class GraphStoreClient:
    """Saves a whole graph by overwriting the resource named by its subject id.

    The request is an idempotent `PUT <subject @id>` with `{"@graph": [...]}`.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        read_timeout_s: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._client = client or graph_client(api_key=api_key, read_timeout_s=read_timeout_s)

    async def aclose(self):
        await self._client.aclose()

    @retry_transient()
    async def _put(self, url: str, document: dict[str, Any]) -> httpx.Response:
        return await self._client.put(url, json=document)

    async def save(self, container: Any) -> bool:
        """True when the store accepted the graph, False on an error status."""
        c = GraphContainer.of(container)
        subject = locate(c)
        url = subject.get(ID_FIELD) if isinstance(subject, dict) else None
        if not url:
            logger.warning("Graph has no subject id, nothing saved")
            return False

        try:
            r = await self._put(url, c.to_document())
        except httpx.HTTPError as e:
            raise TransportError(f"PUT {url} failed: {e}") from e
        if r.is_success:
            logger.info(f"Saved {len(c.nodes)} nodes to {url}")
            return True
        logger.warning(f"PUT {url} returned {r.status_code}")
        return False
