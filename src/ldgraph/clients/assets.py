from __future__ import annotations

import logging
from typing import Any

import httpx

from ldgraph.errors import TransportError
from ldgraph.http import graph_client, retry_transient
from ldgraph.model.containers import ID_FIELD
from ldgraph.model.identity import IdentityGenerator

logger = logging.getLogger(__name__)


class AssetClient:
    """Loads the full representation of a resource by id or reference.

    Ids are turned into locators with `IdentityGenerator.uri_for`, so plain
    uuids, `{"@id": ...}` references and full locators are all accepted.
    """

    def __init__(
        self,
        identity: IdentityGenerator,
        *,
        api_key: str | None = None,
        read_timeout_s: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.identity = identity
        self._client = client or graph_client(api_key=api_key, read_timeout_s=read_timeout_s)

    async def aclose(self):
        await self._client.aclose()

    def locator_for(self, ref: Any) -> str:
        if isinstance(ref, dict) and isinstance(ref.get(ID_FIELD), str):
            ref = ref[ID_FIELD]
        return self.identity.uri_for(ref)

    @retry_transient()
    async def _get(self, url: str) -> Any:
        r = await self._client.get(url)
        r.raise_for_status()
        return r.json()

    async def get_asset(self, ref: Any) -> Any:
        url = self.locator_for(ref)
        try:
            return await self._get(url)
        except httpx.HTTPStatusError as e:
            raise TransportError(f"GET {url} failed: {e.response.status_code}", status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.warning(f"GET {url} failed: {e}")
            raise TransportError(f"GET {url} failed: {e}") from e

    async def __call__(self, ref: Any) -> Any:
        return await self.get_asset(ref)
