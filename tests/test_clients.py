import asyncio
import json

import httpx
import pytest

from conftest import META, SUBJECT_ID, SUBJECT_UUID

from ldgraph.clients import AssetClient, GraphStoreClient
from ldgraph.errors import TransportError


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_get_asset_by_uuid_reference_or_locator(identity):
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json={"@graph": [{"@id": str(request.url)}]})

    async def run():
        assets = AssetClient(identity, client=_client(handler))
        try:
            a = await assets.get_asset(SUBJECT_UUID)
            b = await assets.get_asset({"@id": SUBJECT_ID})
            c = await assets(SUBJECT_ID)
        finally:
            await assets.aclose()
        return a, b, c

    a, b, c = asyncio.run(run())

    assert seen == [SUBJECT_ID, SUBJECT_ID, SUBJECT_ID]
    assert a == b == c == {"@graph": [{"@id": SUBJECT_ID}]}


def test_get_asset_error_status(identity):
    async def run():
        assets = AssetClient(identity, client=_client(lambda request: httpx.Response(404)))
        try:
            await assets.get_asset("missing")
        finally:
            await assets.aclose()

    with pytest.raises(TransportError) as exc:
        asyncio.run(run())
    assert exc.value.status_code == 404


def test_save_puts_whole_graph_to_subject_id():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(204)

    doc = {"_graph": [{"@id": "_:b0"}, {"@id": SUBJECT_ID}]}

    async def run():
        store = GraphStoreClient(client=_client(handler))
        try:
            return await store.save(doc)
        finally:
            await store.aclose()

    assert asyncio.run(run()) is True

    (request,) = requests
    assert request.method == "PUT"
    assert str(request.url) == SUBJECT_ID
    assert json.loads(request.content) == {"@graph": [{"@id": SUBJECT_ID}, {"@id": "_:b0"}]}


def test_save_reports_rejection():
    async def run():
        store = GraphStoreClient(client=_client(lambda request: httpx.Response(409)))
        try:
            return await store.save({"@graph": [{"@id": META + SUBJECT_UUID}]})
        finally:
            await store.aclose()

    assert asyncio.run(run()) is False


def test_save_without_subject_id_is_skipped():
    def handler(request):
        raise AssertionError("no request expected")

    async def run():
        store = GraphStoreClient(client=_client(handler))
        try:
            return await store.save({"@graph": []})
        finally:
            await store.aclose()

    assert asyncio.run(run()) is False
