"""
Tests for the document store client and remote store, against a stub server.
"""

import asyncio
import json

import httpx
import pytest
from brewcraft_common.catalog import default_catalog
from brewcraft_common.exceptions import ConfigurationError, StorageError
from brewcraft_common.models import Recipe

from mcp_brewcraft.client import DocumentStoreClient
from mcp_brewcraft.config import BrewCraftConfig
from mcp_brewcraft.remote_store import RemoteStore


BASE_URL = "https://docs.example.com/v1"


class StubDocumentServer:
    """In-memory document store speaking the REST shape the client expects."""

    def __init__(self):
        self.collections: dict[str, dict[str, dict]] = {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.removeprefix("/v1/").split("/")
        collection = self.collections.setdefault(parts[0], {})

        if len(parts) == 1 and request.method == "GET":
            return httpx.Response(200, json=list(collection.values()))

        document_id = parts[1]
        if request.method == "GET":
            if document_id not in collection:
                return httpx.Response(404, json={"error": "not found"})
            return httpx.Response(200, json=collection[document_id])
        if request.method == "PUT":
            collection[document_id] = json.loads(request.content)
            return httpx.Response(200, json=collection[document_id])
        if request.method == "DELETE":
            if collection.pop(document_id, None) is None:
                return httpx.Response(404)
            return httpx.Response(204)
        return httpx.Response(405)


def make_client(server, api_key: str | None = "token") -> DocumentStoreClient:
    config = BrewCraftConfig(storage="remote", remote_url=BASE_URL + "/", remote_api_key=api_key)
    return DocumentStoreClient(config, transport=httpx.MockTransport(server))


class TestDocumentStoreClient:
    """Tests for the HTTP client."""

    def test_requires_url(self):
        with pytest.raises(ConfigurationError):
            DocumentStoreClient(BrewCraftConfig())

    def test_put_and_get(self):
        server = StubDocumentServer()
        client = make_client(server)
        asyncio.run(client.put_document("recipes", "r1", {"id": "r1", "name": "Pale"}))
        assert asyncio.run(client.get_document("recipes", "r1")) == {"id": "r1", "name": "Pale"}
        assert str(server.requests[0].url) == f"{BASE_URL}/recipes/r1"

    def test_bearer_auth(self):
        server = StubDocumentServer()
        asyncio.run(make_client(server).list_documents("recipes"))
        assert server.requests[0].headers["Authorization"] == "Bearer token"

    def test_no_auth_without_key(self):
        server = StubDocumentServer()
        asyncio.run(make_client(server, api_key=None).list_documents("recipes"))
        assert "Authorization" not in server.requests[0].headers

    def test_get_missing_returns_none(self):
        assert asyncio.run(make_client(StubDocumentServer()).get_document("recipes", "x")) is None

    def test_delete_no_content(self):
        server = StubDocumentServer()
        client = make_client(server)
        asyncio.run(client.put_document("recipes", "r1", {"id": "r1"}))
        assert asyncio.run(client.delete_document("recipes", "r1")) is None
        assert asyncio.run(client.list_documents("recipes")) == []

    def test_delete_missing_is_ignored(self):
        asyncio.run(make_client(StubDocumentServer()).delete_document("recipes", "x"))

    def test_http_error_raises_storage_error(self):
        def failing(request):
            return httpx.Response(500, json={"error": "boom"})

        client = make_client(failing)
        with pytest.raises(StorageError) as excinfo:
            asyncio.run(client.list_documents("recipes"))
        assert excinfo.value.status_code == 500

    def test_transport_error_raises_storage_error(self):
        def unreachable(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(StorageError) as excinfo:
            asyncio.run(make_client(unreachable).list_documents("recipes"))
        assert excinfo.value.status_code is None


class TestRemoteStore:
    """Tests for the protocol adapter over the client."""

    def test_recipe_round_trip(self):
        server = StubDocumentServer()
        store = RemoteStore(make_client(server))
        recipe = Recipe(id="r1", name="Pale", batch_size=5.5)
        asyncio.run(store.save_recipe(recipe))
        assert server.collections["recipes"]["r1"]["batchSize"] == 5.5
        assert asyncio.run(store.get_recipe("r1")) == recipe
        assert asyncio.run(store.list_recipes()) == [recipe]

    def test_missing_recipe(self):
        store = RemoteStore(make_client(StubDocumentServer()))
        assert asyncio.run(store.get_recipe("nope")) is None

    def test_delete_recipe(self):
        store = RemoteStore(make_client(StubDocumentServer()))
        asyncio.run(store.save_recipe(Recipe(id="r1")))
        asyncio.run(store.delete_recipe("r1"))
        assert asyncio.run(store.list_recipes()) == []

    def test_empty_library_uses_defaults(self):
        store = RemoteStore(make_client(StubDocumentServer()))
        ingredients = asyncio.run(store.list_ingredients())
        assert len(ingredients) == len(default_catalog().ingredients)

    def test_custom_ingredients(self):
        server = StubDocumentServer()
        store = RemoteStore(make_client(server))
        hop = default_catalog().get_ingredient("h1").model_copy(update={"id": "custom-hop-9"})
        asyncio.run(store.save_custom_ingredient(hop))
        assert asyncio.run(store.list_custom_ingredients()) == [hop]
        asyncio.run(store.delete_custom_ingredient("custom-hop-9"))
        assert asyncio.run(store.list_custom_ingredients()) == []

    def test_library_seeded_before_first_change(self):
        server = StubDocumentServer()
        store = RemoteStore(make_client(server))
        cascade = default_catalog().get_ingredient("h1").model_copy(update={"alpha_acid": 6.8})
        asyncio.run(store.save_ingredient(cascade))

        library = asyncio.run(store.list_ingredients())
        assert len(library) == len(default_catalog().ingredients)
        assert next(i for i in library if i.id == "h1").alpha_acid == 6.8

    def test_delete_library_ingredient(self):
        store = RemoteStore(make_client(StubDocumentServer()))
        asyncio.run(store.delete_ingredient("m1"))
        library = asyncio.run(store.list_ingredients())
        assert "m1" not in [i.id for i in library]
        assert len(library) == len(default_catalog().ingredients) - 1
