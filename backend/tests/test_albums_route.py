"""
Album Catalog API - Albums Endpoint Tests
=========================================

What:  Tests for GET /albums over HTTP.
How:   HTTPX AsyncClient talking to the app through ASGITransport.

What we test:
    ✅ Exact body for the shipped catalog
    ✅ Empty catalog returns []
    ✅ Response order equals insertion order for several sizes
    ✅ Key names and key order of every record
    ✅ Decoded records equal the source records
"""

import json

import pytest

from albums_api.main import create_app
from albums_api.models.album import Album
from albums_api.schemas.album import AlbumResponse
from albums_api.services.catalog import Catalog


class TestListAlbums:
    """GET /albums on the shipped catalog."""

    @pytest.mark.asyncio
    async def test_returns_all_albums(self, test_client, expected_default_body):
        response = await test_client.get("/albums")

        assert response.status_code == 200
        assert response.text == expected_default_body

    @pytest.mark.asyncio
    async def test_content_type_is_json(self, test_client):
        response = await test_client.get("/albums")
        assert response.headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_record_keys_and_order(self, test_client):
        response = await test_client.get("/albums")

        for item in response.json():
            assert list(item.keys()) == ["id", "title", "artist", "price"]
            assert isinstance(item["id"], str)
            assert isinstance(item["price"], float)

    @pytest.mark.asyncio
    async def test_round_trip_matches_catalog(self, test_client, sample_catalog):
        response = await test_client.get("/albums")

        decoded = [AlbumResponse(**item) for item in response.json()]
        assert len(decoded) == len(sample_catalog)
        for got, source in zip(decoded, sample_catalog.list()):
            assert got.id == source.id
            assert got.title == source.title
            assert got.artist == source.artist
            assert got.price == source.price

    @pytest.mark.asyncio
    async def test_repeated_requests_are_identical(self, test_client):
        first = await test_client.get("/albums")
        second = await test_client.get("/albums")
        assert first.content == second.content


class TestListAlbumsCustomCatalog:
    """GET /albums against catalogs injected into the factory."""

    @pytest.mark.asyncio
    async def test_empty_catalog_returns_empty_array(self, test_settings, empty_catalog, client_for):
        app = create_app(settings=test_settings, catalog=empty_catalog)
        async with client_for(app) as client:
            response = await client.get("/albums")

        assert response.status_code == 200
        assert response.text == "[]"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("size", [1, 2, 7, 50])
    async def test_order_equals_insertion_order(self, test_settings, client_for, size):
        # Ids run backwards so any sorting would be visible
        albums = [
            Album(id=str(size - i), title=f"Title {i}", artist=f"Artist {i % 3}", price=i + 0.5)
            for i in range(size)
        ]
        app = create_app(settings=test_settings, catalog=Catalog(albums))
        async with client_for(app) as client:
            response = await client.get("/albums")

        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == [album.id for album in albums]

    @pytest.mark.asyncio
    async def test_price_keeps_natural_precision(self, test_settings, client_for):
        albums = [
            Album(id="x", title="Whole", artist="A", price=20.0),
            Album(id="y", title="Cents", artist="B", price=0.1),
        ]
        app = create_app(settings=test_settings, catalog=Catalog(albums))
        async with client_for(app) as client:
            response = await client.get("/albums")

        assert [item["price"] for item in json.loads(response.text)] == [20.0, 0.1]
        assert '"price":0.1}' in response.text

    @pytest.mark.asyncio
    async def test_non_ascii_text_survives(self, test_settings, client_for):
        albums = [Album(id="1", title="Ça plane pour moi", artist="Plastic Bertrand", price=9.99)]
        app = create_app(settings=test_settings, catalog=Catalog(albums))
        async with client_for(app) as client:
            response = await client.get("/albums")

        assert response.json()[0]["title"] == "Ça plane pour moi"
