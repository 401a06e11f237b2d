# tests/test_catalog_client.py
import asyncio

import httpx
import pytest
import requests
from fastapi.testclient import TestClient

from app.main import app
from sdk.catalog import CatalogClient, CatalogError

api = TestClient(app)


class FakeResponse:
    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error

    def raise_for_status(self):
        pass

    def json(self):
        if self.error:
            raise self.error
        return self.payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error:
            raise self.error
        return self.response

    def close(self):
        pass


def seed_one():
    api.post("/reset")
    return api.post("/products", json={
        "title": "Widget", "price": 9.5, "description": "A widget", "category": "tools",
        "image": "https://example.com/widget.jpg",
    }).json()


def test_fetch_products_from_catalog():
    created = seed_one()
    c = CatalogClient(base_url="http://testserver/", session=api)
    products = c.fetch_products()
    assert len(products) == 1
    assert products[0].id == created["id"]
    assert products[0].title == "Widget"
    assert products[0].price == 9.5


def test_fetch_uses_products_path_and_timeout():
    session = FakeSession(FakeResponse([]))
    c = CatalogClient(base_url="https://shop.example.com/", timeout=3, session=session)
    assert c.fetch_products() == []
    assert session.calls == [("https://shop.example.com/products", 3)]


def test_http_error_status_raises_catalog_error():
    c = CatalogClient(base_url="http://testserver/missing", session=api)
    with pytest.raises(CatalogError):
        c.fetch_products()


def test_connection_error_raises_catalog_error():
    c = CatalogClient(session=FakeSession(error=requests.exceptions.ConnectionError("refused")))
    with pytest.raises(CatalogError, match="refused"):
        c.fetch_products()


def test_non_json_body_raises_catalog_error():
    c = CatalogClient(session=FakeSession(FakeResponse(error=ValueError("Expecting value"))))
    with pytest.raises(CatalogError):
        c.fetch_products()


def test_non_array_body_raises_catalog_error():
    c = CatalogClient(session=FakeSession(FakeResponse({"detail": "nope"})))
    with pytest.raises(CatalogError, match="JSON array"):
        c.fetch_products()


def test_malformed_record_raises_catalog_error():
    c = CatalogClient(session=FakeSession(FakeResponse([{"id": "abc", "title": "x"}])))
    with pytest.raises(CatalogError, match="malformed"):
        c.fetch_products()


def test_extra_fields_are_ignored():
    record = {
        "id": 1, "title": "Bag", "price": 109.95, "description": "d", "category": "c",
        "image": "https://example.com/bag.jpg", "rating": {"rate": 3.9, "count": 120},
    }
    products = CatalogClient(session=FakeSession(FakeResponse([record]))).fetch_products()
    assert products[0].title == "Bag"
    assert not hasattr(products[0], "rating")


def test_fetch_products_async():
    seed_one()

    async def go():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
            return await CatalogClient(base_url="http://testserver").fetch_products_async(ac)

    products = asyncio.run(go())
    assert [p.title for p in products] == ["Widget"]


def test_fetch_products_async_error():
    async def go():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport) as ac:
            return await CatalogClient(base_url="http://testserver/missing").fetch_products_async(ac)

    with pytest.raises(CatalogError):
        asyncio.run(go())
