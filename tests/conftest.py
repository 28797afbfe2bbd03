"""Pytest fixtures: a fake upstream catalog and a test client wired to it."""

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.deps import catalog_repo
from app.domain.repositories.catalog_repo import CatalogRepo
from app.main import app

CATALOG_URL = "http://catalog.test/products"

PEN_PAYLOAD = {
    "products": [
        {
            "title": "Pen",
            "category": "Stationery",
            "price": 1.5,
            "thumbnail": "http://x/p.png",
            "description": "Blue pen",
        }
    ]
}


def json_transport(payload, status_code: int = 200) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)


def refused_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return httpx.MockTransport(handler)


@pytest.fixture
def client_for():
    """Build a TestClient whose catalog calls go to the given transport."""
    clients = []

    def _make(transport: httpx.AsyncBaseTransport) -> TestClient:
        app.dependency_overrides[catalog_repo] = lambda: CatalogRepo(CATALOG_URL, transport=transport)
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
    app.dependency_overrides.clear()
