"""
Shared pytest fixtures.

``transport`` replaces ``requests.request`` with an in-process stub, so no
test touches the network.
"""

import json
from typing import Any, Dict, List, NamedTuple, Optional, Tuple
from urllib.parse import urlsplit

import pytest
import requests

from shopifyService import ShopifyClient

SHOPIFY_ENV_VARS = [
    "SHOPIFY_SHOP_URL",
    "SHOPIFY_ADMIN_API_KEY",
    "SHOPIFY_API_VERSION",
    "SHOPIFY_TIMEOUT",
]


class FakeResponse:
    """The subset of requests.Response the client relies on"""

    def __init__(self, status_code: int = 200, body: Any = None):
        self.status_code = status_code
        self.content = b"" if body is None else json.dumps(body).encode()

    def json(self) -> Any:
        return json.loads(self.content)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class Call(NamedTuple):
    method: str
    url: str
    path: str
    headers: Dict[str, str]
    params: Optional[Dict[str, Any]]
    json: Any
    timeout: Optional[float]


class StubTransport:
    """
    Answers requests from fixed routes or from an in-memory record store.
    Anything unknown gets a 404.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.records: Dict[str, Tuple[str, Dict[str, Any]]] = {}
        self.calls: List[Call] = []
        self.error: Optional[Exception] = None

    def add(self, method: str, path: str, body: Any = None, status: int = 200):
        self.routes[(method, path)] = (status, body)

    def add_record(self, collection: str, resource_name: str, record: Dict[str, Any]):
        """Serve GET/DELETE for ``<collection>/<id>.json``"""
        self.records[f"{collection}/{record['id']}.json"] = (resource_name, record)

    def __call__(self, method, url, headers=None, params=None, json=None, timeout=None):
        path = urlsplit(url).path
        self.calls.append(Call(method, url, path, headers, params, json, timeout))

        if self.error is not None:
            raise self.error

        if (method, path) in self.routes:
            status, body = self.routes[(method, path)]
            return FakeResponse(status, body)

        if path in self.records:
            resource_name, record = self.records[path]
            if method == "GET":
                return FakeResponse(200, {resource_name: record})
            if method == "DELETE":
                del self.records[path]
                return FakeResponse(200, {})

        return FakeResponse(404, {"errors": "Not Found"})

    @property
    def last(self) -> Call:
        return self.calls[-1]


@pytest.fixture
def transport(monkeypatch):
    stub = StubTransport()
    monkeypatch.setattr(requests, "request", stub)
    return stub


@pytest.fixture
def shopify():
    return ShopifyClient("shop", "shpat_test")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SHOPIFY_* variables for the test and restore them afterwards"""
    for name in SHOPIFY_ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch
