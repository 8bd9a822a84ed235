import pytest
from fastapi.testclient import TestClient

from existence.catalog.store import CatalogStore
from existence.main import create_app


@pytest.fixture
def api():
    # no context manager => startup (migrations, bot) is not run
    return TestClient(create_app(catalog=CatalogStore(), with_bot=False))


def test_root(api):
    assert api.get("/").json() == {"ok": True, "service": "existence", "products": 5}


def test_list_products(api):
    data = api.get("/api/products").json()
    assert [p["id"] for p in data] == [1, 2, 3, 4, 5]
    assert data[1]["downloadUrl"] == "#"
    assert data[0]["colorIndicator"] == "orange"


def test_get_product(api):
    assert api.get("/api/products/4").json()["name"] == "NFA Account Loader"
    assert api.get("/api/products/42").status_code == 404


def test_category(api):
    assert [p["name"] for p in api.get("/api/products/category/Loader").json()] == ["NFA Account Loader"]
    assert api.get("/api/products/category/External Tool").json()[0]["id"] == 1
    assert api.get("/api/products/category/Nonexistent").json() == []


def test_filters(api):
    assert {p["id"] for p in api.get("/api/products/filter/featured").json()} == {1, 2, 3, 5}
    assert {p["id"] for p in api.get("/api/products/filter/popular").json()} == {1, 4, 5}


def test_search(api):
    assert len(api.get("/api/products/search").json()) == 5
    assert [p["id"] for p in api.get("/api/products/search", params={"q": "SPOOF"}).json()] == [5]


def test_categories(api):
    assert api.get("/api/categories").json() == ["Game Cheat", "External Tool", "Utility", "Loader", "Spoofer"]


def test_app_shares_given_catalog():
    store = CatalogStore(seed=[])
    app = create_app(catalog=store, with_bot=False)
    assert app.state.catalog is store
    assert TestClient(app).get("/api/products").json() == []
