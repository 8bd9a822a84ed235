import dataclasses

import pytest

from existence.catalog.models import CATEGORIES, Product
from existence.catalog.store import CatalogStore


def test_seed_assigns_sequential_ids(catalog):
    products = catalog.get_all()
    assert len(products) == 5
    assert [p.id for p in products] == [1, 2, 3, 4, 5]
    assert products[0].name == "Rust Arcane External"


def test_get_by_id_roundtrip(catalog):
    for p in catalog.get_all():
        assert catalog.get_by_id(p.id) is p


def test_get_by_id_unknown(catalog):
    assert catalog.get_by_id(0) is None
    assert catalog.get_by_id(999) is None


def test_featured_and_popular_are_subsets(catalog):
    everything = catalog.get_all()

    featured = catalog.get_featured()
    assert featured and all(p.featured for p in featured)
    assert all(p in everything for p in featured)

    popular = catalog.get_popular()
    assert popular and all(p.popular for p in popular)
    assert all(p in everything for p in popular)

    assert [p.name for p in popular] == ["Rust Arcane External", "NFA Account Loader", "Spoofer"]


def test_by_category(catalog):
    loaders = catalog.get_by_category("Loader")
    assert [p.name for p in loaders] == ["NFA Account Loader"]
    assert len(catalog.get_by_category("External Tool")) == 3
    assert catalog.get_by_category("Nonexistent") == []
    # exact match only
    assert catalog.get_by_category("loader") == []


def test_search_empty_returns_all(catalog):
    assert catalog.search("") == catalog.get_all()


def test_search_is_case_insensitive_over_all_fields(catalog):
    assert [p.name for p in catalog.search("SPOOFER")] == ["Spoofer"]
    # description only
    assert [p.name for p in catalog.search("bo6 external")] == ["BO6 Engine"]
    # category only
    assert {p.id for p in catalog.search("external tool")} == {1, 2, 3}
    assert catalog.search("nothing like this") == []


def test_pending_sentinel(catalog):
    pending = [p.name for p in catalog.get_all() if not p.is_available]
    assert pending == ["Rust Pro External", "Spoofer"]


def test_products_are_frozen(catalog):
    p = catalog.get_by_id(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.name = "changed"  # type: ignore[misc]
    assert catalog.get_by_id(1).name == "Rust Arcane External"


def test_to_dict_uses_api_field_names():
    p = Product(
        id=7, name="X", description="d", category="Utility",
        color_indicator="teal", download_url="#", featured=False, popular=True,
    )
    assert p.to_dict() == {
        "id": 7,
        "name": "X",
        "description": "d",
        "category": "Utility",
        "colorIndicator": "teal",
        "downloadUrl": "#",
        "featured": False,
        "popular": True,
    }


def test_custom_seed_and_categories():
    store = CatalogStore(seed=[])
    assert store.get_all() == []
    assert store.categories() == list(CATEGORIES)


def test_users_placeholder():
    store = CatalogStore()
    assert store.get_user(1) is None

    u = store.create_user("alice")
    assert u.id == 1
    assert store.get_user(1) == u
    assert store.get_user_by_username("alice") == u
    assert store.get_user_by_username("bob") is None
    assert store.create_user("bob").id == 2
