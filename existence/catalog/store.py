# existence/catalog/store.py
from __future__ import annotations

from typing import Any, Iterable

from existence.catalog.models import CATEGORIES, Product, User
from existence.catalog.seed import SEED_PRODUCTS


class CatalogStore:
    """
    In-memory catalog, seeded once at construction.

    Products are read-only after seeding. Users are a placeholder entity:
    nothing in the bot or API creates them.
    """

    def __init__(self, seed: Iterable[dict[str, Any]] | None = None) -> None:
        self._products: dict[int, Product] = {}
        self._users: dict[int, User] = {}
        self._next_product_id = 1
        self._next_user_id = 1
        self._seed(SEED_PRODUCTS if seed is None else seed)

    def _seed(self, rows: Iterable[dict[str, Any]]) -> None:
        for row in rows:
            pid = self._next_product_id
            self._next_product_id += 1
            self._products[pid] = Product(id=pid, **row)

    # --------- products ---------

    def get_all(self) -> list[Product]:
        return list(self._products.values())

    def get_by_id(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def get_by_category(self, category: str) -> list[Product]:
        return [p for p in self._products.values() if p.category == category]

    def get_featured(self) -> list[Product]:
        return [p for p in self._products.values() if p.featured]

    def get_popular(self) -> list[Product]:
        return [p for p in self._products.values() if p.popular]

    def search(self, query: str) -> list[Product]:
        q = (query or "").lower()
        return [
            p
            for p in self._products.values()
            if q in p.name.lower() or q in p.description.lower() or q in p.category.lower()
        ]

    def categories(self) -> list[str]:
        return list(CATEGORIES)

    # --------- users ---------

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def create_user(self, username: str, password: str = "") -> User:
        uid = self._next_user_id
        self._next_user_id += 1
        user = User(id=uid, username=username, password=password)
        self._users[uid] = user
        return user
