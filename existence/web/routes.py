# existence/web/routes.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request

from existence.catalog.models import Product
from existence.catalog.store import CatalogStore

router = APIRouter(prefix="/api")


def _catalog(req: Request) -> CatalogStore:
    return req.app.state.catalog


def _dump(products: list[Product]) -> list[dict[str, Any]]:
    return [p.to_dict() for p in products]


@router.get("/products")
async def list_products(req: Request):
    return _dump(_catalog(req).get_all())


# before /products/{product_id}
@router.get("/products/search")
async def search_products(req: Request, q: str = ""):
    return _dump(_catalog(req).search(q))


@router.get("/products/filter/featured")
async def featured_products(req: Request):
    return _dump(_catalog(req).get_featured())


@router.get("/products/filter/popular")
async def popular_products(req: Request):
    return _dump(_catalog(req).get_popular())


@router.get("/products/category/{name}")
async def products_by_category(name: str, req: Request):
    return _dump(_catalog(req).get_by_category(name))


@router.get("/products/{product_id}")
async def get_product(product_id: int, req: Request):
    p = _catalog(req).get_by_id(product_id)
    if not p:
        raise HTTPException(status_code=404, detail="product not found")
    return p.to_dict()


@router.get("/categories")
async def list_categories(req: Request):
    return _catalog(req).categories()
