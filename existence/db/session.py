from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from existence.config import settings

_engine: AsyncEngine | None = None


def async_url(url: str) -> str:
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return url


def init_engine(url: str | None = None) -> AsyncEngine:
    global _engine
    _engine = create_async_engine(async_url(url or settings.DATABASE_URL), pool_pre_ping=True)
    return _engine


def get_engine() -> AsyncEngine:
    if _engine is None:
        return init_engine()
    return _engine


async def dispose_engine() -> None:
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None


async def db_fetch_one(query: str, params: dict | None = None) -> dict | None:
    params = params or {}
    # begin() => commit/rollback on exit
    async with get_engine().begin() as conn:
        res = await conn.execute(text(query), params)
        row = res.mappings().first()
        return dict(row) if row else None


async def db_execute(query: str, params: dict | None = None) -> int:
    params = params or {}
    async with get_engine().begin() as conn:
        res = await conn.execute(text(query), params)
        return int(getattr(res, "rowcount", 0) or 0)
