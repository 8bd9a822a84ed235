# existence/main.py
from __future__ import annotations

import asyncio
import logging

from fastapi import FastAPI

from existence.bot.client import ExistenceBot
from existence.catalog.store import CatalogStore
from existence.config import settings
from existence.db.migrations import run_migrations
from existence.db.session import dispose_engine
from existence.web.routes import router as api_router

log = logging.getLogger(__name__)


def setup_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )
    # gateway chatter
    for name in ("discord.gateway", "discord.http", "discord.client"):
        logging.getLogger(name).setLevel(logging.WARNING)


def create_app(*, catalog: CatalogStore | None = None, with_bot: bool = True) -> FastAPI:
    """
    Composition root: one catalog instance shared by the HTTP API and the bot.
    """
    if catalog is None:
        catalog = CatalogStore()

    app = FastAPI(title="Existence Downloads")
    app.state.catalog = catalog
    app.state.bot = None
    app.state.bot_task = None
    app.include_router(api_router)

    @app.on_event("startup")
    async def on_startup():
        setup_logging()
        await run_migrations()

        if not with_bot:
            return
        if not settings.DISCORD_BOT_TOKEN.strip():
            log.warning("DISCORD_BOT_TOKEN is empty, Discord bot disabled")
            return

        bot = ExistenceBot(catalog)
        app.state.bot = bot
        app.state.bot_task = asyncio.create_task(bot.run_safely(settings.DISCORD_BOT_TOKEN))
        log.info("Discord bot starting")

    @app.on_event("shutdown")
    async def on_shutdown():
        bot = app.state.bot
        if bot is not None and not bot.is_closed():
            try:
                await bot.close()
            except Exception as e:
                log.warning("bot close failed: %s", e)

        task = app.state.bot_task
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

        await dispose_engine()

    @app.get("/")
    async def root():
        return {"ok": True, "service": "existence", "products": len(catalog.get_all())}

    return app


app = create_app()
