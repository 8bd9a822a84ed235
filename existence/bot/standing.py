# existence/bot/standing.py
from __future__ import annotations

import logging
from typing import Any

from existence.bot.publisher import FAILED, PublishOutcome, StandingPublisher
from existence.bot.ui.components import PERMANENT_SELECT_ID, make_view, product_select
from existence.bot.ui.embeds import (
    MENU_FINGERPRINT,
    STATUS_FINGERPRINT,
    WELCOME_FINGERPRINT,
    menu_embed,
    status_board_embed,
    welcome_embed,
)
from existence.catalog.store import CatalogStore
from existence.config import settings

log = logging.getLogger(__name__)


def _avatar_url(client: Any) -> str | None:
    user = getattr(client, "user", None)
    if user is None:
        return None
    return str(user.display_avatar.url)


def _configured(channel_id: int, what: str) -> bool:
    if not channel_id:
        log.warning("%s channel is not configured, skip", what)
        return False
    return True


async def publish_menu(publisher: StandingPublisher, catalog: CatalogStore) -> PublishOutcome:
    channel_id = settings.DISCORD_CHANNEL_ID
    if not _configured(channel_id, "Menu"):
        return FAILED

    def build() -> dict[str, Any]:
        return {
            "embed": menu_embed(footer="Pick a product to get started"),
            "view": make_view(product_select(catalog.get_all(), custom_id=PERMANENT_SELECT_ID)),
        }

    return await publisher.ensure_published(channel_id, MENU_FINGERPRINT, build, require_components=True)


def _status_payload(catalog: CatalogStore) -> dict[str, Any]:
    return {"embed": status_board_embed(catalog.get_all())}


async def publish_status_board(publisher: StandingPublisher, catalog: CatalogStore) -> PublishOutcome:
    channel_id = settings.STATUS_CHANNEL_ID
    if not _configured(channel_id, "Status"):
        return FAILED
    return await publisher.ensure_published(channel_id, STATUS_FINGERPRINT, lambda: _status_payload(catalog))


async def refresh_status_board(publisher: StandingPublisher, catalog: CatalogStore) -> PublishOutcome:
    channel_id = settings.STATUS_CHANNEL_ID
    if not _configured(channel_id, "Status"):
        return FAILED
    return await publisher.refresh(channel_id, STATUS_FINGERPRINT, lambda: _status_payload(catalog))


async def publish_welcome(publisher: StandingPublisher, catalog: CatalogStore) -> PublishOutcome:
    channel_id = settings.NEWS_CHANNEL_ID
    if not _configured(channel_id, "News"):
        return FAILED

    def build() -> dict[str, Any]:
        return {"embed": welcome_embed(catalog.get_all(), icon_url=_avatar_url(publisher.client))}

    return await publisher.ensure_published(channel_id, WELCOME_FINGERPRINT, build)


async def publish_all(publisher: StandingPublisher, catalog: CatalogStore) -> dict[str, PublishOutcome]:
    return {
        "menu": await publish_menu(publisher, catalog),
        "status": await publish_status_board(publisher, catalog),
        "welcome": await publish_welcome(publisher, catalog),
    }
