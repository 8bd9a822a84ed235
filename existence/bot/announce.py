from __future__ import annotations

import logging
from typing import Any

from existence.bot.commands import Announcement
from existence.bot.ui.embeds import announcement_embed
from existence.config import settings
from existence.shared.utils import resolve_channel

log = logging.getLogger(__name__)


async def post_announcement(client: Any, announcement: Announcement) -> bool:
    """
    Posts news / announcement / update to the news channel.
    Failures are logged and reported as False.
    """
    channel_id = settings.NEWS_CHANNEL_ID
    if not channel_id:
        log.warning("News channel is not configured, %s dropped", announcement.kind)
        return False

    try:
        channel = await resolve_channel(client, channel_id)
        if channel is None:
            return False

        icon_url = str(client.user.display_avatar.url) if client.user else None
        await channel.send(embed=announcement_embed(announcement, icon_url=icon_url))
    except Exception as e:
        log.exception("Error posting %s to news channel: %s", announcement.kind, e)
        return False

    log.info("Posted %s to news channel", announcement.kind)
    return True
