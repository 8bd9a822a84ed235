from __future__ import annotations

import logging
from typing import Any

import discord

log = logging.getLogger(__name__)


async def resolve_channel(client: discord.Client, channel_id: int) -> Any:
    """
    Cached channel first, REST fetch otherwise.
    Returns None when the channel cannot take messages.
    """
    channel = client.get_channel(channel_id)
    if channel is None:
        channel = await client.fetch_channel(channel_id)
    if not hasattr(channel, "send") or not hasattr(channel, "history"):
        log.warning("Channel %s not found or cannot send messages", channel_id)
        return None
    return channel


async def safe_delete_message(message: discord.Message) -> bool:
    try:
        await message.delete()
        return True
    except discord.HTTPException as e:
        # already deleted / missing Manage Messages
        log.warning("delete message %s failed: %s", getattr(message, "id", "?"), e)
        return False


async def safe_reply(message: discord.Message, content: str | None = None, **kwargs: Any) -> discord.Message | None:
    try:
        return await message.reply(content, **kwargs)
    except discord.HTTPException as e:
        log.warning("reply failed channel=%s: %s", getattr(message.channel, "id", "?"), e)
        return None


async def send_ephemeral(
    interaction: discord.Interaction,
    *,
    embed: discord.Embed,
    view: discord.ui.View | None = None,
) -> None:
    kwargs: dict[str, Any] = {"embed": embed, "ephemeral": True}
    if view is not None:
        kwargs["view"] = view
    try:
        await interaction.response.send_message(**kwargs)
    except discord.HTTPException as e:
        # interaction token expired / already answered
        log.warning("interaction reply failed: %s", e)
