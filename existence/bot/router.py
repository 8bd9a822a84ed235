# existence/bot/router.py
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import discord

from existence.bot.announce import post_announcement
from existence.bot.commands import Announcement, MalformedCommand, SimpleCommand, parse_command
from existence.bot.publisher import StandingPublisher
from existence.bot.standing import publish_welcome
from existence.bot.ui import (
    PERMANENT_SELECT_ID,
    PRODUCT_SELECT_ID,
    download_button,
    make_view,
    parse_download_id,
    product_select,
)
from existence.bot.ui.embeds import (
    download_embed,
    featured_embed,
    help_embed,
    menu_embed,
    popular_embed,
    product_detail_embed,
    product_status_embed,
    status_header_embed,
)
from existence.catalog.models import Product
from existence.catalog.store import CatalogStore
from existence.config import settings
from existence.core.registry import CommandRegistry
from existence.shared.utils import safe_delete_message, safe_reply, send_ephemeral

log = logging.getLogger(__name__)

ERROR_REPLY = "Sorry, there was an error processing your command."
ANNOUNCE_KEY = "announce"


@dataclass
class BotContext:
    client: Any
    catalog: CatalogStore
    publisher: StandingPublisher
    commands: CommandRegistry = field(default_factory=CommandRegistry)


# ---------- command handlers ----------

async def cmd_products(ctx: BotContext, message: discord.Message, command: SimpleCommand) -> None:
    products = ctx.catalog.get_all()
    view = make_view(product_select(products)) if products else None
    await message.reply(embed=menu_embed(), view=view)


async def cmd_featured(ctx: BotContext, message: discord.Message, command: SimpleCommand) -> None:
    await message.reply(embed=featured_embed(ctx.catalog.get_featured()))


async def cmd_popular(ctx: BotContext, message: discord.Message, command: SimpleCommand) -> None:
    await message.reply(embed=popular_embed(ctx.catalog.get_popular()))


async def cmd_help(ctx: BotContext, message: discord.Message, command: SimpleCommand) -> None:
    await message.reply(embed=help_embed())


async def cmd_status(ctx: BotContext, message: discord.Message, command: SimpleCommand) -> None:
    await message.reply(embed=status_header_embed())
    for p in ctx.catalog.get_all():
        await message.channel.send(embed=product_status_embed(p))
        # fixed spacing between sends, not real backpressure
        await asyncio.sleep(settings.STATUS_SEND_DELAY)


async def cmd_welcome(ctx: BotContext, message: discord.Message, command: SimpleCommand) -> None:
    await publish_welcome(ctx.publisher, ctx.catalog)
    await safe_delete_message(message)


async def cmd_announce(ctx: BotContext, message: discord.Message, command: Announcement) -> None:
    if await post_announcement(ctx.client, command):
        # keep the trigger out of the announcement channel
        await safe_delete_message(message)


def init_commands(registry: CommandRegistry) -> CommandRegistry:
    registry.register("products", cmd_products)
    registry.register("featured", cmd_featured)
    registry.register("popular", cmd_popular)
    registry.register("help", cmd_help)
    registry.register("status", cmd_status)
    registry.register("welcome", cmd_welcome)
    registry.register(ANNOUNCE_KEY, cmd_announce)
    return registry


# ---------- dispatch ----------

async def handle_message(ctx: BotContext, message: discord.Message) -> bool:
    """
    Returns True when the message was a bot command (handled or answered with usage).
    """
    if message.author.bot:
        return False

    try:
        command = parse_command(message.content)
    except MalformedCommand as e:
        log.info("Malformed !%s from %s", e.kind, message.author)
        await safe_reply(message, e.usage)
        return True

    if command is None:
        return False

    key = command.name if isinstance(command, SimpleCommand) else ANNOUNCE_KEY
    handler = ctx.commands.get(key)
    if handler is None:
        log.warning("No handler registered for %s", key)
        return False

    log.info("Processing %s from %s", message.content.split(" ", 1)[0].lower(), message.author)
    try:
        await handler(ctx, message, command)
    except Exception as e:
        log.exception("Error processing command: %s", e)
        await safe_reply(message, ERROR_REPLY)
    return True


def _lookup(ctx: BotContext, raw: Any) -> Product | None:
    try:
        pid = int(raw)
    except (TypeError, ValueError):
        return None
    return ctx.catalog.get_by_id(pid)


async def handle_interaction(ctx: BotContext, interaction: discord.Interaction) -> bool:
    if interaction.type != discord.InteractionType.component:
        return False

    data: dict[str, Any] = interaction.data or {}  # type: ignore[assignment]
    custom_id = str(data.get("custom_id") or "")

    if custom_id in (PRODUCT_SELECT_ID, PERMANENT_SELECT_ID):
        values = data.get("values") or []
        product = _lookup(ctx, values[0] if values else None)
        if product is None:
            log.debug("select %s: unknown product %r", custom_id, values)
            return False
        await send_ephemeral(
            interaction,
            embed=product_detail_embed(product),
            view=make_view(download_button(product)),
        )
        return True

    pid = parse_download_id(custom_id)
    if pid is not None:
        product = ctx.catalog.get_by_id(pid)
        if product is None:
            log.debug("download: unknown product %s", pid)
            return False
        await send_ephemeral(interaction, embed=download_embed(product))
        return True

    return False
