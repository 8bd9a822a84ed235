from __future__ import annotations

from typing import Sequence

import discord

from existence.bot.ui.labels import category_emoji
from existence.catalog.models import Product

MAX_SELECT_OPTIONS = 25

PRODUCT_SELECT_ID = "product_select"
PERMANENT_SELECT_ID = "permanent_product_select"
DOWNLOAD_PREFIX = "download_"


def product_options(products: Sequence[Product]) -> list[discord.SelectOption]:
    return [
        discord.SelectOption(
            label=p.name[:100],
            value=str(p.id),
            description=p.description[:100] or None,
            emoji=category_emoji(p.category),
        )
        for p in list(products)[:MAX_SELECT_OPTIONS]
    ]


def product_select(products: Sequence[Product], *, custom_id: str = PRODUCT_SELECT_ID) -> discord.ui.Select:
    return discord.ui.Select(
        custom_id=custom_id,
        placeholder="Select a product",
        options=product_options(products),
    )


def download_button(p: Product) -> discord.ui.Button:
    """
    download_<id>. Pending products (downloadUrl == "#") get a disabled
    "Coming Soon" button so nothing hints the file is out.
    """
    if not p.is_available:
        return discord.ui.Button(
            style=discord.ButtonStyle.secondary,
            label="Coming Soon",
            custom_id=f"{DOWNLOAD_PREFIX}{p.id}",
            emoji="⏳",
            disabled=True,
        )
    return discord.ui.Button(
        style=discord.ButtonStyle.primary,
        label="Access Loader" if p.category == "Loader" else "Download",
        custom_id=f"{DOWNLOAD_PREFIX}{p.id}",
        emoji="⬇️",
    )


def parse_download_id(custom_id: str) -> int | None:
    if not custom_id.startswith(DOWNLOAD_PREFIX):
        return None
    raw = custom_id[len(DOWNLOAD_PREFIX):]
    return int(raw) if raw.isdigit() else None


def make_view(*items: discord.ui.Item) -> discord.ui.View:
    # needs a running loop (discord.ui.View creates a future)
    view = discord.ui.View(timeout=None)
    for item in items:
        view.add_item(item)
    return view
