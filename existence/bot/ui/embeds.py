# existence/bot/ui/embeds.py
from __future__ import annotations

import time
from typing import Sequence

import discord

from existence.bot.commands import Announcement
from existence.bot.ui.labels import (
    ANNOUNCE_STYLES,
    BLURPLE,
    availability_label,
    category_emoji,
    category_features,
    color_for,
    enhanced_status,
    product_badge,
    pulse_risk,
    risk_label,
    status_label,
)
from existence.catalog.models import Product

# substrings used to recognise standing messages in channel history
MENU_FINGERPRINT = "Existence Downloads"
STATUS_FINGERPRINT = "Existence Tool Status"
WELCOME_FINGERPRINT = "Welcome to Existence"

GREEN = 0x00FF00
RED = 0xFF0000


def _embed(title: str, description: str | None = None, *, color: int) -> discord.Embed:
    return discord.Embed(
        title=title,
        description=description,
        color=color,
        timestamp=discord.utils.utcnow(),
    )


def product_title(p: Product) -> str:
    return f"{category_emoji(p.category)} {p.name}"


def download_link(p: Product) -> str:
    return f"[Click here to download]({p.download_url})"


def menu_embed(*, footer: str | None = None) -> discord.Embed:
    e = _embed(
        f"🔥 {MENU_FINGERPRINT}",
        "Select a product from the dropdown menu below to view download links for our available products.",
        color=BLURPLE,
    )
    if footer:
        e.set_footer(text=footer)
    return e


def listing_embed(title: str, description: str, color: int, products: Sequence[Product]) -> discord.Embed:
    e = _embed(title, description, color=color)
    for p in list(products)[:5]:
        e.add_field(
            name=product_title(p),
            value=f"{p.description}\n**Category:** {p.category}",
            inline=False,
        )
    return e


def featured_embed(products: Sequence[Product]) -> discord.Embed:
    return listing_embed("⭐ Featured Products", "Check out our hand-picked featured products", 0xF1C40F, products)


def popular_embed(products: Sequence[Product]) -> discord.Embed:
    return listing_embed("🔥 Popular Products", "Most downloaded products by our community", 0xE74C3C, products)


def product_detail_embed(p: Product) -> discord.Embed:
    e = _embed(product_title(p), p.description, color=color_for(p.color_indicator))
    e.add_field(name="Category", value=p.category, inline=True)
    e.add_field(name="Status", value=product_badge(p), inline=True)
    return e


def product_status_embed(p: Product) -> discord.Embed:
    e = _embed(product_title(p), p.description, color=color_for(p.color_indicator))
    e.add_field(name="Status", value=status_label(p), inline=True)
    e.add_field(name="Category", value=p.category, inline=True)
    e.add_field(name="Availability", value=availability_label(p), inline=True)
    e.add_field(name="Features", value=category_features(p.category), inline=False)
    e.add_field(name="Risk Level", value=risk_label(p), inline=False)
    if p.is_available:
        e.add_field(name="Download", value=download_link(p), inline=False)
    return e


def download_embed(p: Product) -> discord.Embed:
    if not p.is_available:
        return _embed(
            "⚠️ Download Not Available",
            f"**{p.name}** download link is not configured yet.",
            color=RED,
        )

    e = _embed("🔗 Download Link", f"**{p.name}** is ready for download.", color=GREEN)
    e.add_field(name="Product", value=p.name, inline=True)
    e.add_field(name="Category", value=p.category, inline=True)
    e.add_field(name="Download", value=download_link(p), inline=False)
    return e


def status_header_embed() -> discord.Embed:
    e = _embed(f"📊 {STATUS_FINGERPRINT}", "Current status and stats for all available tools", color=GREEN)
    e.set_footer(text="Last updated")
    return e


def status_board_embed(products: Sequence[Product], now: float | None = None) -> discord.Embed:
    """
    One embed, one field per product. Glyphs depend on wall-clock time so a
    re-sent board looks "live".
    """
    e = _embed(f"📊 {STATUS_FINGERPRINT}", "Current status and information for all available tools", color=GREEN)
    e.set_footer(text="Last updated")

    for p in products:
        value = "\n".join([
            enhanced_status(p, now),
            f"**Category:** {p.category}",
            f"**Availability:** {availability_label(p)}",
            f"**Risk Level:** {pulse_risk(p, now)}",
            f"**Features:** {category_features(p.category)}",
        ])
        e.add_field(name=product_title(p), value=value, inline=False)
    return e


HELP_ROWS: list[tuple[str, str]] = [
    ("!products", "Browse all available products"),
    ("!featured", "View featured products"),
    ("!popular", "View popular products"),
    ("!status", "View detailed product status and stats"),
    ("!news <title> | <content>", "Post news announcement"),
    ("!announcement <title> | <content>", "Post important announcement"),
    ("!update <product> | <content>", "Post product update"),
    ("!welcome", "Post welcome message to news channel"),
    ("!help", "Show this help message"),
]


def help_embed() -> discord.Embed:
    e = _embed("🤖 Existence Bot Commands", "Here are the available commands:", color=BLURPLE)
    for name, value in HELP_ROWS:
        e.add_field(name=name, value=value, inline=False)
    return e


def announcement_title(a: Announcement) -> str:
    emoji = ANNOUNCE_STYLES[a.kind][0]
    if a.kind == "update":
        return f"{emoji} {a.title} Update"
    return f"{emoji} {a.title}"


def announcement_embed(a: Announcement, *, icon_url: str | None = None, now: float | None = None) -> discord.Embed:
    _, color, footer = ANNOUNCE_STYLES[a.kind]
    e = _embed(announcement_title(a), a.body, color=color)
    e.set_footer(text=footer, icon_url=icon_url)

    if a.kind == "announcement":
        e.add_field(name="⚠️ Important", value="Please read this announcement carefully", inline=False)
    elif a.kind == "update":
        ts = int(time.time() if now is None else now)
        e.add_field(name="📝 Version Info", value=f"Updated: <t:{ts}:F>", inline=True)
    return e


def welcome_embed(products: Sequence[Product], *, icon_url: str | None = None) -> discord.Embed:
    e = _embed(
        f"🎮 {WELCOME_FINGERPRINT}",
        "Premium gaming tools and external solutions for competitive players",
        color=0x9B59B6,
    )
    tools = "\n".join(f"• **{p.name}** - {p.description}" for p in products) or "Catalog is empty."
    e.add_field(name="🛠️ Our Tools", value=tools[:1024], inline=False)
    e.add_field(
        name="📊 What We Offer",
        value="\n".join([
            "✅ **Regular Updates** - Builds follow the latest game patches",
            "🔒 **Secure Downloads** - Safe and verified file hosting",
            "⚡ **Fast Support** - Quick response to issues and questions",
        ]),
        inline=False,
    )
    e.add_field(
        name="📢 Looking for Media Partners",
        value="\n".join([
            "We are actively seeking content creators and media partners!",
            "",
            "**What we offer:**",
            "• Free access to all tools",
            "• Early access to new releases",
        ]),
        inline=False,
    )
    e.set_footer(text="Existence - Premium Gaming Solutions", icon_url=icon_url)
    if icon_url:
        e.set_thumbnail(url=icon_url)
    return e
