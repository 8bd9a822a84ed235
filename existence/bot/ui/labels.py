# -*- coding: utf-8 -*-
from __future__ import annotations

import time

from existence.catalog.models import Product

CATEGORY_EMOJI: dict[str, str] = {
    "Game Cheat": "🎮",
    "External Tool": "🔧",
    "Loader": "📦",
    "Spoofer": "🔒",
    "Utility": "⚙️",
}
DEFAULT_EMOJI = "📄"

CATEGORY_FEATURES: dict[str, list[str]] = {
    "External Tool": ["🎯 Precision Overlay", "👁️ ESP Visuals", "🔍 Recoil Control", "⚡ Low Latency"],
    "Loader": ["🚀 Fast Injection", "🛡️ Integrity Checks", "🔧 Easy Setup"],
    "Spoofer": ["🔄 HWID Spoofing", "🛡️ Clean Profile", "🔒 Secure Method"],
}
DEFAULT_FEATURES = ["⭐ Premium Features", "🔧 Advanced Tools", "💎 High Quality"]

COLORS: dict[str, int] = {
    "red": 0xFF0000,
    "orange": 0xFF8C00,
    "purple": 0x800080,
    "blue": 0x0000FF,
    "green": 0x00FF00,
    "teal": 0x008080,
    "yellow": 0xFFFF00,
    "pink": 0xFFC0CB,
    "indigo": 0x4B0082,
}
BLURPLE = 0x5865F2

# announcement kind -> (emoji, color, footer)
ANNOUNCE_STYLES: dict[str, tuple[str, int, str]] = {
    "news": ("📰", 0x3498DB, "Existence News"),
    "announcement": ("📢", 0xE74C3C, "Important Announcement"),
    "update": ("🔄", 0xF39C12, "Product Update"),
}


def category_emoji(category: str) -> str:
    return CATEGORY_EMOJI.get(category, DEFAULT_EMOJI)


def category_features(category: str) -> str:
    return "\n".join(CATEGORY_FEATURES.get(category, DEFAULT_FEATURES))


def color_for(indicator: str) -> int:
    return COLORS.get(indicator, BLURPLE)


def product_badge(p: Product) -> str:
    if p.featured:
        return "⭐ Featured"
    if p.popular:
        return "🔥 Popular"
    return "📦 Available"


def status_label(p: Product) -> str:
    return "🟢 SAFE TO USE" if p.is_available else "🟡 UPDATING"


def availability_label(p: Product) -> str:
    return "✅ Available" if p.is_available else "⏳ Coming Soon"


def risk_label(p: Product) -> str:
    return "🟢 LOW RISK SLIGHT BAN CHANCE" if p.is_available else "🟡 UPDATING"


# ---------- wall-clock "animation" ----------

def _now(now: float | None) -> float:
    return time.time() if now is None else now


def pulse_risk(p: Product, now: float | None = None) -> str:
    if not p.is_available:
        return "🟡 **MEDIUM RISK - UPDATING**"
    indicators = ["🟢", "🔵", "🟢"]
    current = indicators[int(_now(now) // 2) % len(indicators)]
    return f"{current} **LOW RISK SLIGHT BAN CHANCE**"


def progress_bar(percentage: int) -> str:
    filled = max(0, min(10, percentage // 10))
    return f"[{'█' * filled}{'░' * (10 - filled)}] {percentage}%"


def enhanced_status(p: Product, now: float | None = None) -> str:
    ts = _now(now)
    glyphs = ["🟢●", "🟢○", "🔵●", "🟢●"] if p.is_available else ["🟡●", "🟡○", "🟠●", "🟡●"]
    current = glyphs[int(ts // 3) % len(glyphs)]
    uptime = progress_bar(98 if p.is_available else 45)
    return "\n".join([
        f"**Status:** {current} {'SAFE TO USE' if p.is_available else 'UPDATING'}",
        f"**Uptime:** {uptime}",
        f"**Last Check:** <t:{int(ts)}:R>",
    ])
