from __future__ import annotations

from existence.bot.ui.components import (
    DOWNLOAD_PREFIX,
    PERMANENT_SELECT_ID,
    PRODUCT_SELECT_ID,
    download_button,
    make_view,
    parse_download_id,
    product_select,
)
from existence.bot.ui.embeds import (
    MENU_FINGERPRINT,
    STATUS_FINGERPRINT,
    WELCOME_FINGERPRINT,
)

__all__ = [
    "DOWNLOAD_PREFIX",
    "PERMANENT_SELECT_ID",
    "PRODUCT_SELECT_ID",
    "download_button",
    "make_view",
    "parse_download_id",
    "product_select",
    "MENU_FINGERPRINT",
    "STATUS_FINGERPRINT",
    "WELCOME_FINGERPRINT",
]
