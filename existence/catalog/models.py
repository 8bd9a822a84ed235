# existence/catalog/models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# sidebar order
CATEGORIES: tuple[str, ...] = (
    "Game Cheat",
    "External Tool",
    "Utility",
    "Loader",
    "Spoofer",
)

# downloadUrl == "#" => not released yet
PENDING_URL = "#"


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    description: str
    category: str
    color_indicator: str
    download_url: str
    featured: bool = False
    popular: bool = False

    @property
    def is_available(self) -> bool:
        return self.download_url != PENDING_URL

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "colorIndicator": self.color_indicator,
            "downloadUrl": self.download_url,
            "featured": self.featured,
            "popular": self.popular,
        }


@dataclass(frozen=True)
class User:
    id: int
    username: str
    password: str = ""
