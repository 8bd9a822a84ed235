from __future__ import annotations

from typing import Any

# ids are assigned at seed time, in this order
SEED_PRODUCTS: list[dict[str, Any]] = [
    {
        "name": "Rust Arcane External",
        "description": "Get the rust arcane external loader.",
        "category": "External Tool",
        "color_indicator": "orange",
        "download_url": "https://downloads.example.com/rust-arcane-external.zip",
        "featured": True,
        "popular": True,
    },
    {
        "name": "Rust Pro External",
        "description": "Advanced rust external with premium features.",
        "category": "External Tool",
        "color_indicator": "red",
        "download_url": "#",
        "featured": True,
        "popular": False,
    },
    {
        "name": "BO6 Engine",
        "description": "Here you can download the loader for the bo6 external",
        "category": "External Tool",
        "color_indicator": "green",
        "download_url": "https://downloads.example.com/bo6-engine.exe",
        "featured": True,
        "popular": False,
    },
    {
        "name": "NFA Account Loader",
        "description": "NFA account loader for advanced gaming features.",
        "category": "Loader",
        "color_indicator": "blue",
        "download_url": "https://downloads.example.com/nfa-account-loader.zip",
        "featured": False,
        "popular": True,
    },
    {
        "name": "Spoofer",
        "description": "Hardware ID spoofer for a clean machine profile.",
        "category": "Spoofer",
        "color_indicator": "indigo",
        "download_url": "#",
        "featured": True,
        "popular": True,
    },
]
