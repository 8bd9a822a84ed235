# existence/bot/commands.py
"""
Parsing of chat commands.

Two shapes:
  - simple commands without arguments: "!products", "!status", ...
  - announcements with a pipe-delimited argument: "!news <title> | <body>"

Only the first " | " splits; the body keeps any further delimiters verbatim.
Simple commands ignore case and surrounding whitespace ("  !HELP " works);
anything else on the line makes it ordinary chatter.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

DELIMITER = " | "

AnnouncementKind = Literal["news", "announcement", "update"]

SIMPLE_COMMANDS: tuple[str, ...] = ("products", "featured", "popular", "status", "help", "welcome")

# kind -> prefix (trailing space is part of the prefix)
ANNOUNCE_PREFIXES: dict[str, str] = {
    "news": "!news ",
    "announcement": "!announcement ",
    "update": "!update ",
}

USAGE: dict[str, str] = {
    "news": (
        "Usage: `!news <title> | <content>`\n"
        "Example: `!news New Update Available | We just released version 2.0 with amazing features!`"
    ),
    "announcement": (
        "Usage: `!announcement <title> | <content>`\n"
        "Example: `!announcement Server Maintenance | Servers will be down for 2 hours tonight`"
    ),
    "update": (
        "Usage: `!update <product> | <content>`\n"
        "Example: `!update Rust Arcane | Fixed detection issues and improved performance`"
    ),
}


class MalformedCommand(ValueError):
    def __init__(self, kind: str) -> None:
        self.kind = kind
        self.usage = USAGE[kind]
        super().__init__(f"malformed !{kind} command")


@dataclass(frozen=True)
class SimpleCommand:
    name: str


@dataclass(frozen=True)
class Announcement:
    kind: AnnouncementKind
    title: str
    body: str


Command = Union[SimpleCommand, Announcement]


def split_title_body(kind: str, rest: str) -> tuple[str, str]:
    title, sep, body = rest.partition(DELIMITER)
    if not sep:
        raise MalformedCommand(kind)
    # TODO: decide whether empty title/body should be rejected; accepted for now
    return title.strip(), body.strip()


def parse_command(text: str) -> Command | None:
    """
    Returns None for anything that is not a bot command.
    Raises MalformedCommand for an announcement without the delimiter.
    """
    raw = text or ""
    lowered = raw.lower()

    for kind, prefix in ANNOUNCE_PREFIXES.items():
        if lowered.startswith(prefix):
            title, body = split_title_body(kind, raw[len(prefix):])
            return Announcement(kind=kind, title=title, body=body)  # type: ignore[arg-type]

    word = lowered.strip()
    if word.startswith("!") and word[1:] in SIMPLE_COMMANDS:
        return SimpleCommand(name=word[1:])

    return None
