"""
In-process stand-ins for the bits of discord.py the bot touches:
client.user, get_channel/fetch_channel, channel.history/send/fetch_message,
message.delete/reply.
"""
from __future__ import annotations

import itertools
from types import SimpleNamespace
from typing import Any

import discord

_ids = itertools.count(1000)


def not_found(text: str = "Unknown") -> discord.NotFound:
    return discord.NotFound(SimpleNamespace(status=404, reason="Not Found"), text)


class FakeUser:
    def __init__(self, user_id: int, name: str = "user", *, bot: bool = False) -> None:
        self.id = user_id
        self.name = name
        self.bot = bot
        self.display_avatar = SimpleNamespace(url=f"https://cdn.example.com/avatars/{user_id}.png")

    def __str__(self) -> str:
        return self.name


class FakeMessage:
    def __init__(
        self,
        author: FakeUser,
        *,
        content: str = "",
        embeds: list[discord.Embed] | None = None,
        components: list[Any] | None = None,
        channel: "FakeChannel | None" = None,
    ) -> None:
        self.id = next(_ids)
        self.author = author
        self.content = content
        self.embeds = embeds or []
        self.components = components or []
        self.channel = channel
        self.deleted = False
        self.replies: list[dict[str, Any]] = []

    async def delete(self) -> None:
        self.deleted = True
        if self.channel is not None and self in self.channel.messages:
            self.channel.messages.remove(self)

    async def reply(self, content: str | None = None, **kwargs: Any) -> "FakeMessage":
        self.replies.append({"content": content, **kwargs})
        return FakeMessage(self.author, content=content or "")


class FakeChannel:
    def __init__(self, channel_id: int, bot_user: FakeUser) -> None:
        self.id = channel_id
        self.bot_user = bot_user
        self.messages: list[FakeMessage] = []  # newest first
        self.sent: list[dict[str, Any]] = []
        self.fail_send: Exception | None = None

    def post(self, message: FakeMessage) -> FakeMessage:
        message.channel = self
        self.messages.insert(0, message)
        return message

    async def send(self, content: str | None = None, **kwargs: Any) -> FakeMessage:
        if self.fail_send is not None:
            raise self.fail_send
        self.sent.append({"content": content, **kwargs})
        embed = kwargs.get("embed")
        view = kwargs.get("view")
        return self.post(
            FakeMessage(
                self.bot_user,
                content=content or "",
                embeds=[embed] if embed is not None else [],
                components=[view] if view is not None else [],
            )
        )

    async def history(self, limit: int = 100):
        for m in list(self.messages)[:limit]:
            yield m

    async def fetch_message(self, message_id: int) -> FakeMessage:
        for m in self.messages:
            if m.id == message_id:
                return m
        raise not_found("Unknown Message")


class FakeClient:
    def __init__(self, bot_id: int = 42) -> None:
        self.user = FakeUser(bot_id, "existence-bot", bot=True)
        self.channels: dict[int, FakeChannel] = {}
        self.fail_fetch: Exception | None = None

    def add_channel(self, channel_id: int) -> FakeChannel:
        ch = FakeChannel(channel_id, self.user)
        self.channels[channel_id] = ch
        return ch

    def get_channel(self, channel_id: int) -> FakeChannel | None:
        if self.fail_fetch is not None:
            return None
        return self.channels.get(channel_id)

    async def fetch_channel(self, channel_id: int) -> FakeChannel:
        if self.fail_fetch is not None:
            raise self.fail_fetch
        if channel_id not in self.channels:
            raise not_found("Unknown Channel")
        return self.channels[channel_id]


class FakeRepo:
    def __init__(self) -> None:
        self.rows: dict[tuple[int, str], int] = {}

    async def get(self, channel_id: int, key: str) -> dict[str, Any] | None:
        mid = self.rows.get((channel_id, key))
        if mid is None:
            return None
        return {"channel_id": channel_id, "key": key, "message_id": mid}

    async def save(self, channel_id: int, key: str, message_id: int) -> None:
        self.rows[(channel_id, key)] = message_id

    async def forget(self, channel_id: int, key: str) -> bool:
        return self.rows.pop((channel_id, key), None) is not None


def titled(author: FakeUser, title: str, *, components: list[Any] | None = None) -> FakeMessage:
    return FakeMessage(author, embeds=[discord.Embed(title=title)], components=components)
