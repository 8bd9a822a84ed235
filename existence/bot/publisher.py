# existence/bot/publisher.py
"""
Standing messages: menu, status board, welcome text.

Startup publishes them unconditionally, so every send is guarded:

  1. persisted key: standing_messages[(channel_id, fingerprint)] -> message id;
     if that message still exists => skipped
  2. history scan: last N messages, authored by us, first embed title
     contains the fingerprint => skipped (and the id is recorded)
  3. otherwise build the payload, send it, record the new id => sent

The key store is advisory: if it errors, the scan and the send still run.
Best-effort only: two processes racing inside the same window can both send.
Errors never leave this module; the caller gets "failed".
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Literal

import discord

from existence.config import settings
from existence.db.repo import StandingMessagesRepo
from existence.shared.utils import resolve_channel

log = logging.getLogger(__name__)

PublishOutcome = Literal["sent", "skipped", "failed"]
SENT: PublishOutcome = "sent"
SKIPPED: PublishOutcome = "skipped"
FAILED: PublishOutcome = "failed"

# kwargs for channel.send(...)
PayloadBuilder = Callable[[], dict[str, Any]]


def first_embed_title(message: Any) -> str:
    embeds = getattr(message, "embeds", None) or []
    if not embeds:
        return ""
    return embeds[0].title or ""


class StandingPublisher:
    def __init__(
        self,
        client: discord.Client,
        *,
        repo: Any = StandingMessagesRepo,
        history_limit: int | None = None,
    ) -> None:
        self.client = client
        self.repo = repo
        self.history_limit = history_limit or settings.HISTORY_SCAN_LIMIT

    def is_standing(self, message: Any, fingerprint: str, *, require_components: bool = False) -> bool:
        me = self.client.user
        if me is None or message.author.id != me.id:
            return False
        if fingerprint not in first_embed_title(message):
            return False
        if require_components and not getattr(message, "components", None):
            return False
        return True

    async def _recall(self, channel_id: int, fingerprint: str) -> Any:
        try:
            return await self.repo.get(channel_id, fingerprint)
        except Exception as e:
            log.warning("Stored key lookup failed channel=%s key=%s err=%s", channel_id, fingerprint, e)
            return None

    async def _remember(self, channel_id: int, fingerprint: str, message_id: int) -> None:
        try:
            await self.repo.save(channel_id, fingerprint, message_id)
        except Exception as e:
            log.warning("Could not store key channel=%s key=%s err=%s", channel_id, fingerprint, e)

    async def _forget(self, channel_id: int, fingerprint: str) -> None:
        try:
            await self.repo.forget(channel_id, fingerprint)
        except Exception as e:
            log.warning("Could not drop key channel=%s key=%s err=%s", channel_id, fingerprint, e)

    async def _from_repo(self, channel: Any, channel_id: int, fingerprint: str) -> Any:
        rec = await self._recall(channel_id, fingerprint)
        if not rec:
            return None
        try:
            return await channel.fetch_message(int(rec["message_id"]))
        except discord.NotFound:
            log.info("Standing message %s gone from channel %s, rescanning", rec["message_id"], channel_id)
            await self._forget(channel_id, fingerprint)
            return None

    async def _from_history(
        self, channel: Any, channel_id: int, fingerprint: str, *, require_components: bool
    ) -> Any:
        async for message in channel.history(limit=self.history_limit):
            if self.is_standing(message, fingerprint, require_components=require_components):
                await self._remember(channel_id, fingerprint, message.id)
                return message
        return None

    async def find_existing(
        self, channel: Any, channel_id: int, fingerprint: str, *, require_components: bool = False
    ) -> Any:
        existing = await self._from_repo(channel, channel_id, fingerprint)
        if existing is not None and self.is_standing(existing, fingerprint, require_components=require_components):
            return existing
        return await self._from_history(channel, channel_id, fingerprint, require_components=require_components)

    async def _send(self, channel: Any, channel_id: int, fingerprint: str, build_payload: PayloadBuilder) -> None:
        message = await channel.send(**build_payload())
        await self._remember(channel_id, fingerprint, message.id)

    async def ensure_published(
        self,
        channel_id: int,
        fingerprint: str,
        build_payload: PayloadBuilder,
        *,
        require_components: bool = False,
    ) -> PublishOutcome:
        try:
            channel = await resolve_channel(self.client, channel_id)
            if channel is None:
                return FAILED

            existing = await self.find_existing(
                channel, channel_id, fingerprint, require_components=require_components
            )
            if existing is not None:
                log.info("'%s' already exists in channel %s, skipping...", fingerprint, channel_id)
                return SKIPPED

            await self._send(channel, channel_id, fingerprint, build_payload)
            log.info("'%s' sent to channel %s", fingerprint, channel_id)
            return SENT
        except Exception as e:
            log.exception("ensure_published failed channel=%s key=%s err=%s", channel_id, fingerprint, e)
            return FAILED

    async def refresh(self, channel_id: int, fingerprint: str, build_payload: PayloadBuilder) -> PublishOutcome:
        """
        Delete the previous standing message (if any) and publish a fresh one.
        """
        try:
            channel = await resolve_channel(self.client, channel_id)
            if channel is None:
                return FAILED

            existing = await self.find_existing(channel, channel_id, fingerprint)
            if existing is not None:
                await existing.delete()
                await self._forget(channel_id, fingerprint)
                log.info("Old '%s' deleted from channel %s", fingerprint, channel_id)
        except Exception as e:
            log.exception("refresh failed channel=%s key=%s err=%s", channel_id, fingerprint, e)
            return FAILED

        return await self.ensure_published(channel_id, fingerprint, build_payload)
