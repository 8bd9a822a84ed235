# existence/bot/client.py
from __future__ import annotations

import logging

import discord
from discord.ext import tasks

from existence.bot.publisher import StandingPublisher
from existence.bot.router import BotContext, handle_interaction, handle_message, init_commands
from existence.bot.standing import publish_all, refresh_status_board
from existence.catalog.store import CatalogStore
from existence.config import settings
from existence.core.registry import CommandRegistry

log = logging.getLogger(__name__)


class ExistenceBot(discord.Client):
    def __init__(self, catalog: CatalogStore) -> None:
        intents = discord.Intents.default()
        intents.guilds = True
        intents.guild_messages = True
        intents.message_content = True
        super().__init__(intents=intents)

        self.catalog = catalog
        self.publisher = StandingPublisher(self)
        self.ctx = BotContext(
            client=self,
            catalog=catalog,
            publisher=self.publisher,
            commands=init_commands(CommandRegistry()),
        )

    async def setup_hook(self) -> None:
        self.refresh_status.change_interval(seconds=settings.STATUS_REFRESH_SECONDS)

    async def on_ready(self) -> None:
        log.info("Discord bot ready! Logged in as %s", self.user)
        # on_ready fires again after reconnects; publishing is idempotent
        outcomes = await publish_all(self.publisher, self.catalog)
        log.info("Standing messages: %s", outcomes)
        if not self.refresh_status.is_running():
            self.refresh_status.start()

    async def on_message(self, message: discord.Message) -> None:
        await handle_message(self.ctx, message)

    async def on_interaction(self, interaction: discord.Interaction) -> None:
        await handle_interaction(self.ctx, interaction)

    @tasks.loop(hours=5)
    async def refresh_status(self) -> None:
        # first tick runs at start(); the board was just published
        if self.refresh_status.current_loop == 0:
            return
        outcome = await refresh_status_board(self.publisher, self.catalog)
        log.info("Status board refresh: %s", outcome)

    @refresh_status.before_loop
    async def _before_refresh(self) -> None:
        await self.wait_until_ready()

    async def run_safely(self, token: str) -> None:
        """
        Logs in and runs until closed. A login failure is logged and the
        process keeps serving HTTP without chat; there is no retry.
        """
        try:
            await self.start(token)
        except discord.LoginFailure as e:
            log.error("Failed to start Discord bot: %s", e)
        except Exception as e:
            log.exception("Discord bot stopped: %s", e)
        finally:
            if self.refresh_status.is_running():
                self.refresh_status.cancel()
