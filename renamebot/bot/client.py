"""
RenameBot: discord.py bot client.

Manages the bot lifecycle:
- Compiles the command pattern once at construction
- Loads the RenameCog message listener
- Exposes the member-rename capability used by the command layer
"""

from __future__ import annotations

import asyncio

import aiohttp
import discord
from discord.ext import commands

from renamebot.commands import CommandMatcher, RenameError
from renamebot.config.logging import get_logger
from renamebot.config.settings import Settings

logger = get_logger(__name__)


class RenameBot(commands.Bot):
    """
    Discord bot that renames mentioned members on request.

    Holds the shared, read-only CommandMatcher and exposes it to cogs.

    Args:
        settings: Full application settings (bot token, logging, etc.)
        matcher: Command matcher to use; a default one is compiled if omitted

    Raises:
        re.error: If the command pattern does not compile
    """

    def __init__(self, settings: Settings, matcher: CommandMatcher | None = None) -> None:
        intents = discord.Intents.default()
        intents.message_content = True  # Required to read the command text
        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=intents,
        )
        self.settings = settings
        self.matcher = matcher or CommandMatcher()

    async def setup_hook(self) -> None:
        """Called after login, before connecting to the Gateway."""
        from renamebot.bot.cogs.rename import RenameCog

        await self.add_cog(RenameCog(self))
        logger.info("Cogs loaded")

    async def on_ready(self) -> None:
        """Called when the bot successfully connects to Discord."""
        logger.info(f"Connected to Discord as {self.user} (id: {self.user.id})")
        logger.info(f"Connected to {len(self.guilds)} guild(s)")

    async def on_message(self, message: discord.Message) -> None:
        """Skip prefix-command processing; RenameCog handles every message."""

    async def close(self) -> None:
        logger.info(f"Shutting down {self.settings.bot.name}...")
        await super().close()

    async def rename_member(self, guild_id: int | None, user_id: int, nick: str) -> None:
        """
        Set a member's server nickname.

        Guild and member are taken from the cache when present and fetched
        from the API otherwise.

        Raises:
            RenameError: If the message was not in a server, Discord
                rejected the lookup or the nickname change, or the request
                failed in transit
        """
        if guild_id is None:
            raise RenameError("not in a server")

        try:
            guild = self.get_guild(guild_id) or await self.fetch_guild(guild_id)
            member = guild.get_member(user_id) or await guild.fetch_member(user_id)
            await member.edit(nick=nick)
        except (discord.HTTPException, aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise RenameError(str(e) or type(e).__name__) from e
