"""
RenameCog: ``rename @user to New Name`` message listener.

Every message is handed to the command layer's decide(); when it produces a
reply, the reply is posted to the channel the command came from.
"""

from __future__ import annotations

import discord
from discord.ext import commands

from renamebot.commands import Mention, decide
from renamebot.config.logging import get_logger

logger = get_logger(__name__)


class RenameCog(commands.Cog):
    """Renames the member mentioned in a ``rename ... to ...`` message."""

    def __init__(self, bot) -> None:
        self.bot = bot

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        reply = await decide(
            sender_id=message.author.id,
            bot_id=self.bot.user.id,
            guild_id=message.guild.id if message.guild else None,
            text=message.content,
            mentions=_mentions(message),
            rename=self.bot.rename_member,
            matcher=self.bot.matcher,
        )
        if reply is None:
            return

        logger.info(f"{message.author.name}: {message.content!r} -> {reply!r}")
        try:
            await message.channel.send(reply)
        except discord.HTTPException as e:
            logger.warning(f"Could not send reply in channel {message.channel.id}: {e}")


def _mentions(message: discord.Message) -> list[Mention]:
    """Mentioned users in message order."""
    return [Mention(id=user.id, name=user.name) for user in message.mentions]
