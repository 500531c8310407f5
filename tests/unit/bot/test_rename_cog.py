"""
Tests for RenameCog.

Covers:
- Translation of discord.Message fields into decide() inputs
- Reply sent to the originating channel only when there is one
- Send failures are logged, not raised
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import discord
import pytest

from renamebot.bot.client import RenameBot
from renamebot.bot.cogs.rename import RenameCog, _mentions
from renamebot.commands import CommandMatcher, Mention, RenameError

BOT_ID = 12345


def _make_user(user_id: int, name: str):
    user = MagicMock()
    user.id = user_id
    user.name = name
    return user


def _make_message(content="rename alice to bob", mentions=None, author_id=2, guild_id=99):
    message = MagicMock(spec=discord.Message)
    message.content = content
    message.author = _make_user(author_id, "carol")
    message.mentions = mentions if mentions is not None else [_make_user(10, "alice")]
    if guild_id is None:
        message.guild = None
    else:
        message.guild = MagicMock()
        message.guild.id = guild_id
    message.channel = MagicMock()
    message.channel.id = 555
    message.channel.send = AsyncMock()
    return message


def _make_bot(rename_side_effect=None):
    bot = MagicMock()
    bot.user = MagicMock()
    bot.user.id = BOT_ID
    bot.matcher = CommandMatcher()
    bot.rename_member = AsyncMock(side_effect=rename_side_effect)
    return bot


class TestMentions:
    def test_preserves_order_and_uses_username(self):
        message = _make_message(mentions=[_make_user(10, "alice"), _make_user(11, "dave")])
        assert _mentions(message) == [Mention(id=10, name="alice"), Mention(id=11, name="dave")]


class TestOnMessage:
    @pytest.mark.asyncio
    async def test_successful_rename_replies_in_channel(self):
        bot = _make_bot()
        cog = RenameCog(bot)
        message = _make_message()

        await cog.on_message(message)

        bot.rename_member.assert_awaited_once_with(99, 10, "bob")
        message.channel.send.assert_awaited_once_with("Renamed alice to bob")

    @pytest.mark.asyncio
    async def test_non_command_sends_nothing(self):
        bot = _make_bot()
        cog = RenameCog(bot)
        message = _make_message(content="good morning")

        await cog.on_message(message)

        bot.rename_member.assert_not_called()
        message.channel.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_own_message_ignored(self):
        bot = _make_bot()
        cog = RenameCog(bot)
        message = _make_message(author_id=BOT_ID)

        await cog.on_message(message)

        message.channel.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_too_many_mentions_reports_error(self):
        bot = _make_bot()
        cog = RenameCog(bot)
        message = _make_message(mentions=[_make_user(10, "alice"), _make_user(11, "dave")])

        await cog.on_message(message)

        bot.rename_member.assert_not_called()
        message.channel.send.assert_awaited_once_with("Error: You mentioned 2 users instead of 1")

    @pytest.mark.asyncio
    async def test_rename_failure_reports_error(self):
        bot = _make_bot(rename_side_effect=RenameError("403 Forbidden (error code: 50013): Missing Permissions"))
        cog = RenameCog(bot)
        message = _make_message()

        await cog.on_message(message)

        message.channel.send.assert_awaited_once_with(
            "Error: Could not rename alice to bob: 403 Forbidden (error code: 50013): Missing Permissions"
        )

    @pytest.mark.asyncio
    async def test_direct_message_passes_no_guild(self):
        bot = _make_bot()
        cog = RenameCog(bot)
        message = _make_message(guild_id=None)

        await cog.on_message(message)

        bot.rename_member.assert_awaited_once_with(None, 10, "bob")

    @pytest.mark.asyncio
    async def test_send_failure_is_swallowed(self):
        """A reply that cannot be delivered does not raise out of the listener."""
        bot = _make_bot()
        cog = RenameCog(bot)
        message = _make_message()
        response = MagicMock()
        response.status = 403
        response.reason = "Forbidden"
        message.channel.send.side_effect = discord.Forbidden(response, "Missing Access")

        await cog.on_message(message)

        message.channel.send.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_connection_error_during_rename_reports_error(self):
        """A transport failure inside the bot's rename capability still gets a reply."""
        member = MagicMock()
        member.edit = AsyncMock(side_effect=aiohttp.ClientConnectionError("Connection reset by peer"))
        guild = MagicMock()
        guild.get_member.return_value = member
        client = RenameBot.__new__(RenameBot)
        client.get_guild = MagicMock(return_value=guild)

        bot = _make_bot()
        bot.rename_member = client.rename_member
        cog = RenameCog(bot)
        message = _make_message()

        await cog.on_message(message)

        member.edit.assert_awaited_once_with(nick="bob")
        message.channel.send.assert_awaited_once_with(
            "Error: Could not rename alice to bob: Connection reset by peer"
        )
