"""
Response Decider: turns one incoming message into an optional reply.

Checks run in order and stop at the first one that applies:

1. Message from the bot itself → no reply
2. Text is not a rename command → no reply
3. No mentions → no reply; more than one → error reply
4. Exactly one mention → rename it, reply with success or the failure reason

Zero mentions is dropped silently while several mentions are reported.
That asymmetry is long-standing behaviour and is kept as-is.
"""

from __future__ import annotations

from collections.abc import Sequence

from renamebot.commands.matcher import CommandMatcher, default_matcher
from renamebot.commands.models import Mention, RenameAction, RenameError
from renamebot.config.logging import get_logger

logger = get_logger(__name__)


async def decide(
    sender_id: int,
    bot_id: int,
    guild_id: int | None,
    text: str,
    mentions: Sequence[Mention],
    rename: RenameAction,
    matcher: CommandMatcher | None = None,
) -> str | None:
    """
    Decide how to respond to a message, performing the rename if appropriate.

    Args:
        sender_id: Author of the message
        bot_id: The bot's own user ID
        guild_id: Server the message was posted in (None for DMs)
        text: Raw message content
        mentions: Users mentioned in the message, in order
        rename: Capability that renames a member; raises RenameError on failure
        matcher: Command matcher to use (defaults to the process-wide one)

    Returns:
        Reply text to send to the originating channel, or None to stay silent
    """
    if sender_id == bot_id:
        return None

    command = (matcher or default_matcher()).match(text)
    if command is None:
        return None

    mention_count = len(mentions)
    if mention_count < 1:
        return None
    if mention_count > 1:
        return f"Error: You mentioned {mention_count} users instead of 1"

    subject = mentions[0]
    new_name = command.new_name
    logger.debug(f"Rename command {command!r} targeting {subject.name} ({subject.id})")

    try:
        await rename(guild_id, subject.id, new_name)
    except RenameError as e:
        logger.error(f"Error renaming {subject.name} to {new_name!r}: {e.message}")
        return f"Error: Could not rename {subject.name} to {new_name}: {e.message}"

    return f"Renamed {subject.name} to {new_name}"
