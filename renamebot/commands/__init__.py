"""
Command Layer.

Pure command-recognition and response-decision logic, independent of the
Discord client:

    message text  →  CommandMatcher.match()  →  ParsedCommand | None
                                                      ↓
    decide(sender, bot, guild, text, mentions, rename)  →  reply text | None

The only shared state is the compiled pattern held by a CommandMatcher, which
is never mutated after construction and is safe to use from any number of
concurrent message handlers.
"""

from renamebot.commands.decider import decide
from renamebot.commands.matcher import RENAME_PATTERN, CommandMatcher, default_matcher
from renamebot.commands.models import Mention, ParsedCommand, RenameAction, RenameError

__all__ = [
    "CommandMatcher",
    "Mention",
    "ParsedCommand",
    "RENAME_PATTERN",
    "RenameAction",
    "RenameError",
    "decide",
    "default_matcher",
]
