"""
Command Matcher: recognises ``rename <subject> to <new name>``.

The pattern is matched against the whole message, case-insensitively. Both
groups are greedy, so when the text contains several " to " separators the
first group backtracks only as far as the last separator that still leaves a
non-empty second group:

    "rename a to b to c"  →  subject "a to b", new name "c"
"""

from __future__ import annotations

import re

from renamebot.commands.models import ParsedCommand

RENAME_PATTERN = r"rename (.+) to (.+)"


class CommandMatcher:
    """
    Holds one compiled command pattern.

    Construct once at startup and share it; matching never mutates state.

    Args:
        pattern: Regular expression with exactly two capture groups
            (subject, new name). Defaults to RENAME_PATTERN.

    Raises:
        re.error: If the pattern does not compile
        ValueError: If the pattern does not have two capture groups
    """

    def __init__(self, pattern: str = RENAME_PATTERN) -> None:
        self._regex = re.compile(pattern, re.IGNORECASE)
        if self._regex.groups != 2:
            raise ValueError(
                f"Command pattern must have 2 capture groups, got {self._regex.groups}"
            )

    @property
    def pattern(self) -> str:
        return self._regex.pattern

    def match(self, text: str) -> ParsedCommand | None:
        """Return the parsed command, or None if ``text`` is not a rename command."""
        result = self._regex.fullmatch(text)
        if result is None:
            return None
        subject_text, new_name = result.groups()
        return ParsedCommand(subject_text=subject_text, new_name=new_name)


_default_matcher: CommandMatcher | None = None


def default_matcher() -> CommandMatcher:
    """
    Get or create the process-wide matcher for RENAME_PATTERN.

    Used by callers that have no bot instance to hold a matcher, such as the
    offline ``parse`` CLI command and decide() when no matcher is passed.
    """
    global _default_matcher
    if _default_matcher is None:
        _default_matcher = CommandMatcher()
    return _default_matcher
