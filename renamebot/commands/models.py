"""
Data structures for the rename command.

- ParsedCommand: the two captured groups of a matched message
- Mention: a user explicitly mentioned in the triggering message
- RenameError: raised by a rename action when the remote call fails
- RenameAction: signature of the capability that performs the rename
"""

from collections.abc import Awaitable, Callable

from pydantic import BaseModel, ConfigDict, Field


class ParsedCommand(BaseModel):
    """Result of a successful match against the rename pattern."""

    subject_text: str = Field(description="Free text between 'rename' and 'to' (not used for selection)")
    new_name: str = Field(description="Requested nickname, everything after the separator")

    model_config = ConfigDict(frozen=True)


class Mention(BaseModel):
    """
    A mentioned user, already resolved by the gateway.

    ``name`` is the account username; it is what replies refer to, since the
    member's nickname is the thing being changed.
    """

    id: int = Field(description="Discord user snowflake")
    name: str = Field(description="Username shown in replies")

    model_config = ConfigDict(frozen=True)


class RenameError(Exception):
    """Raised when a member could not be renamed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# (guild_id, user_id, new_name) -> None, raising RenameError on failure.
# guild_id is None when the command arrived outside a server.
RenameAction = Callable[[int | None, int, str], Awaitable[None]]
