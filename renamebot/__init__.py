"""
RenameBot - Discord bot that renames guild members on request.

Listens for messages of the form ``rename @someone to New Name`` and sets the
mentioned member's server nickname, replying with the outcome.
"""

__version__ = "0.1.0"
