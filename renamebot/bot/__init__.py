"""
Discord Bot Layer.

Adapts discord.py message events to the command layer and sends the
resulting replies back to Discord.
"""

from renamebot.bot.client import RenameBot

__all__ = ["RenameBot"]
