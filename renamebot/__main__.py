"""
RenameBot CLI entry point.

Provides command-line interface for running the bot and utility commands.
"""

import argparse
import asyncio
import re
import signal
import sys
from pathlib import Path

import discord

from renamebot import __version__
from renamebot.commands import default_matcher
from renamebot.config.logging import get_logger, setup_logging
from renamebot.config.settings import Settings, load_settings


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="renamebot",
        description="Discord bot that renames members: 'rename @user to New Name'",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"RenameBot {__version__}",
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to .env file (default: .env in current directory)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override logging level from config",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "run",
        help="Connect to Discord and handle rename commands until SIGINT/SIGTERM",
    )

    subparsers.add_parser(
        "config",
        help="Show current configuration",
    )

    parse_parser = subparsers.add_parser(
        "parse",
        help="Check how a message would be parsed, without connecting to Discord",
    )
    parse_parser.add_argument(
        "text",
        help='Message text, e.g. "rename @alice to Bob"',
    )

    return parser


def cmd_config(settings: Settings) -> int:
    """Show current configuration."""
    logger = get_logger(__name__)

    logger.info("\n=== RenameBot Configuration ===\n")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"Log File: {settings.log_file or 'None (console only)'}")
    logger.info(f"\nBot Name: {settings.bot.name}")
    logger.info(f"Bot Token: {'Set' if settings.bot.token else 'Not set'}")

    return 0


def cmd_parse(args) -> int:
    """Run the command matcher against the given text and report the result."""
    logger = get_logger(__name__)

    command = default_matcher().match(args.text)
    if command is None:
        logger.info("No match")
        return 1

    logger.info(f"Subject: {command.subject_text}")
    logger.info(f"New name: {command.new_name}")
    return 0


async def _serve(bot, token: str) -> None:
    """Run the bot until it disconnects or a termination signal arrives."""
    logger = get_logger(__name__)
    loop = asyncio.get_running_loop()

    def handle_signal(sig: signal.Signals) -> None:
        logger.info(f"Received {sig.name}")
        loop.create_task(bot.close())

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, lambda s=sig: handle_signal(s))

    try:
        await bot.start(token)
    finally:
        if not bot.is_closed():
            await bot.close()


def cmd_run(settings: Settings) -> int:
    """Start the Discord bot."""
    logger = get_logger(__name__)

    if not settings.bot.token:
        logger.error(
            "Discord bot token not set. Add AUTH_TOKEN=<your-token> to your environment or .env file."
        )
        return 1

    from renamebot.bot import RenameBot

    try:
        bot = RenameBot(settings)
    except (re.error, ValueError) as e:
        logger.error(f"Invalid command pattern: {e}")
        return 1

    logger.info(f"Starting {settings.bot.name}...")
    try:
        asyncio.run(_serve(bot, settings.bot.token))
    except (discord.LoginFailure, discord.PrivilegedIntentsRequired, discord.GatewayNotFound) as e:
        logger.error(f"Error connecting to Discord: {e}")
        return 1
    return 0


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load settings
    try:
        settings = load_settings(env_file=args.env_file)
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Override log level if specified
    if args.log_level:
        settings.log_level = args.log_level

    setup_logging(settings)

    if args.command == "config":
        return cmd_config(settings)
    elif args.command == "run":
        return cmd_run(settings)
    elif args.command == "parse":
        return cmd_parse(args)
    else:
        # Default: show help
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
