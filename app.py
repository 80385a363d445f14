import asyncio
import io
import logging
import sys
from datetime import datetime

import colorama
import discord
from discord.ext import commands
from dotenv import load_dotenv

from bot_config import ConfigError, Settings, load_settings
from health_server import start_health_server

COGS_TO_LOAD = [
    "cogs.leaderboard",
]

BANNER = r'''
  _  ___ _ _   _____               _
 | |/ (_) | | |_   _| __ __ _  ___| | _____ _ __
 | ' /| | | |   | || '__/ _` |/ __| |/ / _ \ '__|
 | . \| | | |   | || | | (_| | (__|   <  __/ |
 |_|\_\_|_|_|   |_||_|  \__,_|\___|_|\_\___|_|
'''


def _print_startup_banner():
    ts = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    print('\n' + BANNER)
    print(f"✨ Kill Tracker • started at {ts}\n")


def setup_logging(level: str = 'INFO'):
    """Configure a compact, emoji-based console logger and reduce noise.

    Returns a module logger (logging.getLogger(__name__)).
    """
    colorama.init()
    RESET = colorama.Style.RESET_ALL
    COLORS = {
        'DEBUG': colorama.Fore.CYAN,
        'INFO': colorama.Fore.GREEN,
        'WARNING': colorama.Fore.YELLOW,
        'ERROR': colorama.Fore.RED,
        'CRITICAL': colorama.Fore.MAGENTA,
    }

    LEVEL_EMOJI = {
        'DEBUG': '🔎',
        'INFO': 'ℹ️',
        'WARNING': '⚠️',
        'ERROR': '❌',
        'CRITICAL': '💥',
    }

    class CleanFormatter(logging.Formatter):
        def format(self, record: logging.LogRecord) -> str:
            ts = datetime.now().strftime('%H:%M:%S')
            lvl = record.levelname
            name = record.name
            # shorten common long logger names for readability
            if name.startswith('discord'):
                name = 'discord'
            if name == '__main__' or name == __name__:
                name = 'main'
            message = super().format(record)
            return f"{COLORS.get(lvl, '')}{LEVEL_EMOJI.get(lvl, '')} {ts} [{lvl}] {name}: {message}{RESET}"

    # remove any pre-configured handlers (avoids duplicate lines)
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    # Windows consoles often use cp1252, which can't encode the emojis
    try:
        sys.stdout.reconfigure(encoding='utf-8', errors='replace', line_buffering=True)
    except (AttributeError, io.UnsupportedOperation):
        pass
    sh = logging.StreamHandler(stream=sys.stdout)
    sh.setFormatter(CleanFormatter('%(message)s'))
    root.addHandler(sh)
    root.setLevel(getattr(logging, level, logging.INFO))

    for noisy in ('aiohttp.access', 'websockets.protocol', 'asyncio', 'urllib3'):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logging.getLogger(__name__)


logger = logging.getLogger(__name__)


def create_bot(settings: Settings) -> commands.Bot:
    """Build the bot. Text commands are parsed by the leaderboard cog,
    so the framework prefix only reacts to mentions."""
    intents = discord.Intents.default()
    intents.message_content = True

    bot = commands.Bot(command_prefix=commands.when_mentioned, intents=intents, help_command=None)
    bot.settings = settings

    async def setup_hook():
        """Load cogs when bot starts"""
        loaded_count = 0
        for cog_name in COGS_TO_LOAD:
            await bot.load_extension(cog_name)
            logger.info(f"✅ Loaded {cog_name}")
            loaded_count += 1
        logger.info(f"📦 Cog loading complete: {loaded_count} loaded")

        if settings.health_server_enabled:
            bot.health_runner = await start_health_server(settings.port, bot)

    bot.setup_hook = setup_hook

    @bot.event
    async def on_ready():
        logger.info(f"🤖 Logged in as {bot.user} (ID: {bot.user.id})")
        logger.info(f"📊 Connected to {len(bot.guilds)} guild(s)")

    return bot


async def run_bot(settings: Settings):
    bot = create_bot(settings)
    async with bot:
        await bot.start(settings.token)


def main() -> int:
    load_dotenv()
    try:
        settings = load_settings()
    except ConfigError as e:
        setup_logging()
        logger.critical(f"Configuration error: {e}")
        return 1

    _print_startup_banner()
    setup_logging(settings.log_level)

    try:
        asyncio.run(run_bot(settings))
    except discord.LoginFailure:
        logger.critical("❌ Invalid token! Check your DISCORD_TOKEN in .env")
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
