import logging
import discord
from discord.ext import commands

from bot_config import LEADERBOARD_SIZE
from card_formatter import build_leaderboard_card, build_lookup_card
from command_router import LEADERBOARD_ACTIONS, LOOKUP, USAGE, route_command
from highscores_parser import extract_player_row, normalize_lookup
from leaderboard_parser import normalize_leaderboard
from tracker_api import TrackerAPI, UpstreamError

logger = logging.getLogger(__name__)

LEADERBOARD_USAGE = "❌ Use: !leaderd | !leaderw | !leaderm"
LOOKUP_USAGE = "❌ Use: !lookup <username>"


class LeaderboardCog(commands.Cog):
    """Text commands for the kill leaderboards and SpawnPK player lookups.

    The API client is passed in so the handler can run against a fake
    in tests without a Discord connection.
    """

    def __init__(self, bot, api: TrackerAPI, prefix: str = "!"):
        self.bot = bot
        self.api = api
        self.prefix = prefix
        logger.info("LeaderboardCog initialized")

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        await self.handle_message(message)

    async def handle_message(self, message):
        route = route_command(message.content, self.prefix, author_is_bot=message.author.bot)
        if route is None:
            return

        logger.info(f"Command {route.action!r} from {message.author} arg={route.argument!r}")
        try:
            if route.action == USAGE:
                await message.reply(LEADERBOARD_USAGE)
            elif route.action in LEADERBOARD_ACTIONS:
                await self.send_leaderboard(message, route.action)
            elif route.action == LOOKUP:
                await self.send_lookup(message, route.argument)
        except discord.Forbidden:
            logger.warning(f"Missing permissions to reply in channel {message.channel.id}")
        except Exception as e:
            logger.exception(f"Error handling {route.action} command: {e}")
            try:
                await message.reply("❌ Something went wrong while handling that command.")
            except discord.HTTPException as reply_error:
                logger.error(f"Could not send error reply: {reply_error}")

    async def send_leaderboard(self, message, period: str):
        async with message.channel.typing():
            try:
                payload = await self.api.fetch_leaderboard(period)
            except UpstreamError as e:
                await message.reply(f"❌ Failed to fetch leaderboard ({e.describe()})")
                return

            records = normalize_leaderboard(payload, limit=LEADERBOARD_SIZE)
            embed = build_leaderboard_card(period, records, source=self.api.leaderboard_base_url)
        await message.reply(embed=embed)

    async def send_lookup(self, message, username: str):
        username = username.strip()
        if not username:
            await message.reply(LOOKUP_USAGE)
            return

        async with message.channel.typing():
            try:
                html, url = await self.api.fetch_highscores_page(username)
            except UpstreamError as e:
                await message.reply(f"❌ Failed to fetch SpawnPK highscores ({e.describe()})")
                return

            cells = extract_player_row(html, username)
            if cells is None:
                logger.info(f"Player {username!r} not found on highscores")
                await message.reply(f"❌ Player **{discord.utils.escape_markdown(username)}** not found on SpawnPK highscores.")
                return

            embed = build_lookup_card(normalize_lookup(cells, username, url))
        await message.reply(embed=embed)


async def setup(bot):
    """Load the cog using the settings attached to the bot by app.py"""
    settings = bot.settings
    api = TrackerAPI(
        leaderboard_base_url=settings.leaderboard_base_url,
        highscores_url=settings.highscores_url,
        timeout=settings.http_timeout,
    )
    await bot.add_cog(LeaderboardCog(bot, api, prefix=settings.command_prefix))
    logger.info("LeaderboardCog loaded successfully")
