import discord
from typing import List, Optional
from urllib.parse import urlparse

from bot_config import LEADERBOARD_SIZE
from leaderboard_parser import PlayerRecord


def _source_label(url: Optional[str]) -> str:
    if not url:
        return "unknown"
    return urlparse(url).netloc or url


def _stamp(embed: discord.Embed, source: Optional[str]) -> discord.Embed:
    embed.set_footer(text=f"Source: {_source_label(source)}")
    embed.timestamp = discord.utils.utcnow()
    return embed


def _entry_value(record: PlayerRecord) -> str:
    lines = [f"+Kills: **{record.period_kills_delta}**"]

    # Totals are only shown when the API sent them
    extras = []
    if record.total_kills is not None:
        extras.append(f"Kills: {record.total_kills}")
    if record.total_deaths is not None:
        extras.append(f"Deaths: {record.total_deaths}")
    if record.kdr is not None:
        extras.append(f"KDR: {record.kdr}")
    if record.elo is not None:
        extras.append(f"ELO: {record.elo}")
    if extras:
        lines.append(" • ".join(extras))
    return "\n".join(lines)


def build_leaderboard_card(label: str, records: List[PlayerRecord], source: Optional[str] = None) -> discord.Embed:
    """Embed for a daily/weekly/monthly top list.

    An empty list still produces a card, with a single "No data" field.
    """
    embed = discord.Embed(
        title=f"🏆 {label.upper()} Leaderboard (Top {LEADERBOARD_SIZE})",
        description="Top players by **kills gained (+)**",
        color=discord.Color.gold(),
    )

    if not records:
        embed.add_field(name="No data", value="No leaderboard data available.", inline=False)
    else:
        for rank, record in enumerate(records, start=1):
            embed.add_field(
                name=f"#{rank} {record.username}"[:256],
                value=_entry_value(record)[:1024],  # Discord field value limit
                inline=False,
            )

    return _stamp(embed, source)


def build_lookup_card(record: PlayerRecord) -> discord.Embed:
    embed = discord.Embed(
        title=f"🔎 SpawnPK Lookup: {record.username}"[:256],
        description=f"[View on SpawnPK highscores]({record.source_url})" if record.source_url else None,
        color=discord.Color.blue(),
    )
    embed.add_field(name="🎮 Mode", value=str(record.mode), inline=True)
    embed.add_field(name="⚔️ Kills", value=str(record.total_kills), inline=True)
    embed.add_field(name="💀 Deaths", value=str(record.total_deaths), inline=True)
    embed.add_field(name="📊 KDR", value=str(record.kdr), inline=True)
    embed.add_field(name="🔥 Streak", value=str(record.streak), inline=True)
    embed.add_field(name="🏅 ELO", value=str(record.elo), inline=True)
    return _stamp(embed, record.source_url)
