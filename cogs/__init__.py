"""
Package initializer for the cogs package.

Makes `cogs` an explicit package so `bot.load_extension("cogs.leaderboard")`
resolves the same way from app.py and from tests.
"""

__all__ = [
    "leaderboard",
]
