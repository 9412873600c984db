"""
socialbot

Action dispatcher and mode registry for a Playwright-driven social network bot.
"""

__version__ = "0.1.0"
