"""
Actions module for socialbot.

This package contains:
- The uniform action result (`ActionOutcome`)
- The navigation capability (`Navigator`, `PlaywrightNavigator`)
- The goto dispatcher (`GotoDispatcher`) and its URL templates
"""

from .goto import (
    URL_TEMPLATES,
    GotoDispatcher,
    build_url,
    normalize_hashtag,
    normalize_profile,
)
from .navigation import Navigator, PlaywrightNavigator
from .outcome import ActionOutcome

__all__ = [
    "ActionOutcome",
    "GotoDispatcher",
    "Navigator",
    "PlaywrightNavigator",
    "URL_TEMPLATES",
    "build_url",
    "normalize_hashtag",
    "normalize_profile",
]
