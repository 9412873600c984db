"""
Modes (strategies) available to the bot.

`MODES` is the registry the orchestrator resolves `BotSettings.mode` against.
New modes are added to the entry list below.
"""

from .likemode_friendsfeed_realistic import LikemodeFriendsfeedRealistic
from .registry import ModeRegistry, RunnableStrategy, StrategyContext, StrategyResult

MODES = ModeRegistry(
    [
        ("Likemode_friendsfeed_realistic", LikemodeFriendsfeedRealistic()),
    ]
)

__all__ = [
    "MODES",
    "ModeRegistry",
    "RunnableStrategy",
    "StrategyContext",
    "StrategyResult",
    "LikemodeFriendsfeedRealistic",
]
