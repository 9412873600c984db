"""
Exception hierarchy for socialbot.

Navigation errors are captured into `ActionOutcome` objects by the dispatcher.
Mode errors are programming/configuration errors and are always raised.
"""
from __future__ import annotations

from typing import Iterable


class SocialBotError(Exception):
    """Base class for all socialbot errors."""


class NavigationError(SocialBotError):
    """The browser could not reach or render a destination."""


class NavigationTimeoutError(NavigationError):
    """A navigation did not settle before its hard deadline."""

    def __init__(self, url: str, deadline_s: float) -> None:
        self.url = url
        self.deadline_s = deadline_s
        super().__init__(f"Navigation to {url} did not settle within {deadline_s}s")


class ModeError(SocialBotError):
    """Base class for mode registry errors."""


class UnknownModeError(ModeError):
    """A requested mode key has no registered strategy."""

    def __init__(self, mode_key: str, known: Iterable[str] = ()) -> None:
        self.mode_key = mode_key
        self.known = sorted(known)
        super().__init__(
            f"Unknown mode: {mode_key!r} (registered: {', '.join(self.known) or 'none'})"
        )


class ConfigurationConflictError(ModeError):
    """Two strategies were registered under the same mode key."""

    def __init__(self, mode_key: str) -> None:
        self.mode_key = mode_key
        super().__init__(f"Mode {mode_key!r} is registered more than once")
