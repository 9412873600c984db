from __future__ import annotations

import asyncio
import logging
from typing import Optional, Protocol, runtime_checkable

from playwright.async_api import Page

from ..exceptions import NavigationTimeoutError

logger = logging.getLogger(__name__)


@runtime_checkable
class Navigator(Protocol):
    """Moves one browser session to a URL; raises on failure."""

    name: str

    async def navigate(self, url: str) -> None:
        ...


class PlaywrightNavigator:
    name = "playwright"

    def __init__(
        self,
        page: Page,
        *,
        timeout_ms: int = 30000,
        wait_until: str = "load",
        deadline_s: Optional[float] = None,
    ) -> None:
        """
        Navigator backed by a Playwright page.

        - timeout_ms: Playwright's own navigation timeout
        - wait_until: load state to wait for ('load', 'domcontentloaded', 'networkidle', 'commit')
        - deadline_s: optional hard deadline around the whole `goto` call

        Playwright errors are propagated unchanged. Only the hard deadline is
        reported as `NavigationTimeoutError`.
        """
        self.page = page
        self.timeout_ms = timeout_ms
        self.wait_until = wait_until
        self.deadline_s = deadline_s

    async def navigate(self, url: str) -> None:
        logger.debug("Navigating to %s", url)
        goto = self.page.goto(url, wait_until=self.wait_until, timeout=self.timeout_ms)
        if self.deadline_s is None:
            await goto
            return
        try:
            await asyncio.wait_for(goto, timeout=self.deadline_s)
        except asyncio.TimeoutError as e:
            raise NavigationTimeoutError(url, self.deadline_s) from e
