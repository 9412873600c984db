#!/usr/bin/env python3
"""
Bot Worker

Resolves the configured mode, opens a browser page and runs the mode's
strategy once.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from playwright.async_api import async_playwright

from .actions import GotoDispatcher, PlaywrightNavigator
from .config import BotSettings
from .modes import MODES, ModeRegistry, RunnableStrategy, StrategyContext, StrategyResult
from .utils.logger import BotLogger, setup_logging
from .utils.translate import Translator

logger = logging.getLogger(__name__)


class BotWorker:
    """Owns the browser session and runs one strategy against it."""

    def __init__(self, settings: BotSettings, registry: ModeRegistry = MODES):
        self.settings = settings
        self.registry = registry
        self.strategy: Optional[RunnableStrategy] = None
        self.context: Optional[StrategyContext] = None
        self._playwright: Any = None
        self._browser: Any = None

    async def initialize(self) -> None:
        """Resolve the mode, then start the browser and wire the dispatcher."""
        # Unknown modes fail before any browser is launched.
        self.strategy = self.registry.resolve(self.settings.mode)

        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(headless=self.settings.headless)
        page = await self._browser.new_page()

        navigator = PlaywrightNavigator(
            page,
            timeout_ms=self.settings.navigation_timeout_ms,
            wait_until=self.settings.wait_until,
            deadline_s=self.settings.navigation_deadline_s,
        )
        log = BotLogger.from_settings(self.settings, "socialbot.api")
        lang = Translator(self.settings.language)
        dispatcher = GotoDispatcher(
            navigator,
            log,
            lang,
            redact_errors=self.settings.redact_errors,
        )
        self.context = StrategyContext(
            dispatcher=dispatcher,
            page=page,
            settings=self.settings,
            log=BotLogger.from_settings(self.settings, "socialbot.modes"),
            lang=lang,
        )

        logger.info("Bot worker initialized (mode=%s)", self.settings.mode)

    async def run(self) -> StrategyResult:
        if self.strategy is None or self.context is None:
            raise RuntimeError("BotWorker.run() called before initialize()")
        logger.info("Running mode %s", self.settings.mode)
        result = await self.strategy.run(self.context)
        if result.success:
            logger.info("Mode %s finished: %s", self.settings.mode, result.data)
        else:
            logger.error("Mode %s failed: %s", self.settings.mode, result.error)
        return result

    async def shutdown(self) -> None:
        if self._browser is not None:
            await self._browser.close()
            self._browser = None
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None
        logger.info("Bot worker shut down")


async def main() -> int:
    """Main entry point."""
    settings = BotSettings()
    setup_logging(settings.log_level, settings.log_file, settings.log_json)

    worker = BotWorker(settings)
    try:
        await worker.initialize()
        result = await worker.run()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 130
    finally:
        await worker.shutdown()
    return 0 if result.success else 1


def cli() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
