from __future__ import annotations

import asyncio

from .registry import StrategyContext, StrategyResult


class LikemodeFriendsfeedRealistic:
    """Like posts in the home (friends) feed, one at a time."""

    name = "Likemode_friendsfeed_realistic"

    async def run(self, context: StrategyContext) -> StrategyResult:
        tag = "likemode_friendsfeed_realistic::run()"
        log, lang, settings = context.log, context.lang, context.settings

        log.info(tag, lang.translate("mode_start"))

        outcome = await context.dispatcher.goto_home()
        if not outcome.status:
            return StrategyResult(success=False, data={"liked": 0}, error=str(outcome.error))

        buttons = await context.page.query_selector_all(settings.like_button_selector)
        if not buttons:
            log.warning(tag, lang.translate("no_posts_found"))

        liked = 0
        for button in buttons[: max(0, settings.likes_per_run)]:
            if liked and settings.like_interval_seconds > 0:
                await asyncio.sleep(settings.like_interval_seconds)
            try:
                await button.click()
            except Exception as e:
                # One stale button should not end the run.
                log.error(tag, f"{lang.translate('like_failed')}: {e}")
                continue
            liked += 1
            log.info(tag, f"{lang.translate('like_ok')} ({liked})")

        log.info(tag, lang.translate("mode_finished"))
        return StrategyResult(success=True, data={"liked": liked, "candidates": len(buttons)})
