from unittest.mock import AsyncMock

import pytest
from structlog.testing import capture_logs

from socialbot.modes import LikemodeFriendsfeedRealistic, StrategyContext


def _context(dispatcher, page, settings, bot_log, lang):
    return StrategyContext(dispatcher=dispatcher, page=page, settings=settings, log=bot_log, lang=lang)


@pytest.mark.asyncio
async def test_likes_up_to_limit(dispatcher, navigator, mock_page, settings, bot_log, lang, like_button):
    buttons = [like_button() for _ in range(5)]
    mock_page.query_selector_all = AsyncMock(return_value=buttons)

    result = await LikemodeFriendsfeedRealistic().run(
        _context(dispatcher, mock_page, settings, bot_log, lang)
    )

    assert result.success is True
    assert result.data == {"liked": 3, "candidates": 5}
    assert navigator.urls == ["https://www.facebook.com/"]
    mock_page.query_selector_all.assert_awaited_once_with(settings.like_button_selector)
    assert [b.click.await_count for b in buttons] == [1, 1, 1, 0, 0]


@pytest.mark.asyncio
async def test_click_failure_is_skipped(dispatcher, mock_page, settings, bot_log, lang, like_button):
    buttons = [like_button(RuntimeError("detached")), like_button()]
    mock_page.query_selector_all = AsyncMock(return_value=buttons)

    with capture_logs() as logs:
        result = await LikemodeFriendsfeedRealistic().run(
            _context(dispatcher, mock_page, settings, bot_log, lang)
        )

    assert result.data["liked"] == 1
    assert any(e["log_level"] == "error" and "detached" in e["event"] for e in logs)


@pytest.mark.asyncio
async def test_empty_feed(dispatcher, mock_page, settings, bot_log, lang):
    result = await LikemodeFriendsfeedRealistic().run(
        _context(dispatcher, mock_page, settings, bot_log, lang)
    )

    assert result.success is True
    assert result.data == {"liked": 0, "candidates": 0}


@pytest.mark.asyncio
async def test_navigation_failure_ends_run(failing_dispatcher, mock_page, settings, bot_log, lang):
    result = await LikemodeFriendsfeedRealistic().run(
        _context(failing_dispatcher, mock_page, settings, bot_log, lang)
    )

    assert result.success is False
    assert result.error == "net::ERR_TIMED_OUT"
    mock_page.query_selector_all.assert_not_awaited()
