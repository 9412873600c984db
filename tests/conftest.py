"""
Pytest configuration and shared fixtures for all tests.
"""
from typing import List, Optional
from unittest.mock import AsyncMock, Mock

import pytest
import structlog

from socialbot.actions import GotoDispatcher
from socialbot.config import BotSettings
from socialbot.utils.logger import BotLogger
from socialbot.utils.translate import Translator


class FakeNavigator:
    """Navigator double: records URLs and optionally fails every call."""

    name = "fake-driver"

    def __init__(self, error: Optional[BaseException] = None):
        self.error = error
        self.urls: List[str] = []

    async def navigate(self, url: str) -> None:
        self.urls.append(url)
        if self.error is not None:
            raise self.error


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep structlog configuration from leaking between tests."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings():
    """Test settings with no pause between likes."""
    return BotSettings(
        mode="Likemode_friendsfeed_realistic",
        language="en",
        log_json=False,
        likes_per_run=3,
        like_interval_seconds=0,
    )


@pytest.fixture
def navigator():
    return FakeNavigator()


@pytest.fixture
def failing_navigator():
    return FakeNavigator(error=RuntimeError("net::ERR_TIMED_OUT"))


@pytest.fixture
def bot_log():
    return BotLogger("socialbot.test")


@pytest.fixture
def lang():
    return Translator("en")


@pytest.fixture
def dispatcher(navigator, bot_log, lang):
    return GotoDispatcher(navigator, bot_log, lang)


@pytest.fixture
def failing_dispatcher(failing_navigator, bot_log, lang):
    return GotoDispatcher(failing_navigator, bot_log, lang)


@pytest.fixture
def mock_page():
    """Mock Playwright page with an empty feed."""
    page = AsyncMock()
    page.goto = AsyncMock(return_value=None)
    page.query_selector_all = AsyncMock(return_value=[])
    page.close = AsyncMock()
    return page


def make_like_button(error: Optional[BaseException] = None) -> Mock:
    button = Mock()
    button.click = AsyncMock(side_effect=error)
    return button


@pytest.fixture
def like_button():
    return make_like_button


@pytest.fixture
def navigator_factory():
    return FakeNavigator
