"""
Goto actions: move the browser to a post, hashtag, location, profile, the
login page or the home feed.

Every operation follows the same contract: log intent, navigate once, capture
any navigator failure into an `ActionOutcome`, log the result and return the
outcome. Navigation failures are never raised to the caller.
"""
from __future__ import annotations

import asyncio
from typing import Any, Optional, Union

from ..utils.logger import BotLogger
from ..utils.translate import Translator
from .navigation import Navigator
from .outcome import ActionOutcome

BASE_URL = "https://www.facebook.com"

URL_TEMPLATES = {
    "post": BASE_URL + "/p/{id_hash}/",
    "hashtag": BASE_URL + "/explore/tags/{hashtag}/",
    "location": BASE_URL + "/explore/locations/{gps_id}/",
    "profile": BASE_URL + "/{nickname}/",
    "login": BASE_URL + "/accounts/login/",
    "home": BASE_URL + "/",
}


def normalize_hashtag(hashtag: Any) -> str:
    return str(hashtag).replace("#", "")


def normalize_profile(nickname: Any) -> str:
    return str(nickname).replace("@", "")


def build_url(kind: str, **identifier: Any) -> str:
    """Interpolate an (already normalized) identifier into the template for `kind`."""
    return URL_TEMPLATES[kind].format(**identifier)


class GotoDispatcher:
    def __init__(
        self,
        navigator: Navigator,
        log: BotLogger,
        lang: Translator,
        *,
        log_name: str = "api",
        redact_errors: bool = False,
    ) -> None:
        self.navigator = navigator
        self.log = log
        self.lang = lang
        self.log_name = log_name
        self.redact_errors = redact_errors
        # One browser page cannot be navigated in two directions at once.
        self._lock = asyncio.Lock()

    async def goto_post(self, id_hash: str) -> ActionOutcome:
        """Go to the page of the post identified by `id_hash`."""
        return await self._goto(
            "goto::post()",
            "try_goto_post_page",
            build_url("post", id_hash=id_hash),
            f"{self.lang.translate('post_id')}: {id_hash}",
        )

    async def goto_hashtag(self, hashtag: str) -> ActionOutcome:
        """Go to a hashtag page. Works with or without the `#` prefix."""
        hashtag = normalize_hashtag(hashtag)
        return await self._goto(
            "goto::hashtag()",
            "try_goto_hashtag_page",
            build_url("hashtag", hashtag=hashtag),
            f"#{hashtag}",
        )

    async def goto_location(self, gps_id: Union[int, str]) -> ActionOutcome:
        return await self._goto(
            "goto::location()",
            "try_goto_gps_page",
            build_url("location", gps_id=gps_id),
            f"GPS ID: {gps_id}",
        )

    async def goto_profile(self, nickname: str) -> ActionOutcome:
        """Go to a user profile. Works with or without the `@` prefix."""
        nickname = normalize_profile(nickname)
        return await self._goto(
            "goto::profile()",
            "try_goto_profile_page",
            build_url("profile", nickname=nickname),
            f"@{nickname}",
        )

    async def goto_login(self) -> ActionOutcome:
        return await self._goto(
            "goto::login()",
            "try_goto_login_page",
            build_url("login"),
            self.lang.translate("login_page_loaded"),
        )

    async def goto_home(self) -> ActionOutcome:
        return await self._goto(
            "goto::home()",
            "try_goto_home_page",
            build_url("home"),
            self.lang.translate("home_page_loaded"),
        )

    async def _goto(
        self,
        tag: str,
        intent_key: str,
        url: str,
        success_message: Optional[str],
    ) -> ActionOutcome:
        self.log.info(tag, self.lang.translate(intent_key))

        outcome = ActionOutcome.failed(None)
        try:
            async with self._lock:
                await self.navigator.navigate(url)
            outcome = ActionOutcome.succeeded()
        except Exception as err:
            outcome = ActionOutcome.failed(err)

        if outcome.status:
            if success_message:
                self.log.info(tag, success_message)
            self.log.info(tag, self.lang.translate("done"))
        else:
            detail = self._describe(outcome.error)
            self.log.error(tag, detail)
            self.log.docs(self.log_name, tag)
            self.log.knowledge_base_hint(tag, self.navigator.name, detail)

        return outcome

    def _describe(self, error: Any) -> str:
        if self.redact_errors:
            return type(error).__name__
        return str(error)
