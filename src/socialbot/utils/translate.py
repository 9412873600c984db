from __future__ import annotations

import logging
from importlib import resources
from typing import Dict

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


def load_catalog(language: str) -> Dict[str, str]:
    """Load `locales/<language>.yaml`; an unknown language yields an empty catalog."""
    path = resources.files("socialbot").joinpath("locales").joinpath(f"{language}.yaml")
    if not path.is_file():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return {str(k): str(v) for k, v in data.items()}


class Translator:
    """
    Message lookup for log lines.

    Missing keys fall back to the English catalog, then to the key itself, so
    `translate()` always returns a string.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        self.language = (language or DEFAULT_LANGUAGE).strip().lower()
        self._fallback = load_catalog(DEFAULT_LANGUAGE)
        if self.language == DEFAULT_LANGUAGE:
            self._catalog = self._fallback
        else:
            self._catalog = load_catalog(self.language)
            if not self._catalog:
                logger.warning("No locale catalog for %r, using %r", self.language, DEFAULT_LANGUAGE)

    def translate(self, key: str) -> str:
        if key in self._catalog:
            return self._catalog[key]
        return self._fallback.get(key, key)
