import logging
import sys
import json
import traceback
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Any, Optional
from urllib.parse import quote_plus

import structlog

# Attributes every LogRecord carries; anything else arrived through `extra`.
_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def _record_context(record: logging.LogRecord) -> dict:
    return {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_object = {
            "timestamp": datetime.utcnow().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        context = _record_context(record)
        if context:
            log_object["context"] = context

        if record.exc_info:
            log_object["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info)
            }

        return json.dumps(log_object, default=str)


class TagFormatter(logging.Formatter):
    """Plain text formatter: `time LEVEL tag: message`."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)-7s %(tag)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "tag"):
            record.tag = record.name
        return super().format(record)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None, json_logs: bool = True) -> logging.Logger:
    """Route structlog through the stdlib `socialbot` logger."""
    logger = logging.getLogger("socialbot")
    logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    logger.handlers.clear()

    formatter = JSONFormatter() if json_logs else TagFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    return logger


class BotLogger:
    """
    Logging capability handed to the dispatcher and to strategies.

    Every line carries a `tag` naming the call site (e.g. `goto::post()`).
    `docs()` and `knowledge_base_hint()` are operator hints emitted after a
    failure; they are no-ops when `hints` is False.
    """

    def __init__(
        self,
        name: str = "socialbot",
        *,
        hints: bool = True,
        docs_url: str = "docs",
        knowledge_base_url: str = "https://stackoverflow.com/search?q=",
    ) -> None:
        self.name = name
        self.hints = hints
        self.docs_url = docs_url.rstrip("/")
        self.knowledge_base_url = knowledge_base_url
        self._logger = structlog.get_logger(name)

    @classmethod
    def from_settings(cls, settings: Any, name: str = "socialbot") -> "BotLogger":
        return cls(
            name,
            hints=settings.diagnostic_hints,
            docs_url=settings.docs_url,
            knowledge_base_url=settings.knowledge_base_url,
        )

    def info(self, tag: str, message: str) -> None:
        self._logger.info(message, tag=tag)

    def warning(self, tag: str, message: str) -> None:
        self._logger.warning(message, tag=tag)

    def error(self, tag: str, message: str) -> None:
        self._logger.error(message, tag=tag)

    def docs(self, domain: str, tag: str) -> None:
        if not self.hints:
            return
        self._logger.info(
            f"Read the docs: {self.docs_url}/{domain}.md",
            tag=tag,
            domain=domain,
        )

    def knowledge_base_hint(self, tag: str, subsystem: str, error: Any) -> None:
        if not self.hints:
            return
        query = quote_plus(f"[{subsystem}] {error}")
        self._logger.info(
            f"Search this error: {self.knowledge_base_url}{query}",
            tag=tag,
            subsystem=subsystem,
        )
