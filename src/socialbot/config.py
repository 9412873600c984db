"""
Bot Configuration

Settings and environment variable management.
"""
from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Optional


class BotSettings(BaseSettings):
    """Bot runtime settings."""

    # Mode
    mode: str = Field(
        default="Likemode_friendsfeed_realistic",
        validation_alias="BOT_MODE",
        description="Registered mode (strategy) to run"
    )

    # Logging / i18n
    language: str = Field(
        default="en",
        validation_alias="BOT_LANGUAGE",
        description="Locale used for log messages"
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="BOT_LOG_LEVEL",
        description="Log level name"
    )

    log_file: Optional[str] = Field(
        default=None,
        validation_alias="BOT_LOG_FILE",
        description="Optional rotating log file path"
    )

    log_json: bool = Field(
        default=True,
        validation_alias="BOT_LOG_JSON",
        description="Emit JSON log lines instead of plain text"
    )

    diagnostic_hints: bool = Field(
        default=True,
        validation_alias="BOT_DIAGNOSTIC_HINTS",
        description="Log docs / knowledge base hints after a failed action"
    )

    redact_errors: bool = Field(
        default=False,
        validation_alias="BOT_REDACT_ERRORS",
        description="Only log the error type of navigation failures, not their detail"
    )

    docs_url: str = Field(
        default="docs",
        validation_alias="BOT_DOCS_URL",
        description="Base location of the bot documentation"
    )

    knowledge_base_url: str = Field(
        default="https://stackoverflow.com/search?q=",
        validation_alias="BOT_KNOWLEDGE_BASE_URL",
        description="Search URL prefix used for error hints"
    )

    # Browser
    headless: bool = Field(
        default=True,
        validation_alias="BOT_HEADLESS",
        description="Run Chromium headless"
    )

    navigation_timeout_ms: int = Field(
        default=30000,
        validation_alias="BOT_NAVIGATION_TIMEOUT_MS",
        description="Playwright navigation timeout (milliseconds)"
    )

    navigation_deadline_s: Optional[float] = Field(
        default=None,
        validation_alias="BOT_NAVIGATION_DEADLINE_S",
        description="Hard deadline for a single navigation (seconds)"
    )

    wait_until: str = Field(
        default="load",
        validation_alias="BOT_WAIT_UNTIL",
        description="Playwright load state a navigation waits for"
    )

    # Likemode
    likes_per_run: int = Field(
        default=10,
        validation_alias="BOT_LIKES_PER_RUN",
        description="Maximum likes per friends-feed run"
    )

    like_interval_seconds: float = Field(
        default=5.0,
        validation_alias="BOT_LIKE_INTERVAL_SECONDS",
        description="Pause between two likes (seconds)"
    )

    like_button_selector: str = Field(
        default='div[aria-label="Like"][role="button"]',
        validation_alias="BOT_LIKE_BUTTON_SELECTOR",
        description="CSS selector of feed like buttons"
    )

    class Config:
        env_file = ".env"
        case_sensitive = False
        populate_by_name = True
