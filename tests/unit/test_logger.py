import json
import logging

from structlog.testing import capture_logs

from socialbot.utils.logger import BotLogger, JSONFormatter, TagFormatter, setup_logging


def test_hints_can_be_disabled():
    log = BotLogger("socialbot.test", hints=False)
    with capture_logs() as logs:
        log.docs("api", "goto::post()")
        log.knowledge_base_hint("goto::post()", "playwright", "boom")
    assert logs == []


def test_knowledge_base_hint_builds_search_url():
    log = BotLogger("socialbot.test", knowledge_base_url="https://kb.example/search?q=")
    with capture_logs() as logs:
        log.knowledge_base_hint("goto::post()", "playwright", "net::ERR_FAILED")
    assert logs[0]["event"] == "Search this error: https://kb.example/search?q=%5Bplaywright%5D+net%3A%3AERR_FAILED"
    assert logs[0]["tag"] == "goto::post()"


def test_from_settings(settings):
    log = BotLogger.from_settings(settings)
    assert log.hints is settings.diagnostic_hints
    assert log.docs_url == settings.docs_url


def test_json_formatter_includes_context():
    record = logging.LogRecord("socialbot.api", logging.ERROR, __file__, 1, "boom", (), None)
    record.tag = "goto::login()"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "ERROR"
    assert payload["message"] == "boom"
    assert payload["context"] == {"tag": "goto::login()"}


def test_tag_formatter_defaults_tag_to_logger_name():
    record = logging.LogRecord("socialbot.worker", logging.INFO, __file__, 1, "hello", (), None)
    assert "socialbot.worker: hello" in TagFormatter().format(record)


def test_setup_logging_routes_bot_logger_to_handlers(tmp_path):
    log_file = tmp_path / "bot.log"
    root = setup_logging("INFO", str(log_file), json_logs=True)
    try:
        BotLogger("socialbot.api").info("goto::post()", "Done")
        for handler in root.handlers:
            handler.flush()
    finally:
        for handler in list(root.handlers):
            handler.close()
            root.removeHandler(handler)
        root.propagate = True

    line = json.loads(log_file.read_text().strip().splitlines()[-1])
    assert line["message"] == "Done"
    assert line["logger"] == "socialbot.api"
    assert line["context"]["tag"] == "goto::post()"
