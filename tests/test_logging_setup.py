from __future__ import annotations

import io
import logging

import pytest

from budget_dashboard import logging_setup


@pytest.fixture
def fresh_logging():
    logger = logging.getLogger("budget_dashboard")
    urllib3_logger = logging.getLogger("urllib3")
    saved = (list(logger.handlers), logger.level, logger.propagate, urllib3_logger.level)
    logger.handlers = []
    yield logger
    handlers, level, propagate, urllib3_level = saved
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    urllib3_logger.setLevel(urllib3_level)


def test_configure_logging_once(fresh_logging) -> None:
    stream = io.StringIO()
    logging_setup.configure_logging("DEBUG", stream=stream)
    logging_setup.configure_logging(stream=io.StringIO())
    assert len(fresh_logging.handlers) == 1
    logging_setup.get_logger("budget_dashboard.gateway").debug("GET /data/budget -> 200")
    assert "GET /data/budget -> 200" in stream.getvalue()


def test_later_call_only_changes_level(fresh_logging) -> None:
    stream = io.StringIO()
    logging_setup.configure_logging("INFO", stream=stream)
    logging_setup.configure_logging("ERROR", stream=io.StringIO())
    assert len(fresh_logging.handlers) == 1
    assert fresh_logging.level == logging.ERROR
    logging_setup.get_logger("budget_dashboard.auth").warning("hidden")
    logging_setup.get_logger("budget_dashboard.auth").error("shown")
    assert "hidden" not in stream.getvalue()
    assert "shown" in stream.getvalue()


def test_level_from_environment(fresh_logging, monkeypatch) -> None:
    monkeypatch.setenv("BUDGET_DASHBOARD_LOG_LEVEL", "warning")
    logging_setup.configure_logging(stream=io.StringIO())
    assert fresh_logging.level == logging.WARNING


def test_unknown_level_falls_back_to_info(fresh_logging) -> None:
    logging_setup.configure_logging("chatty", stream=io.StringIO())
    assert fresh_logging.level == logging.INFO


def test_urllib3_quieted(fresh_logging) -> None:
    logging_setup.configure_logging("DEBUG", stream=io.StringIO())
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_get_logger_is_silent_before_configuration(fresh_logging) -> None:
    logging_setup.get_logger("budget_dashboard.auth")
    assert any(isinstance(h, logging.NullHandler) for h in fresh_logging.handlers)
