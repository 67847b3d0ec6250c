"""Unit tests for structured logging helpers."""

import pytest
import structlog

from canary.core.config import Settings
from canary.core.logging import (
    LoggingContext,
    add_correlation_id,
    add_logger_name,
    configure_logging,
    get_logger,
    rename_message_field,
)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


def test_add_correlation_id_generates_one():
    event_dict = add_correlation_id(None, "info", {"event": "hello"})
    assert event_dict["correlation_id"].startswith("cid_")


def test_add_correlation_id_keeps_existing():
    event_dict = add_correlation_id(None, "info", {"correlation_id": "abc"})
    assert event_dict["correlation_id"] == "abc"


def test_add_logger_name_fallback():
    assert add_logger_name(object(), "info", {})["logger"] == "canary"


def test_rename_message_field():
    assert rename_message_field(None, "info", {"event": "hello"}) == {"message": "hello"}


def test_logging_context_binds_and_unbinds():
    with LoggingContext(action="show"):
        assert structlog.contextvars.get_contextvars()["action"] == "show"
    assert "action" not in structlog.contextvars.get_contextvars()


def test_configure_logging_console(capsys):
    configure_logging(Settings(environment="testing", log_format="console", log_level="INFO"))

    get_logger("canary.test").info("Resource loaded", action="show")

    assert "Resource loaded" in capsys.readouterr().out


def test_configure_logging_filters_level(capsys):
    configure_logging(Settings(environment="testing", log_format="console", log_level="WARNING"))

    get_logger("canary.test").info("Resource loaded")

    assert "Resource loaded" not in capsys.readouterr().out
