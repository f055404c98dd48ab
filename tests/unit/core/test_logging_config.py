"""Unit tests for structured logging setup."""

from __future__ import annotations

import json

import pytest

from core.config import ResourceIdConfig
from core.logging_config import get_logger


def test_get_logger_emits_json_events(capsys: pytest.CaptureFixture[str]) -> None:
    """Events should render as JSON lines with level and fields."""
    logger = get_logger("tests.logging", ResourceIdConfig(log_level="info"))

    logger.info("resource_id_created", uri="s3://bucket/")

    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["event"] == "resource_id_created"
    assert payload["level"] == "info"
    assert payload["uri"] == "s3://bucket/"


def test_get_logger_filters_below_configured_level(capsys: pytest.CaptureFixture[str]) -> None:
    """Debug events should be dropped at info level."""
    logger = get_logger("tests.logging", ResourceIdConfig(log_level="info"))

    logger.debug("resource_id_created", uri="s3://bucket/")

    assert capsys.readouterr().out == ""


def test_loggers_keep_their_own_levels(capsys: pytest.CaptureFixture[str]) -> None:
    """A later logger's level should not change an earlier logger."""
    debug_logger = get_logger("tests.debug", ResourceIdConfig(log_level="debug"))
    get_logger("tests.error", ResourceIdConfig(log_level="error"))

    debug_logger.debug("resource_id_created", uri="s3://bucket/a")

    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["event"] == "resource_id_created"
    assert payload["logger_name"] == "tests.debug"
