"""Unit tests for shared logging configuration."""

from __future__ import annotations

import logging
from unittest.mock import patch

from serialization_benchmark.shared.logging import configure_logging


def test_configure_logging_calls_structlog_and_basicconfig() -> None:
    with (
        patch("serialization_benchmark.shared.logging.logging.basicConfig") as basic_config,
        patch("serialization_benchmark.shared.logging.structlog.configure") as configure,
    ):
        configure_logging(level=logging.DEBUG)

    basic_config.assert_called_once()
    assert basic_config.call_args.kwargs["level"] == logging.DEBUG
    configure.assert_called_once()


def test_configure_logging_json_renderer() -> None:
    with (
        patch("serialization_benchmark.shared.logging.logging.basicConfig"),
        patch("serialization_benchmark.shared.logging.structlog.configure") as configure,
    ):
        configure_logging(json_output=True)

    processors = configure.call_args.kwargs["processors"]
    assert type(processors[-1]).__name__ == "JSONRenderer"
