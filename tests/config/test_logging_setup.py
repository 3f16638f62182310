"""Tests for logging configuration."""

import logging

from token_splitter.config.logging import configure_logging, get_logger


def test_configure_logging_installs_single_stdout_handler() -> None:
    configure_logging()
    configure_logging()

    assert len(logging.getLogger().handlers) == 1
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_configure_logging_leaves_httpx_alone() -> None:
    logging.getLogger("httpx").setLevel(logging.NOTSET)

    configure_logging()

    assert logging.getLogger("httpx").level == logging.NOTSET


def test_get_logger_uses_module_name() -> None:
    assert get_logger("token_splitter.main").name == "token_splitter.main"
