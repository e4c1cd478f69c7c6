from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration and
file output.
"""

import logging
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

import pytest

from docsidebar.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from docsidebar.infra.logging.core import _CONFIGURED_FLAG_ATTR, _QUEUE_LISTENER_ATTR
from docsidebar.infra.logging.handlers import _HANDLER_TAG_ATTR


@pytest.fixture(autouse=True)
def reset_logging():
    """Clean up root logger handlers before and after each test."""
    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if isinstance(listener, QueueListener) and getattr(listener, "_thread", None) is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)
        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()
        setattr(root, _CONFIGURED_FLAG_ATTR, False)

    _reset()
    yield
    _reset()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency():
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    first = _our_handlers()
    configure_logging(cfg)

    assert _our_handlers() == first
    assert len(first) == 1
    assert isinstance(first[0], QueueHandler)


def test_force_rebuilds_handlers():
    configure_logging(LoggingConfig(level="INFO"))
    before = _our_handlers()

    configure_logging(LoggingConfig(level="DEBUG"), force=True)
    after = _our_handlers()

    assert len(after) == 1
    assert after[0] is not before[0]
    assert logging.getLogger().level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    configure_logging(LoggingConfig(level="chatty"))
    assert logging.getLogger().level == logging.INFO


def test_file_logging_writes_records(tmp_path: Path):
    log_file = tmp_path / "logs" / "docsidebar.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("docsidebar.test").info("sidebar built")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "INFO | docsidebar.test | sidebar built" in content


def test_no_handlers_leaves_root_unconfigured():
    configure_logging(LoggingConfig(console=False, log_file=None))
    assert _our_handlers() == []
    assert not getattr(logging.getLogger(), _CONFIGURED_FLAG_ATTR, False)


def test_shutdown_allows_reconfiguration():
    configure_logging(LoggingConfig())
    shutdown_logging()
    assert _our_handlers() == []

    configure_logging(LoggingConfig())
    assert len(_our_handlers()) == 1
