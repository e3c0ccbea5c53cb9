"""
Tests for logger construction
"""

import logging

from sales_api.core.logger import build_logger


def test_build_logger_is_idempotent():
    first = build_logger("sales_api.test", "DEBUG")
    second = build_logger("sales_api.test", "WARNING")

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.WARNING
    assert second.propagate is False
