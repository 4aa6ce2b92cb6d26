"""
Unit-suite fixtures: the package logger is left without handlers after
each test.
"""
from __future__ import annotations

import logging

import pytest

from sequencer_types import logging as slog


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger(slog.ROOT_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
