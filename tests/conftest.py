from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_rc4kit_logger():
    """Undo handlers installed by setup_logging so tests stay independent."""
    yield
    logger = logging.getLogger("rc4kit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
