import logging
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def _reset_logger() -> Generator[None, None, None]:
    """Drop handlers bound to a previous test's captured stderr."""
    yield
    logger = logging.getLogger("emoji_stripper")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
