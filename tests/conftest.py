from __future__ import annotations

import sys
from typing import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """The CLI swaps loguru's handlers out; put a plain stderr sink back after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)
