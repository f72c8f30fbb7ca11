from __future__ import annotations

import sys

import pytest
from loguru import logger

from stylegate.rules import RuleRegistry, default_registry

logger.remove()
logger.add(sys.stderr, format="{level} {message}", level="DEBUG")


@pytest.fixture()
def registry() -> RuleRegistry:
    return default_registry()
