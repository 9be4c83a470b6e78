from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from sqlbind.core.cache import TemplateCache

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def template_cache() -> TemplateCache:
    """A fresh template cache, isolated from the process-wide one."""
    return TemplateCache()


@pytest.fixture(autouse=True)
def _restore_sqlbind_logger() -> Generator[None, None, None]:
    """Undo logger changes made by ``configure_logging`` during a test."""
    logger = logging.getLogger("sqlbind")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
