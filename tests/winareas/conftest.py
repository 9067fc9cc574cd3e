from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from winareas.runtime.logging import shutdown_logging


@pytest.fixture
def restore_root_logging() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    shutdown_logging()
    root.handlers.clear()
    root.handlers.extend(handlers)
    root.setLevel(level)
