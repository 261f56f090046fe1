import logging
from collections.abc import Iterator

import pytest

from fast_hash.core.logging_setup import JsonFormatter


@pytest.fixture(autouse=True)
def _reset_json_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, JsonFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
