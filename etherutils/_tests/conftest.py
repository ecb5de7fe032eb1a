from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from etherutils.util.config import create_default_etherutils_config


@pytest.fixture(scope="function")
def tmp_etherutils_root(tmp_path: Path) -> Path:
    """
    Create a temp directory and populate it with an empty etherutils_root directory.
    """
    path: Path = tmp_path / "etherutils_root"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture(scope="function")
def root_path_populated_with_config(tmp_etherutils_root: Path) -> Path:
    """
    Create a temp etherutils_root directory and populate it with a default config.yaml.
    Returns the etherutils_root path.
    """
    root_path: Path = tmp_etherutils_root
    create_default_etherutils_config(root_path)
    return root_path


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    # commands install handlers on the root logger, keep them from leaking between tests
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    handler_levels = {handler: handler.level for handler in handlers}
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler, handler_level in handler_levels.items():
        handler.setLevel(handler_level)
    root_logger.setLevel(level)
