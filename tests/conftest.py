"""Pytest configuration and fixtures."""

import logging
import shutil
import tempfile
from pathlib import Path

import pytest

from folder_mirror.logging_setup import LOGGER_NAME


@pytest.fixture
def temp_dirs():
    """Create temporary source and target directories for testing."""
    temp_root = Path(tempfile.mkdtemp())
    source = temp_root / "source"
    target = temp_root / "target"
    source.mkdir()
    target.mkdir()

    yield source, target

    # Cleanup
    shutil.rmtree(temp_root, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_mirror_logger():
    """Close any handlers a test attached to the mirror logger."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_config(tmp_path):
    """Create a sample config file for testing."""
    config_path = tmp_path / "mirror.yaml"
    config_content = """
log_level: INFO
log_backup_count: 3
bootstrap: false
chunk_size: 1024
"""
    config_path.write_text(config_content)
    return config_path
