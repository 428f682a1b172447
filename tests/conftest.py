"""
Pytest configuration and shared fixtures for CLEN tests.
"""

import pytest

from clen.config import ClassificationConfig

SAMPLE_TEXT = b"Hello. Test123! 'Quoted sentence?'\n"


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sample_file(tmp_path):
    """Create a small text file with known contents."""
    path = tmp_path / "test_input.txt"
    path.write_bytes(SAMPLE_TEXT)
    yield path


@pytest.fixture
def full_config():
    """Config with every count enabled, literal mode."""
    return ClassificationConfig.all()


@pytest.fixture
def file_config():
    """Config with every count enabled, file-content mode."""
    return ClassificationConfig.all(file_content=True)
