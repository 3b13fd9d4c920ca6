import pytest
from pathlib import Path


@pytest.fixture
def write_words(tmp_path):
    """Write a word list to a temporary file and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
