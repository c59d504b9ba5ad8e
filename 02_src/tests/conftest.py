"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from helpers import FakeClock, StubFormatter, StubRenderer  # noqa: E402


@pytest.fixture
def clock():
    """Deterministic clock."""
    return FakeClock()


@pytest.fixture
def formatter():
    return StubFormatter()


@pytest.fixture
def renderer():
    return StubRenderer()


@pytest.fixture
def messages(formatter, clock):
    """MessagesCollector without rich rendering."""
    from debugbar.messages import MessagesCollector

    return MessagesCollector(formatter=formatter, clock=clock)


@pytest.fixture
def rich_messages(formatter, renderer, clock):
    """MessagesCollector with rich rendering."""
    from debugbar.messages import MessagesCollector

    return MessagesCollector(formatter=formatter, renderer=renderer, clock=clock)


@pytest.fixture
def exceptions():
    """ExceptionsCollector with defaults."""
    from debugbar.exceptions import ExceptionsCollector

    return ExceptionsCollector()


@pytest.fixture
def source_file(tmp_path):
    """Factory writing a numbered source file and returning its path."""

    def _make(line_count: int, name: str = "module.py") -> Path:
        path = tmp_path / name
        path.write_text(
            "".join(f"line {i}\n" for i in range(1, line_count + 1)),
            encoding="utf-8",
        )
        return path

    return _make
