"""Shared pytest fixtures for minicalc tests."""

from __future__ import annotations

import io

import pytest
from rich.console import Console


@pytest.fixture
def recording_console() -> Console:
    """Return a plain-text console writing into an in-memory buffer.

    Read what was printed with ``console.file.getvalue()``.
    """
    return Console(file=io.StringIO(), width=120, color_system=None)
