"""
Pytest configuration og shared fixtures.
"""

from pathlib import Path
from typing import Callable, List

import pytest

from temp_folder_remover.dependencies import reset_singletons


@pytest.fixture(autouse=True)
def clean_singletons():
    """Automatically reset singletons before hver test."""
    reset_singletons()
    yield
    reset_singletons()


@pytest.fixture
def read_log_messages() -> Callable[[Path], List[str]]:
    """Return the message part of every 'timestamp - message' line in a log file."""

    def _read(log_file: Path) -> List[str]:
        if not log_file.exists():
            return []
        lines = log_file.read_text(encoding="utf-8").splitlines()
        return [line.split(" - ", 1)[1] for line in lines]

    return _read
