from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixtures import ARROW_RIGHT, BELL, write_icons


@pytest.fixture
def optimized(tmp_path: Path) -> Path:
    root = tmp_path / "optimized"
    write_icons(
        root / "icons",
        {
            "arrow-right.svg": ARROW_RIGHT,
            "bell.svg": BELL,
            "bell-old.svg": BELL,
        },
    )
    return root
