from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.go_builder import GoSourceBuilder


@pytest.fixture
def go_builder(tmp_path: Path) -> GoSourceBuilder:
    """Provide a Go source writer rooted at the pytest tmp_path."""
    return GoSourceBuilder(tmp_path)
