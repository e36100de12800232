"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from shapekit.models import Shape, make_shape

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_shape() -> Shape:
    """Return a shape with distinct dimensions."""
    return make_shape(3, 4, 5)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove shapekit environment overrides for the duration of a test."""
    monkeypatch.delenv("SHAPEKIT_TEXT_STYLE", raising=False)
    monkeypatch.delenv("SHAPEKIT_LOG_LEVEL", raising=False)
    return monkeypatch
