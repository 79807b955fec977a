"""
Pytest fixtures and configuration for problemify tests.

=============================================================================
Test Classification
=============================================================================

- @pytest.mark.unit: Single function, no filesystem beyond tmp_path
  - DEFAULT: Tests without marker are auto-classified as unit

- @pytest.mark.integration: Discovery + processing + CLI over a real tree
  built under tmp_path

=============================================================================
Mock Strategy
=============================================================================

- File I/O: Use tmp_path fixture (never touch the repository tree)
- Failure injection: monkeypatch module attributes, not file permissions
  (tests may run as root)
"""

import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

# Set test environment before importing anything else
os.environ["PROBLEMIFY_CONFIG_DIR"] = str(Path(__file__).parent.parent / "config")
os.environ.pop("PROBLEMIFY_GENERAL__LOG_LEVEL", None)

from problemify.utils.config import get_settings  # noqa: E402
from problemify.utils.logging import configure_logging  # noqa: E402


def pytest_configure(config):
    """Register custom markers for test classification."""
    config.addinivalue_line("markers", "unit: Unit tests with no external dependencies")
    config.addinivalue_line(
        "markers", "integration: Tests running several components over a tmp_path tree"
    )


def pytest_collection_modifyitems(config, items):
    """Tests without an explicit classification marker are unit tests."""
    for item in items:
        has_classification = any(
            marker.name in ("unit", "integration") for marker in item.iter_markers()
        )
        if not has_classification:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(scope="session", autouse=True)
def _quiet_logging() -> None:
    """Route structlog through stdlib logging at WARNING for the whole session."""
    configure_logging(log_level="WARNING", json_format=False)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Reload settings for every test so env/YAML changes are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Build a file tree under tmp_path from {relative_path: content}.

    Content is written with newline="" so CRLF fixtures stay byte-exact.
    """

    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / "tree"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        return root

    return _make


def read_raw(path: Path) -> str:
    """Read a file without newline translation."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


@pytest.fixture
def read_file() -> Callable[[Path], str]:
    return read_raw
