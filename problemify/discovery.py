"""
Candidate file discovery.

Walks a directory tree depth-first and collects source files to transform,
skipping ignored names (dependency directories, bundled output) entirely.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from problemify.errors import FilesystemError
from problemify.utils.config import get_settings
from problemify.utils.logging import get_logger

logger = get_logger(__name__)


def discover(
    root: Path,
    *,
    extensions: Iterable[str] | None = None,
    ignore_names: Iterable[str] | None = None,
) -> list[Path]:
    """
    Recursively collect candidate files under root.

    Args:
        root: Directory to walk
        extensions: Recognized file extensions (settings if None)
        ignore_names: Base names skipped without recursion (settings if None)

    Returns:
        Flat list of file paths, depth-first

    Raises:
        FilesystemError: root or a nested directory cannot be listed
    """
    settings = get_settings().discovery
    exts = frozenset(settings.extensions if extensions is None else extensions)
    ignored = frozenset(settings.ignore_names if ignore_names is None else ignore_names)

    found: list[Path] = []
    _walk(Path(root), exts, ignored, found)

    logger.debug("discovery_completed", root=str(root), count=len(found))
    return found


def _walk(
    directory: Path,
    extensions: frozenset[str],
    ignore_names: frozenset[str],
    found: list[Path],
) -> None:
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise FilesystemError(directory, "list", reason=e.strerror or str(e)) from e

    for entry in entries:
        if entry.name in ignore_names:
            continue

        try:
            is_dir = entry.is_dir()
        except OSError as e:
            raise FilesystemError(entry, "stat", reason=e.strerror or str(e)) from e

        if is_dir:
            _walk(entry, extensions, ignore_names, found)
        elif entry.suffix in extensions and entry.is_file():
            found.append(entry)
