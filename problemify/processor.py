"""
Per-file processing.

Decides between whole-file deletion and region transformation for one
file, then performs exactly one filesystem mutation: a delete or a
full-content write.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from problemify.errors import FilesystemError
from problemify.markers import Mode, delete_directive
from problemify.transform import transform
from problemify.utils.config import get_settings
from problemify.utils.logging import get_logger

logger = get_logger(__name__)


class FileAction(str, Enum):
    """Outcome of processing one file."""

    DELETED = "deleted"
    REWRITTEN = "rewritten"


@dataclass(frozen=True)
class FileResult:
    """Result of processing one file."""

    path: Path
    action: FileAction
    changed: bool = True


def plan(content: str, mode: Mode) -> tuple[FileAction, str | None]:
    """
    Decide what happens to a file, without touching the filesystem.

    The whole-file directive is a plain prefix check on the raw content, so
    anything after the literal on the first line does not matter.

    Returns:
        (DELETED, None) or (REWRITTEN, new_content)
    """
    if content.startswith(delete_directive(mode)):
        return FileAction.DELETED, None
    return FileAction.REWRITTEN, transform(content, mode)


def process_file(
    path: Path,
    mode: Mode,
    *,
    encoding: str | None = None,
    dry_run: bool = False,
) -> FileResult:
    """
    Delete or rewrite a file for the given variant.

    Newline translation is disabled on read and write so content outside
    removed regions is preserved byte-for-byte.

    Args:
        path: File to process
        mode: Variant to produce
        encoding: Text encoding (settings if None)
        dry_run: Decide only, do not mutate

    Returns:
        FileResult describing the action

    Raises:
        FilesystemError: read, decode, delete or write failed
    """
    if encoding is None:
        encoding = get_settings().processing.encoding

    try:
        with open(path, encoding=encoding, newline="") as f:
            content = f.read()
    except OSError as e:
        raise FilesystemError(path, "read", reason=e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise FilesystemError(path, "decode", reason=str(e)) from e

    action, new_content = plan(content, mode)

    if action is FileAction.DELETED:
        if not dry_run:
            try:
                path.unlink()
            except OSError as e:
                raise FilesystemError(path, "delete", reason=e.strerror or str(e)) from e
        logger.debug("file_deleted", path=str(path), dry_run=dry_run)
        return FileResult(path=path, action=action)

    changed = new_content != content
    if not dry_run:
        try:
            with open(path, "w", encoding=encoding, newline="") as f:
                f.write(new_content or "")
        except OSError as e:
            raise FilesystemError(path, "write", reason=e.strerror or str(e)) from e
    logger.debug("file_rewritten", path=str(path), changed=changed, dry_run=dry_run)
    return FileResult(path=path, action=action, changed=changed)
