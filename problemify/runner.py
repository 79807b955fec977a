"""
Run loop: discover candidate files under a root and process each one.

Files are processed synchronously in discovery order. The first
FilesystemError aborts the run; files already processed stay transformed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from problemify.discovery import discover
from problemify.markers import Mode
from problemify.processor import FileAction, FileResult, process_file
from problemify.utils.config import Settings, get_settings
from problemify.utils.logging import LogContext, ensure_logging_configured, get_logger

logger = get_logger(__name__)


@dataclass
class RunReport:
    """Summary of one run."""

    root: Path
    mode: Mode
    dry_run: bool = False
    results: list[FileResult] = field(default_factory=list)

    @property
    def deleted(self) -> list[Path]:
        return [r.path for r in self.results if r.action is FileAction.DELETED]

    @property
    def rewritten(self) -> list[Path]:
        return [r.path for r in self.results if r.action is FileAction.REWRITTEN]

    @property
    def changed(self) -> list[Path]:
        """Rewritten files whose content actually changed."""
        return [
            r.path
            for r in self.results
            if r.action is FileAction.REWRITTEN and r.changed
        ]


def resolve_root(path: str | Path, cwd: Path | None = None) -> Path:
    """Resolve a user-supplied path against the working directory.

    Absolute paths are kept as given.
    """
    path = Path(path)
    if path.is_absolute():
        return path
    return (cwd or Path.cwd()) / path


def run(
    root: Path,
    mode: Mode,
    *,
    settings: Settings | None = None,
    dry_run: bool = False,
) -> RunReport:
    """
    Transform every candidate file under root into the given variant.

    Args:
        root: Absolute root directory
        mode: Variant to produce
        settings: Settings to use (loaded if None)
        dry_run: Decide per file without mutating anything

    Returns:
        RunReport with one result per discovered file

    Raises:
        FilesystemError: on the first discovery or processing failure
    """
    ensure_logging_configured()
    if settings is None:
        settings = get_settings()

    report = RunReport(root=root, mode=mode, dry_run=dry_run)

    with LogContext(mode=mode.value, root=str(root)):
        paths = discover(
            root,
            extensions=settings.discovery.extensions,
            ignore_names=settings.discovery.ignore_names,
        )
        for path in paths:
            report.results.append(
                process_file(
                    path,
                    mode,
                    encoding=settings.processing.encoding,
                    dry_run=dry_run,
                )
            )

        logger.info(
            "run_completed",
            files=len(report.results),
            deleted=len(report.deleted),
            rewritten=len(report.rewritten),
            changed=len(report.changed),
            dry_run=dry_run,
        )

    return report
