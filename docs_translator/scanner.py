# docs_translator/scanner.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from .errors import FilesystemError

logger = logging.getLogger("translator.scanner")


__all__ = ["FileTask", "list_candidates", "is_stale"]


@dataclass(frozen=True)
class FileTask:
    source_path: Path
    dest_path: Path
    relative_path: Path


def _walk(
    root: Path,
    rel: Path,
    excluded: frozenset,
    extensions: frozenset,
) -> Iterable[Path]:
    # sorted: traversal order = processing order, must not depend on the fs
    for entry in sorted((root / rel).iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            if entry.name in excluded:
                logger.debug(f"[SCAN] Skip excluded dir: {rel / entry.name}")
                continue
            yield from _walk(root, rel / entry.name, excluded, extensions)
        elif entry.is_file() and entry.suffix in extensions:
            yield rel / entry.name


def list_candidates(
    source_root: Path,
    output_root: Path,
    excluded_dirs: Iterable[str],
    allowed_extensions: Iterable[str],
) -> List[FileTask]:
    """
    All translatable documents under source_root, in traversal order.

    Directories whose *name* is in excluded_dirs are skipped at any depth.
    Extensions are matched case-sensitively (".md" does not match "README.MD").
    The destination is the same relative path re-rooted under output_root.
    """
    source_root = Path(source_root)
    output_root = Path(output_root)
    excluded = frozenset(excluded_dirs)
    extensions = frozenset(allowed_extensions)

    if not source_root.is_dir():
        raise FilesystemError(f"Source directory does not exist: {source_root}")

    tasks = [
        FileTask(
            source_path=source_root / rel,
            dest_path=output_root / rel,
            relative_path=rel,
        )
        for rel in _walk(source_root, Path(), excluded, extensions)
    ]
    logger.info(f"[SCAN] Found {len(tasks)} documents under {source_root}")
    return tasks


def is_stale(task: FileTask, force: bool = False) -> bool:
    """
    True if the translation is missing or older than its source.
    force=True makes every task stale.
    """
    if force:
        return True
    if not task.dest_path.exists():
        return True
    return task.source_path.stat().st_mtime > task.dest_path.stat().st_mtime
