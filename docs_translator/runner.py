# docs_translator/runner.py
from __future__ import annotations

import logging
import sys
import time
from typing import Callable, List, Optional, Sequence, Tuple

from tqdm import tqdm

from .categories import write_category_files
from .config import TranslatorConfig
from .scanner import FileTask, is_stale, list_candidates
from .stats import RunStats
from .translator import DocumentTranslator

logger = logging.getLogger("translator.runner")


__all__ = ["plan", "run_batch", "run", "build_translator"]


def plan(config: TranslatorConfig, force: bool = False) -> Tuple[List[FileTask], List[FileTask]]:
    """Scan the source tree. Returns (all candidates, the stale ones)."""
    candidates = list_candidates(
        config.source_dir,
        config.output_dir,
        config.exclude_dirs,
        config.extensions,
    )
    stale = [t for t in candidates if is_stale(t, force=force)]
    logger.info(f"[SCAN] {len(stale)} of {len(candidates)} documents need translation")
    return candidates, stale


def run_batch(
    tasks: Sequence[FileTask],
    translator: DocumentTranslator,
    *,
    force: bool = False,
    file_delay: float = 5.0,
    sleep: Callable[[float], None] = time.sleep,
) -> RunStats:
    """
    Translate the stale tasks one by one, in the given order.

    Up-to-date tasks only bump skipped_files. A failed document is recorded
    and the batch goes on; FilesystemError / ConfigurationError propagate.
    """
    stats = RunStats(total_files=len(tasks))

    todo: List[FileTask] = []
    for task in tasks:
        if is_stale(task, force=force):
            todo.append(task)
        else:
            stats.skipped_files += 1
            logger.debug(f"[FILE] Up to date, skip: {task.relative_path}")

    if not todo:
        logger.info("All documents are up to date, nothing to translate")
        return stats

    use_tqdm = sys.stderr.isatty()
    progress = tqdm(todo, desc="Translating docs", unit="file", disable=not use_tqdm)

    for i, task in enumerate(progress, start=1):
        logger.info(f"[FILE] [{i}/{len(todo)}] Start: {task.source_path}")

        if translator.translate_file(task, stats=stats):
            stats.translated_files += 1
            logger.info(f"[FILE] Done:  {task.dest_path}")
        else:
            stats.failed_files += 1
            logger.error(f"[FILE] Failed: {task.source_path}")

        # rate limit between documents, not after the last one
        if i < len(todo) and file_delay > 0:
            logger.info(f"Waiting {file_delay:g}s before next document")
            sleep(file_delay)

    return stats


def build_translator(
    config: TranslatorConfig,
    sleep: Callable[[float], None] = time.sleep,
) -> DocumentTranslator:
    """Raises ConfigurationError when the primary provider has no API key."""
    translator = DocumentTranslator(
        providers=config.providers,
        max_retries=config.max_retries,
        retry_delay=config.retry_delay,
        size_warning_chars=config.size_warning_chars,
        timeout=config.request_timeout,
        sleep=sleep,
    )
    logger.info(
        "Providers: " + " → ".join(f"{p.name}({p.model})" for p in translator.active_providers)
    )
    return translator


def run(
    config: TranslatorConfig,
    *,
    force: bool = False,
    translator: Optional[DocumentTranslator] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> RunStats:
    """Full run: scan, translate what is stale, regenerate category files, log summary."""
    logger.info(f"Source: {config.source_dir}")
    logger.info(f"Output: {config.output_dir}")

    if translator is None:
        translator = build_translator(config, sleep=sleep)

    start_time = time.time()
    candidates = list_candidates(
        config.source_dir,
        config.output_dir,
        config.exclude_dirs,
        config.extensions,
    )

    stats = run_batch(
        candidates,
        translator,
        force=force,
        file_delay=config.file_delay,
        sleep=sleep,
    )

    write_category_files(config.output_dir, config.category_labels)

    stats.log_summary(logger, time.time() - start_time)
    return stats
