from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from docs_translator.config import TranslatorConfig
from docs_translator.errors import ConfigurationError, FilesystemError
from docs_translator.logging_setup import setup_logger
from docs_translator.runner import plan, run


EPILOG = """\
examples:
  translate_docs.py              translate documents that changed
  translate_docs.py --force      re-translate every document
  translate_docs.py --dry-run    only list documents that would be translated
"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Translate the Docusaurus docs tree into Chinese with an "
            "OpenAI-compatible chat API (DeepSeek, OpenAI as fallback)."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Re-translate all documents, even up-to-date ones.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only list documents that need translation. No API calls, no writes.",
    )
    parser.add_argument(
        "--source-dir",
        default=None,
        help="Source docs directory (default: $TRANSLATE_SOURCE_DIR or docs).",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help=(
            "Output directory for translated docs (default: $TRANSLATE_OUTPUT_DIR "
            "or i18n/zh/docusaurus-plugin-content-docs/current)."
        ),
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Directory for translation.log (default: $TRANSLATE_LOG_DIR or .translation_logs).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Debug logging.",
    )
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> TranslatorConfig:
    config = TranslatorConfig.from_env()
    if args.source_dir:
        config.source_dir = Path(args.source_dir)
    if args.output_dir:
        config.output_dir = Path(args.output_dir)
    if args.log_dir:
        config.log_dir = Path(args.log_dir)
    return config


def dry_run(config: TranslatorConfig, force: bool, logger: logging.Logger) -> int:
    _, stale = plan(config, force=force)
    logger.info(f"Documents to translate ({len(stale)}):")
    for i, task in enumerate(stale, start=1):
        logger.info(f"{i}. {task.source_path} -> {task.dest_path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = load_config(args)
    except ConfigurationError as e:
        setup_logger(None, verbose=args.verbose).error(f"Configuration error: {e}")
        return 1

    # dry run writes nothing, not even the log file
    logger = setup_logger(
        None if args.dry_run else config.log_dir,
        verbose=args.verbose,
    )

    try:
        if args.dry_run:
            logger.info("Dry run: listing documents only")
            return dry_run(config, args.force, logger)

        if args.force:
            logger.info("Force mode: every document is treated as stale")

        stats = run(config, force=args.force)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except (FilesystemError, OSError) as e:
        logger.error(f"Filesystem error, run aborted: {e}")
        return 1

    if stats.has_failures:
        logger.warning(
            f"{stats.failed_files} document(s) failed to translate, check the log and rerun"
        )
        return 1

    logger.info("All documents translated")
    return 0


if __name__ == "__main__":
    sys.exit(main())
