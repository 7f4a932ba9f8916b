# docs_translator/logging_setup.py
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logger(log_dir: Optional[Path] = None, verbose: bool = False) -> logging.Logger:
    """
    Configures the 'translator' logger, which writes:
    - to stdout
    - to <log_dir>/translation.log, if log_dir is given

    log_dir must live outside the docs output tree, otherwise it would show up
    there as a category directory.

    If the logger already has handlers it is returned as is, so repeated calls
    do not duplicate output.
    """
    logger = logging.getLogger("translator")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if logger.handlers:
        return logger

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        "%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / "translation.log"

        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

        logger.info(f"Logging to {log_path}")

    return logger
