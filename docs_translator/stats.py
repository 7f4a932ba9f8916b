# docs_translator/stats.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List
import logging


@dataclass
class RunStats:
    total_files: int = 0
    translated_files: int = 0
    skipped_files: int = 0
    failed_files: int = 0

    total_input_chars: int = 0
    total_output_chars: int = 0

    llm_time_seconds: float = 0.0
    errors: List[str] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return self.failed_files > 0

    def log_summary(self, logger: logging.Logger, wall_time: float) -> None:
        logger.info("-------------- TRANSLATION SUMMARY --------------")
        logger.info(f"Total documents:      {self.total_files}")
        logger.info(f"Translated:           {self.translated_files}")
        logger.info(f"Skipped (up to date): {self.skipped_files}")
        logger.info(f"Failed:               {self.failed_files}")
        logger.info(f"Total input chars:    {self.total_input_chars}")
        logger.info(f"Total output chars:   {self.total_output_chars}")
        logger.info(f"LLM time (s):         {self.llm_time_seconds:.2f}")
        logger.info(f"Wall time (s):        {wall_time:.2f}")

        if self.errors:
            logger.warning("Errors encountered:")
            for e in self.errors:
                logger.warning(f"  {e}")
