# docs_translator/translator.py
from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from .config import ProviderConfig
from .errors import (
    ConfigurationError,
    FilesystemError,
    ProviderError,
    TransportError,
)
from .llm_client import ChatCompletionClient
from .prompts import TRANSLATION_PROMPT
from .scanner import FileTask
from .stats import RunStats

logger = logging.getLogger("translator.docs")


RETRYABLE = (TransportError, ProviderError)


@dataclass
class DocumentTranslator:
    """
    Translates whole documents through an ordered list of providers.

    Each provider gets up to ``max_retries`` attempts with ``retry_delay``
    seconds between them; only then is the next provider tried. The first
    provider must have an API key. Later ones without a key are dropped.

    IO: ``translate`` is text -> text, ``translate_file`` reads the source and
    writes the destination.
    """

    providers: Sequence[ProviderConfig]
    max_retries: int = 3
    retry_delay: float = 5.0
    size_warning_chars: int = 30000
    system_prompt: str = TRANSLATION_PROMPT
    timeout: Optional[float] = None
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)

    def __post_init__(self) -> None:
        if not self.providers:
            raise ConfigurationError("No translation provider configured")
        if self.max_retries < 1:
            raise ConfigurationError(
                f"max_retries must be >= 1, got {self.max_retries}"
            )

        primary, *rest = self.providers
        if not primary.has_credential:
            raise ConfigurationError(
                f"API key for primary provider '{primary.name}' is not set"
            )

        usable: List[ProviderConfig] = [primary]
        for p in rest:
            if p.has_credential:
                usable.append(p)
            else:
                logger.warning(
                    f"[LLM] Fallback provider '{p.name}' has no API key, it will not be used"
                )

        self._clients: List[ChatCompletionClient] = [
            ChatCompletionClient(provider=p, timeout=self.timeout) for p in usable
        ]
        self._llm_time = 0.0

    @property
    def active_providers(self) -> List[ProviderConfig]:
        return [c.provider for c in self._clients]

    # -------- RETRY LOOP --------

    def _try_provider(self, client: ChatCompletionClient, text: str) -> str:
        """Up to max_retries attempts against one provider; re-raises the last error."""
        name = client.provider.name
        last_error: Optional[Exception] = None

        for attempt in range(1, self.max_retries + 1):
            logger.info(f"[LLM] {name} attempt {attempt}/{self.max_retries}")
            try:
                content, dt = client.complete(self.system_prompt, text)
            except RETRYABLE as e:
                last_error = e
                logger.warning(f"[LLM] {name} failed (attempt {attempt}): {e}")
                if attempt < self.max_retries:
                    logger.info(f"[LLM] Waiting {self.retry_delay:g}s before retry")
                    self.sleep(self.retry_delay)
                continue

            self._llm_time += dt
            return content

        assert last_error is not None
        raise last_error

    # -------- PUBLIC API --------

    def translate(self, text: str) -> str:
        """
        Translate one whole document. Raises the last TransportError /
        ProviderError when every provider is exhausted.
        """
        last_error: Optional[Exception] = None

        for idx, client in enumerate(self._clients):
            if idx > 0:
                logger.info(f"[LLM] Falling back to {client.provider.name}")
            try:
                result = self._try_provider(client, text)
            except RETRYABLE as e:
                last_error = e
                continue

            if idx > 0:
                logger.warning(
                    f"[LLM] Translated by fallback provider {client.provider.name}"
                )
            return result

        assert last_error is not None
        raise last_error

    def translate_file(self, task: FileTask, stats: Optional[RunStats] = None) -> bool:
        """
        Translate task.source_path into task.dest_path.

        Returns False when translation failed (destination left as it was).
        Filesystem problems raise FilesystemError.
        """
        text = _read_text(task)

        logger.info(f"[FILE] {task.relative_path}: {len(text)} chars")
        if len(text) > self.size_warning_chars:
            logger.warning(
                f"[FILE] {task.relative_path} is larger than {self.size_warning_chars} chars, "
                "output may be truncated by the provider token limit"
            )

        llm_time_before = self._llm_time
        try:
            translated = self.translate(text)
        except RETRYABLE as e:
            logger.error(f"[FILE] Translation failed for {task.source_path}: {e}")
            if stats is not None:
                stats.errors.append(f"{task.relative_path}: {e}")
            return False

        _write_atomic(task, translated)

        if stats is not None:
            stats.total_input_chars += len(text)
            stats.total_output_chars += len(translated)
            stats.llm_time_seconds += self._llm_time - llm_time_before
        return True


def _read_text(task: FileTask) -> str:
    """UTF-8 source text; undecodable bytes become U+FFFD with a warning."""
    try:
        raw = task.source_path.read_bytes()
    except OSError as e:
        raise FilesystemError(f"Cannot read {task.source_path}: {e}") from e
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning(
            f"[FILE] {task.relative_path} is not valid UTF-8 ({e.reason} at byte {e.start}), "
            "invalid bytes replaced"
        )
        return raw.decode("utf-8", errors="replace")


def _write_atomic(task: FileTask, content: str) -> None:
    """Write next to the destination and swap in, so a failed write keeps old output."""
    dst = task.dest_path
    tmp = dst.with_name(dst.name + ".tmp")
    try:
        dst.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(content, encoding="utf-8", newline="")
        os.replace(tmp, dst)
    except OSError as e:
        try:
            tmp.unlink()
        except FileNotFoundError:
            pass
        except OSError as cleanup_error:
            logger.warning(f"[FILE] Could not remove {tmp}: {cleanup_error}")
        raise FilesystemError(f"Cannot write {dst}: {e}") from e
