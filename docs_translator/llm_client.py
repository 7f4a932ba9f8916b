# docs_translator/llm_client.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import requests  # type: ignore

from .config import ProviderConfig
from .errors import ProviderError, TransportError

logger = logging.getLogger("translator.llm")


def _error_message(resp: requests.Response) -> str:
    """Message from an OpenAI-style error envelope, or the head of the raw body."""
    try:
        data = resp.json()
    except ValueError:
        return resp.text[:400]
    if isinstance(data, dict):
        err = data.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
        if isinstance(err, str) and err:
            return err
    return resp.text[:400]


@dataclass
class ChatCompletionClient:
    """
    OpenAI-compatible /v1/chat/completions client for a single provider
    (DeepSeek, OpenAI, anything speaking the same protocol).
    """

    provider: ProviderConfig
    # None = whatever requests does by default (no timeout)
    timeout: Optional[float] = None

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.provider.api_key}",
        }

    def complete(self, system_prompt: str, user_prompt: str) -> Tuple[str, float]:
        payload: Dict[str, Any] = {
            "model": self.provider.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": self.provider.temperature,
            "max_tokens": self.provider.max_tokens,
        }

        url = self.provider.endpoint
        logger.info(
            f"[LLM] {self.provider.name} call → {url} model={self.provider.model}, "
            f"user_prompt_len={len(user_prompt)}"
        )

        t0 = time.time()
        try:
            resp = requests.post(
                url, json=payload, headers=self._headers(), timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"{self.provider.name} request failed: {e}") from e
        dt = time.time() - t0

        logger.info(
            f"[LLM] {self.provider.name} response HTTP {resp.status_code} in {dt:.2f}s"
        )

        if not 200 <= resp.status_code < 300:
            raise ProviderError(
                f"{self.provider.name} error HTTP {resp.status_code}: "
                f"{_error_message(resp)}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise ProviderError(
                f"{self.provider.name} returned non-JSON body: {resp.text[:400]}",
                status_code=resp.status_code,
            ) from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(
                f"Unexpected {self.provider.name} response format: {e!r}, body={str(data)[:400]}",
                status_code=resp.status_code,
            ) from e

        if not content:
            raise ProviderError(
                f"{self.provider.name} returned an empty completion",
                status_code=resp.status_code,
            )

        return content, dt
