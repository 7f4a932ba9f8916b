from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest
import requests

from docs_translator.config import ProviderConfig, TranslatorConfig


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        self._body = body
        if text is None:
            text = json.dumps(body) if body is not None else ""
        self.text = text

    def json(self) -> Any:
        if self._body is None:
            return json.loads(self.text)
        return self._body


def ok(content: str) -> FakeResponse:
    return FakeResponse(200, {"choices": [{"message": {"content": content}}]})


def http_error(status: int = 500, message: str = "boom") -> FakeResponse:
    return FakeResponse(status, {"error": {"message": message}})


class FakePost:
    """
    Stand-in for requests.post. ``script`` maps endpoint URL to a list of
    outcomes consumed in order: FakeResponse or an exception to raise.
    """

    def __init__(self, script: Dict[str, List[Any]]):
        self.script = {url: list(items) for url, items in script.items()}
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, url: str, json: Any = None, headers: Any = None, timeout: Any = None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        outcomes = self.script.get(url)
        if not outcomes:
            raise AssertionError(f"unexpected call to {url}")
        outcome = outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def urls(self) -> List[str]:
        return [c["url"] for c in self.calls]


@pytest.fixture
def primary() -> ProviderConfig:
    return ProviderConfig(
        name="deepseek",
        base_url="https://primary.test",
        model="deepseek-chat",
        api_key="sk-primary",
        temperature=1.3,
    )


@pytest.fixture
def fallback() -> ProviderConfig:
    return ProviderConfig(
        name="openai",
        base_url="https://fallback.test",
        model="gpt-4o-mini",
        api_key="sk-fallback",
    )


@pytest.fixture
def install_post(monkeypatch) -> Callable[[Dict[str, List[Any]]], FakePost]:
    def _install(script: Dict[str, List[Any]]) -> FakePost:
        fake = FakePost(script)
        monkeypatch.setattr(requests, "post", fake)
        return fake

    return _install


@pytest.fixture
def sleeps() -> List[float]:
    return []


@pytest.fixture
def docs_tree(tmp_path: Path) -> Dict[str, Path]:
    src = tmp_path / "docs"
    out = tmp_path / "i18n" / "zh" / "current"
    src.mkdir()
    return {"root": tmp_path, "src": src, "out": out}


@pytest.fixture
def config(docs_tree, primary, fallback) -> TranslatorConfig:
    return TranslatorConfig(
        source_dir=docs_tree["src"],
        output_dir=docs_tree["out"],
        log_dir=None,
        primary=primary,
        fallback=fallback,
        max_retries=3,
        retry_delay=5.0,
        file_delay=5.0,
    )


def write(path: Path, text: str, mtime: Optional[float] = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture(autouse=True)
def reset_translator_logger():
    yield
    logger = logging.getLogger("translator")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
