"""Configuration for the docs translator, loaded from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Tuple

from .errors import ConfigurationError


DEFAULT_SOURCE_DIR = "docs"
DEFAULT_OUTPUT_DIR = "i18n/zh/docusaurus-plugin-content-docs/current"
DEFAULT_LOG_DIR = ".translation_logs"

# Category directory name -> sidebar label in the Chinese docs.
DEFAULT_CATEGORY_LABELS: Dict[str, str] = {
    "audio": "音频编解码器",
    "colorimetry": "色彩学",
    "data": "数据压缩",
    "encoders": "编码器",
    "encoders_hw": "硬件编码器",
    "filtering": "滤镜处理",
    "images": "图像格式",
    "introduction": "介绍",
    "metrics": "质量评估指标",
    "subtitles": "字幕",
    "utilities": "实用工具",
    "video": "视频编解码器",
}


@dataclass(frozen=True)
class ProviderConfig:
    """One OpenAI-compatible chat-completion endpoint."""

    name: str
    base_url: str
    model: str
    api_key: str = ""
    api_path: str = "/v1/chat/completions"
    temperature: float = 0.1
    max_tokens: int = 8000

    @property
    def endpoint(self) -> str:
        return self.base_url.rstrip("/") + self.api_path

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    def __repr__(self) -> str:
        # never leak the key into logs
        return (
            f"ProviderConfig(name={self.name!r}, endpoint={self.endpoint!r}, "
            f"model={self.model!r})"
        )


def _deepseek_from_env() -> ProviderConfig:
    return ProviderConfig(
        name="deepseek",
        base_url=os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com"),
        model=os.getenv("DEEPSEEK_MODEL", "deepseek-chat"),
        api_key=os.getenv("DEEPSEEK_API_KEY", ""),
        temperature=1.3,
        max_tokens=8000,
    )


def _openai_from_env() -> ProviderConfig:
    return ProviderConfig(
        name="openai",
        base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com"),
        model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        api_key=os.getenv("OPENAI_API_KEY", ""),
        temperature=0.1,
        max_tokens=8000,
    )


def _env_number(name: str, default: str, kind=float):
    raw = os.getenv(name, default)
    try:
        return kind(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class TranslatorConfig:
    source_dir: Path = Path(DEFAULT_SOURCE_DIR)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    log_dir: Optional[Path] = Path(DEFAULT_LOG_DIR)

    extensions: Tuple[str, ...] = (".md", ".mdx")
    exclude_dirs: FrozenSet[str] = frozenset({"zh"})

    primary: ProviderConfig = field(default_factory=_deepseek_from_env)
    fallback: Optional[ProviderConfig] = field(default_factory=_openai_from_env)

    max_retries: int = 3
    retry_delay: float = 5.0
    file_delay: float = 5.0
    # Documents above this size are only warned about, never split.
    size_warning_chars: int = 30000
    # Per-request HTTP timeout in seconds; None leaves requests' default (no timeout).
    request_timeout: Optional[float] = None

    category_labels: Dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_CATEGORY_LABELS)
    )

    @property
    def providers(self) -> List[ProviderConfig]:
        """Providers in the order they are tried."""
        return [p for p in (self.primary, self.fallback) if p is not None]

    @classmethod
    def from_env(cls) -> "TranslatorConfig":
        """Load configuration from environment variables."""
        deepseek = _deepseek_from_env()
        openai = _openai_from_env()

        preferred = os.getenv("TRANSLATE_PREFERRED_API", "deepseek").lower()
        if preferred == "openai":
            primary, fallback = openai, deepseek
        elif preferred == "deepseek":
            primary, fallback = deepseek, openai
        else:
            raise ConfigurationError(
                f"TRANSLATE_PREFERRED_API must be 'deepseek' or 'openai', got {preferred!r}"
            )

        log_dir = os.getenv("TRANSLATE_LOG_DIR", DEFAULT_LOG_DIR)

        return cls(
            source_dir=Path(os.getenv("TRANSLATE_SOURCE_DIR", DEFAULT_SOURCE_DIR)),
            output_dir=Path(os.getenv("TRANSLATE_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)),
            log_dir=Path(log_dir) if log_dir else None,
            primary=primary,
            fallback=fallback,
            max_retries=_env_number("TRANSLATE_MAX_RETRIES", "3", int),
            retry_delay=_env_number("TRANSLATE_RETRY_DELAY", "5", float),
            file_delay=_env_number("TRANSLATE_FILE_DELAY", "5", float),
            request_timeout=(
                _env_number("TRANSLATE_REQUEST_TIMEOUT", "")
                if os.getenv("TRANSLATE_REQUEST_TIMEOUT")
                else None
            ),
        )
