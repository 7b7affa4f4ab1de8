from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

from .builder.classifier import DEFAULT_RELEVANCE, RelevanceMode

ROOT = Path(__file__).resolve().parents[2]


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_choice(name: str, choices: Tuple[str, ...], default: str) -> str:
    value = _env_str(name, default).lower()
    if value in choices:
        return value
    return default


def _env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return default
    items = tuple(item.strip() for item in raw.split(",") if item.strip())
    return items or default


@dataclass(frozen=True)
class Settings:
    relevance_mode: RelevanceMode = DEFAULT_RELEVANCE
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = ("*",)


def load_settings(env_file: Path | None = None) -> Settings:
    """读取环境变量（可选 .env 文件），非法值回退为默认值"""
    load_dotenv(env_file or ROOT / ".env")
    return Settings(
        relevance_mode=_env_choice(
            "RIGCHECK_RELEVANCE_MODE", ("tagged", "message"), DEFAULT_RELEVANCE
        ),
        log_level=_env_choice(
            "RIGCHECK_LOG_LEVEL",
            ("debug", "info", "warning", "error", "critical"),
            "info",
        ).upper(),
        cors_origins=_env_list("RIGCHECK_CORS_ORIGINS", ("*",)),
    )
