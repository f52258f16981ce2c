from __future__ import annotations

import os
from dataclasses import dataclass


def _getenv_str(name: str, default: str) -> str:
    value = os.getenv(name)
    return default if value is None else value


def _getenv_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _getenv_list(name: str, default: list[str]) -> list[str]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class ScoringConfig:
    SCI90_STRICT_ANSWERS: bool
    SCI90_LOG_LEVEL: str
    SCI90_SHARE_BASE_URL: str
    SCI90_CORS_ORIGINS: tuple[str, ...]

    def share_links_enabled(self) -> bool:
        return bool(self.SCI90_SHARE_BASE_URL.strip())


def load_config() -> ScoringConfig:
    return ScoringConfig(
        SCI90_STRICT_ANSWERS=_getenv_bool("SCI90_STRICT_ANSWERS", False),
        SCI90_LOG_LEVEL=_getenv_str("SCI90_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        SCI90_SHARE_BASE_URL=_getenv_str("SCI90_SHARE_BASE_URL", "").strip(),
        SCI90_CORS_ORIGINS=tuple(_getenv_list("SCI90_CORS_ORIGINS", ["*"])),
    )
