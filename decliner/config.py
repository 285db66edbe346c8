from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from decliner.constants import DEFAULT_CLEANED_FILE, DEFAULT_LOG_LEVEL, DEFAULT_OUTFILE


class ConfigError(ValueError):
    """Raised when environment configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    default_outfile: str = DEFAULT_OUTFILE
    cleaned_file: str = DEFAULT_CLEANED_FILE

    def safe_log_values(self) -> dict[str, str]:
        return {
            "log_level": self.log_level,
            "default_outfile": self.default_outfile,
            "cleaned_file": self.cleaned_file,
        }


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper() or DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown log level in DECLINER_LOG_LEVEL: {raw}")
    return level


def _path_or_default(name: str, default: str) -> str:
    return os.getenv(name, default).strip() or default


def load_settings() -> Settings:
    load_dotenv(override=False)
    return Settings(
        log_level=_parse_log_level(os.getenv("DECLINER_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        default_outfile=_path_or_default("DECLINER_DEFAULT_OUTFILE", DEFAULT_OUTFILE),
        cleaned_file=_path_or_default("DECLINER_CLEANED_FILE", DEFAULT_CLEANED_FILE),
    )
