from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

VALID_ENVS = {"dev", "staging", "prod"}


@dataclass(frozen=True)
class AppConfig:
    page_size: int = 10
    log_level: str = "INFO"
    env_name: str = "dev"

    @classmethod
    def from_env(cls, env_file: str | None = ".env") -> "AppConfig":
        load_dotenv(env_file)
        raw_page_size = os.getenv("POS_PAGE_SIZE", "10").strip()
        try:
            page_size = int(raw_page_size)
        except ValueError as exc:
            raise ValueError(f"POS_PAGE_SIZE must be an integer, got {raw_page_size!r}") from exc
        config = cls(
            page_size=page_size,
            log_level=os.getenv("POS_LOG_LEVEL", "INFO").strip().upper(),
            env_name=os.getenv("POS_ENV", "dev").strip().lower(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        if self.page_size < 1:
            raise ValueError("POS_PAGE_SIZE must be >= 1")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"POS_LOG_LEVEL is not a logging level: {self.log_level}")
        if self.env_name not in VALID_ENVS:
            raise ValueError(f"POS_ENV must be one of {sorted(VALID_ENVS)}, got {self.env_name!r}")
