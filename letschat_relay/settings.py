from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import find_dotenv, load_dotenv


DEFAULT_PORT = 5000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_BASE_URL = "https://api.anthropic.com"


@dataclass(frozen=True)
class Settings:
    """Process configuration, read once from the environment at startup.

    The model, token budget and temperature are fixed relay policy and live
    in ``relay``, not here.
    """

    anthropic_api_key: Optional[str] = None
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    anthropic_base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or None,
            port=int(os.getenv("PORT") or DEFAULT_PORT),
            host=os.getenv("HOST") or DEFAULT_HOST,
            anthropic_base_url=os.getenv("ANTHROPIC_BASE_URL") or DEFAULT_BASE_URL,
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # variables already present in the environment win over .env
    load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings.from_env()


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
