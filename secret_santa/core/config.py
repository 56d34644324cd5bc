import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_path: str
    search_timeout_seconds: Optional[float] = None


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"SEARCH_TIMEOUT_SECONDS must be a number, got {raw!r}.") from None
    if timeout <= 0:
        raise ValueError("SEARCH_TIMEOUT_SECONDS must be greater than zero.")
    return timeout


def load_settings() -> Settings:
    log_level = os.getenv("LOG_LEVEL", "INFO")
    log_path = os.getenv("LOG_PATH", "logs/secret_santa.log")
    search_timeout_seconds = _parse_timeout(os.getenv("SEARCH_TIMEOUT_SECONDS"))

    if not log_level:
        raise ValueError("LOG_LEVEL must not be empty. Set it in the environment or .env file.")

    return Settings(
        log_level=log_level.upper(),
        log_path=log_path,
        search_timeout_seconds=search_timeout_seconds,
    )
