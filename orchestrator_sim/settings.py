from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger


# Load env from the project root, then the working directory
here = Path(__file__).resolve().parents[1]
for env_path in (here / ".env", Path.cwd() / ".env"):
    if env_path.is_file():
        load_dotenv(dotenv_path=str(env_path), override=False)
        break


DEFAULT_TIME_SCALE = 1.0
DEFAULT_GREETING_DELAY_MS = 1000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    time_scale: float = DEFAULT_TIME_SCALE
    greeting_delay_ms: int = DEFAULT_GREETING_DELAY_MS
    log_level: str = DEFAULT_LOG_LEVEL


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"settings_invalid | {name}={raw!r} is not a number; using {default}")
        return default
    if value <= 0:
        logger.warning(f"settings_invalid | {name}={raw!r} must be > 0; using {default}")
        return default
    return value


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"settings_invalid | {name}={raw!r} is not an integer; using {default}")
        return default
    if value < 0:
        logger.warning(f"settings_invalid | {name}={raw!r} must be >= 0; using {default}")
        return default
    return value


def load_settings() -> Settings:
    """Read settings from the environment.

    Env vars:
      - ORCHESTRATOR_TIME_SCALE (optional; default 1.0, 0.5 plays twice as fast)
      - ORCHESTRATOR_GREETING_DELAY_MS (optional; default 1000)
      - ORCHESTRATOR_LOG_LEVEL (optional; default INFO)
    """
    return Settings(
        time_scale=_float_env("ORCHESTRATOR_TIME_SCALE", DEFAULT_TIME_SCALE),
        greeting_delay_ms=_int_env("ORCHESTRATOR_GREETING_DELAY_MS", DEFAULT_GREETING_DELAY_MS),
        log_level=(os.getenv("ORCHESTRATOR_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def configure_logging(level: str | None = None) -> None:
    logger.remove()
    logger.add(
        sys.stdout,
        level=(level or get_settings().log_level),
        colorize=True,
        format="{time:HH:mm:ss} | {level} | {message}",
    )
