"""Environment-driven service configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

LOG_LEVEL_ENV = "SYSLOG3164_LOG_LEVEL"
MAX_LINES_ENV = "SYSLOG3164_MAX_LINES"
BASE_DIR_ENV = "SYSLOG3164_BASE_DIR"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True, slots=True)
class ServiceConfig:
    log_level: str = "INFO"
    # Hard cap on lines decoded per file request.
    max_lines: int = 5000
    # File paths handed to the server must resolve under this directory.
    base_dir: Path | None = None


def _int_env(name: str) -> int | None:
    env = os.getenv(name)
    if env is None or env == "":
        return None
    try:
        value = int(env)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value < 1:
        raise ValueError(f"{name} must be >= 1")
    return value


def resolve_service_config(cfg: ServiceConfig | None = None) -> ServiceConfig:
    """Return config with optional env overrides applied."""
    if cfg is None:
        cfg = ServiceConfig()

    level = os.getenv(LOG_LEVEL_ENV)
    if level:
        name = level.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"{LOG_LEVEL_ENV} must be a logging level name, got {level!r}")
        cfg = replace(cfg, log_level=name)

    max_lines = _int_env(MAX_LINES_ENV)
    if max_lines is not None:
        cfg = replace(cfg, max_lines=max_lines)

    base_dir = os.getenv(BASE_DIR_ENV)
    if base_dir:
        cfg = replace(cfg, base_dir=Path(base_dir).expanduser().resolve())

    return cfg


def configure_logging(cfg: ServiceConfig) -> None:
    """Configure logging on stderr at the configured level."""
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format=LOG_FORMAT,
    )
