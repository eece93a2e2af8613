"""Resolve global options from flags, environment variables and defaults."""
from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

from .cli_shared import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_REMOTE_PREFIX,
    DIVEKIT_DRY_RUN,
    DIVEKIT_HOME,
    DIVEKIT_LOG_LEVEL,
    DIVEKIT_REMOTE_PREFIX,
    LOG_LEVELS,
    GlobalOpts,
    UsageError,
    _env_or_none,
    _truthy,
)


def _bootstrap_env() -> None:
    # Discover and load .env without overriding already-exported values.
    load_dotenv()


def _normalize_prefix(raw: str) -> str:
    prefix = raw.strip()
    if not prefix.endswith("/"):
        prefix += "/"
    return prefix


def _normalize_log_level(raw: str) -> str:
    level = raw.strip().lower()
    if level == "warn":
        level = "warning"
    if level not in LOG_LEVELS:
        raise UsageError(f"invalid log level {raw!r} (expected one of: {', '.join(LOG_LEVELS)})")
    return level


def _resolve_home(raw: str | None) -> Path:
    if not raw:
        return Path.cwd()
    home = Path(raw).expanduser()
    if not home.is_dir():
        raise UsageError(f"home directory does not exist: {home}")
    return home


def load_settings(
    home: str | None = None,
    log_level: str | None = None,
    dry_run: bool | None = None,
) -> GlobalOpts:
    """Build GlobalOpts; explicit arguments win over DIVEKIT_* env vars."""
    resolved_home = _resolve_home(home or _env_or_none(DIVEKIT_HOME))
    resolved_level = _normalize_log_level(
        log_level or _env_or_none(DIVEKIT_LOG_LEVEL) or DEFAULT_LOG_LEVEL
    )
    prefix = _normalize_prefix(_env_or_none(DIVEKIT_REMOTE_PREFIX) or DEFAULT_REMOTE_PREFIX)
    if dry_run is None or not dry_run:
        dry_run = _truthy(_env_or_none(DIVEKIT_DRY_RUN))
    return GlobalOpts(
        home=resolved_home,
        log_level=resolved_level,
        remote_prefix=prefix,
        dry_run=bool(dry_run),
    )
