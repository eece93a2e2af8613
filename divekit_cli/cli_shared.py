from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path


class DivekitError(Exception):
    pass


class UsageError(DivekitError):
    pass


class OpError(DivekitError):
    pass


DIVEKIT_HOME = "DIVEKIT_HOME"
DIVEKIT_LOG_LEVEL = "DIVEKIT_LOG_LEVEL"
DIVEKIT_REMOTE_PREFIX = "DIVEKIT_REMOTE_PREFIX"
DIVEKIT_DRY_RUN = "DIVEKIT_DRY_RUN"

DIVEKIT_DIR_NAME = ".divekit"
TOOLS_DIR_NAME = "tools"
DEFAULT_REMOTE_PREFIX = "https://github.com/divekit/"
DEFAULT_LOG_LEVEL = "info"
LOG_LEVELS = ("debug", "info", "warning", "error")


def _eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


@dataclass(frozen=True)
class GlobalOpts:
    home: Path
    log_level: str = DEFAULT_LOG_LEVEL
    remote_prefix: str = DEFAULT_REMOTE_PREFIX
    dry_run: bool = False

    @property
    def divekit_dir(self) -> Path:
        return self.home / DIVEKIT_DIR_NAME


def _truthy(raw: str | None) -> bool:
    return str(raw or "").strip().lower() in {"1", "true", "yes", "on"}


def _env_or_none(*names: str) -> str | None:
    for n in names:
        v = (os.environ.get(n) or "").strip()
        if v:
            return v
    return None


def _require_str(val: str | None, name: str, *, hint: str) -> str:
    v = (val or "").strip()
    if not v:
        raise UsageError(f"missing {name} ({hint})")
    return v
