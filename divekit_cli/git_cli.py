"""GitCli: clone divekit repositories into the hidden state directory.

All git operations use :func:`subprocess.run`; no GitPython dependency.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .cli_shared import (
    DEFAULT_REMOTE_PREFIX,
    DIVEKIT_DIR_NAME,
    TOOLS_DIR_NAME,
    _require_str,
)


class GitCli:
    """Run ``git clone`` against a remote prefix and remember failures.

    Parameters
    ----------
    prefix:
        Base URL the repository identifiers are appended to.
    divekit_dir:
        Hidden state directory clones are placed into.
    logger:
        Logger receiving command traces.
    dry_run:
        If *True*, log the commands instead of running them.
    """

    def __init__(
        self,
        prefix: str | None = None,
        *,
        divekit_dir: str | Path = DIVEKIT_DIR_NAME,
        logger: logging.Logger | None = None,
        dry_run: bool = False,
    ) -> None:
        self.prefix = prefix or DEFAULT_REMOTE_PREFIX
        self.divekit_dir = Path(divekit_dir)
        self.log = logger or logging.getLogger(__name__)
        self.dry_run = dry_run
        self.errors_occurred = False
        self.failed_clones: list[str] = []

    def clone_source(self, remote_name: str) -> str:
        return f"{self.prefix}{remote_name}.git"

    def clone_target(self, local_name: str, is_tool: bool = False) -> Path:
        if is_tool:
            return self.divekit_dir / TOOLS_DIR_NAME / local_name
        return self.divekit_dir / local_name

    def clone_command(self, remote_name: str, local_name: str, is_tool: bool = False) -> list[str]:
        return [
            "git",
            "clone",
            "-q",
            self.clone_source(remote_name),
            str(self.clone_target(local_name, is_tool)),
        ]

    def clone(self, remote_name: str, local_name: str, is_tool: bool = False) -> bool:
        """Clone ``<prefix><remote_name>.git`` into the state directory.

        Returns whether this call succeeded. Any failure also sets
        :attr:`errors_occurred`, which is never reset afterwards.
        """
        remote_name = _require_str(remote_name, "remote name", hint="repository identifier")
        local_name = _require_str(local_name, "local name", hint="destination directory")
        cmd = self.clone_command(remote_name, local_name, is_tool)

        if self.dry_run:
            self.log.info("dry run, skipping shell command: %s", " ".join(cmd))
            return True

        self.log.debug("exec shell command: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
            returncode = result.returncode
            stderr = (result.stderr or "").strip()
        except OSError as e:
            returncode = -1
            stderr = str(e)

        successful = returncode == 0
        if not successful:
            self.log.warning("git clone of %s failed (rc=%s): %s", remote_name, returncode, stderr)
            self.errors_occurred = True
            self.failed_clones.append(remote_name)
        return successful
