from __future__ import annotations

import argparse
import enum
import logging

from .cli_shared import TOOLS_DIR_NAME, GlobalOpts, OpError
from .git_cli import GitCli
from .visuals import CliVisuals

CONFIG_REPO = ("divekit-config", "config")
ACCESS_MANAGER_REPO = ("Access-Manager-2.0", "access-manager")

ALREADY_INITIALIZED_MESSAGE = "Could not initialize Divekit."
CLONE_FAILED_MESSAGE = "Errors occurred while initializing pls contact your local admin."
SUCCESS_MESSAGE = "Divekit successfully initialized"


class AlreadyInitializedError(OpError):
    pass


class CloneError(OpError):
    pass


class ScaffoldError(OpError):
    pass


class InitMode(enum.Enum):
    STANDARD = "standard"
    # Accepted but scaffolds like STANDARD until an advanced profile exists.
    ADVANCED = "advanced"


def _init_mode(args: argparse.Namespace) -> InitMode:
    return InitMode.ADVANCED if getattr(args, "advanced", False) else InitMode.STANDARD


def _scaffold(g: GlobalOpts, *, mode: InitMode, logger: logging.Logger) -> None:
    tools_dir = g.divekit_dir / TOOLS_DIR_NAME
    if g.dry_run:
        logger.info("dry run, skipping creation of %s and %s", g.divekit_dir, tools_dir)
        return
    logger.debug("creating %s layout in %s", mode.value, g.divekit_dir)
    for path in (g.divekit_dir, tools_dir):
        try:
            path.mkdir()
        except OSError as e:
            logger.error("could not create %s: %s", path, e)
            raise ScaffoldError(f"Could not create {path}: {e.strerror or e}") from e


def _populate(git: GitCli) -> None:
    git.clone(*CONFIG_REPO)
    git.clone(*ACCESS_MANAGER_REPO, is_tool=True)


def cmd_init(
    args: argparse.Namespace,
    g: GlobalOpts,
    *,
    visuals: CliVisuals,
    logger: logging.Logger,
    git: GitCli | None = None,
) -> int:
    if g.divekit_dir.exists():
        logger.error("%s directory already existing.", g.divekit_dir.name)
        raise AlreadyInitializedError(ALREADY_INITIALIZED_MESSAGE)

    mode = _init_mode(args)
    if mode is InitMode.STANDARD:
        logger.info("Initialize with standard configuration")
    else:
        logger.info("Advanced configuration requested; using the standard layout")

    _scaffold(g, mode=mode, logger=logger)

    if git is None:
        git = GitCli(
            g.remote_prefix,
            divekit_dir=g.divekit_dir,
            logger=logger.getChild("git"),
            dry_run=g.dry_run,
        )
    _populate(git)

    if git.errors_occurred:
        logger.debug("failed clones: %s", ", ".join(git.failed_clones))
        raise CloneError(CLONE_FAILED_MESSAGE)

    visuals.print_success(SUCCESS_MESSAGE)
    return 0
