from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from pathlib import Path

import pytest


@dataclass
class FakeGit:
    calls: list[list[str]] = field(default_factory=list)
    failing: set[str] = field(default_factory=set)

    def run(self, cmd, **kwargs):
        del kwargs
        cmd = list(cmd)
        self.calls.append(cmd)
        url, target = cmd[3], cmd[4]
        remote_name = url.rsplit("/", 1)[-1][: -len(".git")]
        if remote_name in self.failing:
            return subprocess.CompletedProcess(cmd, 128, stdout="", stderr="fatal: repository not found")
        Path(target).mkdir(parents=True)
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")


@pytest.fixture
def fake_git(monkeypatch) -> FakeGit:
    """Replace subprocess.run for git_cli; clones just create the target directory."""
    fake = FakeGit()
    monkeypatch.setattr("divekit_cli.git_cli.subprocess.run", fake.run)
    return fake


@pytest.fixture(autouse=True)
def _clean_divekit_env(monkeypatch):
    for name in ("DIVEKIT_HOME", "DIVEKIT_LOG_LEVEL", "DIVEKIT_REMOTE_PREFIX", "DIVEKIT_DRY_RUN"):
        monkeypatch.delenv(name, raising=False)
