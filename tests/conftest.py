from __future__ import annotations

import subprocess
from typing import List, Set

import pytest

from installarch.lib import command


class CommandRecorder:
    """Stands in for subprocess.run; every argv is recorded, nothing is executed."""

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.inputs: List[str] = []
        self.failing: Set[str] = set()

    def fail_on(self, prefix: str) -> None:
        self.failing.add(prefix)

    def __call__(self, argv, **kwargs) -> subprocess.CompletedProcess:
        argv = list(argv)
        self.calls.append(argv)
        if kwargs.get("input") is not None:
            self.inputs.append(kwargs["input"])
        line = " ".join(argv)
        rc = 1 if any(line.startswith(p) for p in self.failing) else 0
        return subprocess.CompletedProcess(argv, rc, stdout="", stderr="boom" if rc else "")

    def programs(self) -> List[str]:
        return [c[0] for c in self.calls]

    def ran(self, prefix: str) -> bool:
        return any(" ".join(c).startswith(prefix) for c in self.calls)


@pytest.fixture
def commands(monkeypatch) -> CommandRecorder:
    recorder = CommandRecorder()
    monkeypatch.setattr(command.subprocess, "run", recorder)
    return recorder
