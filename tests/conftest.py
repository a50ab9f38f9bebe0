"""Shared fixtures: a small C++ project tree and a fake toolchain."""

from pathlib import Path
import subprocess

import pytest


@pytest.fixture
def project(tmp_path: Path) -> Path:
    directory = tmp_path / "demo"
    (directory / "src").mkdir(parents=True)
    (directory / "include").mkdir()
    (directory / "include" / "demo.hpp").write_text("#pragma once\nint answer();\n")
    (directory / "src" / "a.cpp").write_text('#include "demo.hpp"\nint answer() { return 42; }\n')
    (directory / "src" / "b.cpp").write_text('#include "demo.hpp"\nint main() { return answer() - 42; }\n')
    return directory


class FakeToolchain:
    """Records every command and fails the ones containing 'fail_on'."""

    def __init__(self):
        self.commands: list[tuple[str, ...]] = []
        self.cwds: list[Path] = []
        self.fail_on: str | None = None

    def __call__(self, cmd, cwd=None, **kwargs):
        self.commands.append(tuple(cmd))
        self.cwds.append(cwd)
        returncode = 1 if self.fail_on and self.fail_on in cmd else 0
        return subprocess.CompletedProcess(cmd, returncode)


@pytest.fixture
def toolchain(monkeypatch) -> FakeToolchain:
    fake = FakeToolchain()
    monkeypatch.setattr("pybuildcpp.builder.subprocess.run", fake)
    return fake
