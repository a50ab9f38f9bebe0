from pathlib import Path

import pytest
from returns.pipeline import is_successful
from returns.unsafe import unsafe_perform_io

from pybuildcpp.args import BuildConfiguration
from pybuildcpp.builder import build_bin
from pybuildcpp.context import context_load
from pybuildcpp.errors import ToolInvocationError


def load(project: Path, profile="debug", artifact="executable"):
    return unsafe_perform_io(
        context_load(project, BuildConfiguration(profile, artifact)).unwrap()
    )


@pytest.mark.parametrize("artifact", ["executable", "dynamic"])
def test_single_invocation(project, toolchain, artifact):
    context = load(project, "release", artifact)

    result = build_bin(context)

    assert is_successful(result)
    assert unsafe_perform_io(result.unwrap()) == context.artifact
    assert len(toolchain.commands) == 1
    assert toolchain.cwds == [project]
    assert (project / "build" / "release").is_dir()


def test_static_compiles_each_source_then_archives(project, toolchain):
    result = build_bin(load(project, "debug", "static"))

    assert is_successful(result)
    assert [cmd[0] for cmd in toolchain.commands] == ["g++", "g++", "ar"]
    assert toolchain.commands[-1] == (
        "ar",
        "rcs",
        "build/debug/libdemo.a",
        "build/debug/a.o",
        "build/debug/b.o",
    )


def test_static_stops_at_first_failing_compile(project, toolchain):
    toolchain.fail_on = "src/a.cpp"

    result = build_bin(load(project, "debug", "static"))

    assert not is_successful(result)
    error = unsafe_perform_io(result.failure())
    assert isinstance(error, ToolInvocationError)
    assert error.returncode == 1
    assert "src/a.cpp" in error.command
    assert len(toolchain.commands) == 1
    assert not any(cmd[0] == "ar" for cmd in toolchain.commands)


def test_static_never_archives_when_last_compile_fails(project, toolchain):
    toolchain.fail_on = "src/b.cpp"

    result = build_bin(load(project, "debug", "static"))

    assert not is_successful(result)
    assert [cmd[0] for cmd in toolchain.commands] == ["g++", "g++"]
    assert not (project / "build" / "debug" / "libdemo.a").exists()


def test_static_replaces_existing_archive(project, toolchain):
    archive = project / "build" / "debug" / "libdemo.a"
    archive.parent.mkdir(parents=True)
    archive.write_text("stale")

    assert is_successful(build_bin(load(project, "debug", "static")))
    assert not archive.exists()


def test_commands_are_printed_before_running(project, toolchain, capsys):
    build_bin(load(project, "release", "dynamic"))

    out = capsys.readouterr().out
    assert "[pybuildcpp] building 'demo' (release, dynamic)" in out
    assert "g++ -O3 -DNDEBUG" in out
    assert "-shared -o build/release/libdemo.so" in out


def test_failing_link(project, toolchain):
    toolchain.fail_on = "-static"

    result = build_bin(load(project))

    assert not is_successful(result)
    assert isinstance(unsafe_perform_io(result.failure()), ToolInvocationError)


def test_missing_compiler(project, monkeypatch):
    def missing(cmd, cwd=None, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr("pybuildcpp.builder.subprocess.run", missing)

    result = build_bin(load(project))

    error = unsafe_perform_io(result.failure())
    assert isinstance(error, ToolInvocationError)
    assert error.returncode is None
    assert "g++" in str(error)


def test_empty_source_set_is_reported(tmp_path, toolchain, capsys):
    (tmp_path / "src").mkdir()

    build_bin(load(tmp_path, "debug", "static"))

    assert "no source files found" in capsys.readouterr().err
    assert [cmd[0] for cmd in toolchain.commands] == ["ar"]


def test_compiler_that_cannot_be_executed(project, monkeypatch):
    def not_executable(cmd, cwd=None, **kwargs):
        raise PermissionError(13, "Permission denied", cmd[0])

    monkeypatch.setattr("pybuildcpp.builder.subprocess.run", not_executable)

    error = unsafe_perform_io(build_bin(load(project)).failure())

    assert isinstance(error, ToolInvocationError)
    assert error.returncode is None


def test_compiler_path_is_a_plain_file(project):
    compiler = project / "gxx"
    compiler.write_text("not a program")
    compiler.chmod(0o644)
    (project / "pybuildcpp.toml").write_text(f'[project]\ncxx = "{compiler}"\n')

    error = unsafe_perform_io(build_bin(load(project)).failure())

    assert isinstance(error, ToolInvocationError)
    assert "could not be started" in str(error)
