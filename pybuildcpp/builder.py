from collections.abc import Iterable
from functools import reduce
from pathlib import Path
import shlex
import subprocess
import sys

from returns.io import IOFailure, IOResultE, IOSuccess

from pybuildcpp.compiler import CompileCommand
from pybuildcpp.context import BuildContext
from pybuildcpp.errors import FilesystemWriteError, ToolInvocationError
from pybuildcpp.files import files_ensure


def _build_command_run(cmd: CompileCommand, cwd: Path) -> IOResultE[Path]:
    print(shlex.join(cmd.command), flush=True)
    try:
        res = subprocess.run(cmd.command, cwd=cwd)
    except OSError:
        return IOFailure(ToolInvocationError(cmd.command, None))
    if res.returncode != 0:
        return IOFailure(ToolInvocationError(cmd.command, res.returncode))
    return IOSuccess(cmd.output_path)


def _build_command_run_all(
    cmds: Iterable[CompileCommand], cwd: Path
) -> IOResultE[tuple[Path, ...]]:
    """Runs the commands one after the other and stops at the first failure."""
    return reduce(
        lambda done, cmd: done.bind(
            lambda outputs: _build_command_run(cmd, cwd).map(
                lambda output: (*outputs, output)
            )
        ),
        cmds,
        IOSuccess(()),
    )


def _build_static(context: BuildContext, cmds: tuple[CompileCommand, ...]):
    *obj_commands, archive = cmds
    project = context.files.project

    def _archive(_) -> IOResultE[Path]:
        # 'ar rcs' appends to an existing archive
        try:
            (project / archive.output_path).unlink(missing_ok=True)
        except OSError as e:
            return IOFailure(
                FilesystemWriteError(f"could not replace '{archive.output_path}': {e}")
            )
        return _build_command_run(archive, project)

    return _build_command_run_all(obj_commands, project).bind(_archive)


def build_bin(context: BuildContext) -> IOResultE[Path]:
    files = context.files
    cmds = context.commands

    print(
        f"[pybuildcpp] building '{context.project['name']}' "
        f"({context.config.profile}, {context.config.artifact})"
    )
    if not files.src_files:
        print(
            f"[pybuildcpp] Warning: no source files found in '{files.src}'",
            file=sys.stderr,
        )

    return files_ensure(files).bind(lambda _: _build_artifact(context, cmds))


def _build_artifact(
    context: BuildContext, cmds: tuple[CompileCommand, ...]
) -> IOResultE[Path]:
    match context.config.artifact:
        case "static":
            return _build_static(context, cmds)
        case _:
            return _build_command_run(cmds[0], context.files.project)
