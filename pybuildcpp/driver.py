from dataclasses import dataclass
from pathlib import Path
import sys

from returns.io import IOResultE, IOSuccess
from returns.pipeline import is_successful
from returns.unsafe import unsafe_perform_io

from pybuildcpp.args import ArgsConfig, BuildConfiguration, args_parse, driver_parser
from pybuildcpp.builder import build_bin
from pybuildcpp.context import context_load


@dataclass(frozen=True)
class BuildResult:
    exit_code: int
    artifact: Path | None = None


def _help(prog: str) -> IOResultE[None]:
    driver_parser(prog).print_help()
    return IOSuccess(None)


def _build(args: ArgsConfig, directory: Path) -> IOResultE[Path | None]:
    return context_load(directory, BuildConfiguration.from_args(args)).bind(build_bin)


def drive(argv: list[str], directory: Path, prog: str = "pybuildcpp-build") -> BuildResult:
    result = args_parse(argv, prog).bind(
        lambda args: _help(prog) if args.help else _build(args, directory)
    )

    if not is_successful(result):
        error = unsafe_perform_io(result.failure())
        print(f"[pybuildcpp] Error: {error}", file=sys.stderr)
        return BuildResult(exit_code=1)

    artifact = unsafe_perform_io(result.unwrap())
    if artifact is not None:
        print(f"[pybuildcpp] built '{artifact}'")
    return BuildResult(exit_code=0, artifact=artifact)


def main(
    argv: list[str] | None = None,
    directory: Path | None = None,
    prog: str = "pybuildcpp-build",
) -> int:
    return drive(
        sys.argv[1:] if argv is None else argv,
        Path.cwd() if directory is None else directory,
        prog,
    ).exit_code
