from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Protocol
import argparse

from returns.io import IOResultE, IOFailure, IOSuccess

from pybuildcpp.__version__ import __version__
from pybuildcpp.errors import UsageError
from pybuildcpp.types import Artifact, Profile


class ArgsConfig(Protocol):
    profile: Profile
    artifact: Artifact
    help: bool


class NewArgsConfig(Protocol):
    action: str
    dir: Path


@dataclass(frozen=True)
class BuildConfiguration:
    profile: Profile = "debug"
    artifact: Artifact = "executable"

    @classmethod
    def from_args(cls, args: ArgsConfig) -> "BuildConfiguration":
        return cls(profile=args.profile, artifact=args.artifact)


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that reports errors as 'UsageError' instead of exiting with 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def driver_parser(prog: str = "pybuildcpp-build") -> ArgumentParser:
    parser = ArgumentParser(
        prog=prog,
        description="Builds the C++ project in the current directory",
        add_help=False,
        allow_abbrev=False,
    )

    profile = parser.add_argument_group("profile")
    profile.add_argument(
        "--debug",
        dest="profile",
        action="store_const",
        const="debug",
        help="build with debug symbols and no optimization (default)",
    )
    profile.add_argument(
        "--release",
        dest="profile",
        action="store_const",
        const="release",
        help="build with optimizations and NDEBUG",
    )

    artifact = parser.add_argument_group("artifact")
    artifact.add_argument(
        "--executable",
        dest="artifact",
        action="store_const",
        const="executable",
        help="build a statically linked executable (default)",
    )
    artifact.add_argument(
        "--static",
        dest="artifact",
        action="store_const",
        const="static",
        help="build a static library 'lib<name>.a'",
    )
    artifact.add_argument(
        "--dynamic",
        dest="artifact",
        action="store_const",
        const="dynamic",
        help="build a shared library 'lib<name>.so'",
    )

    parser.add_argument(
        "--help", action="store_true", help="show this help message and exit"
    )
    parser.set_defaults(profile="debug", artifact="executable")
    return parser


def args_parse(argv: list[str], prog: str = "pybuildcpp-build") -> IOResultE[ArgsConfig]:
    parser = driver_parser(prog)
    try:
        args, unknown = parser.parse_known_args(argv)
    except UsageError as e:
        return IOFailure(e)
    if unknown:
        return IOFailure(UsageError(f"unknown option: '{unknown[0]}'"))
    return IOSuccess(args)  # type: ignore


def main_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="pybuildcpp",
        description="Creates and builds C++ projects",
        allow_abbrev=False,
    )
    parser.add_argument("--version", action="version", version=__version__)

    subparser = parser.add_subparsers(dest="action", required=True)

    new = subparser.add_parser("new", help="create a new project")
    new.add_argument("dir", type=Path)

    subparser.add_parser(
        "build",
        help="build the project in the current directory",
        add_help=False,
    )
    return parser


def main_args_parse(argv: list[str]) -> IOResultE[tuple[NewArgsConfig, list[str]]]:
    try:
        return IOSuccess(main_parser().parse_known_args(argv))  # type: ignore
    except UsageError as e:
        return IOFailure(e)
