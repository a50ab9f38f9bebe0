from dataclasses import dataclass
from pathlib import Path

from returns.io import IOFailure, IOResultE, IOSuccess, impure_safe

from pybuildcpp.errors import DiscoveryError, FilesystemWriteError
from pybuildcpp.types import Profile

SOURCE_SUFFIX = ".cpp"
DEPS_DIR = Path(".vcpkg", "installed", "x64-linux")


@dataclass(frozen=True)
class Files:
    """Layout of a project. Every path except 'project' is relative to 'project'."""

    project: Path
    src: Path
    include: Path
    build: Path

    deps_include: Path | None
    deps_lib: Path | None

    src_files: tuple[Path, ...]

    def obj_file(self, src_file: Path) -> Path:
        return self.build / src_file.relative_to(self.src).with_suffix(".o")

    def ensure(self) -> "Files":
        (self.project / self.build).mkdir(parents=True, exist_ok=True)
        for file in self.src_files:
            (self.project / self.obj_file(file)).parent.mkdir(
                parents=True, exist_ok=True
            )
        return self


@impure_safe
def _ensure(files: Files) -> Files:
    return files.ensure()


def files_ensure(files: Files) -> IOResultE[Files]:
    """Creates the output directories before anything is compiled into them."""
    return _ensure(files).alt(
        lambda e: FilesystemWriteError(f"could not create '{files.build}': {e}")
    )


def discover_sources(project: Path, src: Path) -> IOResultE[tuple[Path, ...]]:
    """Recursively collects every '.cpp' file below 'src'."""
    root = project / src
    if not root.is_dir():
        return IOFailure(DiscoveryError(f"source directory '{src}' does not exist"))

    return IOSuccess(
        tuple(
            sorted(
                file.relative_to(project)
                for file in root.rglob(f"*{SOURCE_SUFFIX}")
                if file.is_file()
            )
        )
    )


def files_load(project: Path, profile: Profile) -> IOResultE[Files]:
    deps = project / DEPS_DIR
    has_deps = (deps / "include").is_dir()

    return discover_sources(project, Path("src")).map(
        lambda src_files: Files(
            project=project,
            src=Path("src"),
            include=Path("include"),
            build=Path("build", profile),
            deps_include=DEPS_DIR / "include" if has_deps else None,
            deps_lib=DEPS_DIR / "lib" if has_deps else None,
            src_files=src_files,
        )
    )
