from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from pybuildcpp.args import BuildConfiguration
from pybuildcpp.config import ProjectConfig
from pybuildcpp.files import Files
from pybuildcpp.types import Args, Artifact, Cmd, Profile


DEBUG_FLAGS: Args = ("-g", "-O0", "-DDEBUG")

RELEASE_FLAGS: Args = ("-O3", "-DNDEBUG")

WARNINGS: Args = ("-Wall", "-Wextra", "-Wpedantic")


@dataclass(frozen=True)
class CompileCommand:
    """A single toolchain invocation."""

    input_files: tuple[Path, ...]
    output_path: Path
    command: Cmd


@dataclass(frozen=True)
class Compiler:
    cxx: str
    ar: str
    cflags: Args
    ldflags: Args

    def compile_obj(self, src: Path, obj: Path) -> CompileCommand:
        return CompileCommand(
            input_files=(src,),
            output_path=obj,
            command=(self.cxx, *self.cflags, "-c", str(src), "-o", str(obj)),
        )

    def compile_exe(self, src_files: Iterable[Path], output: Path) -> CompileCommand:
        src_files = tuple(src_files)
        return CompileCommand(
            input_files=src_files,
            output_path=output,
            command=(
                self.cxx,
                *self.cflags,
                *map(str, src_files),
                *self.ldflags,
                "-o",
                str(output),
                "-static",
            ),
        )

    def compile_dll(self, src_files: Iterable[Path], output: Path) -> CompileCommand:
        src_files = tuple(src_files)
        return CompileCommand(
            input_files=src_files,
            output_path=output,
            command=(
                self.cxx,
                *self.cflags,
                *map(str, src_files),
                *self.ldflags,
                "-o",
                str(output),
            ),
        )

    def compile_lib(self, obj_files: Iterable[Path], library: Path) -> CompileCommand:
        obj_files = tuple(obj_files)
        return CompileCommand(
            input_files=obj_files,
            output_path=library,
            command=(self.ar, "rcs", str(library), *map(str, obj_files)),
        )


def profile_flags(profile: Profile) -> Args:
    match profile:
        case "debug":
            return DEBUG_FLAGS
        case "release":
            return RELEASE_FLAGS


def artifact_path(build: Path, name: str, artifact: Artifact) -> Path:
    match artifact:
        case "executable":
            return build / name
        case "static":
            return build / f"lib{name}.a"
        case "dynamic":
            return build / f"lib{name}.so"


def compiler_create(
    config: BuildConfiguration, project: ProjectConfig, files: Files
) -> Compiler:
    cflags: list[str] = [
        *profile_flags(config.profile),
        f"-std={project['std']}",
        *WARNINGS,
        f"-I{files.include}",
    ]
    ldflags: list[str] = []

    if files.deps_include is not None:
        cflags.append(f"-I{files.deps_include}")
    if files.deps_lib is not None:
        ldflags.append(f"-L{files.deps_lib}")

    cflags.extend(project["cflags"])

    if config.artifact == "dynamic":
        cflags.append("-fPIC")
        ldflags.append("-shared")

    return Compiler(
        cxx=project["cxx"],
        ar=project["ar"],
        cflags=tuple(cflags),
        ldflags=tuple(ldflags),
    )


def build_commands(
    config: BuildConfiguration, project: ProjectConfig, files: Files
) -> tuple[CompileCommand, ...]:
    """All invocations of a build, in the order they have to run."""
    cc = compiler_create(config, project, files)
    output = artifact_path(files.build, project["name"], config.artifact)

    match config.artifact:
        case "executable":
            return (cc.compile_exe(files.src_files, output),)
        case "dynamic":
            return (cc.compile_dll(files.src_files, output),)
        case "static":
            obj_commands = tuple(
                cc.compile_obj(src, files.obj_file(src)) for src in files.src_files
            )
            return (
                *obj_commands,
                cc.compile_lib((cmd.output_path for cmd in obj_commands), output),
            )
