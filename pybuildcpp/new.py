from pathlib import Path

from returns.io import IOFailure, IOResultE, impure_safe

from pybuildcpp.config import sanitize_name
from pybuildcpp.errors import FilesystemWriteError, UsageError
from pybuildcpp.templates import TEMPLATES, render

DIRECTORIES = (
    "include",
    "src",
    "tests",
    "build/debug",
    "build/release",
)


def _create_file(file: Path, content: str) -> Path:
    file.parent.mkdir(parents=True, exist_ok=True)
    file.write_text(content)
    print(f"Created: {file}")
    return file


@impure_safe
def _create_project(directory: Path, rendered: list[tuple[Path, str]]) -> Path:
    for d in (Path("."), *map(Path, DIRECTORIES)):
        (directory / d).mkdir(parents=True, exist_ok=True)
        print(f"Created directory: {directory / d}")

    for path, content in rendered:
        _create_file(directory / path, content)

    (directory / "build.py").chmod(0o755)
    return directory


def _next_steps(directory: Path, name: str) -> Path:
    print(
        f"""
[pybuildcpp] created project '{name}' in '{directory.absolute()}'

Next steps:
  cd {directory}
  python build.py --release --executable
  ./build/release/{name}
"""
    )
    return directory


def new(directory: Path) -> IOResultE[Path]:
    directory = directory.expanduser()
    if directory.exists():
        return IOFailure(UsageError(f"directory already exists: '{directory}'"))

    name = sanitize_name(directory.stem)
    if not name:
        return IOFailure(UsageError(f"no project name in '{directory}'"))

    rendered = [render(template, name) for template in TEMPLATES.values()]
    paths = [path for path, _ in rendered]
    if len(set(paths)) != len(paths):
        return IOFailure(
            UsageError(f"project name '{name}' clashes with a generated file")
        )

    return (
        _create_project(directory, rendered)
        .alt(lambda e: FilesystemWriteError(str(e)))
        .map(lambda d: _next_steps(d, name))
    )
