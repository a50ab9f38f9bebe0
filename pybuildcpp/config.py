from pathlib import Path
from typing import TypedDict
import re

import toml
from returns.io import IOFailure, IOResultE, IOSuccess, impure_safe

from pybuildcpp.errors import ConfigError

CONFIG_FILE = "pybuildcpp.toml"


class ProjectConfig(TypedDict):
    name: str
    version: str
    cxx: str
    ar: str
    std: str
    cflags: tuple[str, ...]


def sanitize_name(name: str) -> str:
    """Turns a directory name into a valid C++ identifier."""
    sanitized = re.sub(r"[^A-Za-z0-9_]", "_", name)
    if sanitized[:1].isdigit():
        sanitized = "_" + sanitized
    return sanitized


def default_config(directory: Path) -> ProjectConfig:
    return ProjectConfig(
        name=sanitize_name(directory.resolve().name),
        version="0.1.0",
        cxx="g++",
        ar="ar",
        std="c++23",
        cflags=(),
    )


@impure_safe
def _load_config_file(config_path: Path) -> dict:
    return toml.loads(config_path.read_text())


def _check_name(name: str) -> IOResultE[str]:
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        return IOFailure(ConfigError(f"invalid project name: '{name}'"))
    return IOSuccess(name)


def _create_project_config(directory: Path, file: dict) -> IOResultE[ProjectConfig]:
    project = file.get("project", {})
    if not isinstance(project, dict):
        return IOFailure(ConfigError("[project] must be a table"))

    unknown = set(project) - set(ProjectConfig.__annotations__)
    if unknown:
        return IOFailure(
            ConfigError(f"unknown keys in [project]: {', '.join(sorted(unknown))}")
        )

    for key in ("name", "version", "cxx", "ar", "std"):
        if key in project and not isinstance(project[key], str):
            return IOFailure(ConfigError(f"[project] {key} must be a string"))
    cflags = project.get("cflags", [])
    if not isinstance(cflags, list) or not all(isinstance(f, str) for f in cflags):
        return IOFailure(ConfigError("[project] cflags must be a list of strings"))

    config = default_config(directory)
    config.update(project)  # type: ignore
    config["cflags"] = tuple(cflags)
    return _check_name(config["name"]).map(lambda _: config)


def config_load(directory: Path) -> IOResultE[ProjectConfig]:
    config_path = directory / CONFIG_FILE
    if not config_path.exists():
        return _create_project_config(directory, {})

    return (
        _load_config_file(config_path)
        .alt(lambda e: ConfigError(f"could not load '{config_path}': {e}"))
        .bind(lambda file: _create_project_config(directory, file))
    )
