from dataclasses import dataclass
from pathlib import Path

from returns.io import IOResultE

from pybuildcpp.args import BuildConfiguration
from pybuildcpp.compiler import CompileCommand, artifact_path, build_commands
from pybuildcpp.config import ProjectConfig, config_load
from pybuildcpp.files import Files, files_load


@dataclass(frozen=True)
class BuildContext:
    config: BuildConfiguration
    project: ProjectConfig
    files: Files

    @property
    def artifact(self) -> Path:
        return artifact_path(
            self.files.build, self.project["name"], self.config.artifact
        )

    @property
    def commands(self) -> tuple[CompileCommand, ...]:
        return build_commands(self.config, self.project, self.files)


def context_load(directory: Path, config: BuildConfiguration) -> IOResultE[BuildContext]:
    return config_load(directory).bind(
        lambda project: files_load(directory, config.profile).map(
            lambda files: BuildContext(config=config, project=project, files=files)
        )
    )
