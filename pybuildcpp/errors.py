class PybuildcppError(Exception):
    """Base class of every error reported by the build driver and the generator."""


class UsageError(PybuildcppError):
    """Unknown flag or wrong number of arguments."""


class ConfigError(PybuildcppError):
    """'pybuildcpp.toml' could not be read or has unexpected keys."""


class DiscoveryError(PybuildcppError):
    """The source root is missing or is not a directory."""


class ToolInvocationError(PybuildcppError):
    def __init__(self, command: tuple[str, ...], returncode: int | None):
        self.command = command
        self.returncode = returncode
        if returncode is None:
            message = f"'{command[0]}' could not be started"
        else:
            message = f"'{' '.join(command)}' exited with status {returncode}"
        super().__init__(message)


class FilesystemWriteError(PybuildcppError):
    """A directory or file of a new project could not be created."""
