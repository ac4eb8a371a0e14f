"""Exception hierarchy for puppet-strings."""

from typing import List, Optional


class StringsError(Exception):
    """Base class for all puppet-strings errors."""


class ConfigurationError(StringsError):
    """Raised when a configuration file is missing or invalid."""

    def __init__(self, config_path: str, message: str):
        self.config_path = config_path
        self.message = message
        super().__init__(f"Invalid configuration file '{config_path}': {message}")


class EngineNotFoundError(StringsError):
    """Raised when the documentation engine executable cannot be found."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "Command 'yard' not found. Install it with `gem install yard` and make sure it is on your PATH."
        )


class EngineExecutionError(StringsError):
    """Raised when an engine command exits with a non-zero status."""

    def __init__(self, command: List[str], returncode: int, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command '{' '.join(command)}' failed with exit code {returncode}"
        if stderr:
            message += f": {stderr}"
        super().__init__(message)


class RenderError(StringsError):
    """Raised when the JSON report cannot be rendered or written."""
