"""YARD engine wrapper and one-time engine setup.

The engine is driven as an external process. ``YardEngine`` keeps the
boundary typed (argument lists in, exceptions out) while producing the exact
tokens of the ``yard`` command line.

``EngineContext`` carries the process-level state shared by the generate and
server flows:

    UNINITIALIZED -> SETUP_DONE -> RUNNING -> TERMINATED | FAILED

``setup_engine`` is the only way out of UNINITIALIZED and is safe to call
any number of times.
"""

import json
import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from puppet_strings.constants import YardFlags
from puppet_strings.core.exceptions import EngineExecutionError
from puppet_strings.core.executor import run_command
from puppet_strings.core.logging import get_logger
from puppet_strings.models.config import StringsConfig

# Reads a registry database and prints its objects as a JSON array.
REGISTRY_DUMP_SCRIPT = """
require 'json'
require 'yard'

YARD::Registry.load!(ARGV.fetch(0))
objects = YARD::Registry.all.map do |object|
  {
    'name' => object.name.to_s,
    'path' => object.path,
    'type' => object.type.to_s,
    'file' => object.file,
    'line' => object.line,
    'docstring' => object.docstring.to_s,
    'tags' => object.tags.map do |tag|
      { 'tag_name' => tag.tag_name, 'name' => tag.name, 'text' => tag.text, 'types' => tag.types }
    end
  }
end
puts JSON.generate(objects)
"""


class EngineState(Enum):
    """Lifecycle of the engine within a process."""

    UNINITIALIZED = "uninitialized"
    SETUP_DONE = "setup_done"
    RUNNING = "running"
    TERMINATED = "terminated"
    FAILED = "failed"


class YardEngine:
    """Runs YARD subcommands through the configured executables."""

    def __init__(self, config: Optional[StringsConfig] = None):
        self.config = config or StringsConfig()

    @property
    def registry_path(self) -> str:
        return self.config.registry

    def read_version(self) -> str:
        """Return the engine's version string, e.g. ``yard 0.9.36``."""
        result = run_command([self.config.yard, YardFlags.VERSION])
        return (result.stdout or "").strip()

    def run_generation(self, args: List[str]) -> None:
        """Run ``yard`` with a generation argument list (starting with ``doc``)."""
        run_command([self.config.yard] + list(args), capture_output=False)

    def run_server(self, args: List[str]) -> None:
        """Run ``yard server`` with the given arguments; blocks until shutdown."""
        run_command([self.config.yard, YardFlags.SERVER] + list(args), capture_output=False)

    def registry_exists(self) -> bool:
        return os.path.exists(self.registry_path)

    def dump_registry(self) -> List[Dict[str, Any]]:
        """Load the registry database and return its documented objects.

        Raises:
            EngineExecutionError: If the registry cannot be read
        """
        command = [self.config.ruby]
        command += [f"-r{plugin}" for plugin in self.config.plugins]
        command += ["-e", REGISTRY_DUMP_SCRIPT, self.registry_path]
        result = run_command(command)
        try:
            objects = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise EngineExecutionError(
                command=command, returncode=result.returncode, stderr=f"registry dump is not valid JSON: {e}"
            ) from e
        if not isinstance(objects, list):
            raise EngineExecutionError(
                command=command, returncode=result.returncode, stderr="registry dump is not a JSON array"
            )
        return objects


@dataclass
class EngineContext:
    """Engine plus the state shared by the generate and server flows."""

    engine: YardEngine = field(default_factory=YardEngine)
    state: EngineState = EngineState.UNINITIALIZED
    version: Optional[str] = None
    generated: bool = False

    @property
    def initialized(self) -> bool:
        return self.state is not EngineState.UNINITIALIZED

    @contextmanager
    def running(self) -> Iterator[YardEngine]:
        """Track the state around one blocking engine call."""
        self.state = EngineState.RUNNING
        try:
            yield self.engine
        except KeyboardInterrupt:
            self.state = EngineState.TERMINATED
            raise
        except Exception:
            self.state = EngineState.FAILED
            raise
        self.state = EngineState.TERMINATED


def setup_engine(context: EngineContext) -> EngineContext:
    """Initialize the engine once per context.

    Reads the engine version the first time; later calls return
    immediately. Leaves the context uninitialized if that check fails.

    Raises:
        EngineNotFoundError: If the yard executable is missing
        EngineExecutionError: If `yard --version` exits with an error
    """
    if context.initialized:
        return context

    logger = get_logger("engine.setup")
    context.version = context.engine.read_version()
    context.state = EngineState.SETUP_DONE
    logger.info("engine_setup_completed", executable=context.engine.config.yard, version=context.version)
    return context


_default_context: Optional[EngineContext] = None


def get_default_context() -> EngineContext:
    """Get the process-wide context used when callers pass none."""
    global _default_context
    if _default_context is None:
        _default_context = EngineContext()
    return _default_context


def set_default_context(context: EngineContext) -> None:
    global _default_context
    _default_context = context


def reset_default_context() -> None:
    """Drop the process-wide context so the next call starts uninitialized."""
    global _default_context
    _default_context = None
