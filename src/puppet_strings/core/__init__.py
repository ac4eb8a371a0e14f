"""Core infrastructure for puppet-strings."""

from puppet_strings.core.config import (
    CONFIG_ENV_VAR,
    configure_logging_from_args,
    load_config,
    resolve_config_path,
    validate_config_file,
)
from puppet_strings.core.engine import (
    EngineContext,
    EngineState,
    YardEngine,
    get_default_context,
    reset_default_context,
    set_default_context,
    setup_engine,
)
from puppet_strings.core.exceptions import (
    ConfigurationError,
    EngineExecutionError,
    EngineNotFoundError,
    RenderError,
    StringsError,
)
from puppet_strings.core.executor import run_command
from puppet_strings.core.logging import (
    configure_logging,
    get_logger,
)
from puppet_strings.core.sentry import init_sentry

__all__ = [
    # Exceptions
    "StringsError",
    "ConfigurationError",
    "EngineNotFoundError",
    "EngineExecutionError",
    "RenderError",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "CONFIG_ENV_VAR",
    "configure_logging_from_args",
    "load_config",
    "resolve_config_path",
    "validate_config_file",
    # Sentry
    "init_sentry",
    # Executor
    "run_command",
    # Engine
    "EngineContext",
    "EngineState",
    "YardEngine",
    "get_default_context",
    "reset_default_context",
    "set_default_context",
    "setup_engine",
]
