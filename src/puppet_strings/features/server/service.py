"""Service implementation for the documentation server."""

from typing import Optional, Sequence

from puppet_strings.core.engine import EngineContext, get_default_context, setup_engine
from puppet_strings.core.logging import get_logger


def run_server(args: Sequence[str] = (), context: Optional[EngineContext] = None) -> None:
    """Run the YARD documentation server.

    The arguments are forwarded to ``yard server`` unchanged. Blocks until
    the server shuts down.

    Args:
        args: The arguments to YARD's server command
        context: Engine context; the process-wide default when None
    """
    logger = get_logger("server")
    context = context or get_default_context()

    setup_engine(context)

    logger.info("server_starting", args=list(args))
    with context.running() as engine:
        engine.run_server(list(args))
    logger.info("server_stopped")
