"""Command execution for the external documentation engine."""

import subprocess
import sys
import time
from typing import List

import sentry_sdk

from puppet_strings.constants import EngineDefaults, LogDefaults
from puppet_strings.core.exceptions import EngineExecutionError, EngineNotFoundError
from puppet_strings.core.logging import get_logger


def run_command(args: List[str], capture_output: bool = True) -> subprocess.CompletedProcess[str]:
    """Execute a command with proper error handling.

    Args:
        args: Command arguments list
        capture_output: Capture stdout/stderr instead of inheriting the
            parent's streams. Generation and server runs inherit them so the
            engine's own console output reaches the user.

    Returns:
        CompletedProcess instance

    Raises:
        EngineNotFoundError: If command binary not found
        EngineExecutionError: If command execution fails
    """
    logger = get_logger("subprocess")
    start_time = time.time()

    logger.info("executing_command", command=args[0], args=args[1:], capture_output=capture_output)

    try:
        # RubyGems installs yard as a batch file on Windows
        use_shell = sys.platform == "win32" and args[0] == EngineDefaults.YARD_EXECUTABLE

        with sentry_sdk.start_span(op="subprocess.run", name=f"Running {args[0]}") as span:
            span.set_data("command", args[0])
            span.set_data("capture_output", capture_output)

            result = subprocess.run(
                args,
                capture_output=capture_output,
                text=True,
                check=True,
                shell=use_shell,
            )

            span.set_data("returncode", result.returncode)

        execution_time = time.time() - start_time
        logger.info(
            "command_completed", command=args[0], execution_time_seconds=round(execution_time, 3), returncode=result.returncode
        )

        return result
    except subprocess.CalledProcessError as e:
        execution_time = time.time() - start_time
        stderr_msg = e.stderr.strip() if e.stderr else ""

        logger.error(
            "command_failed",
            command=args[0],
            execution_time_seconds=round(execution_time, 3),
            returncode=e.returncode,
            stderr=stderr_msg[: LogDefaults.STDERR_LOG_PREVIEW],
        )

        error = EngineExecutionError(command=args, returncode=e.returncode, stderr=stderr_msg)
        sentry_sdk.capture_exception(
            error,
            extras={
                "command": " ".join(args),
                "returncode": e.returncode,
                "stderr": stderr_msg[: LogDefaults.STDERR_REPORT_PREVIEW],
                "execution_time_seconds": round(execution_time, 3),
            },
        )
        raise error from e
    except FileNotFoundError as e:
        execution_time = time.time() - start_time

        logger.error("command_not_found", command=args[0], execution_time_seconds=round(execution_time, 3))

        if args[0] == EngineDefaults.YARD_EXECUTABLE:
            not_found_error = EngineNotFoundError()
        else:
            not_found_error = EngineNotFoundError(f"Command '{args[0]}' not found")
        sentry_sdk.capture_exception(not_found_error, extras={"command": " ".join(args)})
        raise not_found_error from e
