"""Command-line entry point for puppet-strings."""

import argparse
import shlex
import sys
from typing import Any, Dict, List, Optional

from puppet_strings.constants import DEFAULT_SEARCH_PATTERNS
from puppet_strings.core.config import CONFIG_ENV_VAR, configure_logging_from_args, load_config
from puppet_strings.core.engine import EngineContext, YardEngine
from puppet_strings.core.exceptions import StringsError
from puppet_strings.core.logging import get_logger
from puppet_strings.core.sentry import init_sentry
from puppet_strings.features.generate.service import generate
from puppet_strings.features.server.service import run_server


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    prog = None
    if sys.argv[0].endswith("main.py"):
        prog = "python main.py"

    parser = argparse.ArgumentParser(
        prog=prog,
        description="puppet-strings - Generate Puppet module documentation with YARD",
        epilog=f"""
environment variables:
  {CONFIG_ENV_VAR}  Path to a YAML config file (overridden by --config flag)
  LOG_LEVEL              Logging level: DEBUG, INFO, WARNING, ERROR (default: INFO)
  LOG_FILE               Path to log file (logs to stderr by default)
  SENTRY_DSN             Enables error reporting to Sentry
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", type=str, metavar="PATH", help="Path to a YAML config file")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        metavar="LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Can also be set via LOG_LEVEL env var. Default: INFO",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        default=None,
        help="Path to log file (logs to stderr by default). Can also be set via LOG_FILE env var.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("generate", help="Generate documentation for the given search patterns")
    gen.add_argument(
        "patterns",
        nargs="*",
        metavar="PATTERN",
        help=f"Glob patterns of files to document (default: {' '.join(DEFAULT_SEARCH_PATTERNS)})",
    )
    gen.add_argument("--debug", action="store_true", help="Enable YARD debug output")
    gen.add_argument("--backtrace", action="store_true", help="Enable YARD backtraces")
    gen.add_argument("--markup", type=str, metavar="FORMAT", default=None, help="The YARD markup format (default: markdown)")
    json_group = gen.add_mutually_exclusive_group()
    json_group.add_argument("--emit-json", type=str, metavar="PATH", default=None, help="Write JSON documentation to PATH")
    json_group.add_argument("--emit-json-stdout", action="store_true", help="Write JSON documentation to stdout")
    gen.add_argument(
        "--yard-args", type=str, metavar="ARGS", default=None, help="Extra arguments for YARD, split shell-style (e.g. --yard-args='--plugin foo')"
    )

    subparsers.add_parser(
        "server",
        help="Run the YARD documentation server",
        description="Run the YARD documentation server. All arguments after 'server' are forwarded to yard server.",
        # -h/--help belong to yard server
        add_help=False,
    )

    return parser


def _options_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate parsed generate flags into an options mapping."""
    options: Dict[str, Any] = {}
    if args.debug:
        options["debug"] = True
    if args.backtrace:
        options["backtrace"] = True
    if args.markup:
        options["markup"] = args.markup
    if args.emit_json_stdout:
        options["json"] = None
    elif args.emit_json:
        options["json"] = args.emit_json
    if args.yard_args:
        options["yard_args"] = shlex.split(args.yard_args)
    return options


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line.

    Returns:
        Process exit status
    """
    parser = _create_argument_parser()
    # Unknown arguments are only allowed for the server, which forwards them verbatim
    args, extra = parser.parse_known_args(argv)
    if extra and args.command != "server":
        parser.error(f"unrecognized arguments: {' '.join(extra)}")

    configure_logging_from_args(args.log_level, args.log_file)
    init_sentry()
    logger = get_logger("cli")

    try:
        context = EngineContext(engine=YardEngine(load_config(args.config)))
        if args.command == "generate":
            generate(args.patterns or DEFAULT_SEARCH_PATTERNS, _options_from_args(args), context=context)
        else:
            run_server(extra, context=context)
    except StringsError as e:
        logger.error("command_error", command=args.command, error=str(e))
        return 1
    return 0
