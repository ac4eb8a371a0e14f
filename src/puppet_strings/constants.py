"""Shared constants across the puppet-strings codebase.

This module centralizes engine flags and default values so the argument
builder, the engine wrapper and the CLI agree on them.
"""

# The glob patterns used to search for files to document.
DEFAULT_SEARCH_PATTERNS = (
    "manifests/**/*.pp",
    "functions/**/*.pp",
    "types/**/*.pp",
    "lib/**/*.rb",
)


class YardFlags:
    """Tokens of the YARD command line."""

    DOC = "doc"
    SERVER = "server"
    VERSION = "--version"
    DEBUG = "--debug"
    BACKTRACE = "--backtrace"
    MARKUP_PREFIX = "-m"
    NO_OUTPUT = "-n"
    QUIET = "-q"
    NO_STATS = "--no-stats"
    NO_PROGRESS = "--no-progress"


class EngineDefaults:
    """Defaults for locating and driving the documentation engine."""

    YARD_EXECUTABLE = "yard"
    RUBY_EXECUTABLE = "ruby"
    REGISTRY_PATH = ".yardoc"
    DEFAULT_MARKUP = "markdown"


class JsonDefaults:
    """Defaults for the JSON report."""

    INDENT = 2


class LogDefaults:
    """Truncation limits for subprocess output in logs and error reports."""

    STDERR_LOG_PREVIEW = 200
    STDERR_REPORT_PREVIEW = 500
