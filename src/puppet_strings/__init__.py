"""puppet-strings: generate Puppet module documentation with YARD."""

from puppet_strings.constants import DEFAULT_SEARCH_PATTERNS
from puppet_strings.features.generate import build_yard_args, generate
from puppet_strings.features.server import run_server

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SEARCH_PATTERNS",
    "build_yard_args",
    "generate",
    "run_server",
]
