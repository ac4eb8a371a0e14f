"""Server feature - the YARD documentation server."""

from puppet_strings.features.server.service import run_server

__all__ = ["run_server"]
