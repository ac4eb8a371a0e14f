"""Generate feature - documentation generation through yard doc."""

from puppet_strings.features.generate.arguments import build_yard_args
from puppet_strings.features.generate.service import generate

__all__ = [
    "build_yard_args",
    "generate",
]
