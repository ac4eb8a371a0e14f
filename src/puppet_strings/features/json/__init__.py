"""JSON feature - renders generated documentation as a JSON report."""

from puppet_strings.features.json.renderer import JsonRenderer

__all__ = ["JsonRenderer"]
