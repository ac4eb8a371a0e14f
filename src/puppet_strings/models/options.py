"""Models for documentation generation options.

JSON mode is keyed on whether the ``json`` option was supplied, not on its
value: ``GenerationOptions.json is None`` means JSON mode is off, while
``JsonOutput(destination=None)`` means "render JSON to standard output".
"""

import os
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from puppet_strings.core.logging import get_logger

RECOGNIZED_KEYS = frozenset({"debug", "backtrace", "markup", "json", "yard_args"})


@dataclass(frozen=True)
class JsonOutput:
    """A supplied ``json`` option.

    Attributes:
        destination: File to write the report to, or None for standard output
    """

    destination: Optional[str] = None

    @property
    def to_stdout(self) -> bool:
        return self.destination is None

    @classmethod
    def from_value(cls, value: Any) -> "JsonOutput":
        # None and False both select standard output
        if value is None or value is False:
            return cls(destination=None)
        if isinstance(value, os.PathLike):
            return cls(destination=os.fspath(value))
        return cls(destination=str(value))


@dataclass
class GenerationOptions:
    """Options for a documentation generation run.

    Attributes:
        debug: Enable YARD debug output
        backtrace: Enable YARD backtraces
        markup: The YARD markup format (defaults to markdown)
        json: JSON report settings, None when JSON mode is off
        yard_args: Extra arguments passed to YARD before the search patterns
    """

    debug: bool = False
    backtrace: bool = False
    markup: Optional[str] = None
    json: Optional[JsonOutput] = None
    yard_args: Optional[List[str]] = None

    @property
    def render_as_json(self) -> bool:
        return self.json is not None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "GenerationOptions":
        """Build options from a plain mapping, using key presence for ``json``."""
        unknown = sorted(set(options) - RECOGNIZED_KEYS)
        if unknown:
            get_logger("options").debug("unrecognized_options_ignored", keys=unknown)

        yard_args = options.get("yard_args")
        if isinstance(yard_args, str):
            yard_args = [yard_args]
        return cls(
            debug=bool(options.get("debug")),
            backtrace=bool(options.get("backtrace")),
            markup=options.get("markup"),
            json=JsonOutput.from_value(options["json"]) if "json" in options else None,
            yard_args=list(yard_args) if yard_args else None,
        )


OptionsLike = Union[GenerationOptions, Mapping[str, Any], None]


def coerce_options(options: OptionsLike) -> GenerationOptions:
    """Accept either a GenerationOptions instance or a mapping."""
    if options is None:
        return GenerationOptions()
    if isinstance(options, GenerationOptions):
        return options
    return GenerationOptions.from_mapping(options)
