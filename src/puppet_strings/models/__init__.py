"""Data models for puppet-strings."""

from puppet_strings.models.config import StringsConfig
from puppet_strings.models.documentation import (
    SECTION_BY_TYPE,
    SECTIONS,
    DocEntry,
    DocTag,
    DocumentationReport,
)
from puppet_strings.models.options import (
    GenerationOptions,
    JsonOutput,
    OptionsLike,
    coerce_options,
)

__all__ = [
    # Config
    "StringsConfig",
    # Options
    "GenerationOptions",
    "JsonOutput",
    "OptionsLike",
    "coerce_options",
    # Documentation report
    "SECTION_BY_TYPE",
    "SECTIONS",
    "DocTag",
    "DocEntry",
    "DocumentationReport",
]
