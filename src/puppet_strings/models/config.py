"""Configuration file model."""

from typing import List

from pydantic import BaseModel, Field, field_validator

from puppet_strings.constants import EngineDefaults, JsonDefaults


class StringsConfig(BaseModel):
    """Settings read from a puppet-strings YAML configuration file.

    Attributes:
        yard: Executable used to run YARD
        ruby: Ruby interpreter used to read the YARD registry
        registry: Path of the registry database YARD writes
        plugins: Ruby libraries required before the registry is loaded
            (e.g. the YARD plugin that defines Puppet code objects)
        json_indent: Indentation of the JSON report
    """

    yard: str = EngineDefaults.YARD_EXECUTABLE
    ruby: str = EngineDefaults.RUBY_EXECUTABLE
    registry: str = EngineDefaults.REGISTRY_PATH
    plugins: List[str] = Field(default_factory=list)
    json_indent: int = Field(default=JsonDefaults.INDENT, ge=0)

    @field_validator("yard", "ruby", "registry")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("value cannot be empty")
        return v

    @field_validator("plugins")
    @classmethod
    def validate_plugins(cls, v: List[str]) -> List[str]:
        for plugin in v:
            if not plugin.strip():
                raise ValueError("plugin names cannot be empty")
        return v
