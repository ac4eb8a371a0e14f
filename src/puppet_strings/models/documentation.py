"""Models for the JSON documentation report.

The report groups documented Puppet code objects by kind, one section per
kind, in the layout of the puppet-strings JSON format.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Registry object type -> report section
SECTION_BY_TYPE = {
    "puppet_class": "puppet_classes",
    "puppet_defined_type": "defined_types",
    "puppet_type": "resource_types",
    "puppet_provider": "providers",
    "puppet_function": "puppet_functions",
}

SECTIONS = list(SECTION_BY_TYPE.values())


@dataclass
class DocTag:
    """A docstring tag such as ``@param`` or ``@return``."""

    tag_name: str
    name: Optional[str] = None
    text: Optional[str] = None
    types: Optional[List[str]] = None

    @classmethod
    def from_registry(cls, data: Dict[str, Any]) -> "DocTag":
        return cls(
            tag_name=str(data.get("tag_name", "")),
            name=data.get("name"),
            text=data.get("text"),
            types=data.get("types"),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"tag_name": self.tag_name}
        if self.name:
            result["name"] = self.name
        if self.text:
            result["text"] = self.text
        if self.types:
            result["types"] = list(self.types)
        return result


@dataclass
class DocEntry:
    """One documented object in the report."""

    name: str
    file: Optional[str]
    line: Optional[int]
    text: str = ""
    tags: List[DocTag] = field(default_factory=list)

    @classmethod
    def from_registry(cls, data: Dict[str, Any]) -> "DocEntry":
        return cls(
            name=str(data.get("name", "")),
            file=data.get("file"),
            line=data.get("line"),
            text=data.get("docstring") or "",
            tags=[DocTag.from_registry(tag) for tag in data.get("tags") or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        docstring: Dict[str, Any] = {"text": self.text}
        if self.tags:
            docstring["tags"] = [tag.to_dict() for tag in self.tags]
        return {
            "name": self.name,
            "file": self.file,
            "line": self.line,
            "docstring": docstring,
        }


@dataclass
class DocumentationReport:
    """Documented objects grouped into report sections."""

    sections: Dict[str, List[DocEntry]] = field(default_factory=lambda: {name: [] for name in SECTIONS})

    @classmethod
    def from_registry(cls, objects: List[Dict[str, Any]]) -> "DocumentationReport":
        """Group registry objects by section; unknown object types are skipped."""
        report = cls()
        for data in objects:
            section = SECTION_BY_TYPE.get(str(data.get("type", "")))
            if section is None:
                continue
            report.sections[section].append(DocEntry.from_registry(data))
        for entries in report.sections.values():
            entries.sort(key=lambda entry: entry.name)
        return report

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {name: [entry.to_dict() for entry in self.sections[name]] for name in SECTIONS}
