"""Tests for the documentation report models"""

from puppet_strings.models.documentation import SECTIONS, DocEntry, DocTag, DocumentationReport


class TestDocTag:
    def test_drops_empty_fields(self):
        tag = DocTag.from_registry({"tag_name": "return", "name": None, "text": "", "types": []})
        assert tag.to_dict() == {"tag_name": "return"}

    def test_keeps_present_fields(self):
        tag = DocTag.from_registry({"tag_name": "param", "name": "ensure", "text": "State", "types": ["String"]})
        assert tag.to_dict() == {"tag_name": "param", "name": "ensure", "text": "State", "types": ["String"]}


class TestDocEntry:
    def test_without_tags(self):
        entry = DocEntry.from_registry({"name": "ntp", "file": "manifests/init.pp", "line": 1, "docstring": None})
        assert entry.to_dict() == {
            "name": "ntp",
            "file": "manifests/init.pp",
            "line": 1,
            "docstring": {"text": ""},
        }

    def test_missing_location(self):
        entry = DocEntry.from_registry({"name": "ntp"})
        assert entry.file is None
        assert entry.line is None


class TestDocumentationReport:
    def test_empty_registry(self):
        assert DocumentationReport.from_registry([]).to_dict() == {name: [] for name in SECTIONS}

    def test_groups_and_sorts(self):
        objects = [
            {"name": "zeta", "type": "puppet_function"},
            {"name": "alpha", "type": "puppet_function"},
            {"name": "ntp::ntpdate", "type": "puppet_provider"},
            {"name": "String", "type": "class"},
        ]

        report = DocumentationReport.from_registry(objects).to_dict()

        assert [entry["name"] for entry in report["puppet_functions"]] == ["alpha", "zeta"]
        assert [entry["name"] for entry in report["providers"]] == ["ntp::ntpdate"]
        assert report["puppet_classes"] == []

    def test_sections_are_independent(self):
        first = DocumentationReport()
        first.sections["providers"].append(DocEntry(name="x", file=None, line=None))

        assert DocumentationReport().sections["providers"] == []
