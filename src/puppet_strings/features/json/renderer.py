"""Rendering of the documentation registry as a JSON report."""

import json
import sys
from typing import Optional

from puppet_strings.core.engine import EngineContext
from puppet_strings.core.exceptions import RenderError
from puppet_strings.core.logging import get_logger
from puppet_strings.models.documentation import DocumentationReport


class JsonRenderer:
    """Writes the JSON report for the documentation generated on a context."""

    def __init__(self, context: EngineContext):
        self.context = context
        self.logger = get_logger("json_renderer")

    def build_report(self) -> DocumentationReport:
        """Read the engine's registry and group it into a report.

        Raises:
            RenderError: If nothing was generated yet or the registry is missing
        """
        if not self.context.generated:
            raise RenderError("Cannot render JSON: no documentation has been generated")

        engine = self.context.engine
        if not engine.registry_exists():
            raise RenderError(f"Cannot render JSON: registry '{engine.registry_path}' does not exist")

        return DocumentationReport.from_registry(engine.dump_registry())

    def render(self, destination: Optional[str] = None) -> None:
        """Render the report to ``destination``, or to stdout when None.

        Raises:
            RenderError: On invalid state or when the destination cannot be written
        """
        report = self.build_report()
        document = json.dumps(report.to_dict(), indent=self.context.engine.config.json_indent) + "\n"

        if destination is None:
            sys.stdout.write(document)
            sys.stdout.flush()
        else:
            try:
                with open(destination, "w", encoding="utf-8") as f:
                    f.write(document)
            except OSError as e:
                self.logger.error("json_write_failed", destination=destination, error=str(e))
                raise RenderError(f"Cannot write JSON to '{destination}': {e}") from e

        self.logger.info(
            "json_rendered",
            destination=destination or "stdout",
            **{section: len(entries) for section, entries in report.sections.items()},
        )
