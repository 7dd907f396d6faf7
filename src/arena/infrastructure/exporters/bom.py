"""Bill of Materials exporter for arena layouts.

Output formats: text, csv, json
"""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from arena.domain import BillOfMaterials, BomCalculator
from arena.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from arena.application.dtos import CourtOutput


logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "csv", "json")


@ExporterRegistry.register("bom")  # type: ignore[arg-type]
class BomExporter:
    """Writes the bill of materials of a court.

    Uses the BOM already computed on the output when present, otherwise
    calculates it from the court.

    Attributes:
        format_name: "bom"
        file_extension: "txt", "csv" or "json" based on output_format
    """

    format_name: ClassVar[str] = "bom"

    def __init__(
        self,
        output_format: str = "text",
        bom_calculator: BomCalculator | None = None,
    ) -> None:
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported BOM format '{output_format}'. "
                f"Choose one of: {', '.join(OUTPUT_FORMATS)}"
            )
        self.output_format = output_format
        self.bom_calculator = bom_calculator or BomCalculator()
        self._file_extension = {"text": "txt", "csv": "csv", "json": "json"}[output_format]

    @property
    def file_extension(self) -> str:
        return self._file_extension

    def generate(self, output: CourtOutput) -> BillOfMaterials:
        if output.bom is not None:
            return output.bom
        if output.court is None:
            raise ValueError("Cannot export a BOM without a court")
        return self.bom_calculator.calculate(output.court)

    def export(self, output: CourtOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported BOM to {path}")

    def export_string(self, output: CourtOutput) -> str:
        """Generate the BOM in the configured format."""
        bom = self.generate(output)
        title = output.court.description if output.court is not None else None
        if self.output_format == "csv":
            return self.format_csv(bom)
        if self.output_format == "json":
            return self.format_json(bom, title)
        return self.format_text(bom, title)

    def format_text(self, bom: BillOfMaterials, title: str | None = None) -> str:
        lines: list[str] = []
        lines.append("=" * 60)
        lines.append("BILL OF MATERIALS")
        if title:
            lines.append(title)
        lines.append("=" * 60)
        lines.append("")

        if bom.lines:
            width = max(len(line.name) for line in bom.lines)
            for line in bom.lines:
                lines.append(f"  {line.name:<{width}}  {line.quantity:>5}")
        else:
            lines.append("  (No components)")

        lines.append("-" * 60)
        lines.append(f"  Total components: {bom.total_components}")
        lines.append("")
        return "\n".join(lines)

    def format_csv(self, bom: BillOfMaterials) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(["Component", "Quantity"])
        for line in bom.lines:
            writer.writerow([line.name, line.quantity])
        return buffer.getvalue()

    def format_json(self, bom: BillOfMaterials, title: str | None = None) -> str:
        data: dict[str, Any] = {
            "components": [
                {"name": line.name, "quantity": line.quantity} for line in bom.lines
            ],
            "total_components": bom.total_components,
        }
        if title:
            data["court"] = title
        return json.dumps(data, indent=2)
