"""JSON layout exporter: the full court tree plus its BOM."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from arena.domain import BomCalculator
from arena.infrastructure.exporters.base import ExporterRegistry
from arena.infrastructure.serialization import court_to_dict

if TYPE_CHECKING:
    from arena.application.dtos import CourtOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("layout")  # type: ignore[arg-type]
class LayoutExporter:
    """Exports the court as JSON that ``court_from_dict`` can read back."""

    format_name: ClassVar[str] = "layout"
    file_extension: ClassVar[str] = "json"

    def __init__(self, include_bom: bool = True, indent: int = 2) -> None:
        self.include_bom = include_bom
        self.indent = indent

    def to_dict(self, output: CourtOutput) -> dict[str, Any]:
        if output.court is None:
            raise ValueError("Cannot export a layout without a court")
        data: dict[str, Any] = {"court": court_to_dict(output.court)}
        if self.include_bom:
            bom = output.bom or BomCalculator().calculate(output.court)
            data["bom"] = bom.as_dict()
        if output.warnings:
            data["warnings"] = list(output.warnings)
        return data

    def export(self, output: CourtOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported layout to {path}")

    def export_string(self, output: CourtOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent)
