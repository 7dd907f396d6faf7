"""Exporter framework for arena outputs.

Registered exporters:
- bom: Bill of materials as text, CSV or JSON
- layout: JSON court tree with its BOM

Usage:
    from arena.infrastructure.exporters import ExporterRegistry

    exporter = ExporterRegistry.get("bom")(output_format="csv")
    print(exporter.export_string(court_output))
"""

from arena.infrastructure.exporters.base import Exporter, ExporterRegistry
from arena.infrastructure.exporters.bom import BomExporter
from arena.infrastructure.exporters.layout import LayoutExporter

__all__ = [
    "BomExporter",
    "Exporter",
    "ExporterRegistry",
    "LayoutExporter",
]
