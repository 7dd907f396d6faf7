"""Infrastructure layer - exporters, formatters and serialization."""

from .exporters import BomExporter, ExporterRegistry, LayoutExporter
from .formatters import BomTableFormatter, WallScheduleFormatter
from .serialization import (
    CourtSchema,
    CourtSerializationError,
    check_court,
    court_from_dict,
    court_from_schema,
    court_to_dict,
    section_from_dict,
    section_to_dict,
)

__all__ = [
    "BomExporter",
    "BomTableFormatter",
    "CourtSchema",
    "CourtSerializationError",
    "ExporterRegistry",
    "LayoutExporter",
    "WallScheduleFormatter",
    "check_court",
    "court_from_dict",
    "court_from_schema",
    "court_to_dict",
    "section_from_dict",
    "section_to_dict",
]
