"""Configuration schema and loading for arena configuration files.

Public API:
    - ArenaConfiguration: Root configuration model
    - CourtConfig, OutputConfig: Court and output sections
    - load_config / load_config_from_dict: Load and validate a configuration
    - ConfigError: Exception for configuration errors
    - validate_config / ValidationResult: Semantic validation
    - config_to_court_input / config_to_edits: Conversion to application DTOs

Example:
    >>> from pathlib import Path
    >>> from arena.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("court.json"))
    ...     print(f"Court: {config.court.width}x{config.court.length}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from arena.application.config.adapter import (
    config_to_court_input,
    config_to_edits,
    edit_to_request,
)
from arena.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from arena.application.config.schema import (
    SUPPORTED_VERSIONS,
    AppendCurvedCornerEdit,
    AppendSectionEdit,
    ArenaConfiguration,
    CourtConfig,
    EditConfig,
    OutputConfig,
    SetSectionHeightEdit,
    SetWallHeightEdit,
    ToggleEdit,
)
from arena.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "AppendCurvedCornerEdit",
    "AppendSectionEdit",
    "ArenaConfiguration",
    "ConfigError",
    "CourtConfig",
    "EditConfig",
    "OutputConfig",
    "SetSectionHeightEdit",
    "SetWallHeightEdit",
    "ToggleEdit",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_court_input",
    "config_to_edits",
    "edit_to_request",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
