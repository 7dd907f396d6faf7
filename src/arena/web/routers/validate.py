"""Configuration validation endpoints."""

from dataclasses import asdict

from fastapi import APIRouter

from arena.application.config import load_config_from_dict, validate_config
from arena.web.schemas.requests import ConfigValidateRequest
from arena.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate an arena configuration without generating.

    Raises:
        ConfigError: If the configuration does not match the schema.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        exit_code=result.exit_code,
        errors=[asdict(e) for e in result.errors],
        warnings=[asdict(w) for w in result.warnings],
    )
