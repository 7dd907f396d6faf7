"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from arena.application.config import ConfigError
from arena.infrastructure.serialization import CourtSerializationError


class CourtGenerationError(Exception):
    """Raised when court generation fails."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Generation failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(CourtGenerationError)
    async def generation_error_handler(
        request: Request, exc: CourtGenerationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Court generation failed",
                "error_type": "generation",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(CourtSerializationError)
    async def invalid_court_handler(
        request: Request, exc: CourtSerializationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_court",
                "details": None,
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid configuration",
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )
