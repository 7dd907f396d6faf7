"""API routers for the REST API."""

from arena.web.routers.bom import router as bom_router
from arena.web.routers.edit import router as edit_router
from arena.web.routers.generate import router as generate_router
from arena.web.routers.validate import router as validate_router

__all__ = [
    "bom_router",
    "edit_router",
    "generate_router",
    "validate_router",
]
