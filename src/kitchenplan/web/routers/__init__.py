"""API routers for the REST API."""

from kitchenplan.web.routers.placement import router as placement_router
from kitchenplan.web.routers.surfaces import router as surfaces_router
from kitchenplan.web.routers.validate import router as validate_router

__all__ = [
    "placement_router",
    "surfaces_router",
    "validate_router",
]
