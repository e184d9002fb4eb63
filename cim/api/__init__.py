# API module exports
from fastapi import APIRouter

from cim.api import (
    content_types,
    health,
    ideas,
    note_colors,
    platforms,
    quicklinks,
    settings,
    spark,
    systems,
    tags,
    templates,
    view,
)

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health.router)
api_router.include_router(ideas.router)
api_router.include_router(view.router)
api_router.include_router(content_types.router)
api_router.include_router(platforms.router)
api_router.include_router(tags.router)
api_router.include_router(quicklinks.router)
api_router.include_router(systems.router)
api_router.include_router(templates.router)
api_router.include_router(note_colors.router)
api_router.include_router(spark.router)
api_router.include_router(settings.router)

__all__ = ["api_router"]
