"""Health check endpoint"""

from fastapi import APIRouter, Request

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/")
async def health_check(request: Request):
    """Basic health check endpoint"""
    registry = getattr(request.app.state, "workspaces", None)
    return {
        "status": "healthy",
        "service": "cim-backend",
        "open_workspaces": len(registry) if registry is not None else 0,
    }
