import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from cim.api.deps import get_spark_service
from cim.auth import get_current_user_id
from cim.services.spark import SparkError, SparkRequest, SparkResponse, SparkService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/spark", tags=["spark"])


@router.post("", response_model=SparkResponse)
async def spark(
    request: SparkRequest,
    user_id: str = Depends(get_current_user_id),
    service: SparkService = Depends(get_spark_service),
):
    """
    Brainstorm hooks, an outline or title variations for an idea.

    Failures come back as ``{"error": ...}`` with 429 (rate limited),
    402 (credits exhausted) or 500.
    """
    try:
        suggestions = await service.generate(request)
    except SparkError as e:
        logger.warning(f"Spark failed for user {user_id}: {e}")
        return JSONResponse(status_code=e.status_code, content={"error": str(e)})

    return SparkResponse(suggestions=suggestions)
