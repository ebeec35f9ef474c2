"""Retention timeline routes"""

from logging import getLogger
from fastapi import APIRouter, HTTPException, Query

from ..models.requests import RetentionAnalysisRequest
from ..models.responses import RetentionLabelResponse, RetentionTimelineResponse
from ..services.retention_analyzer import (
    analyze_retention_timeline,
    get_retention_label,
)

logger = getLogger(__name__)


router = APIRouter(prefix="/api/retention", tags=["Retention Timeline"])


def init_routes() -> APIRouter:
    """Initialize retention timeline routes"""
    logger.info("Retention routes available: %s", [route.path for route in router.routes])
    return router


@router.post(
    "/analyze",
    response_model=RetentionTimelineResponse,
    summary="Analyze a retention timeline",
    description="Scores video chapters and highlights into a predicted viewer-engagement timeline. Nothing is stored.",
    responses={
        200: {
            "description": "Scored timeline",
            "content": {
                "application/json": {
                    "example": {
                        "segments": [
                            {
                                "start": 0,
                                "end": 20,
                                "score": 100,
                                "label": "Strong Engagement",
                                "reason": "Key moment, Hook period, Early content, Emotional trigger",
                            },
                            {
                                "start": 20,
                                "end": 45,
                                "score": 23,
                                "label": "Drop-off Risk",
                                "reason": "Late-stage risk, Wind-down phase",
                            },
                        ]
                    }
                }
            },
        },
    },
)
async def analyze(request: RetentionAnalysisRequest) -> RetentionTimelineResponse:
    """Analyze chapters and highlights without persisting the result"""
    try:
        segments = analyze_retention_timeline(request.chapters, request.highlights)
        return RetentionTimelineResponse(segments=segments)
    except Exception as e:
        logger.error("Error analyzing retention timeline: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e


@router.get(
    "/label",
    response_model=RetentionLabelResponse,
    summary="Get the retention label of a score",
)
async def label(
    score: int = Query(..., ge=0, le=100, description="Engagement score 0-100"),
) -> RetentionLabelResponse:
    return RetentionLabelResponse(score=score, label=get_retention_label(score))
