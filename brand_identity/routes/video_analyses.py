"""Video analysis routes"""

from typing import List
from logging import getLogger
from fastapi import APIRouter, HTTPException

from ..models.memory import BrandAlignment, VideoAnalysis
from ..models.requests import VideoAnalysisRequest
from ..models.responses import BrandCoherenceResponse, VideoRetentionTimelineResponse
from ..services.memory_service import MemoryService
from ..services.video_analysis_service import VideoAnalysisService

logger = getLogger(__name__)


router = APIRouter(prefix="/api", tags=["Video Analyses"])

video_analysis_service: VideoAnalysisService = None


def init_routes(memory_service: MemoryService) -> APIRouter:
    """Initialize video analysis routes"""
    global video_analysis_service
    video_analysis_service = VideoAnalysisService(memory_service)
    logger.info(
        "Video analysis routes available: %s", [route.path for route in router.routes]
    )
    return router


def _get_service() -> VideoAnalysisService:
    if not video_analysis_service:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return video_analysis_service


@router.get(
    "/videos",
    response_model=List[VideoAnalysis],
    summary="List video analyses",
)
async def list_videos() -> List[VideoAnalysis]:
    return await _get_service().list_video_analyses()


@router.post(
    "/videos/{video_id}/retention-timeline",
    response_model=VideoAnalysis,
    summary="Analyze and store a video's retention timeline",
    description="Scores the provider's chapters and highlights and stores the timeline on the video's analysis record, replacing any previous one.",
    responses={
        200: {"description": "Timeline stored"},
        503: {"description": "Service not initialized"},
        500: {"description": "Internal server error"},
    },
)
async def save_retention_timeline(
    video_id: str, request: VideoAnalysisRequest
) -> VideoAnalysis:
    service = _get_service()
    try:
        return await service.save_retention_timeline(video_id, request)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("Error storing retention timeline for %s: %s", video_id, e)
        raise HTTPException(status_code=500, detail=str(e)) from e


@router.get(
    "/videos/{video_id}/retention-timeline",
    response_model=VideoRetentionTimelineResponse,
    summary="Get a video's retention timeline",
    responses={
        404: {
            "description": "Video analysis not found",
            "content": {
                "application/json": {
                    "example": {"detail": "Video analysis not found"}
                }
            },
        },
    },
)
async def get_retention_timeline(video_id: str) -> VideoRetentionTimelineResponse:
    segments = await _get_service().get_retention_timeline(video_id)
    return VideoRetentionTimelineResponse(video_id=video_id, segments=segments)


@router.put(
    "/videos/{video_id}/brand-alignment",
    response_model=VideoAnalysis,
    summary="Attach brand-alignment feedback to a video",
)
async def save_brand_alignment(
    video_id: str, alignment: BrandAlignment
) -> VideoAnalysis:
    service = _get_service()
    try:
        return await service.save_brand_alignment(video_id, alignment)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("Error storing brand alignment for %s: %s", video_id, e)
        raise HTTPException(status_code=500, detail=str(e)) from e


@router.get(
    "/brand-coherence",
    response_model=BrandCoherenceResponse,
    summary="Get brand coherence",
    description="Average brand alignment score across analyzed videos",
)
async def brand_coherence() -> BrandCoherenceResponse:
    return await _get_service().brand_coherence()
