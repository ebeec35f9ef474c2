"""Memory document routes"""

from typing import Any, Dict
from logging import getLogger
from fastapi import APIRouter, HTTPException

from ..models.enums import MemoryFile
from ..models.requests import MemoryWriteRequest
from ..models.responses import MemoryStatusResponse, TargetAudienceResponse
from ..services.memory_service import MemoryService

logger = getLogger(__name__)


router = APIRouter(prefix="/api/memory", tags=["Memory"])

memory_service: MemoryService = None


def init_routes(service: MemoryService) -> APIRouter:
    """Initialize memory routes"""
    global memory_service
    memory_service = service
    logger.info("Memory routes available: %s", [route.path for route in router.routes])
    return router


def _get_service() -> MemoryService:
    if not memory_service:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return memory_service


@router.get(
    "/status",
    response_model=MemoryStatusResponse,
    summary="Get memory status",
    description="Whether every memory document exists and onboarding is complete",
)
async def status() -> MemoryStatusResponse:
    service = _get_service()
    return MemoryStatusResponse(
        initialized=await service.is_initialized(),
        onboardingComplete=await service.is_onboarding_complete(),
    )


@router.post(
    "/initialize",
    response_model=MemoryStatusResponse,
    summary="Create missing memory documents",
)
async def initialize() -> MemoryStatusResponse:
    service = _get_service()
    try:
        await service.initialize()
    except Exception as e:
        logger.error("Error initializing memory: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e
    return await status()


@router.post(
    "/reset",
    response_model=MemoryStatusResponse,
    summary="Reset all memory documents to defaults",
)
async def reset() -> MemoryStatusResponse:
    service = _get_service()
    try:
        await service.reset()
    except Exception as e:
        logger.error("Error resetting memory: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e
    return await status()


@router.post(
    "/onboarding/complete",
    summary="Mark onboarding as complete",
)
async def complete_onboarding() -> Dict[str, Any]:
    service = _get_service()
    try:
        return await service.complete_onboarding()
    except Exception as e:
        logger.error("Error completing onboarding: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e


@router.get(
    "/profile/target-audience",
    response_model=TargetAudienceResponse,
    summary="Get the target audience summary",
)
async def target_audience() -> TargetAudienceResponse:
    service = _get_service()
    return TargetAudienceResponse(targetAudience=await service.get_target_audience())


@router.get(
    "/{name}",
    summary="Read a memory document",
    description="Returns the stored document, or its defaults when it does not exist",
)
async def read_document(name: MemoryFile) -> Dict[str, Any]:
    return await _get_service().read(name)


@router.put(
    "/{name}",
    summary="Write a memory document",
    description="Deep-merges the patch into the document, or replaces it when merge is false",
)
async def write_document(name: MemoryFile, request: MemoryWriteRequest) -> Dict[str, Any]:
    service = _get_service()
    try:
        return await service.write(name, request.patch, merge=request.merge)
    except Exception as e:
        logger.error("Error writing memory file %s: %s", name.value, e)
        raise HTTPException(status_code=500, detail=str(e)) from e
