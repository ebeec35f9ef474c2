"""Response models"""

from typing import Dict, List, Optional
from pydantic import BaseModel

from .enums import RetentionLabel
from .retention import RetentionSegment


class RetentionTimelineResponse(BaseModel):
    """RetentionTimelineResponse"""

    segments: List[RetentionSegment]


class VideoRetentionTimelineResponse(BaseModel):
    """VideoRetentionTimelineResponse"""

    video_id: str
    segments: List[RetentionSegment]


class RetentionLabelResponse(BaseModel):
    score: int
    label: RetentionLabel


class MemoryStatusResponse(BaseModel):
    """MemoryStatusResponse"""

    initialized: bool
    onboardingComplete: bool


class TargetAudienceResponse(BaseModel):
    targetAudience: Optional[str] = None


class BrandCoherenceResponse(BaseModel):
    """Average brand alignment across analyzed videos"""

    coherenceScore: Optional[int] = None
    videoCount: int = 0
    dimensionAverages: Optional[Dict[str, int]] = None
    latestVideo: Optional[str] = None
    message: Optional[str] = None


class ConfigHealthResponse(BaseModel):
    """ConfigHealthResponse"""

    success: bool
    configured: List[str]
    missing: List[str]
    message: str
