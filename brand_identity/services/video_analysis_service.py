"""Video analysis service for retention timelines and brand coherence"""

import math
import logging
from typing import Any, Dict, List

from fastapi import HTTPException
from pydantic import ValidationError

from ..models.enums import MemoryFile
from ..models.memory import BrandAlignment, VideoAnalysis, utc_now_iso
from ..models.requests import VideoAnalysisRequest
from ..models.responses import BrandCoherenceResponse
from ..models.retention import RetentionSegment
from .memory_service import MemoryService
from .retention_analyzer import analyze_retention_timeline

logger = logging.getLogger(__name__)

IDENTITY_DIMENSIONS = ("tone", "authority", "depth", "emotion", "risk")


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def is_score(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class VideoAnalysisService:
    """Stores per-video analyses in the content document"""

    def __init__(self, memory_service: MemoryService):
        """Initialize video analysis service"""
        self.memory_service = memory_service

    async def _get_video_analyses(self) -> List[Dict[str, Any]]:
        content = await self.memory_service.read(MemoryFile.CONTENT)
        return list(content.get("videoAnalyses") or [])

    async def _save_video_analyses(self, analyses: List[Dict[str, Any]]) -> None:
        await self.memory_service.write(
            MemoryFile.CONTENT, {"videoAnalyses": analyses}
        )

    def _find_index(self, analyses: List[Dict[str, Any]], video_id: str) -> int:
        for index, analysis in enumerate(analyses):
            if analysis.get("id") == video_id:
                return index
        return -1

    async def save_retention_timeline(
        self, video_id: str, request: VideoAnalysisRequest
    ) -> VideoAnalysis:
        """Analyze a video's chapters and highlights and store the timeline.

        An existing record for the video keeps its other fields; its timeline,
        chapters, highlights and any supplied metadata are replaced.
        """
        timeline = analyze_retention_timeline(request.chapters, request.highlights)

        update = VideoAnalysis(
            id=video_id,
            chapters=request.chapters or [],
            highlights=request.highlights or [],
            retentionTimeline=timeline,
            analyzedAt=utc_now_iso(),
        ).model_dump(
            mode="json",
            include={"id", "chapters", "highlights", "retentionTimeline", "analyzedAt"},
        )
        update.update(request.metadata())

        analyses = await self._get_video_analyses()
        index = self._find_index(analyses, video_id)
        if index == -1:
            record = VideoAnalysis.model_validate(update)
            analyses.append(record.model_dump(mode="json"))
            logger.info("Stored retention timeline for new video %s", video_id)
        else:
            record = VideoAnalysis.model_validate({**analyses[index], **update})
            analyses[index] = record.model_dump(mode="json")
            logger.info("Replaced retention timeline for video %s", video_id)

        await self._save_video_analyses(analyses)
        return record

    async def get_video_analysis(self, video_id: str) -> VideoAnalysis:
        """Get a stored video analysis by video ID"""
        analyses = await self._get_video_analyses()
        index = self._find_index(analyses, video_id)
        if index == -1:
            raise HTTPException(status_code=404, detail="Video analysis not found")
        return VideoAnalysis.model_validate(analyses[index])

    async def get_retention_timeline(self, video_id: str) -> List[RetentionSegment]:
        analysis = await self.get_video_analysis(video_id)
        return analysis.retentionTimeline

    async def list_video_analyses(self) -> List[VideoAnalysis]:
        analyses = []
        for analysis in await self._get_video_analyses():
            try:
                analyses.append(VideoAnalysis.model_validate(analysis))
            except ValidationError as e:
                logger.warning(
                    "Skipping malformed video analysis %s: %s", analysis.get("id"), e
                )
        return analyses

    async def save_brand_alignment(
        self, video_id: str, alignment: BrandAlignment
    ) -> VideoAnalysis:
        """Attach brand-alignment feedback to a stored video analysis"""
        analyses = await self._get_video_analyses()
        index = self._find_index(analyses, video_id)
        if index == -1:
            raise HTTPException(status_code=404, detail="Video analysis not found")

        record = VideoAnalysis.model_validate(
            {**analyses[index], "brandAlignment": alignment.model_dump(mode="json")}
        )
        analyses[index] = record.model_dump(mode="json")
        await self._save_video_analyses(analyses)
        return record

    async def brand_coherence(self) -> BrandCoherenceResponse:
        """Average brand alignment over videos that have an overall score"""
        aligned = [
            analysis
            for analysis in await self._get_video_analyses()
            if is_score((analysis.get("brandAlignment") or {}).get("overallScore"))
        ]

        if not aligned:
            return BrandCoherenceResponse(
                coherenceScore=None, videoCount=0, message="No videos analyzed yet"
            )

        total_score = sum(a["brandAlignment"]["overallScore"] for a in aligned)

        dimension_totals = {dimension: 0 for dimension in IDENTITY_DIMENSIONS}
        for analysis in aligned:
            scores = analysis["brandAlignment"].get("dimensionScores") or {}
            for dimension in IDENTITY_DIMENSIONS:
                dimension_totals[dimension] += scores.get(dimension) or 0

        return BrandCoherenceResponse(
            coherenceScore=round_half_up(total_score / len(aligned)),
            videoCount=len(aligned),
            dimensionAverages={
                dimension: round_half_up(total / len(aligned))
                for dimension, total in dimension_totals.items()
            },
            latestVideo=aligned[-1].get("fileName"),
        )
