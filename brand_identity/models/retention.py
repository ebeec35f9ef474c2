"""Models for video segments and the retention timeline.

Chapters and highlights arrive from the video intelligence provider under
several field names. They are normalized here, before any scoring runs, to
one shape: ``start``, ``end``, ``title`` and ``summary``.
"""

from typing import Any, ClassVar, Optional, Tuple
from pydantic import BaseModel, Field, model_validator

from .enums import RetentionLabel


class VideoSpan(BaseModel):
    """A titled time range of a video, in seconds"""

    TITLE_FIELDS: ClassVar[Tuple[str, ...]] = ("title",)
    SUMMARY_FIELDS: ClassVar[Tuple[str, ...]] = ("summary",)
    DEFAULT_DURATION: ClassVar[float] = 30

    start: Optional[float] = None
    end: Optional[float] = None
    title: str = ""
    summary: str = ""

    @model_validator(mode="before")
    @classmethod
    def normalize_provider_fields(cls, data: Any) -> Any:
        """Map provider-specific field names onto title/summary"""
        if not isinstance(data, dict):
            return data

        title = next((data[key] for key in cls.TITLE_FIELDS if data.get(key)), "")
        summary = next(
            (data[key] for key in cls.SUMMARY_FIELDS if data.get(key)), ""
        )
        return {
            "start": data.get("start"),
            "end": data.get("end"),
            "title": title,
            "summary": summary,
        }

    @property
    def start_time(self) -> float:
        return 0 if self.start is None else self.start

    @property
    def end_time(self) -> float:
        """Stored end, or a default-length span from the start"""
        if self.end is None:
            return self.start_time + self.DEFAULT_DURATION
        return self.end

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time


class Chapter(VideoSpan):
    """A named chapter of a video"""

    TITLE_FIELDS: ClassVar[Tuple[str, ...]] = ("chapterTitle", "headline", "title")
    SUMMARY_FIELDS: ClassVar[Tuple[str, ...]] = ("chapterSummary", "summary")
    DEFAULT_DURATION: ClassVar[float] = 30


class Highlight(VideoSpan):
    """A key moment of a video"""

    TITLE_FIELDS: ClassVar[Tuple[str, ...]] = ("highlightTitle", "title")
    SUMMARY_FIELDS: ClassVar[Tuple[str, ...]] = ("highlightSummary", "summary")
    DEFAULT_DURATION: ClassVar[float] = 10


class SegmentScore(BaseModel):
    score: int = Field(ge=0, le=100)
    reason: str


class RetentionSegment(BaseModel):
    """A scored, labeled range of the retention timeline"""

    start: float
    end: float
    score: int = Field(ge=0, le=100, description="Predicted engagement 0-100")
    label: RetentionLabel
    reason: str
