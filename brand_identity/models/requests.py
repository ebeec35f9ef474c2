"""Request bodies with validations"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from .retention import Chapter, Highlight


class RetentionAnalysisRequest(BaseModel):
    """Chapters and highlights to score"""

    chapters: Optional[List[Chapter]] = Field(
        None, description="Video chapters from the video intelligence provider"
    )
    highlights: Optional[List[Highlight]] = Field(
        None, description="Key moments from the video intelligence provider"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "chapters": [
                    {
                        "chapterTitle": "Hook",
                        "chapterSummary": "A surprising reveal",
                        "start": 0,
                        "end": 20,
                    },
                    {
                        "chapterTitle": "Recap",
                        "chapterSummary": "Summary and conclusion",
                        "start": 20,
                        "end": 45,
                    },
                ],
                "highlights": [{"highlightTitle": "The reveal", "start": 8, "end": 14}],
            }
        }


class VideoAnalysisRequest(RetentionAnalysisRequest):
    """Provider output for one video, stored with its retention timeline"""

    task_id: Optional[str] = Field(None, alias="taskId")
    file_name: Optional[str] = Field(None, alias="fileName")
    file_size: Optional[int] = Field(None, alias="fileSize", ge=0)
    title: Optional[str] = Field(None, description="Video title from the gist")
    topics: Optional[List[str]] = None
    hashtags: Optional[List[str]] = None
    summary: Optional[str] = None

    class Config:
        populate_by_name = True

    def metadata(self) -> Dict[str, Any]:
        """Supplied record fields, keyed by their stored names"""
        return self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"chapters", "highlights"},
        )


class MemoryWriteRequest(BaseModel):
    """Patch for a memory document"""

    patch: Dict[str, Any] = Field(..., description="Partial document to write")
    merge: bool = Field(
        default=True,
        description="Deep-merge into the existing document, or replace it",
    )
