"""Models for the creator memory documents.

Each named memory document (meta, profile, brand, content, insights) has a
model here whose defaults form the document's clean initial state. Field
names stay camelCase to match documents already persisted by the app.
"""

from typing import Dict, List, Optional, Type
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field

from .enums import ExperienceLevel, IdeaStatus, MemoryFile
from .retention import Chapter, Highlight, RetentionSegment


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class MemoryModel(BaseModel):
    """Base for memory documents; unknown keys are kept as-is"""

    model_config = ConfigDict(extra="allow")


class MetaFlags(MemoryModel):
    needsReanalysis: bool = False


class MetaMemory(MemoryModel):
    version: str = "0.1.0"
    createdAt: str = Field(default_factory=utc_now_iso)
    lastUpdated: str = Field(default_factory=utc_now_iso)
    onboardingComplete: bool = False
    activePersonaId: str = "primary"
    flags: MetaFlags = Field(default_factory=MetaFlags)
    targetAudience: Optional[str] = None
    backboardSessionId: Optional[str] = None
    backboardAssistantId: Optional[str] = None
    backboardDocumentId: Optional[str] = None
    twelveLabsIndexId: Optional[str] = None


class Creator(MemoryModel):
    name: str = ""
    experienceLevel: ExperienceLevel = ExperienceLevel.BEGINNER
    background: List[str] = Field(default_factory=list)
    goals: List[str] = Field(default_factory=list)


class TargetViewer(MemoryModel):
    ageRange: str = ""
    interests: List[str] = Field(default_factory=list)
    painPoints: List[str] = Field(default_factory=list)


class Audience(MemoryModel):
    targetViewer: TargetViewer = Field(default_factory=TargetViewer)
    platforms: List[str] = Field(default_factory=list)
    aiGeneratedSummary: Optional[str] = None


class Constraints(MemoryModel):
    postingFrequency: str = "daily"
    videoLengthSeconds: int = 30
    tone: List[str] = Field(default_factory=list)


class IdentityDimensions(MemoryModel):
    """The five brand identity axes, each 0-100"""

    tone: int = Field(default=50, ge=0, le=100)
    authority: int = Field(default=50, ge=0, le=100)
    depth: int = Field(default=50, ge=0, le=100)
    emotion: int = Field(default=50, ge=0, le=100)
    risk: int = Field(default=50, ge=0, le=100)


class ProfileMemory(MemoryModel):
    creator: Creator = Field(default_factory=Creator)
    audience: Audience = Field(default_factory=Audience)
    constraints: Constraints = Field(default_factory=Constraints)
    identity: Optional[IdentityDimensions] = None


class Voice(MemoryModel):
    style: List[str] = Field(default_factory=list)
    pacing: str = "moderate"
    emotionalRange: List[str] = Field(default_factory=list)


class Persona(MemoryModel):
    archetype: str = ""
    coreThemes: List[str] = Field(default_factory=list)
    voice: Voice = Field(default_factory=Voice)


class Positioning(MemoryModel):
    whatYouAreKnownFor: List[str] = Field(default_factory=list)
    whatYouAvoid: List[str] = Field(default_factory=list)


class BrandMemory(MemoryModel):
    persona: Persona = Field(default_factory=Persona)
    positioning: Positioning = Field(default_factory=Positioning)
    confidenceScore: float = 0


class ContentIdea(MemoryModel):
    id: str
    hook: str
    angle: str
    status: IdeaStatus = IdeaStatus.UNUSED
    personaFit: float = 0
    createdAt: str = Field(default_factory=utc_now_iso)


class PublishedMetrics(MemoryModel):
    views: int = 0
    likes: int = 0
    shares: int = 0


class PublishedContent(MemoryModel):
    platform: str
    url: str
    ideaId: str
    postedAt: str
    metrics: PublishedMetrics = Field(default_factory=PublishedMetrics)


class BrandAlignment(MemoryModel):
    """Brand-alignment feedback produced by the external analyzer"""

    overallScore: float = Field(ge=0, le=100)
    dimensionScores: IdentityDimensions = Field(default_factory=IdentityDimensions)
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    recommendation: str = ""


class VideoAnalysis(MemoryModel):
    """A video's analysis record in the content document"""

    id: str
    taskId: Optional[str] = None
    fileName: Optional[str] = None
    fileSize: Optional[int] = None
    title: str = ""
    topics: List[str] = Field(default_factory=list)
    hashtags: List[str] = Field(default_factory=list)
    summary: str = ""
    chapters: List[Chapter] = Field(default_factory=list)
    highlights: List[Highlight] = Field(default_factory=list)
    retentionTimeline: List[RetentionSegment] = Field(default_factory=list)
    brandAlignment: Optional[BrandAlignment] = None
    analyzedAt: str = Field(default_factory=utc_now_iso)


class ContentMemory(MemoryModel):
    ideas: List[ContentIdea] = Field(default_factory=list)
    published: List[PublishedContent] = Field(default_factory=list)
    videoAnalyses: List[VideoAnalysis] = Field(default_factory=list)


class VideoSignals(MemoryModel):
    hookStyle: str = ""
    avgCutLength: float = 0
    energyLevel: str = ""


class AnalyzedVideo(MemoryModel):
    videoId: str
    platform: str = ""
    niche: str = ""
    signals: VideoSignals = Field(default_factory=VideoSignals)
    whyItWorked: List[str] = Field(default_factory=list)


class Patterns(MemoryModel):
    commonHooks: List[str] = Field(default_factory=list)
    winningFormats: List[str] = Field(default_factory=list)


class InsightsMemory(MemoryModel):
    analyzedVideos: List[AnalyzedVideo] = Field(default_factory=list)
    patterns: Patterns = Field(default_factory=Patterns)


MEMORY_MODELS: Dict[MemoryFile, Type[MemoryModel]] = {
    MemoryFile.META: MetaMemory,
    MemoryFile.PROFILE: ProfileMemory,
    MemoryFile.BRAND: BrandMemory,
    MemoryFile.CONTENT: ContentMemory,
    MemoryFile.INSIGHTS: InsightsMemory,
}


def default_document(name: MemoryFile) -> dict:
    """Build a fresh default document for the given memory file"""
    return MEMORY_MODELS[MemoryFile(name)]().model_dump(mode="json")
