"""Enums for retention scoring and memory documents"""

from enum import Enum


class RetentionLabel(str, Enum):
    """Engagement band of a retention segment"""

    STRONG_ENGAGEMENT = "Strong Engagement"
    MODERATE_RISK = "Moderate Risk"
    DROP_OFF_RISK = "Drop-off Risk"


class MemoryFile(str, Enum):
    """Named memory documents"""

    META = "meta"
    PROFILE = "profile"
    BRAND = "brand"
    CONTENT = "content"
    INSIGHTS = "insights"


class ExperienceLevel(str, Enum):
    """Creator experience level"""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class IdeaStatus(str, Enum):
    """Lifecycle of a content idea"""

    UNUSED = "unused"
    DRAFTED = "drafted"
    POSTED = "posted"
