"""Retention timeline analyzer.

Predicts where viewers stay engaged or drop off, from a video's chapters and
highlights. Each segment starts from a base score and every matching rule in
``SCORING_RULES`` adjusts it. Rules are independent and all of them apply.
The score bands are:

- Strong Engagement: 70 and above
- Moderate Risk: 50 to 69
- Drop-off Risk: below 50

The analyzer is a pure function with no I/O. Persisting the timeline is
the caller's job.
"""

import math
from typing import Callable, List, NamedTuple, Optional, Sequence, Union

from ..models.enums import RetentionLabel
from ..models.retention import (
    Chapter,
    Highlight,
    RetentionSegment,
    SegmentScore,
    VideoSpan,
)
from ..utils.text_processing import is_keyword_present, keyword_pattern, segment_text

BASE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

HOOK_WINDOW_SECONDS = 15
EARLY_POSITION = 0.3
LATE_POSITION = 0.7
LONG_SEGMENT_SECONDS = 60
PUNCHY_MIN_SECONDS = 3
PUNCHY_MAX_SECONDS = 10

STRONG_ENGAGEMENT_SCORE = 70
MODERATE_RISK_SCORE = 50

FALLBACK_END_SECONDS = 60
FALLBACK_SCORE = 60
FALLBACK_REASON = "No detailed segmentation available"
STANDARD_REASON = "Standard content"


class SegmentFeatures(NamedTuple):
    """What the scoring rules look at for one segment"""

    start: float
    duration: float
    position: float
    is_highlight: bool
    text: str


class ScoringRule(NamedTuple):
    applies: Callable[[SegmentFeatures], bool]
    delta: int
    tag: str


def keyword_rule(keywords: Sequence[str], delta: int, tag: str) -> ScoringRule:
    pattern = keyword_pattern(keywords)
    return ScoringRule(
        lambda features: is_keyword_present(features.text, pattern), delta, tag
    )


SCORING_RULES = (
    ScoringRule(lambda f: f.is_highlight, 25, "Key moment"),
    ScoringRule(lambda f: f.start < HOOK_WINDOW_SECONDS, 20, "Hook period"),
    ScoringRule(lambda f: f.position < EARLY_POSITION, 10, "Early content"),
    ScoringRule(lambda f: f.position > LATE_POSITION, -15, "Late-stage risk"),
    ScoringRule(lambda f: f.duration > LONG_SEGMENT_SECONDS, -10, "Long segment"),
    ScoringRule(
        lambda f: PUNCHY_MIN_SECONDS < f.duration < PUNCHY_MAX_SECONDS,
        5,
        "Punchy pacing",
    ),
    # High-engagement triggers
    keyword_rule(
        ("story", "personal", "reveal", "secret", "surprising", "shocking"),
        15,
        "Emotional trigger",
    ),
    keyword_rule(
        ("how to", "tutorial", "step", "guide", "tip"), 10, "Educational value"
    ),
    keyword_rule(("question", "ask", "wonder", "curious"), 8, "Curiosity gap"),
    # Drop-off triggers
    keyword_rule(
        ("introduction", "overview", "background", "context"), -10, "Setup phase"
    ),
    keyword_rule(
        ("conclusion", "summary", "recap", "ending"), -12, "Wind-down phase"
    ),
)


def relative_position(index: int, total: int) -> float:
    """Fraction of the list that comes before the segment"""
    return index / total


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def score_segment(
    segment: VideoSpan, is_highlight: bool, index: int, total: int
) -> SegmentScore:
    """Score one segment against every rule in SCORING_RULES."""
    features = SegmentFeatures(
        start=segment.start_time,
        duration=segment.duration,
        position=relative_position(index, total),
        is_highlight=is_highlight,
        text=segment_text(segment.title, segment.summary),
    )

    score = BASE_SCORE
    reasons: List[str] = []
    for rule in SCORING_RULES:
        if rule.applies(features):
            score += rule.delta
            reasons.append(rule.tag)

    return SegmentScore(
        score=clamp_score(score),
        reason=", ".join(reasons) if reasons else STANDARD_REASON,
    )


def get_retention_label(score: int) -> RetentionLabel:
    if score >= STRONG_ENGAGEMENT_SCORE:
        return RetentionLabel.STRONG_ENGAGEMENT
    if score >= MODERATE_RISK_SCORE:
        return RetentionLabel.MODERATE_RISK
    return RetentionLabel.DROP_OFF_RISK


def build_segment(span: VideoSpan, scored: SegmentScore) -> RetentionSegment:
    return RetentionSegment(
        start=span.start_time,
        end=span.end_time,
        score=scored.score,
        label=get_retention_label(scored.score),
        reason=scored.reason,
    )


def fallback_timeline() -> List[RetentionSegment]:
    return [
        RetentionSegment(
            start=0,
            end=FALLBACK_END_SECONDS,
            score=FALLBACK_SCORE,
            label=get_retention_label(FALLBACK_SCORE),
            reason=FALLBACK_REASON,
        )
    ]


def _normalize(items, model):
    return [
        item if isinstance(item, model) else model.model_validate(item)
        for item in items or []
    ]


def analyze_retention_timeline(
    chapters: Optional[Sequence[Union[Chapter, dict]]] = None,
    highlights: Optional[Sequence[Union[Highlight, dict]]] = None,
) -> List[RetentionSegment]:
    """Build the retention timeline of a video.

    Args:
        chapters: Provider chapters, as models or raw provider dicts.
        highlights: Provider highlights, as models or raw provider dicts.

    Returns:
        Segments sorted by start time. Chapters form the timeline when
        present, boosted where a highlight starts inside them; otherwise
        every highlight is its own segment. With neither, a single
        fallback segment covers the first minute.
    """
    chapters = _normalize(chapters, Chapter)
    highlights = _normalize(highlights, Highlight)

    if not chapters and not highlights:
        return fallback_timeline()

    segments: List[RetentionSegment] = []
    if chapters:
        highlight_times = {
            math.floor(highlight.start)
            for highlight in highlights
            if highlight.start is not None
        }
        for index, chapter in enumerate(chapters):
            has_highlight = any(
                chapter.start_time <= time <= chapter.end_time for time in highlight_times
            )
            scored = score_segment(chapter, has_highlight, index, len(chapters))
            segments.append(build_segment(chapter, scored))
    else:
        for index, highlight in enumerate(highlights):
            scored = score_segment(highlight, True, index, len(highlights))
            segments.append(build_segment(highlight, scored))

    segments.sort(key=lambda segment: segment.start)
    return segments
