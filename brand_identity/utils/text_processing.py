import re
from typing import Iterable


def segment_text(title: str, summary: str) -> str:
    """
    Lowercased text a segment is matched against.
    """
    return f"{title} {summary}".lower()


def keyword_pattern(keywords: Iterable[str]) -> re.Pattern[str]:
    """
    Compile keywords into one case-insensitive pattern.

    Keywords match anywhere in the text, including inside longer words.
    """
    alternation = "|".join(re.escape(keyword) for keyword in keywords)
    return re.compile(f"({alternation})", re.IGNORECASE)


def is_keyword_present(text: str, pattern: re.Pattern[str]) -> bool:
    """
    Check if any keyword of the pattern occurs in the text.
    """
    return pattern.search(text) is not None
