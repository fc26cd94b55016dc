"""
Word and page metrics for HTML-bearing document text
"""
import math
import re

TAG_PATTERN = re.compile(r"<[^>]*>")
WHITESPACE_PATTERN = re.compile(r"\s+")

DEFAULT_WORDS_PER_PAGE = 250


def word_count(text: str) -> int:
    """
    Count whitespace-separated words after stripping markup.
    Every tag counts as a separator, so "<p>one</p><p>two</p>" is two words.
    """
    if not text:
        return 0
    stripped = TAG_PATTERN.sub(" ", text)
    normalized = WHITESPACE_PATTERN.sub(" ", stripped).strip()
    return len(normalized.split(" ")) if normalized else 0


def estimated_pages(count: int, words_per_page: int = DEFAULT_WORDS_PER_PAGE) -> int:
    """Heuristic page count: ceil(words / words_per_page)."""
    if words_per_page <= 0:
        raise ValueError(f"words_per_page must be positive, got {words_per_page}")
    return math.ceil(count / words_per_page)
