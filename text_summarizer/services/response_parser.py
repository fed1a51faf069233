"""Response parser - recovers {summary, keyPoints} from free-form completions.

The prompt asks the model for a ``SUMMARY:`` block followed by a ``KEY POINTS:``
list, but nothing enforces it. Parsing degrades through three tiers:

1. Labeled sections (``SUMMARY:`` / ``KEY POINTS:``).
2. First paragraph as summary when the ``SUMMARY:`` label is missing.
3. Line-based split when either field is still empty.

Placeholders fill whatever is still empty afterwards, so the result is never
blank. Everything here is pure and deterministic.
"""

import logging
import re
from typing import List, Optional, Tuple

from text_summarizer.models.summary import SummaryResult

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY = "Summary generated successfully."
DEFAULT_KEY_POINT = "Key insights extracted from your content."

SUMMARY_SECTION_RE = re.compile(
    r"SUMMARY:?\s*\n(.*?)(?=KEY POINTS:|\Z)", re.IGNORECASE | re.DOTALL
)
KEY_POINTS_SECTION_RE = re.compile(r"KEY POINTS:?\s*\n(.*)", re.IGNORECASE | re.DOTALL)
LIST_ITEM_RE = re.compile(r"^\d+\.|^[-•*]")
LIST_MARKER_RE = re.compile(r"^\d+\.?\s*|^[-•*]\s*")
PARAGRAPH_BREAK_RE = re.compile(r"\n\n+")
LEADING_MARKERS_RE = re.compile(r"^[-•*\d.)\s]+")

MIN_KEY_POINT_LENGTH = 10  # Labeled list items must be longer than this
MIN_FALLBACK_LINE_LENGTH = 20  # Unlabeled lines must be longer than this
FALLBACK_SUMMARY_LINES = 3
MAX_FALLBACK_KEY_POINTS = 5


def extract_labeled_summary(text: str) -> Optional[str]:
    """Return the trimmed ``SUMMARY:`` section, or None when unlabeled."""
    match = SUMMARY_SECTION_RE.search(text)
    if match is None:
        return None
    return match.group(1).strip()


def extract_labeled_key_points(text: str) -> List[str]:
    """Return bullet/numbered items from the ``KEY POINTS:`` section.

    Only lines that look like list items survive; markers are stripped and
    items of 10 characters or fewer are dropped.
    """
    match = KEY_POINTS_SECTION_RE.search(text)
    if match is None:
        return []

    points = []
    for line in match.group(1).split("\n"):
        if not LIST_ITEM_RE.match(line.strip()):
            continue
        # Marker is stripped from the raw line, so indented items keep theirs.
        item = LIST_MARKER_RE.sub("", line, count=1).strip()
        if len(item) > MIN_KEY_POINT_LENGTH:
            points.append(item)
    return points


def first_paragraph(text: str) -> str:
    return PARAGRAPH_BREAK_RE.split(text)[0].strip()


def split_by_lines(text: str) -> Tuple[str, List[str]]:
    """Line-based fallback: first lines form the summary, later long lines the points.

    With no non-blank lines at all the raw text is returned unchanged as the
    summary together with an empty list.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        return text, []

    summary = " ".join(lines[:FALLBACK_SUMMARY_LINES]).strip()

    points = []
    for line in lines[FALLBACK_SUMMARY_LINES:]:
        if len(line) <= MIN_FALLBACK_LINE_LENGTH:
            continue
        item = LEADING_MARKERS_RE.sub("", line).strip()
        if item:
            points.append(item)
    return summary, points[:MAX_FALLBACK_KEY_POINTS]


def parse_completion(text: str) -> SummaryResult:
    """Convert a raw completion into a SummaryResult.

    Args:
        text: Completion text exactly as returned by the AI service.

    Returns:
        SummaryResult with a non-empty summary and at least one key point.
    """
    summary = extract_labeled_summary(text)
    if summary is None:
        summary = first_paragraph(text)

    key_points = extract_labeled_key_points(text)

    # Runs whenever either field is empty, replacing a labeled summary too.
    if not summary or not key_points:
        logger.debug("Labeled sections incomplete, falling back to line split")
        summary, key_points = split_by_lines(text)

    return SummaryResult(
        summary=summary or DEFAULT_SUMMARY,
        key_points=key_points or [DEFAULT_KEY_POINT],
    )
