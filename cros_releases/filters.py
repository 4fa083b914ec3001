"""
Line filter for rendered release announcements.

Release posts share a fixed template: promo links, repeated "want to know more"
calls to action and a footer. The filter walks the rendered lines once, keeps
the announcement and reference lines, picks the summary line, and stops
filtering at the first security-fix marker so per-fix content is never dropped.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Sequence


UPDATE_PATTERNS = (
    "is being updated",
    "has been updated",
    "is updated in",
    "was updated in",
    "has been promoted to",
    "A new LT",
    "The new LT",
)

REFERENCE_PATTERNS = (
    "See the latest release",
    "Release notes for",
)

SECURITY_BOUNDARY_PATTERNS = (
    "This update contains selective Security fixes",
    "This update contains selected Security fixes",
    "This update contains multiple Security fixes",
    "ChromeOS Vulnerability Bug Fixes",
    "Security Fixes And Rewards",
)

# Summary lines are cut at the call-to-action that follows the announcement.
SUMMARY_CUTOFF = "Want to know"

# Footer lines present at the end of every post.
TRAILING_BOILERPLATE_LINES = 4


class LineKind(Enum):
    UPDATE = "update"
    REFERENCE = "reference"
    SECURITY_BOUNDARY = "security_boundary"
    OTHER = "other"


class FilterState(Enum):
    """Active -> Inactive only; there is no way back for the same entry."""
    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass(frozen=True)
class FilterResult:
    summary: str = ""
    lines: List[str] = field(default_factory=list)

    @property
    def content(self) -> str:
        return "\n".join(self.lines)


def _contains_any(line: str, patterns: Iterable[str]) -> bool:
    return any(p in line for p in patterns)


def classify_line(line: str) -> LineKind:
    """Match order is update > reference > security boundary."""
    if _contains_any(line, UPDATE_PATTERNS):
        return LineKind.UPDATE
    if _contains_any(line, REFERENCE_PATTERNS):
        return LineKind.REFERENCE
    if _contains_any(line, SECURITY_BOUNDARY_PATTERNS):
        return LineKind.SECURITY_BOUNDARY
    return LineKind.OTHER


def summarize_line(line: str) -> str:
    """Text before the first "Want to know", trimmed."""
    return line.split(SUMMARY_CUTOFF, 1)[0].strip()


def collapse_duplicates(lines: Iterable[str]) -> List[str]:
    """Drop lines equal to the line immediately before them."""
    out: List[str] = []
    for line in lines:
        if out and out[-1] == line:
            continue
        out.append(line)
    return out


def strip_trailing_boilerplate(lines: Sequence[str], count: int = TRAILING_BOILERPLATE_LINES) -> List[str]:
    return list(lines[: max(len(lines) - count, 0)])


def filter_lines(lines: Sequence[str], *, enabled: bool = True) -> FilterResult:
    """
    Extract the summary and the cleaned body from rendered lines.

    With ``enabled=False`` the lines pass through untouched and the summary is
    empty. Otherwise duplicates are collapsed, the footer is cut, and each line
    is classified while the filter is active:

    - update announcement: truncated at "Want to know", becomes the summary
      (last one wins) and is kept
    - reference link: kept as is
    - security-fix marker: an empty line and the marker are kept, then the
      filter turns inactive and every later line is kept verbatim
    - anything else: dropped
    """
    if not enabled:
        return FilterResult(summary="", lines=list(lines))

    state = FilterState.ACTIVE
    summary = ""
    out: List[str] = []
    for line in strip_trailing_boilerplate(collapse_duplicates(lines)):
        if state is FilterState.INACTIVE:
            out.append(line)
            continue

        kind = classify_line(line)
        if kind is LineKind.UPDATE:
            summary = summarize_line(line)
            out.append(summary)
        elif kind is LineKind.REFERENCE:
            out.append(line)
        elif kind is LineKind.SECURITY_BOUNDARY:
            out.append("")
            out.append(line)
            state = FilterState.INACTIVE

    return FilterResult(summary=summary, lines=out)


def filter_content(text: str, *, enabled: bool = True) -> FilterResult:
    """Split a rendered text blob on ``\\n`` and run :func:`filter_lines` over it."""
    return filter_lines(text.split("\n"), enabled=enabled)
