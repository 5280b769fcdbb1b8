"""Route pattern parsing.

Patterns use ``:name`` for a single-segment capture and ``*name`` for a
trailing wildcard::

    "/courses/:courseID/assignments/:assignmentID"
    "/files/folder/*subFolder"
"""

import re
from dataclasses import dataclass
from enum import Enum

from waypoint.errors import ConfigurationError

_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class SegmentKind(Enum):
    LITERAL = "literal"
    CAPTURE = "capture"
    WILDCARD = "wildcard"


# Lower rank is more specific.
_RANK = {
    SegmentKind.LITERAL: 0,
    SegmentKind.CAPTURE: 1,
    SegmentKind.WILDCARD: 2,
}


@dataclass(frozen=True, slots=True)
class Segment:
    """A parsed segment of a route pattern.

    Literal:  ``courses``    (kind=LITERAL, name=None)
    Capture:  ``:courseID``  (kind=CAPTURE, name="courseID")
    Wildcard: ``*subFolder`` (kind=WILDCARD, name="subFolder")
    """

    value: str
    kind: SegmentKind = SegmentKind.LITERAL
    name: str | None = None

    @property
    def is_literal(self) -> bool:
        return self.kind is SegmentKind.LITERAL


@dataclass(frozen=True, slots=True)
class Pattern:
    """A validated route pattern. Immutable once parsed."""

    source: str
    segments: tuple[Segment, ...]

    @property
    def capture_names(self) -> tuple[str, ...]:
        return tuple(seg.name for seg in self.segments if seg.name is not None)

    @property
    def literal_count(self) -> int:
        return sum(1 for seg in self.segments if seg.is_literal)

    @property
    def has_wildcard(self) -> bool:
        return bool(self.segments) and self.segments[-1].kind is SegmentKind.WILDCARD

    @property
    def rank(self) -> tuple[int, ...]:
        """Per-segment specificity, compared lexicographically."""
        return tuple(_RANK[seg.kind] for seg in self.segments)

    @property
    def shape(self) -> tuple[tuple[str, str], ...]:
        """Structural identity: two patterns with the same shape are duplicates."""
        return tuple((seg.kind.value, seg.value) for seg in self.segments)

    def __str__(self) -> str:
        return self.source


def _check_name(name: str, source: str) -> str:
    if not _NAME_RE.match(name):
        msg = f"Invalid capture name {name!r} in route pattern {source!r}."
        raise ConfigurationError(msg)
    return name


def parse_pattern(source: str) -> Pattern:
    """Parse and validate a route pattern string.

    Examples::

        "/"                       -> Pattern("/", ())
        "/courses"                -> [Segment("courses")]
        "/courses/:courseID"      -> [Segment("courses"), Segment(":courseID", CAPTURE, "courseID")]
        "/files/folder/*subFolder" -> [..., Segment("*subFolder", WILDCARD, "subFolder")]

    Raises ``ConfigurationError`` for anything that could never match
    correctly: missing leading slash, empty segments, bad capture names,
    repeated capture names, percent-encoded literals, or a wildcard that is
    not the last segment.
    """
    if not source.startswith("/"):
        msg = f"Route pattern {source!r} must start with '/'."
        raise ConfigurationError(msg)

    body = source[1:]
    if body.endswith("/"):
        body = body[:-1]
    if not body:
        return Pattern(source=source, segments=())

    parts = body.split("/")
    segments: list[Segment] = []
    seen: set[str] = set()

    for i, part in enumerate(parts):
        if not part:
            msg = f"Route pattern {source!r} contains an empty segment."
            raise ConfigurationError(msg)

        if part[0] == ":":
            seg = Segment(part, SegmentKind.CAPTURE, _check_name(part[1:], source))
        elif part[0] == "*":
            seg = Segment(part, SegmentKind.WILDCARD, _check_name(part[1:], source))
            if i != len(parts) - 1:
                msg = (
                    f"Wildcard {part!r} in route pattern {source!r} must be the "
                    "final segment."
                )
                raise ConfigurationError(msg)
        elif "%" in part:
            msg = (
                f"Literal segment {part!r} in route pattern {source!r} must not be "
                "percent-encoded; write the decoded text instead."
            )
            raise ConfigurationError(msg)
        else:
            seg = Segment(part)

        if seg.name is not None:
            if seg.name in seen:
                msg = f"Capture name {seg.name!r} appears twice in route pattern {source!r}."
                raise ConfigurationError(msg)
            seen.add(seg.name)

        segments.append(seg)

    return Pattern(source=source, segments=tuple(segments))
