"""Markdown parse events consumed by the table of contents builder.

The parser adapter produces these from markdown-it tokens, but any iterable of
them can drive a `TableOfContents`. Events are immutable, so a sequence can be
shared between the caller and the collected headings without copying.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union


class HeadingLevel(IntEnum):
    """Heading rank, from ``H1`` (top level) to ``H6`` (deepest)."""

    H1 = 1
    H2 = 2
    H3 = 3
    H4 = 4
    H5 = 5
    H6 = 6


@dataclass(frozen=True)
class HeadingStart:
    """Opens a heading of the given level."""

    level: HeadingLevel

    def __post_init__(self):
        object.__setattr__(self, "level", HeadingLevel(self.level))


@dataclass(frozen=True)
class HeadingEnd:
    """Closes the heading of the given level."""

    level: HeadingLevel

    def __post_init__(self):
        object.__setattr__(self, "level", HeadingLevel(self.level))


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Code:
    """Inline code span; `content` excludes the backticks."""

    content: str


@dataclass(frozen=True)
class Html:
    """Raw HTML fragment, passed through verbatim."""

    content: str


@dataclass(frozen=True)
class EmphasisStart:
    pass


@dataclass(frozen=True)
class EmphasisEnd:
    pass


@dataclass(frozen=True)
class StrongStart:
    pass


@dataclass(frozen=True)
class StrongEnd:
    pass


@dataclass(frozen=True)
class Other:
    """Any event kind the table of contents does not interpret.

    Attributes:
        kind: Name of the originating token type, e.g. ``"link_open"``.
        content: Raw token content, if any.
    """

    kind: str
    content: str = field(default="")


Event = Union[
    HeadingStart,
    HeadingEnd,
    Text,
    Code,
    Html,
    EmphasisStart,
    EmphasisEnd,
    StrongStart,
    StrongEnd,
    Other,
]
