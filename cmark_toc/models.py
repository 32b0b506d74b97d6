"""Data models for cmark-toc."""

from __future__ import annotations

from dataclasses import dataclass, field

from .events import Code, Event, HeadingLevel, Text
from .render import render_inline
from .slugify import GitHubSlugifier


@dataclass(frozen=True)
class Heading:
    """A heading found in a Markdown document.

    Attributes:
        level: Heading level shared by its start and end markers.
        events: Inline events between the heading markers, in document order.
    """

    level: HeadingLevel
    events: tuple[Event, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "level", HeadingLevel(self.level))
        object.__setattr__(self, "events", tuple(self.events))

    def text(self) -> str:
        """Return the heading text with all Markdown markup stripped out.

        Only text and code payloads are kept; the result is what anchors are
        computed from.
        """
        return "".join(event.content for event in self.events if isinstance(event, (Text, Code)))

    def label(self) -> str:
        """Return the heading rendered as Markdown, for use as a link label."""
        return render_inline(self.events)

    def anchor(self) -> str:
        """Return the GitHub anchor of this heading, ignoring other headings."""
        return GitHubSlugifier().slugify(self.text())
