"""Render a limited set of Markdown events back to Markdown."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .events import (
    Code,
    EmphasisEnd,
    EmphasisStart,
    Event,
    Html,
    StrongEnd,
    StrongStart,
    Text,
)


class ItemSymbol(Enum):
    """Which symbol to use when rendering Markdown list items."""

    HYPHEN = "-"
    ASTERISK = "*"

    def __str__(self) -> str:
        return self.value


def render_inline(events: Iterable[Event]) -> str:
    """Serialize the inline events of a heading as Markdown.

    Only plain text, code spans, emphasis, strong emphasis, and raw HTML are
    written back. Other events (link and image markers, breaks, strikethrough)
    are skipped, so the text they wrap still shows up through its own events.

    Args:
        events: Inline events in document order.

    Returns:
        str: Markdown suitable as a link label.

    Examples:
        render_inline([Text("Another "), EmphasisStart(), Text("heading"), EmphasisEnd()])
        # "Another *heading*"
    """
    parts: list[str] = []
    for event in events:
        if isinstance(event, (EmphasisStart, EmphasisEnd)):
            parts.append("*")
        elif isinstance(event, (StrongStart, StrongEnd)):
            parts.append("**")
        elif isinstance(event, (Text, Html)):
            parts.append(event.content)
        elif isinstance(event, Code):
            parts.append(f"`{event.content}`")
        # anything else is not rendered
    return "".join(parts)
