"""Markdown parsing and heading collection."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.footnote import footnote_plugin

from .events import (
    Code,
    EmphasisEnd,
    EmphasisStart,
    Event,
    HeadingEnd,
    HeadingLevel,
    HeadingStart,
    Html,
    Other,
    StrongEnd,
    StrongStart,
    Text,
)
from .exceptions import HeadingMismatchError, NestedHeadingError, UnmatchedHeadingEndError
from .models import Heading

logger = logging.getLogger(__name__)

_MARKER_EVENTS: dict[str, Event] = {
    "em_open": EmphasisStart(),
    "em_close": EmphasisEnd(),
    "strong_open": StrongStart(),
    "strong_close": StrongEnd(),
}

_CONTENT_EVENTS = {
    "text": Text,
    "text_special": Text,
    "code_inline": Code,
    "html_inline": Html,
    "html_block": Html,
}


@lru_cache(maxsize=1)
def markdown_parser() -> MarkdownIt:
    """Return the shared Markdown parser.

    CommonMark with raw HTML, tables, strikethrough, and footnotes. Typographer
    and heading attributes stay off since they would change heading text and
    therefore anchors.
    """
    md = MarkdownIt("commonmark", {"html": True, "typographer": False})
    md.enable("table")
    md.enable("strikethrough")
    md.use(footnote_plugin)
    return md


def parse_events(text: str) -> list[Event]:
    """Parse Markdown text into a flat list of events.

    Args:
        text: Markdown source.

    Returns:
        list[Event]: Block and inline events in document order.

    Examples:
        parse_events("# Title\\n")
        # [HeadingStart(HeadingLevel.H1), Text("Title"), HeadingEnd(HeadingLevel.H1)]
    """
    tokens = markdown_parser().parse(text)
    logger.debug("Parsed %d block tokens", len(tokens))
    return list(_token_events(tokens))


def _heading_level(token: Token) -> HeadingLevel:
    # heading tags are h1..h6
    return HeadingLevel(int(token.tag[1:]))


def _token_events(tokens: Sequence[Token]) -> Iterator[Event]:
    for token in tokens:
        if token.type == "heading_open":
            yield HeadingStart(_heading_level(token))
        elif token.type == "heading_close":
            yield HeadingEnd(_heading_level(token))
        elif token.type == "inline":
            yield from _token_events(token.children or [])
        elif token.type == "image":
            # alt text is carried by the children
            yield Other("image", token.attrGet("src") or "")
            yield from _token_events(token.children or [])
        elif token.type in _MARKER_EVENTS:
            yield _MARKER_EVENTS[token.type]
        elif token.type in _CONTENT_EVENTS:
            yield _CONTENT_EVENTS[token.type](token.content)
        else:
            yield Other(token.type, token.content)


def collect_headings(events: Iterable[Event]) -> Iterator[Heading]:
    """Group the events between heading markers into headings.

    Events outside of a heading are discarded. A heading still open when the
    events run out is dropped.

    Args:
        events: Events in document order.

    Yields:
        Heading: Each heading once its end marker is seen.

    Raises:
        NestedHeadingError: If a heading starts while another one is open.
        UnmatchedHeadingEndError: If a heading end arrives with no heading open.
        HeadingMismatchError: If a heading end does not match the open heading's level.

    Examples:
        list(collect_headings([HeadingStart(1), Text("Title"), HeadingEnd(1)]))
        # [Heading(level=HeadingLevel.H1, events=(Text("Title"),))]
    """
    level: HeadingLevel | None = None
    buffer: list[Event] = []

    for event in events:
        if isinstance(event, HeadingStart):
            if level is not None:
                raise NestedHeadingError(level, event.level)
            level = event.level
            buffer = []
        elif isinstance(event, HeadingEnd):
            if level is None:
                raise UnmatchedHeadingEndError(event.level)
            if event.level != level:
                raise HeadingMismatchError(level, event.level)
            yield Heading(level, buffer)
            level = None
        elif level is not None:
            buffer.append(event)
