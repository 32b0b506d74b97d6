from __future__ import annotations

import pytest

from cmark_toc.events import (
    Code,
    EmphasisEnd,
    EmphasisStart,
    HeadingEnd,
    HeadingLevel,
    HeadingStart,
    Html,
    Other,
    StrongEnd,
    StrongStart,
    Text,
)
from cmark_toc.parser import markdown_parser, parse_events


def _heading_events(text: str) -> list:
    """Returns the events between the first heading's markers."""
    events = parse_events(text)
    start = next(i for i, event in enumerate(events) if isinstance(event, HeadingStart))
    end = next(i for i, event in enumerate(events) if isinstance(event, HeadingEnd))
    return events[start + 1 : end]


def test_parse_events_heading_markers():
    events = parse_events("# Title\n")

    assert events == [HeadingStart(HeadingLevel.H1), Text("Title"), HeadingEnd(HeadingLevel.H1)]


@pytest.mark.parametrize("level", range(1, 7))
def test_parse_events_atx_levels(level: int):
    events = parse_events(f"{'#' * level} Title\n")

    assert events[0] == HeadingStart(level)
    assert events[-1] == HeadingEnd(level)


def test_parse_events_setext_headings():
    events = parse_events("Title\n=====\n\nSection\n-------\n")

    assert HeadingStart(1) in events
    assert HeadingStart(2) in events


def test_parse_events_closing_hashes_are_not_text():
    assert _heading_events("## Closed ##\n") == [Text("Closed")]


def test_parse_events_code_span():
    assert _heading_events("## `Another` heading\n") == [Code("Another"), Text(" heading")]


def test_parse_events_emphasis_and_strong():
    assert _heading_events("# *Some* __bold__\n") == [
        EmphasisStart(),
        Text("Some"),
        EmphasisEnd(),
        Text(" "),
        StrongStart(),
        Text("bold"),
        StrongEnd(),
    ]


def test_parse_events_inline_html():
    assert _heading_events("# Hello <span>world</span>\n") == [
        Text("Hello "),
        Html("<span>"),
        Text("world"),
        Html("</span>"),
    ]


def test_parse_events_link_markers_are_opaque():
    events = _heading_events("# Here [TOML](https://toml.io)\n")

    assert [event for event in events if not isinstance(event, Other)] == [
        Text("Here "),
        Text("TOML"),
    ]
    assert [event.kind for event in events if isinstance(event, Other)] == [
        "link_open",
        "link_close",
    ]


def test_parse_events_image_alt_text_is_kept():
    events = _heading_events("# ![logo](logo.png) Project\n")

    assert events[0] == Other("image", "logo.png")
    assert Text("logo") in events


def test_parse_events_strikethrough_enabled():
    events = _heading_events("# ~~old~~ new\n")

    assert [event.kind for event in events if isinstance(event, Other)] == ["s_open", "s_close"]
    assert [event for event in events if isinstance(event, Text)] == [Text("old"), Text(" new")]


def test_parse_events_smart_punctuation_disabled():
    assert _heading_events('# "Quoted" -- text...\n') == [Text('"Quoted" -- text...')]


def test_parse_events_ignores_headings_in_code_blocks():
    events = parse_events("```\n# Not a heading\n```\n\n    # Neither\n")

    assert not any(isinstance(event, HeadingStart) for event in events)


def test_parse_events_html_block():
    events = parse_events("<div>\nraw\n</div>\n")

    assert any(isinstance(event, Html) and event.content.startswith("<div>") for event in events)


def test_parse_events_empty_input():
    assert parse_events("") == []


def test_markdown_parser_is_cached():
    assert markdown_parser() is markdown_parser()


def test_markdown_parser_rules():
    enabled = markdown_parser().get_active_rules()

    assert "table" in enabled["block"]
    assert "strikethrough" in enabled["inline"]
    assert "footnote_ref" in enabled["inline"]
