"""
cmark-toc: Table of Contents generator for Markdown documents.

Library Usage:
    from cmark_toc import RenderOptions, TableOfContents

    toc = TableOfContents.from_text("# Heading\\n\\n## Subheading\\n")
    toc.to_cmark()
    toc.to_cmark(RenderOptions(item_symbol="*", min_level=2, indent=4))

A pre-parsed event stream can be used instead of text:

    from cmark_toc import parse_events

    toc = TableOfContents.from_events(parse_events(text))
"""

import logging

from .config import ConfigError, RenderOptions
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
from .exceptions import (
    HeadingMismatchError,
    NestedHeadingError,
    ParseError,
    UnmatchedHeadingEndError,
)
from .generator import TableOfContents, generate_toc
from .models import Heading
from .parser import collect_headings, parse_events
from .render import ItemSymbol, render_inline
from .slugify import GitHubSlugifier, Slugifier

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "TableOfContents",
    "generate_toc",
    "parse_events",
    "collect_headings",
    "render_inline",
    # Slugifiers
    "Slugifier",
    "GitHubSlugifier",
    # Data models
    "Heading",
    "HeadingLevel",
    "Event",
    "HeadingStart",
    "HeadingEnd",
    "Text",
    "Code",
    "Html",
    "EmphasisStart",
    "EmphasisEnd",
    "StrongStart",
    "StrongEnd",
    "Other",
    # Configuration
    "RenderOptions",
    "ItemSymbol",
    # Exceptions
    "ConfigError",
    "ParseError",
    "HeadingMismatchError",
    "NestedHeadingError",
    "UnmatchedHeadingEndError",
    # Version
    "__version__",
]
