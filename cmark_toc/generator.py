"""Table of contents generation for Markdown documents."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .config import RenderOptions, normalize_options, validate_options
from .constants import MAX_LEVEL, MIN_LEVEL
from .events import Event
from .models import Heading
from .parser import collect_headings, parse_events
from .slugify import GitHubSlugifier

logger = logging.getLogger(__name__)


class TableOfContents:
    """The headings of a Markdown document, in document order.

    Build one with `from_text` or `from_events`; it does not change afterwards.

    Examples:
        toc = TableOfContents.from_text("# Heading\\n\\n## Subheading\\n")
        toc.to_cmark()  # "- [Heading](#heading)\\n  - [Subheading](#subheading)\\n"
    """

    def __init__(self, headings: Iterable[Heading] = ()):
        self._headings = tuple(headings)

    @classmethod
    def from_text(cls, text: str) -> TableOfContents:
        """Parse Markdown text and collect its headings."""
        return cls.from_events(parse_events(text))

    @classmethod
    def from_events(cls, events: Iterable[Event]) -> TableOfContents:
        """Collect the headings of an already parsed event stream.

        Raises:
            ParseError: If the heading markers in `events` do not pair up.
        """
        toc = cls(collect_headings(events))
        logger.debug("Collected %d headings", len(toc))
        return toc

    def __len__(self) -> int:
        return len(self._headings)

    def __iter__(self) -> Iterator[Heading]:
        return iter(self._headings)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._headings)!r})"

    def headings(self, min_level: int = MIN_LEVEL, max_level: int = MAX_LEVEL) -> Iterator[Heading]:
        """Iterate over the headings whose level lies in ``min_level..max_level``."""
        return (heading for heading in self._headings if min_level <= heading.level <= max_level)

    def to_cmark(self, options: RenderOptions | None = None) -> str:
        """Render the table of contents as a nested Markdown list of links.

        The shallowest included level is flush left; each level below it is
        indented by `options.indent` spaces. Anchors are unique across the
        rendered entries. Headings outside the level range are skipped and do
        not take part in duplicate counting.

        Args:
            options: Rendering options; defaults to `RenderOptions()`.

        Returns:
            str: One line per included heading, each ending with a newline.
                Empty when no heading is included.

        Raises:
            ConfigError: If the options fail validation.

        Examples:
            toc.to_cmark(RenderOptions(item_symbol="*", min_level=2, indent=4))
        """
        options = normalize_options(options or RenderOptions())
        validate_options(options)
        logger.debug("Rendering table of contents with %s", options)

        slugifier = options.slugifier if options.slugifier is not None else GitHubSlugifier()

        lines = []
        for heading in self.headings(options.min_level, options.max_level):
            indent = " " * (options.indent * (heading.level - options.min_level))
            label = heading.label()
            anchor = slugifier.slugify(heading.text())
            lines.append(f"{indent}{options.item_symbol} [{label}](#{anchor})\n")

        return "".join(lines)


def generate_toc(text: str, options: RenderOptions | None = None) -> str:
    """Parse Markdown text and render its table of contents.

    Examples:
        generate_toc("# Title\\n## Usage\\n")  # "- [Title](#title)\\n  - [Usage](#usage)\\n"
    """
    return TableOfContents.from_text(text).to_cmark(options)
