"""Package-specific exception types."""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for malformed event streams.

    Raised when the heading markers produced by the Markdown parser do not pair
    up. These indicate a broken parser contract and are never recovered from.
    """


class HeadingMismatchError(ParseError):
    """Raised when a heading end marker closes a heading of another level.

    Args:
        expected: Level of the heading that is currently open.
        found: Level carried by the end marker.
    """

    def __init__(self, expected: int, found: int):
        self.expected = expected
        self.found = found
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"Heading end marker for level {int(self.found)} does not match "
            f"the open heading of level {int(self.expected)}"
        )


class UnmatchedHeadingEndError(ParseError):
    """Raised when a heading end marker arrives with no heading open.

    Args:
        level: Level carried by the end marker.
    """

    def __init__(self, level: int):
        self.level = level
        super().__init__(f"Heading end marker for level {int(self.level)} without an open heading")


class NestedHeadingError(ParseError):
    """Raised when a heading starts while another heading is still open.

    Args:
        open_level: Level of the heading that is currently open.
        level: Level of the heading start marker.
    """

    def __init__(self, open_level: int, level: int):
        self.open_level = open_level
        self.level = level
        super().__init__(
            f"Heading of level {int(self.level)} started inside an open heading "
            f"of level {int(self.open_level)}"
        )
