"""Anchor generation for Markdown headings."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .constants import ANCHOR_STRIP_PATTERN


@runtime_checkable
class Slugifier(Protocol):
    """Strategy that turns heading text into a unique anchor.

    Implementations own their duplicate-tracking state, so reusing an instance
    keeps counting duplicates across calls while a new instance starts fresh.
    """

    def slugify(self, text: str) -> str:
        ...


def github_candidate(text: str) -> str:
    """Return the GitHub anchor for `text` before duplicate disambiguation.

    Lowercases the text, turns every space into a hyphen, and drops anything
    that is not a word character, a hyphen, or a space.

    Examples:
        github_candidate("Subheading with code")  # "subheading-with-code"
        github_candidate("What's New?")  # "whats-new"
        github_candidate("Привет")  # "привет"
    """
    return ANCHOR_STRIP_PATTERN.sub("", text.lower().replace(" ", "-"))


class GitHubSlugifier:
    """A slugifier that attempts to mimic GitHub's heading anchors.

    GitHub does not document its behavior. The first occurrence of a candidate
    anchor is used as is; later occurrences get ``-1``, ``-2``, ... appended.

    Attributes:
        counts: Number of duplicates seen so far for each candidate anchor.

    Examples:
        slugifier = GitHubSlugifier()
        slugifier.slugify("Heading")  # "heading"
        slugifier.slugify("Heading")  # "heading-1"
    """

    def __init__(self):
        self.counts: dict[str, int] = {}

    def slugify(self, text: str) -> str:
        anchor = github_candidate(text)

        count = self.counts.get(anchor)
        if count is None:
            self.counts[anchor] = 0
            return anchor

        count += 1
        self.counts[anchor] = count
        return f"{anchor}-{count}"

    def reset(self) -> None:
        """Forget every anchor seen so far."""
        self.counts.clear()
