from __future__ import annotations

import pytest

from cmark_toc.slugify import GitHubSlugifier, Slugifier, github_candidate


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Hello World", "hello-world"),
        ("What's New?", "whats-new"),
        ("C++/CLI", "ccli"),
        ("snake_case name", "snake_case-name"),
        ("Multiple   Spaces", "multiple---spaces"),
        ("Tom & Jerry", "tom--jerry"),
        ("already-hyphenated", "already-hyphenated"),
        ("Version 2.0", "version-20"),
        ("Area m²", "area-m"),
        ("½ or ① off", "-or--off"),
        ("", ""),
    ],
)
def test_github_candidate_expected_examples(title: str, expected: str):
    """Validates anchor generation for representative examples."""
    assert github_candidate(title) == expected


def test_github_candidate_keeps_non_ascii_word_characters():
    assert github_candidate("Привет") == "привет"
    assert github_candidate("Café Crème") == "café-crème"
    assert github_candidate("日本語") == "日本語"


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("नमस्ते", "नमस्ते"),
        ("हिन्दी भाषा", "हिन्दी-भाषा"),
        ("ภาษาไทย", "ภาษาไทย"),
        ("مَرْحَبًا", "مَرْحَبًا"),
        ("a‿b", "a‿b"),
    ],
)
def test_github_candidate_keeps_combining_marks_and_connectors(title: str, expected: str):
    assert github_candidate(title) == expected


def test_github_candidate_drops_tabs_and_newlines():
    assert github_candidate("a\tb\nc") == "abc"


def test_slugify_first_occurrence_is_bare():
    assert GitHubSlugifier().slugify("Subheading with code") == "subheading-with-code"


def test_slugify_numbers_duplicates_in_order():
    slugifier = GitHubSlugifier()

    assert [slugifier.slugify(text) for text in ["Heading", "Heading", "heading"]] == [
        "heading",
        "heading-1",
        "heading-2",
    ]
    assert slugifier.counts == {"heading": 2}


def test_slugify_independent_instances_do_not_share_counts():
    assert GitHubSlugifier().slugify("Heading") == "heading"
    assert GitHubSlugifier().slugify("Heading") == "heading"


def test_slugify_counts_by_candidate_not_by_text():
    slugifier = GitHubSlugifier()

    assert slugifier.slugify("What's new") == "whats-new"
    assert slugifier.slugify("Whats new?") == "whats-new-1"


def test_slugify_does_not_resolve_cascading_collisions():
    slugifier = GitHubSlugifier()

    assert slugifier.slugify("Heading") == "heading"
    assert slugifier.slugify("Heading") == "heading-1"
    assert slugifier.slugify("Heading 1") == "heading-1"


def test_reset_forgets_previous_anchors():
    slugifier = GitHubSlugifier()
    slugifier.slugify("Heading")

    slugifier.reset()

    assert slugifier.counts == {}
    assert slugifier.slugify("Heading") == "heading"


def test_github_slugifier_satisfies_protocol():
    assert isinstance(GitHubSlugifier(), Slugifier)
