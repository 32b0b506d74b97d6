"""Constants used across the cmark-toc package."""

from __future__ import annotations

import regex

MIN_LEVEL = 1
MAX_LEVEL = 6

DEFAULT_ITEM_SYMBOL = "-"
DEFAULT_INDENT = 2

# Characters that survive in a GitHub anchor. `regex` follows Unicode's definition
# of \w, which keeps combining marks and connector punctuation. Spaces are allowed
# here even though they have already been turned into hyphens.
ANCHOR_STRIP_PATTERN = regex.compile(r"[^\w\- ]")
