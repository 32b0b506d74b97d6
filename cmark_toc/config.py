"""Render options and their validation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from .constants import DEFAULT_INDENT, DEFAULT_ITEM_SYMBOL, MAX_LEVEL, MIN_LEVEL
from .render import ItemSymbol
from .slugify import Slugifier

_ITEM_SYMBOL_ALIASES = {
    "hyphen": ItemSymbol.HYPHEN,
    "asterisk": ItemSymbol.ASTERISK,
}
_ITEM_SYMBOL_VALUES = {symbol.value for symbol in ItemSymbol}


@dataclass(frozen=True)
class RenderOptions:
    """Configuration options to use when rendering the table of contents.

    Attributes:
        item_symbol: List marker for every entry (``"-"`` or ``"*"``).
        min_level: Shallowest heading level to include; rendered flush left.
        max_level: Deepest heading level to include.
        indent: Number of spaces per level below `min_level`.
        slugifier: Anchor strategy. When None, every render starts a fresh
            GitHub slugifier; when given, the same instance (and its duplicate
            counts) is used by every render it is passed to.

    Examples:
        RenderOptions(item_symbol=ItemSymbol.ASTERISK, min_level=2, indent=4)
        RenderOptions.with_levels(range(2, 7), indent=4)
    """

    item_symbol: ItemSymbol | str = DEFAULT_ITEM_SYMBOL
    min_level: int = MIN_LEVEL
    max_level: int = MAX_LEVEL
    indent: int = DEFAULT_INDENT
    slugifier: Slugifier | None = None

    @classmethod
    def with_levels(cls, levels: range | Sequence[int], **options: object) -> RenderOptions:
        """Build options that include the given heading levels.

        Args:
            levels: Either a `range` of consecutive levels, e.g. ``range(2, 7)``,
                or an inclusive ``(min_level, max_level)`` pair.
            options: Any other `RenderOptions` field.

        Raises:
            ConfigError: If `levels` is an empty or stepped range, or not a pair.

        Examples:
            RenderOptions.with_levels(range(2, 7), item_symbol="*")
            RenderOptions.with_levels((2, 6))
        """
        if isinstance(levels, range):
            if not levels or levels.step != 1:
                raise ConfigError("`levels` must be a non-empty range with step 1")
            min_level, max_level = levels[0], levels[-1]
        elif isinstance(levels, Sequence) and not isinstance(levels, str) and len(levels) == 2:
            min_level, max_level = levels
        else:
            raise ConfigError("`levels` must be a range or a (min_level, max_level) pair")
        return cls(min_level=min_level, max_level=max_level, **options)

    @property
    def levels(self) -> range:
        """Included heading levels, as a range."""
        return range(self.min_level, self.max_level + 1)


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_level` must be >= `min_level`")
    """


def normalize_options(options: RenderOptions) -> RenderOptions:
    """Coerce the item symbol to an `ItemSymbol`.

    Unknown symbols are left untouched so `validate_options` can report them.
    """
    item_symbol = options.item_symbol
    if isinstance(item_symbol, str):
        item_symbol = _ITEM_SYMBOL_ALIASES.get(item_symbol.lower(), item_symbol)
        if item_symbol in _ITEM_SYMBOL_VALUES:
            item_symbol = ItemSymbol(item_symbol)

    if item_symbol is options.item_symbol:
        return options
    return replace(options, item_symbol=item_symbol)


def validate_options(options: RenderOptions) -> None:
    """Validate a `RenderOptions` instance.

    Args:
        options: Options to validate.

    Returns:
        None.

    Raises:
        ConfigError: If levels are not integers in 1..6 or are inverted, the
            indent is negative, the item symbol is unsupported, or the
            slugifier has no ``slugify`` method.

    Examples:
        validate_options(RenderOptions(min_level=2, max_level=4))
    """
    options = normalize_options(options)

    _ensure_integers(
        {
            "min_level": options.min_level,
            "max_level": options.max_level,
            "indent": options.indent,
        }
    )

    if options.min_level < MIN_LEVEL:
        raise ConfigError(f"`min_level` must be >= {MIN_LEVEL}")
    if options.max_level > MAX_LEVEL:
        raise ConfigError(f"`max_level` must be <= {MAX_LEVEL}")
    if options.max_level < options.min_level:
        raise ConfigError("`max_level` must be >= `min_level`")
    if options.indent < 0:
        raise ConfigError("`indent` must not be negative")

    if not isinstance(options.item_symbol, ItemSymbol):
        symbols = ", ".join(symbol.value for symbol in ItemSymbol)
        raise ConfigError(f"`item_symbol` must be one of: {symbols}, hyphen, asterisk")

    if options.slugifier is not None and not callable(
        getattr(options.slugifier, "slugify", None)
    ):
        raise ConfigError("`slugifier` must provide a `slugify(text)` method")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
