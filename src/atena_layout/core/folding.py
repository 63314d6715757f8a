"""Fixed-width line folding for vertically printed addresses.

Address text is reflowed into columns of a fixed number of characters.
Characters are counted as user-perceived characters: a base character and
any combining marks, variation selectors, emoji modifiers or zero-width
joiner sequences that follow it are never split across lines.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator

from atena_layout.core.address_formatter import HARD_BREAK

DEFAULT_MAX_LINE_LENGTH = 20

_ZWJ = "\u200d"
_EMOJI_MODIFIERS = range(0x1F3FB, 0x1F400)
_REGIONAL_INDICATORS = range(0x1F1E6, 0x1F200)
# Halfwidth (han)dakuten are Lm but extend the preceding halfwidth kana
_HALFWIDTH_SOUND_MARKS = frozenset("\uff9e\uff9f")


def _extends_cluster(ch: str) -> bool:
    """Return True if ``ch`` attaches to the preceding character."""
    if ch == _ZWJ or ch in _HALFWIDTH_SOUND_MARKS:
        return True
    if ord(ch) in _EMOJI_MODIFIERS:
        return True
    # Mn/Mc/Me: dakuten (U+3099), variation selectors, accents...
    return unicodedata.category(ch).startswith("M")


def iter_graphemes(text: str) -> Iterator[str]:
    """Yield the user-perceived characters of ``text`` in order.

    Example:
        >>> list(iter_graphemes("がき"))
        ['が', 'き']
    """
    cluster = ""
    join_next = False
    for ch in text:
        if not cluster:
            cluster = ch
            continue
        if join_next or _extends_cluster(ch):
            cluster += ch
            join_next = ch == _ZWJ
            continue
        if (
            ord(ch) in _REGIONAL_INDICATORS
            and len(cluster) == 1
            and ord(cluster) in _REGIONAL_INDICATORS
        ):
            # Flags are pairs of regional indicators
            cluster += ch
            continue
        yield cluster
        cluster = ch
        join_next = False
    if cluster:
        yield cluster


def grapheme_length(text: str) -> int:
    """Count the user-perceived characters in ``text``."""
    return sum(1 for _ in iter_graphemes(text))


def _fold_segment(segment: str, max_line_length: int) -> list[str]:
    graphemes = list(iter_graphemes(segment))
    if not graphemes:
        return [""]
    return [
        "".join(graphemes[i : i + max_line_length])
        for i in range(0, len(graphemes), max_line_length)
    ]


def fold_address(address: str, max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> list[str]:
    """Reflow an address into lines of at most ``max_line_length`` characters.

    Every explicit line break is a hard break and always starts a new line,
    even when the segment it closes is empty. Within a segment, lines are cut
    every ``max_line_length`` user-perceived characters. Joining the result
    with no separator reproduces ``address`` minus its line breaks.

    Args:
        address: Address string, possibly containing ``"\\n"`` hard breaks.
        max_line_length: Maximum characters per line; must be positive.

    Returns:
        List of lines in reading order; never empty.

    Raises:
        ValueError: If ``max_line_length`` is not a positive integer.
    """
    if isinstance(max_line_length, bool) or not isinstance(max_line_length, int):
        raise ValueError(f"max_line_length must be an int, got {max_line_length!r}")
    if max_line_length <= 0:
        raise ValueError(f"max_line_length must be positive, got {max_line_length}")

    lines: list[str] = []
    for segment in address.split(HARD_BREAK):
        lines.extend(_fold_segment(segment, max_line_length))
    return lines
