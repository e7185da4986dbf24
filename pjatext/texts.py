"""
Text helpers behind the stock commands.

Overview
- words(text): whitespace-delimited tokens, in order.
- count_matches(text, pattern): number of non-overlapping regex matches.
- are_anagrams(first, second) / are_palindromes(first, second): pairwise relations
  used by the extraction commands.
- squeeze(items): collapse runs of consecutive duplicates (not a full dedup).
- structure(items): braces-delimited, one-quoted-item-per-line rendering.
- humanize_size(size): bytes scaled to B/KB/MB/GB, rounded half-up to 2 decimals.

Examples
    >>> squeeze(["a", "a", "b", "a"])
    ['a', 'b', 'a']
    >>> humanize_size(1536)
    '1.54 KB'
"""
import itertools
import re
from decimal import Decimal, ROUND_HALF_UP

UNITS = ("B", "KB", "MB", "GB")

# a run of digits at the start of the text or after whitespace, not glued to a word
NUMBER = re.compile(r"(?:^|\s)[0-9]+(?!\w)")


def words(text, /):
    return text.split()


def count_matches(text, pattern, /):
    return sum(1 for _ in re.finditer(pattern, text))


def are_anagrams(first, second, /):
    """
    Two words are anagrams when they hold the same characters the same number of times.

    A word is an anagram of itself.
    """
    return len(first) == len(second) and sorted(first) == sorted(second)


def are_palindromes(first, second, /):
    """
    Two words are palindromes of each other when one reads as the other reversed.
    """
    return len(first) == len(second) and first == second[::-1]


def squeeze(items, /):
    return [item for item, _ in itertools.groupby(items)]


def structure(items, /):
    """
    Render items as a braces-delimited list.

    - no items → "{ }"
    - otherwise one indented, quoted, comma-terminated item per line:
        {
            "first",
            "second",
        }
    """
    if not items:
        return "{ }"
    return "{\n%s}" % "".join('    "%s",\n' % item for item in items)


def humanize_size(size, /):
    """
    Scale a byte count by 1000 through UNITS, stopping at the first value under
    1000 (GB is the last step), and round half-up to two decimals.

    Trailing zeros are dropped: 12 B, 1.5 KB, 1.54 KB.
    """
    size = Decimal(size)
    for unit in UNITS:
        if size < 1000 or unit == UNITS[-1]:
            break
        size /= 1000
    size = size.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP).normalize()
    return f"{size:f} {unit}"


__all__ = (
    "UNITS",
    "NUMBER",
    "words",
    "count_matches",
    "are_anagrams",
    "are_palindromes",
    "squeeze",
    "structure",
    "humanize_size",
)
