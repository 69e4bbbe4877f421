"""
tokenizer – Whitespace tokenization of raw flag-bearing input.

A token is a maximal run of non-whitespace characters. Leading, trailing
and repeated whitespace never produce empty tokens.

Whitespace is the Unicode White_Space property. This is narrower than what
``str.split()`` uses: the ASCII separators \\x1c-\\x1f are *not* whitespace
here and stay inside tokens.
"""
import re
from typing import List

_WHITESPACE = re.compile(
    r"[\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def split_words(raw: str) -> List[str]:
    """Return the whitespace-delimited tokens of *raw*.

    Examples
    --------
    >>> split_words("  -a   --verbose\\tfile ")
    ['-a', '--verbose', 'file']
    >>> split_words("-a\\x1fb")
    ['-a\\x1fb']
    """
    return [tok for tok in _WHITESPACE.split(raw) if tok]
