"""
flags – Extraction of command-line flag names from raw input.

Two syntaxes are recognised on whitespace-delimited tokens:

    --name   long flag; everything after the two dashes is the name, verbatim
    -abc     short flags; every character after the dash is its own name

Tokens not starting with '-' contribute nothing. The result is a frozenset,
so repeated names collapse and ordering is not preserved.

Known quirks, kept on purpose:
    • '-' contributes no flags.
    • '--' contributes the empty-string long flag ''.
    • Input is assumed to hold one byte per character (e.g. ASCII). Other
      characters are handled per code point, which is not guaranteed to
      match what a caller expects.
"""
from __future__ import annotations

import enum
from typing import FrozenSet, Iterator, Set

from flagparse.errors import FlagInputError
from flagparse.logging.helpers import get_logger, trace
from flagparse.parsing.tokenizer import split_words

logger = get_logger("flags")

FLAG_PREFIX = "-"


class FlagKind(enum.Enum):
    NONE = "none"
    SHORT = "short"
    LONG = "long"


class FlagExtractor:
    @staticmethod
    def classify_token(token: str) -> FlagKind:
        """Return which flag syntax *token* uses, if any."""
        if not token.startswith(FLAG_PREFIX):
            return FlagKind.NONE
        if token[1:2] == FLAG_PREFIX:
            return FlagKind.LONG
        return FlagKind.SHORT

    @staticmethod
    def token_flags(token: str) -> Iterator[str]:
        """Yield the flag names contributed by a single *token*.

        Short tokens may yield the same name more than once ('-aa');
        deduplication happens in `extract`.
        """
        kind = FlagExtractor.classify_token(token)
        if kind is FlagKind.LONG:
            yield token[2:]
        elif kind is FlagKind.SHORT:
            yield from token[1:]

    @staticmethod
    def extract(raw: str) -> FrozenSet[str]:
        if not isinstance(raw, str):
            raise FlagInputError(raw)

        tokens = split_words(raw)
        found: Set[str] = set()
        for tok in tokens:
            found.update(FlagExtractor.token_flags(tok))

        trace(
            logger,
            "extracted flags",
            input_len=len(raw),
            tokens=len(tokens),
            flags=len(found),
        )
        return frozenset(found)


def get_flags(raw: str) -> FrozenSet[str]:
    """Return every flag name present in *raw*, without leading dashes.

    >>> sorted(get_flags("-a -b -c -d --long-flag-a --long-flag-b --long-flag-c"))
    ['a', 'b', 'c', 'd', 'long-flag-a', 'long-flag-b', 'long-flag-c']
    >>> "a" in get_flags("-abcd")
    True
    """
    return FlagExtractor.extract(raw)
