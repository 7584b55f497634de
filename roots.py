"""
Root extraction: map a word onto the base forms it could derive from.

Two words that share a root (``cat`` / ``cats``, ``run`` / ``running``) count
as the same word for scoring. Roots come from an injected lexicon providing
three oracles:

  - spelling     ``is_correctly_spelled(word)``
  - morphology   ``base_form(word, category)`` / ``exists_as(word, category)``
  - stemming     ``stems(word)``
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Optional, Protocol, Sequence, Set

from letters import to_lowercase_and_check_alphabetic

logger = logging.getLogger(__name__)

# Inputs must fit a 128-byte buffer, terminator included.
MAX_WORD_LENGTH = 127


class Category(str, Enum):
    """Grammatical categories queried for base forms, in query order."""
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"


class Lexicon(Protocol):
    def is_correctly_spelled(self, word: str) -> bool: ...

    def base_form(self, word: str, category: Category) -> Optional[str]: ...

    def exists_as(self, word: str, category: Category) -> bool: ...

    def stems(self, word: str) -> Sequence[str]: ...


class InvalidWordError(ValueError):
    """Raised when a word contains anything other than letters."""

    def __init__(self, word: str):
        super().__init__(f"'{word}' is not alphabetic")
        self.word = word


class WordTooLongError(ValueError):
    """Raised when a word does not fit the input buffer. Fatal to the session."""

    def __init__(self, word: str, limit: int = MAX_WORD_LENGTH):
        super().__init__(f"Input length exceeded ({len(word)} > {limit} characters).")
        self.word = word
        self.limit = limit


def roots_of(raw: str, lexicon: Lexicon) -> Set[str]:
    """Return every root of ``raw``; empty when it is not a real word.

    Base forms are looked up per category first. Only when the word is
    already a base form in some category does the stemmer run, so canonical
    words are not over-credited while inflections still collapse onto the
    root of their base word.
    """
    if len(raw) > MAX_WORD_LENGTH:
        raise WordTooLongError(raw)
    word, valid = to_lowercase_and_check_alphabetic(raw)
    if not valid:
        raise InvalidWordError(raw)

    roots: Set[str] = set()
    if not lexicon.is_correctly_spelled(word):
        logger.debug(f"roots_of({word!r}): not spelled correctly")
        return roots

    should_stem = False
    for category in Category:
        base = lexicon.base_form(word, category)
        if base is None:
            if lexicon.exists_as(word, category):
                should_stem = True
            continue
        roots.add(base)

    if should_stem:
        roots.update(lexicon.stems(word))

    logger.debug(f"roots_of({word!r}) -> {sorted(roots)} (stemmed={should_stem})")
    return roots
