"""
Letter arithmetic for Rat Trap Parts.

A round is legal only when the submitted words, taken together, use every
letter of the chosen word plus exactly one new letter. Words are compared by
their sorted-letter signatures:

    cat  -> act
    cats -> acst      (one extra 's')
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence, Tuple


def to_lowercase_and_check_alphabetic(raw: str) -> Tuple[str, bool]:
    """Lowercase ``raw`` and report whether it is purely a-z.

    Shared by seed selection and round validation. The empty string is not
    alphabetic.
    """
    word = raw.lower()
    return word, word.isascii() and word.isalpha()


@dataclass(frozen=True, order=True)
class Word:
    """A single word in play. Equality and ordering use ``literal`` only."""
    literal: str
    sorted_letters: str = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sorted_letters", "".join(sorted(self.literal)))

    def __len__(self) -> int:
        return len(self.literal)

    def __str__(self) -> str:
        return self.literal


def is_one_more_than(base: Word, candidates: Sequence[str]) -> bool:
    """Check that ``candidates`` hold exactly ``base``'s letters plus one.

    Both letter sequences are walked in sorted order. A mismatch skips one
    letter of the combined candidates; more than one skip in total fails.
    """
    combined = "".join(candidates)
    if len(combined) != len(base.literal) + 1:
        return False

    letters = sorted(combined)
    target = base.sorted_letters
    i = j = 0
    extra = 0
    while i < len(target) and j < len(letters):
        if target[i] == letters[j]:
            i += 1
            j += 1
            continue
        extra += 1
        if extra > 1:
            return False
        j += 1

    # every base letter must be consumed; anything left over is extra
    if i < len(target):
        return False
    extra += len(letters) - j
    return extra == 1
