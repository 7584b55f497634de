"""
Round validation and scoring.

A submission names one word in play and the words that replace it. It is
checked in a fixed order, and the first failed check is reported as a
``RoundError`` subclass:

  1. NotInPlay            chosen word is not a current word
  2. EmptySubmission      no candidate words given
  3. MalformedCandidate   candidate not alphabetic or shorter than 3 letters
  4. NotAValidExtension   letters are not the chosen word plus exactly one
  5. NotARecognizedWord   candidate has no roots (not a dictionary word)
     RootAlreadyUsed      a root was scored before, or twice in this round

Validation never touches the game state; the caller applies the result.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, FrozenSet, List, Sequence, Set, Tuple

from letters import Word, is_one_more_than, to_lowercase_and_check_alphabetic
from roots import Lexicon, roots_of

if TYPE_CHECKING:
    from game_state import GameState

logger = logging.getLogger(__name__)

MIN_CANDIDATE_LENGTH = 3


# ============================================================================ #
#                              ERRORS                                          #
# ============================================================================ #

class RoundError(ValueError):
    """A rejected submission. The session is left untouched."""

    def __init__(self, message: str, word: str = ""):
        super().__init__(message)
        self.word = word


class NotInPlay(RoundError):
    def __init__(self, word: str):
        super().__init__(f"'{word}' is not a current word.", word)


class EmptySubmission(RoundError):
    def __init__(self):
        super().__init__("Need at least one word...")


class MalformedCandidate(RoundError):
    def __init__(self, word: str):
        super().__init__(f"'{word}' is not alpha/too short", word)


class NotAValidExtension(RoundError):
    def __init__(self, word: str):
        super().__init__("Not a valid anagram + extra letter", word)


class NotARecognizedWord(RoundError):
    def __init__(self, word: str):
        super().__init__(f"'{word}' isn't a valid word", word)


class RootAlreadyUsed(RoundError):
    def __init__(self, word: str, root: str):
        super().__init__(f"'{word}' already used previously", word)
        self.root = root


# ============================================================================ #
#                              VALIDATION                                      #
# ============================================================================ #

@dataclass(frozen=True)
class RoundResult:
    chosen: Word
    candidates: Tuple[Word, ...]  # submission order
    score_delta: int
    newly_used_roots: FrozenSet[str]

    @property
    def candidates_as_words(self) -> FrozenSet[Word]:
        return frozenset(self.candidates)


def candidate_score(word: str) -> int:
    return len(word) - 3


def validate_round(
    state: GameState,
    chosen_literal: str,
    candidate_literals: Sequence[str],
    lexicon: Lexicon,
) -> RoundResult:
    """Validate one submission against ``state`` and score it.

    Raises the first ``RoundError`` that applies. Roots for all candidates are
    computed before any conflict check, and conflicts are tracked in a
    round-local set, so a rejected round leaves nothing behind.
    """
    chosen_key, _ = to_lowercase_and_check_alphabetic(chosen_literal)
    chosen = Word(chosen_key)
    if chosen not in state.current:
        raise NotInPlay(chosen_key)

    if not candidate_literals:
        raise EmptySubmission()

    candidates: List[str] = []
    for raw in candidate_literals:
        word, valid = to_lowercase_and_check_alphabetic(raw)
        if not valid or len(word) < MIN_CANDIDATE_LENGTH:
            raise MalformedCandidate(word)
        candidates.append(word)

    if not is_one_more_than(chosen, candidates):
        raise NotAValidExtension(chosen_key)

    root_sets = [(word, roots_of(word, lexicon)) for word in candidates]

    claimed: Set[str] = set()
    score_delta = 0
    for word, roots in root_sets:
        if not roots:
            raise NotARecognizedWord(word)
        scored = False
        for root in sorted(roots):
            if root in state.used_roots or root in claimed:
                logger.debug(f"'{word}' rejected: root '{root}' already used")
                raise RootAlreadyUsed(word, root)
            claimed.add(root)
            if not scored:
                score_delta += candidate_score(word)
                scored = True

    result = RoundResult(
        chosen=chosen,
        candidates=tuple(Word(word) for word in candidates),
        score_delta=score_delta,
        newly_used_roots=frozenset(claimed),
    )
    logger.debug(
        f"round ok: {chosen_key} -> {' + '.join(candidates)} "
        f"(+{score_delta}, roots={sorted(claimed)})"
    )
    return result
