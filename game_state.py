"""
Session state for one game of Rat Trap Parts.

A session starts from a single seed word and changes in exactly two ways:
``apply_round`` after a validated round, and ``finalize_session`` when the
player quits. Nothing is persisted; the state lives as long as the game loop.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Set

from letters import Word, to_lowercase_and_check_alphabetic
from roots import Lexicon, roots_of
from rounds import RoundResult, candidate_score, validate_round

logger = logging.getLogger(__name__)

SEED_LENGTH = 3


class InvalidSeedError(ValueError):
    """The requested seed word cannot start a game."""


class SessionFinishedError(RuntimeError):
    """The session was already finalized."""


@dataclass
class GameState:
    current: Set[Word] = field(default_factory=set)
    prior: Set[Word] = field(default_factory=set)
    used_roots: Set[str] = field(default_factory=set)
    score: int = 0
    history: List[RoundResult] = field(default_factory=list)
    finished: bool = False

    def current_words(self) -> List[str]:
        return [word.literal for word in sorted(self.current)]

    def prior_words(self) -> List[str]:
        return [word.literal for word in sorted(self.prior)]

    def apply_round(self, result: RoundResult) -> None:
        """Commit a validated round. All of it lands, or none of it does."""
        if self.finished:
            raise SessionFinishedError("Session already finished.")
        if result.chosen not in self.current:
            raise ValueError(f"'{result.chosen}' is not a current word")

        self.current.discard(result.chosen)
        self.prior.add(result.chosen)
        self.current.update(result.candidates)
        self.used_roots.update(result.newly_used_roots)
        self.score += result.score_delta
        self.history.append(result)
        logger.debug(f"score {self.score} after round {len(self.history)}")

    def play_round(
        self,
        chosen: str,
        candidates: Sequence[str],
        lexicon: Lexicon,
    ) -> RoundResult:
        if self.finished:
            raise SessionFinishedError("Session already finished.")
        result = validate_round(self, chosen, candidates, lexicon)
        self.apply_round(result)
        return result

    def finalize_session(self) -> int:
        """Credit every word still in play and freeze the session.

        Words in play already passed validation, so no root check is done.
        """
        if self.finished:
            raise SessionFinishedError("Session already finished.")
        bonus = sum(candidate_score(word.literal) for word in self.current)
        self.score += bonus
        self.finished = True
        logger.info(f"session finished: final score {self.score} (bonus {bonus})")
        return self.score


def start_session(seed: str, lexicon: Lexicon) -> GameState:
    """Create a session holding ``seed`` with its roots already used."""
    word, valid = to_lowercase_and_check_alphabetic(seed.strip())
    if not valid or len(word) != SEED_LENGTH:
        raise InvalidSeedError(f"'{seed}' is not a {SEED_LENGTH}-letter word")
    if not lexicon.is_correctly_spelled(word):
        raise InvalidSeedError(f"'{word}' isn't a valid word")

    state = GameState(current={Word(word)})
    state.used_roots.update(roots_of(word, lexicon))
    logger.debug(f"session started with '{word}', roots={sorted(state.used_roots)}")
    return state
