"""
Live dictionary for Rat Trap Parts.

Spelling comes from wordfreq's top English words, morphology from WordNet
(via NLTK) and stemming from NLTK's Snowball stemmer. WordNet's corpus has
to be installed once:

    python -m nltk.downloader wordnet
"""

from __future__ import annotations
import logging
import random
from typing import Dict, List, Optional, Set

import nltk
from nltk.corpus import wordnet
from nltk.stem.snowball import SnowballStemmer
from tqdm import tqdm
from wordfreq import top_n_list

from game_state import SEED_LENGTH
from roots import Category

logger = logging.getLogger(__name__)

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

N_WORDS = 50000
WORDLIST = "best"

WORDNET_POS: Dict[Category, str] = {
    Category.NOUN: "n",
    Category.VERB: "v",
    Category.ADJECTIVE: "a",
    Category.ADVERB: "r",
}


class LexiconError(RuntimeError):
    """The dictionary could not be set up. Fatal to the session."""


def progress(iterable, desc=""):
    return tqdm(iterable, desc=desc, ascii=" ▖▘▝▗▚▞█", bar_format='{desc}: |{bar:20}|')


def download_wordnet() -> bool:
    return nltk.download("wordnet", quiet=True)


def load_spelling_words(limit: int = N_WORDS, wordlist: str = WORDLIST) -> Set[str]:
    top_words = top_n_list('en', limit, wordlist=wordlist)
    return {w for w in progress(top_words, "Loading dictionary") if w.isascii() and w.isalpha()}


# ============================================================================ #
#                              LEXICON                                         #
# ============================================================================ #

class WordNetLexicon:
    def __init__(self, limit: int = N_WORDS, wordlist: str = WORDLIST):
        try:
            version = wordnet.get_version()
        except LookupError as exc:
            raise LexiconError(
                "Failed to initialize WordNet. Run `python -m nltk.downloader wordnet` "
                "or pass --download-wordnet."
            ) from exc

        self.words = load_spelling_words(limit, wordlist)
        if not self.words:
            raise LexiconError(f"No words loaded from wordfreq list '{wordlist}'")
        self.stemmer = SnowballStemmer("english")
        self._seed_words: Optional[List[str]] = None
        logger.info(
            f"Loaded {len(self.words):,} words from wordfreq top {limit} ({wordlist}), "
            f"WordNet {version}"
        )

    def is_correctly_spelled(self, word: str) -> bool:
        return word in self.words

    def base_form(self, word: str, category: Category) -> Optional[str]:
        # Analyses list the word itself first whenever it is a lemma too
        # ("found", "glasses"), so take the first one that differs from it.
        for base in wordnet._morphy(word, WORDNET_POS[category]):
            if base != word:
                return base
        return None

    def exists_as(self, word: str, category: Category) -> bool:
        for synset in wordnet.synsets(word, pos=WORDNET_POS[category]):
            if any(lemma.name().lower() == word for lemma in synset.lemmas()):
                return True
        return False

    def stems(self, word: str) -> List[str]:
        """Snowball stem of ``word`` when it is itself a dictionary word.

        Rule-based stems like ``univers`` would merge unrelated words
        (``universe`` / ``university``), so those fall back to the word.
        """
        stem = self.stemmer.stem(word)
        if not stem or (stem != word and not self.is_correctly_spelled(stem)):
            return [word]
        return [stem]

    def seed_words(self) -> List[str]:
        """Spelled 3-letter words WordNet knows in at least one category."""
        if self._seed_words is None:
            short = sorted(w for w in self.words if len(w) == SEED_LENGTH)
            self._seed_words = [
                w for w in progress(short, "Collecting seed words")
                if any(self.exists_as(w, category) for category in Category)
            ]
        return self._seed_words

    def pick_random_seed(self, rng: Optional[random.Random] = None) -> str:
        choices = self.seed_words()
        if not choices:
            raise LexiconError("Couldn't find any valid seed words.")
        return (rng or random).choice(choices)
