import os
import sys
from collections import Counter

import pytest

# Ensure the repository root (containing the game modules) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from roots import Category

N, V, ADJ, ADV = Category.NOUN, Category.VERB, Category.ADJECTIVE, Category.ADVERB


class FakeLexicon:
    """Dictionary with a fixed vocabulary that records every query."""

    def __init__(self, spelled=(), base_forms=None, categories=None, stems=None, seeds=()):
        self.spelled = set(spelled)
        self.base_forms = base_forms or {}
        self.categories = categories or {}
        self.stem_map = stems or {}
        self.seeds = list(seeds)
        self.calls = Counter()
        self.category_queries = []

    def is_correctly_spelled(self, word):
        self.calls['spell'] += 1
        return word in self.spelled

    def base_form(self, word, category):
        self.calls['base_form'] += 1
        self.category_queries.append(category)
        return self.base_forms.get(word, {}).get(category)

    def exists_as(self, word, category):
        self.calls['exists_as'] += 1
        return category in self.categories.get(word, set())

    def stems(self, word):
        self.calls['stems'] += 1
        return list(self.stem_map.get(word, []))

    def pick_random_seed(self, rng=None):
        return rng.choice(sorted(self.seeds))


def base_word(word, *categories):
    """Vocabulary entry for a word that is already a base form."""
    return {'categories': {word: set(categories)}, 'stems': {word: [word]}}


def inflected(word, base, *categories):
    return {'base_forms': {word: {c: base for c in categories}}}


def build_lexicon(*entries, spelled_only=(), seeds=()):
    spelled = set(spelled_only)
    base_forms, categories, stems = {}, {}, {}
    for entry in entries:
        for word, forms in entry.get('base_forms', {}).items():
            base_forms.setdefault(word, {}).update(forms)
            spelled.add(word)
        for word, cats in entry.get('categories', {}).items():
            categories.setdefault(word, set()).update(cats)
            spelled.add(word)
        stems.update(entry.get('stems', {}))
    return FakeLexicon(spelled, base_forms, categories, stems, seeds)


@pytest.fixture()
def lexicon():
    return build_lexicon(
        base_word('cat', N, V),
        inflected('cats', 'cat', N, V),
        base_word('act', N, V),
        inflected('acts', 'act', N, V),
        base_word('scat', N, V),
        base_word('cast', N, V),
        base_word('stack', N, V),
        inflected('stacks', 'stack', N, V),
        base_word('tack', N, V),
        inflected('tacks', 'tack', N, V),
        base_word('cot', N),
        base_word('ask', V),
        base_word('oat', N),
        inflected('oats', 'oat', N),
        base_word('sat', V),
        base_word('eat', V),
        inflected('eats', 'eat', V),
        base_word('estate', N),
        base_word('stoat', N),
        base_word('taco', N),
        base_word('coat', N, V),
        spelled_only={'the', 'chat'},
        seeds={'cat', 'act', 'oat'},
    )
