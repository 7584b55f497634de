#!/usr/bin/env python3
"""Play Rat Trap Parts in the terminal.

Start from a 3-letter word. Each round, pick a word in play, add one letter,
and rearrange the letters into one or more new words. Longer words score
more, but a word sharing a root with anything already played is refused.

Usage:
  python3 rattrap.py
  python3 rattrap.py --start cat
  python3 rattrap.py --start random --seed 42
"""

from __future__ import annotations
import argparse
import logging
import random
import sys
from typing import List, Optional, Tuple

from game_state import GameState, InvalidSeedError, SessionFinishedError, start_session
from lexicon import N_WORDS, WORDLIST, LexiconError, WordNetLexicon, download_wordnet
from roots import WordTooLongError
from rounds import RoundError

HELP_TEXT = """\
RAT TRAP PARTS
==============

Start with a three letter word. Every round, take one of your current words,
add a single letter, and use all of those letters to spell one or more new
words of at least three letters each. The new words replace the old one.

  > cat cats          cat + s       -> cats
  > cats stack        cats + k      -> stack
  > stack cot ask     stack + o     -> cot, ask

Each new word scores its length minus three. Words that share a root with
something already played (plurals, other tenses) are not allowed. When you
quit, every word still in play scores once more.

Commands: h or ? for help, q to quit."""

RANDOM_COMMANDS = {"r", "random"}
HELP_COMMANDS = {"h", "help", "?"}
QUIT_COMMANDS = {"q"}


def show_help() -> None:
    print(HELP_TEXT)
    print()


def show_state(state: GameState) -> None:
    print(f"Score: {state.score}")
    print(f"Prior words: {' '.join(state.prior_words())}")
    print(f"Current words: {' '.join(state.current_words())}")


def pick_seed(
    choice: str,
    lexicon: WordNetLexicon,
    rng: Optional[random.Random] = None,
) -> GameState:
    word = choice.strip().lower()
    if word in RANDOM_COMMANDS:
        word = lexicon.pick_random_seed(rng)
        print(f"Starting with '{word}'")
    return start_session(word, lexicon)


def setup_loop(lexicon: WordNetLexicon, rng: Optional[random.Random] = None) -> Optional[GameState]:
    """Prompt until a seed word is chosen. Returns None if input runs out."""
    print("welcome to  R A T  T R A P  P A R T S")
    while True:
        print("Enter a 3-letter word to start with.")
        print("'r' or 'random' for random start, 'h' for help.")
        try:
            raw = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return None
        choice = raw.strip().lower()
        if not choice:
            continue
        if choice in HELP_COMMANDS:
            show_help()
            continue
        try:
            return pick_seed(choice, lexicon, rng)
        except InvalidSeedError as exc:
            print(f"  {exc}")


def parse_submission(line: str) -> Tuple[str, List[str]]:
    tokens = line.lower().split()
    if not tokens:
        return "", []
    return tokens[0], tokens[1:]


def interactive_loop(state: GameState, lexicon: WordNetLexicon) -> int:
    """Play rounds until the player quits. Returns the final score."""
    print("If confused, enter h")
    while not state.finished:
        show_state(state)
        try:
            raw = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        command = raw.strip().lower()
        if not command:
            continue
        if command in QUIT_COMMANDS:
            break
        if command in HELP_COMMANDS:
            show_help()
            continue

        chosen, candidates = parse_submission(command)
        try:
            result = state.play_round(chosen, candidates, lexicon)
        except RoundError as exc:
            print(f"  {exc}")
            continue
        print(f"  +{result.score_delta}")

    final = state.finalize_session()
    print(f"Your final score is {final}")
    return final


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Rat Trap Parts")
    parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="Seed word to start with, or 'random' (default: ask)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible random starts",
    )
    parser.add_argument(
        "--wordfreq-limit",
        type=int,
        default=N_WORDS,
        help=f"How many of wordfreq's top English words count as spelled correctly (default: {N_WORDS})",
    )
    parser.add_argument(
        "--wordlist",
        type=str,
        default=WORDLIST,
        help=f"wordfreq word list to draw from (default: {WORDLIST})",
    )
    parser.add_argument(
        "--download-wordnet",
        action="store_true",
        help="Download the NLTK WordNet corpus before starting",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log root lookups and round decisions",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.download_wordnet and not download_wordnet():
        print("Error: couldn't download the WordNet corpus")
        sys.exit(1)

    rng = random.Random(args.seed)

    try:
        lexicon = WordNetLexicon(limit=args.wordfreq_limit, wordlist=args.wordlist)
        if args.start:
            state = pick_seed(args.start, lexicon, rng)
        else:
            state = setup_loop(lexicon, rng)
        if state is None:
            return
        interactive_loop(state, lexicon)
    except (InvalidSeedError, LexiconError, WordTooLongError, SessionFinishedError) as exc:
        print(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
