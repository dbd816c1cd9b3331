# apps/cli/play.py
"""
Play wordscramble in the terminal.

This is the presentation layer only: it prints the round, forwards each
line the player types to GameSession.submit, and shows the result.

Commands at the prompt:
  :new   start a new round (new root word)
  :quit  leave the game (Ctrl-D works too)
"""

from __future__ import annotations

import argparse

from packages.datasets import (validate_wordlist, pretty_summary, load_words,
                               default_start_words_path)
from packages.engine import ConfigurationError, RoundState
from packages.engine.errors import OracleUnavailableError
from packages.game import GameSession
from packages.oracles import create_oracle, get_oracle_ids


def _render(state: RoundState) -> None:
    print()
    print(state.root_word.upper())
    print(f"Words: {state.word_count}  Score: {state.score}  Streak: {state.streak}")
    for w in state.used_words:
        print(f"  ({len(w)}) {w}")


def _make_oracle(args):
    if args.oracle != "wordlist":
        return create_oracle(args.oracle, language=args.language)
    try:
        return create_oracle("wordlist", language=args.language, path=args.dictionary)
    except FileNotFoundError:
        if args.dictionary:
            raise SystemExit(f"Dictionary not found: {args.dictionary}")
        raise SystemExit(f"No bundled dictionary for '{args.language}'")


def main():
    oracle_choices = get_oracle_ids()

    ap = argparse.ArgumentParser(description="wordscramble: make words from the root word")
    ap.add_argument("--start-words", default=str(default_start_words_path()),
                    help="root word list (one word per line)")
    ap.add_argument("--oracle", choices=oracle_choices, default="wordlist",
                    help="dictionary used to decide whether a word is real")
    ap.add_argument("--dictionary", default=None,
                    help="word list for the 'wordlist' oracle (default: bundled list)")
    ap.add_argument("--language", default="en", help="dictionary language")
    ap.add_argument("--seed", type=int, help="RNG seed for root word picks")
    args = ap.parse_args()

    rep = validate_wordlist(args.start_words)
    print(pretty_summary(rep))

    session = GameSession(load_words(args.start_words), _make_oracle(args),
                          language=args.language, seed=args.seed)
    try:
        state = session.start_round()
    except ConfigurationError as e:
        raise SystemExit(f"Cannot start a round: {e}")

    _render(state)
    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            break

        cmd = line.strip().lower()
        if cmd == ":quit":
            break
        if cmd == ":new":
            _render(session.start_round())
            continue

        try:
            result, state = session.submit(line)
        except OracleUnavailableError as e:
            # round state is untouched; the player can retry
            print(f"Dictionary unavailable: {e}")
            continue
        if result.is_error:
            print(f"{result.title}: {result.message}")
        elif result.accepted:
            print(f"+{result.points}")
            _render(state)

    print(f"Final score: {session.state.score}")


if __name__ == "__main__":
    main()
