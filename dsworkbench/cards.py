"""A deck of card numbers: build it, show it, shuffle it."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable

DECK_SIZE = 52
SEPARATOR = "-" * 47


def display(items: Iterable[object]) -> str:
    """Return the items on one line, each followed by two blanks, ending in a newline."""
    return "".join(f"{item}  " for item in items) + "\n"


def new_deck() -> list[int]:
    """Return the card numbers 1 to 52 in order."""
    return list(range(1, DECK_SIZE + 1))


def shuffled_deck(rng: random.Random | None = None) -> list[int]:
    """Return a new deck shuffled with ``rng`` (a fresh generator when omitted)."""
    deck = new_deck()
    (rng if rng is not None else random.Random()).shuffle(deck)
    return deck


def main(argv: list[str] | None = None) -> int:
    """Print the ordered deck, a separator, and a shuffled deck."""
    parser = argparse.ArgumentParser(prog="cards", description=main.__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for the shuffle")
    args = parser.parse_args(argv)
    sys.stdout.write(display(new_deck()))
    sys.stdout.write(f"\n{SEPARATOR}\n")
    sys.stdout.write(display(shuffled_deck(random.Random(args.seed))))
    return 0


if __name__ == "__main__":
    sys.exit(main())