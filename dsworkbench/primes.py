"""Generate the prime numbers up to a limit, two ways."""

from __future__ import annotations

import sys


def primes_trial_division(limit: int) -> list[int]:
    """Return the primes up to and including ``limit``.

    Each candidate is tested against the primes already found.
    """
    primes: list[int] = []
    for candidate in range(2, limit + 1):
        if all(candidate % prime for prime in primes):
            primes.append(candidate)
    return primes


def primes_sieve(limit: int) -> list[int]:
    """Return the primes up to and including ``limit`` using the Sieve of Eratosthenes."""
    if limit < 2:
        return []
    is_prime = [True] * (limit + 1)
    primes: list[int] = []
    for number in range(2, limit + 1):
        if is_prime[number]:
            primes.append(number)
            for multiple in range(number * 2, limit + 1, number):
                is_prime[multiple] = False
    return primes


def main(argv: list[str] | None = None) -> int:
    """Print the primes up to a limit given as an argument or read from standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        raw = args[0]
    else:
        print("Up to what number would you like to generate primes? ")
        raw = sys.stdin.readline()
    try:
        limit = int(raw.strip())
    except ValueError:
        print(f"[X] Error: not an integer: {raw.strip()!r}", file=sys.stderr)
        return 1
    print()
    print(f"Here are the prime numbers from 2 to {limit}")
    for prime in primes_trial_division(limit):
        print(prime)
    return 0


if __name__ == "__main__":
    sys.exit(main())