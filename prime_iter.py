#!/usr/bin/env python3
"""
Prime Iter — endless prime stream + CLI

An incremental prime generator: each step scans odd candidates above the last
prime found and decides primality by trial division against the primes already
discovered, stopping once p^2 exceeds the candidate. Every prime below the next
candidate is already in the basis, so the test is complete and costs O(π(√m))
divisions per candidate.

Usage examples:
  - First ten primes:
      python prime_iter.py --count 10

  - Primes up to 10_000, then counters:
      python prime_iter.py --limit 10000 --stats

  - Counters only:
      python prime_iter.py --count 100000 --quiet --stats

Library use:
    >>> from itertools import islice
    >>> list(islice(PrimeIter(), 10))
    [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
"""

from __future__ import annotations
import argparse
import sys
from typing import Iterator, List, Optional, Tuple


class PrimeIter:
    """
    Unbounded, forward-only iterator over the primes in increasing order.
    Python ints never overflow, so next() always succeeds and never raises
    StopIteration. A fresh instance starts again from 2.
    """

    def __init__(self):
        self._found: List[int] = []          # discovered primes, increasing
        # stats
        self.candidates: int = 0
        self.divisions: int = 0

    def __iter__(self) -> PrimeIter:
        return self

    def __next__(self) -> int:
        if not self._found:
            self._found.append(2)
            return 2

        last = self._found[-1]
        m = last + 1 if last == 2 else last + 2
        while not self._is_prime(m):
            m += 2
        self._found.append(m)
        return m

    def _is_prime(self, m: int) -> bool:
        """Trial division of odd m by discovered primes p with p*p <= m."""
        self.candidates += 1
        for p in self._found:
            if p * p > m:
                break
            self.divisions += 1
            if m % p == 0:
                return False
        return True

    @property
    def primes(self) -> Tuple[int, ...]:
        """Every prime produced so far, in order."""
        return tuple(self._found)

    @property
    def primes_found(self) -> int:
        return len(self._found)

    def take(self, count: int) -> List[int]:
        """Advance count times and return the primes produced."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return [next(self) for _ in range(count)]

    def up_to(self, limit: int) -> Iterator[int]:
        """
        Yield primes from the current position up to limit (inclusive).
        The first prime above limit is still produced (and kept in .primes):
        the stream cannot look ahead without advancing.
        """
        for p in self:
            if p > limit:
                return
            yield p

    def __repr__(self) -> str:
        largest = self._found[-1] if self._found else None
        return f"PrimeIter(found={len(self._found)}, largest={largest})"


def non_negative_int(val: str) -> int:
    try:
        v = int(val)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer: {val}")
    if v < 0:
        raise argparse.ArgumentTypeError(f"Expected a non-negative integer, got {v}")
    return v


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Prime Iter — endless incremental prime generator.")
    bound = p.add_mutually_exclusive_group(required=True)
    bound.add_argument("--count", type=non_negative_int, help="Print the first N primes.")
    bound.add_argument("--limit", type=non_negative_int, help="Print primes up to N (inclusive).")
    p.add_argument("--stats", action="store_true", help="Print simple statistics at end.")
    p.add_argument("--quiet", action="store_true", help="Do not print the primes themselves.")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    it = PrimeIter()
    if args.count is not None:
        stream = iter(it.take(args.count))
    else:
        stream = it.up_to(args.limit)

    emitted = 0
    for prime in stream:
        if not args.quiet:
            print(prime)
        emitted += 1

    if emitted == 0:
        print("[warn] no primes in the requested range.")

    if args.stats:
        print("--- stats ---")
        print(f"primes emitted : {emitted}")
        print(f"primes found   : {it.primes_found}")
        print(f"largest prime  : {it.primes[-1] if it.primes_found else '-'}")
        print(f"candidates     : {it.candidates}")
        print(f"divisions      : {it.divisions}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
