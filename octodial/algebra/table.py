"""
Multiplication table for seven imaginary units.

Built from the seven visible triples and a cyclic orientation test:

    i_n · i_n = -1                      for every generator n
    i_a · i_b = ±i_c                    where {a, b, c} is a visible triple
    sign = + if a → b → c runs clockwise around the 7-cycle, else -

Every unordered pair of distinct generators lies in exactly one triple,
so the 49-entry table is total. Swapping the operands reverses the cyclic
order, which is where anti-commutativity comes from.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from itertools import combinations
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from octodial.config.dial_config import DIAL_CONFIG

logger = logging.getLogger(__name__)

N_GENERATORS = DIAL_CONFIG['algebra']['n_generators']
VISIBLE_TRIPLES: Tuple[Tuple[int, int, int], ...] = tuple(
    tuple(t) for t in DIAL_CONFIG['algebra']['triples']
)

SQUARE_RESULT = -1


class TripleConfigurationError(AssertionError):
    """The triple set does not cover every generator pair exactly once."""


class EntryKind(str, Enum):
    SQUARE = "SQUARE"
    CROSS = "CROSS"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MultiplicationEntry:
    """
    One cell of the table: i_left · i_right.

    For a SQUARE entry `result` is the scalar -1. For a CROSS entry it is
    the generator c in ±i_c, with the sign carried by `negative`.
    """
    left: int
    right: int
    kind: EntryKind
    result: int
    negative: bool = False

    @property
    def sign(self) -> int:
        return -1 if self.negative else 1


def is_clockwise(a: int, b: int, c: int) -> bool:
    """
    Whether a → b → c runs clockwise around the 7-cycle.

    Argument order matters: is_clockwise(a, b, c) and is_clockwise(b, a, c)
    disagree for any three distinct generators.
    """
    a, b, c = a % N_GENERATORS, b % N_GENERATORS, c % N_GENERATORS

    if a < b and b < c:     # 1,2,4
        return True
    if a < b and c < a:     # 5,6,1
        return True
    if b < c and c < a:     # 6,1,3
        return True
    return False


def find_triple(
    a: int,
    b: int,
    triples: Sequence[Sequence[int]] = VISIBLE_TRIPLES,
) -> Optional[Sequence[int]]:
    """First triple containing both a and b, or None."""
    for triple in triples:
        if a in triple and b in triple:
            return triple
    return None


def verify_covering(triples: Sequence[Sequence[int]]) -> None:
    """
    Raise TripleConfigurationError unless the triples form the 7-point design:
    seven triples of distinct in-range generators, every unordered pair of
    generators covered exactly once.
    """
    if not isinstance(triples, (list, tuple)):
        raise TripleConfigurationError(
            f"triples must be a list of 3-element lists, got {triples!r}"
        )
    if len(triples) != N_GENERATORS:
        raise TripleConfigurationError(
            f"expected {N_GENERATORS} triples, got {len(triples)}"
        )

    for triple in triples:
        if not isinstance(triple, (list, tuple)) or not all(
            isinstance(g, int) and not isinstance(g, bool) for g in triple
        ):
            raise TripleConfigurationError(f"triple {triple!r} must be a list of generator ints")
        if len(triple) != 3 or len(set(triple)) != 3:
            raise TripleConfigurationError(
                f"triple {list(triple)} must hold 3 distinct generators"
            )
        out_of_range = [g for g in triple if not 0 <= g < N_GENERATORS]
        if out_of_range:
            raise TripleConfigurationError(
                f"triple {list(triple)} has generators outside [0, {N_GENERATORS - 1}]: {out_of_range}"
            )

    for a, b in combinations(range(N_GENERATORS), 2):
        covering = [t for t in triples if a in t and b in t]
        if len(covering) != 1:
            raise TripleConfigurationError(
                f"pair ({a}, {b}) is covered by {len(covering)} triples, expected 1"
            )


class AlgebraTable:
    """
    Complete 7×7 multiplication table.

    Stored as two read-only arrays indexed [left, right]:
        results  : int8  — generator index, or -1 on the diagonal
        negative : bool  — sign bit (False on the diagonal)
    """

    def __init__(self, results: np.ndarray, negative: np.ndarray):
        if results.shape != (N_GENERATORS, N_GENERATORS) or negative.shape != results.shape:
            raise ValueError(
                f"table arrays must be {N_GENERATORS}x{N_GENERATORS}, "
                f"got {results.shape} and {negative.shape}"
            )
        self.results = results.astype(np.int8, copy=True)
        self.negative = negative.astype(bool, copy=True)
        self.results.setflags(write=False)
        self.negative.setflags(write=False)

    def entry(self, a: int, b: int) -> MultiplicationEntry:
        """Entry for i_a · i_b. ValueError for generators outside [0, 6]."""
        for g in (a, b):
            if not isinstance(g, (int, np.integer)) or not 0 <= g < N_GENERATORS:
                raise ValueError(f"generator must be an int in [0, {N_GENERATORS - 1}], got {g!r}")
        a, b = int(a), int(b)

        if a == b:
            return MultiplicationEntry(a, b, EntryKind.SQUARE, SQUARE_RESULT, False)
        return MultiplicationEntry(
            a, b, EntryKind.CROSS,
            int(self.results[a, b]),
            bool(self.negative[a, b]),
        )

    def __getitem__(self, pair: Tuple[int, int]) -> MultiplicationEntry:
        a, b = pair
        return self.entry(a, b)

    def multiply(self, a: int, b: int) -> Tuple[int, int]:
        """(sign, result) for i_a · i_b; result is -1 for a square."""
        e = self.entry(a, b)
        return e.sign, e.result

    def __len__(self) -> int:
        return int(self.results.size)

    def __iter__(self) -> Iterator[MultiplicationEntry]:
        for a in range(N_GENERATORS):
            for b in range(N_GENERATORS):
                yield self.entry(a, b)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AlgebraTable):
            return NotImplemented
        return (np.array_equal(self.results, other.results)
                and np.array_equal(self.negative, other.negative))

    def __repr__(self) -> str:
        return f"AlgebraTable(n_generators={N_GENERATORS}, entries={len(self)})"

    def signed_matrix(self) -> np.ndarray:
        """
        Signed result codes: +(c+1) for +i_c, -(c+1) for -i_c, 0 on the diagonal.
        Handy for printing and for comparing tables wholesale.
        """
        codes = self.results.astype(np.int16) + 1
        codes[self.negative] *= -1
        np.fill_diagonal(codes, 0)
        return codes


def build_table(triples: Sequence[Sequence[int]] = VISIBLE_TRIPLES) -> AlgebraTable:
    """
    Build the full table from the visible triples.

    Raises TripleConfigurationError if the triples do not cover every
    pair exactly once.
    """
    verify_covering(triples)

    results = np.full((N_GENERATORS, N_GENERATORS), SQUARE_RESULT, dtype=np.int8)
    negative = np.zeros((N_GENERATORS, N_GENERATORS), dtype=bool)

    for i in range(N_GENERATORS):
        for j in range(N_GENERATORS):
            if i == j:
                continue
            triple = find_triple(i, j, triples)
            third = next(x for x in triple if x != i and x != j)
            results[i, j] = third
            negative[i, j] = not is_clockwise(i, j, third)

    table = AlgebraTable(results, negative)
    logger.info(f"Built multiplication table: {len(table)} entries")
    return table


@lru_cache(maxsize=1)
def default_table() -> AlgebraTable:
    """Shared table for the fixed triples. Read-only, safe to share."""
    return build_table(VISIBLE_TRIPLES)


def check_anticommutativity(table: AlgebraTable) -> List[Tuple[int, int]]:
    """
    Pairs (a, b), a < b, where i_b · i_a is not the negation of i_a · i_b.
    Empty for a well-formed table.
    """
    violations = []
    for a, b in combinations(range(N_GENERATORS), 2):
        ab, ba = table.entry(a, b), table.entry(b, a)
        if ab.result != ba.result or ab.negative == ba.negative:
            violations.append((a, b))
    return violations
