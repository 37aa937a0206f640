import random
from typing import FrozenSet, Tuple


PRIMES: Tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59,
)
PRIME_SET: FrozenSet[int] = frozenset(PRIMES)


def draw_prime(rng: random.Random) -> int:
    """Pick one of the table primes using a non-negative draw mod len(PRIMES)."""
    r = rng.getrandbits(31)
    return PRIMES[r % len(PRIMES)]
