import enum
import logging
import os
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .digits import b64_mult_scalar, dec_mult_scalar
from .factors import FactorMultiset
from .primes import draw_prime


logger = logging.getLogger(__name__)

SEED_BYTES = 4
QUAD_SYMBOLS = 4


class Mode(str, enum.Enum):
    DIGITS = "digits"
    QUADS = "quads"


@dataclass
class Challenge:
    mode: Mode
    value: Union[List[int], List[str]]
    factors: FactorMultiset = field(default_factory=FactorMultiset)


def _seeded_rng() -> random.Random:
    seed = b""
    try:
        seed = os.urandom(SEED_BYTES)
    except (NotImplementedError, OSError) as e:
        logger.warning("Failed to read random seed: %s", e)
    if len(seed) != SEED_BYTES:
        logger.warning("Failed to set random seed, falling back to clock")
        return random.Random(time.time_ns())
    return random.Random(int.from_bytes(seed, "little"))


class ChallengeGenerator:
    """Builds a composite value from random table primes.

    Each generator owns its RNG, so instances must not be shared across
    concurrent requests. Pass ``rng`` for deterministic output.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else _seeded_rng()

    def generate(self, mode: Union[Mode, str], size: int) -> Challenge:
        mode = Mode(mode)
        if mode is Mode.DIGITS:
            return self.generate_digits(size)
        return self.generate_quads(size)

    def generate_digits(self, digits: int) -> Challenge:
        """Multiply primes into a decimal value until it has ``digits`` digits."""
        _check_size(digits)
        value = [1]
        factors = FactorMultiset()
        while len(value) < digits:
            p = draw_prime(self._rng)
            value = dec_mult_scalar(value, p)
            factors.add(p)
        logger.debug("generated %d-digit value from %d factors (min %d)",
                     len(value), len(factors), digits)
        return Challenge(Mode.DIGITS, value, factors)

    def generate_quads(self, quads: int) -> Challenge:
        """Multiply primes into a base-64 value of at least ``quads`` quads.

        The result is padded with factors of 2 until its symbol count is a
        whole number of quads.
        """
        _check_size(quads)
        value = ["B"]
        factors = FactorMultiset()
        while len(value) // QUAD_SYMBOLS < quads:
            p = draw_prime(self._rng)
            value = b64_mult_scalar(value, p)
            factors.add(p)
        while len(value) % QUAD_SYMBOLS != 0:
            value = b64_mult_scalar(value, 2)
            factors.add(2)
        logger.debug("generated %d-symbol value from %d factors (min %d quads)",
                     len(value), len(factors), quads)
        return Challenge(Mode.QUADS, value, factors)


def _check_size(size: int) -> None:
    if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
        raise ValueError(f"size must be a positive integer, got {size!r}")
