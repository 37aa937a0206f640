"""Entry points used by the gate: issue a puzzle, check a submitted answer."""

import random
from typing import Optional, Tuple, Union

from . import codec
from .digits import b64_mult_scalar, b64_to_str, dec_mult_scalar, dec_to_str
from .generator import ChallengeGenerator, Mode
from .primes import PRIME_SET
from .serialize import (
    BASE64, EXPANDED, RLE, factors_to_string, parse_factor_runs, value_to_string,
)


BITS_PER_SYMBOL = 6


def generate_challenge(mode: Union[Mode, str], size: int,
                       rng: Optional[random.Random] = None,
                       max_length: Optional[int] = None) -> Tuple[str, str]:
    """Return ``(token, answer)`` for a fresh puzzle.

    Digits mode answers are expanded factor lists, quads mode answers are
    run-length encoded.
    """
    mode = Mode(mode)
    challenge = ChallengeGenerator(rng).generate(mode, size)
    token = value_to_string(challenge, BASE64, max_length=max_length)
    answer = factors_to_string(challenge.factors,
                               EXPANDED if mode is Mode.DIGITS else RLE)
    return token, answer


def verify_answer(token: str, claimed_factors: str,
                  mode: Union[Mode, str] = Mode.QUADS) -> bool:
    """Re-multiply the claimed factors and compare with ``token``.

    Raises ParseError for a malformed factor list.
    """
    mode = Mode(mode)
    runs = parse_factor_runs(claimed_factors)
    if any(p not in PRIME_SET for p, _ in runs):
        return False
    # factors are >= 2: at most one factor per bit of the token
    if sum(n for _, n in runs) > BITS_PER_SYMBOL * len(token):
        return False
    primes = [p for p, n in runs for _ in range(n)]
    if mode is Mode.DIGITS:
        value = [1]
        for p in primes:
            value = dec_mult_scalar(value, p)
        return codec.encode(dec_to_str(value)) == token
    b64 = ["B"]
    for p in primes:
        b64 = b64_mult_scalar(b64, p)
    return b64_to_str(b64) == token
