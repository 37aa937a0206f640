"""Wire forms for generated values and their factor lists.

Values render as a decimal string or a base64 token. Factor lists render
either expanded (``"59 59 7 2"``) or run-length encoded
(``"59x2 7x1 2x1"``), always in descending prime order.
"""

from typing import List, Optional, Tuple

from . import codec
from .digits import b64_to_str, dec_to_str
from .errors import CapacityExceeded, ParseError
from .factors import FactorMultiset
from .generator import Challenge, Mode


DECIMAL = "decimal"
BASE64 = "base64"
EXPANDED = "expanded"
RLE = "rle"


def value_to_decimal_string(challenge: Challenge) -> str:
    if challenge.mode is not Mode.DIGITS:
        raise ValueError("only digits-mode values have a decimal form")
    return dec_to_str(challenge.value)


def value_to_base64_string(challenge: Challenge) -> str:
    if challenge.mode is Mode.DIGITS:
        return codec.encode(dec_to_str(challenge.value))
    return b64_to_str(challenge.value)


def value_to_string(challenge: Challenge, form: str = BASE64,
                    max_length: Optional[int] = None) -> str:
    if form == DECIMAL:
        out = value_to_decimal_string(challenge)
    elif form == BASE64:
        out = value_to_base64_string(challenge)
    else:
        raise ValueError(f"unknown value form {form!r}")
    if max_length and len(out) > max_length:
        raise CapacityExceeded(
            f"{form} value needs {len(out)} characters, limit is {max_length}")
    return out


def factors_to_expanded_string(factors: FactorMultiset) -> str:
    return " ".join(str(p) for p in factors.descending())


def factors_to_rle_string(factors: FactorMultiset) -> str:
    return " ".join(f"{p}x{n}" for p, n in _runs(factors.descending()))


def factors_to_string(factors: FactorMultiset, form: str = EXPANDED) -> str:
    if form == EXPANDED:
        return factors_to_expanded_string(factors)
    if form == RLE:
        return factors_to_rle_string(factors)
    raise ValueError(f"unknown factors form {form!r}")


def _runs(primes: List[int]) -> List[Tuple[int, int]]:
    runs: List[Tuple[int, int]] = []
    for p in primes:
        if runs and runs[-1][0] == p:
            runs[-1] = (p, runs[-1][1] + 1)
        else:
            runs.append((p, 1))
    return runs


def _parse_int(token: str, text: str) -> int:
    if not token or not token.isascii() or not token.isdigit():
        raise ParseError(f"invalid number {token!r} in {text!r}")
    return int(token)


def parse_factor_runs(text: str) -> List[Tuple[int, int]]:
    """Parse an expanded or RLE factor list into ``(prime, count)`` runs.

    RLE primes must be strictly ascending or strictly descending. Counts
    are not expanded here.
    """
    tokens = text.split()
    if not tokens:
        raise ParseError("empty factor list")
    if "x" not in tokens[0]:
        return [(_parse_int(tok, text), 1) for tok in tokens]

    runs: List[Tuple[int, int]] = []
    for tok in tokens:
        prime_s, sep, count_s = tok.partition("x")
        if not sep:
            raise ParseError(f"mixed factor list formats in {text!r}")
        prime = _parse_int(prime_s, text)
        count = _parse_int(count_s, text)
        if count == 0:
            raise ParseError(f"zero count for {prime} in {text!r}")
        runs.append((prime, count))
    pairs = list(zip(runs, runs[1:]))
    if not (all(a[0] < b[0] for a, b in pairs) or all(a[0] > b[0] for a, b in pairs)):
        raise ParseError(f"factors out of order in {text!r}")
    return runs


def parse_factors(text: str, max_factors: Optional[int] = None) -> FactorMultiset:
    """Parse an expanded or RLE factor list.

    Raises ParseError if the list names more than ``max_factors`` factors.
    """
    runs = parse_factor_runs(text)
    total = sum(count for _, count in runs)
    if max_factors is not None and total > max_factors:
        raise ParseError(f"{total} factors exceeds limit of {max_factors}")
    factors = FactorMultiset()
    for prime, count in runs:
        for _ in range(count):
            factors.add(prime)
    return factors
