"""Unsigned arbitrary precision arithmetic on digit arrays.

Arrays are least-significant digit first. Decimal arrays hold ints in
``0..9``; base-64 arrays hold symbols of :data:`factorcap.codec.ALPHABET`.
Arrays are not normalized, so zero-valued high digits may persist.
"""

from typing import List, Sequence

from .codec import symbol_to_value, value_to_symbol
from .errors import ParseError


DecimalDigits = List[int]
B64Digits = List[str]


# ---------- decimal ----------

def dec_mult_scalar(digits: Sequence[int], scalar: int) -> DecimalDigits:
    out: DecimalDigits = []
    carry = 0
    for d in digits:
        c = d * scalar + carry
        out.append(c % 10)
        carry = c // 10
    while carry:
        out.append(carry % 10)
        carry //= 10
    return out


def dec_to_str(digits: Sequence[int]) -> str:
    return "".join(chr(d + 0x30) for d in reversed(digits))


def dec_from_str(text: str) -> DecimalDigits:
    if not text:
        raise ParseError("empty decimal string")
    out: DecimalDigits = []
    for ch in reversed(text):
        if ch < "0" or ch > "9":
            raise ParseError(f"not a decimal digit: {ch!r}")
        out.append(ord(ch) - 0x30)
    return out


# ---------- base 64 ----------

def b64_add(a: Sequence[str], b: Sequence[str]) -> B64Digits:
    out: B64Digits = []
    carry = 0
    longer = a if len(a) >= len(b) else b
    for idx in range(len(longer)):
        s = carry
        if idx < len(a):
            s += symbol_to_value(a[idx])
        if idx < len(b):
            s += symbol_to_value(b[idx])
        if s >= 64:
            s -= 64
            carry = 1
        else:
            carry = 0
        out.append(value_to_symbol(s))
    if carry:
        out.append("B")
    return out


def b64_add_scalar(a: Sequence[str], value: int) -> B64Digits:
    """Add a single digit value (``0..63``) to ``a``."""
    if not 0 <= value < 64:
        raise ValueError(f"scalar {value} is not a base64 digit")
    out: B64Digits = []
    carry = value
    for sym in a:
        s = symbol_to_value(sym) + carry
        if s >= 64:
            s -= 64
            carry = 1
        else:
            carry = 0
        out.append(value_to_symbol(s))
    if carry:
        out.append(value_to_symbol(carry))
    return out


def b64_mult_scalar(a: Sequence[str], scalar: int) -> B64Digits:
    if scalar < 0:
        raise ValueError("scalar must be non-negative")
    out: B64Digits = []
    carry = 0
    for sym in a:
        prod = symbol_to_value(sym) * scalar + carry
        out.append(value_to_symbol(prod % 64))
        carry = prod // 64
    while carry:
        out.append(value_to_symbol(carry % 64))
        carry //= 64
    return out


def b64_mult(a: Sequence[str], b: Sequence[str]) -> B64Digits:
    """Schoolbook multiply: one shifted partial product per digit of ``a``."""
    out: B64Digits = []
    for idx, sym in enumerate(a):
        partial: B64Digits = ["A"] * idx
        partial.extend(b64_mult_scalar(b, symbol_to_value(sym)))
        out = b64_add(out, partial)
    return out


def b64_to_str(digits: Sequence[str]) -> str:
    """Render most-significant symbol first."""
    return "".join(reversed(digits))


def b64_from_str(text: str) -> B64Digits:
    if not text:
        raise ParseError("empty base64 string")
    for ch in text:
        # raises InvalidSymbol
        symbol_to_value(ch)
    return list(reversed(text))
