"""Base64 alphabet helpers and the nibble packing codec.

The codec is not byte-oriented Base64. Each decimal digit contributes a
4-bit nibble; the resulting bit stream is cut into 6-bit symbols:

- trailing 4 bits are padded with ``0b11``
- trailing 2 bits are padded with ``0b1111``

Decoding drops any nibble whose value is 10 or more, so padding nibbles
vanish. A leftover 2-bit run at the end must be ``0b11``.
"""

from typing import Dict, List

from .errors import InvalidPadding, InvalidSymbol


ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
INVALID = "="

_VALUES: Dict[str, int] = {c: i for i, c in enumerate(ALPHABET)}


def value_to_symbol(value: int) -> str:
    if 0 <= value < 64:
        return ALPHABET[value]
    return INVALID


def symbol_to_value(symbol: str) -> int:
    try:
        return _VALUES[symbol]
    except KeyError:
        raise InvalidSymbol(f"not a base64 symbol: {symbol!r}") from None


def encode(number: str) -> str:
    """Pack a string of decimal digits into base64 symbols."""
    out: List[str] = []
    current = 0
    bits = 0
    for ch in number:
        if ch < "0" or ch > "9":
            raise InvalidSymbol(f"not a decimal digit: {ch!r}")
        current = (current << 4) | (ord(ch) - 0x30)
        bits += 4
        if bits >= 6:
            bits -= 6
            out.append(ALPHABET[current >> bits])
            current &= (1 << bits) - 1
    if bits == 4:
        out.append(ALPHABET[(current << 2) | 0x3])
    elif bits == 2:
        out.append(ALPHABET[(current << 4) | 0xF])
    return "".join(out)


def decode(encoded: str) -> str:
    """Unpack base64 symbols produced by :func:`encode` into decimal digits."""
    out: List[str] = []
    current = 0
    bits = 0
    for ch in encoded:
        current = (current << 6) | symbol_to_value(ch)
        bits += 6
        while bits >= 4:
            bits -= 4
            nibble = current >> bits
            # 10-15 only arise from padding
            if nibble < 10:
                out.append(chr(nibble + 0x30))
            current &= (1 << bits) - 1
    if bits == 2 and current != 0x3:
        raise InvalidPadding(f"invalid trailing bits {current:02b}")
    return "".join(out)
