import pytest

from factorcap import codec
from factorcap.errors import InvalidPadding, InvalidSymbol


def test_alphabet_mapping():
    assert codec.value_to_symbol(0) == "A"
    assert codec.value_to_symbol(25) == "Z"
    assert codec.value_to_symbol(26) == "a"
    assert codec.value_to_symbol(52) == "0"
    assert codec.value_to_symbol(62) == "+"
    assert codec.value_to_symbol(63) == "/"
    assert codec.value_to_symbol(64) == "="
    assert codec.symbol_to_value("/") == 63
    with pytest.raises(InvalidSymbol):
        codec.symbol_to_value("=")


def test_encode_pads_leftover_bits():
    # 0001 0010 -> 000100 | 10 + 1111
    assert codec.encode("12") == "Ev"
    # 1001 -> 1001 + 11
    assert codec.encode("9") == "n"
    # 0001 0010 0011 -> 000100 100011
    assert codec.encode("123") == "Ej"
    assert codec.encode("") == ""


def test_decode_drops_padding_nibbles():
    assert codec.decode("Ev") == "12"
    assert codec.decode("n") == "9"
    assert codec.decode("Ej") == "123"


@pytest.mark.parametrize("s", [
    "0", "7", "42", "100", "31415926535", "0000", "98765432109876543210",
])
def test_round_trip(s):
    assert codec.decode(codec.encode(s)) == s


def test_decode_rejects_bad_padding():
    # 'E' leaves two bits 00 behind
    with pytest.raises(InvalidPadding):
        codec.decode("E")


def test_invalid_symbols():
    with pytest.raises(InvalidSymbol):
        codec.decode("Ev=")
    with pytest.raises(InvalidSymbol):
        codec.encode("12a")


def test_decode_drops_high_nibbles_mid_stream():
    # '/' is 111111: every nibble it yields is 15
    assert codec.decode("//") == ""
    assert codec.decode("//Ev") == "12"
