import random

import pytest

from factorcap.codec import symbol_to_value
from factorcap.generator import ChallengeGenerator, Mode
from factorcap.primes import PRIMES, PRIME_SET, draw_prime


def test_draw_prime_stays_in_table():
    rng = random.Random(1234)
    drawn = {draw_prime(rng) for _ in range(2000)}
    assert drawn == set(PRIMES)


def test_digits_mode_size_and_product():
    challenge = ChallengeGenerator(random.Random(7)).generate_digits(40)
    assert challenge.mode is Mode.DIGITS
    assert len(challenge.value) >= 40
    value = int("".join(str(d) for d in reversed(challenge.value)))
    product = 1
    for p in challenge.factors.descending():
        assert p in PRIME_SET
        product *= p
    assert product == value


def test_quads_mode_size_and_product():
    challenge = ChallengeGenerator(random.Random(7)).generate_quads(5)
    assert challenge.mode is Mode.QUADS
    assert len(challenge.value) >= 20
    assert len(challenge.value) % 4 == 0
    value = sum(symbol_to_value(d) * 64 ** i for i, d in enumerate(challenge.value))
    product = 1
    for p in challenge.factors.descending():
        assert p in PRIME_SET
        product *= p
    assert product == value


def test_same_seed_same_challenge():
    a = ChallengeGenerator(random.Random(99)).generate("quads", 3)
    b = ChallengeGenerator(random.Random(99)).generate(Mode.QUADS, 3)
    assert a.value == b.value
    assert a.factors == b.factors


def test_unseeded_generators_work():
    challenge = ChallengeGenerator().generate("digits", 12)
    assert len(challenge.value) >= 12


@pytest.mark.parametrize("size", [0, -3, 2.5, True])
def test_rejects_bad_size(size):
    with pytest.raises(ValueError):
        ChallengeGenerator(random.Random(0)).generate_digits(size)


def test_rejects_unknown_mode():
    with pytest.raises(ValueError):
        ChallengeGenerator(random.Random(0)).generate("hex", 3)


def test_seed_failure_is_not_fatal(monkeypatch, caplog):
    def broken(n):
        raise OSError("no entropy")

    monkeypatch.setattr("factorcap.generator.os.urandom", broken)
    with caplog.at_level("WARNING", logger="factorcap.generator"):
        challenge = ChallengeGenerator().generate_quads(1)
    assert len(challenge.value) % 4 == 0
    assert "random seed" in caplog.text
