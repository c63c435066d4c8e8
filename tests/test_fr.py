import random

import pytest

from pairingcurves.bn256.fr import Fr


def _random_elements(count, seed=0x5962BE5D):
    rng = random.Random(seed)
    return [Fr.from_uniform_bytes(rng.randbytes(64)) for _ in range(count)]


def test_sqrt_of_two_inv_squared():
    v = Fr.TWO_INV.square().sqrt()
    assert v == Fr.TWO_INV or -v == Fr.TWO_INV


def test_sqrt_random_squares():
    for a in _random_elements(200):
        root = a.square().sqrt()
        assert a == root or a == -root


def test_sqrt_zero_and_non_residue():
    assert Fr.zero().sqrt() == Fr.zero()
    with pytest.raises(ValueError):
        Fr.MULTIPLICATIVE_GENERATOR.sqrt()


def test_delta():
    assert Fr.DELTA == Fr(7).pow([1 << Fr.S, 0, 0, 0])
    assert Fr.DELTA == Fr.MULTIPLICATIVE_GENERATOR.pow(1 << Fr.S)


def test_roots_of_unity():
    assert Fr.ROOT_OF_UNITY * Fr.ROOT_OF_UNITY_INV == Fr.one()
    assert Fr.ROOT_OF_UNITY.pow(1 << Fr.S) == Fr.one()
    assert Fr.ROOT_OF_UNITY.pow(1 << (Fr.S - 1)) == -Fr.one()


def test_two_inv_and_zeta():
    assert Fr(2) * Fr.TWO_INV == Fr.one()
    assert Fr.ZETA.pow(3) == Fr.one()
    assert Fr.ZETA != Fr.one()


def test_from_u512():
    expected = Fr.from_raw(
        [0x7E7140B5196B9E6F, 0x9ABAC9E4157B6172, 0xF04BC41062FD7322, 0x1185FA9C9FEF6326]
    )
    assert Fr.from_u512([0xAAAAAAAAAAAAAAAA] * 8) == expected


def test_serialization_round_trip():
    for a in _random_elements(50, seed=11):
        assert Fr.from_bytes(a.to_bytes()) == a
        assert Fr.from_raw_bytes(a.to_raw_bytes()) == a


def test_raw_bytes_of_one_is_montgomery_radix():
    r = 0x0E0A77C19A07DF2F666EA36F7879462E36FC76959F60CD29AC96341C4FFFFFFB
    assert Fr.one().to_raw_bytes() == r.to_bytes(32, "little")


def test_serialization_check():
    rng = random.Random(0x59)
    for _ in range(2000):
        word = rng.getrandbits(256)
        if rng.random() < 0.5:
            word >>= 2
        raw = word.to_bytes(32, "little")
        if word < Fr.MODULUS:
            assert Fr.from_raw_bytes(raw).to_raw_bytes() == raw
        else:
            with pytest.raises(ValueError):
                Fr.from_raw_bytes(raw)


def test_from_bytes_rejects_modulus():
    with pytest.raises(ValueError):
        Fr.from_bytes(Fr.MODULUS.to_bytes(32, "little"))
    with pytest.raises(ValueError):
        Fr.from_raw_bytes(b"\x01" * 33)


def test_field_axioms():
    a, b, c = _random_elements(3, seed=5)
    assert a + b == b + a
    assert a * (b + c) == a * b + a * c
    assert a - b == -(b - a)
    assert a.double() == a + a
    assert a.square() == a * a


def test_invert():
    for a in _random_elements(20, seed=9):
        assert a.invert() * a == Fr.one()
    with pytest.raises(ZeroDivisionError):
        Fr.zero().invert()


def test_ordering_and_parity():
    assert Fr(2) < Fr(3)
    assert -Fr.one() > Fr(3)
    assert Fr(7).is_odd()
    assert not Fr(8).is_odd()
    assert Fr(Fr.MODULUS).is_zero()


def test_repr():
    assert repr(Fr.one()) == "0x" + "0" * 63 + "1"
    assert repr(-Fr.one()) == f"0x{Fr.MODULUS - 1:064x}"


def test_sum_of_elements():
    assert sum([Fr(1), Fr(2), Fr(3)]) == Fr(6)