import random

import pytest

from pairingcurves.bn256.fq import Fq
from pairingcurves.bn256.fq2 import Fq2
from pairingcurves.bn256.fq6 import (
    FROBENIUS_COEFF_FQ6_C1,
    FROBENIUS_COEFF_FQ6_C2,
    Fq6,
)

MODULUS_LIMBS = [
    0x3C208C16D87CFD47,
    0x97816A916871CA8D,
    0xB85045B68181585D,
    0x30644E72E131A029,
]


@pytest.fixture
def rng():
    return random.Random(0x5962BE5D763D318D)


def random_fq2(rng):
    return Fq2(Fq(rng.getrandbits(512)), Fq(rng.getrandbits(512)))


def random_fq6(rng):
    return Fq6(random_fq2(rng), random_fq2(rng), random_fq2(rng))


def test_fq6_mul_nonresidue(rng):
    nqr = Fq6(Fq2.zero(), Fq2.one(), Fq2.zero())
    for _ in range(50):
        a = random_fq6(rng)
        assert a.mul_by_nonresidue() == a * nqr


def test_fq6_mul_by_1(rng):
    for _ in range(50):
        c1 = random_fq2(rng)
        a = random_fq6(rng)
        assert a.mul_by_1(c1) == a * Fq6(Fq2.zero(), c1, Fq2.zero())


def test_fq6_mul_by_01(rng):
    for _ in range(50):
        c0 = random_fq2(rng)
        c1 = random_fq2(rng)
        a = random_fq6(rng)
        assert a.mul_by_01(c0, c1) == a * Fq6(c0, c1, Fq2.zero())


def test_squaring(rng):
    for _ in range(50):
        a = random_fq6(rng)
        assert a.square() == a * a


def test_frobenius(rng):
    for i in range(14):
        a = random_fq6(rng)
        expected = a
        for _ in range(i):
            expected = expected.pow_vartime(MODULUS_LIMBS)
        assert a.frobenius_map(i) == expected


def test_frobenius_six_is_identity(rng):
    a = random_fq6(rng)
    assert a.frobenius_map(6) == a


def test_frobenius_coefficients_match_nonresidue_powers():
    xi = Fq2(9, 1)
    q = Fq.MODULUS
    assert FROBENIUS_COEFF_FQ6_C1[0] == Fq2.one()
    assert FROBENIUS_COEFF_FQ6_C2[0] == Fq2.one()
    assert FROBENIUS_COEFF_FQ6_C1[1] == xi.pow((q - 1) // 3)
    assert FROBENIUS_COEFF_FQ6_C2[1] == xi.pow(2 * (q - 1) // 3)


def test_inversion(rng):
    for _ in range(20):
        a = random_fq6(rng)
        assert a * a.invert() == Fq6.one()


def test_invert_one_is_one():
    assert Fq6.one().invert() == Fq6.one()


def test_invert_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Fq6.zero().invert()


def test_is_zero():
    assert Fq6.zero().is_zero() is True
    assert Fq6.one().is_zero() is False
    assert Fq6(Fq2.zero(), Fq2.zero(), Fq2.one()).is_zero() is False


def test_field_axioms(rng):
    for _ in range(20):
        a = random_fq6(rng)
        b = random_fq6(rng)
        c = random_fq6(rng)
        assert a + b == b + a
        assert a * b == b * a
        assert (a * b) * c == a * (b * c)
        assert a * (b + c) == a * b + a * c
        assert a - a == Fq6.zero()
        assert a + (-a) == Fq6.zero()
        assert a.double() == a + a
        assert a * Fq6.one() == a


def test_pow_vartime_small_exponents(rng):
    a = random_fq6(rng)
    assert a.pow_vartime(0) == Fq6.one()
    assert a.pow_vartime(1) == a
    assert a.pow_vartime(3) == a * a * a
    assert a.pow_vartime([5, 0, 0, 0]) == a.square().square() * a


def test_scalar_multiplication(rng):
    a = random_fq6(rng)
    assert a * 3 == a + a + a
    assert 2 * a == a.double()


def test_hash_consistent_with_equality(rng):
    a = random_fq6(rng)
    b = Fq6(a.c0, a.c1, a.c2)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_constants():
    assert Fq6.ZERO == Fq6.zero()
    assert Fq6.ONE == Fq6(1, 0, 0)