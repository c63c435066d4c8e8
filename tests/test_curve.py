import random

import pytest

from pairingcurves.bn256.curve import G1, G2, G2_B, G1Affine, G2Affine
from pairingcurves.bn256.fq import Fq
from pairingcurves.bn256.fq2 import Fq2
from pairingcurves.bn256.fr import Fr

SEED = 0x5962BE5D763D318D17DB37325406BCE5

GROUPS = [G1, G2]


@pytest.fixture
def rng():
    return random.Random(SEED)


def rand_fr(rng):
    return Fr(rng.getrandbits(512))


def twist_point_outside_subgroup():
    for i in range(1, 200):
        x = Fq2(Fq(i), Fq.one())
        rhs = x.square() * x + G2_B
        try:
            y = rhs.sqrt()
        except ValueError:
            continue
        return G2Affine(x, y, False)
    raise AssertionError("no twist point found")


def test_g1_generator_coordinates():
    g = G1Affine.generator()
    assert g.x == Fq(1)
    assert g.y == Fq(2)
    assert not g.is_identity()


def test_generator_on_curve():
    assert G1.generator().is_on_curve()
    assert G1.generator().to_affine().is_on_curve()
    assert G1Affine.generator().is_on_curve()
    assert G2.generator().is_on_curve()
    assert G2.generator().to_affine().is_on_curve()
    assert G2Affine.generator().is_on_curve()


def test_off_curve_point_rejected():
    assert not G1Affine(Fq(1), Fq(3), False).is_on_curve()
    assert not G1(Fq(1), Fq(3), Fq(1)).is_on_curve()


@pytest.mark.parametrize("group", GROUPS)
def test_identity_laws(group, rng):
    p = group.generator() * rand_fr(rng)
    identity = group.identity()
    assert identity.is_identity()
    assert identity.is_on_curve()
    assert p + identity == p
    assert identity + p == p
    assert (p - p).is_identity()
    assert (p + -p).is_identity()
    assert identity.double().is_identity()


@pytest.mark.parametrize("group", GROUPS)
def test_double_matches_addition(group, rng):
    p = group.generator() * rand_fr(rng)
    assert p.double() == p + p
    assert p.double() == p * 2
    assert p.double().is_on_curve()


@pytest.mark.parametrize("group", GROUPS)
def test_addition_commutative_and_associative(group, rng):
    g = group.generator()
    a = g * rand_fr(rng)
    b = g * rand_fr(rng)
    c = g * rand_fr(rng)
    assert a + b == b + a
    assert (a + b) + c == a + (b + c)
    assert (a + b).is_on_curve()


@pytest.mark.parametrize("group", GROUPS)
def test_scalar_mul_distributes(group, rng):
    g = group.generator()
    a = rand_fr(rng)
    b = rand_fr(rng)
    assert g * (a + b) == g * a + g * b
    assert (g * a) * b == g * (a * b)
    assert a * g == g * a


@pytest.mark.parametrize("group", GROUPS)
def test_scalar_mul_small(group):
    g = group.generator()
    assert g * Fr(3) == g + g + g
    assert (g * Fr.zero()).is_identity()
    assert g * Fr.one() == g
    assert g * -1 == -g


def test_generator_has_prime_order():
    g1 = G1.generator()
    assert (g1 * Fr.MODULUS).is_identity()
    assert g1 * (Fr.MODULUS + 1) == g1
    assert g1.is_torsion_free()
    g2 = G2.generator()
    assert (g2 * Fr.MODULUS).is_identity()
    assert g2 * (Fr.MODULUS + 1) == g2
    assert g2.is_torsion_free()


@pytest.mark.parametrize("group", GROUPS)
def test_affine_round_trip(group, rng):
    p = group.generator() * rand_fr(rng)
    affine = p.to_affine()
    assert affine.is_on_curve()
    assert affine.to_projective() == p
    assert affine.to_projective().to_affine() == affine


def test_identity_affine_round_trip():
    affine1 = G1.identity().to_affine()
    assert affine1.is_identity()
    assert affine1 == G1Affine.identity()
    assert affine1.to_projective().is_identity()
    affine2 = G2.identity().to_affine()
    assert affine2.is_identity()
    assert affine2 == G2Affine.identity()
    assert affine2.to_projective().is_identity()


@pytest.mark.parametrize("group", GROUPS)
def test_negation(group, rng):
    p = group.generator() * rand_fr(rng)
    assert (-p).to_affine() == -(p.to_affine())
    assert -(-p) == p
    assert (-group._affine.identity()).is_identity()


@pytest.mark.parametrize("group", GROUPS)
def test_mixed_addition(group, rng):
    g = group.generator()
    p = g * rand_fr(rng)
    q = g * rand_fr(rng)
    assert p + q.to_affine() == p + q
    assert p - q.to_affine() == p - q


def test_affine_equality():
    g = G1Affine.generator()
    assert g == G1Affine(Fq(1), Fq(2), False)
    assert g != G1Affine.identity()
    assert G1Affine.identity() == G1Affine(Fq(5), Fq(7), True)


def test_projective_equality_with_different_z(rng):
    p = G1.generator() * rand_fr(rng)
    lam = Fq(rng.getrandbits(300)) + 1
    scaled = G1(p.x * lam.square(), p.y * lam.square() * lam, p.z * lam)
    assert scaled == p


def test_g1_cofactor_is_trivial(rng):
    p = G1.generator() * rand_fr(rng)
    assert p.clear_cofactor() == p
    assert p.is_torsion_free()


def test_g2_point_outside_subgroup():
    point = twist_point_outside_subgroup()
    assert point.is_on_curve()
    projective = point.to_projective()
    assert not projective.is_torsion_free()
    cleared = projective.clear_cofactor()
    assert cleared.is_on_curve()
    assert cleared.is_torsion_free()
    assert not cleared.is_identity()


def test_g2_subgroup_point_is_torsion_free(rng):
    p = G2.generator() * rand_fr(rng)
    assert p.is_torsion_free()