import pytest

from pairingcurves.bn256.curve import G1, G1Affine, G2, G2Affine
from pairingcurves.bn256.engine import (
    G2Prepared,
    Gt,
    multi_miller_loop,
    pairing,
)
from pairingcurves.bn256.fq12 import Fq12
from pairingcurves.bn256.fr import Fr


@pytest.fixture(scope="module")
def base_pairing():
    return pairing(G1Affine.generator(), G2Affine.generator())


@pytest.fixture(scope="module")
def points():
    a = (G1.generator() * Fr(0x1234567890ABCDEF)).to_affine()
    b = (G2.generator() * Fr(0xFEDCBA0987654321)).to_affine()
    c = (G1.generator() * Fr(987654321)).to_affine()
    d = (G2.generator() * Fr(123456789)).to_affine()
    return a, b, c, d


def test_pairing_doubling_moves_between_arguments():
    g1 = G1.generator()
    g2 = G2.generator()
    pair12 = pairing(g1.to_affine(), g2.double().to_affine())
    pair21 = pairing(g1.double().to_affine(), g2.to_affine())
    assert pair12 == pair21

    pair12 = pairing(g1.to_affine(), g2.double().double().to_affine())
    pair21 = pairing(g1.double().to_affine(), g2.double().to_affine())
    assert pair12 == pair21


def test_pairing_is_non_degenerate_and_has_order_r(base_pairing):
    assert not base_pairing.is_identity()
    assert base_pairing.value.pow_vartime(Fr.MODULUS) == Fq12.one()


def test_bilinearity():
    a = G1.generator() * Fr(0xDEADBEEF)
    b = G2.generator() * Fr(0xC0FFEE)
    c = Fr(31337)
    d = Fr(271828)

    acbd = pairing((a * c).to_affine(), (b * d).to_affine())
    adbc = pairing((a * d).to_affine(), (b * c).to_affine())
    abcd = pairing(a.to_affine(), b.to_affine()) * (c * d)

    assert acbd == adbc
    assert acbd == abcd


def test_scalar_swap():
    x = Fr(0xABCDEF)
    y = Fr(0x123456)
    left = pairing((G1.generator() * x).to_affine(), (G2.generator() * y).to_affine())
    right = pairing((G1.generator() * y).to_affine(), (G2.generator() * x).to_affine())
    assert left == right


def test_identity_inputs_give_one(points):
    a, b, c, d = points
    z1 = G1Affine.identity()
    z2 = G2Prepared.from_affine(G2Affine.identity())
    b_prepared = G2Prepared.from_affine(b)
    d_prepared = G2Prepared.from_affine(d)

    assert multi_miller_loop([(z1, b_prepared)]).final_exponentiation().value == Fq12.one()
    assert multi_miller_loop([(a, z2)]).final_exponentiation().value == Fq12.one()

    assert (
        multi_miller_loop([(z1, b_prepared), (c, d_prepared)]).final_exponentiation()
        == multi_miller_loop([(a, z2), (c, d_prepared)]).final_exponentiation()
    )
    assert (
        multi_miller_loop([(a, b_prepared), (z1, d_prepared)]).final_exponentiation()
        == multi_miller_loop([(a, b_prepared), (c, z2)]).final_exponentiation()
    )


def test_double_miller_loop_matches_product(points):
    a, b, c, d = points
    product = pairing(a, b) + pairing(c, d)
    combined = multi_miller_loop(
        [(a, G2Prepared.from_affine(b)), (c, G2Prepared.from_affine(d))]
    ).final_exponentiation()
    assert product == combined


def test_prepared_identity_is_empty():
    prepared = G2Prepared.from_affine(G2Affine.identity())
    assert prepared.is_zero() is True
    assert prepared.coeffs == []


def test_prepared_generator_is_not_zero():
    prepared = G2Prepared.from_affine(G2Affine.generator())
    assert prepared.is_zero() is False
    assert len(prepared.coeffs) > 64


def test_truncated_prepared_point_is_rejected():
    prepared = G2Prepared.from_affine(G2Affine.generator())
    truncated = G2Prepared(prepared.coeffs[:-1], False)
    with pytest.raises(ValueError):
        multi_miller_loop([(G1Affine.generator(), truncated)])


def test_extended_prepared_point_is_rejected():
    prepared = G2Prepared.from_affine(G2Affine.generator())
    extended = G2Prepared(prepared.coeffs + [prepared.coeffs[0]], False)
    with pytest.raises(ValueError):
        multi_miller_loop([(G1Affine.generator(), extended)])


def test_gt_group_laws(base_pairing):
    e = base_pairing
    assert (e + (-e)).is_identity()
    assert e - e == Gt.identity()
    assert e.double() == e + e
    assert e * Fr(3) == e + e + e
    assert e * 5 == e * Fr(5)
    assert e + Gt.identity() == e


def test_gt_identity():
    assert Gt.identity().is_identity() is True
    assert Gt.identity().value == Fq12.one()


def test_final_exponentiation_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Gt(Fq12.zero()).final_exponentiation()


def test_gt_rejects_non_fq12():
    with pytest.raises(TypeError):
        Gt(5)