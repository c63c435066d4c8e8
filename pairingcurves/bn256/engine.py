"""The optimal ate pairing on BN254 and its target group Gt."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from pairingcurves.bn256.curve import G2Affine
from pairingcurves.bn256.curve import G1Affine
from pairingcurves.bn256.fq import Fq
from pairingcurves.bn256.fq2 import Fq2
from pairingcurves.bn256.fq6 import FROBENIUS_COEFF_FQ6_C1
from pairingcurves.bn256.fq12 import Fq12
from pairingcurves.bn256.fr import Fr

BN_X = 4965661367192848881

# 6u + 2 in non-adjacent form, least significant digit first.
SIX_U_PLUS_2_NAF: Tuple[int, ...] = (
    0, 0, 0, 1, 0, 1, 0, -1, 0, 0, 1, -1, 0, 0, 1, 0, 0, 1, 1, 0, -1, 0, 0, 1, 0, -1, 0, 0, 0, 0,
    1, 1, 1, 0, 0, -1, 0, 0, 1, 0, 0, 0, 0, 0, -1, 0, 0, 1, 1, 0, 0, -1, 0, 0, 0, 1, 1, 0, -1, 0,
    0, 1, 0, 1, 1,
)

XI_TO_Q_MINUS_1_OVER_2 = Fq2(
    Fq.from_montgomery(
        [0xE4BBDD0C2936B629, 0xBB30F162E133BACB, 0x31A9D1B6F9645366, 0x253570BEA500F8DD]
    ),
    Fq.from_montgomery(
        [0xA1D77CE45FFE77C7, 0x07AFFD117826D1DB, 0x6D16BD27BB7EDC6B, 0x2C87200285DEFECC]
    ),
)

LineCoefficients = Tuple[Fq2, Fq2, Fq2]
_Point = Tuple[Fq2, Fq2, Fq2]


class Gt:
    """An element of the target group, written additively over Fq12."""

    __slots__ = ("value",)

    def __init__(self, value: Fq12) -> None:
        if not isinstance(value, Fq12):
            raise TypeError(f"Gt wraps an Fq12, not {type(value).__name__}")
        self.value = value

    @classmethod
    def identity(cls) -> Gt:
        return cls(Fq12.one())

    def is_identity(self) -> bool:
        return self.value == Fq12.one()

    def double(self) -> Gt:
        return Gt(self.value.square())

    def final_exponentiation(self) -> Gt:
        """Raise a Miller loop result to (q^12 - 1) / r.

        Raises ZeroDivisionError when the value is zero.
        """
        f = self.value
        f2 = f.invert()
        r = f.conjugate() * f2
        r = r.frobenius_map(2) * r

        fp = r.frobenius_map(1)
        fp2 = r.frobenius_map(2)
        fp3 = fp2.frobenius_map(1)

        fu = _exp_by_x(r)
        fu2 = _exp_by_x(fu)
        fu3 = _exp_by_x(fu2)

        y3 = fu.frobenius_map(1).conjugate()
        fu2p = fu2.frobenius_map(1)
        fu3p = fu3.frobenius_map(1)
        y2 = fu2.frobenius_map(2)

        y0 = fp * fp2 * fp3
        y1 = r.conjugate()
        y5 = fu2.conjugate()
        y4 = (fu * fu2p).conjugate()
        y6 = (fu3 * fu3p).conjugate()

        y6 = y6.cyclotomic_square() * y4 * y5
        t1 = y3 * y5 * y6
        y6 = y6 * y2
        t1 = t1.cyclotomic_square() * y6
        t1 = t1.cyclotomic_square()
        t0 = t1 * y1
        t1 = t1 * y0
        t0 = t0.cyclotomic_square() * t1
        return Gt(t0)

    def __add__(self, other: object) -> Gt:
        if isinstance(other, Gt):
            return Gt(self.value * other.value)
        return NotImplemented

    def __sub__(self, other: object) -> Gt:
        if isinstance(other, Gt):
            return self + (-other)
        return NotImplemented

    def __neg__(self) -> Gt:
        # Elements of Gt are unitary, so the inverse is the conjugate.
        return Gt(self.value.conjugate())

    def __mul__(self, scalar: object) -> Gt:
        if isinstance(scalar, Fr):
            return Gt(self.value.pow_vartime(int(scalar)))
        if isinstance(scalar, int) and not isinstance(scalar, bool):
            return Gt(self.value.pow_vartime(scalar % Fr.MODULUS))
        return NotImplemented

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Gt):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Gt", self.value))

    def __repr__(self) -> str:
        return f"Gt({self.value!r})"


def _exp_by_x(f: Fq12) -> Fq12:
    result = Fq12.one()
    for bit in bin(BN_X)[2:].zfill(64):
        result = result.cyclotomic_square()
        if bit == "1":
            result = result * f
    return result


def _doubling_step(r: _Point) -> Tuple[LineCoefficients, _Point]:
    rx, ry, rz = r
    tmp0 = rx.square()
    tmp1 = ry.square()
    tmp2 = tmp1.square()
    tmp3 = ((tmp1 + rx).square() - tmp0 - tmp2).double()
    tmp4 = tmp0.double() + tmp0
    tmp6 = rx + tmp4
    tmp5 = tmp4.square()
    zsquared = rz.square()

    new_x = tmp5 - tmp3 - tmp3
    new_z = (rz + ry).square() - tmp1 - zsquared
    new_y = (tmp3 - new_x) * tmp4 - tmp2.double().double().double()

    tmp3 = -(tmp4 * zsquared).double()
    tmp6 = tmp6.square() - tmp0 - tmp5 - tmp1.double().double()
    tmp0 = (new_z * zsquared).double()
    return (tmp0, tmp3, tmp6), (new_x, new_y, new_z)


def _addition_step(r: _Point, qx: Fq2, qy: Fq2) -> Tuple[LineCoefficients, _Point]:
    rx, ry, rz = r
    zsquared = rz.square()
    ysquared = qy.square()
    t0 = zsquared * qx
    t1 = ((qy + rz).square() - ysquared - zsquared) * zsquared
    t2 = t0 - rx
    t3 = t2.square()
    t4 = t3.double().double()
    t5 = t4 * t2
    t6 = t1 - ry - ry
    t9 = t6 * qx
    t7 = t4 * rx

    new_x = t6.square() - t5 - t7 - t7
    new_z = (rz + t2).square() - zsquared - t3
    t10 = qy + new_z
    t8 = (t7 - new_x) * t6
    t0 = (ry * t5).double()
    new_y = t8 - t0

    t10 = t10.square() - ysquared - new_z.square()
    t9 = t9.double() - t10
    t10 = new_z.double()
    t1 = (-t6).double()
    return (t10, t1, t9), (new_x, new_y, new_z)


class G2Prepared:
    """Line coefficients of a G2 point, precomputed for the Miller loop."""

    __slots__ = ("coeffs", "infinity")

    def __init__(self, coeffs: Iterable[LineCoefficients], infinity: bool) -> None:
        self.coeffs: List[LineCoefficients] = list(coeffs)
        self.infinity = bool(infinity)

    @classmethod
    def from_affine(cls, q: G2Affine) -> G2Prepared:
        if q.is_identity():
            return cls([], True)

        coeffs: List[LineCoefficients] = []
        r: _Point = (q.x, q.y, Fq2.one())
        neg_y = -q.y

        for digit in reversed(SIX_U_PLUS_2_NAF[:-1]):
            line, r = _doubling_step(r)
            coeffs.append(line)
            if digit == 1:
                line, r = _addition_step(r, q.x, q.y)
                coeffs.append(line)
            elif digit == -1:
                line, r = _addition_step(r, q.x, neg_y)
                coeffs.append(line)

        q1_x = q.x.conjugate() * FROBENIUS_COEFF_FQ6_C1[1]
        q1_y = q.y.conjugate() * XI_TO_Q_MINUS_1_OVER_2
        line, r = _addition_step(r, q1_x, q1_y)
        coeffs.append(line)

        minus_q2_x = q.x * FROBENIUS_COEFF_FQ6_C1[2]
        line, r = _addition_step(r, minus_q2_x, q.y)
        coeffs.append(line)

        return cls(coeffs, False)

    def is_zero(self) -> bool:
        return self.infinity

    def __repr__(self) -> str:
        if self.infinity:
            return "G2Prepared(infinity)"
        return f"G2Prepared({len(self.coeffs)} lines)"


def _ell(f: Fq12, coeffs: LineCoefficients, p: G1Affine) -> Fq12:
    c0 = coeffs[0] * p.y
    c1 = coeffs[1] * p.x
    return f.mul_by_034(c0, c1, coeffs[2])


def _next_line(lines: Iterator[LineCoefficients]) -> LineCoefficients:
    try:
        return next(lines)
    except StopIteration:
        raise ValueError("prepared G2 point has too few line coefficients") from None


def multi_miller_loop(terms: Sequence[Tuple[G1Affine, G2Prepared]]) -> Gt:
    """Run one Miller loop over every (P, Q) pair and multiply the results."""
    pairs = [
        (p, iter(q.coeffs))
        for p, q in terms
        if not p.is_identity() and not q.is_zero()
    ]

    def step(f: Fq12) -> Fq12:
        for p, lines in pairs:
            f = _ell(f, _next_line(lines), p)
        return f

    f = Fq12.one()
    last = len(SIX_U_PLUS_2_NAF) - 1
    for i in range(last, 0, -1):
        if i != last:
            f = f.square()
        f = step(f)
        if SIX_U_PLUS_2_NAF[i - 1] in (1, -1):
            f = step(f)

    f = step(f)
    f = step(f)

    for _, lines in pairs:
        if next(lines, None) is not None:
            raise ValueError("prepared G2 point has too many line coefficients")

    return Gt(f)


def pairing(g1: G1Affine, g2: G2Affine) -> Gt:
    """Compute the optimal ate pairing e(g1, g2)."""
    prepared = G2Prepared.from_affine(g2)
    return multi_miller_loop([(g1, prepared)]).final_exponentiation()