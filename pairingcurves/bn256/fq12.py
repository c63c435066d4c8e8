"""The quadratic extension Fq12 = Fq6[w] / (w^2 - v) of the BN254 base field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from pairingcurves.bn256.fq import Fq, _exponent_to_int
from pairingcurves.bn256.fq2 import Fq2
from pairingcurves.bn256.fq6 import Fq6

_Coefficient = Union[Fq6, Fq2, Fq, int]


def _as_fq6(value: _Coefficient) -> Fq6:
    if isinstance(value, Fq6):
        return value
    if isinstance(value, (Fq2, Fq, int)):
        return Fq6(value)
    raise TypeError(f"cannot use {type(value).__name__} as an Fq6 coefficient")


def _fp4_square(a0: Fq2, a1: Fq2) -> Tuple[Fq2, Fq2]:
    """Square a0 + a1 * y in Fq4 = Fq2[y] / (y^2 - (9 + u))."""
    t0 = a0.square()
    t1 = a1.square()
    c0 = t1.mul_by_nonresidue() + t0
    c1 = (a0 + a1).square() - t0 - t1
    return c0, c1


@dataclass(frozen=True, eq=False)
class Fq12:
    """An element c0 + c1 * w of Fq12, where w^2 = v.

    Elements are immutable; operations return new elements.
    """

    c0: Fq6
    c1: Fq6

    def __init__(self, c0: _Coefficient = 0, c1: _Coefficient = 0) -> None:
        object.__setattr__(self, "c0", _as_fq6(c0))
        object.__setattr__(self, "c1", _as_fq6(c1))

    @classmethod
    def zero(cls) -> Fq12:
        return cls(Fq6.zero(), Fq6.zero())

    @classmethod
    def one(cls) -> Fq12:
        return cls(Fq6.one(), Fq6.zero())

    def double(self) -> Fq12:
        return Fq12(self.c0.double(), self.c1.double())

    def square(self) -> Fq12:
        ab = self.c0 * self.c1
        c0c1 = self.c0 + self.c1
        c0 = (self.c1.mul_by_nonresidue() + self.c0) * c0c1 - ab - ab.mul_by_nonresidue()
        return Fq12(c0, ab.double())

    def pow_vartime(self, exponent: Union[int, Iterable[int]]) -> Fq12:
        """Raise to an exponent given as an int or little-endian 64-bit limbs."""
        power = _exponent_to_int(exponent)
        result = Fq12.one()
        for bit in bin(power)[2:] if power else "":
            result = result.square()
            if bit == "1":
                result = result * self
        return result

    def conjugate(self) -> Fq12:
        """Negate the w coefficient; the inverse of a unitary element."""
        return Fq12(self.c0, -self.c1)

    def frobenius_map(self, power: int) -> Fq12:
        """Apply the q-power Frobenius endomorphism `power` times."""
        coefficient = FROBENIUS_COEFF_FQ12_C1[power % 12]
        return Fq12(
            self.c0.frobenius_map(power),
            self.c1.frobenius_map(power) * coefficient,
        )

    def mul_by_014(self, c0: Fq2, c1: Fq2, c4: Fq2) -> Fq12:
        """Multiply by the sparse element (c0 + c1 v) + (c4 v) w."""
        aa = self.c0.mul_by_01(c0, c1)
        bb = self.c1.mul_by_1(c4)
        o = c1 + c4
        new_c1 = (self.c1 + self.c0).mul_by_01(c0, o) - aa - bb
        new_c0 = bb.mul_by_nonresidue() + aa
        return Fq12(new_c0, new_c1)

    def mul_by_034(self, c0: Fq2, c3: Fq2, c4: Fq2) -> Fq12:
        """Multiply by the sparse element c0 + (c3 + c4 v) w."""
        t0 = Fq6(self.c0.c0 * c0, self.c0.c1 * c0, self.c0.c2 * c0)
        t1 = self.c1.mul_by_01(c3, c4)
        o = c0 + c3
        t2 = (self.c0 + self.c1).mul_by_01(o, c4) - t0
        return Fq12(t0 + t1.mul_by_nonresidue(), t2 - t1)

    def cyclotomic_square(self) -> Fq12:
        """Square an element of the cyclotomic subgroup."""
        a = self.c0
        b = self.c1

        t3, t4 = _fp4_square(a.c0, b.c1)
        new_a0 = (t3 - a.c0).double() + t3
        new_b1 = (t4 + b.c1).double() + t4

        t3, t4 = _fp4_square(b.c0, a.c2)
        t5, t6 = _fp4_square(a.c1, b.c2)

        new_a1 = (t3 - a.c1).double() + t3
        new_b2 = (t4 + b.c2).double() + t4
        t3 = t6.mul_by_nonresidue()
        new_b0 = (t3 + b.c0).double() + t3
        new_a2 = (t5 - a.c2).double() + t5

        return Fq12(Fq6(new_a0, new_a1, new_a2), Fq6(new_b0, new_b1, new_b2))

    def invert(self) -> Fq12:
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        denominator = self.c0.square() - self.c1.square().mul_by_nonresidue()
        t = denominator.invert()
        return Fq12(self.c0 * t, -(self.c1 * t))

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero()

    def __add__(self, other: object) -> Fq12:
        if isinstance(other, Fq12):
            return Fq12(self.c0 + other.c0, self.c1 + other.c1)
        return NotImplemented

    def __sub__(self, other: object) -> Fq12:
        if isinstance(other, Fq12):
            return Fq12(self.c0 - other.c0, self.c1 - other.c1)
        return NotImplemented

    def __mul__(self, other: object) -> Fq12:
        if isinstance(other, Fq12):
            t0 = self.c0 * other.c0
            t1 = self.c1 * other.c1
            c1 = (self.c0 + self.c1) * (other.c0 + other.c1) - t0 - t1
            return Fq12(t0 + t1.mul_by_nonresidue(), c1)
        return NotImplemented

    def __neg__(self) -> Fq12:
        return Fq12(-self.c0, -self.c1)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Fq12):
            return self.c0 == other.c0 and self.c1 == other.c1
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Fq12", self.c0, self.c1))


def _fq2_from_montgomery(c0: Iterable[int], c1: Iterable[int]) -> Fq2:
    return Fq2(Fq.from_montgomery(c0), Fq.from_montgomery(c1))


_ZERO_LIMBS = (0, 0, 0, 0)

# (9 + u)^((q^i - 1) / 6) for i = 0..11, stored in Montgomery form.
FROBENIUS_COEFF_FQ12_C1 = (
    _fq2_from_montgomery(
        [0xD35D438DC58F0D9D, 0x0A78EB28F5C70B3D, 0x666EA36F7879462C, 0x0E0A77C19A07DF2F],
        _ZERO_LIMBS,
    ),
    _fq2_from_montgomery(
        [0xAF9BA69633144907, 0xCA6B1D7387AFB78A, 0x11BDED5EF08A2087, 0x02F34D751A1F3A7C],
        [0xA222AE234C492D72, 0xD00F02A4565DE15B, 0xDC2FF3A253DFC926, 0x10A75716B3899551],
    ),
    _fq2_from_montgomery(
        [0xCA8D800500FA1BF2, 0xF0C5D61468B39769, 0x0E201271AD0D4418, 0x04290F65BAD856E6],
        _ZERO_LIMBS,
    ),
    _fq2_from_montgomery(
        [0x365316184E46D97D, 0x0AF7129ED4C96D9F, 0x659DA72FCA1009B5, 0x08116D8983A20D23],
        [0xB1DF4AF7C39C1939, 0x3D9F02878A73BF7F, 0x9B2220928CAF0AE0, 0x26684515EFF054A6],
    ),
    _fq2_from_montgomery(
        [0x3350C88E13E80B9C, 0x7DCE557CDB5E56B9, 0x6001B4B8B615564A, 0x2682E617020217E0],
        _ZERO_LIMBS,
    ),
    _fq2_from_montgomery(
        [0x86B76F821B329076, 0x408BF52B4D19B614, 0x53DFB9D0D985E92D, 0x051E20146982D2A7],
        [0x0FBC9CD47752EBC7, 0x6D8FFFE33415DE24, 0xBEF22CF038CF41B9, 0x15C0EDFF3C66BF54],
    ),
    _fq2_from_montgomery(
        [0x68C3488912EDEFAA, 0x8D087F6872AABF4F, 0x51E1A24709081231, 0x2259D6B14729C0FA],
        _ZERO_LIMBS,
    ),
    _fq2_from_montgomery(
        [0x8C84E580A568B440, 0xCD164D1DE0C21302, 0xA692585790F737D5, 0x2D7100FDC71265AD],
        [0x99FDDDF38C33CFD5, 0xC77267ED1213E931, 0xDC2052142DA18F36, 0x1FBCF75C2DA80AD7],
    ),
    _fq2_from_montgomery(
        [0x71930C11D782E155, 0xA6BB947CFFBE3323, 0xAA303344D4741444, 0x2C3B3F0D26594943],
        _ZERO_LIMBS,
    ),
    _fq2_from_montgomery(
        [0x05CD75FE8A3623CA, 0x8C8A57F293A85CEE, 0x52B29E86B7714EA8, 0x2852E0E95D8F9306],
        [0x8A41411F14E0E40E, 0x59E26809DDFE0B0D, 0x1D2E2523F4D24D7D, 0x09FC095CF1414B83],
    ),
    _fq2_from_montgomery(
        [0x08CFC388C494F1AB, 0x19B315148D1373D4, 0x584E90FDCB6C0213, 0x09E1685BDF2F8849],
        _ZERO_LIMBS,
    ),
    _fq2_from_montgomery(
        [0xB5691C94BD4A6CD1, 0x56F575661B581478, 0x64708BE5A7FB6F30, 0x2B462E5E77AECD82],
        [0x2C63EF42612A1180, 0x29F16AAE345BEC69, 0xF95E18C648B216A4, 0x1AA36073A4CAE0D4],
    ),
)

Fq12.ZERO = Fq12.zero()
Fq12.ONE = Fq12.one()