"""The quadratic extension Fq2 = Fq[u] / (u^2 + 1) of the BN254 base field."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, Union

from pairingcurves.bn256.fq import NEGATIVE_ONE, Fq, LegendreSymbol, _exponent_to_int

_Operand = Union["Fq2", Fq, int]


def _as_fq(value: Union[Fq, int]) -> Fq:
    if isinstance(value, Fq):
        return value
    if isinstance(value, int):
        return Fq(value)
    raise TypeError(f"cannot use {type(value).__name__} as an Fq coefficient")


@total_ordering
@dataclass(frozen=True, eq=False)
class Fq2:
    """An element c0 + c1 * u of Fq2, where u^2 = -1.

    Elements are immutable; operations return new elements.  Ordering is
    lexicographic on (c1, c0).
    """

    c0: Fq
    c1: Fq

    def __init__(self, c0: Union[Fq, int] = 0, c1: Union[Fq, int] = 0) -> None:
        object.__setattr__(self, "c0", _as_fq(c0))
        object.__setattr__(self, "c1", _as_fq(c1))

    @classmethod
    def zero(cls) -> Fq2:
        return cls(Fq.zero(), Fq.zero())

    @classmethod
    def one(cls) -> Fq2:
        return cls(Fq.one(), Fq.zero())

    @classmethod
    def from_int(cls, value: int) -> Fq2:
        """Embed an integer (or bool) into the base subfield."""
        return cls(Fq(int(value)), Fq.zero())

    @classmethod
    def from_bytes(cls, data: bytes) -> Fq2:
        """Parse 64 little-endian bytes: c0 then c1, each canonical."""
        if len(data) != 64:
            raise ValueError(f"expected 64 bytes, got {len(data)}")
        return cls(Fq.from_bytes(data[:32]), Fq.from_bytes(data[32:]))

    def to_bytes(self) -> bytes:
        return self.c0.to_bytes() + self.c1.to_bytes()

    def double(self) -> Fq2:
        return Fq2(self.c0.double(), self.c1.double())

    def square(self) -> Fq2:
        ab = self.c0 * self.c1
        c0 = (self.c0 - self.c1) * (self.c0 + self.c1)
        return Fq2(c0, ab.double())

    def pow(self, exponent: Union[int, Iterable[int]]) -> Fq2:
        """Raise to an exponent given as an int or little-endian 64-bit limbs."""
        power = _exponent_to_int(exponent)
        result = Fq2.one()
        for bit in bin(power)[2:] if power else "":
            result = result.square()
            if bit == "1":
                result = result * self
        return result

    def conjugate(self) -> Fq2:
        return Fq2(self.c0, -self.c1)

    def frobenius_map(self, power: int) -> Fq2:
        """Apply the q-power Frobenius endomorphism `power` times."""
        return Fq2(self.c0, self.c1 * FROBENIUS_COEFF_FQ2_C1[power % 2])

    def mul_by_nonresidue(self) -> Fq2:
        """Multiply by the quadratic non-residue 9 + u."""
        nine_c0 = self.c0 * 9
        nine_c1 = self.c1 * 9
        return Fq2(nine_c0 - self.c1, nine_c1 + self.c0)

    mul_by_xi = mul_by_nonresidue

    def norm(self) -> Fq:
        """Norm over Fq: c0^2 + c1^2."""
        return self.c0.square() + self.c1.square()

    def legendre(self) -> LegendreSymbol:
        return self.norm().legendre()

    def invert(self) -> Fq2:
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        inverse_norm = self.norm().invert()
        return Fq2(self.c0 * inverse_norm, -(self.c1 * inverse_norm))

    def sqrt(self) -> Fq2:
        """Return a square root; raises ValueError for a non-residue."""
        if self.is_zero():
            return Fq2.zero()
        modulus = Fq.MODULUS
        a1 = self.pow((modulus - 3) // 4)
        alpha = a1.square() * self
        a0 = alpha.frobenius_map(1) * alpha
        neg_one = Fq2(NEGATIVE_ONE, Fq.zero())
        if a0 == neg_one:
            raise ValueError("element is not a quadratic residue")
        a1 = a1 * self
        if alpha == neg_one:
            return a1 * Fq2(Fq.zero(), Fq.one())
        return a1 * (alpha + Fq2.one()).pow((modulus - 1) // 2)

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero()

    def __add__(self, other: object) -> Fq2:
        if isinstance(other, Fq2):
            return Fq2(self.c0 + other.c0, self.c1 + other.c1)
        if isinstance(other, (Fq, int)):
            return Fq2(self.c0 + other, self.c1)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> Fq2:
        if isinstance(other, Fq2):
            return Fq2(self.c0 - other.c0, self.c1 - other.c1)
        if isinstance(other, (Fq, int)):
            return Fq2(self.c0 - other, self.c1)
        return NotImplemented

    def __rsub__(self, other: object) -> Fq2:
        if isinstance(other, (Fq, int)):
            return Fq2(_as_fq(other) - self.c0, -self.c1)
        return NotImplemented

    def __mul__(self, other: object) -> Fq2:
        if isinstance(other, Fq2):
            t0 = self.c0 * other.c0
            t1 = self.c1 * other.c1
            cross = (self.c0 + self.c1) * (other.c0 + other.c1)
            return Fq2(t0 - t1, cross - t0 - t1)
        if isinstance(other, (Fq, int)):
            return Fq2(self.c0 * other, self.c1 * other)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> Fq2:
        return Fq2(-self.c0, -self.c1)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Fq2):
            return self.c0 == other.c0 and self.c1 == other.c1
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Fq2):
            return (self.c1, self.c0) < (other.c1, other.c0)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Fq2", self.c0, self.c1))


# (-1)^((q^i - 1) / 2) for i = 0, 1, stored in Montgomery form.
FROBENIUS_COEFF_FQ2_C1 = (
    Fq.from_montgomery(
        [0xD35D438DC58F0D9D, 0x0A78EB28F5C70B3D, 0x666EA36F7879462C, 0x0E0A77C19A07DF2F]
    ),
    Fq.from_montgomery(
        [0x68C3488912EDEFAA, 0x8D087F6872AABF4F, 0x51E1A24709081231, 0x2259D6B14729C0FA]
    ),
)

Fq2.MODULUS = Fq.MODULUS
Fq2.NUM_BITS = 254
Fq2.CAPACITY = 253
Fq2.S = 0
Fq2.MULTIPLICATIVE_GENERATOR = Fq2(Fq(3), Fq.zero())
Fq2.ROOT_OF_UNITY = Fq2.zero()
Fq2.ROOT_OF_UNITY_INV = Fq2.zero()
Fq2.DELTA = Fq2.zero()
Fq2.TWO_INV = Fq2(Fq.TWO_INV, Fq.zero())
# The square of the base field's cube root of unity.
Fq2.ZETA = Fq2(
    Fq.from_raw(
        [0xE4BD44E5607CFD48, 0xC28F069FBB966E3D, 0x5E6DD9E7E0ACCCB0, 0x30644E72E131A029]
    ),
    Fq.zero(),
)