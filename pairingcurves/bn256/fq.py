"""The base field of the BN254 curve and the Legendre symbol."""

from __future__ import annotations

import enum
from functools import total_ordering
from typing import Iterable, Union

_LIMB_BITS = 64
_LIMB_MASK = (1 << _LIMB_BITS) - 1


class LegendreSymbol(enum.Enum):
    """Quadratic character of a field element."""

    ZERO = 0
    QUADRATIC_RESIDUE = 1
    QUADRATIC_NON_RESIDUE = -1


def _limbs_to_int(limbs: Iterable[int], count: int) -> int:
    limbs = list(limbs)
    if len(limbs) != count:
        raise ValueError(f"expected {count} limbs, got {len(limbs)}")
    result = 0
    for position, limb in enumerate(limbs):
        if not 0 <= limb <= _LIMB_MASK:
            raise ValueError(f"limb {limb:#x} does not fit in 64 bits")
        result |= limb << (_LIMB_BITS * position)
    return result


def _exponent_to_int(exponent: Union[int, Iterable[int]]) -> int:
    if isinstance(exponent, int):
        if exponent < 0:
            raise ValueError("exponent must not be negative")
        return exponent
    limbs = list(exponent)
    return _limbs_to_int(limbs, len(limbs))


@total_ordering
class Fq:
    """An element of the BN254 base field, stored in canonical form."""

    __slots__ = ("_value",)

    MODULUS = 0x30644E72E131A029B85045B68181585D97816A916871CA8D3C208C16D87CFD47
    NUM_BITS = 254
    CAPACITY = 253
    S = 0
    # Montgomery radix 2^256 mod q.
    R = (1 << 256) % MODULUS

    def __init__(self, value: int = 0) -> None:
        self._value = int(value) % self.MODULUS

    @classmethod
    def zero(cls) -> Fq:
        return cls(0)

    @classmethod
    def one(cls) -> Fq:
        return cls(1)

    @classmethod
    def from_raw(cls, limbs: Iterable[int]) -> Fq:
        """Build from four little-endian 64-bit limbs, reducing modulo q."""
        return cls(_limbs_to_int(limbs, 4))

    @classmethod
    def from_u512(cls, limbs: Iterable[int]) -> Fq:
        """Reduce a 512-bit integer given as eight little-endian limbs."""
        return cls(_limbs_to_int(limbs, 8))

    @classmethod
    def from_bytes(cls, data: bytes) -> Fq:
        """Parse 32 little-endian bytes; the value must be below the modulus."""
        if len(data) != 32:
            raise ValueError(f"expected 32 bytes, got {len(data)}")
        value = int.from_bytes(data, "little")
        if value >= cls.MODULUS:
            raise ValueError("encoding is not canonical")
        return cls(value)

    @classmethod
    def from_uniform_bytes(cls, data: bytes) -> Fq:
        """Reduce 64 little-endian bytes modulo q."""
        if len(data) != 64:
            raise ValueError(f"expected 64 bytes, got {len(data)}")
        return cls(int.from_bytes(data, "little"))

    @classmethod
    def from_montgomery(cls, limbs: Iterable[int]) -> Fq:
        """Build from four limbs holding a value in Montgomery form (aR mod q)."""
        montgomery = _limbs_to_int(limbs, 4)
        return cls(montgomery * pow(cls.R, -1, cls.MODULUS))

    def to_bytes(self) -> bytes:
        return self._value.to_bytes(32, "little")

    def __int__(self) -> int:
        return self._value

    def double(self) -> Fq:
        return type(self)(self._value << 1)

    def square(self) -> Fq:
        return type(self)(self._value * self._value)

    def pow(self, exponent: Union[int, Iterable[int]]) -> Fq:
        """Raise to an exponent given as an int or little-endian 64-bit limbs."""
        return type(self)(pow(self._value, _exponent_to_int(exponent), self.MODULUS))

    def invert(self) -> Fq:
        if self._value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self.pow(self.MODULUS - 2)

    def sqrt(self) -> Fq:
        """Return a square root; raises ValueError for a non-residue."""
        candidate = self.pow((self.MODULUS + 1) // 4)
        if candidate.square() != self:
            raise ValueError("element is not a quadratic residue")
        return candidate

    def legendre(self) -> LegendreSymbol:
        symbol = self.pow((self.MODULUS - 1) // 2)
        if symbol._value == 0:
            return LegendreSymbol.ZERO
        if symbol._value == 1:
            return LegendreSymbol.QUADRATIC_RESIDUE
        return LegendreSymbol.QUADRATIC_NON_RESIDUE

    def is_zero(self) -> bool:
        return self._value == 0

    def is_odd(self) -> bool:
        return bool(self._value & 1)

    def __add__(self, other: object) -> Fq:
        if isinstance(other, type(self)):
            return type(self)(self._value + other._value)
        if isinstance(other, int):
            return type(self)(self._value + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> Fq:
        if isinstance(other, type(self)):
            return type(self)(self._value - other._value)
        if isinstance(other, int):
            return type(self)(self._value - other)
        return NotImplemented

    def __rsub__(self, other: object) -> Fq:
        if isinstance(other, int):
            return type(self)(other - self._value)
        return NotImplemented

    def __mul__(self, other: object) -> Fq:
        if isinstance(other, type(self)):
            return type(self)(self._value * other._value)
        if isinstance(other, int):
            return type(self)(self._value * other)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> Fq:
        return type(self)(-self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, type(self)):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, type(self)):
            return self._value < other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"0x{self._value:064x}"

    __str__ = __repr__


Fq.MULTIPLICATIVE_GENERATOR = Fq(3)
Fq.TWO_INV = Fq.from_raw(
    [0x9E10460B6C3E7EA4, 0xCBC0B548B438E546, 0xDC2822DB40C0AC2E, 0x183227397098D014]
)
Fq.ROOT_OF_UNITY = Fq(0)
Fq.ROOT_OF_UNITY_INV = Fq(0)
Fq.DELTA = Fq(0)
Fq.ZETA = Fq.from_raw([0x5763473177FFFFFE, 0xD4F263F1ACDB5C4F, 0x59E26BCEA0D48BAC, 0x0])
NEGATIVE_ONE = Fq.from_montgomery(
    [0x68C3488912EDEFAA, 0x8D087F6872AABF4F, 0x51E1A24709081231, 0x2259D6B14729C0FA]
)