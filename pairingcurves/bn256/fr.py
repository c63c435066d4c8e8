"""The scalar field of the BN254 curve."""

from __future__ import annotations

from functools import total_ordering
from typing import Iterable, Union

_LIMB_BITS = 64
_LIMB_MASK = (1 << _LIMB_BITS) - 1


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
class Fr:
    """An element of the BN254 scalar field, stored in canonical form."""

    __slots__ = ("_value",)

    MODULUS = 0x30644E72E131A029B85045B68181585D2833E84879B9709143E1F593F0000001
    NUM_BITS = 254
    CAPACITY = 253
    S = 28
    # Montgomery radix 2^256 mod r, used by the raw byte encoding.
    R = (1 << 256) % MODULUS

    def __init__(self, value: int = 0) -> None:
        self._value = int(value) % self.MODULUS

    @classmethod
    def zero(cls) -> Fr:
        return cls(0)

    @classmethod
    def one(cls) -> Fr:
        return cls(1)

    @classmethod
    def from_raw(cls, limbs: Iterable[int]) -> Fr:
        """Build from four little-endian 64-bit limbs, reducing modulo r."""
        return cls(_limbs_to_int(limbs, 4))

    @classmethod
    def from_u512(cls, limbs: Iterable[int]) -> Fr:
        """Reduce a 512-bit integer given as eight little-endian limbs."""
        return cls(_limbs_to_int(limbs, 8))

    @classmethod
    def from_bytes(cls, data: bytes) -> Fr:
        """Parse 32 little-endian bytes; the value must be below the modulus."""
        if len(data) != 32:
            raise ValueError(f"expected 32 bytes, got {len(data)}")
        value = int.from_bytes(data, "little")
        if value >= cls.MODULUS:
            raise ValueError("encoding is not canonical")
        return cls(value)

    @classmethod
    def from_uniform_bytes(cls, data: bytes) -> Fr:
        """Reduce 64 little-endian bytes modulo r."""
        if len(data) != 64:
            raise ValueError(f"expected 64 bytes, got {len(data)}")
        return cls(int.from_bytes(data, "little"))

    @classmethod
    def from_raw_bytes(cls, data: bytes) -> Fr:
        """Parse the 32-byte Montgomery-form encoding made by to_raw_bytes."""
        if len(data) != 32:
            raise ValueError(f"expected 32 bytes, got {len(data)}")
        montgomery = int.from_bytes(data, "little")
        if montgomery >= cls.MODULUS:
            raise ValueError("raw encoding is not below the modulus")
        return cls(montgomery * pow(cls.R, -1, cls.MODULUS))

    def to_raw_bytes(self) -> bytes:
        """Encode the Montgomery form (aR mod r) as 32 little-endian bytes."""
        return (self._value * self.R % self.MODULUS).to_bytes(32, "little")

    def to_bytes(self) -> bytes:
        return self._value.to_bytes(32, "little")

    def __int__(self) -> int:
        return self._value

    def double(self) -> Fr:
        return type(self)(self._value << 1)

    def square(self) -> Fr:
        return type(self)(self._value * self._value)

    def pow(self, exponent: Union[int, Iterable[int]]) -> Fr:
        """Raise to an exponent given as an int or little-endian 64-bit limbs."""
        return type(self)(pow(self._value, _exponent_to_int(exponent), self.MODULUS))

    def invert(self) -> Fr:
        if self._value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self.pow(self.MODULUS - 2)

    def sqrt(self) -> Fr:
        """Tonelli-Shanks square root; raises ValueError for a non-residue."""
        p = self.MODULUS
        if self._value == 0:
            return type(self)(0)
        if pow(self._value, (p - 1) // 2, p) != 1:
            raise ValueError("element is not a quadratic residue")
        t = (p - 1) >> self.S
        m = self.S
        c = int(self.ROOT_OF_UNITY)
        residue = pow(self._value, t, p)
        root = pow(self._value, (t + 1) // 2, p)
        while residue != 1:
            i = 1
            probe = residue * residue % p
            while probe != 1:
                probe = probe * probe % p
                i += 1
            b = pow(c, 1 << (m - i - 1), p)
            m = i
            c = b * b % p
            residue = residue * c % p
            root = root * b % p
        return type(self)(root)

    def is_zero(self) -> bool:
        return self._value == 0

    def is_odd(self) -> bool:
        return bool(self._value & 1)

    def __add__(self, other: object) -> Fr:
        if isinstance(other, type(self)):
            return type(self)(self._value + other._value)
        if isinstance(other, int):
            return type(self)(self._value + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> Fr:
        if isinstance(other, type(self)):
            return type(self)(self._value - other._value)
        if isinstance(other, int):
            return type(self)(self._value - other)
        return NotImplemented

    def __rsub__(self, other: object) -> Fr:
        if isinstance(other, int):
            return type(self)(other - self._value)
        return NotImplemented

    def __mul__(self, other: object) -> Fr:
        if isinstance(other, type(self)):
            return type(self)(self._value * other._value)
        if isinstance(other, int):
            return type(self)(self._value * other)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> Fr:
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


Fr.MULTIPLICATIVE_GENERATOR = Fr(7)
Fr.ROOT_OF_UNITY = Fr.from_raw(
    [0xD34F1ED960C37C9C, 0x3215CF6DD39329C8, 0x98865EA93DD31F74, 0x03DDB9F5166D18B7]
)
Fr.TWO_INV = Fr.from_raw(
    [0xA1F0FAC9F8000001, 0x9419F4243CDCB848, 0xDC2822DB40C0AC2E, 0x183227397098D014]
)
Fr.ROOT_OF_UNITY_INV = Fr.from_raw(
    [0x0ED3E50A414E6DBA, 0xB22625F59115ABA7, 0x1BBE587180F34361, 0x048127174DAABC26]
)
Fr.DELTA = Fr.from_raw(
    [0x870E56BBE533E9A2, 0x5B5F898E5E963F25, 0x64EC26AAD4C86E71, 0x09226B6E22C6F0CA]
)
Fr.ZETA = Fr.from_raw([0x8B17EA66B99C90DD, 0x5BFC41088D8DAAA7, 0xB3C4D79D41A91758, 0x00])