"""The BN254 groups G1 over Fq and G2 over Fq2, in affine and Jacobian form."""

from __future__ import annotations

from typing import ClassVar

from pairingcurves.bn256.fq import Fq
from pairingcurves.bn256.fq2 import Fq2
from pairingcurves.bn256.fr import Fr

G1_B = Fq(3)
G1_GENERATOR_X = Fq.one()
G1_GENERATOR_Y = Fq(2)

G2_B = Fq2(
    Fq.from_raw(
        [0x3267E6DC24A138E5, 0xB5B4C5E559DBEFA3, 0x81BE18991BE06AC3, 0x2B149D40CEB8AAAE]
    ),
    Fq.from_raw(
        [0xE4A2BD0685C315D2, 0xA74FA084E52D1852, 0xCD2CAFADEED8FDF4, 0x009713B03AF0FED4]
    ),
)
G2_GENERATOR_X = Fq2(
    Fq.from_raw(
        [0x46DEBD5CD992F6ED, 0x674322D4F75EDADD, 0x426A00665E5C4479, 0x1800DEEF121F1E76]
    ),
    Fq.from_raw(
        [0x97E485B7AEF312C2, 0xF1AA493335A9E712, 0x7260BFB731FB5D25, 0x198E9393920D483A]
    ),
)
G2_GENERATOR_Y = Fq2(
    Fq.from_raw(
        [0x4CE6CC0166FA7DAA, 0xE3D1E7690C43D37B, 0x4AAB71808DCB408F, 0x12C85EA5DB8C6DEB]
    ),
    Fq.from_raw(
        [0x55ACDADCD122975B, 0xBC4B313370B38EF3, 0xEC9E99AD690C3395, 0x090689D0585FF075]
    ),
)

G2_COFACTOR = 0x30644E72E131A029B85045B68181585E06CEECDA572A2489345F2299C0F9FA8D
GROUP_ORDER = Fr.MODULUS


def _coerce(field: type, value: object):
    if isinstance(value, field):
        return value
    return field(value)


class _AffinePoint:
    """A point (x, y) on y^2 = x^3 + b, or the point at infinity."""

    __slots__ = ("x", "y", "infinity")

    _field: ClassVar[type]
    _b: ClassVar[object]
    _generator_x: ClassVar[object]
    _generator_y: ClassVar[object]
    _projective: ClassVar[type]

    def _setup(self, x, y, infinity) -> None:
        self.x = _coerce(self._field, x)
        self.y = _coerce(self._field, y)
        self.infinity = bool(infinity)

    @classmethod
    def _identity(cls):
        return cls(cls._field.zero(), cls._field.zero(), True)

    @classmethod
    def _generator(cls):
        return cls(cls._generator_x, cls._generator_y, False)

    def _is_on_curve(self) -> bool:
        if self.infinity:
            return True
        return self.y.square() == self.x.square() * self.x + self._b

    def _to_projective(self):
        if self.infinity:
            return self._projective.identity()
        return self._projective(self.x, self.y, self._field.one())

    def _negate(self):
        return type(self)(self.x, -self.y, self.infinity)

    def _equals(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        if self.infinity or other.infinity:
            return self.infinity and other.infinity
        return self.x == other.x and self.y == other.y

    def __repr__(self) -> str:
        if self.infinity:
            return f"{type(self).__name__}(infinity)"
        return f"{type(self).__name__}(x={self.x!r}, y={self.y!r})"


class _JacobianPoint:
    """A point (X : Y : Z) standing for (X / Z^2, Y / Z^3); Z = 0 is the identity."""

    __slots__ = ("x", "y", "z")

    _field: ClassVar[type]
    _b: ClassVar[object]
    _affine: ClassVar[type]

    def _setup(self, x, y, z) -> None:
        self.x = _coerce(self._field, x)
        self.y = _coerce(self._field, y)
        self.z = _coerce(self._field, z)

    @classmethod
    def _identity(cls):
        return cls(cls._field.zero(), cls._field.one(), cls._field.zero())

    @classmethod
    def _generator(cls):
        return cls._affine.generator().to_projective()

    def _is_identity(self) -> bool:
        return self.z.is_zero()

    def _is_on_curve(self) -> bool:
        if self._is_identity():
            return True
        z2 = self.z.square()
        z6 = z2.square() * z2
        return self.y.square() == self.x.square() * self.x + self._b * z6

    def _double(self):
        if self._is_identity() or self.y.is_zero():
            return self._identity()
        a = self.x.square()
        b = self.y.square()
        c = b.square()
        d = ((self.x + b).square() - a - c).double()
        e = a.double() + a
        f = e.square()
        x3 = f - d.double()
        y3 = e * (d - x3) - c.double().double().double()
        z3 = (self.y * self.z).double()
        return type(self)(x3, y3, z3)

    def _to_affine(self):
        if self._is_identity():
            return self._affine.identity()
        z_inv = self.z.invert()
        z_inv2 = z_inv.square()
        return self._affine(self.x * z_inv2, self.y * z_inv2 * z_inv, False)

    def _multiply(self, k: int):
        if k < 0:
            return self._negate()._multiply(-k)
        result = self._identity()
        for bit in bin(k)[2:]:
            result = result._double()
            if bit == "1":
                result = result._add(self)
        return result

    def _add(self, other: object):
        if isinstance(other, self._affine):
            other = other.to_projective()
        if not isinstance(other, type(self)):
            return NotImplemented
        if self._is_identity():
            return other
        if other._is_identity():
            return self
        z1z1 = self.z.square()
        z2z2 = other.z.square()
        u1 = self.x * z2z2
        u2 = other.x * z1z1
        s1 = self.y * other.z * z2z2
        s2 = other.y * self.z * z1z1
        if u1 == u2:
            if s1 == s2:
                return self._double()
            return self._identity()
        h = u2 - u1
        i = h.double().square()
        j = h * i
        r = (s2 - s1).double()
        v = u1 * i
        x3 = r.square() - j - v.double()
        y3 = r * (v - x3) - (s1 * j).double()
        z3 = ((self.z + other.z).square() - z1z1 - z2z2) * h
        return type(self)(x3, y3, z3)

    def _subtract(self, other: object):
        if isinstance(other, (type(self), self._affine)):
            return self._add(-other)
        return NotImplemented

    def _negate(self):
        return type(self)(self.x, -self.y, self.z)

    def _scale(self, scalar: object):
        if isinstance(scalar, Fr):
            return self._multiply(int(scalar))
        if isinstance(scalar, int) and not isinstance(scalar, bool):
            return self._multiply(scalar)
        return NotImplemented

    def _equals(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        if self._is_identity() or other._is_identity():
            return self._is_identity() and other._is_identity()
        z1z1 = self.z.square()
        z2z2 = other.z.square()
        if self.x * z2z2 != other.x * z1z1:
            return False
        return self.y * z2z2 * other.z == other.y * z1z1 * self.z

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._to_affine()!r})"


class G1Affine(_AffinePoint):
    """A point of G1 in affine coordinates over Fq."""

    __slots__ = ()
    _field = Fq
    _b = G1_B
    _generator_x = G1_GENERATOR_X
    _generator_y = G1_GENERATOR_Y

    def __init__(self, x, y, infinity=False) -> None:
        self._setup(x, y, infinity)

    @classmethod
    def identity(cls) -> G1Affine:
        return cls._identity()

    @classmethod
    def generator(cls) -> G1Affine:
        return cls._generator()

    def is_identity(self) -> bool:
        return self.infinity

    def is_on_curve(self) -> bool:
        return self._is_on_curve()

    def to_projective(self) -> G1:
        return self._to_projective()

    def __neg__(self) -> G1Affine:
        return self._negate()

    def __eq__(self, other: object) -> bool:
        return self._equals(other)


class G2Affine(_AffinePoint):
    """A point of G2 in affine coordinates over Fq2."""

    __slots__ = ()
    _field = Fq2
    _b = G2_B
    _generator_x = G2_GENERATOR_X
    _generator_y = G2_GENERATOR_Y

    def __init__(self, x, y, infinity=False) -> None:
        self._setup(x, y, infinity)

    @classmethod
    def identity(cls) -> G2Affine:
        return cls._identity()

    @classmethod
    def generator(cls) -> G2Affine:
        return cls._generator()

    def is_identity(self) -> bool:
        return self.infinity

    def is_on_curve(self) -> bool:
        return self._is_on_curve()

    def to_projective(self) -> G2:
        return self._to_projective()

    def __neg__(self) -> G2Affine:
        return self._negate()

    def __eq__(self, other: object) -> bool:
        return self._equals(other)


class G1(_JacobianPoint):
    """A point of G1 in Jacobian coordinates; G1 has cofactor one."""

    __slots__ = ()
    _field = Fq
    _b = G1_B
    _affine = G1Affine

    def __init__(self, x, y, z) -> None:
        self._setup(x, y, z)

    @classmethod
    def identity(cls) -> G1:
        return cls._identity()

    @classmethod
    def generator(cls) -> G1:
        return cls._generator()

    def is_identity(self) -> bool:
        return self._is_identity()

    def is_on_curve(self) -> bool:
        return self._is_on_curve()

    def double(self) -> G1:
        return self._double()

    def to_affine(self) -> G1Affine:
        return self._to_affine()

    def clear_cofactor(self) -> G1:
        return self

    def is_torsion_free(self) -> bool:
        return True

    def __add__(self, other: object):
        return self._add(other)

    def __sub__(self, other: object):
        return self._subtract(other)

    def __neg__(self) -> G1:
        return self._negate()

    def __mul__(self, scalar: object):
        return self._scale(scalar)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        return self._equals(other)


class G2(_JacobianPoint):
    """A point on the sextic twist in Jacobian coordinates over Fq2."""

    __slots__ = ()
    _field = Fq2
    _b = G2_B
    _affine = G2Affine

    def __init__(self, x, y, z) -> None:
        self._setup(x, y, z)

    @classmethod
    def identity(cls) -> G2:
        return cls._identity()

    @classmethod
    def generator(cls) -> G2:
        return cls._generator()

    def is_identity(self) -> bool:
        return self._is_identity()

    def is_on_curve(self) -> bool:
        return self._is_on_curve()

    def double(self) -> G2:
        return self._double()

    def to_affine(self) -> G2Affine:
        return self._to_affine()

    def clear_cofactor(self) -> G2:
        """Multiply by the twist cofactor, landing in the prime-order subgroup."""
        return self._multiply(G2_COFACTOR)

    def is_torsion_free(self) -> bool:
        """Whether the point lies in the subgroup of order r."""
        return self._multiply(GROUP_ORDER).is_identity()

    def __add__(self, other: object):
        return self._add(other)

    def __sub__(self, other: object):
        return self._subtract(other)

    def __neg__(self) -> G2:
        return self._negate()

    def __mul__(self, scalar: object):
        return self._scale(scalar)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        return self._equals(other)


G1Affine._projective = G1
G2Affine._projective = G2