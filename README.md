# pairingcurves

Arithmetic for the BN256 pairing-friendly elliptic curve (also called
BN254 or alt_bn128), written in plain Python with nothing outside the
standard library.

Everything lives in the `pairingcurves.bn256` package:

| Module   | Contents |
|----------|----------|
| `fq`     | the base field `Fq`, the `LegendreSymbol` enum |
| `fr`     | the scalar field `Fr` |
| `fq2`    | `Fq2 = Fq[u] / (u^2 + 1)` |
| `fq6`    | `Fq6 = Fq2[v] / (v^3 - (9 + u))` |
| `fq12`   | `Fq12 = Fq6[w] / (w^2 - v)` |
| `curve`  | `G1Affine`, `G1` over `Fq`; `G2Affine`, `G2` over `Fq2` |
| `engine` | `Gt`, `G2Prepared`, `multi_miller_loop`, `pairing` |

All field elements and group points are values: operations return new
objects and never change their operands.

This code does not run in constant time. It suits testing, teaching and
checking values produced elsewhere; it is not meant to protect secrets.

## Installation

```
pip install .
```

## Fields

`Fq` and `Fr` take any integer and reduce it modulo their prime. They
support `+`, `-`, `*`, unary `-`, ordering, `pow`, `square`, `double`,
`invert` and `sqrt`, and encode to and from 32 little-endian bytes.

```python
from pairingcurves.bn256.fr import Fr
from pairingcurves.bn256.fq import Fq, LegendreSymbol

a = Fr(5)
b = Fr(7)
assert (a * b) * b.invert() == a
assert Fr.from_bytes(a.to_bytes()) == a

x = Fq(4)
assert x.legendre() is LegendreSymbol.QUADRATIC_RESIDUE
root = x.sqrt()
assert root * root == x
```

Errors are raised, not returned:

- `invert()` on zero raises `ZeroDivisionError`;
- `sqrt()` of a non-residue raises `ValueError`;
- `from_bytes` raises `ValueError` for a wrong length or a value not below
  the modulus; `from_uniform_bytes` takes 64 bytes and reduces them.

`Fr` also has `to_raw_bytes` / `from_raw_bytes`, which encode the
Montgomery form `a * 2^256 mod r`.

The extension fields are built from coefficients:

```python
from pairingcurves.bn256.fq2 import Fq2

u = Fq2(0, 1)
assert u.square() == Fq2(-1, 0)
assert u * u.invert() == Fq2.one()
```

`Fq6` and `Fq12` add the sparse products used by the pairing
(`mul_by_1`, `mul_by_01`, `mul_by_014`, `mul_by_034`), `frobenius_map`,
`pow_vartime` and, for `Fq12`, `conjugate` and `cyclotomic_square`.

## Groups and pairing

```python
from pairingcurves.bn256.curve import G1, G2
from pairingcurves.bn256.engine import pairing
from pairingcurves.bn256.fr import Fr

g1 = G1.generator()
g2 = G2.generator()

lhs = pairing((g1 * Fr(6)).to_affine(), g2.to_affine())
rhs = pairing((g1 * Fr(2)).to_affine(), (g2 * Fr(3)).to_affine())
assert lhs == rhs
```

`G1` and `G2` are Jacobian points supporting `+`, `-`, unary `-`,
`double` and multiplication by an `Fr` or an `int`. `G2.clear_cofactor`
multiplies by the twist cofactor and `G2.is_torsion_free` checks
membership of the order-`r` subgroup; for `G1` (cofactor one) these
return the point itself and `True`.

To check a product of pairings with a single final exponentiation,
prepare each G2 point and pass the pairs to `multi_miller_loop`:

```python
from pairingcurves.bn256.engine import G2Prepared, multi_miller_loop

prepared = G2Prepared.from_affine(g2.to_affine())
result = multi_miller_loop([
    (g1.to_affine(), prepared),
    ((-g1).to_affine(), prepared),
]).final_exponentiation()
assert result.is_identity()
```

`Gt` is written additively: `+` multiplies the underlying `Fq12` values,
unary `-` conjugates, and `*` by a scalar exponentiates.

## What it does not do

There is no byte encoding for curve points, no hashing to the curve and
no random generation of field elements or points; callers build points
from the generators or from coordinates they already have.

## Running the tests

```
pip install .[test]
pytest
```