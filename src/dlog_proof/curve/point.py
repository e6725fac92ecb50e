"""Point arithmetic on secp256k1 in affine and Jacobian coordinates.

Jacobian coordinates (X, Y, Z) represent the affine point (X/Z^2, Y/Z^3),
so additions and doublings need no field inversion. The only inversion
happens when projecting back with to_affine().

Scalar multiplication uses the GLV endomorphism: k is split into two
~128-bit halves k1, k2 with k = k1 + k2*lambda (mod n), and both halves are
accumulated in a single pass over their bits, halving the doublings of a
plain double-and-add.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dlog_proof.curve.field import (
    invert_field,
    reduce_field,
    reduce_order,
    split_scalar_endomorphic,
)
from dlog_proof.curve.params import SECP256K1, CurveParameters
from dlog_proof.encoding import decode_ints, encode_ints
from dlog_proof.errors import InvalidPointError


@dataclass(frozen=True)
class AffinePoint:
    """Curve point (x, y). The pair (0, 0) stands for the point at infinity;
    it never satisfies y^2 = x^3 + 7."""

    x: int
    y: int
    curve: CurveParameters = field(default=SECP256K1, repr=False, compare=False)

    @classmethod
    def identity(cls, curve: CurveParameters = SECP256K1) -> AffinePoint:
        return cls(0, 0, curve)

    @classmethod
    def generator(cls, curve: CurveParameters = SECP256K1) -> AffinePoint:
        return cls(curve.gx, curve.gy, curve)

    def is_identity(self) -> bool:
        return self.x == 0 and self.y == 0

    def is_on_curve(self) -> bool:
        """Group membership; the identity sentinel counts as a member."""
        if self.is_identity():
            return True
        p = self.curve.p
        if not (0 <= self.x < p and 0 <= self.y < p):
            return False
        return self.curve.is_on_curve(self.x, self.y)

    def to_jacobian(self) -> JacobianPoint:
        return JacobianPoint.from_affine(self)

    def mul(self, scalar: int) -> AffinePoint:
        """k * P, computed in Jacobian coordinates and projected back."""
        result = self.to_jacobian().mul(scalar)
        if result.is_identity():
            return AffinePoint.identity(self.curve)
        return result.to_affine()

    def to_bytes(self) -> bytes:
        return encode_ints((self.x, self.y))

    @classmethod
    def from_bytes(cls, data: bytes, curve: CurveParameters = SECP256K1) -> AffinePoint:
        x, y = decode_ints(data, 2)
        return cls(x, y, curve)


@dataclass(frozen=True)
class JacobianPoint:
    """Curve point in Jacobian coordinates. Identity is (0, 1, 0); Z is 0
    mod p exactly for the identity."""

    x: int
    y: int
    z: int
    curve: CurveParameters = field(default=SECP256K1, repr=False, compare=False)

    @classmethod
    def identity(cls, curve: CurveParameters = SECP256K1) -> JacobianPoint:
        return cls(0, 1, 0, curve)

    @classmethod
    def from_affine(cls, point: AffinePoint) -> JacobianPoint:
        if point.is_identity():
            return cls.identity(point.curve)
        return cls(point.x, point.y, 1, point.curve)

    def is_identity(self) -> bool:
        return self.z % self.curve.p == 0

    def to_affine(self) -> AffinePoint:
        """Project to (X/Z^2, Y/Z^3).

        Raises InvalidPointError for the identity, which has no affine form.
        """
        if self.is_identity():
            raise InvalidPointError("point at infinity has no affine coordinates")
        c = self.curve
        inv_z = invert_field(self.z, c)
        inv_z2 = inv_z * inv_z
        x = reduce_field(self.x * inv_z2, c)
        y = reduce_field(self.y * inv_z * inv_z2, c)
        return AffinePoint(x, y, c)

    def is_on_curve(self) -> bool:
        """Y^2 == X^3 + a*X*Z^4 + b*Z^6 (mod p) with X, Y, Z reduced.

        Checked on the triple itself: a projection landing on (0, 0) would
        otherwise pass as the affine identity sentinel.
        """
        c = self.curve
        if not all(0 <= v < c.p for v in (self.x, self.y, self.z)):
            return False
        if self.is_identity():
            return True
        z2 = reduce_field(self.z * self.z, c)
        z4 = reduce_field(z2 * z2, c)
        z6 = reduce_field(z4 * z2, c)
        rhs = self.x * self.x * self.x + c.a * self.x * z4 + c.b * z6
        return reduce_field(self.y * self.y - rhs, c) == 0

    def negate(self) -> JacobianPoint:
        if self.is_identity():
            return self
        return JacobianPoint(self.x, reduce_field(-self.y, self.curve), self.z, self.curve)

    def double(self) -> JacobianPoint:
        """2P with the dbl-2009-l formulas (a = 0)."""
        if self.is_identity():
            return self
        c = self.curve
        a = reduce_field(self.x * self.x, c)
        b = reduce_field(self.y * self.y, c)
        cc = reduce_field(b * b, c)
        d = reduce_field(2 * (reduce_field((self.x + b) ** 2, c) - a - cc), c)
        e = reduce_field(3 * a, c)
        f = reduce_field(e * e, c)
        x3 = reduce_field(f - 2 * d, c)
        y3 = reduce_field(e * (d - x3) - 8 * cc, c)
        z3 = reduce_field(2 * self.y * self.z, c)
        return JacobianPoint(x3, y3, z3, c)

    def add(self, other: JacobianPoint) -> JacobianPoint:
        """P + Q, falling back to doubling for P == Q."""
        if other.is_identity():
            return self
        if self.is_identity():
            return other

        c = self.curve
        z1z1 = reduce_field(self.z * self.z, c)
        z2z2 = reduce_field(other.z * other.z, c)
        u1 = reduce_field(self.x * z2z2, c)
        u2 = reduce_field(other.x * z1z1, c)
        s1 = reduce_field(self.y * other.z * z2z2, c)
        s2 = reduce_field(other.y * self.z * z1z1, c)
        h = reduce_field(u2 - u1, c)
        r = reduce_field(s2 - s1, c)

        if h == 0:
            if r == 0:
                return self.double()
            # P == -Q
            return JacobianPoint.identity(c)

        hh = reduce_field(h * h, c)
        hhh = reduce_field(h * hh, c)
        v = reduce_field(u1 * hh, c)
        x3 = reduce_field(r * r - hhh - 2 * v, c)
        y3 = reduce_field(r * (v - x3) - s1 * hhh, c)
        z3 = reduce_field(self.z * other.z * h, c)
        return JacobianPoint(x3, y3, z3, c)

    def endomorphism(self) -> JacobianPoint:
        """phi(P) = (beta*x, y) = lambda*P. Scaling X by beta scales the
        affine x by beta, since Z is unchanged."""
        c = self.curve
        return JacobianPoint(reduce_field(self.x * c.beta, c), self.y, self.z, c)

    def mul(self, scalar: int) -> JacobianPoint:
        """k * P using the GLV decomposition."""
        k1neg, k1, k2neg, k2 = split_scalar_endomorphic(scalar, self.curve)
        k1p = JacobianPoint.identity(self.curve)
        k2p = JacobianPoint.identity(self.curve)
        d = self

        while k1 > 0 or k2 > 0:
            if k1 & 1:
                k1p = k1p.add(d)
            if k2 & 1:
                k2p = k2p.add(d)
            d = d.double()
            k1 >>= 1
            k2 >>= 1

        if k1neg:
            k1p = k1p.negate()
        if k2neg:
            k2p = k2p.negate()
        return k1p.add(k2p.endomorphism())

    def to_bytes(self) -> bytes:
        return encode_ints((self.x, self.y, self.z))

    @classmethod
    def from_bytes(cls, data: bytes, curve: CurveParameters = SECP256K1) -> JacobianPoint:
        x, y, z = decode_ints(data, 3)
        return cls(x, y, z, curve)


def generator(curve: CurveParameters = SECP256K1) -> AffinePoint:
    return AffinePoint.generator(curve)


def naive_mul(point: JacobianPoint, scalar: int) -> JacobianPoint:
    """Reference k * P by plain LSB-first double-and-add over k mod n."""
    k = reduce_order(scalar, point.curve)
    result = JacobianPoint.identity(point.curve)
    addend = point
    while k:
        if k & 1:
            result = result.add(addend)
        addend = addend.double()
        k >>= 1
    return result


def same_point(p: JacobianPoint, q: JacobianPoint) -> bool:
    """Group equality; Jacobian triples of one point differ by the choice of Z."""
    if p.is_identity() or q.is_identity():
        return p.is_identity() and q.is_identity()
    return p.to_affine() == q.to_affine()


def as_jacobian(point: AffinePoint | JacobianPoint) -> JacobianPoint:
    if isinstance(point, JacobianPoint):
        return point
    if isinstance(point, AffinePoint):
        return JacobianPoint.from_affine(point)
    raise InvalidPointError(f"expected a curve point, got {type(point).__name__}")
