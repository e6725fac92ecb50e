"""Modular arithmetic over the field modulus p and the group order n."""

from __future__ import annotations

from dlog_proof.curve.params import SECP256K1, CurveParameters
from dlog_proof.errors import InvalidScalarError


def reduce_field(a: int, curve: CurveParameters = SECP256K1) -> int:
    """Canonical residue of a in [0, p)."""
    return a % curve.p


def reduce_order(a: int, curve: CurveParameters = SECP256K1) -> int:
    """Canonical residue of a in [0, n)."""
    return a % curve.n


def invert_field(a: int, curve: CurveParameters = SECP256K1) -> int:
    """Inverse of a mod p via the extended Euclidean algorithm.

    Raises InvalidScalarError when a = 0 mod p.
    """
    a = reduce_field(a, curve)
    if a == 0:
        raise InvalidScalarError("zero has no inverse mod p")
    b = curve.p
    x, u = 0, 1
    while a:
        q, r = divmod(b, a)
        b, a = a, r
        x, u = u, x - u * q
    return reduce_field(x, curve)


def div_nearest(a: int, b: int) -> int:
    """Compute round(a/b) for b > 0 using integer arithmetic."""
    return (a + b // 2) // b


def split_scalar_endomorphic(
    k: int, curve: CurveParameters = SECP256K1
) -> tuple[bool, int, bool, int]:
    """Decompose k into two half-length scalars for the GLV method.

    Babai rounding against the lattice {(i, j) : i + j*lambda = 0 mod n}:
        c1 = round(b2*k / n), c2 = round(-b1*k / n)
        k1 = k - c1*a1 - c2*a2, k2 = -c1*b1 - c2*b2

    Returns (k1neg, k1, k2neg, k2) with k1, k2 < 2^128 and
    k = (-1)^k1neg * k1 + (-1)^k2neg * k2 * lambda (mod n).
    """
    n = curve.n
    k = reduce_order(k, curve)
    c1 = div_nearest(curve.b2 * k, n)
    c2 = div_nearest(-curve.b1 * k, n)
    k1 = reduce_order(k - c1 * curve.a1 - c2 * curve.a2, curve)
    k2 = reduce_order(-c1 * curve.b1 - c2 * curve.b2, curve)

    bound = 1 << curve.half_bits
    k1neg = k1 > bound
    k2neg = k2 > bound
    if k1neg:
        k1 = n - k1
    if k2neg:
        k2 = n - k2
    return k1neg, k1, k2neg, k2
