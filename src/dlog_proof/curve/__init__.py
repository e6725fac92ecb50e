"""secp256k1 field and group arithmetic with GLV scalar multiplication."""

from __future__ import annotations

from dlog_proof.curve.field import (
    invert_field,
    reduce_field,
    reduce_order,
    split_scalar_endomorphic,
)
from dlog_proof.curve.params import SECP256K1, CurveParameters
from dlog_proof.curve.point import (
    AffinePoint,
    JacobianPoint,
    generator,
    naive_mul,
    same_point,
)

__all__ = [
    "AffinePoint",
    "CurveParameters",
    "JacobianPoint",
    "SECP256K1",
    "generator",
    "invert_field",
    "naive_mul",
    "reduce_field",
    "reduce_order",
    "same_point",
    "split_scalar_endomorphic",
]
