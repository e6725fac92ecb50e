"""Shared fixtures: reproducible scalars and curve points."""

from __future__ import annotations

import numpy as np
import pytest

from dlog_proof.curve.params import SECP256K1
from dlog_proof.curve.point import AffinePoint, JacobianPoint


def draw_scalar(rng: np.random.Generator, modulus: int) -> int:
    """Uniform-ish 256-bit draw reduced mod modulus."""
    return int.from_bytes(rng.bytes(32), "big") % modulus


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def g():
    return JacobianPoint.from_affine(AffinePoint.generator())


@pytest.fixture
def scalars(rng):
    """Twelve random scalars in [1, n)."""
    return [draw_scalar(rng, SECP256K1.n - 1) + 1 for _ in range(12)]


@pytest.fixture
def points(g, scalars):
    """Random multiples of G; most have Z != 1."""
    return [g.mul(k) for k in scalars[:6]]
