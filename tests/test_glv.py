"""Tests for the GLV decomposition and endomorphism-accelerated multiplication."""

from __future__ import annotations

import pytest
from ecdsa import SECP256k1 as ECDSA_SECP256K1

from dlog_proof.curve.field import split_scalar_endomorphic
from dlog_proof.curve.params import SECP256K1
from dlog_proof.curve.point import AffinePoint, JacobianPoint, naive_mul, same_point

from conftest import draw_scalar

N = SECP256K1.n
LAM = SECP256K1.lam

EDGE_SCALARS = [0, 1, 2, 3, N - 1, N - 2, N, N + 5, -1, LAM, 2**128, 2**128 + 1, 2**255, 2**256 - 1]


def recombine(k1neg: bool, k1: int, k2neg: bool, k2: int) -> int:
    s1 = -k1 if k1neg else k1
    s2 = -k2 if k2neg else k2
    return (s1 + s2 * LAM) % N


class TestDecomposition:
    @pytest.mark.parametrize("k", EDGE_SCALARS)
    def test_edge_scalars_recombine(self, k):
        parts = split_scalar_endomorphic(k)
        assert recombine(*parts) == k % N

    def test_random_scalars_recombine(self, rng):
        for _ in range(200):
            k = draw_scalar(rng, N)
            assert recombine(*split_scalar_endomorphic(k)) == k

    def test_halves_are_short(self, rng):
        for _ in range(200):
            _, k1, _, k2 = split_scalar_endomorphic(draw_scalar(rng, N))
            assert 0 <= k1 <= 2**128
            assert 0 <= k2 <= 2**128

    def test_zero(self):
        assert split_scalar_endomorphic(0) == (False, 0, False, 0)

    def test_deterministic(self):
        k = 0xDEADBEEF * 2**200 + 12345
        assert split_scalar_endomorphic(k) == split_scalar_endomorphic(k)


class TestEndomorphism:
    def test_phi_is_lambda_multiplication(self, points):
        for pt in points[:3]:
            assert same_point(pt.endomorphism(), naive_mul(pt, LAM))

    def test_phi_keeps_point_on_curve(self, g):
        assert g.endomorphism().is_on_curve()

    def test_phi_cubed_is_identity_map(self, g):
        assert g.endomorphism().endomorphism().endomorphism() == g


class TestScalarMul:
    @pytest.mark.parametrize("k", EDGE_SCALARS)
    def test_edge_scalars_match_naive(self, g, k):
        assert same_point(g.mul(k), naive_mul(g, k))

    def test_random_scalars_match_naive(self, g, scalars):
        for k in scalars:
            assert same_point(g.mul(k), naive_mul(g, k))

    def test_random_base_points_match_naive(self, points, rng):
        for pt in points:
            k = draw_scalar(rng, N)
            assert same_point(pt.mul(k), naive_mul(pt, k))

    def test_matches_ecdsa_reference(self, scalars):
        """Independent check against the ecdsa package's secp256k1."""
        g = AffinePoint.generator()
        for k in scalars:
            ours = g.mul(k)
            ref = ECDSA_SECP256K1.generator * k
            assert (ours.x, ours.y) == (ref.x(), ref.y())

    def test_non_generator_base_matches_ecdsa(self, rng):
        a = draw_scalar(rng, N - 1) + 1
        b = draw_scalar(rng, N - 1) + 1
        ours = AffinePoint.generator().mul(a).mul(b)
        ref = ECDSA_SECP256K1.generator * (a * b % N)
        assert (ours.x, ours.y) == (ref.x(), ref.y())

    def test_distributes_over_addition(self, g, rng):
        a = draw_scalar(rng, N)
        b = draw_scalar(rng, N)
        assert same_point(g.mul(a).add(g.mul(b)), g.mul(a + b))

    def test_identity_base(self):
        assert JacobianPoint.identity().mul(12345).is_identity()

    def test_naive_order_is_identity(self, g):
        assert naive_mul(g, N).is_identity()
