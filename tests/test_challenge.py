"""Tests for the Fiat-Shamir challenge derivation."""

from __future__ import annotations

import hashlib

import pytest

from dlog_proof.curve.point import JacobianPoint
from dlog_proof.errors import InvalidInputError
from dlog_proof.nizk.challenge import derive_challenge


class TestDeterminism:
    def test_same_inputs_same_output(self, g):
        assert derive_challenge("session1", 1, [g]) == derive_challenge("session1", 1, [g])

    def test_output_is_256_bit(self, g, points):
        c = derive_challenge("session1", 1, [g, points[0], points[1]])
        assert 0 <= c < 2**256

    def test_transcript_layout(self, g, points):
        """sid bytes, pid as i32 little-endian, then each point's encoding."""
        y, t = points[0], points[1]
        data = b"s1" + (7).to_bytes(4, "little") + g.to_bytes() + y.to_bytes() + t.to_bytes()
        expected = int.from_bytes(hashlib.sha256(data).digest(), "big")
        assert derive_challenge("s1", 7, [g, y, t]) == expected

    def test_negative_pid_encoding(self, g):
        data = b"s1" + b"\xff\xff\xff\xff" + g.to_bytes()
        expected = int.from_bytes(hashlib.sha256(data).digest(), "big")
        assert derive_challenge("s1", -1, [g]) == expected

    def test_unicode_sid(self, g):
        data = "séance".encode("utf-8") + (1).to_bytes(4, "little") + g.to_bytes()
        expected = int.from_bytes(hashlib.sha256(data).digest(), "big")
        assert derive_challenge("séance", 1, [g]) == expected

    def test_no_points(self):
        data = b"s1" + (1).to_bytes(4, "little")
        assert derive_challenge("s1", 1, []) == int(hashlib.sha256(data).hexdigest(), 16)


class TestBinding:
    def test_session_id_changes_output(self, g):
        assert derive_challenge("session1", 1, [g]) != derive_challenge("session2", 1, [g])

    def test_participant_id_changes_output(self, g):
        assert derive_challenge("session1", 1, [g]) != derive_challenge("session1", 2, [g])

    def test_point_changes_output(self, g, points):
        assert derive_challenge("s", 1, [g, points[0]]) != derive_challenge("s", 1, [g, points[1]])

    def test_point_order_matters(self, g, points):
        assert derive_challenge("s", 1, [g, points[0]]) != derive_challenge("s", 1, [points[0], g])

    def test_jacobian_representation_matters(self, g):
        """The hash covers the Jacobian triple, not the affine point."""
        scaled = JacobianPoint(g.x * 4 % g.curve.p, g.y * 8 % g.curve.p, 2)
        assert scaled.to_affine() == g.to_affine()
        assert derive_challenge("s", 1, [g]) != derive_challenge("s", 1, [scaled])


class TestValidation:
    @pytest.mark.parametrize("sid", ["", None, b"s1", 5])
    def test_bad_session_id(self, g, sid):
        with pytest.raises(InvalidInputError):
            derive_challenge(sid, 1, [g])  # type: ignore[arg-type]

    @pytest.mark.parametrize("pid", [2**31, -(2**31) - 1, "1", 1.5, True])
    def test_bad_participant_id(self, g, pid):
        with pytest.raises(InvalidInputError):
            derive_challenge("s1", pid, [g])  # type: ignore[arg-type]

    def test_pid_bounds_accepted(self, g):
        derive_challenge("s1", 2**31 - 1, [g])
        derive_challenge("s1", -(2**31), [g])

    def test_invalid_input_is_value_error(self, g):
        with pytest.raises(ValueError):
            derive_challenge("", 1, [g])
