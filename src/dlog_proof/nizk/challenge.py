"""Fiat-Shamir challenge derivation.

Replaces the verifier's random challenge with a hash of the transcript:
    c = SHA-256(sid || pid (i32 LE) || enc(P_1) || ... || enc(P_k))
read as a big-endian unsigned integer. The protocol hashes [G, Y, T].
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence

from dlog_proof.curve.point import JacobianPoint
from dlog_proof.errors import InvalidInputError

PID_MIN = -(2**31)
PID_MAX = 2**31 - 1


def check_session(sid: str, pid: int) -> None:
    """Raise InvalidInputError unless (sid, pid) can be bound into a transcript."""
    if not isinstance(sid, str):
        raise InvalidInputError(f"session id must be str, got {type(sid).__name__}")
    if not sid:
        raise InvalidInputError("session id must not be empty")
    if not isinstance(pid, int) or isinstance(pid, bool):
        raise InvalidInputError(f"participant id must be int, got {type(pid).__name__}")
    if not PID_MIN <= pid <= PID_MAX:
        raise InvalidInputError(f"participant id {pid} does not fit in 32 bits")


def derive_challenge(sid: str, pid: int, points: Sequence[JacobianPoint]) -> int:
    """Hash the session context and points, in the given order, to a challenge.

    The result is the full 256-bit digest; reduction mod n is left to the
    caller.
    """
    check_session(sid, pid)
    h = hashlib.sha256()
    h.update(sid.encode("utf-8"))
    h.update(pid.to_bytes(4, "little", signed=True))
    for point in points:
        h.update(point.to_bytes())
    return int.from_bytes(h.digest(), "big")
