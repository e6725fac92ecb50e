"""Non-interactive Schnorr proof of knowledge of a discrete logarithm.

Prover knows x with Y = x*G and wants to convince a verifier without
revealing x.

Interactive protocol:
  1. Prover: random r, send T = r*G
  2. Verifier: random challenge c
  3. Prover: send s = r + c*x (mod n)
  4. Verifier: accept iff s*G == T + c*Y

Fiat-Shamir replaces step 2 with c = H(sid, pid, G, Y, T). The proof is
(T, s). Binding sid and pid into the hash stops a proof from being replayed
in another session or by another participant.

The nonce r must be uniform on [1, n-1] and fresh for every proof: two
proofs sharing r under different challenges give
x = (s1 - s2) / (c1 - c2) mod n.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable

from dlog_proof.curve.field import reduce_order
from dlog_proof.curve.params import SECP256K1, CurveParameters
from dlog_proof.curve.point import (
    AffinePoint,
    JacobianPoint,
    as_jacobian,
    same_point,
)
from dlog_proof.errors import (
    InvalidInputError,
    InvalidPointError,
    InvalidProofError,
    InvalidScalarError,
)
from dlog_proof.nizk.challenge import check_session, derive_challenge
from dlog_proof.nizk.types import Proof

logger = logging.getLogger(__name__)

Point = AffinePoint | JacobianPoint
NonceSource = Callable[[int], int]


def secure_nonce(n: int) -> int:
    """Uniform draw from [1, n-1] using the OS CSPRNG."""
    return secrets.randbelow(n - 1) + 1


def _checked_point(point: Point, role: str) -> JacobianPoint:
    jp = as_jacobian(point)
    if not jp.is_on_curve():
        raise InvalidPointError(f"{role} is not on the curve")
    return jp


class Prover:
    """Generates proofs of knowledge of x such that Y = x*G."""

    def __init__(
        self,
        curve: CurveParameters = SECP256K1,
        nonce_source: NonceSource | None = None,
    ) -> None:
        self.curve = curve
        self.nonce_source = nonce_source or secure_nonce

    def _nonce(self) -> int:
        n = self.curve.n
        r = self.nonce_source(n)
        if not isinstance(r, int) or not 1 <= r < n:
            raise InvalidScalarError("nonce outside [1, n-1]")
        return r

    def prove(
        self,
        sid: str,
        pid: int,
        secret: int,
        public_key: Point,
        base_point: Point | None = None,
    ) -> Proof:
        """Build a proof for (sid, pid).

        public_key and base_point may be affine or Jacobian; affine points
        enter the transcript lifted with Z = 1. base_point defaults to the
        curve generator.
        """
        check_session(sid, pid)
        if not isinstance(secret, int) or isinstance(secret, bool):
            raise InvalidInputError(f"secret must be int, got {type(secret).__name__}")
        if base_point is None:
            base_point = AffinePoint.generator(self.curve)
        g = as_jacobian(base_point)
        y = as_jacobian(public_key)

        r = self._nonce()
        t = g.mul(r)
        c = derive_challenge(sid, pid, [g, y, t])
        s = reduce_order(r + c * secret, self.curve)

        logger.debug("proof generated for sid=%r pid=%d", sid, pid)
        return Proof(t, s)


class Verifier:
    """Checks proofs produced by Prover."""

    def __init__(self, curve: CurveParameters = SECP256K1) -> None:
        self.curve = curve

    def verify(
        self,
        proof: Proof,
        sid: str,
        pid: int,
        public_key: Point,
        base_point: Point | None = None,
    ) -> bool:
        """Return True iff s*G == T + c*Y with c = H(sid, pid, G, Y, T).

        A rejected proof is an ordinary outcome and yields False. Raises
        InvalidPointError if the public key or base point is off the curve.
        """
        check_session(sid, pid)
        if base_point is None:
            base_point = AffinePoint.generator(self.curve)
        g = _checked_point(base_point, "base point")
        y = _checked_point(public_key, "public key")

        t = proof.t
        s_ok = isinstance(proof.s, int) and 0 <= proof.s < self.curve.n
        if not s_ok or not isinstance(t, JacobianPoint) or not t.is_on_curve():
            logger.debug("rejecting malformed proof for sid=%r pid=%d", sid, pid)
            return False

        c = derive_challenge(sid, pid, [g, y, t])
        lhs = g.mul(proof.s)
        rhs = t.add(y.mul(c))
        # Jacobian triples of one point differ in Z
        valid = same_point(lhs, rhs)

        logger.debug("proof for sid=%r pid=%d %s", sid, pid, "accepted" if valid else "rejected")
        return valid

    def require(
        self,
        proof: Proof,
        sid: str,
        pid: int,
        public_key: Point,
        base_point: Point | None = None,
    ) -> None:
        """Like verify() but raises InvalidProofError on rejection."""
        if not self.verify(proof, sid, pid, public_key, base_point):
            raise InvalidProofError()


_default_prover = Prover()
_default_verifier = Verifier()


def prove(
    sid: str,
    pid: int,
    secret: int,
    public_key: Point,
    base_point: Point | None = None,
) -> Proof:
    return _default_prover.prove(sid, pid, secret, public_key, base_point)


def verify(
    proof: Proof,
    sid: str,
    pid: int,
    public_key: Point,
    base_point: Point | None = None,
) -> bool:
    return _default_verifier.verify(proof, sid, pid, public_key, base_point)
