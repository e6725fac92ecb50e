"""Value types exchanged between prover and verifier."""

from __future__ import annotations

from dataclasses import dataclass

from dlog_proof.curve.params import SECP256K1, CurveParameters
from dlog_proof.curve.point import JacobianPoint
from dlog_proof.encoding import decode_ints, encode_int


@dataclass(frozen=True)
class Proof:
    """Non-interactive proof of knowledge of x with Y = x*G.

    t is the commitment r*G, s the response r + c*x (mod n).
    """

    t: JacobianPoint
    s: int

    def to_bytes(self) -> bytes:
        return self.t.to_bytes() + encode_int(self.s)

    @classmethod
    def from_bytes(cls, data: bytes, curve: CurveParameters = SECP256K1) -> Proof:
        x, y, z, s = decode_ints(data, 4)
        return cls(JacobianPoint(x, y, z, curve), s)

    def hex(self) -> str:
        return self.to_bytes().hex()
