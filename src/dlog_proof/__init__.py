"""DLogProof: non-interactive zero-knowledge proofs of discrete logarithm
knowledge on secp256k1.

A prover convinces a verifier that it knows x with Y = x*G without
revealing x, using the Schnorr protocol with the Fiat-Shamir transform.
"""

from __future__ import annotations

from dlog_proof.curve import (
    SECP256K1,
    AffinePoint,
    CurveParameters,
    JacobianPoint,
    generator,
)
from dlog_proof.errors import (
    DeserializationError,
    InvalidInputError,
    InvalidPointError,
    InvalidProofError,
    InvalidScalarError,
    ProofError,
    SerializationError,
)
from dlog_proof.nizk import Proof, Prover, Verifier, derive_challenge, prove, verify

__version__ = "0.1.0"

__all__ = [
    "AffinePoint",
    "CurveParameters",
    "DeserializationError",
    "InvalidInputError",
    "InvalidPointError",
    "InvalidProofError",
    "InvalidScalarError",
    "JacobianPoint",
    "Proof",
    "ProofError",
    "Prover",
    "SECP256K1",
    "SerializationError",
    "Verifier",
    "derive_challenge",
    "generator",
    "prove",
    "verify",
]
