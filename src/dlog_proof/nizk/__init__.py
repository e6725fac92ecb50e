"""Schnorr proof of knowledge of a discrete logarithm, made non-interactive
with the Fiat-Shamir transform."""

from __future__ import annotations

from dlog_proof.nizk.challenge import derive_challenge
from dlog_proof.nizk.schnorr import Prover, Verifier, prove, verify
from dlog_proof.nizk.types import Proof

__all__ = [
    "Proof",
    "Prover",
    "Verifier",
    "derive_challenge",
    "prove",
    "verify",
]
