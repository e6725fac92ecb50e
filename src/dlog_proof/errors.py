"""Exception hierarchy for proof generation, verification and encoding."""

from __future__ import annotations


class ProofError(Exception):
    """Base class for every error raised by dlog_proof."""


class InvalidProofError(ProofError):
    """A proof did not satisfy the verification equation."""

    def __init__(self) -> None:
        super().__init__("Invalid proof: verification failed")


class InvalidPointError(ProofError):
    """Point at infinity where a finite point is required, or a point off the curve."""

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        msg = "Invalid elliptic curve point"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class InvalidScalarError(ProofError):
    """Zero passed to a modular inversion, or a scalar out of range."""

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        msg = "Invalid scalar value"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class SerializationError(ProofError):
    """A value could not be written in the length-prefixed decimal layout."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Serialization error: {detail}")


class DeserializationError(ProofError):
    """Bytes did not parse as the expected sequence of length-prefixed fields."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Deserialization error: {detail}")


class InvalidInputError(ProofError, ValueError):
    """Malformed caller-supplied parameter (session id, participant id, secret)."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid input: {detail}")
