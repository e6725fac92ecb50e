"""Curve parameters for secp256k1 and its GLV endomorphism.

The curve is y^2 = x^3 + 7 over F_p. It carries the efficiently computable
endomorphism phi(x, y) = (beta*x, y), where beta is a cube root of unity
mod p. phi acts on the prime-order group as multiplication by lambda, a
cube root of unity mod n.

References:
  - Gallant, Lambert, Vanstone, "Faster Point Multiplication on
    Elliptic Curves with Efficient Endomorphisms", CRYPTO 2001
  - secp256k1 specification, Certicom SEC 2, v2 (2010)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CurveParameters:
    """Immutable short-Weierstrass curve description with GLV constants."""

    name: str
    p: int  # field modulus
    n: int  # group order
    a: int
    b: int
    gx: int
    gy: int
    beta: int  # cube root of unity mod p
    lam: int  # cube root of unity mod n matching beta
    # Lattice basis v1 = (a1, b1), v2 = (a2, b2) with b2 = a1
    a1: int
    b1: int
    a2: int

    @property
    def b2(self) -> int:
        return self.a1

    @property
    def half_bits(self) -> int:
        """Bit bound for the short scalars produced by the decomposition."""
        return (self.n.bit_length() + 1) // 2

    def is_on_curve(self, x: int, y: int) -> bool:
        return (y * y - x * x * x - self.a * x - self.b) % self.p == 0

    def validate(self) -> None:
        """Check the algebraic relations the GLV multiplication relies on.

        Raises ValueError naming the first relation that does not hold.
        """
        p, n = self.p, self.n
        if pow(self.beta, 3, p) != 1 or self.beta == 1:
            raise ValueError("beta is not a non-trivial cube root of unity mod p")
        if pow(self.lam, 3, n) != 1 or self.lam == 1:
            raise ValueError("lambda is not a non-trivial cube root of unity mod n")
        if (self.a1 + self.b1 * self.lam) % n != 0:
            raise ValueError("lattice vector (a1, b1) is not in the GLV lattice")
        if (self.a2 + self.b2 * self.lam) % n != 0:
            raise ValueError("lattice vector (a2, b2) is not in the GLV lattice")
        if not self.is_on_curve(self.gx, self.gy):
            raise ValueError("generator is not on the curve")
        if not self.is_on_curve(self.beta * self.gx % p, self.gy):
            raise ValueError("phi(G) is not on the curve")


SECP256K1 = CurveParameters(
    name="secp256k1",
    p=2**256 - 2**32 - 977,
    n=2**256 - 432420386565659656852420866394968145599,
    a=0,
    b=7,
    gx=55066263022277343669578718895168534326250603453777594175500187360389116729240,
    gy=32670510020758816978083085130507043184471273380659243275938904335757337482424,
    beta=0x7AE96A2B657C07106E64479EAC3434E99CF0497512F58995C1396C28719501EE,
    lam=0x5363AD4CC05C30E0A5261C028812645A122E22EA20816678DF02967C1B23BD72,
    a1=0x3086D221A7D46BCDE86C90E49284EB15,
    b1=-0xE4437ED6010E88286F547FA90ABFE4C3,
    a2=0x114CA50F7A8E2F3F657C1108D9D44CFD8,
)
