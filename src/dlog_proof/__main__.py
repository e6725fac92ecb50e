"""Main entry point: python -m dlog_proof"""

from __future__ import annotations

import argparse
import csv
import logging
import sys
import time

import numpy as np

from dlog_proof import __version__
from dlog_proof.curve.params import SECP256K1
from dlog_proof.curve.point import AffinePoint, JacobianPoint, naive_mul
from dlog_proof.errors import ProofError
from dlog_proof.nizk.schnorr import Prover, Verifier, secure_nonce
from dlog_proof.nizk.types import Proof

logger = logging.getLogger("dlog_proof")


def parse_int(text: str) -> int:
    """Decimal or 0x-prefixed hex integer."""
    text = text.strip().lower()
    try:
        if text.startswith("0x"):
            return int(text[2:], 16)
        return int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None


def parse_point(text: str) -> AffinePoint:
    """Affine point given as 'x,y' in decimal or hex."""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError("point must be given as x,y")
    return AffinePoint(parse_int(parts[0]), parse_int(parts[1]))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dlog-proof",
        description="Non-interactive zero-knowledge proofs of discrete logarithm knowledge on secp256k1",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default WARNING)",
    )

    sub = parser.add_subparsers(dest="command")

    def add_session_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--sid", type=str, default="example_session", help="Session identifier")
        p.add_argument("--pid", type=int, default=1, help="Participant identifier")

    # demo
    demo = sub.add_parser("demo", help="Prove and verify once, with timings")
    demo.add_argument("--secret", type=parse_int, default=123456789, help="Secret scalar x")
    add_session_args(demo)

    # prove
    prv = sub.add_parser("prove", help="Print the public key and a proof for a secret")
    prv.add_argument("--secret", type=parse_int, help="Secret scalar x (decimal or 0x hex)")
    prv.add_argument("--random", action="store_true", help="Draw a random secret")
    add_session_args(prv)

    # verify
    ver = sub.add_parser("verify", help="Verify a hex-encoded proof")
    ver.add_argument("--public-key", type=parse_point, required=True, help="Public key as x,y")
    ver.add_argument("--proof", type=str, required=True, help="Proof bytes as hex")
    add_session_args(ver)

    # params
    sub.add_parser("params", help="Print and check the curve constants")

    # bench
    bench = sub.add_parser("bench", help="Time proving, verification and multiplication")
    bench.add_argument("--runs", type=int, default=10, help="Repetitions per operation")
    bench.add_argument("--csv", type=str, default=None, help="Write results to this CSV path")

    return parser


def run_demo(args: argparse.Namespace) -> int:
    """Prove knowledge of a secret, verify it, then show a forged proof rejected."""
    print("=== DLogProof: Non-Interactive Zero-Knowledge Discrete Logarithm Proof ===")
    print()

    g = AffinePoint.generator()
    g_jacobi = JacobianPoint.from_affine(g)

    print("1. Generating secret and public key...")
    secret = args.secret
    public_key = g.mul(secret)
    public_key_jacobi = JacobianPoint.from_affine(public_key)
    print(f"   Secret: {secret} (this would normally be kept private!)")
    print("   Public key computed: Y = secret * G")
    print()

    print("2. Creating zero-knowledge proof...")
    prover = Prover()
    start = time.perf_counter()
    proof = prover.prove(args.sid, args.pid, secret, public_key_jacobi, g_jacobi)
    proof_time = time.perf_counter() - start
    print(f"   Proof created in {proof_time * 1e3:.3f} ms")
    print(f"   Proof response (s): {proof.s}")
    print()

    print("3. Verifying the proof...")
    verifier = Verifier()
    start = time.perf_counter()
    valid = verifier.verify(proof, args.sid, args.pid, public_key_jacobi, g_jacobi)
    verify_time = time.perf_counter() - start
    print(f"   Verification completed in {verify_time * 1e3:.3f} ms")
    if valid:
        print("   Proof is VALID! The prover knows the discrete logarithm.")
    else:
        print("   Proof is INVALID")
    print()

    print("4. Testing with an invalid proof (wrong secret)...")
    wrong_secret = (secret + 1) % SECP256K1.n
    invalid_proof = prover.prove(args.sid, args.pid, wrong_secret, public_key_jacobi, g_jacobi)
    rejected = not verifier.verify(invalid_proof, args.sid, args.pid, public_key_jacobi, g_jacobi)
    if rejected:
        print("   As expected, invalid proof was rejected")
    else:
        print("   Unexpected: Invalid proof was accepted!")
    print()

    print("=== Performance Summary ===")
    print(f"Proof generation:   {proof_time * 1e3:.3f} ms")
    print(f"Proof verification: {verify_time * 1e3:.3f} ms")
    return 0 if valid and rejected else 1


def run_prove(args: argparse.Namespace) -> int:
    if args.random:
        secret = secure_nonce(SECP256K1.n)
        print(f"secret: {secret:#066x}")
    elif args.secret is not None:
        secret = args.secret
    else:
        print("error: pass --secret or --random", file=sys.stderr)
        return 2

    public_key = AffinePoint.generator().mul(secret)
    proof = Prover().prove(args.sid, args.pid, secret, public_key)
    print(f"public key: {public_key.x},{public_key.y}")
    print(f"proof: {proof.hex()}")
    return 0


def run_verify(args: argparse.Namespace) -> int:
    try:
        data = bytes.fromhex(args.proof)
    except ValueError:
        print("error: --proof is not valid hex", file=sys.stderr)
        return 2
    proof = Proof.from_bytes(data)
    if Verifier().verify(proof, args.sid, args.pid, args.public_key):
        print("valid")
        return 0
    print("invalid")
    return 1


def run_params(args: argparse.Namespace) -> int:
    c = SECP256K1
    print(f"Curve: y^2 = x^3 + {c.b} over F_p ({c.name})")
    print(f"  p      = 0x{c.p:064x}")
    print(f"  n      = 0x{c.n:064x}")
    print(f"  Gx     = 0x{c.gx:064x}")
    print(f"  Gy     = 0x{c.gy:064x}")
    print(f"  beta   = 0x{c.beta:064x}")
    print(f"  lambda = 0x{c.lam:064x}")
    print(f"  a1     = {c.a1:#x}")
    print(f"  b1     = {c.b1:#x}")
    print(f"  a2     = {c.a2:#x}")
    try:
        c.validate()
    except ValueError as exc:
        print(f"[FAILED] {exc}")
        return 1
    print("[VERIFIED] endomorphism and lattice constants are consistent")
    return 0


def _timed(fn, runs: int) -> np.ndarray:
    samples = np.empty(runs, dtype=np.float64)
    for i in range(runs):
        start = time.perf_counter()
        fn()
        samples[i] = time.perf_counter() - start
    return samples * 1e3


def run_bench(args: argparse.Namespace) -> int:
    """Time each operation args.runs times and report mean/std/min in ms."""
    runs = max(1, args.runs)
    g = JacobianPoint.from_affine(AffinePoint.generator())
    secret = secure_nonce(SECP256K1.n)
    public_key = g.mul(secret)
    scalar = secure_nonce(SECP256K1.n)
    prover, verifier = Prover(), Verifier()
    proof = prover.prove("bench", 0, secret, public_key, g)

    timings = {
        "prove": _timed(lambda: prover.prove("bench", 0, secret, public_key, g), runs),
        "verify": _timed(lambda: verifier.verify(proof, "bench", 0, public_key, g), runs),
        "mul_glv": _timed(lambda: g.mul(scalar), runs),
        "mul_naive": _timed(lambda: naive_mul(g, scalar), runs),
    }

    print(f"{'operation':<12s} {'mean ms':>10s} {'std ms':>10s} {'min ms':>10s}")
    for name, samples in timings.items():
        print(f"{name:<12s} {samples.mean():>10.3f} {samples.std():>10.3f} {samples.min():>10.3f}")
    speedup = timings["mul_naive"].mean() / timings["mul_glv"].mean()
    print(f"GLV speedup over naive double-and-add: {speedup:.2f}x")

    if args.csv:
        with open(args.csv, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["operation", "runs", "mean_ms", "std_ms", "min_ms"])
            for name, samples in timings.items():
                writer.writerow([name, runs, float(samples.mean()), float(samples.std()), float(samples.min())])
        print(f"Results exported to {args.csv}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    commands = {
        "demo": run_demo,
        "prove": run_prove,
        "verify": run_verify,
        "params": run_params,
        "bench": run_bench,
    }
    if args.command not in commands:
        parser.print_help()
        return 0

    try:
        return commands[args.command](args)
    except ProofError as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
