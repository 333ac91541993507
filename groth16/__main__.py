"""
Entry point for:  python3 -m groth16

Runs the x**3 + x + 5 == out circuit end to end: setup, prove, then verify
against the right public input and against x + 1.

Usage:
    python3 -m groth16                 # x = 3
    python3 -m groth16 --x 5           # another witness
    python3 -m groth16 --check-proof   # prover runs its own pairing check
    python3 -m groth16 -v              # debug logging
"""
import argparse
import logging

from . import config
from .examples import cubic_r1cs, cubic_witness
from .prover import prove
from .trusted_setup import setup
from .verifier import public_inputs, verify


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="groth16", description="Prove and verify x**3 + x + 5 == out with Groth16."
    )
    parser.add_argument("--x", type=int, default=3, help="secret cube root (default 3)")
    parser.add_argument("--check-proof", action="store_true", help="self-check the proof")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    r1cs = cubic_r1cs()
    witness = cubic_witness(args.x)
    assert r1cs.is_satisfied(witness), "not equal"

    qap = r1cs.to_qap()
    trusted = setup(qap)
    proof, vk = prove(trusted, qap, witness, check_proof=args.check_proof)

    w_public = public_inputs(qap, witness)
    print(f"curve={config.CURVE} x={args.x} out={witness[1]}")
    print("verify(x)     :", verify(proof, w_public, vk))
    print("verify(x + 1) :", verify(proof, [args.x + 1], vk))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
