"""
Groth16 zk-SNARK: R1CS -> QAP, trusted setup, prove and verify.
"""
import logging

from .errors import (
    ConfigError,
    DivisionByZeroError,
    Groth16Error,
    InvalidWitnessError,
    LengthMismatchError,
    PairingCheckError,
    SerializationError,
)
from .field import FP, p
from .keys import Proof, TrustedSetup, VerifierKey
from .prover import prove
from .qap import QAP, from_r1cs
from .r1cs import R1CS
from .trusted_setup import setup
from .verifier import public_inputs, verify

logging.getLogger(__name__).addHandler(logging.NullHandler())
