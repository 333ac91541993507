import numpy as np

from .errors import LengthMismatchError
from .field import prepend_one, to_field_array
from .qap import QAP, from_r1cs


class R1CS:
    """
    Rank-1 constraint system: m x n matrices A, B, C and the public split
    index l. Witness slots 0..l are public, slot 0 being the constant 1.
    """

    def __init__(self, A, B, C, l: int):
        A, B, C = (to_field_array(M) for M in (A, B, C))
        if not (A.shape == B.shape == C.shape) or A.ndim != 2:
            raise LengthMismatchError(
                f"R1CS matrices must share one m x n shape, got {A.shape}, {B.shape}, {C.shape}."
            )
        if not 0 <= l < A.shape[1]:
            raise LengthMismatchError(
                f"Public split index {l} outside witness of length {A.shape[1]}."
            )
        self.A = A
        self.B = B
        self.C = C
        self.l = l

    @property
    def num_constraints(self):
        return self.A.shape[0]

    @property
    def num_variables(self):
        return self.A.shape[1]

    def is_satisfied(self, witness) -> bool:
        """Check (A.s) * (B.s) == C.s for the witness without its constant slot."""
        s = prepend_one(witness)
        if len(s) != self.num_variables:
            raise LengthMismatchError(
                f"Witness has {len(witness)} entries, circuit expects {self.num_variables - 1}."
            )
        return bool(np.all((self.A @ s) * (self.B @ s) == self.C @ s))

    def to_qap(self) -> QAP:
        return from_r1cs(self.l, self.A, self.B, self.C)
