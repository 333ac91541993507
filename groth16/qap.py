"""
R1CS to QAP conversion.

Each R1CS matrix is transposed so that row i holds the coefficients of
variable i across all m constraints, and every such row is interpolated at
x = 1, 2, ..., m. A witness s satisfies the R1CS iff

    (sum s_i u_i(x)) * (sum s_i v_i(x)) - sum s_i w_i(x)

vanishes at 1..m, i.e. is a multiple of t(x) = (x - 1)(x - 2)...(x - m).
"""
import logging

import numpy as np
from galois import FieldArray

from .errors import InvalidWitnessError, LengthMismatchError
from .field import FP, to_field_array
from .poly import divide, evaluate, interpolate, mul, sub, transpose, vanishing_poly

logger = logging.getLogger(__name__)


class QAP:
    """
    Quadratic arithmetic program. u, v, w are n x m FP matrices: row i is the
    coefficient vector (lowest power first) of the basis polynomial of witness
    slot i. Slots 0..l are public, slot 0 being the constant 1.
    """

    def __init__(self, l: int, u: FieldArray, v: FieldArray, w: FieldArray):
        if not (u.shape == v.shape == w.shape) or u.ndim != 2:
            raise LengthMismatchError(
                f"QAP bases must share one n x m shape, got {u.shape}, {v.shape}, {w.shape}."
            )
        if not 0 <= l < u.shape[0]:
            raise LengthMismatchError(
                f"Public split index {l} outside witness of length {u.shape[0]}."
            )
        self.l = l
        self.u = u
        self.v = v
        self.w = w

    @property
    def degree(self):
        """Number of constraints m, which is also the length of every basis polynomial."""
        return self.u.shape[1]

    @property
    def num_variables(self):
        return self.u.shape[0]

    @property
    def num_public(self):
        return self.l + 1


def vanishing(m: int) -> FieldArray:
    return vanishing_poly(evaluation_points(m))


def evaluation_points(m: int) -> FieldArray:
    return FP(list(range(1, m + 1)))


def _interpolate_rows(matrix_t, xs):
    polys = FP.Zeros((matrix_t.shape[0], len(xs)))
    for i, row in enumerate(matrix_t):
        polys[i] = interpolate(xs, row)
    return polys


def from_r1cs(l: int, A, B, C) -> QAP:
    A, B, C = (to_field_array(M) for M in (A, B, C))
    if not (A.shape == B.shape == C.shape) or A.ndim != 2:
        raise LengthMismatchError(
            f"R1CS matrices must share one m x n shape, got {A.shape}, {B.shape}, {C.shape}."
        )

    m = A.shape[0]
    xs = evaluation_points(m)
    logger.debug("building QAP for %d constraints over %d variables", m, A.shape[1])

    u = _interpolate_rows(transpose(A), xs)
    v = _interpolate_rows(transpose(B), xs)
    w = _interpolate_rows(transpose(C), xs)
    return QAP(l, u, v, w)


def solution_polynomials(witness: FieldArray, qap: QAP):
    """
    For the full witness (constant 1 already in slot 0) return (au, av, ht)
    where au = sum s_i u_i, av = sum s_i v_i and ht = au * av - aw.
    """
    if len(witness) != qap.num_variables:
        raise LengthMismatchError(
            f"Witness has {len(witness)} entries, QAP expects {qap.num_variables}."
        )

    au = witness @ qap.u
    av = witness @ qap.v
    aw = witness @ qap.w
    ht = sub(mul(au, av), aw)

    for k in evaluation_points(qap.degree):
        if evaluate(ht, k) != 0:
            raise InvalidWitnessError(
                f"Solution polynomial does not vanish at x = {int(k)}."
            )
    return au, av, ht


def quotient(ht: FieldArray, t: FieldArray) -> FieldArray:
    """h = ht / t; any remainder means ht was not a multiple of t."""
    h, remainder = divide(ht, t)
    if np.any(remainder != 0):
        raise InvalidWitnessError("Solution polynomial is not divisible by t(x).")
    return h
