"""
Group operations and the pairing check, on top of py_ecc's optimized curves.

Points are kept in py_ecc's projective (x, y, z) representation. The identity
of each group is Z1 / Z2.
"""
import logging
from functools import reduce

from py_ecc import optimized_bls12_381, optimized_bn128

from . import config
from .errors import LengthMismatchError

logger = logging.getLogger(__name__)

_BACKENDS = {
    "bn128": optimized_bn128,
    "bls12_381": optimized_bls12_381,
}

backend = _BACKENDS[config.CURVE]

curve_order = backend.curve_order
G1 = backend.G1
G2 = backend.G2
Z1 = backend.Z1
Z2 = backend.Z2
FQ = backend.FQ
FQ2 = backend.FQ2
FQ12 = backend.FQ12

add = backend.add
neg = backend.neg
eq = backend.eq
normalize = backend.normalize


def multiply(point, scalar):
    return backend.multiply(point, int(scalar) % curve_order)


def is_g1_point(point):
    try:
        return len(point) == 3 and backend.is_on_curve(point, backend.b)
    except (TypeError, AttributeError):
        return False


def is_g2_point(point):
    try:
        return len(point) == 3 and backend.is_on_curve(point, backend.b2)
    except (TypeError, AttributeError):
        return False


# if points = P0, P1, P2 and scalars = a, b, c this returns aP0 + bP1 + cP2
def linear_combination(points, scalars, zero):
    if len(scalars) > len(points):
        raise LengthMismatchError(
            f"Got {len(scalars)} scalars for only {len(points)} points."
        )
    terms = [
        multiply(point, scalar)
        for point, scalar in zip(points, scalars)
        if int(scalar) % curve_order != 0
    ]
    return reduce(add, terms, zero)


def pairing_check(g1_points, g2_points):
    """Return True iff prod e(P_i, Q_i) is the identity of the target group."""
    if len(g1_points) != len(g2_points):
        raise LengthMismatchError(
            f"Pairing check needs equal lengths, got {len(g1_points)} G1 and "
            f"{len(g2_points)} G2 points."
        )
    logger.debug("pairing check over %d pairs", len(g1_points))
    result = FQ12.one()
    for P, Q in zip(g1_points, g2_points):
        result = result * backend.pairing(Q, P)
    return result == FQ12.one()


def is_infinity(point):
    z = point[2]
    return z == type(z).zero()
