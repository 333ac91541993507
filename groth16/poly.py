"""
Dense polynomials over FP.

A polynomial is a 1-D FP array of coefficients, lowest power first, so
``poly[i]`` multiplies ``x**i``. The stored length is an upper bound on the
degree: trailing zero coefficients are kept, never trimmed, because the
proving key is laid out against fixed-length coefficient vectors.
"""
import galois
from galois import FieldArray

from .errors import DivisionByZeroError, LengthMismatchError
from .field import FP, to_field, to_field_array


def zero_poly(length):
    return FP.Zeros(length)


def to_poly(coeffs):
    """Coefficients (ints or field elements, lowest power first) to a polynomial."""
    return to_field_array(list(coeffs))


def to_galois(poly):
    # galois orders coefficients highest power first
    return galois.Poly(poly[::-1], field=FP)


def add(lhs, rhs):
    result = zero_poly(max(len(lhs), len(rhs)))
    result[: len(lhs)] = lhs
    result[: len(rhs)] = result[: len(rhs)] + rhs
    return result


def sub(lhs, rhs):
    result = zero_poly(max(len(lhs), len(rhs)))
    result[: len(lhs)] = lhs
    result[: len(rhs)] = result[: len(rhs)] - rhs
    return result


def mul(lhs, rhs):
    if len(lhs) == 0 or len(rhs) == 0:
        return zero_poly(0)
    result = zero_poly(len(lhs) + len(rhs) - 1)
    for i, coeff in enumerate(lhs):
        if coeff == 0:
            continue
        result[i : i + len(rhs)] = result[i : i + len(rhs)] + coeff * rhs
    return result


def divide(lhs, rhs):
    """
    Long division, returns (quotient, remainder) with
    lhs == quotient * rhs + remainder.

    Every step cancels the highest stored coefficient of the running
    remainder, so the remainder ends up with len(rhs) - 1 coefficients
    (or len(lhs) if lhs is already shorter than rhs).
    """
    if len(rhs) == 0 or rhs[-1] == 0:
        raise DivisionByZeroError("Divisor has a zero leading coefficient.")

    lead_inv = FP(1) / rhs[-1]
    quotient = zero_poly(max(len(lhs) - len(rhs) + 1, 0))
    remainder = FP(lhs)
    while len(remainder) >= len(rhs):
        pos = len(remainder) - len(rhs)
        factor = remainder[-1] * lead_inv
        quotient[pos] = factor
        remainder[pos:] = remainder[pos:] - factor * rhs
        remainder = remainder[:-1]
    return quotient, remainder


def evaluate(poly, x):
    x = to_field(x)
    acc = FP(0)
    for coeff in poly[::-1]:
        acc = acc * x + coeff
    return acc


def vanishing_poly(xs):
    """prod (x - xs_i), monic with len(xs) + 1 coefficients."""
    result = FP([1])
    for x in xs:
        result = mul(result, _linear(x))
    return result


def _linear(root):
    # x - root
    factor = FP([0, 1])
    factor[0] = -to_field(root)
    return factor


def interpolate(xs, ys):
    """
    Lagrange interpolation: the unique polynomial with len(xs) coefficients
    through every (xs[i], ys[i]). The xs must be distinct.
    """
    if len(xs) != len(ys):
        raise LengthMismatchError(
            f"Interpolation got {len(xs)} points but {len(ys)} values."
        )

    root = vanishing_poly(xs)
    result = zero_poly(len(xs))
    for x, y in zip(xs, ys):
        y = to_field(y)
        if y == 0:
            continue
        numerator, _ = divide(root, _linear(x))
        denominator = evaluate(numerator, x)
        result = add(result, numerator * (y / denominator))
    return result


def transpose(matrix):
    """Transpose of a rectangular matrix given as an FP array or nested lists."""
    if isinstance(matrix, FieldArray):
        if matrix.ndim != 2:
            raise LengthMismatchError("Expected a 2-D matrix.")
        return FP(matrix.T)

    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows[0]) for row in rows[1:]):
        raise LengthMismatchError("Cannot transpose a ragged matrix.")
    if not rows:
        return zero_poly((0, 0))
    return to_field_array(rows).T
