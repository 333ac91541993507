import secrets

import numpy as np
from galois import GF, FieldArray

from . import config
from .curve import curve_order
from .errors import LengthMismatchError

p = curve_order
FP = GF(p, primitive_element=config.PRIMITIVE_ELEMENTS[config.CURVE], verify=False)


def to_field(value):
    """Map an int (any sign) or field element into FP."""
    if isinstance(value, FieldArray):
        return FP(int(value))
    return FP(int(value) % p)


def to_field_array(values):
    """Nested lists of ints (any sign) or field elements to an FP array."""
    if isinstance(values, FieldArray):
        return FP(values)
    try:
        array = np.array(values).astype(object)
    except ValueError as e:
        raise LengthMismatchError(f"Cannot build a rectangular array: {e}") from e
    reduced = np.vectorize(lambda x: int(x) % p, otypes=[object])(array)
    return FP(reduced)


def random_scalar():
    """Uniform non-zero field element from the OS CSPRNG."""
    return FP(secrets.randbelow(p - 1) + 1)


def prepend_one(values):
    """[1, *values] as an FP array; slot 0 carries the circuit constant."""
    result = FP.Ones(len(values) + 1)
    for i, value in enumerate(values):
        result[i + 1] = to_field(value)
    return result
