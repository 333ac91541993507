"""
Ready-made circuits.

cubic: prove knowledge of x with x**3 + x + 5 == out, flattened to

    t1 = x * x
    y = t1 * x
    t2 = y + x
    out = t2 + 5

over the variable vector [1, x, out, t1, y, t2]. Only x is public (l = 1).
"""
from .r1cs import R1CS

CUBIC_A = [
    [0, 1, 0, 0, 0, 0],
    [0, 0, 0, 1, 0, 0],
    [0, 1, 0, 0, 1, 0],
    [5, 0, 0, 0, 0, 1],
]
CUBIC_B = [
    [0, 1, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 0],
    [1, 0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0, 0],
]
CUBIC_C = [
    [0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0],
    [0, 0, 0, 0, 0, 1],
    [0, 0, 1, 0, 0, 0],
]


def cubic_r1cs():
    return R1CS(CUBIC_A, CUBIC_B, CUBIC_C, l=1)


def cubic_witness(x):
    """[x, out, t1, y, t2] for the given x."""
    t1 = x * x
    y = t1 * x
    t2 = y + x
    out = t2 + 5
    return [x, out, t1, y, t2]


# single multiplication gate x * y == z, with x public
PRODUCT_A = [[0, 1, 0, 0]]
PRODUCT_B = [[0, 0, 1, 0]]
PRODUCT_C = [[0, 0, 0, 1]]


def product_r1cs():
    return R1CS(PRODUCT_A, PRODUCT_B, PRODUCT_C, l=1)


def product_witness(x, y):
    return [x, y, x * y]
