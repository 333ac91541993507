"""Tests for the field helpers and the py_ecc group adapter."""

import pytest

from groth16.curve import (
    G1,
    G2,
    Z1,
    add,
    curve_order,
    eq,
    is_g1_point,
    is_g2_point,
    is_infinity,
    linear_combination,
    multiply,
    neg,
    pairing_check,
)
from groth16.errors import LengthMismatchError
from groth16.field import FP, p, prepend_one, random_scalar, to_field, to_field_array


class TestField:
    def test_modulus_is_curve_order(self) -> None:
        assert p == curve_order
        assert FP.order == curve_order

    def test_to_field_wraps_negatives(self) -> None:
        assert int(to_field(-1)) == p - 1
        assert int(to_field(p + 5)) == 5

    def test_to_field_array(self) -> None:
        arr = to_field_array([[1, -1], [p, 2]])
        assert arr.shape == (2, 2)
        assert [[int(c) for c in row] for row in arr] == [[1, p - 1], [0, 2]]

    def test_random_scalar(self) -> None:
        samples = {int(random_scalar()) for _ in range(8)}
        assert len(samples) == 8
        assert all(0 < s < p for s in samples)

    def test_prepend_one(self) -> None:
        assert [int(c) for c in prepend_one([7, 8])] == [1, 7, 8]
        assert [int(c) for c in prepend_one([])] == [1]


class TestGroups:
    def test_linear_combination(self) -> None:
        points = [G1, multiply(G1, 2), multiply(G1, 3)]
        commitment = linear_combination(points, [5, 7, 11], Z1)
        assert eq(commitment, multiply(G1, 5 + 14 + 33))

    def test_linear_combination_empty_is_identity(self) -> None:
        assert is_infinity(linear_combination([G1], [], Z1))
        assert is_infinity(linear_combination([G1, G1], [0, 0], Z1))

    def test_linear_combination_accepts_field_elements(self) -> None:
        assert eq(linear_combination([G1], FP([p - 1]), Z1), neg(G1))

    def test_linear_combination_too_many_scalars(self) -> None:
        with pytest.raises(LengthMismatchError):
            linear_combination([G1], [1, 2], Z1)

    def test_membership(self) -> None:
        assert is_g1_point(G1)
        assert is_g2_point(G2)
        assert not is_g1_point((1, 2))


class TestPairingCheck:
    def test_bilinearity(self) -> None:
        # e(3 G1, 8 G2) == e(6 G1, 4 G2)  <=>  e(-3 G1, 8 G2) e(6 G1, 4 G2) == 1
        assert pairing_check(
            [neg(multiply(G1, 3)), multiply(G1, 6)],
            [multiply(G2, 8), multiply(G2, 4)],
        )

    def test_unbalanced(self) -> None:
        assert not pairing_check(
            [neg(multiply(G1, 3)), multiply(G1, 6)],
            [multiply(G2, 8), multiply(G2, 5)],
        )

    def test_identity_terms(self) -> None:
        assert pairing_check([Z1, add(G1, neg(G1))], [G2, G2])

    def test_length_mismatch(self) -> None:
        with pytest.raises(LengthMismatchError):
            pairing_check([G1, G1], [G2])
