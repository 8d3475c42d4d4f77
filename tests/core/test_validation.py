"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, copy semantics
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_square / check_augmented / check_nonempty: system shapes
    - check_consistent_length: multi-array length matching
    - check_positive / check_non_negative_int: scalar options
"""

import numpy as np
import pytest

from pylinsolve.core.exceptions import DimensionMismatchError, ValidationError
from pylinsolve.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_augmented,
    check_consistent_length,
    check_finite,
    check_ndim,
    check_non_negative_int,
    check_nonempty,
    check_positive,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a float64 copy and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "X")
        assert result.dtype == np.float64

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0, 3.0])
        result = check_array(arr, "X")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.shape == (2, 2)

    def test_rejects_object_dtype(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_ragged_rows(self):
        with pytest.raises(ValidationError, match="M"):
            check_array([[1.0, 2.0], [3.0]], "M")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([1 + 2j, 3.0], "X")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "X")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "X")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="2 Inf"):
            check_finite(np.array([np.inf, -np.inf]), "X")


# ═══════════════════════════════════════════════════════════════════════
# Shapes
# ═══════════════════════════════════════════════════════════════════════


class TestShapes:

    def test_ndim_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="expected 3D"):
            check_ndim(np.zeros((2, 2)), 3, "X")

    def test_1d(self):
        check_1d(np.zeros(3), "b")
        with pytest.raises(DimensionMismatchError):
            check_1d(np.zeros((3, 1)), "b")

    def test_2d(self):
        check_2d(np.zeros((3, 3)), "A")
        with pytest.raises(DimensionMismatchError):
            check_2d(np.zeros(3), "A")

    def test_square(self):
        check_square(np.zeros((3, 3)), "A")
        with pytest.raises(DimensionMismatchError, match=r"\(3, 4\)"):
            check_square(np.zeros((3, 4)), "A")

    def test_augmented(self):
        check_augmented(np.zeros((3, 4)), "M")
        with pytest.raises(DimensionMismatchError, match="n\\+1"):
            check_augmented(np.zeros((3, 3)), "M")

    def test_nonempty(self):
        with pytest.raises(DimensionMismatchError, match="at least one"):
            check_nonempty(np.zeros((0, 1)), "M")


class TestCheckConsistentLength:

    def test_consistent(self):
        check_consistent_length(np.zeros(3), np.zeros(3), names=("a", "b"))

    def test_inconsistent_lists_lengths(self):
        with pytest.raises(DimensionMismatchError, match="a=3, b=2"):
            check_consistent_length(np.zeros(3), np.zeros(2), names=("a", "b"))

    def test_names_count_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), names=("a", "b"))


# ═══════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════


class TestScalars:

    def test_positive_ok(self):
        assert check_positive(1e-3, "epsilon") == pytest.approx(1e-3)

    @pytest.mark.parametrize("value", [0.0, -1.0, float("nan"), float("inf")])
    def test_positive_rejects(self, value):
        with pytest.raises(ValidationError, match="epsilon"):
            check_positive(value, "epsilon")

    def test_positive_rejects_bool(self):
        with pytest.raises(ValidationError):
            check_positive(True, "epsilon")

    def test_non_negative_int_ok(self):
        assert check_non_negative_int(0, "max_iterations") == 0
        assert check_non_negative_int(np.int64(5), "max_iterations") == 5

    def test_non_negative_int_rejects_negative(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_non_negative_int(-1, "max_iterations")

    def test_non_negative_int_rejects_float(self):
        with pytest.raises(ValidationError, match="integer"):
            check_non_negative_int(2.5, "max_iterations")
