"""
tests/test_labels.py — Unit tests for the label encoder.
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from orientationlabels.config import EPSILON
from orientationlabels.model.geometry_primitives import Vector
from orientationlabels.model.labels import encode, opposite

VECTORS = [
    (1.0, 0.0, 0.0),
    (3.0, 1.0, 0.0),
    (-0.2, 0.7, -0.4),
    (0.5, -0.5, 0.5),
    (1e-9, -2.0, 0.3),
    (-4.0, 4.0, 1e-3),
    (0.0, 0.0, 0.0),
]


@pytest.mark.parametrize("vector, expected", [
    ((1, 0, 0), "L"),
    ((-1, 0, 0), "R"),
    ((0, 1, 0), "P"),
    ((0, -1, 0), "A"),
    ((0, 0, 1), "S"),
    ((0, 0, -1), "I"),
])
def test_unit_axes(vector, expected):
    assert encode(vector) == expected


def test_descending_magnitude_order():
    assert encode([3, 1, 0]) == "LP"
    assert encode([1, 3, 0]) == "PL"
    assert encode([0.1, -0.3, 2.0]) == "SAL"


def test_zero_vector_is_empty():
    assert encode([0, 0, 0]) == ""


def test_components_below_epsilon_are_ignored():
    assert encode([1e-10, 5, 0]) == "P"
    assert encode([EPSILON, 0, 0]) == ""
    assert encode([-EPSILON * 2, 0, 0]) == "R"


def test_ties_keep_axis_order():
    assert encode([1, 1, 0]) == "LP"
    assert encode([-1, 1, -1]) == "RPI"
    assert encode([0, 2, -2]) == "PI"


def test_nan_component_produces_no_letter():
    assert encode([math.nan, 1.0, 0.0]) == "P"
    assert encode([math.nan] * 3) == ""


def test_accepts_vector_and_numpy_array():
    assert encode(Vector(0.0, -2.0, 1.0)) == "AS"
    assert encode(np.array([0.0, -2.0, 1.0])) == "AS"


def test_rejects_wrong_component_count():
    with pytest.raises(ValueError):
        encode([1.0, 2.0])


@pytest.mark.parametrize("vector", VECTORS)
def test_negation_flips_every_letter(vector):
    v = Vector.from_sequence(vector)
    assert encode(-v) == opposite(encode(v))


@pytest.mark.parametrize("vector", VECTORS)
def test_length_counts_significant_components(vector):
    assert len(encode(vector)) == sum(abs(c) > EPSILON for c in vector)


def test_opposite():
    assert opposite("LPS") == "RAI"
    assert opposite("AR") == "PL"
    assert opposite("") == ""


def test_opposite_rejects_unknown_letters():
    with pytest.raises(ValueError):
        opposite("LX")
