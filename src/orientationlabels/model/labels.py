"""
Label Encoder
=============
Turns a direction vector into an anatomical orientation label such as "LPS".

Each axis with a significant component contributes one letter; letters are
ordered from the largest to the smallest absolute component, so the first
letter names the dominant direction.

Functions:
    encode: Vector -> ordered label string.
    opposite: Letter-wise sign flip of a label ("LP" -> "RA").
"""
from __future__ import annotations

from orientationlabels.config import EPSILON, NEGATIVE_LABELS, OPPOSITE_LETTERS, POSITIVE_LABELS
from orientationlabels.model.geometry_primitives import Vector, VectorLike


def encode(vector: VectorLike) -> str:
    """
    Compute the ordered orientation label of a direction vector.

    Args:
        vector: Any 3-component vector. Magnitude does not matter.

    Returns:
        0 to 3 letters from {L, R, P, A, S, I}, largest component first.
        The zero vector (and NaN components) yield no letters.
    """
    components = [
        (value, axis)
        for axis, value in enumerate(Vector.from_sequence(vector))
        # NaN fails this comparison and is dropped with the near-zero values
        if abs(value) > EPSILON
    ]
    # sorted() is stable, so equal magnitudes keep axis order
    components = sorted(components, key=lambda pair: abs(pair[0]), reverse=True)

    return "".join(
        POSITIVE_LABELS[axis] if value > 0 else NEGATIVE_LABELS[axis]
        for value, axis in components
    )


def opposite(label: str) -> str:
    """
    Flip every letter of a label to the opposite direction on the same axis.

    Raises:
        ValueError: If the label contains a letter outside {L, R, P, A, S, I}.
    """
    try:
        return "".join(OPPOSITE_LETTERS[letter] for letter in label)
    except KeyError as e:
        raise ValueError(f"Not an orientation label: {label!r}") from e
