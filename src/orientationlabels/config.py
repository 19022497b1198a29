"""
Configuration & Constants
=========================
This module serves as the central registry for the fixed constants of the
orientation label system.

Why is this file needed?
------------------------
1. Coordinate Convention: The world space is assumed to be LPS (x -> Left,
   y -> Posterior, z -> Superior). The label tables below encode that once.
2. Numerical Noise: EPSILON decides when a vector component is too small to
   deserve a letter.
3. Standard Views: Named camera orientations used by the command-line tool.

Exports:
    EPSILON (float): Components with abs(value) <= EPSILON are ignored.
    POSITIVE_LABELS (str): Letter per axis for a positive component.
    NEGATIVE_LABELS (str): Letter per axis for a negative component.
    OPPOSITE_LETTERS (dict): Maps each letter to its opposite-sign letter.
    STANDARD_VIEWS (dict): View name -> (view_up, direction_of_projection).
"""
from typing import Dict, Tuple

EPSILON: float = 1e-6

POSITIVE_LABELS: str = "LPS"
NEGATIVE_LABELS: str = "RAI"

OPPOSITE_LETTERS: Dict[str, str] = {
    **dict(zip(POSITIVE_LABELS, NEGATIVE_LABELS)),
    **dict(zip(NEGATIVE_LABELS, POSITIVE_LABELS)),
}

Triple = Tuple[float, float, float]

# Radiological convention: patient's left on the right side of the screen.
STANDARD_VIEWS: Dict[str, Tuple[Triple, Triple]] = {
    "axial": ((0.0, -1.0, 0.0), (0.0, 0.0, 1.0)),
    "coronal": ((0.0, 0.0, 1.0), (0.0, 1.0, 0.0)),
    "sagittal": ((0.0, 0.0, 1.0), (-1.0, 0.0, 0.0)),
}
