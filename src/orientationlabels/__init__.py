"""
Anatomical orientation labels for the edges of a 3D viewport.
"""
from orientationlabels.errors import CameraConfigurationError, OrientationLabelsError
from orientationlabels.model.camera import Camera, CameraLike, Subscription
from orientationlabels.model.geometry_primitives import Vector
from orientationlabels.model.labels import encode, opposite
from orientationlabels.model.orientation import OrientationLabels, OrientationTracker

__all__ = [
    "Camera",
    "CameraConfigurationError",
    "CameraLike",
    "OrientationLabels",
    "OrientationLabelsError",
    "OrientationTracker",
    "Subscription",
    "Vector",
    "encode",
    "opposite",
]
