"""
Orientation Tracker
===================
Keeps the four viewport edge labels (top, right, bottom, left) in sync with a
camera.

Why is this file needed?
------------------------
1. Derivation: Up comes straight from the camera, right is the cross product
   of direction of projection and view-up, bottom and left are negations.
2. Reactivity: The tracker observes the camera and recomputes on every change.
3. Consistency: All four labels live in one immutable OrientationLabels value
   that is swapped in a single assignment, so readers and listeners never see
   a mix of old and new labels.

Classes:
    OrientationLabels: The four edge labels as one value.
    OrientationTracker: Observes a camera and publishes OrientationLabels.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Dict, Optional

from orientationlabels.config import EPSILON
from orientationlabels.errors import CameraConfigurationError
from orientationlabels.model.camera import CameraLike, ObserverRegistry, Subscription
from orientationlabels.model.geometry_primitives import Vector
from orientationlabels.model.labels import encode

logger = logging.getLogger(__name__)

_CAMERA_METHODS = ("get_view_up", "get_direction_of_projection", "add_modified_observer")


@dataclass(frozen=True)
class OrientationLabels:
    top: str = ""
    right: str = ""
    bottom: str = ""
    left: str = ""

    @classmethod
    def from_camera(cls, camera: CameraLike) -> OrientationLabels:
        """
        Compute the labels for the current orientation of a camera.

        Raises:
            CameraConfigurationError: If the camera does not return 3-component vectors.
        """
        try:
            vup = Vector.from_sequence(camera.get_view_up())
            vdir = Vector.from_sequence(camera.get_direction_of_projection())
        except (TypeError, ValueError) as e:
            raise CameraConfigurationError(f"{type(camera).__name__} returned an invalid vector: {e}") from e

        # vup and vdir should not be parallel for cameras
        vright = vdir.cross(vup)
        if not (vup.is_finite and vdir.is_finite) or vright.magnitude <= EPSILON:
            logger.warning(
                f"Degenerate camera orientation (view_up={tuple(vup)}, "
                f"direction={tuple(vdir)}); labels may be incomplete."
            )

        return cls(
            top=encode(vup),
            right=encode(vright),
            bottom=encode(-vup),
            left=encode(-vright),
        )

    def as_dict(self) -> Dict[str, str]:
        return {"top": self.top, "right": self.right, "bottom": self.bottom, "left": self.left}


LabelsListener = Callable[[OrientationLabels], None]


class OrientationTracker:
    """
    Observes a camera and maintains its OrientationLabels.

    Labels are computed on construction, before any camera change, and again
    inside every camera "modified" notification. Listeners registered with
    subscribe() receive the complete new label set whenever it changes.
    """

    def __init__(self, camera: CameraLike) -> None:
        self._camera: Optional[CameraLike] = None
        self._camera_subscription: Optional[Subscription] = None
        self._listeners = ObserverRegistry()
        self._labels = OrientationLabels()
        self.set_camera(camera)

    def __enter__(self) -> OrientationTracker:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def camera(self) -> Optional[CameraLike]:
        return self._camera

    @property
    def labels(self) -> OrientationLabels:
        return self._labels

    @property
    def top(self) -> str:
        return self._labels.top

    @property
    def right(self) -> str:
        return self._labels.right

    @property
    def bottom(self) -> str:
        return self._labels.bottom

    @property
    def left(self) -> str:
        return self._labels.left

    def set_camera(self, camera: CameraLike) -> None:
        """
        Bind the tracker to a (new) camera, e.g. after the renderer's active
        camera was replaced. The previous camera is no longer observed.

        If binding fails the tracker keeps observing the previous camera.

        Raises:
            CameraConfigurationError: If camera is None, lacks the camera methods
                or does not return 3-component vectors.
        """
        self._validate_camera(camera)
        labels = OrientationLabels.from_camera(camera)
        subscription = camera.add_modified_observer(self._update_axes)

        self._release_camera()
        self._camera = camera
        self._camera_subscription = subscription
        self._publish(labels)

    def subscribe(self, callback: LabelsListener) -> Subscription:
        """Register a listener called with the full OrientationLabels after each change."""
        return self._listeners.add(callback)

    def close(self) -> None:
        """Stop observing the camera and drop all listeners. Safe to call twice."""
        self._release_camera()
        self._camera = None
        self._listeners.clear()

    # ------------------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------------------

    @staticmethod
    def _validate_camera(camera: CameraLike) -> None:
        if camera is None:
            raise CameraConfigurationError("No camera to track.")
        missing = [name for name in _CAMERA_METHODS if not callable(getattr(camera, name, None))]
        if missing:
            raise CameraConfigurationError(
                f"{type(camera).__name__} is not a camera, missing: {', '.join(missing)}"
            )

    def _release_camera(self) -> None:
        if self._camera_subscription is not None:
            self._camera_subscription.cancel()
            self._camera_subscription = None

    def _update_axes(self, *_) -> None:
        if self._camera is None:
            return
        try:
            labels = OrientationLabels.from_camera(self._camera)
        except CameraConfigurationError as e:
            logger.warning(f"Cannot compute orientation labels: {e}")
            labels = OrientationLabels()
        self._publish(labels)

    def _publish(self, labels: OrientationLabels) -> None:
        if labels == self._labels:
            return

        self._labels = labels
        logger.debug(f"Orientation labels updated: {labels}")
        for callback in self._listeners.callbacks():
            # A listener moved the camera; the newer set was already delivered
            if self._labels is not labels:
                break
            callback(labels)
