"""
Camera Contract & In-Memory Camera
==================================
This module defines what the orientation tracker needs from a camera and
provides a plain Python camera that fulfils it.

Why is this file needed?
------------------------
1. Decoupling: The tracker only talks to the CameraLike protocol. VTK cameras
   are wrapped by view.vtk_camera.VtkCameraAdapter; no VTK import happens here.
2. Headless use: Camera keeps the view-up / direction state and an observer
   registry, so labels can be computed without a rendering engine.

Classes:
    Subscription: Handle returned by observer registration.
    CameraLike: Protocol consumed by the tracker.
    Camera: In-memory camera with change notification.
"""
from __future__ import annotations

import itertools
import logging
from typing import Callable, Dict, List, Optional, Protocol, Tuple, runtime_checkable

from orientationlabels.model.geometry_primitives import Vector, VectorLike

logger = logging.getLogger(__name__)

Observer = Callable[[], None]


class Subscription:
    """
    Handle for a registered observer. Calling cancel() deregisters it;
    cancelling twice is a no-op.
    """

    def __init__(self, cancel: Callable[[], None]) -> None:
        self._cancel: Optional[Callable[[], None]] = cancel

    @property
    def active(self) -> bool:
        return self._cancel is not None

    def cancel(self) -> None:
        if self._cancel is None:
            return
        cancel, self._cancel = self._cancel, None
        cancel()


@runtime_checkable
class CameraLike(Protocol):
    def get_view_up(self) -> VectorLike: ...
    def get_direction_of_projection(self) -> VectorLike: ...
    def add_modified_observer(self, callback: Observer) -> Subscription: ...


class ObserverRegistry:
    """Ordered set of callbacks, notified synchronously in registration order."""

    def __init__(self) -> None:
        self._observers: Dict[int, Tuple[Callable, Subscription]] = {}
        self._ids = itertools.count()

    def __len__(self) -> int:
        return len(self._observers)

    def add(self, callback: Callable) -> Subscription:
        key = next(self._ids)
        subscription = Subscription(lambda: self._observers.pop(key, None))
        self._observers[key] = (callback, subscription)
        return subscription

    def callbacks(self) -> List[Callable]:
        """Snapshot of the registered callbacks, safe against cancellation while iterating."""
        return [callback for callback, _ in self._observers.values()]

    def clear(self) -> None:
        """Cancel every handed-out subscription."""
        for _, subscription in list(self._observers.values()):
            subscription.cancel()

    def notify(self, *args) -> None:
        for callback in self.callbacks():
            callback(*args)


class Camera:
    """
    A minimal camera holding view-up and direction of projection.

    Every setter notifies observers once after the state is updated. Use
    set_orientation() to change both vectors with a single notification.
    """

    def __init__(
        self,
        view_up: VectorLike = (0.0, 1.0, 0.0),
        direction_of_projection: VectorLike = (0.0, 0.0, -1.0),
    ) -> None:
        self._view_up = Vector.from_sequence(view_up)
        self._direction = Vector.from_sequence(direction_of_projection)
        self._observers = ObserverRegistry()

    def __repr__(self) -> str:
        return f"Camera(view_up={tuple(self._view_up)}, direction_of_projection={tuple(self._direction)})"

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def get_view_up(self) -> Vector:
        return self._view_up

    def get_direction_of_projection(self) -> Vector:
        return self._direction

    def set_view_up(self, view_up: VectorLike) -> None:
        self.set_orientation(view_up, self._direction)

    def set_direction_of_projection(self, direction: VectorLike) -> None:
        self.set_orientation(self._view_up, direction)

    def set_orientation(self, view_up: VectorLike, direction_of_projection: VectorLike) -> None:
        self._view_up = Vector.from_sequence(view_up)
        self._direction = Vector.from_sequence(direction_of_projection)
        logger.debug(f"Camera modified: {self!r}")
        self._observers.notify()

    def add_modified_observer(self, callback: Observer) -> Subscription:
        return self._observers.add(callback)
