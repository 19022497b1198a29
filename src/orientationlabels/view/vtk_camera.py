"""
VTK Camera Adapter
Wraps vtkCamera objects (also the ones behind pyvista.Plotter) so they fulfil
the CameraLike contract used by the orientation tracker.
"""
from __future__ import annotations

import logging
from typing import Any, Tuple

from pyvista.plotting.plotter import BasePlotter
from vtkmodules.vtkRenderingCore import vtkCamera, vtkRenderer

from orientationlabels.errors import CameraConfigurationError
from orientationlabels.model.camera import CameraLike, Observer, Subscription

logger = logging.getLogger(__name__)


class VtkCameraAdapter:
    """
    Exposes a vtkCamera through the CameraLike interface.

    Change notification uses the camera's "ModifiedEvent", which VTK fires
    after SetViewUp, SetPosition, SetFocalPoint, Azimuth, Elevation, Roll, ...
    """

    def __init__(self, camera: vtkCamera) -> None:
        if not isinstance(camera, vtkCamera):
            raise CameraConfigurationError(f"Expected a vtkCamera, got {type(camera).__name__}.")
        self.vtk_camera: vtkCamera = camera

    def get_view_up(self) -> Tuple[float, float, float]:
        return self.vtk_camera.GetViewUp()

    def get_direction_of_projection(self) -> Tuple[float, float, float]:
        return self.vtk_camera.GetDirectionOfProjection()

    def add_modified_observer(self, callback: Observer) -> Subscription:
        tag = self.vtk_camera.AddObserver("ModifiedEvent", lambda *_: callback())
        return Subscription(lambda: self.vtk_camera.RemoveObserver(tag))


def active_camera(view: Any) -> CameraLike:
    """
    Resolve the camera to track from a view object.

    Args:
        view: A pyvista plotter (Plotter, QtInteractor), a vtkRenderer, a vtkCamera or an object that
              already implements CameraLike.

    Raises:
        CameraConfigurationError: If no camera can be resolved.
    """
    if view is None:
        raise CameraConfigurationError("No view to take the camera from.")
    if isinstance(view, BasePlotter):
        if view.renderer is None:
            raise CameraConfigurationError("Plotter has no active renderer.")
        view = view.renderer
    if isinstance(view, vtkRenderer):
        view = view.GetActiveCamera()
    if isinstance(view, vtkCamera):
        return VtkCameraAdapter(view)
    if isinstance(view, CameraLike):
        return view

    logger.error(f"Cannot resolve a camera from {type(view).__name__}")
    raise CameraConfigurationError(f"Cannot resolve a camera from {type(view).__name__}.")
