"""
tests/test_vtk_camera.py — Tracking real vtkCamera objects.

Cameras, renderers and an off-screen plotter are created; nothing is rendered,
so no display is needed.
"""

from __future__ import annotations

import pytest
import pyvista as pv
from vtkmodules.vtkRenderingCore import vtkCamera, vtkRenderer

from orientationlabels.errors import CameraConfigurationError
from orientationlabels.model.camera import Camera
from orientationlabels.model.geometry_primitives import Vector
from orientationlabels.model.labels import encode, opposite
from orientationlabels.model.orientation import OrientationTracker
from orientationlabels.view.vtk_camera import VtkCameraAdapter, active_camera


@pytest.fixture
def vtk_camera():
    return vtkCamera()


def test_default_vtk_camera(vtk_camera):
    tracker = OrientationTracker(VtkCameraAdapter(vtk_camera))
    assert (tracker.top, tracker.right, tracker.bottom, tracker.left) == ("P", "L", "A", "R")


def test_follows_vtk_camera_changes(vtk_camera):
    tracker = OrientationTracker(VtkCameraAdapter(vtk_camera))
    calls = []
    tracker.subscribe(calls.append)

    vtk_camera.SetViewUp(0.0, 0.0, 1.0)
    vtk_camera.SetFocalPoint(0.0, 0.0, 0.0)
    vtk_camera.SetPosition(0.0, -1.0, 0.0)

    assert (tracker.top, tracker.right, tracker.bottom, tracker.left) == ("S", "L", "I", "R")
    assert calls[-1] == tracker.labels


def test_rotation_keeps_labels_consistent(vtk_camera):
    tracker = OrientationTracker(VtkCameraAdapter(vtk_camera))
    before = tracker.labels

    vtk_camera.Azimuth(90.0)

    vup = Vector.from_sequence(vtk_camera.GetViewUp())
    vdir = Vector.from_sequence(vtk_camera.GetDirectionOfProjection())
    assert tracker.labels != before
    assert tracker.top == encode(vup)
    assert tracker.right == encode(vdir.cross(vup))
    assert tracker.left == opposite(tracker.right)


def test_close_removes_vtk_observer(vtk_camera):
    tracker = OrientationTracker(VtkCameraAdapter(vtk_camera))
    assert vtk_camera.HasObserver("ModifiedEvent")

    tracker.close()

    assert not vtk_camera.HasObserver("ModifiedEvent")
    vtk_camera.SetViewUp(0.0, 0.0, 1.0)
    assert tracker.top == "P"


def test_adapter_rejects_non_vtk_camera():
    with pytest.raises(CameraConfigurationError):
        VtkCameraAdapter(object())


def test_active_camera_from_renderer():
    renderer = vtkRenderer()
    camera = active_camera(renderer)
    assert isinstance(camera, VtkCameraAdapter)
    assert camera.vtk_camera is renderer.GetActiveCamera()


def test_active_camera_passes_through_camera_like():
    camera = Camera()
    assert active_camera(camera) is camera
    assert isinstance(active_camera(vtkCamera()), VtkCameraAdapter)


@pytest.mark.parametrize("view", [None, "renderer", 42])
def test_active_camera_rejects_unknown_views(view):
    with pytest.raises(CameraConfigurationError):
        active_camera(view)


def test_active_camera_from_pyvista_plotter():
    plotter = pv.Plotter(off_screen=True)
    try:
        tracker = OrientationTracker(active_camera(plotter))
        plotter.view_xz()
        assert tracker.top == "S"
        assert tracker.right == "L"
        assert tracker.left == "R"
        tracker.close()
    finally:
        plotter.close()
