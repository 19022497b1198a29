"""
Pytest configuration for the orientation label tests
"""
import pytest

from orientationlabels.model.camera import Camera


@pytest.fixture
def camera():
    """Default camera: looking down -z with +y up."""
    return Camera()


@pytest.fixture
def coronal_camera():
    """Looking from anterior to posterior with superior up."""
    return Camera(view_up=(0.0, 0.0, 1.0), direction_of_projection=(0.0, 1.0, 0.0))
