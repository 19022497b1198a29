"""Exceptions raised by the orientation label package."""


class OrientationLabelsError(ValueError):
    """Base class for all errors raised by this package."""


class CameraConfigurationError(OrientationLabelsError):
    """The camera handed to a tracker is missing or does not fulfil the camera contract."""
