"""
Command-Line Entry Point
========================
Prints the four viewport edge labels for a camera orientation.

Usage:
    $ python -m orientationlabels --view coronal
    $ python -m orientationlabels --view-up 0 0 1 --direction 0 1 0 --json
"""
import argparse
import json
import logging
from typing import List, Optional

from orientationlabels.config import STANDARD_VIEWS
from orientationlabels.errors import OrientationLabelsError
from orientationlabels.logging_config import setup_logging
from orientationlabels.model.camera import Camera
from orientationlabels.model.orientation import OrientationTracker

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orientationlabels",
        description="Compute anatomical orientation labels (LPS world) for the viewport edges.",
    )
    parser.add_argument("--view", choices=sorted(STANDARD_VIEWS), help="Named standard view.")
    parser.add_argument("--view-up", nargs=3, type=float, metavar=("X", "Y", "Z"))
    parser.add_argument("--direction", nargs=3, type=float, metavar=("X", "Y", "Z"),
                        help="Direction of projection.")
    parser.add_argument("--json", action="store_true", help="Print labels as JSON.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    return parser


def _camera_from_args(args: argparse.Namespace) -> Camera:
    if args.view is not None:
        view_up, direction = STANDARD_VIEWS[args.view]
    else:
        view_up, direction = (0.0, 1.0, 0.0), (0.0, 0.0, -1.0)

    if args.view_up is not None:
        view_up = tuple(args.view_up)
    if args.direction is not None:
        direction = tuple(args.direction)
    return Camera(view_up=view_up, direction_of_projection=direction)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    try:
        camera = _camera_from_args(args)
        with OrientationTracker(camera) as tracker:
            labels = tracker.labels
    except OrientationLabelsError as e:
        logger.error(f"Cannot compute labels: {e}")
        return 1

    if args.json:
        print(json.dumps(labels.as_dict()))
    else:
        for edge, label in labels.as_dict().items():
            print(f"{edge:>6}: {label}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
