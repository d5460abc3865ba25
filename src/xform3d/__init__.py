import logging
import os

from xform3d.model.matrices import (
    translate,
    scale,
    shear_x,
    shear_y,
    shear_z,
    rotate,
    rotation_block,
    transform_point,
    transform_direction,
)
from xform3d.model.projections import look_at, ortho, frustum, perspective
from xform3d.model.transforms import Transform, Transform3D
from xform3d.model.cameras import PerspectiveCamera, OrthographicCamera
from xform3d.model.validation import DegenerateGeometryError


def configure_logging() -> None:
    """Configure root logging from the ``LOG_LEVEL`` environment variable."""
    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)
    logging.basicConfig(level=log_level)
