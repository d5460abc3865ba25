"""Input checks for degenerate transform and projection parameters."""

import logging

import numpy as np
from pyglm import glm


logger = logging.getLogger(__name__)


# Shortest axis accepted by rotations and view bases.
AXIS_EPSILON = 1e-6
# Largest |cos| between the view direction and up before they count as parallel.
PARALLEL_EPSILON = 1e-6


class DegenerateGeometryError(ValueError):
    """Raised when inputs would produce a singular or non-finite matrix."""


def _reject(message: str):
    logger.warning(message)
    raise DegenerateGeometryError(message)


def check_axis(axis: glm.vec3) -> None:
    """Check that a rotation axis can be normalized.

    :param axis: Axis passed to :func:`xform3d.model.matrices.rotate`.
    :raises DegenerateGeometryError: If the axis has (near) zero length.
    """
    if not glm.length(axis) > AXIS_EPSILON:
        _reject(f"Rotation axis {axis} has zero length.")


def check_view_basis(eye: glm.vec3, center: glm.vec3, up: glm.vec3) -> None:
    """Check that ``look_at(eye, center, up)`` has a well defined basis.

    :raises DegenerateGeometryError: If eye and center coincide, up is zero,
        or up is parallel to the viewing direction.
    """
    facing = center - eye
    if not glm.length(facing) > AXIS_EPSILON:
        _reject(f"Eye {eye} and center {center} coincide.")
    if not glm.length(up) > AXIS_EPSILON:
        _reject(f"Up vector {up} has zero length.")
    cos_angle = glm.dot(glm.normalize(facing), glm.normalize(up))
    if abs(cos_angle) > 1.0 - PARALLEL_EPSILON:
        _reject(f"Up vector {up} is parallel to the view direction {facing}.")


def check_volume(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> None:
    """Check that an ortho or frustum view volume has non-zero extents.

    :raises DegenerateGeometryError: If the width, height or depth is zero.
    """
    if right == left:
        _reject(f"View volume has zero width (left = right = {left}).")
    if top == bottom:
        _reject(f"View volume has zero height (bottom = top = {bottom}).")
    if far == near:
        _reject(f"View volume has zero depth (near = far = {near}).")


def check_perspective(fovy: float, aspect_xy: float, near: float, far: float) -> None:
    """Check the parameters of :func:`xform3d.model.projections.perspective`.

    :raises DegenerateGeometryError: If the field of view has zero tangent,
        the aspect ratio is zero, or near equals far.
    """
    if glm.tan(fovy / 2.0) == 0.0:
        _reject(f"Field of view {fovy} has zero extent.")
    if aspect_xy == 0.0:
        _reject("Aspect ratio is zero.")
    if far == near:
        _reject(f"View volume has zero depth (near = far = {near}).")


def is_finite(matrix: glm.mat4) -> bool:
    """Whether every entry of ``matrix`` is finite."""
    return bool(np.isfinite(np.array(matrix.to_list())).all())
