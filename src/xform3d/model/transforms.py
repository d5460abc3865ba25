"""
A module defining transform data structures.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pyglm import glm

from xform3d.model import matrices


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transform:
    """A builder for homogeneous transformation matrices.

    A ``Transform`` starts out as the identity and is composed into a more
    useful transformation by chaining builder methods. Each method applies
    its transformation *after* the ones before it, i.e. the new matrix is
    multiplied on the left::

        mat = (
            Transform.new()
            .shear_x(1.0, 0.0)
            .rotate(glm.vec3(0.0, 1.0, 0.0), glm.radians(180.0))
            .finish()
        )

    computes ``ROT(y, 180°) * SHEAR_X(1, 0)``, which first shears and then
    rotates.

    Builder methods never modify the instance they are called on; they
    return a new ``Transform``.

    :param matrix: The accumulated 4x4 transform.
    """

    matrix: glm.mat4 = field(default_factory=lambda: glm.mat4(1.0))

    def __post_init__(self):
        # Never alias a caller's matrix.
        object.__setattr__(self, "matrix", glm.mat4(self.matrix))

    @classmethod
    def new(cls) -> Transform:
        """Create a ``Transform`` representing the identity transformation."""
        return cls()

    def _then(self, mat: glm.mat4) -> Transform:
        return Transform(matrix=mat * self.matrix)

    def translate(self, offset: glm.vec3) -> Transform:
        """Translate by the given offset."""
        logger.debug("translate by %s", offset)
        return self._then(matrices.translate(offset))

    def scale(self, factor: glm.vec3) -> Transform:
        """Scale independently per axis by the matching component of ``factor``."""
        logger.debug("scale by %s", factor)
        return self._then(matrices.scale(factor))

    def shear_x(self, y_amount: float, z_amount: float) -> Transform:
        """Shear y and z in proportion to x, keeping x fixed."""
        logger.debug("shear_x by (%s, %s)", y_amount, z_amount)
        return self._then(matrices.shear_x(y_amount, z_amount))

    def shear_y(self, x_amount: float, z_amount: float) -> Transform:
        """Shear x and z in proportion to y, keeping y fixed."""
        logger.debug("shear_y by (%s, %s)", x_amount, z_amount)
        return self._then(matrices.shear_y(x_amount, z_amount))

    def shear_z(self, x_amount: float, y_amount: float) -> Transform:
        """Shear x and y in proportion to z, keeping z fixed."""
        logger.debug("shear_z by (%s, %s)", x_amount, y_amount)
        return self._then(matrices.shear_z(x_amount, y_amount))

    def rotate(self, axis: glm.vec3, angle: float) -> Transform:
        """Rotate about ``axis`` by ``angle`` radians."""
        logger.debug("rotate about %s by %s rad", axis, angle)
        return self._then(matrices.rotate(axis, angle))

    def arbitrary(self, transform: glm.mat4) -> Transform:
        """Apply an arbitrary transformation given as a homogeneous matrix."""
        logger.debug("apply arbitrary matrix %s", transform)
        return self._then(glm.mat4(transform))

    def finish(self) -> glm.mat4:
        """Get the accumulated homogeneous transformation matrix.

        :return: A copy of the 4x4 matrix; the builder is left untouched.
        """
        return glm.mat4(self.matrix)


@dataclass(eq=False)
class Transform3D:
    """A simple 3D transform with position, rotation (quaternion), and scale.

    :param position: Position of the transform in 3D space.
    :param rotation: Rotation of the transform as a quaternion (w, x, y, z).
    :param scale: Scale of the transform in 3D space.
    """

    position: glm.vec3 = field(default_factory=lambda: glm.vec3(0.0, 0.0, 0.0))
    rotation: glm.quat = field(default_factory=lambda: glm.quat(1.0, 0.0, 0.0, 0.0))
    scale: glm.vec3 = field(default_factory=lambda: glm.vec3(1.0, 1.0, 1.0))

    def get_matrix(self) -> glm.mat4:
        """Compute the model matrix to transform points from local to world space.

        Points are scaled first, then rotated, then translated.

        :return: The 4x4 model matrix.
        """
        return (
            Transform.new()
            .scale(self.scale)
            .arbitrary(glm.mat4_cast(self.rotation))
            .translate(self.position)
            .finish()
        )
