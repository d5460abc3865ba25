"""
Camera parameters.
"""

from dataclasses import dataclass, field
from pyglm import glm
import numpy as np

from xform3d.model.projections import look_at, ortho, perspective


@dataclass
class PerspectiveCamera:
    """Perspective camera parameters.

    :param fov: Vertical field of view in degrees.
    :param near: Near clipping plane distance.
    :param far: Far clipping plane distance.
    :param eye: Camera position.
    :param center: Point the camera looks at.
    :param up: Approximate upwards direction.
    """

    # Camera intrinsics.
    fov: float = 45.0
    near: float = 0.1
    far: float = 100.0
    # Camera placement.
    eye: glm.vec3 = field(default_factory=lambda: glm.vec3(0.0, 0.0, 1.0))
    center: glm.vec3 = field(default_factory=lambda: glm.vec3(0.0, 0.0, 0.0))
    up: glm.vec3 = field(default_factory=lambda: glm.vec3(0.0, 1.0, 0.0))

    def view_matrix(self) -> glm.mat4:
        """Calculate the view matrix.

        :return: View matrix as glm.mat4.
        """
        return look_at(self.eye, self.center, self.up)

    def projection_matrix(self, w: int, h: int) -> glm.mat4:
        """Calculate the projection matrix.

        :param w: Width of the viewport.
        :param h: Height of the viewport.
        :return: Projection matrix as glm.mat4.
        """
        return perspective(glm.radians(self.fov), w / h, self.near, self.far)

    def focal_length(self, h: int) -> float:
        """Calculate the focal length in pixels.

        :param h: Height of the viewport.
        :return: Focal length in pixels.
        """
        return (0.5 * float(h)) / np.tan(np.radians(self.fov) / 2.0)


@dataclass
class OrthographicCamera:
    """Orthographic camera parameters.

    :param height: Vertical extent of the view box in world units.
    :param near: Near clipping plane distance.
    :param far: Far clipping plane distance.
    :param eye: Camera position.
    :param center: Point the camera looks at.
    :param up: Approximate upwards direction.
    """

    height: float = 2.0
    near: float = 0.1
    far: float = 100.0
    eye: glm.vec3 = field(default_factory=lambda: glm.vec3(0.0, 0.0, 1.0))
    center: glm.vec3 = field(default_factory=lambda: glm.vec3(0.0, 0.0, 0.0))
    up: glm.vec3 = field(default_factory=lambda: glm.vec3(0.0, 1.0, 0.0))

    def view_matrix(self) -> glm.mat4:
        """Calculate the view matrix.

        :return: View matrix as glm.mat4.
        """
        return look_at(self.eye, self.center, self.up)

    def projection_matrix(self, w: int, h: int) -> glm.mat4:
        """Calculate the projection matrix for a box centered on the view axis.

        :param w: Width of the viewport.
        :param h: Height of the viewport.
        :return: Projection matrix as glm.mat4.
        """
        half_h = 0.5 * self.height
        half_w = half_h * w / h
        return ortho(-half_w, half_w, -half_h, half_h, self.near, self.far)
