"""
View and projection matrices.

Projections map a camera-space volume to the canonical viewing volume, the
2x2x2 cube centered at the origin. The camera looks down its -z axis and the
near and far planes end up at normalized z = -1 and z = 1 (the OpenGL
convention).
"""

import numpy as np
from pyglm import glm


def _extents(left, right, bottom, top, near, far):
    # numpy scalars: zero extents divide to inf/NaN.
    return (
        np.float64(right - left),
        np.float64(top - bottom),
        np.float64(far - near),
    )


def look_at(eye: glm.vec3, center: glm.vec3, up: glm.vec3) -> glm.mat4:
    """Build a look-at view matrix.

    The camera basis is re-orthogonalized, so ``up`` only has to be roughly
    upwards rather than perpendicular to the viewing direction.

    An ``up`` vector parallel to the viewing direction collapses the basis and
    produces a singular matrix. This is not checked here; see
    :func:`xform3d.model.validation.check_view_basis`.

    :param eye: Position of the camera.
    :param center: Point the camera is facing.
    :param up: Upwards direction, usually ``glm.vec3(0.0, 1.0, 0.0)``.
    :return: The 4x4 world-to-camera matrix.
    """
    facing = glm.normalize(center - eye)
    horiz = glm.normalize(glm.cross(facing, glm.normalize(up)))
    cam_up = glm.cross(horiz, facing)

    mat = glm.mat4(1.0)
    # Basis vectors are the rows of the rotation part.
    for c in range(3):
        mat[c, 0] = horiz[c]
        mat[c, 1] = cam_up[c]
        mat[c, 2] = -facing[c]

    mat[3, 0] = -glm.dot(eye, horiz)
    mat[3, 1] = -glm.dot(eye, cam_up)
    mat[3, 2] = glm.dot(eye, facing)
    return mat


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> glm.mat4:
    """Build an orthographic normalization matrix.

    The view volume is the box with x in [left, right], y in [bottom, top]
    and z in [-far, -near]. The z axis is inverted so that the near plane maps
    to -1 and the far plane to 1.

    A volume with zero width, height or depth gives infinite or NaN entries.

    :return: The 4x4 projection matrix.
    """
    rl, tb, fn = _extents(left, right, bottom, top, near, far)
    mat = glm.mat4(1.0)

    with np.errstate(divide="ignore", invalid="ignore"):
        mat[0, 0] = 2.0 / rl
        mat[1, 1] = 2.0 / tb
        mat[2, 2] = -2.0 / fn

        mat[3, 0] = -(right + left) / rl
        mat[3, 1] = -(top + bottom) / tb
        mat[3, 2] = -(far + near) / fn
    return mat


def frustum(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> glm.mat4:
    """Build a perspective normalization matrix for an asymmetric frustum.

    The frustum has its apex at the origin and its near and far faces
    perpendicular to the -z axis at distances ``near`` and ``far``. The near
    face spans [left, right] x [bottom, top].

    A volume with zero width, height or depth gives infinite or NaN entries.

    :return: The 4x4 projection matrix. Clip-space w equals -z.
    """
    rl, tb, fn = _extents(left, right, bottom, top, near, far)
    mat = glm.mat4(0.0)

    with np.errstate(divide="ignore", invalid="ignore"):
        mat[0, 0] = (2.0 * near) / rl
        mat[1, 1] = (2.0 * near) / tb

        mat[2, 0] = (right + left) / rl
        mat[2, 1] = (top + bottom) / tb
        mat[2, 2] = -(far + near) / fn
        mat[2, 3] = -1.0

        mat[3, 2] = -(2.0 * far * near) / fn
    return mat


def perspective(fovy: float, aspect_xy: float, near: float, far: float) -> glm.mat4:
    """Build a perspective normalization matrix for a symmetric frustum.

    A zero field of view, zero aspect ratio or ``near == far`` gives infinite
    or NaN entries.

    :param fovy: Vertical field of view in radians.
    :param aspect_xy: Viewport width divided by height.
    :param near: Distance to the near plane.
    :param far: Distance to the far plane.
    :return: The 4x4 projection matrix.
    """
    tan_half_fov = np.tan(np.float64(fovy) / 2.0)
    fn = np.float64(far - near)
    mat = glm.mat4(0.0)

    with np.errstate(divide="ignore", invalid="ignore"):
        mat[0, 0] = 1.0 / (np.float64(aspect_xy) * tan_half_fov)
        mat[1, 1] = 1.0 / tan_half_fov
        mat[2, 2] = -(far + near) / fn
        mat[2, 3] = -1.0

        mat[3, 2] = -(2.0 * far * near) / fn
    return mat
