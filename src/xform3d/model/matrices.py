"""
Homogeneous matrices for the elementary affine transforms.

All matrices are PyGLM ``mat4`` values, which are column-major: ``m[c][r]``
is the entry in column ``c`` and row ``r``. Points are column vectors and are
transformed as ``m * glm.vec4(p, 1.0)``.
"""

import numpy as np
from pyglm import glm


def translate(offset: glm.vec3) -> glm.mat4:
    """Get the homogeneous matrix of a translation by the given offset.

    :param offset: Translation along each axis.
    :return: The 4x4 translation matrix.
    """
    mat = glm.mat4(1.0)
    mat[3] = glm.vec4(offset, 1.0)
    return mat


def scale(factor: glm.vec3) -> glm.mat4:
    """Get the homogeneous matrix of a per-axis scale.

    Each axis is scaled independently by the matching component of ``factor``.

    :param factor: Scale factors for the x, y and z axes.
    :return: The 4x4 scale matrix.
    """
    mat = glm.mat4(1.0)
    mat[0, 0] = factor.x
    mat[1, 1] = factor.y
    mat[2, 2] = factor.z
    return mat


def shear_x(y_amount: float, z_amount: float) -> glm.mat4:
    """Shear that keeps x fixed and adds ``x * y_amount`` to y and
    ``x * z_amount`` to z."""
    mat = glm.mat4(1.0)
    mat[0, 1] = y_amount
    mat[0, 2] = z_amount
    return mat


def shear_y(x_amount: float, z_amount: float) -> glm.mat4:
    """Shear that keeps y fixed and adds ``y * x_amount`` to x and
    ``y * z_amount`` to z."""
    mat = glm.mat4(1.0)
    mat[1, 0] = x_amount
    mat[1, 2] = z_amount
    return mat


def shear_z(x_amount: float, y_amount: float) -> glm.mat4:
    """Shear that keeps z fixed and adds ``z * x_amount`` to x and
    ``z * y_amount`` to y."""
    mat = glm.mat4(1.0)
    mat[2, 0] = x_amount
    mat[2, 1] = y_amount
    return mat


def rotation_block(axis: glm.vec3, angle: float) -> glm.mat3:
    """Compute the 3x3 rotation about ``axis`` by ``angle``.

    The rotation is expanded from the unit quaternion
    ``(cos(angle / 2), sin(angle / 2) * normalize(axis))``. The axis does not
    need to be unit length, but it must not be zero: a zero axis produces NaN
    entries.

    :param axis: Axis of rotation.
    :param angle: Rotation angle in radians, counter-clockwise about the axis.
    :return: The 3x3 rotation matrix.
    """
    half = angle / 2.0
    w = glm.cos(half)
    v = glm.sin(half) * glm.normalize(axis)

    xy = v.x * v.y
    xz = v.x * v.z
    xw = v.x * w
    x2 = v.x * v.x
    yz = v.y * v.z
    yw = v.y * w
    y2 = v.y * v.y
    zw = v.z * w
    z2 = v.z * v.z

    # Columns of the rotation.
    return glm.mat3(
        glm.vec3(1.0 - 2.0 * (y2 + z2), 2.0 * (xy + zw), 2.0 * (xz - yw)),
        glm.vec3(2.0 * (xy - zw), 1.0 - 2.0 * (x2 + z2), 2.0 * (yz + xw)),
        glm.vec3(2.0 * (xz + yw), 2.0 * (yz - xw), 1.0 - 2.0 * (x2 + y2)),
    )


def rotate(axis: glm.vec3, angle: float) -> glm.mat4:
    """Get the homogeneous matrix of a rotation about ``axis`` by ``angle``.

    :param axis: Axis of rotation, normalized internally. Must be non-zero.
    :param angle: Rotation angle in radians.
    :return: The 4x4 rotation matrix.
    """
    block = rotation_block(axis, angle)
    return glm.mat4(
        glm.vec4(block[0], 0.0),
        glm.vec4(block[1], 0.0),
        glm.vec4(block[2], 0.0),
        glm.vec4(0.0, 0.0, 0.0, 1.0),
    )


def transform_point(matrix: glm.mat4, point: glm.vec3) -> glm.vec3:
    """Apply ``matrix`` to a point and divide through by the resulting w.

    A point that ends up with w = 0, such as the apex of a perspective
    frustum, has no finite image: its components come back as infinite
    (or NaN where they are also zero), without a warning.

    :param matrix: Homogeneous transform or projection matrix.
    :param point: Point in 3D space.
    :return: The transformed point.
    """
    p = matrix * glm.vec4(point, 1.0)
    with np.errstate(divide="ignore", invalid="ignore"):
        xyz = np.array([p.x, p.y, p.z], dtype=np.float64) / p.w
    return glm.vec3(*xyz)


def transform_direction(matrix: glm.mat4, direction: glm.vec3) -> glm.vec3:
    """Apply ``matrix`` to a direction (w = 0), ignoring translation."""
    return glm.vec3(matrix * glm.vec4(direction, 0.0))
