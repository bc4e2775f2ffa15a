import logging

from quaternion import Quaternion
from utilities import MathUtils, SystemUtils
from vector import Vec3, Vec4
from vector_config import LOGGER_NAME

"""
Small walkthrough of the vector and quaternion types.
Rotates a point around each coordinate axis and shows the perspective divide.
"""

# Point to rotate and the (axis, angle in degrees) descriptors to apply
POINT = Vec3(0.0, 0.0, 1.0)
ROTATIONS = [
    (Vec3(1.0, 0.0, 0.0), 90.0),
    (Vec3(0.0, 1.0, 0.0), 90.0),
    (Vec3(0.0, 0.0, 1.0), 45.0),
    (Vec3(1.0, 1.0, 1.0), 120.0),
]


def rotate_point(point: Vec3, axis: Vec3, degrees: float) -> Vec3:
    """Rotate point about axis by degrees using the quaternion sandwich product."""
    return Quaternion(point, 0.0).rotate(Quaternion(axis, degrees))


def main():
    """Run the walkthrough"""
    SystemUtils.configure_logging()
    logger = logging.getLogger(LOGGER_NAME)
    logger.info("Dependency versions: %s", SystemUtils.get_dependency_versions())

    for axis, degrees in ROTATIONS:
        rotated = rotate_point(POINT, axis, degrees)
        logger.info("%s about %s by %.1f deg -> %s", POINT, axis, degrees, rotated)
        # Rotation preserves length
        if not MathUtils.is_close(rotated.magnitude(), POINT.magnitude(), abs_tol=1e-12):
            logger.warning("Length drifted to %.12f", rotated.magnitude())

    # Same rotation through the homogeneous 4D type
    rotated = Vec4(POINT.x, POINT.y, POINT.z, 0.0).rotate(Vec4(0.0, 1.0, 0.0, 90.0))
    logger.info("Vec4 rotation: %s", rotated)

    homogeneous = Vec4(1.0, 2.0, 3.0, 4.0)
    logger.info("Perspective divide of %s -> %s", homogeneous, homogeneous.to_vec3())


if __name__ == "__main__":
    main()
