import math
import logging
from typing import Dict, Iterable

import numpy as np

from vector_config import (
    DEFAULT_ABS_TOL,
    DEFAULT_REL_TOL,
    LOG_FORMAT,
    LOG_LEVEL,
)

"""
Utility functions shared by the vector and quaternion types.
Organized into logical sections for different functionality areas.
"""

# =============================================================================
# MATHEMATICAL UTILITIES
# =============================================================================

class MathUtils:
    """Mathematical utility functions."""

    @staticmethod
    def clamp(value: float, min_val: float, max_val: float) -> float:
        """Clamp a value between min and max bounds."""
        return max(min_val, min(value, max_val))

    @staticmethod
    def ieee_divide(numerator: float, denominator: float) -> float:
        """Divide with IEEE-754 semantics.

        Plain float division raises ZeroDivisionError; here x/0 gives +-inf
        and 0/0 gives nan, silently.
        """
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return float(np.divide(np.float64(numerator), np.float64(denominator)))

    @staticmethod
    def reciprocal(value: float) -> float:
        """Return 1/value, inf for a zero value."""
        return MathUtils.ieee_divide(1.0, value)

    @staticmethod
    def half_angle_terms(angle_rad: float) -> tuple[float, float]:
        """Return (cos(angle/2), sin(angle/2)); non-finite angles give nan."""
        half = np.float64(angle_rad) * 0.5
        with np.errstate(invalid="ignore"):
            return float(np.cos(half)), float(np.sin(half))

    @staticmethod
    def is_close(a: float, b: float,
                 rel_tol: float = DEFAULT_REL_TOL,
                 abs_tol: float = DEFAULT_ABS_TOL) -> bool:
        """Approximate scalar comparison."""
        return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)

    @staticmethod
    def vectors_close(a: Iterable[float], b: Iterable[float],
                      rel_tol: float = DEFAULT_REL_TOL,
                      abs_tol: float = DEFAULT_ABS_TOL) -> bool:
        """Approximate componentwise comparison of two same-length vectors.

        Works with Vec2/Vec3/Vec4, Quaternion, tuples and numpy arrays alike.
        """
        lhs = np.asarray(list(a), dtype=float)
        rhs = np.asarray(list(b), dtype=float)
        if lhs.shape != rhs.shape:
            return False
        return bool(np.allclose(lhs, rhs, rtol=rel_tol, atol=abs_tol))

# =============================================================================
# SYSTEM UTILITIES
# =============================================================================

class SystemUtils:
    """System and environment utilities."""

    @staticmethod
    def get_dependency_versions() -> Dict[str, str]:
        """Return versions of key runtime dependencies."""
        return {
            "numpy": np.__version__,
        }

    @staticmethod
    def configure_logging(level: int = LOG_LEVEL) -> None:
        """Configure root logger for the application."""
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
        )
