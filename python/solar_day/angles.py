"""Degree-based trigonometry for the sunrise equation.

All angles in degrees unless otherwise noted.
"""

import math


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * math.pi / 180.0


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * 180.0 / math.pi


def normalize_angle(angle: float) -> float:
    """Normalize angle to 0-360 degree range."""
    return angle - 360.0 * math.floor(angle / 360.0)


def sin_deg(deg: float) -> float:
    return math.sin(deg_to_rad(deg))


def cos_deg(deg: float) -> float:
    return math.cos(deg_to_rad(deg))


def asin_deg(x: float) -> float:
    return rad_to_deg(math.asin(x))


def acos_deg(x: float) -> float:
    """Inverse cosine in degrees, clamped to the [-1, 1] domain.

    At high latitudes the sunrise hour-angle argument leaves [-1, 1]:
    x >= 1 means the sun never rises (0 degrees, polar night) and
    x <= -1 means it never sets (180 degrees, midnight sun).
    """
    if x >= 1.0:
        return 0.0
    if x <= -1.0:
        return 180.0
    return rad_to_deg(math.acos(x))
