"""Angle constants and conversions."""

PI: float = 3.1415926535897932384626433832795
TWO_PI: float = 2.0 * PI


def degree_to_radian(angle_in_degree: float) -> float:
    """Convert an angle given in degrees to radians."""
    return angle_in_degree * (PI / 180.0)