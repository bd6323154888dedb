"""
Roof pitch calculation from eave/ridge elevations and half span.
"""

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict

INFINITE_PITCH_RATIO = '∞:12'


@dataclass(frozen=True)
class RoofPitch:
    """Slope of a roof plane, with the conventional rise-per-12 ratio."""
    angle_deg: float
    angle_rad: float
    rise: float
    pitch_ratio: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def calculate_roof_pitch(base_z: float, ridge_z: float, half_span: float) -> RoofPitch:
    """
    Calculate roof pitch.

    Args:
        base_z: Eave elevation
        ridge_z: Ridge elevation
        half_span: Horizontal run from eave to ridge

    Returns:
        RoofPitch. A zero (or negative) half span reports a vertical
        90 degree slope with the infinite ratio instead of dividing by zero.
    """
    rise = ridge_z - base_z
    if half_span <= 0:
        return RoofPitch(
            angle_deg=90.0,
            angle_rad=math.pi / 2,
            rise=rise,
            pitch_ratio=INFINITE_PITCH_RATIO
        )

    angle_rad = math.atan2(rise, half_span)
    return RoofPitch(
        angle_deg=math.degrees(angle_rad),
        angle_rad=angle_rad,
        rise=rise,
        pitch_ratio=f"{rise / half_span * 12:.1f}:12"
    )
