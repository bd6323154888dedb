"""
Building massing for one zoning condition.

Turns the editor's building parameters (stories, floor heights, zoning
max height, rectangle or polygon footprint, roof settings) into the inputs
the roof builders need: a footprint, an eave elevation and a ridge
elevation.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import numpy as np

from .mesh import RoofMesh
from .pitch import RoofPitch, calculate_roof_pitch
from .polygon import as_points, polygon_bounds
from .roof_builder.dispatch import generate_roof_geometry
from .roof_builder.types import (
    DEFAULT_RIDGE_DIRECTION, DEFAULT_SHED_DIRECTION, RoofType, parse_roof_type
)

logger = logging.getLogger(__name__)

DEFAULT_STORIES = 1
DEFAULT_FIRST_FLOOR_HEIGHT = 12.0
DEFAULT_UPPER_FLOOR_HEIGHT = 10.0
DEFAULT_MAX_HEIGHT = 30.0
DEFAULT_BUILDING_WIDTH = 30.0
DEFAULT_BUILDING_DEPTH = 40.0


@dataclass(frozen=True)
class Floor:
    """One story of the massing stack."""
    index: int
    height: float
    z_bottom: float
    z_center: float


def total_building_height(stories: int, first_floor_height: float,
                          upper_floor_height: float) -> float:
    """
    Eave elevation of a building with the given story stack.

    A missing or non-positive story count means a single story.
    """
    stories = max(1, stories or 1)
    if stories == 1:
        return float(first_floor_height)
    return float(first_floor_height + (stories - 1) * upper_floor_height)


def floor_stack(stories: int, first_floor_height: float,
                upper_floor_height: float) -> List[Floor]:
    floors = []
    current_z = 0.0
    for i in range(max(1, stories or 1)):
        height = float(first_floor_height if i == 0 else upper_floor_height)
        floors.append(Floor(
            index=i,
            height=height,
            z_bottom=current_z,
            z_center=current_z + height / 2
        ))
        current_z += height
    return floors


def rectangle_footprint(x: float, y: float, width: float, depth: float) -> np.ndarray:
    """Counter-clockwise corners of a width x depth rectangle centered on (x, y)."""
    half_w = width / 2
    half_d = depth / 2
    return np.array([
        [x - half_w, y - half_d],
        [x + half_w, y - half_d],
        [x + half_w, y + half_d],
        [x - half_w, y + half_d],
    ], dtype=float)


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """First non-None value among snake_case / camelCase spellings."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default


@dataclass
class RoofSettings:
    """Roof choices for one building."""
    type: str = RoofType.FLAT.value
    ridge_direction: str = DEFAULT_RIDGE_DIRECTION
    shed_direction: str = DEFAULT_SHED_DIRECTION
    override_height: bool = False
    ridge_height: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'RoofSettings':
        data = data or {}
        if not isinstance(data, Mapping):
            raise TypeError(f"Roof settings must be a mapping, got {type(data).__name__}")
        ridge_height = _pick(data, 'ridge_height', 'ridgeHeight')
        return cls(
            type=_pick(data, 'type', default=RoofType.FLAT.value),
            ridge_direction=_pick(data, 'ridge_direction', 'ridgeDirection',
                                  default=DEFAULT_RIDGE_DIRECTION),
            shed_direction=_pick(data, 'shed_direction', 'shedDirection',
                                 default=DEFAULT_SHED_DIRECTION),
            override_height=bool(_pick(data, 'override_height', 'overrideHeight',
                                       default=False)),
            ridge_height=float(ridge_height) if ridge_height is not None else None
        )

    @property
    def roof_type(self) -> Optional[RoofType]:
        return parse_roof_type(self.type)


def resolve_ridge_height(roof: RoofSettings, max_height: float) -> float:
    """Explicit ridge height when overridden, otherwise the zoning max height."""
    if roof.override_height and roof.ridge_height is not None:
        return roof.ridge_height
    return float(max_height)


@dataclass
class BuildingCondition:
    """
    Massing parameters of a building under one zoning condition.

    The footprint is the polygon when `vertices` holds at least three
    points, otherwise the width x depth rectangle centered on (x, y).
    """
    stories: int = DEFAULT_STORIES
    first_floor_height: float = DEFAULT_FIRST_FLOOR_HEIGHT
    upper_floor_height: float = DEFAULT_UPPER_FLOOR_HEIGHT
    max_height: float = DEFAULT_MAX_HEIGHT
    width: float = DEFAULT_BUILDING_WIDTH
    depth: float = DEFAULT_BUILDING_DEPTH
    x: float = 0.0
    y: float = 0.0
    vertices: Optional[List[Any]] = None
    roof: RoofSettings = field(default_factory=RoofSettings)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any],
                  defaults: Optional[Mapping[str, Any]] = None) -> 'BuildingCondition':
        """
        Build from an editor condition record.

        Accepts the editor's keys (buildingStories, firstFloorHeight,
        buildingWidth, buildingGeometry={'mode': 'polygon', 'vertices': ...},
        roof={...}) or their snake_case forms. Missing values come from
        defaults, then from the module defaults.
        """
        defaults = defaults or {}

        def value(*keys, fallback):
            return _pick(data, *keys, default=_pick(defaults, keys[0], default=fallback))

        vertices = data.get('vertices')
        geometry = data.get('buildingGeometry') or data.get('building_geometry')
        if geometry and not isinstance(geometry, Mapping):
            raise TypeError(
                f"buildingGeometry must be a mapping, got {type(geometry).__name__}"
            )
        if vertices is None and geometry:
            if geometry.get('mode', 'polygon') == 'polygon':
                vertices = geometry.get('vertices')

        return cls(
            stories=int(value('stories', 'buildingStories', fallback=DEFAULT_STORIES)),
            first_floor_height=float(value('first_floor_height', 'firstFloorHeight',
                                           fallback=DEFAULT_FIRST_FLOOR_HEIGHT)),
            upper_floor_height=float(value('upper_floor_height', 'upperFloorHeight',
                                           fallback=DEFAULT_UPPER_FLOOR_HEIGHT)),
            max_height=float(value('max_height', 'maxHeight', fallback=DEFAULT_MAX_HEIGHT)),
            width=float(value('width', 'buildingWidth', fallback=DEFAULT_BUILDING_WIDTH)),
            depth=float(value('depth', 'buildingDepth', fallback=DEFAULT_BUILDING_DEPTH)),
            x=float(value('x', fallback=0.0)),
            y=float(value('y', fallback=0.0)),
            vertices=list(vertices) if vertices is not None else None,
            roof=RoofSettings.from_dict(data.get('roof'))
        )

    @property
    def is_polygon(self) -> bool:
        return self.vertices is not None and len(self.vertices) >= 3

    def footprint(self) -> np.ndarray:
        if self.is_polygon:
            return as_points(self.vertices)
        return rectangle_footprint(self.x, self.y, self.width, self.depth)

    @property
    def base_z(self) -> float:
        return total_building_height(self.stories, self.first_floor_height,
                                     self.upper_floor_height)

    @property
    def ridge_z(self) -> float:
        return resolve_ridge_height(self.roof, self.max_height)

    @property
    def half_span(self) -> float:
        """Half of the shorter footprint dimension."""
        bounds = polygon_bounds(self.footprint())
        return min(bounds.width, bounds.depth) / 2

    @property
    def roof_active(self) -> bool:
        kind = self.roof.roof_type
        return kind is not None and kind is not RoofType.FLAT and self.ridge_z > self.base_z

    def floors(self) -> List[Floor]:
        return floor_stack(self.stories, self.first_floor_height, self.upper_floor_height)

    def roof_pitch(self) -> Optional[RoofPitch]:
        if not self.roof_active:
            return None
        return calculate_roof_pitch(self.base_z, self.ridge_z, self.half_span)

    def roof_mesh(self, strict_triangulation: bool = False) -> Optional[RoofMesh]:
        return generate_roof_geometry(
            self.footprint(),
            self.roof.type,
            self.base_z,
            self.ridge_z,
            {
                'ridge_direction': self.roof.ridge_direction,
                'shed_direction': self.roof.shed_direction,
                'strict_triangulation': strict_triangulation,
            }
        )

    def analytics(self) -> Dict[str, Any]:
        """Roof analytics as shown next to the roof settings."""
        pitch = self.roof_pitch()
        return {
            'roof_type': self.roof.type,
            'roof_active': self.roof_active,
            'base_z': self.base_z,
            'ridge_z': self.ridge_z,
            'half_span': self.half_span,
            'pitch': pitch.to_dict() if pitch else None,
        }
