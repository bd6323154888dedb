"""
Pipeline configuration: defaults, YAML loading and validation.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .geometry.massing import (
    DEFAULT_BUILDING_DEPTH, DEFAULT_BUILDING_WIDTH, DEFAULT_FIRST_FLOOR_HEIGHT,
    DEFAULT_MAX_HEIGHT, DEFAULT_STORIES, DEFAULT_UPPER_FLOOR_HEIGHT
)
from .geometry.roof_builder.types import (
    DEFAULT_RIDGE_DIRECTION, DEFAULT_SHED_DIRECTION, RIDGE_DIRECTIONS, SHED_DIRECTIONS
)
from .utils.error_handling import ConfigError, ErrorCategory, ErrorSeverity, error_handler
from .validation.quality_checks import ValidationLevel

logger = logging.getLogger(__name__)

CONFIG_SECTIONS = ('roof', 'massing', 'validation', 'output')


def default_config() -> Dict[str, Any]:
    """Get default pipeline configuration."""
    return {
        'roof': {
            'ridge_direction': DEFAULT_RIDGE_DIRECTION,
            'shed_direction': DEFAULT_SHED_DIRECTION,
            'strict_triangulation': False
        },
        'massing': {
            'stories': DEFAULT_STORIES,
            'first_floor_height': DEFAULT_FIRST_FLOOR_HEIGHT,
            'upper_floor_height': DEFAULT_UPPER_FLOOR_HEIGHT,
            'max_height': DEFAULT_MAX_HEIGHT,
            'width': DEFAULT_BUILDING_WIDTH,
            'depth': DEFAULT_BUILDING_DEPTH
        },
        'validation': {
            'enabled': True,
            'level': ValidationLevel.STANDARD.value
        },
        'output': {
            'include_meshes': True
        }
    }


def merge_config(base: Mapping[str, Any], override: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(dict(base))
    for key, value in (override or {}).items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def validate_config(config: Mapping[str, Any]) -> None:
    """
    Raises:
        ConfigError: on non-mapping sections, unknown directions or
            validation levels
    """
    for section in CONFIG_SECTIONS:
        if not isinstance(config.get(section), Mapping):
            raise ConfigError(f"'{section}' must be a mapping of settings")

    roof = config['roof']
    if roof.get('ridge_direction') not in RIDGE_DIRECTIONS:
        raise ConfigError(f"Invalid roof.ridge_direction: {roof.get('ridge_direction')!r}")
    if roof.get('shed_direction') not in SHED_DIRECTIONS:
        raise ConfigError(f"Invalid roof.shed_direction: {roof.get('shed_direction')!r}")

    level = config['validation'].get('level')
    try:
        ValidationLevel(level)
    except ValueError as e:
        raise ConfigError(f"Invalid validation.level: {level!r}") from e

    conditions = config.get('conditions')
    if conditions is not None and not isinstance(conditions, Mapping):
        raise ConfigError("'conditions' must map condition names to building records")


@error_handler(severity=ErrorSeverity.HIGH, category=ErrorCategory.CONFIGURATION,
               resolution_suggestions=["Check the YAML syntax and option values"])
def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML configuration file over the defaults.

    A scene file may also carry a top-level 'conditions' mapping with the
    building records to process.

    Raises:
        ConfigError: if the file is missing, unparsable or invalid
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"Config root must be a mapping, got {type(data).__name__}")

    config = merge_config(default_config(), data)
    validate_config(config)

    logger.info(f"Loaded configuration from {path}")
    return config
