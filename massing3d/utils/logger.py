"""
Logging utilities for massing3d.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str = 'massing3d',
                 level: int = logging.INFO,
                 log_file: Optional[str] = None,
                 format_string: Optional[str] = None) -> logging.Logger:
    """
    Configure a package logger.

    Console output goes to stderr. Calling this again replaces the
    handlers instead of stacking them.

    Args:
        name: Logger name
        level: Logging level
        log_file: Optional log file path, parent directories are created
        format_string: Optional custom format string
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def log_config(config: Mapping[str, Any], logger: logging.Logger):
    """Log configuration, one line per setting."""
    logger.info("Configuration:")
    for key, value in config.items():
        if isinstance(value, Mapping):
            logger.info(f"  {key}:")
            for sub_key, sub_value in value.items():
                logger.info(f"    {sub_key}: {sub_value}")
        else:
            logger.info(f"  {key}: {value}")


def log_condition_summary(name: str, entry: Mapping[str, Any], logger: logging.Logger):
    """Log the roof analytics of one processed condition."""
    if not entry.get('roof_active'):
        logger.info(f"{name}: no roof ({entry.get('roof_type')}), "
                    f"height {entry.get('base_z', 0.0):.2f}")
        return

    pitch = entry.get('pitch') or {}
    logger.info(
        f"{name}: {entry.get('roof_type')} roof {entry.get('base_z', 0.0):.2f} -> "
        f"{entry.get('ridge_z', 0.0):.2f}, pitch {pitch.get('angle_deg', 0.0):.1f} deg "
        f"({pitch.get('pitch_ratio', '')}), {entry.get('total_faces', 0)} faces"
    )
