"""
Roof massing pipeline for massing3d.
Builds roof geometry and analytics for each zoning condition of a scene
(normally "existing" and "proposed") and compares them.
"""

import logging
import time
from typing import Any, Dict, Mapping, Optional, Union

from .config import default_config, merge_config, validate_config
from .geometry.massing import BuildingCondition
from .utils.error_handling import (
    ErrorCategory, ErrorContext, ErrorHandler, ErrorSeverity, safe_execute
)
from .validation.quality_checks import (
    QualityValidator, ValidationLevel, ValidationResult
)

logger = logging.getLogger(__name__)

ConditionInput = Union[BuildingCondition, Mapping[str, Any]]


class RoofMassingPipeline:
    """Roof generation and analytics for a set of building conditions."""

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 error_handler: Optional[ErrorHandler] = None):
        """
        Initialize the pipeline.

        Args:
            config: Pipeline configuration, merged over the defaults
            error_handler: Receives per-condition failures
        """
        self.config = merge_config(self._default_config(), config)
        validate_config(self.config)
        self.error_handler = error_handler or ErrorHandler()
        self.validator = QualityValidator(
            ValidationLevel(self.config['validation']['level'])
        )

    def _default_config(self) -> Dict[str, Any]:
        return default_config()

    def process(self, conditions: Mapping[str, ConditionInput],
                include_meshes: Optional[bool] = None) -> Dict[str, Any]:
        """
        Build roofs for every condition.

        Args:
            conditions: Condition name -> BuildingCondition or editor record
            include_meshes: Keep RoofMesh objects in the results (defaults to
                output.include_meshes)

        Returns:
            Processing results dictionary. A condition that fails is
            reported in 'errors' and left out of 'conditions'; the others
            are still processed.
        """
        if include_meshes is None:
            include_meshes = self.config['output']['include_meshes']

        start_time = time.time()
        results = {
            'success': False,
            'processing_time': 0.0,
            'conditions': {},
            'comparison': None,
            'steps': [],
            'errors': [],
            'warnings': []
        }

        logger.info(f"Processing {len(conditions)} conditions")

        for name, data in conditions.items():
            try:
                condition = self._coerce_condition(data)
                results['conditions'][name] = self._build_condition(
                    name, condition, include_meshes, results['warnings']
                )
                results['steps'].append({
                    'name': name,
                    'status': 'completed',
                    'time': time.time() - start_time
                })
            except (ValueError, TypeError, KeyError) as e:
                self.error_handler.handle_error(
                    e,
                    ErrorContext(operation='build_condition', condition=name),
                    ErrorSeverity.MEDIUM,
                    ErrorCategory.INPUT_VALIDATION,
                    ["Check footprint vertices and numeric building parameters"]
                )
                results['errors'].append(f"{name}: {e}")
                results['steps'].append({
                    'name': name,
                    'status': 'failed',
                    'time': time.time() - start_time
                })

        if 'existing' in results['conditions'] and 'proposed' in results['conditions']:
            results['comparison'] = self._compare(
                results['conditions']['existing'], results['conditions']['proposed']
            )

        results['success'] = not results['errors']
        results['processing_time'] = time.time() - start_time
        logger.info(f"Processing completed in {results['processing_time']:.3f} seconds")

        return results

    def _coerce_condition(self, data: ConditionInput) -> BuildingCondition:
        if isinstance(data, BuildingCondition):
            return data
        if not isinstance(data, Mapping):
            raise TypeError(f"Condition must be a mapping, got {type(data).__name__}")

        record = dict(data)
        roof_defaults = self.config['roof']
        roof = record.get('roof') or {}
        if not isinstance(roof, Mapping):
            raise TypeError(f"Roof settings must be a mapping, got {type(roof).__name__}")
        roof = dict(roof)
        if not any(k in roof for k in ('ridge_direction', 'ridgeDirection')):
            roof['ridge_direction'] = roof_defaults['ridge_direction']
        if not any(k in roof for k in ('shed_direction', 'shedDirection')):
            roof['shed_direction'] = roof_defaults['shed_direction']
        record['roof'] = roof

        return BuildingCondition.from_dict(record, defaults=self.config['massing'])

    def _build_condition(self, name: str, condition: BuildingCondition,
                         include_meshes: bool, warnings: list) -> Dict[str, Any]:
        logger.debug(f"Building roof for condition {name}")
        analytics = condition.analytics()
        mesh = condition.roof_mesh(
            strict_triangulation=self.config['roof']['strict_triangulation']
        )

        entry = {
            **analytics,
            'total_height': max(condition.base_z, condition.ridge_z)
            if mesh is not None else condition.base_z,
            'floors': len(condition.floors()),
            'mesh': None,
            'total_vertices': 0,
            'total_faces': 0,
            'validation': None
        }

        if mesh is None:
            return entry

        entry['total_vertices'] = mesh.vertex_count
        entry['total_faces'] = mesh.triangle_count
        if include_meshes:
            entry['mesh'] = mesh

        if self.config['validation']['enabled']:
            report = safe_execute(
                lambda: self.validator.validate_roof(mesh, condition.base_z, condition.ridge_z),
                context=ErrorContext(operation='validate_roof', condition=name),
                handler=self.error_handler
            )
            if report is not None:
                entry['validation'] = {
                    'overall_result': report.overall_result.value,
                    **report.summary
                }
                if report.overall_result != ValidationResult.PASS:
                    warnings.extend(f"{name}: {r}" for r in report.recommendations)

        return entry

    def _compare(self, existing: Dict[str, Any], proposed: Dict[str, Any]) -> Dict[str, Any]:
        """Differences between the existing and proposed roofs."""
        def angle(entry):
            pitch = entry.get('pitch')
            return pitch['angle_deg'] if pitch else None

        existing_angle = angle(existing)
        proposed_angle = angle(proposed)
        return {
            'base_z_delta': proposed['base_z'] - existing['base_z'],
            'ridge_z_delta': proposed['ridge_z'] - existing['ridge_z'],
            'total_height_delta': proposed['total_height'] - existing['total_height'],
            'pitch_delta_deg': (proposed_angle - existing_angle)
            if existing_angle is not None and proposed_angle is not None else None,
            'roof_type_changed': existing['roof_type'] != proposed['roof_type']
        }


def run_pipeline(conditions: Mapping[str, ConditionInput], **kwargs) -> Dict[str, Any]:
    """
    Convenience function to run the roof massing pipeline.

    Args:
        conditions: Condition name -> building record
        **kwargs: Additional arguments for RoofMassingPipeline

    Returns:
        Processing results
    """
    pipeline = RoofMassingPipeline(**kwargs)
    return pipeline.process(conditions)


def _summarize(results: Dict[str, Any]) -> Dict[str, Any]:
    """Results without mesh objects, for JSON output."""
    summary = dict(results)
    summary['conditions'] = {
        name: {k: v for k, v in entry.items() if k != 'mesh'}
        for name, entry in results['conditions'].items()
    }
    return summary


def main(argv=None) -> int:
    import argparse
    import json

    from .config import load_config
    from .utils.error_handling import ConfigError
    from .utils.logger import log_condition_summary, log_config, setup_logger

    parser = argparse.ArgumentParser(description='massing3d roof pipeline')
    parser.add_argument('--input', required=True,
                        help='YAML scene with a conditions mapping and optional settings')
    parser.add_argument('--strict-triangulation', action='store_true',
                        help='Ear-clip footprints instead of fanning')
    parser.add_argument('--log-level', default='INFO')
    args = parser.parse_args(argv)

    log = setup_logger('massing3d', level=getattr(logging, args.log_level.upper(), logging.INFO))

    try:
        cfg = load_config(args.input)
    except ConfigError:
        # Already reported by load_config
        return 2

    conditions = cfg.pop('conditions', None) or {}
    if args.strict_triangulation:
        cfg['roof']['strict_triangulation'] = True
    log_config(cfg, log)

    res = RoofMassingPipeline(cfg).process(conditions, include_meshes=False)
    for name, entry in res['conditions'].items():
        log_condition_summary(name, entry, log)
    print(json.dumps(_summarize(res), indent=2))
    return 0 if res['success'] else 1


if __name__ == "__main__":
    raise SystemExit(main())
