"""Configuration validation using JSON Schema."""

from __future__ import annotations

from typing import Any, Dict

import jsonschema
from jsonschema import Draft7Validator, validators

from exceptions import ConfigValidationError
from log_config.logger import get_logger

logger = get_logger(__name__)

_VEC3 = {
    "type": "array",
    "items": {"type": "number"},
    "minItems": 3,
    "maxItems": 3,
}
_FRACTION = {"type": "number", "minimum": 0.0, "maximum": 1.0}
# Smoothing factors live in (0, 1]
_ALPHA = {"type": "number", "exclusiveMinimum": 0.0, "maximum": 1.0}

# JSON Schema for default.yaml configuration
CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "kinematics": {
            "type": "object",
            "default": {},
            "additionalProperties": False,
            "properties": {
                "lateral_scale_m": {"type": "number", "exclusiveMinimum": 0},
                "vertical_scale_m": {"type": "number", "exclusiveMinimum": 0},
                "min_height_m": {"type": "number", "minimum": 0},
                "missing_y_fraction": _FRACTION,
                "default_position": _VEC3,
                "keypoint_min_score": _FRACTION,
                "default_seam_angle_deg": {"type": "number", "minimum": -180, "maximum": 180},
            },
        },
        "smoothing": {
            "type": "object",
            "default": {},
            "additionalProperties": False,
            "properties": {
                "speed_alpha": _ALPHA,
                "seam_alpha": _ALPHA,
            },
        },
        "segmentation": {
            "type": "object",
            "default": {},
            "additionalProperties": False,
            "properties": {
                "pitch_length_m": {"type": "number", "exclusiveMinimum": 0},
                "release_search_start": {"type": "number", "minimum": 0.0, "exclusiveMaximum": 1.0},
                "pitch_offset_fraction": _FRACTION,
                "impact_offset_fraction": _FRACTION,
                "default_frame_interval_s": {"type": "number", "exclusiveMinimum": 0},
            },
        },
        "telemetry": {
            "type": "object",
            "default": {},
            "additionalProperties": False,
            "properties": {
                "default_release_speed_kph": {"type": "number", "minimum": 0},
                "default_runup_velocity_kph": {"type": "number", "minimum": 0},
                "default_seam_angle_deg": {"type": "number", "minimum": -180, "maximum": 180},
                "default_release_height_m": {"type": "number", "minimum": 0},
            },
        },
        "fallback": {
            "type": "object",
            "default": {},
            "additionalProperties": False,
            "properties": {
                "position": _VEC3,
                "seam_angle_deg": {"type": "number", "minimum": -180, "maximum": 180},
                "speed_kph": {"type": "number", "minimum": 0},
                "release_height_m": {"type": "number", "minimum": 0},
                "predicted_impact_m": {"type": "number", "minimum": 0},
                "runup_velocity_kph": {"type": "number", "minimum": 0},
            },
        },
        "sampling": {
            "type": "object",
            "default": {},
            "additionalProperties": False,
            "properties": {
                "sample_frames": {"type": "integer", "minimum": 1, "maximum": 10000},
                "min_step_s": {"type": "number", "exclusiveMinimum": 0},
                "default_duration_s": {"type": "number", "exclusiveMinimum": 0},
                "seek_margin_s": {"type": "number", "minimum": 0},
                "default_width": {"type": "integer", "minimum": 1},
                "default_height": {"type": "integer", "minimum": 1},
            },
        },
    },
}


def extend_with_default(validator_class):
    """Extend JSON Schema validator to set default values."""
    validate_properties = validator_class.VALIDATORS["properties"]

    def set_defaults(validator, properties, instance, schema):
        if isinstance(instance, dict):
            for prop, subschema in properties.items():
                if "default" in subschema:
                    instance.setdefault(prop, subschema["default"])

        for error in validate_properties(validator, properties, instance, schema):
            yield error

    return validators.extend(validator_class, {"properties": set_defaults})


DefaultValidatingValidator = extend_with_default(Draft7Validator)


def validate_config(config: Dict[str, Any]) -> None:
    """Validate configuration against JSON Schema.

    Missing sections are filled in with empty mappings so built-in defaults apply.

    Args:
        config: Configuration dictionary

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    try:
        validator = DefaultValidatingValidator(CONFIG_SCHEMA)
        errors = list(validator.iter_errors(config))

        if errors:
            error_messages = []
            for error in errors:
                path = " -> ".join(str(p) for p in error.path) if error.path else "root"
                error_messages.append(f"{path}: {error.message}")

            logger.error(f"Configuration validation failed with {len(errors)} errors")
            for msg in error_messages:
                logger.error(f"  - {msg}")

            raise ConfigValidationError(
                f"Configuration validation failed with {len(errors)} error(s). See logs for details.",
                validation_errors=error_messages,
            )

        logger.info("Configuration validation passed")

    except jsonschema.exceptions.SchemaError as e:
        logger.error(f"Invalid schema: {e}")
        raise ConfigValidationError(f"Invalid schema definition: {e}") from e


__all__ = ["validate_config", "CONFIG_SCHEMA"]
