"""Configuration loading for delivery analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from configs.validator import validate_config
from exceptions import ConfigError, InvalidConfigError
from log_config.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "default.yaml"


@dataclass(frozen=True)
class KinematicsConfig:
    lateral_scale_m: float = 3.6
    vertical_scale_m: float = 2.6
    min_height_m: float = 0.4
    missing_y_fraction: float = 0.6  # Vertical pixel fraction used when a wrist y is missing
    default_position: Tuple[float, float, float] = (0.0, 1.2, 0.0)
    keypoint_min_score: float = 0.2
    default_seam_angle_deg: float = 12.0


@dataclass(frozen=True)
class SmoothingConfig:
    speed_alpha: float = 0.35
    seam_alpha: float = 0.25


@dataclass(frozen=True)
class SegmentationConfig:
    pitch_length_m: float = 20.12
    release_search_start: float = 0.4
    pitch_offset_fraction: float = 0.25
    impact_offset_fraction: float = 0.2
    default_frame_interval_s: float = 0.016


@dataclass(frozen=True)
class TelemetryConfig:
    default_release_speed_kph: float = 122.0
    default_runup_velocity_kph: float = 22.0
    default_seam_angle_deg: float = 14.0
    default_release_height_m: float = 1.85


@dataclass(frozen=True)
class FallbackConfig:
    position: Tuple[float, float, float] = (0.0, 1.5, 0.0)
    seam_angle_deg: float = 15.0
    speed_kph: float = 115.0
    release_height_m: float = 1.86
    predicted_impact_m: float = 5.4
    runup_velocity_kph: float = 24.0


@dataclass(frozen=True)
class SamplingConfig:
    sample_frames: int = 90
    min_step_s: float = 0.02
    default_duration_s: float = 3.0
    seek_margin_s: float = 0.05
    default_width: int = 1280
    default_height: int = 720


@dataclass(frozen=True)
class AppConfig:
    kinematics: KinematicsConfig = field(default_factory=KinematicsConfig)
    smoothing: SmoothingConfig = field(default_factory=SmoothingConfig)
    segmentation: SegmentationConfig = field(default_factory=SegmentationConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    fallback: FallbackConfig = field(default_factory=FallbackConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)


def default_config() -> AppConfig:
    """Return the built-in constants without touching the filesystem."""
    return AppConfig()


def _vec3(values: Any) -> Tuple[float, float, float]:
    x, y, z = values
    return (float(x), float(y), float(z))


def config_from_dict(data: Dict[str, Any]) -> AppConfig:
    """Build an AppConfig from an already validated mapping.

    Sections or keys missing from ``data`` keep their built-in defaults.
    """
    kinematics_data = dict(data.get("kinematics") or {})
    if "default_position" in kinematics_data:
        kinematics_data["default_position"] = _vec3(kinematics_data["default_position"])
    fallback_data = dict(data.get("fallback") or {})
    if "position" in fallback_data:
        fallback_data["position"] = _vec3(fallback_data["position"])

    return AppConfig(
        kinematics=KinematicsConfig(**kinematics_data),
        smoothing=SmoothingConfig(**(data.get("smoothing") or {})),
        segmentation=SegmentationConfig(**(data.get("segmentation") or {})),
        telemetry=TelemetryConfig(**(data.get("telemetry") or {})),
        fallback=FallbackConfig(**fallback_data),
        sampling=SamplingConfig(**(data.get("sampling") or {})),
    )


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        ConfigError: If configuration is invalid or cannot be loaded
    """
    path = Path(path)
    try:
        logger.info(f"Loading configuration from {path}")
        if not path.exists():
            raise InvalidConfigError(f"Configuration file not found: {path}")

        data = yaml.safe_load(path.read_text()) or {}

        # Validate against JSON Schema
        validate_config(data)

        logger.debug("Parsing configuration sections")

    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration: {e}")
        raise InvalidConfigError(f"Failed to parse configuration file: {e}") from e

    try:
        config = config_from_dict(data)
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to construct configuration objects: {e}")
        raise InvalidConfigError(f"Failed to construct configuration: {e}") from e

    logger.info(
        f"Configuration loaded successfully: pitch {config.segmentation.pitch_length_m}m, "
        f"smoothing {config.smoothing.speed_alpha}/{config.smoothing.seam_alpha}"
    )
    return config


__all__ = [
    "AppConfig",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "FallbackConfig",
    "KinematicsConfig",
    "SamplingConfig",
    "SegmentationConfig",
    "SmoothingConfig",
    "TelemetryConfig",
    "config_from_dict",
    "default_config",
    "load_config",
]
