"""Core data contracts for keypoint capture, delivery segmentation, and telemetry."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from exceptions import InvalidFrameError

Vec3 = Tuple[float, float, float]

DEFAULT_FRAME_WIDTH = 1280
DEFAULT_FRAME_HEIGHT = 720


class KeypointName(str, Enum):
    NOSE = "nose"
    LEFT_EYE = "left_eye"
    RIGHT_EYE = "right_eye"
    LEFT_EAR = "left_ear"
    RIGHT_EAR = "right_ear"
    LEFT_SHOULDER = "left_shoulder"
    RIGHT_SHOULDER = "right_shoulder"
    LEFT_ELBOW = "left_elbow"
    RIGHT_ELBOW = "right_elbow"
    LEFT_WRIST = "left_wrist"
    RIGHT_WRIST = "right_wrist"
    LEFT_HIP = "left_hip"
    RIGHT_HIP = "right_hip"
    LEFT_KNEE = "left_knee"
    RIGHT_KNEE = "right_knee"
    LEFT_ANKLE = "left_ankle"
    RIGHT_ANKLE = "right_ankle"

    @classmethod
    def parse(cls, name: Optional[str]) -> Optional["KeypointName"]:
        """Return the landmark for ``name``, or None for unknown names."""
        if name is None:
            return None
        try:
            return cls(name)
        except ValueError:
            return None


class DeliveryPhase(str, Enum):
    RUN_UP = "Run-Up"
    LOAD_UP = "Load-Up"
    RELEASE = "Release"
    PITCH = "Pitch"
    IMPACT = "Impact"
    FOLLOW_THROUGH = "Follow-Through"


@dataclass(frozen=True)
class Keypoint:
    name: str
    x: Optional[float] = None
    y: Optional[float] = None
    score: Optional[float] = None

    @property
    def landmark(self) -> Optional[KeypointName]:
        return KeypointName.parse(self.name)

    @property
    def has_coordinates(self) -> bool:
        return self.x is not None and self.y is not None

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "x": self.x, "y": self.y, "score": self.score}


@dataclass(frozen=True)
class FrameSample:
    """One sampled instant of the clip as delivered by the keypoint extractor."""

    timestamp: float
    keypoints: Tuple[Keypoint, ...] = ()
    frame_width: int = DEFAULT_FRAME_WIDTH
    frame_height: int = DEFAULT_FRAME_HEIGHT

    def __post_init__(self) -> None:
        if self.frame_width <= 0 or self.frame_height <= 0:
            raise InvalidFrameError(
                f"Frame size must be positive, got {self.frame_width}x{self.frame_height}"
            )
        # Accept any iterable of keypoints but store an immutable tuple
        if not isinstance(self.keypoints, tuple):
            object.__setattr__(self, "keypoints", tuple(self.keypoints))


@dataclass(frozen=True)
class FrameObservation:
    timestamp: float
    ball_position: Vec3
    seam_angle: float
    keypoints: Tuple[Keypoint, ...] = ()


@dataclass(frozen=True)
class FrameSnapshot:
    timestamp: float
    phase: DeliveryPhase
    ball_position: Vec3
    seam_angle: float
    speed_kph: float
    release_height: Optional[float]
    keypoints: Tuple[Keypoint, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time": self.timestamp,
            "phase": self.phase.value,
            "ball_position": list(self.ball_position),
            "seam_angle": self.seam_angle,
            "speed_kph": self.speed_kph,
            "release_height": self.release_height,
            "keypoints": [kp.to_dict() for kp in self.keypoints],
        }


@dataclass(frozen=True)
class KeyMoments:
    release_frame: int
    pitch_frame: int
    impact_frame: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "release_frame": self.release_frame,
            "pitch_frame": self.pitch_frame,
            "impact_frame": self.impact_frame,
        }


@dataclass(frozen=True)
class DeliverySummary:
    release_speed_kph: float
    seam_angle: float
    release_height: float
    predicted_impact_meters: float
    runup_velocity_kph: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "release_speed_kph": self.release_speed_kph,
            "seam_angle": self.seam_angle,
            "release_height": self.release_height,
            "predicted_impact_meters": self.predicted_impact_meters,
            "runup_velocity_kph": self.runup_velocity_kph,
        }


@dataclass(frozen=True)
class DeliveryResult:
    frames: Tuple[FrameSnapshot, ...]
    trajectory: Tuple[Vec3, ...]
    key_moments: KeyMoments
    summary: DeliverySummary
    diagnostics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frames": [frame.to_dict() for frame in self.frames],
            "trajectory": [list(point) for point in self.trajectory],
            "key_moments": self.key_moments.to_dict(),
            "summary": self.summary.to_dict(),
            "diagnostics": dict(self.diagnostics),
        }
