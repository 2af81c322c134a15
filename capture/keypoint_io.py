"""Read keypoint sessions and write delivery results as JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from jsonschema import Draft7Validator

from contracts import DeliveryResult, FrameSample, Keypoint
from contracts.versioning import make_envelope
from exceptions import InvalidFrameError, KeypointFileError
from log_config.logger import get_logger

logger = get_logger(__name__)

_NULLABLE_NUMBER = {"type": ["number", "null"]}

SESSION_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["frames"],
    "properties": {
        "frame_width": {"type": "integer", "minimum": 1},
        "frame_height": {"type": "integer", "minimum": 1},
        "frames": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["timestamp"],
                "properties": {
                    "timestamp": {"type": "number", "minimum": 0},
                    "keypoints": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["name"],
                            "properties": {
                                "name": {"type": "string"},
                                "x": _NULLABLE_NUMBER,
                                "y": _NULLABLE_NUMBER,
                                "score": {"type": ["number", "null"], "minimum": 0, "maximum": 1},
                            },
                        },
                    },
                },
            },
        },
    },
}


def parse_session(data: Dict[str, Any]) -> List[FrameSample]:
    """Validate a session document and build its frame samples.

    Raises:
        KeypointFileError: If the document does not match the session schema
        InvalidFrameError: If timestamps go backwards
    """
    errors = list(Draft7Validator(SESSION_SCHEMA).iter_errors(data))
    if errors:
        messages = []
        for error in errors:
            path = " -> ".join(str(p) for p in error.path) if error.path else "root"
            messages.append(f"{path}: {error.message}")
        logger.error(f"Keypoint session validation failed with {len(errors)} errors")
        raise KeypointFileError(
            f"Keypoint session is invalid ({len(errors)} error(s))",
            validation_errors=messages,
        )

    width = data.get("frame_width", 1280)
    height = data.get("frame_height", 720)
    samples: List[FrameSample] = []
    previous = None
    for idx, frame in enumerate(data["frames"]):
        timestamp = float(frame["timestamp"])
        if previous is not None and timestamp < previous:
            raise InvalidFrameError(
                f"Timestamps must not decrease: frame {idx} at {timestamp}s follows {previous}s",
                frame_index=idx,
            )
        previous = timestamp
        keypoints = tuple(
            Keypoint(
                name=kp["name"],
                x=kp.get("x"),
                y=kp.get("y"),
                score=kp.get("score"),
            )
            for kp in frame.get("keypoints", [])
        )
        samples.append(
            FrameSample(
                timestamp=timestamp,
                keypoints=keypoints,
                frame_width=width,
                frame_height=height,
            )
        )
    return samples


def load_keypoint_session(path: Union[str, Path]) -> List[FrameSample]:
    """Load frame samples from a keypoint session JSON file.

    Args:
        path: Session file written by the keypoint extractor

    Returns:
        Ordered frame samples

    Raises:
        KeypointFileError: If the file is missing, unreadable, or malformed
        InvalidFrameError: If timestamps go backwards
    """
    path = Path(path)
    if not path.exists():
        raise KeypointFileError(f"Keypoint session not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read keypoint session {path}: {e}")
        raise KeypointFileError(f"Failed to read keypoint session {path}: {e}") from e

    samples = parse_session(data)
    logger.info(f"Loaded {len(samples)} frame samples from {path}")
    return samples


def save_delivery_result(result: DeliveryResult, path: Union[str, Path]) -> Path:
    """Write ``result`` as versioned JSON and return the written path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(make_envelope(result.to_dict()), indent=2), encoding="utf-8")
    logger.info(f"Saved delivery result to {path}")
    return path


__all__ = ["SESSION_SCHEMA", "load_keypoint_session", "parse_session", "save_delivery_result"]
