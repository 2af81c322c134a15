import pytest

from contracts import (
    DeliveryPhase,
    FrameSample,
    FrameSnapshot,
    Keypoint,
    KeypointName,
)
from delivery.fallback import fallback_result
from exceptions import InvalidFrameError


def test_contracts_instantiation() -> None:
    keypoint = Keypoint(name="right_wrist", x=640.0, y=360.0, score=0.9)
    sample = FrameSample(timestamp=0.5, keypoints=[keypoint], frame_width=1920, frame_height=1080)
    snapshot = FrameSnapshot(
        timestamp=0.5,
        phase=DeliveryPhase.RELEASE,
        ball_position=(0.0, 2.1, 10.0),
        seam_angle=14.5,
        speed_kph=128.0,
        release_height=2.1,
        keypoints=(keypoint,),
    )

    assert keypoint.landmark == KeypointName.RIGHT_WRIST
    assert keypoint.has_coordinates
    assert sample.keypoints == (keypoint,)
    assert snapshot.phase.value == "Release"


@pytest.mark.parametrize("width, height", [(0, 720), (1280, 0), (-1280, 720)])
def test_frame_sample_rejects_bad_frame_size(width, height) -> None:
    with pytest.raises(InvalidFrameError):
        FrameSample(timestamp=0.0, frame_width=width, frame_height=height)


def test_invalid_frame_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        FrameSample(timestamp=0.0, frame_width=0, frame_height=0)


def test_keypoint_name_parse() -> None:
    assert KeypointName.parse("left_elbow") == KeypointName.LEFT_ELBOW
    assert KeypointName.parse("racket") is None
    assert KeypointName.parse(None) is None
    assert Keypoint("left_wrist", None, 10.0).has_coordinates is False


def test_phase_labels() -> None:
    assert [phase.value for phase in DeliveryPhase] == [
        "Run-Up",
        "Load-Up",
        "Release",
        "Pitch",
        "Impact",
        "Follow-Through",
    ]


def test_result_to_dict() -> None:
    data = fallback_result().to_dict()

    assert data["frames"][0]["phase"] == "Run-Up"
    assert data["frames"][0]["ball_position"] == [0.0, 1.5, 0.0]
    assert data["trajectory"] == [[0.0, 1.5, 0.0]]
    assert data["key_moments"] == {"release_frame": 0, "pitch_frame": 0, "impact_frame": 0}
    assert data["summary"]["predicted_impact_meters"] == 5.4
