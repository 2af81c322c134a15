"""Capture module: keypoint extraction, clip sampling, and session files."""

from .extractor import KeypointExtractor
from .keypoint_io import load_keypoint_session, parse_session, save_delivery_result
from .sampling import collect_samples, sample_times, seek_time
from .simulated import SimConfig, SimulatedExtractor, simulate_delivery

__all__ = [
    "KeypointExtractor",
    "SimConfig",
    "SimulatedExtractor",
    "collect_samples",
    "load_keypoint_session",
    "parse_session",
    "sample_times",
    "save_delivery_result",
    "seek_time",
    "simulate_delivery",
]
