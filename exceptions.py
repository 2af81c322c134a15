"""Custom exception classes for SeamTracker."""

from __future__ import annotations

from typing import Optional


class SeamTrackerError(Exception):
    """Base exception for all SeamTracker errors."""

    pass


class InvalidFrameError(SeamTrackerError, ValueError):
    """Raised when a frame sample violates an input precondition."""

    def __init__(self, message: str, frame_index: Optional[int] = None):
        self.frame_index = frame_index
        super().__init__(message)


class ConfigError(SeamTrackerError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigError(ConfigError):
    """Raised when configuration file is invalid or corrupted."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration fails schema validation."""

    def __init__(self, message: str, validation_errors: Optional[list] = None):
        self.validation_errors = validation_errors or []
        super().__init__(message)


class CaptureError(SeamTrackerError):
    """Base exception for keypoint capture errors."""

    pass


class ExtractorError(CaptureError):
    """Raised when the keypoint extractor fails on a frame."""

    def __init__(self, message: str, timestamp: Optional[float] = None):
        self.timestamp = timestamp
        super().__init__(message)


class KeypointFileError(CaptureError):
    """Raised when a keypoint session file cannot be read or is malformed."""

    def __init__(self, message: str, validation_errors: Optional[list] = None):
        self.validation_errors = validation_errors or []
        super().__init__(message)
