"""Utility functions for aircraftdesign."""

from .io import load_export_options, save_report
from .orientation import (
    IDENTITY,
    ORIGIN,
    compose_frames,
    frame_to_world,
    rotation_matrix,
)
from .validation import (
    validate_matrix3,
    validate_non_negative,
    validate_vector3,
)

__all__ = [
    "save_report",
    "load_export_options",
    "IDENTITY",
    "ORIGIN",
    "rotation_matrix",
    "compose_frames",
    "frame_to_world",
    "validate_non_negative",
    "validate_vector3",
    "validate_matrix3",
]
