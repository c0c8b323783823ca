"""Test utilities for responders tests."""

from .test_helpers import CallRecorder, output_of

__all__ = [
    "CallRecorder",
    "output_of",
]
