"""Test helpers package."""

from tests.helpers.config import write_test_config, write_test_script
from tests.helpers.targets import FailingTarget, RecordingTarget

__all__ = [
    "FailingTarget",
    "RecordingTarget",
    "write_test_config",
    "write_test_script",
]
