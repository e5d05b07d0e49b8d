"""Loading and merging of LED configurations."""

from .exceptions import (
    InvalidInstructionError,
    MergeError,
    TargetSlotNotFoundError,
    UnknownActionError,
)
from .loader import ConfigurationLoader, load_configuration
from .merger import ConfigurationMerger, combine_frames, merge_configurations, replace_frames

__all__ = [
    "ConfigurationLoader",
    "ConfigurationMerger",
    "combine_frames",
    "load_configuration",
    "merge_configurations",
    "replace_frames",
    "MergeError",
    "InvalidInstructionError",
    "TargetSlotNotFoundError",
    "UnknownActionError",
]
