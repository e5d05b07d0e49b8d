"""Schema definitions for LED configuration merging."""

from .led_configuration import (
    U32_MAX,
    FrameData,
    FramesData,
    LEDConfiguration,
    PageData,
    coerce_flexible_u32,
    find_page,
)
from .merge_mapping import MergeAction, MergeMapping

__all__ = [
    "U32_MAX",
    "FrameData",
    "FramesData",
    "LEDConfiguration",
    "PageData",
    "coerce_flexible_u32",
    "find_page",
    "MergeAction",
    "MergeMapping",
]
