"""Frame concatenation across several configurations for one LED slot.

A slot's animation can be assembled by chaining the frames of pages taken
from several configuration files. The first source provides the page that the
result is built on; frames from each further source are appended and
renumbered so that frame indexes run on without gaps.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from schemas.led_configuration import FrameData, LEDConfiguration, PageData

logger = logging.getLogger(__name__)

MAX_FRAMES = 300
LED_SLOTS = (5, 6, 7)


@dataclass
class SlotSource:
    """A page of a configuration chosen as input for a slot.

    Attributes:
        configuration: The configuration the page comes from
        source_slot: Page index of the page within that configuration
    """

    configuration: LEDConfiguration
    source_slot: int


@dataclass
class ConcatenatedPage:
    """Result of concatenating slot sources.

    Attributes:
        page: The combined page, or None when there was no usable base page
        total_frames: Number of frames in the combined page
        is_valid: Whether the frame count is within device limits
        warning: Why the result is not valid, if it is not
    """

    page: PageData | None
    total_frames: int
    is_valid: bool
    warning: str | None = None


def concatenate_slot_frames(sources: list[SlotSource]) -> ConcatenatedPage:
    """Concatenate the frames of several slot sources into a single page.

    Args:
        sources: Slot sources; the first one is the base

    Returns:
        The concatenated page with its validity
    """
    if not sources:
        return ConcatenatedPage(
            page=None,
            total_frames=0,
            is_valid=False,
            warning="No configuration files selected",
        )

    base = sources[0]
    base_page = base.configuration.get_page(base.source_slot)
    if base_page is None:
        return ConcatenatedPage(
            page=None,
            total_frames=0,
            is_valid=False,
            warning="Invalid base configuration",
        )

    frames: list[FrameData] = [
        frame.model_copy(deep=True) for frame in base_page.frames.frame_list
    ]

    for source in sources[1:]:
        page = source.configuration.get_page(source.source_slot)
        if page is None:
            logger.debug(f"No page {source.source_slot} in source, skipping")
            continue

        offset = len(frames)
        for i, frame in enumerate(page.frames.frame_list):
            renumbered = frame.model_copy(deep=True)
            renumbered.frame_index = offset + i
            frames.append(renumbered)

    total_frames = len(frames)
    is_valid = 1 <= total_frames <= MAX_FRAMES
    warning = None
    if total_frames == 0:
        warning = "No frames found in configuration"
    elif total_frames > MAX_FRAMES:
        warning = f"Frame count ({total_frames}) exceeds maximum limit of {MAX_FRAMES}"
        logger.warning(warning)

    page = base_page.model_copy(deep=True)
    page.frames.frame_list = frames
    page.frames.frame_count = total_frames

    return ConcatenatedPage(
        page=page,
        total_frames=total_frames,
        is_valid=is_valid,
        warning=warning,
    )


def validate_all_slots(
    slot_sources: Mapping[int, list[SlotSource]],
    slots: Iterable[int] = LED_SLOTS,
) -> bool:
    """Check that every slot in ``slots`` concatenates to a valid page."""
    return all(
        concatenate_slot_frames(slot_sources.get(slot, [])).is_valid
        for slot in slots
    )


def apply_concatenated_pages(
    base: LEDConfiguration,
    pages: Mapping[int, ConcatenatedPage],
) -> LEDConfiguration:
    """Copy concatenated frames into the matching slots of a base configuration.

    Only the frames are taken over; every other field of the base page,
    including its ``page_index``, is kept. Slots without a base page, and
    concatenations without a page, are skipped.

    Returns:
        A new configuration; ``base`` is not modified
    """
    merged = base.model_copy(deep=True)

    for slot, concatenated in pages.items():
        target = merged.get_page(slot)
        if target is None or concatenated.page is None:
            logger.debug(f"Slot {slot}: nothing to apply")
            continue
        target.frames = concatenated.page.frames.model_copy(deep=True)

    return merged
