"""LED device configuration schemas.

A configuration document describes the animation pages ("slots") of an LED
device. Each page carries display parameters and an ordered list of frames,
each frame an ordered list of color tokens.

Wire layout:
    {
        "product_info": {...},
        "page_num": 8,
        "page_data": [
            {
                "valid": 1,
                "page_index": 5,
                "lightness": 100,
                "speed_ms": 50,
                "color": ..., "word_page": ..., "keyframes": ...,
                "frames": {
                    "valid": 1,
                    "frame_num": 2,
                    "frame_data": [
                        {"frame_index": 0, "frame_RGB": ["#ff0000", ...]},
                        ...
                    ]
                },
                "//": "free-text comment"
            },
            ...
        ]
    }

Producers of these documents disagree on how to write some numbers, so
`valid`, `frame_num` and `frame_index` accept integers, integer strings and
booleans (see `coerce_flexible_u32`).
"""

import re
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, Strict

U32_MAX = 2**32 - 1

_INTEGER_LITERAL = re.compile(r"\+?[0-9]+")


def coerce_flexible_u32(value: Any) -> int:
    """Decode an unsigned 32-bit integer that may arrive as int, str or bool.

    Args:
        value: Raw JSON value

    Returns:
        The decoded integer

    Raises:
        ValueError: If the value has any other shape or is out of range
    """
    if isinstance(value, bool):
        return 1 if value else 0

    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        if not _INTEGER_LITERAL.fullmatch(value):
            raise ValueError(f"invalid digit found in string: {value!r}")
        number = int(value, 10)
    else:
        raise ValueError(
            f"expected a number or string that can be parsed as u32, got {type(value).__name__}"
        )

    if number < 0 or number > U32_MAX:
        raise ValueError(f"number {number} is out of range for u32")
    return number


FlexibleU32 = Annotated[int, BeforeValidator(coerce_flexible_u32)]
U32 = Annotated[int, Strict(), Field(ge=0, le=U32_MAX)]


class FrameData(BaseModel):
    """A single animation frame.

    Attributes:
        frame_index: Frame identifier within its page
        colors: Color tokens, one per LED (wire key ``frame_RGB``)
    """

    frame_index: FlexibleU32
    colors: list[str] = Field(alias="frame_RGB")

    model_config = {"extra": "allow", "populate_by_name": True}


class FramesData(BaseModel):
    """The frame group of a page.

    Attributes:
        valid: Optional validity flag
        frame_count: Declared frame count (wire key ``frame_num``)
        frame_list: Ordered frames (wire key ``frame_data``)
    """

    valid: FlexibleU32 | None = None
    frame_count: FlexibleU32 | None = Field(default=None, alias="frame_num")
    frame_list: list[FrameData] = Field(alias="frame_data")

    model_config = {"extra": "allow", "populate_by_name": True}


class PageData(BaseModel):
    """One animation page, addressed by its ``page_index`` slot."""

    valid: FlexibleU32
    page_index: U32
    lightness: U32
    speed_ms: U32
    color: Any
    word_page: Any
    frames: FramesData
    keyframes: Any
    comment: str | None = Field(default=None, alias="//")

    model_config = {"extra": "allow", "populate_by_name": True}


class LEDConfiguration(BaseModel):
    """A complete LED device configuration document.

    ``page_count`` is carried through as declared; the number of pages actually
    present is ``len(pages)``. Slots are looked up by ``page_index``, never by
    list position, and the first matching page wins.

    Attributes:
        device_info: Opaque device metadata (wire key ``product_info``)
        page_count: Declared page count (wire key ``page_num``)
        pages: Page list (wire key ``page_data``)
    """

    device_info: Any = Field(alias="product_info")
    page_count: U32 = Field(alias="page_num")
    pages: list[PageData] = Field(alias="page_data")

    model_config = {"extra": "allow", "populate_by_name": True}

    def get_page(self, slot: int) -> PageData | None:
        """Return the first page whose ``page_index`` equals ``slot``."""
        return next((page for page in self.pages if page.page_index == slot), None)

    def page_position(self, slot: int) -> int | None:
        """Return the list position of the first page for ``slot``."""
        for position, page in enumerate(self.pages):
            if page.page_index == slot:
                return position
        return None

    @property
    def slots(self) -> list[int]:
        """Page indexes in document order, duplicates included."""
        return [page.page_index for page in self.pages]


def find_page(document: LEDConfiguration, slot: int) -> PageData | None:
    """First-match lookup of a page by slot index."""
    return document.get_page(slot)
