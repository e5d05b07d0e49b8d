"""Pytest fixtures for led-merger tests."""

import json

import pytest

from led_merger.stores import MemoryStore
from schemas import LEDConfiguration


def make_frame(frame_index, colors):
    return {"frame_index": frame_index, "frame_RGB": list(colors)}


def make_page(page_index, frames, comment=None, **overrides):
    """Build a page record with ``frames`` as lists of color tokens."""
    page = {
        "valid": 1,
        "page_index": page_index,
        "lightness": 100,
        "speed_ms": 50,
        "color": {"mode": "static", "rgb": "#ffffff"},
        "word_page": None,
        "frames": {
            "valid": 1,
            "frame_num": len(frames),
            "frame_data": [make_frame(i, colors) for i, colors in enumerate(frames)],
        },
        "keyframes": [],
    }
    if comment is not None:
        page["//"] = comment
    page.update(overrides)
    return page


@pytest.fixture
def base_record():
    """Base configuration record.

    Slot 0 holds two frames, slot 1 one frame and slot 5 none.
    """
    return {
        "product_info": {"vendor": "Acme", "model": "K-87", "firmware": [1, 4, 2]},
        "page_num": 3,
        "page_data": [
            make_page(0, [["#ff0000", "#ff0000"], ["#00ff00", "#00ff00"]], comment="base slot 0"),
            make_page(1, [["#0000ff", "#0000ff"]]),
            make_page(5, []),
        ],
        "Fn_key": {"layer": 2},
    }


@pytest.fixture
def source_record():
    """Source configuration record.

    Slot 0 holds three frames, slot 2 a single frame.
    """
    return {
        "product_info": {"vendor": "Acme", "model": "K-87"},
        "page_num": 2,
        "page_data": [
            make_page(
                0,
                [["#111111", "#111111"], ["#222222", "#222222"], ["#333333", "#333333"]],
                comment="source slot 0",
            ),
            make_page(2, [["#abcdef", "#abcdef"]]),
        ],
    }


@pytest.fixture
def empty_source_record():
    """Configuration record without any pages."""
    return {"product_info": None, "page_num": 0, "page_data": []}


@pytest.fixture
def base_config(base_record):
    return LEDConfiguration.model_validate(base_record)


@pytest.fixture
def source_config(source_record):
    return LEDConfiguration.model_validate(source_record)


@pytest.fixture
def memory_store(source_record, empty_source_record):
    """In-memory store holding the source configurations."""
    return MemoryStore({
        "source.json": LEDConfiguration.model_validate(source_record),
        "empty.json": LEDConfiguration.model_validate(empty_source_record),
    })


@pytest.fixture
def config_dir(tmp_path, base_record, source_record, empty_source_record):
    """Directory with base, source and empty configuration files."""
    (tmp_path / "base.json").write_text(json.dumps(base_record, indent=2))
    (tmp_path / "source.json").write_text(json.dumps(source_record, indent=2))
    (tmp_path / "empty.json").write_text(json.dumps(empty_source_record, indent=2))
    return tmp_path
