"""Shared fixtures — an in-memory settings panel."""

import copy

import pytest

import samplerctl.config as cfg_module
from samplerctl.tree import UIDocument

SIZE = [120, 16]


def _range_block(title, control):
    return {
        "classes": ["range-block"],
        "size": [200, 40],
        "children": [
            {"classes": ["range-block-title"], "text": title, "size": [200, 16]},
            control,
        ],
    }


PANEL = {
    "id": "root",
    "size": [1000, 800],
    "children": [
        {
            "id": "left-nav-panel",
            "size": [300, 800],
            "children": [
                _range_block(
                    "Temperature",
                    {
                        "tag": "input",
                        "id": "temp_openai",
                        "attributes": {"type": "range", "min": 0, "max": 2, "value": "0.7", "step": "0.01"},
                        "size": SIZE,
                    },
                ),
                {
                    "tag": "input",
                    "id": "temp_counter_openai",
                    "attributes": {"type": "number", "data-for": "temp_openai", "value": "0.7"},
                    "size": [40, 16],
                },
                _range_block(
                    "Top P",
                    {
                        "tag": "input",
                        "id": "top_p_textgenerationwebui",
                        "attributes": {"type": "range", "min": "0", "max": "1", "value": "1"},
                        "size": SIZE,
                    },
                ),
                {
                    "tag": "label",
                    "classes": ["checkbox_label"],
                    "size": [200, 20],
                    "children": [
                        {
                            "tag": "input",
                            "id": "stream_toggle_novel",
                            "attributes": {"type": "checkbox"},
                            "checked": True,
                            "size": [16, 16],
                        },
                        {"tag": "span", "text": " Streaming ", "size": [80, 16]},
                    ],
                },
                {
                    "size": [200, 40],
                    "children": [
                        {"tag": "small", "text": "Seed", "size": [40, 12]},
                        {
                            "tag": "input",
                            "id": "seed_textgenerationwebui",
                            "attributes": {"type": "number", "min": "-1", "max": "99999", "value": "-1"},
                            "size": SIZE,
                        },
                    ],
                },
                {
                    "stylesheet": {"display": "none"},
                    "size": [200, 40],
                    "children": [
                        _range_block(
                            "Mirostat Tau",
                            {
                                "tag": "input",
                                "id": "mirostat_tau",
                                "attributes": {"type": "range", "min": "0", "max": "10", "value": "5"},
                                "size": SIZE,
                            },
                        ),
                    ],
                },
                _range_block(
                    "Collapsed",
                    {
                        "tag": "input",
                        "id": "collapsed",
                        "attributes": {"type": "range", "min": "0", "max": "1", "value": "0"},
                        "size": [0, 0],
                    },
                ),
                {
                    "id": "openai_settings",
                    "size": [300, 100],
                    "children": [
                        _range_block(
                            "Frequency Penalty",
                            {
                                "tag": "input",
                                "id": "freq_pen_openai",
                                "attributes": {"type": "range", "min": "-2", "max": "2", "value": "0"},
                                "size": SIZE,
                            },
                        ),
                    ],
                },
                _range_block(
                    "Decorations Only",
                    {
                        "tag": "input",
                        "id": "oai_",
                        "attributes": {"type": "range", "min": "0", "max": "1", "value": "0"},
                        "size": SIZE,
                    },
                ),
                _range_block(
                    "   ",
                    {
                        "tag": "input",
                        "id": "untitled",
                        "attributes": {"type": "range", "min": "0", "max": "1", "value": "0"},
                        "size": SIZE,
                    },
                ),
                {
                    "tag": "input",
                    "id": "api_key",
                    "attributes": {"type": "text", "value": "secret"},
                    "size": SIZE,
                },
            ],
        },
    ],
}


@pytest.fixture(autouse=True)
def default_config():
    cfg_module._config = None
    yield
    cfg_module._config = None


@pytest.fixture
def panel_data():
    return copy.deepcopy(PANEL)


@pytest.fixture
def document(panel_data):
    return UIDocument.from_dict(panel_data)


@pytest.fixture
def hidden_document(panel_data):
    panel_data["children"][0]["stylesheet"] = {"display": "none"}
    return UIDocument.from_dict(panel_data)
