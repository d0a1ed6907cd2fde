"""Tests for the sampler-get / sampler-set handlers."""

import pytest

from samplerctl.config import SamplerConfig
from samplerctl.control.controller import ParameterReceiver, clamp
from samplerctl.errors import InvalidArgument, InvalidValue, NotFound


@pytest.fixture
def receiver(document):
    return ParameterReceiver(document)


@pytest.fixture
def events(document):
    """Collect input events bubbling up to the document root."""
    seen = []
    document.root.add_event_listener("input", seen.append)
    return seen


def _element(document, element_id):
    return document.get_element_by_id(element_id)


# --- sampler-get ---


def test_get_range_value(receiver):
    assert receiver.get_parameter("temp") == "0.7"
    assert receiver.get_parameter("Top P") == "1"


def test_get_lookup_by_name_or_id_any_case(receiver):
    assert receiver.get_parameter("TEMP") == "0.7"
    assert receiver.get_parameter("temperature") == "0.7"
    assert receiver.get_parameter("  Temperature  ") == "0.7"


def test_get_checkbox(receiver, document):
    assert receiver.get_parameter("streaming") == "true"
    _element(document, "stream_toggle_novel").checked = False
    assert receiver.get_parameter("stream_toggle") == "false"


def test_get_number_input(receiver):
    assert receiver.get_parameter("seed") == "-1"


def test_get_sees_live_changes(receiver, document):
    _element(document, "temp_openai").value = "1.25"
    assert receiver.get_parameter("temp") == "1.25"


@pytest.mark.parametrize("name", [None, "", 42])
def test_get_invalid_name(receiver, name):
    with pytest.raises(InvalidArgument):
        receiver.get_parameter(name)


def test_get_missing(receiver, events):
    with pytest.raises(NotFound, match="missing-param"):
        receiver.get_parameter("missing-param")
    assert events == []


# --- sampler-set ---


def test_set_range_value(receiver, document, events):
    assert receiver.set_parameter("temp", "1.1") == ""
    control = _element(document, "temp_openai")
    assert control.value == "1.1"
    assert len(events) == 1
    assert events[0].type == "input"
    assert events[0].bubbles is True
    assert events[0].target is control


def test_set_range_clamps_to_max(receiver, document):
    receiver.set_parameter("temp", "5")
    assert _element(document, "temp_openai").value == "2"
    assert receiver.get_parameter("temp") == "2"


def test_set_range_clamps_to_min(receiver, document):
    receiver.set_parameter("temperature", "-3")
    assert _element(document, "temp_openai").value == "0"


def test_set_parses_leading_number(receiver, document):
    receiver.set_parameter("top_p", " 0.95abc")
    assert _element(document, "top_p_textgenerationwebui").value == "0.95"


def test_set_number_input(receiver, document):
    receiver.set_parameter("seed", "1234")
    assert _element(document, "seed_textgenerationwebui").value == "1234"


@pytest.mark.parametrize("value", ["abc", "Infinity", "-Infinity", "NaN", "\u0661"])
def test_set_rejects_non_finite(receiver, document, events, value):
    with pytest.raises(InvalidValue):
        receiver.set_parameter("temp", value)
    assert _element(document, "temp_openai").value == "0.7"
    assert events == []


def test_invalid_value_is_invalid_argument(receiver):
    with pytest.raises(InvalidArgument):
        receiver.set_parameter("temp", "abc")


@pytest.mark.parametrize("value,expected", [
    ("true", True),
    ("ON", True),
    ("1", True),
    ("no", False),
    ("false", False),
    ("yes", False),
    ("whatever", False),
])
def test_set_checkbox(receiver, document, events, value, expected):
    receiver.set_parameter("streaming", value)
    assert _element(document, "stream_toggle_novel").checked is expected
    assert len(events) == 1


def test_set_checkbox_truthy_tokens_from_config(document):
    receiver = ParameterReceiver(document, SamplerConfig(truthy_tokens=("yes",)))
    receiver.set_parameter("streaming", "yes")
    assert _element(document, "stream_toggle_novel").checked is True
    receiver.set_parameter("streaming", "true")
    assert _element(document, "stream_toggle_novel").checked is False


def test_set_missing(receiver, events):
    with pytest.raises(NotFound):
        receiver.set_parameter("missing-param", "1")
    assert events == []


@pytest.mark.parametrize("name", [None, "", 3.5])
def test_set_invalid_name(receiver, name):
    with pytest.raises(InvalidArgument, match="Parameter name"):
        receiver.set_parameter(name, "1")


@pytest.mark.parametrize("value", [None, "", 1.0])
def test_set_invalid_value(receiver, document, events, value):
    with pytest.raises(InvalidArgument, match="Value"):
        receiver.set_parameter("temp", value)
    assert _element(document, "temp_openai").value == "0.7"
    assert events == []


def test_set_on_hidden_panel_restores_style(hidden_document):
    receiver = ParameterReceiver(hidden_document)
    receiver.set_parameter("temp", "1.5")
    panel = hidden_document.get_element_by_id("left-nav-panel")
    assert panel.style == {}
    assert hidden_document.get_element_by_id("temp_openai").value == "1.5"


def test_clamp_open_bounds():
    nan = float("nan")
    assert clamp(5, nan, nan) == 5
    assert clamp(5, 0, nan) == 5
    assert clamp(-5, 0, nan) == 0
    assert clamp(5, nan, 2) == 2
