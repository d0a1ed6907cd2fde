"""Sampler parameter records and the handle to the control behind each one.

A ``SamplerParameter`` is a transient view, recomputed on every command call;
only its ``ControlHandle`` reaches back into the live UI tree.
"""

from __future__ import annotations

import weakref
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from samplerctl._utils import format_number, parse_float
from samplerctl.errors import StaleControlError
from samplerctl.tree import Element, Event


class ParameterKind(str, Enum):
    """Enumeration for the control types a sampler parameter can be."""

    RANGE = "range"
    CHECKBOX = "checkbox"
    NUMBER = "number"


class ControlHandle:
    """Weak handle to the input element backing a parameter.

    The handle never owns the element: once the UI drops it, every access
    raises ``StaleControlError``.
    """

    def __init__(self, element: Element, change_event: str = "input") -> None:
        self._ref = weakref.ref(element)
        self._change_event = change_event

    @property
    def element(self) -> Element:
        element = self._ref()
        if element is None:
            raise StaleControlError("The control is no longer part of the UI.")
        return element

    @property
    def alive(self) -> bool:
        return self._ref() is not None

    @property
    def kind(self) -> str:
        return self.element.type

    @property
    def min(self) -> float:
        return parse_float(self.element.get_attribute("min"))

    @property
    def max(self) -> float:
        return parse_float(self.element.get_attribute("max"))

    @property
    def value(self) -> float:
        return parse_float(self.element.value)

    def set_value(self, number: float) -> None:
        self.element.value = format_number(number)

    @property
    def checked(self) -> bool:
        return self.element.checked

    def set_checked(self, checked: bool) -> None:
        self.element.checked = checked

    def notify_changed(self) -> Event:
        """Fire a bubbling change notification, as a user edit would."""
        return self.element.dispatch_event(Event(self._change_event, bubbles=True))

    def __repr__(self) -> str:
        element = self._ref()
        return f"ControlHandle({element!r})" if element is not None else "ControlHandle(<dead>)"


class SamplerParameter(BaseModel):
    """A user-adjustable sampler setting found in the settings panel."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    min: float
    max: float
    value: float
    checked: bool = False
    type: ParameterKind
    control: Optional[Any] = Field(default=None, exclude=True, repr=False)

    def matches(self, query: str) -> bool:
        """Check a normalised (trimmed, lower-cased) query against name and id."""
        return self.name.lower() == query or self.id.lower() == query


class ParameterSuggestion(BaseModel):
    """Completion entry offered for a parameter name argument."""

    value: str
    label: str
    type: str = "number"
    icon: str = "number"
