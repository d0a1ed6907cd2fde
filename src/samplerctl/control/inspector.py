# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Parameter inspector — discovers sampler parameter controls in the UI tree."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from samplerctl.config import SamplerConfig, get_sampler_config
from samplerctl.targets import (
    ControlHandle,
    ParameterKind,
    ParameterSuggestion,
    SamplerParameter,
)
from samplerctl.tree import Element, UIDocument, by_class, by_id, by_tag

logger = logging.getLogger(__name__)

_REVEAL_STYLE: Dict[str, str] = {
    "opacity": "0",
    "visibility": "hidden",
    "display": "block",
}

# Ancestors that may carry a parameter's title, most specific first.
_TITLE_CONTAINERS = (by_class("range-block"), by_tag("label"), by_tag("h4"), by_tag("div"))
# Caption elements searched inside the title container, in priority order.
_TITLE_CAPTIONS = (by_class("range-block-title"), by_tag("small"), by_class("checkbox_label"))


def is_parameter_control(element: Element) -> bool:
    """Match range and checkbox inputs, and number inputs with no ``data-for`` companion."""
    if element.tag != "input":
        return False
    if element.type in (ParameterKind.RANGE.value, ParameterKind.CHECKBOX.value):
        return True
    return element.type == ParameterKind.NUMBER.value and not element.has_attribute("data-for")


def is_visible(element: Element) -> bool:
    width, height = element.offset_size
    return width > 0 and height > 0


def sanitize_id(raw_id: str, strip_tokens=None) -> str:
    """Strip backend-specific decorations from a control id.

    Each token is removed once, wherever it first occurs, in table order.
    """
    if strip_tokens is None:
        strip_tokens = get_sampler_config().id_strip_tokens
    for token in strip_tokens:
        raw_id = raw_id.replace(token, "", 1)
    return raw_id


def get_title_parent(element: Element) -> Optional[Element]:
    """Find the element whose text names the parameter behind ``element``."""
    parent = None
    for predicate in _TITLE_CONTAINERS:
        parent = element.closest(predicate)
        if parent is not None:
            break
    if parent is None:
        return None

    for predicate in _TITLE_CAPTIONS:
        caption = parent.query_selector(predicate)
        if caption is not None and caption.text_content.strip():
            return caption

    return parent


@contextmanager
def revealed(panel: Element) -> Iterator[Element]:
    """Temporarily lay out a hidden panel so its controls get a size.

    The panel stays invisible and its inline style is restored on exit,
    whatever happens inside the block.
    """
    if panel.computed_style("display") != "none":
        yield panel
        return

    saved = {prop: panel.style.get(prop) for prop in _REVEAL_STYLE}
    logger.debug("Revealing hidden panel %r for the scan", panel)
    for prop, value in _REVEAL_STYLE.items():
        panel.set_style(prop, value)
    try:
        yield panel
    finally:
        for prop, value in saved.items():
            panel.set_style(prop, value or "")
        logger.debug("Restored panel %r style", panel)


class ParameterEnumerator:
    """Scans the settings panel for sampler parameters.

    Nothing is cached: every call re-reads the current UI tree.
    """

    def __init__(
        self, document: UIDocument, config: Optional[SamplerConfig] = None
    ) -> None:
        self.document = document
        self.config = config or get_sampler_config()

    def enumerate(self) -> List[SamplerParameter]:
        panel = self.document.get_element_by_id(self.config.panel_id)
        if panel is None:
            logger.warning(f"Panel #{self.config.panel_id} not found, no parameters.")
            return []

        with revealed(panel):
            controls = [c for c in panel.query_selector_all(is_parameter_control) if is_visible(c)]
            parameters = []
            for control in controls:
                parameter = self._to_parameter(control)
                if parameter is not None:
                    parameters.append(parameter)

        return parameters

    def _to_parameter(self, control: Element) -> Optional[SamplerParameter]:
        excluded = self.config.excluded_section_id
        if excluded and control.closest(by_id(excluded)) is not None:
            logger.debug(f"Skipping {control!r}: inside #{self.config.excluded_section_id}")
            return None

        title = get_title_parent(control)
        name = title.text_content.strip() if title is not None else ""
        parameter_id = sanitize_id(control.id, self.config.id_strip_tokens)

        if not parameter_id or not name:
            logger.debug(f"Skipping {control!r}: empty id or name")
            return None

        handle = ControlHandle(control, self.config.change_event)
        return SamplerParameter(
            id=parameter_id,
            name=name,
            min=handle.min,
            max=handle.max,
            value=handle.value,
            checked=handle.checked,
            type=ParameterKind(control.type),
            control=handle,
        )

    def find(self, name: str) -> Optional[SamplerParameter]:
        """Look up a parameter by name or id, ignoring case and surrounding space."""
        query = name.strip().lower()
        return next((p for p in self.enumerate() if p.matches(query)), None)

    def suggestions(self) -> List[ParameterSuggestion]:
        """Completion entries for every parameter, sorted by name."""
        parameters = sorted(self.enumerate(), key=lambda p: p.name.lower())
        return [
            ParameterSuggestion(
                value=p.id,
                label=p.name,
                icon="boolean" if p.type == ParameterKind.CHECKBOX else "number",
            )
            for p in parameters
        ]
