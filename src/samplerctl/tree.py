"""In-memory UI tree — the element capability the enumerator scans.

Implements the slice of a DOM the sampler commands rely on: ancestor and
descendant queries, inline vs. stylesheet style, layout size and bubbling
event dispatch. A host adapter can provide any object with the same surface;
``UIDocument`` also round-trips through a JSON snapshot so panels can be
captured, edited and inspected offline.
"""

from __future__ import annotations

import json
import logging
import weakref
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from samplerctl._utils import format_number

logger = logging.getLogger(__name__)

Predicate = Callable[["Element"], bool]
Listener = Callable[["Event"], None]

_DEFAULT_STYLE: Dict[str, str] = {
    "display": "block",
    "visibility": "visible",
    "opacity": "1",
}


def by_tag(tag: str) -> Predicate:
    tag = tag.lower()
    return lambda e: e.tag == tag


def by_class(class_name: str) -> Predicate:
    return lambda e: class_name in e.classes


def by_id(element_id: str) -> Predicate:
    return lambda e: e.id == element_id


@dataclass
class Event:
    """A synthetic UI event."""

    type: str
    bubbles: bool = False
    target: Optional["Element"] = None
    current_target: Optional["Element"] = None


class Element:
    """A node of the UI tree."""

    def __init__(
        self,
        tag: str = "div",
        id: str = "",
        classes: Optional[List[str]] = None,
        attributes: Optional[Dict[str, str]] = None,
        checked: bool = False,
        text: str = "",
        style: Optional[Dict[str, str]] = None,
        stylesheet: Optional[Dict[str, str]] = None,
        size: Tuple[int, int] = (0, 0),
        children: Optional[List[Element]] = None,
    ) -> None:
        self.tag = tag.lower()
        self.id = id
        self.classes: List[str] = list(classes or [])
        self.attributes: Dict[str, str] = dict(attributes or {})
        self.checked = checked
        self.text = text
        self.style: Dict[str, str] = dict(style or {})
        self.stylesheet: Dict[str, str] = dict(stylesheet or {})
        self.size = (int(size[0]), int(size[1]))
        self.children: List[Element] = []
        self._parent: Optional[weakref.ref] = None
        self._listeners: Dict[str, List[Listener]] = {}
        for child in children or []:
            self.append(child)

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        return f"<{self.tag}{ident}>"

    # --- structure ---

    @property
    def parent(self) -> Optional[Element]:
        return self._parent() if self._parent is not None else None

    def append(self, child: Element) -> Element:
        child._parent = weakref.ref(self)
        self.children.append(child)
        return child

    def ancestors(self) -> Iterator[Element]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def descendants(self) -> Iterator[Element]:
        """Yield descendants in document order, excluding ``self``."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def closest(self, predicate: Predicate) -> Optional[Element]:
        """Return the nearest ancestor-or-self matching ``predicate``."""
        if predicate(self):
            return self
        for node in self.ancestors():
            if predicate(node):
                return node
        return None

    def query_selector(self, predicate: Predicate) -> Optional[Element]:
        return next((e for e in self.descendants() if predicate(e)), None)

    def query_selector_all(self, predicate: Predicate) -> List[Element]:
        return [e for e in self.descendants() if predicate(e)]

    @property
    def text_content(self) -> str:
        return self.text + "".join(c.text_content for c in self.children)

    # --- attributes ---

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    @property
    def type(self) -> str:
        """Input type, ``text`` when unset."""
        return self.attributes.get("type", "text").lower()

    @property
    def value(self) -> str:
        return self.attributes.get("value", "")

    @value.setter
    def value(self, value: str) -> None:
        self.attributes["value"] = value

    # --- style and layout ---

    def computed_style(self, prop: str) -> str:
        return (
            self.style.get(prop)
            or self.stylesheet.get(prop)
            or _DEFAULT_STYLE.get(prop, "")
        )

    def set_style(self, prop: str, value: str) -> None:
        """Set an inline style property; an empty value removes it."""
        if value:
            self.style[prop] = value
        else:
            self.style.pop(prop, None)

    @property
    def is_rendered(self) -> bool:
        if self.computed_style("display") == "none":
            return False
        return all(a.computed_style("display") != "none" for a in self.ancestors())

    @property
    def offset_size(self) -> Tuple[int, int]:
        """Rendered (width, height); zero when the element is not laid out."""
        return self.size if self.is_rendered else (0, 0)

    # --- events ---

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def remove_event_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def dispatch_event(self, event: Event) -> Event:
        """Deliver ``event`` to this element, then to its ancestors if it bubbles."""
        event.target = self
        path = [self] + (list(self.ancestors()) if event.bubbles else [])
        for node in path:
            event.current_target = node
            for listener in list(node._listeners.get(event.type, [])):
                listener(event)
        event.current_target = None
        return event


class ElementSpec(BaseModel):
    """Serialised form of an ``Element`` subtree."""

    tag: str = "div"
    id: str = ""
    classes: List[str] = Field(default_factory=list)
    attributes: Dict[str, str] = Field(default_factory=dict)
    checked: bool = False
    text: str = ""
    style: Dict[str, str] = Field(default_factory=dict)
    stylesheet: Dict[str, str] = Field(default_factory=dict)
    size: Tuple[int, int] = (0, 0)
    children: List[ElementSpec] = Field(default_factory=list)

    @field_validator("attributes", mode="before")
    @classmethod
    def _stringify_attributes(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {
            k: format_number(v)
            if isinstance(v, (int, float)) and not isinstance(v, bool)
            else str(v)
            for k, v in value.items()
        }

    def build(self) -> Element:
        return Element(
            tag=self.tag,
            id=self.id,
            classes=self.classes,
            attributes=self.attributes,
            checked=self.checked,
            text=self.text,
            style=self.style,
            stylesheet=self.stylesheet,
            size=self.size,
            children=[c.build() for c in self.children],
        )

    @classmethod
    def from_element(cls, element: Element) -> ElementSpec:
        return cls(
            tag=element.tag,
            id=element.id,
            classes=element.classes,
            attributes=element.attributes,
            checked=element.checked,
            text=element.text,
            style=element.style,
            stylesheet=element.stylesheet,
            size=element.size,
            children=[cls.from_element(c) for c in element.children],
        )


ElementSpec.model_rebuild()


class UIDocument:
    """A UI tree with id lookup — the container the commands operate on."""

    def __init__(self, root: Element) -> None:
        self.root = root

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        if not element_id:
            return None
        if self.root.id == element_id:
            return self.root
        return self.root.query_selector(by_id(element_id))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> UIDocument:
        return cls(ElementSpec.model_validate(data).build())

    @classmethod
    def from_json(cls, text: str) -> UIDocument:
        return cls(ElementSpec.model_validate_json(text).build())

    @classmethod
    def load(cls, path: Union[str, Path]) -> UIDocument:
        """Load a document from a JSON snapshot file."""
        logger.debug("Loading UI snapshot from %s", path)
        return cls.from_json(Path(path).read_text(encoding="utf-8"))

    def to_dict(self) -> Dict[str, Any]:
        return ElementSpec.from_element(self.root).model_dump()

    def dump(self, path: Union[str, Path]) -> None:
        """Write the document back to a JSON snapshot file."""
        Path(path).write_text(
            json.dumps(self.to_dict(), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
