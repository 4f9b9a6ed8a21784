"""Tree model: Node, NodeKind, and SerializedStyles."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from stylesnap.errors import TreeFormatError

# Display name of the wrapper component that carries a ``css`` prop.
CSS_PROP_WRAPPER = "CssPropInternal"

# Props owned by the styling runtime rather than the wrapped element.
CSS_PROP = "css"
TYPE_PROP = "__STYLED_TYPE__"
LABEL_PROP = "__STYLED_LABEL__"


class NodeKind(Enum):
    """How a node was produced."""

    RENDERED = "rendered"  # output of a (full or shallow) render pass
    ELEMENT = "element"  # element description, not rendered yet
    MARKUP = "markup"  # raw DOM-like markup element


@dataclass(frozen=True)
class SerializedStyles:
    """A resolved style object: generated ``name`` plus raw CSS ``styles``."""

    name: str = ""
    styles: str = ""


@dataclass
class Node:
    """A single unit of a rendered tree."""

    type: Any
    props: dict[str, Any] = field(default_factory=dict)
    children: list[Any] | None = None
    kind: NodeKind = NodeKind.RENDERED
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def class_attr(self) -> str:
        """Name of the prop holding this node's class list."""
        return "class" if self.kind is NodeKind.MARKUP else "className"

    @property
    def class_name(self) -> str:
        return self.props.get(self.class_attr) or ""

    def clone(self, **overrides: Any) -> Node:
        """Copy every field, then apply *overrides*.

        ``props`` and ``meta`` are copied so the clone owns them.
        """
        overrides.setdefault("props", dict(self.props))
        overrides.setdefault("meta", dict(self.meta))
        return replace(self, **overrides)


def type_name(value: Any) -> str | None:
    """Return the printable name of a node type, or None if it has none."""
    if isinstance(value, str):
        return value
    name = getattr(value, "display_name", None) or getattr(value, "__name__", None)
    if isinstance(name, str):
        return name
    return None


def load_tree(data: Any, path: str = "$") -> Any:
    """Build Nodes out of JSON-like data.

    Dicts become Nodes (``type`` is required; ``kind`` defaults to
    ``rendered``), lists are loaded element-wise and primitives pass through.
    """
    if isinstance(data, list):
        return [load_tree(item, f"{path}[{i}]") for i, item in enumerate(data)]
    if not isinstance(data, dict):
        return data
    if "type" not in data:
        raise TreeFormatError(f"Node at {path} has no 'type'", path=path)
    try:
        kind = NodeKind(data.get("kind", NodeKind.RENDERED.value))
    except ValueError as e:
        raise TreeFormatError(f"Node at {path} has unknown kind {data['kind']!r}", path=path) from e

    props = dict(data.get("props") or {})
    css = props.get(CSS_PROP)
    if isinstance(css, dict):
        props[CSS_PROP] = _load_styles(css)
    elif isinstance(css, list):
        props[CSS_PROP] = [_load_styles(s) if isinstance(s, dict) else s for s in css]

    children = data.get("children")
    if children is not None:
        if not isinstance(children, list):
            children = [children]
        children = [load_tree(c, f"{path}.children[{i}]") for i, c in enumerate(children)]

    return Node(
        type=data["type"],
        props=props,
        children=children,
        kind=kind,
        meta=dict(data.get("meta") or {}),
    )


def _load_styles(data: dict[str, Any]) -> SerializedStyles:
    return SerializedStyles(name=data.get("name") or "", styles=data.get("styles") or "")
