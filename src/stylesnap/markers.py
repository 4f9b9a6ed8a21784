"""Style marker resolution.

A node carrying a ``css`` prop reaches the printer in one of two shapes:

* an element description of the css-prop wrapper (``NodeKind.ELEMENT``),
  whose real type sits in the ``__STYLED_TYPE__`` prop, or
* a shallow render of the wrapper (``NodeKind.RENDERED`` typed
  ``CssPropInternal``). If the render stopped at the wrapper, the class
  name the real element would have received must be manufactured here;
  if the inner element was rendered too, the wrapper is unwrapped.

Both end up printed as the real element with a ``className``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Callable

from stylesnap.errors import MarkerTypeError
from stylesnap.model.node import CSS_PROP, LABEL_PROP, TYPE_PROP, Node, type_name
from stylesnap.predicates import (
    is_primitive,
    is_renderable_element,
    is_shallow_style_marker_element,
    is_style_marker_element,
)

__all__ = [
    "create_convert_style_elements",
    "filter_style_props",
    "get_expected_class_names",
    "get_labels_from_css",
    "is_shallow_element",
]

_LABEL_RE = re.compile(r"(?<![^;])label:([^;]+);")

UNKNOWN_STYLES = "unknown styles"


def _field(style: Any, name: str) -> str:
    if isinstance(style, Mapping):
        value = style.get(name)
    else:
        value = getattr(style, name, None)
    return value if isinstance(value, str) else ""


def _entries(css: Any) -> list[Any]:
    if css is None:
        return []
    return list(css) if isinstance(css, (list, tuple)) else [css]


def get_labels_from_css(css: Any) -> list[str]:
    """Collect every ``label:`` directive of a style marker, in order."""
    labels: list[str] = []
    for style in _entries(css):
        text = style if isinstance(style, str) else _field(style, "styles")
        labels.extend(label for label in _LABEL_RE.findall(text) if label)
    return labels


def get_expected_class_names(css: Any, keys: list[str]) -> list[str]:
    """Class names a style marker renders to: ``<key>-<name token>``."""
    names = [_field(style, "name") for style in _entries(css) if not isinstance(style, str)]
    tokens = " ".join(name for name in names if name).split()
    return [f"{key}-{token}" for token in tokens for key in keys]


def _child_labels(class_name: str, keys: list[str]) -> list[str]:
    for key in keys:
        if class_name.startswith(f"{key}-"):
            parts = class_name[len(key) + 1 :].split("-")
            # <key>-<hash>-<label>...; a token without a hash carries labels only
            return parts[1:] or parts
    return []


def is_shallow_element(node: Node, keys: list[str], labels: list[str]) -> bool:
    """True unless an immediate child already holds this marker's class name."""
    return _first_resolved_child(node, keys, labels) is None


def _first_resolved_child(node: Node, keys: list[str], labels: list[str]) -> Any:
    for child in node.children or ():
        if not isinstance(child, Node):
            continue
        for class_name in filter(None, child.class_name.split(" ")):
            child_labels = _child_labels(class_name, keys)
            if child_labels and all(label in labels for label in child_labels):
                return child
    return None


def filter_style_props(props: dict[str, Any]) -> dict[str, Any]:
    """Drop runtime-only props; the ``css`` prop becomes a placeholder."""
    rest = {k: v for k, v in props.items() if k not in (CSS_PROP, TYPE_PROP, LABEL_PROP)}
    rest[CSS_PROP] = UNKNOWN_STYLES
    return rest


def _resolve_type(node: Node) -> tuple[Any, str]:
    """Return the real type of a wrapper and its printable name."""
    styled_type = node.props.get(TYPE_PROP)
    name = type_name(styled_type)
    if name is None:
        raise MarkerTypeError(
            f"Cannot resolve the element type of <{type_name(node.type)}> "
            f"with props {sorted(node.props)}: {TYPE_PROP} is {styled_type!r}",
            node=node,
        )
    return styled_type, name


def create_convert_style_elements(keys: list[str]) -> Callable[[Any], Any]:
    """Build the per-node rewrite used by :func:`stylesnap.tree.deep_transform`."""

    def convert(node: Any) -> Any:
        if is_primitive(node):
            return node

        if is_shallow_style_marker_element(node):
            css = node.props.get(CSS_PROP)
            labels = get_labels_from_css(css)
            resolved = _first_resolved_child(node, keys, labels)
            if resolved is not None:
                return resolved.clone()
            # Nothing below rendered the real element, so its class name
            # has to be manufactured.
            expected = get_expected_class_names(css, keys)
            class_name = " ".join(filter(None, [node.props.get("className"), *expected]))
            return node.clone(
                props=filter_style_props({**node.props, "className": class_name}),
                type=_resolve_type(node)[1],
            )

        if is_style_marker_element(node):
            styled_type, _ = _resolve_type(node)
            return node.clone(props=filter_style_props(node.props), type=styled_type)

        if is_renderable_element(node):
            return node.clone()

        return node

    return convert
