"""Classifiers over tree values.

None of these raise: anything that is not a :class:`Node` is simply not an
element.
"""

from __future__ import annotations

from typing import Any

from stylesnap.model.node import CSS_PROP_WRAPPER, Node, NodeKind, type_name

_PRIMITIVES = (str, int, float, bool, type(None))


def is_primitive(value: Any) -> bool:
    return isinstance(value, _PRIMITIVES)


def is_renderable_element(value: Any) -> bool:
    """Rendered output or an element description."""
    return isinstance(value, Node) and value.kind in (NodeKind.RENDERED, NodeKind.ELEMENT)


def is_markup_element(value: Any) -> bool:
    return isinstance(value, Node) and value.kind is NodeKind.MARKUP


def is_style_marker_element(value: Any) -> bool:
    """An element description whose type is the css-prop wrapper component.

    The type may be the component itself or, for trees loaded from JSON, its
    name.
    """
    return (
        isinstance(value, Node)
        and value.kind is NodeKind.ELEMENT
        and type_name(value.type) == CSS_PROP_WRAPPER
    )


def is_shallow_style_marker_element(value: Any) -> bool:
    """A shallow render of the css-prop wrapper, printed under its name."""
    return (
        isinstance(value, Node)
        and value.kind is NodeKind.RENDERED
        and value.type == CSS_PROP_WRAPPER
    )
