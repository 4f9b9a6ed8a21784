"""Class-name collection and post-transform cleanup."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from stylesnap.model.node import CSS_PROP, Node, NodeKind

__all__ = ["clean", "get_class_names_from_nodes", "has_intersection"]


def get_class_names_from_nodes(nodes: Iterable[Node]) -> list[str]:
    """Ordered-unique class names across *nodes*, in order of first appearance."""
    seen: dict[str, None] = {}
    for node in nodes:
        for class_name in node.class_name.split(" "):
            if class_name:
                seen.setdefault(class_name, None)
    return list(seen)


def has_intersection(left: Iterable[str], right: Iterable[str]) -> bool:
    right_set = set(right)
    return any(item in right_set for item in left)


def clean(node: Any, class_names: list[str]) -> None:
    """Tidy a transformed tree in place.

    Empty class attributes are removed. A node whose class list holds a
    collected class name loses its leftover ``css`` prop, since its styles are
    printed alongside the tree. Markup nodes are left as given, since they
    are never copied by the transform.
    """
    if isinstance(node, list):
        for child in node:
            clean(child, class_names)
        return
    if not isinstance(node, Node) or node.kind is NodeKind.MARKUP:
        return
    for child in node.children or ():
        clean(child, class_names)

    class_name = node.props.get(node.class_attr)
    if not class_name:
        node.props.pop(node.class_attr, None)
    elif has_intersection(class_name.split(" "), class_names):
        node.props.pop(CSS_PROP, None)
