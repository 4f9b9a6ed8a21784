"""Tree walking and structural transformation."""

from __future__ import annotations

from typing import Any, Callable

from stylesnap.model.node import Node

__all__ = ["deep_transform", "flatten", "get_nodes"]


def get_nodes(node: Any, nodes: list[Node] | None = None) -> list[Node]:
    """Return every Node reachable from *node*, depth-first in document order.

    Lists are traversed but not emitted, primitives are skipped, and a node is
    emitted before its children.
    """
    if nodes is None:
        nodes = []
    if isinstance(node, list):
        for child in node:
            get_nodes(child, nodes)
        return nodes
    if isinstance(node, Node):
        nodes.append(node)
        for child in node.children or ():
            get_nodes(child, nodes)
    return nodes


def flatten(items: list[Any]) -> list[Any]:
    """Flatten one level of nesting."""
    flat: list[Any] = []
    for item in items:
        if isinstance(item, list):
            flat.extend(item)
        else:
            flat.append(item)
    return flat


def deep_transform(node: Any, transform: Callable[[Any], Any]) -> Any:
    """Apply *transform* top-down and return a new tree of the same shape.

    When *transform* returns its argument unchanged, recursion stops there.
    A node's transformed children are flattened one level, so a child may
    expand into several siblings (``<A><B /><C /></A>`` -> ``<B /><C />``).
    """
    if isinstance(node, list):
        return [deep_transform(child, transform) for child in node]

    transformed = transform(node)

    if transformed is not node and isinstance(transformed, Node) and transformed.children:
        children = flatten(deep_transform(transformed.children, transform))
        return transformed.clone(children=children)

    return transformed
