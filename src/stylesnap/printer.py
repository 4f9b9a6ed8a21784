"""Plugin-aware pretty-printer for trees of nodes.

Every printing function follows the same convention: it receives the
indentation of the line it starts on and returns text whose first line is
not indented and whose following lines carry their full indentation.

Plugins are consulted for every value, nested values included, before the
built-in formatting applies::

    pretty_format(tree, plugins=[create_serializer()])
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from stylesnap.model.node import Node, type_name

__all__ = ["Plugin", "PrinterConfig", "pretty_format", "print_value"]


class Plugin(Protocol):
    """A value printer the pretty-printer delegates to."""

    def test(self, value: Any) -> bool: ...

    def serialize(
        self,
        value: Any,
        config: PrinterConfig,
        indentation: str,
        depth: int,
        refs: list[Any],
        printer: Callable[..., str],
    ) -> str: ...


@dataclass(frozen=True)
class PrinterConfig:
    indent: str = "  "
    plugins: tuple[Plugin, ...] = ()
    max_depth: int | None = None


def _escape_text(text: str) -> str:
    return text.replace("<", "&lt;").replace(">", "&gt;")


def _print_primitive(value: Any) -> str:
    if isinstance(value, str):
        return '"' + value.replace('"', '\\"') + '"'
    return repr(value)


def _print_prop_value(value: Any, config: PrinterConfig, indentation: str, depth: int, refs: list[Any]) -> str:
    if isinstance(value, str):
        return '"' + value.replace('"', "&quot;") + '"'
    return "{" + print_value(value, config, indentation, depth, refs) + "}"


def _print_element(node: Node, config: PrinterConfig, indentation: str, depth: int, refs: list[Any]) -> str:
    tag = type_name(node.type) or "Unknown"
    if config.max_depth is not None and depth > config.max_depth:
        return f"[{tag}]"

    refs = [*refs, node]
    inner = indentation + config.indent

    printed_props = "".join(
        f"\n{inner}{key}={_print_prop_value(node.props[key], config, inner, depth + 1, refs)}"
        for key in sorted(node.props)
        if key != "children"
    )
    printed_children = "".join(
        f"\n{inner}"
        + (
            _escape_text(child)
            if isinstance(child, str)
            else print_value(child, config, inner, depth + 1, refs)
        )
        for child in node.children or ()
        if child is not None and child is not False and child is not True
    )

    out = "<" + tag
    if printed_props:
        out += printed_props + "\n" + indentation
    if printed_children:
        return out + ">" + printed_children + "\n" + indentation + "</" + tag + ">"
    return out + ("" if printed_props else " ") + "/>"


def _print_list(items: list[Any], config: PrinterConfig, indentation: str, depth: int, refs: list[Any]) -> str:
    if not items:
        return "[]"
    inner = indentation + config.indent
    body = "".join(
        f"\n{inner}{print_value(item, config, inner, depth + 1, refs)},"
        for item in items
    )
    return "[" + body + "\n" + indentation + "]"


def _print_mapping(value: Mapping[Any, Any], config: PrinterConfig, indentation: str, depth: int, refs: list[Any]) -> str:
    if not value:
        return "{}"
    inner = indentation + config.indent
    body = "".join(
        f"\n{inner}{_print_primitive(key)}: {print_value(value[key], config, inner, depth + 1, refs)},"
        for key in sorted(value, key=str)
    )
    return "{" + body + "\n" + indentation + "}"


def print_value(
    value: Any,
    config: PrinterConfig,
    indentation: str = "",
    depth: int = 0,
    refs: list[Any] | None = None,
) -> str:
    """Print *value*, giving plugins the first chance at it."""
    refs = refs if refs is not None else []
    for plugin in config.plugins:
        if plugin.test(value):
            return plugin.serialize(value, config, indentation, depth, refs, print_value)

    if any(ref is value for ref in refs):
        return "[Circular]"
    if isinstance(value, Node):
        return _print_element(value, config, indentation, depth, refs)
    if isinstance(value, (list, tuple)):
        return _print_list(list(value), config, indentation, depth, [*refs, value])
    if isinstance(value, Mapping):
        return _print_mapping(value, config, indentation, depth, [*refs, value])
    if callable(value):
        return f"[Function {getattr(value, '__name__', 'anonymous')}]"
    return _print_primitive(value)


def pretty_format(
    value: Any,
    plugins: list[Plugin] | tuple[Plugin, ...] = (),
    indent: str = "  ",
    max_depth: int | None = None,
) -> str:
    """Print *value* to text using *plugins*."""
    config = PrinterConfig(indent=indent, plugins=tuple(plugins), max_depth=max_depth)
    return print_value(value, config)
