"""Snapshot serializer that prints resolved styles next to the tree they style."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Callable

from stylesnap.config import SerializerOptions
from stylesnap.css import prettify
from stylesnap.extraction import clean, get_class_names_from_nodes
from stylesnap.markers import create_convert_style_elements
from stylesnap.model.node import Node
from stylesnap.predicates import is_markup_element, is_renderable_element
from stylesnap.registry import StyleRegistry, get_keys, get_style_elements, get_styles_from_class_names
from stylesnap.replace import replace_class_names
from stylesnap.tree import deep_transform, get_nodes

__all__ = ["StyleSerializer", "create_serializer"]

logger = logging.getLogger("stylesnap.serializer")

Printer = Callable[..., str]


class StyleSerializer:
    """Printer plugin: ``test`` picks the values, ``serialize`` prints them.

    While the delegated printer runs, every node of the transformed tree is
    owned by this serializer and ``test`` rejects it, so a printer that calls
    back into its plugins for nested values falls through to its default
    formatting instead of re-processing them.
    """

    def __init__(
        self,
        options: SerializerOptions | None = None,
        registry: StyleRegistry | None = None,
    ) -> None:
        self.options = options or SerializerOptions()
        self._registry = registry
        self._owned: Counter[int] = Counter()

    def is_owned(self, value: Any) -> bool:
        return self._owned[id(value)] > 0

    @contextmanager
    def _owning(self, nodes: list[Node]) -> Iterator[None]:
        ids = [id(node) for node in nodes]
        self._owned.update(ids)
        try:
            yield
        finally:
            self._owned.subtract(ids)
            self._owned += Counter()  # drop zero counts

    def test(self, value: Any) -> bool:
        if value is None or self.is_owned(value):
            return False
        return is_renderable_element(value) or (
            self.options.dom_elements and is_markup_element(value)
        )

    def serialize(
        self,
        value: Any,
        config: Any,
        indentation: str,
        depth: int,
        refs: list[Any],
        printer: Printer,
    ) -> str:
        sheets = get_style_elements(self._registry)
        keys = get_keys(sheets)
        converted = deep_transform(value, create_convert_style_elements(keys))
        nodes = get_nodes(converted)
        class_names = get_class_names_from_nodes(nodes)
        styles = prettify(
            get_styles_from_class_names(class_names, sheets),
            getattr(config, "indent", "  "),
        )
        clean(converted, class_names)
        logger.debug(
            "Serializing %d node(s): %d class name(s), %d registry key(s)",
            len(nodes),
            len(class_names),
            len(keys),
        )

        with self._owning(nodes):
            printed = printer(converted, config, indentation, depth, refs)

        return replace_class_names(
            class_names,
            styles,
            printed,
            keys,
            self.options.class_name_replacer,
        )


def create_serializer(
    options: SerializerOptions | None = None,
    registry: StyleRegistry | None = None,
    **overrides: Any,
) -> StyleSerializer:
    """Create a serializer; keyword *overrides* update fields of *options*."""
    options = options or SerializerOptions()
    if overrides:
        options = replace(options, **overrides)
    return StyleSerializer(options, registry=registry)
