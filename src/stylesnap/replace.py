"""Splice formatted styles into printed output and rename generated class names."""

from __future__ import annotations

import re
from typing import Callable

from stylesnap.registry import COMPONENT_SELECTOR_RE

__all__ = ["ClassNameReplacer", "default_class_name_replacer", "replace_class_names"]

ClassNameReplacer = Callable[[str, int], str]


def default_class_name_replacer(class_name: str, index: int) -> str:
    """Replace hashed class names with stable ``emotion-<index>`` names."""
    return f"emotion-{index}"


def replace_class_names(
    class_names: list[str],
    styles: str,
    code: str,
    keys: list[str],
    class_name_replacer: ClassNameReplacer | None = None,
) -> str:
    """Prefix *code* with *styles* and pass generated class names through the replacer.

    Only class names generated by one of *keys* (or component selectors) are
    replaced; ``index`` counts those names in collection order. Without a
    replacer class names are printed verbatim.
    """
    result = f"{styles}\n\n{code}" if styles else code
    if class_name_replacer is None:
        return result

    prefixes = tuple(f"{key}-" for key in keys)
    index = 0
    for class_name in class_names:
        if not (prefixes and class_name.startswith(prefixes)) and not COMPONENT_SELECTOR_RE.match(
            class_name
        ):
            continue
        replacement = class_name_replacer(class_name, index)
        index += 1
        pattern = re.compile(rf"(?<![\w-]){re.escape(class_name)}(?![\w-])")
        result = pattern.sub(lambda _: replacement, result)
    return result
