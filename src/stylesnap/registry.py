"""Registry of active style sheets, keyed by the class-name prefix they generate."""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = [
    "StyleRegistry",
    "StyleSheet",
    "get_keys",
    "get_style_elements",
    "get_styles_from_class_names",
    "registry",
]

logger = logging.getLogger("stylesnap.registry")

# Class names generated for component selectors, e.g. ``e1x9r3k0``.
COMPONENT_SELECTOR_RE = re.compile(r"^e[a-zA-Z0-9]+[0-9]+$")

_KEYFRAMES_RE = re.compile(r"^@(?:-[a-z]+-)?keyframes\s+([^\s{]+)")


@dataclass(frozen=True)
class StyleSheet:
    """One sheet of rules inserted under a single registry key."""

    key: str
    rules: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return "".join(self.rules)


class StyleRegistry:
    """Process-wide store of inserted style rules.

    Sheets keep insertion order, and so do the rules within a sheet.
    :meth:`sheets` hands out an immutable snapshot, so a serialize call never
    observes rules inserted while it runs.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sheets: dict[str, list[str]] = {}

    def insert(self, key: str, rule: str) -> None:
        """Add *rule* to the sheet for *key*; duplicates are ignored."""
        if not key:
            raise ValueError("Style sheet key must be a non-empty string")
        with self._lock:
            rules = self._sheets.setdefault(key, [])
            if rule not in rules:
                rules.append(rule)
                logger.debug("Inserted rule into sheet %r (%d rules)", key, len(rules))

    def insert_all(self, key: str, rules: Iterable[str]) -> None:
        for rule in rules:
            self.insert(key, rule)

    def sheets(self) -> tuple[StyleSheet, ...]:
        with self._lock:
            return tuple(StyleSheet(key, tuple(rules)) for key, rules in self._sheets.items())

    def flush(self) -> None:
        """Remove every sheet."""
        with self._lock:
            self._sheets.clear()

    def __len__(self) -> int:
        with self._lock:
            return sum(len(rules) for rules in self._sheets.values())

    def __repr__(self) -> str:
        with self._lock:
            return f"StyleRegistry(keys={list(self._sheets)})"


registry = StyleRegistry()


def get_style_elements(source: StyleRegistry | None = None) -> tuple[StyleSheet, ...]:
    """Snapshot the sheets of *source* (the default registry when omitted)."""
    return (registry if source is None else source).sheets()


def get_keys(sheets: Iterable[StyleSheet]) -> list[str]:
    """Ordered unique registry keys of *sheets*."""
    return list(dict.fromkeys(sheet.key for sheet in sheets if sheet.key))


def get_styles_from_class_names(class_names: list[str], sheets: Iterable[StyleSheet]) -> str:
    """Concatenate, in registry order, every rule selecting one of *class_names*.

    Only class names generated by a registry key (or a component selector)
    take part. ``@keyframes`` rules referenced by the selected rules come first.
    """
    sheets = tuple(sheets)
    if not class_names:
        return ""
    keys = get_keys(sheets)
    if not keys:
        return ""

    key_prefixes = tuple(f"{key}-" for key in keys)
    filtered = [
        name
        for name in class_names
        if name.startswith(key_prefixes) or COMPONENT_SELECTOR_RE.match(name)
    ]
    if not filtered:
        return ""

    alternatives = "|".join(re.escape(name) for name in filtered)
    selector_re = re.compile(rf"\.(?:{alternatives})(?![\w-])")

    keyframes: dict[str, str] = {}
    styles: list[str] = []
    for sheet in sheets:
        for rule in sheet.rules:
            match = _KEYFRAMES_RE.match(rule.lstrip())
            if match:
                keyframes.setdefault(match.group(1), rule)
            elif selector_re.search(rule):
                styles.append(rule)

    text = "".join(styles)
    used = [
        rule
        for name, rule in keyframes.items()
        if re.search(rf"(?<![\w-]){re.escape(name)}(?![\w-])", text)
    ]
    return "".join(used) + text
