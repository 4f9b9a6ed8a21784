"""Style sheet model: Declaration, Block, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Declaration:
    """A ``property: value`` pair, or an at-statement such as ``@import``."""

    text: str

    @property
    def is_at_statement(self) -> bool:
        return self.text.startswith("@")


@dataclass(frozen=True)
class Block:
    """A prelude with a braced body: a style rule or a nested at-rule."""

    prelude: str
    children: list[Declaration | Block] = field(default_factory=list)

    @property
    def is_at_rule(self) -> bool:
        return self.prelude.startswith("@")


@dataclass(frozen=True)
class Stylesheet:
    """Top-level items of a style sheet in source order."""

    items: list[Declaration | Block] = field(default_factory=list)
