"""Lark Transformer that converts a style sheet parse tree into a Stylesheet model."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer

from stylesnap.css.errors import CssParseError
from stylesnap.css.model import Block, Declaration, Stylesheet

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_SPACE_RE = re.compile(r"\s+")


def _squash(text: str) -> str:
    return _SPACE_RE.sub(" ", text).strip()


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Declaration and Block objects."""

    def declaration(self, items: list[Token]) -> Declaration:
        raw = _squash(str(items[0]))
        if raw.startswith("@") or ":" not in raw:
            return Declaration(raw)
        name, value = raw.split(":", 1)
        return Declaration(f"{name.strip()}: {value.strip()}")

    def block(self, items: list[object]) -> Block:
        prelude = _squash(str(items[0]))
        children = [item for item in items[1:] if isinstance(item, (Declaration, Block))]
        return Block(prelude=prelude, children=children)

    def start(self, items: list[object]) -> Stylesheet:
        return Stylesheet(items=[item for item in items if isinstance(item, (Declaration, Block))])


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_css(source: str) -> Stylesheet:
    """Parse style sheet text into a Stylesheet model."""
    try:
        tree = _parser().parse(source)
    except Exception as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise CssParseError(str(e), line=line, column=column) from e
    return CssTransformer().transform(tree)
