"""Pretty-printer for style sheet text.

Output shape::

    .css-1x2y3z,
    .css-1x2y3z:hover {
      color: red;
    }

    @media (min-width: 420px) {
      .css-1x2y3z {
        color: blue;
      }
    }
"""

from __future__ import annotations

from stylesnap.css.model import Block, Declaration
from stylesnap.css.transformer import parse_css

__all__ = ["prettify", "split_rules"]


def _split_selectors(prelude: str) -> list[str]:
    """Split a selector list on top-level commas."""
    selectors: list[str] = []
    depth = 0
    quote = ""
    current: list[str] = []
    escaped = False
    for char in prelude:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif quote:
            if char == quote:
                quote = ""
        elif char in "\"'":
            quote = char
        elif char in "([":
            depth += 1
        elif char in ")]":
            depth = max(depth - 1, 0)
        elif char == "," and depth == 0:
            selectors.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    selectors.append("".join(current).strip())
    return [s for s in selectors if s]


def _render(item: Declaration | Block, indentation: str, depth: int) -> str:
    pad = indentation * depth
    if isinstance(item, Declaration):
        return f"{pad}{item.text};"
    selectors = [item.prelude] if item.is_at_rule else _split_selectors(item.prelude)
    header = ",\n".join(f"{pad}{selector}" for selector in selectors)
    body = _render_items(item.children, indentation, depth + 1)
    if not body:
        return f"{header} {{\n{pad}}}"
    return f"{header} {{\n{body}\n{pad}}}"


def _render_items(items: list[Declaration | Block], indentation: str, depth: int) -> str:
    out = ""
    previous: Declaration | Block | None = None
    for item in items:
        if previous is not None:
            both_declarations = isinstance(item, Declaration) and isinstance(previous, Declaration)
            out += "\n" if both_declarations else "\n\n"
        out += _render(item, indentation, depth)
        previous = item
    return out


def _compact(item: Declaration | Block) -> str:
    if isinstance(item, Declaration):
        return item.text.replace(": ", ":", 1) + ";"
    return item.prelude + "{" + "".join(_compact(child) for child in item.children) + "}"


def split_rules(css: str) -> list[str]:
    """Split style sheet text into minified top-level rules."""
    if not css or not css.strip():
        return []
    return [_compact(item) for item in parse_css(css).items]


def prettify(css: str, indentation: str = "  ") -> str:
    """Format *css* with one declaration per line and blank lines between rules."""
    if not css or not css.strip():
        return ""
    return _render_items(parse_css(css).items, indentation, 0)
