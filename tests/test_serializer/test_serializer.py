"""Tests for the snapshot serializer."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from stylesnap.config import SerializerOptions
from stylesnap.errors import MarkerTypeError
from stylesnap.model import CSS_PROP_WRAPPER, TYPE_PROP, Node, NodeKind, SerializedStyles
from stylesnap.printer import PrinterConfig, pretty_format
from stylesnap.registry import StyleRegistry
from stylesnap.replace import default_class_name_replacer
from stylesnap.serializer import StyleSerializer, create_serializer


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class CssPropInternal:
    pass


def Button():  # noqa: N802
    return None


@pytest.fixture()
def reg() -> StyleRegistry:
    registry = StyleRegistry()
    registry.insert("css", ".css-abc123{color:red;}")
    registry.insert("css", ".css-def456:hover{color:blue;}")
    registry.insert("emo", ".emo-xyz1{margin:0;}")
    return registry


def _styled_tree() -> Node:
    return Node(
        "div",
        {"className": "css-abc123 outer"},
        [
            Node("span", {"className": "css-def456"}, ["hello"]),
            Node("em", {"className": ""}),
        ],
    )


def _print(serializer: StyleSerializer, tree: Any) -> str:
    return pretty_format(tree, plugins=[serializer])


# ---------------------------------------------------------------------------
# create_serializer / options
# ---------------------------------------------------------------------------


class TestOptions:
    def test_defaults(self) -> None:
        options = SerializerOptions()
        assert options.class_name_replacer is None
        assert options.dom_elements is True

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            SerializerOptions().dom_elements = False  # type: ignore[misc]

    def test_keyword_overrides(self) -> None:
        serializer = create_serializer(dom_elements=False)
        assert serializer.options == SerializerOptions(dom_elements=False)

    def test_overrides_update_given_options(self) -> None:
        base = SerializerOptions(class_name_replacer=default_class_name_replacer)
        serializer = create_serializer(base, dom_elements=False)
        assert serializer.options.class_name_replacer is default_class_name_replacer
        assert serializer.options.dom_elements is False


# ---------------------------------------------------------------------------
# test()
# ---------------------------------------------------------------------------


class TestEligibility:
    def test_null_values(self) -> None:
        serializer = create_serializer()
        assert serializer.test(None) is False

    def test_plain_objects(self) -> None:
        for dom_elements in (True, False):
            serializer = create_serializer(dom_elements=dom_elements)
            assert serializer.test({}) is False
            assert serializer.test({"type": "div"}) is False
            assert serializer.test("text") is False
            assert serializer.test(0) is False

    def test_renderable_elements(self) -> None:
        serializer = create_serializer()
        assert serializer.test(Node("div"))
        assert serializer.test(Node(CssPropInternal, kind=NodeKind.ELEMENT))

    def test_markup_depends_on_option(self) -> None:
        markup = Node("div", kind=NodeKind.MARKUP)
        assert create_serializer().test(markup)
        assert not create_serializer(dom_elements=False).test(markup)


# ---------------------------------------------------------------------------
# serialize()
# ---------------------------------------------------------------------------


class TestSerialize:
    def test_styles_printed_before_tree(self, reg: StyleRegistry) -> None:
        out = _print(create_serializer(registry=reg), _styled_tree())
        assert out == (
            ".css-abc123 {\n"
            "  color: red;\n"
            "}\n"
            "\n"
            ".css-def456:hover {\n"
            "  color: blue;\n"
            "}\n"
            "\n"
            "<div\n"
            '  className="css-abc123 outer"\n'
            ">\n"
            "  <span\n"
            '    className="css-def456"\n'
            "  >\n"
            "    hello\n"
            "  </span>\n"
            "  <em />\n"
            "</div>"
        )

    def test_class_name_replacer(self, reg: StyleRegistry) -> None:
        serializer = create_serializer(registry=reg, class_name_replacer=default_class_name_replacer)
        out = _print(serializer, _styled_tree())
        assert "css-abc123" not in out
        assert "css-def456" not in out
        assert ".emotion-0 {" in out
        assert ".emotion-1:hover {" in out
        assert 'className="emotion-0 outer"' in out

    def test_no_styles_no_prefix(self) -> None:
        out = _print(create_serializer(registry=StyleRegistry()), Node("p", {"className": "x"}))
        assert out == '<p\n  className="x"\n/>'

    def test_uses_config_indent(self, reg: StyleRegistry) -> None:
        tree = Node("p", {"className": "css-abc123"})
        out = pretty_format(tree, plugins=[create_serializer(registry=reg)], indent="    ")
        assert out == '.css-abc123 {\n    color: red;\n}\n\n<p\n    className="css-abc123"\n/>'

    def test_input_tree_is_not_mutated(self, reg: StyleRegistry) -> None:
        tree = _styled_tree()
        _print(create_serializer(registry=reg), tree)
        assert tree == _styled_tree()

    def test_round_trip_determinism(self, reg: StyleRegistry) -> None:
        serializer = create_serializer(registry=reg, class_name_replacer=default_class_name_replacer)
        assert _print(serializer, _styled_tree()) == _print(serializer, _styled_tree())

    def test_registry_snapshot_per_call(self, reg: StyleRegistry) -> None:
        serializer = create_serializer(registry=reg)
        tree = Node("p", {"className": "css-late"})
        assert _print(serializer, tree) == '<p\n  className="css-late"\n/>'
        reg.insert("css", ".css-late{color:pink;}")
        assert _print(serializer, tree).startswith(".css-late {")

    def test_markup_tree(self, reg: StyleRegistry) -> None:
        tree = Node("div", {"class": "css-abc123"}, ["x"], kind=NodeKind.MARKUP)
        out = _print(create_serializer(registry=reg), tree)
        assert out == '.css-abc123 {\n  color: red;\n}\n\n<div\n  class="css-abc123"\n>\n  x\n</div>'

    def test_debug_logging(self, reg: StyleRegistry, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="stylesnap.serializer"):
            _print(create_serializer(registry=reg), _styled_tree())
        assert "Serializing 3 node(s): 3 class name(s), 2 registry key(s)" in caplog.text


class TestStyleMarkers:
    def test_shallow_marker_synthesizes_class_name(self, reg: StyleRegistry) -> None:
        tree = Node(
            CSS_PROP_WRAPPER,
            {"css": SerializedStyles("xyz1", "margin:0;"), TYPE_PROP: "span"},
        )
        out = _print(create_serializer(registry=reg), tree)
        assert out == '.emo-xyz1 {\n  margin: 0;\n}\n\n<span\n  className="css-xyz1 emo-xyz1"\n/>'

    def test_shallow_marker_with_rendered_child_is_unwrapped(self, reg: StyleRegistry) -> None:
        child = Node("div", {"className": "css-abc123-Box"}, ["hi"])
        tree = Node(
            "main",
            children=[
                Node(
                    CSS_PROP_WRAPPER,
                    {"css": SerializedStyles("abc123", "color:red;label:Box;"), TYPE_PROP: "div"},
                    [child],
                )
            ],
        )
        out = _print(create_serializer(registry=reg), tree)
        assert out == '<main>\n  <div\n    className="css-abc123-Box"\n  >\n    hi\n  </div>\n</main>'

    def test_element_marker_keeps_unknown_styles_placeholder(self, reg: StyleRegistry) -> None:
        tree = Node(
            CssPropInternal,
            {"css": SerializedStyles("abc123", "color:red;"), TYPE_PROP: Button},
            kind=NodeKind.ELEMENT,
        )
        out = _print(create_serializer(registry=reg), tree)
        assert out == '<Button\n  css="unknown styles"\n/>'

    def test_marker_type_error_propagates(self, reg: StyleRegistry) -> None:
        serializer = create_serializer(registry=reg)
        tree = Node(CSS_PROP_WRAPPER, {"css": SerializedStyles("a"), TYPE_PROP: 3.5})
        with pytest.raises(MarkerTypeError):
            _print(serializer, tree)
        assert serializer.test(tree)


# ---------------------------------------------------------------------------
# Ownership guard
# ---------------------------------------------------------------------------


class TestOwnershipGuard:
    def test_nodes_are_owned_while_printing(self, reg: StyleRegistry) -> None:
        serializer = create_serializer(registry=reg)
        seen: dict[str, Any] = {}

        def printer(tree: Any, config: Any, indentation: str, depth: int, refs: list[Any]) -> str:
            seen["tree"] = tree
            seen["root"] = serializer.test(tree)
            seen["child"] = serializer.test(tree.children[0])
            return "printed"

        out = serializer.serialize(_styled_tree(), PrinterConfig(), "", 0, [], printer)
        assert out.endswith("\n\nprinted")
        assert seen["root"] is False
        assert seen["child"] is False
        assert serializer.test(seen["tree"]) is True

    def test_guard_released_when_printer_fails(self, reg: StyleRegistry) -> None:
        serializer = create_serializer(registry=reg)
        seen: dict[str, Any] = {}

        def printer(tree: Any, *args: Any) -> str:
            seen["tree"] = tree
            raise RuntimeError("printer exploded")

        with pytest.raises(RuntimeError, match="printer exploded"):
            serializer.serialize(_styled_tree(), PrinterConfig(), "", 0, [], printer)
        assert not serializer.is_owned(seen["tree"])
        assert serializer.test(seen["tree"])
        assert serializer.test(seen["tree"].children[0])

    def test_structurally_equal_nodes_are_independent(self, reg: StyleRegistry) -> None:
        serializer = create_serializer(registry=reg)
        other = _styled_tree()
        seen: dict[str, bool] = {}

        def printer(tree: Any, *args: Any) -> str:
            seen["other"] = serializer.test(other)
            return ""

        serializer.serialize(_styled_tree(), PrinterConfig(), "", 0, [], printer)
        assert seen["other"] is True

    def test_nested_serialize_keeps_outer_ownership(self, reg: StyleRegistry) -> None:
        serializer = create_serializer(registry=reg)
        inner_tree = Node("b", {"className": "css-abc123"})
        seen: dict[str, Any] = {}

        def inner_printer(tree: Any, *args: Any) -> str:
            return "inner"

        def outer_printer(tree: Any, config: Any, indentation: str, depth: int, refs: list[Any]) -> str:
            serializer.serialize(inner_tree, config, indentation, depth, refs, inner_printer)
            seen["outer_owned"] = serializer.is_owned(tree)
            return "outer"

        serializer.serialize(_styled_tree(), PrinterConfig(), "", 0, [], outer_printer)
        assert seen["outer_owned"] is True

    def test_printer_callbacks_fall_through_to_default(self, reg: StyleRegistry) -> None:
        calls: list[Any] = []
        serializer = create_serializer(registry=reg)
        original = serializer.serialize

        def counting(value: Any, *args: Any) -> str:
            calls.append(value)
            return original(value, *args)

        serializer.serialize = counting  # type: ignore[method-assign]
        _print(serializer, _styled_tree())
        assert len(calls) == 1
