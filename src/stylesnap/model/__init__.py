from stylesnap.model.node import (
    CSS_PROP,
    CSS_PROP_WRAPPER,
    LABEL_PROP,
    TYPE_PROP,
    Node,
    NodeKind,
    SerializedStyles,
    load_tree,
    type_name,
)

__all__ = [
    "CSS_PROP",
    "CSS_PROP_WRAPPER",
    "LABEL_PROP",
    "TYPE_PROP",
    "Node",
    "NodeKind",
    "SerializedStyles",
    "load_tree",
    "type_name",
]
