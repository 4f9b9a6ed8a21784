"""stylesnap - snapshot printing for CSS-in-JS style trees."""

__version__ = "0.1.0"

from stylesnap.config import SerializerOptions  # noqa: E402
from stylesnap.css import prettify  # noqa: E402
from stylesnap.errors import MarkerTypeError, StyleSnapError, TreeFormatError  # noqa: E402
from stylesnap.model import Node, NodeKind, SerializedStyles, load_tree  # noqa: E402
from stylesnap.printer import pretty_format  # noqa: E402
from stylesnap.registry import StyleRegistry, registry  # noqa: E402
from stylesnap.replace import default_class_name_replacer  # noqa: E402
from stylesnap.serializer import StyleSerializer, create_serializer  # noqa: E402

__all__ = [
    "__version__",
    "MarkerTypeError",
    "Node",
    "NodeKind",
    "SerializedStyles",
    "SerializerOptions",
    "StyleRegistry",
    "StyleSerializer",
    "StyleSnapError",
    "TreeFormatError",
    "create_serializer",
    "default_class_name_replacer",
    "load_tree",
    "pretty_format",
    "prettify",
    "registry",
]
