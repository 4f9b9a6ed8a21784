"""Syrupy snapshot extension for styled trees.

Each snapshot is stored in its own ``.snap`` file holding the formatted CSS
followed by the printed tree::

    def test_button(snapshot):
        assert render_button() == snapshot(extension_class=StyledSnapshotExtension)
"""

from __future__ import annotations

import typing as t

from syrupy.extensions.single_file import SingleFileSnapshotExtension, WriteMode

from stylesnap.config import SerializerOptions
from stylesnap.model.node import Node
from stylesnap.printer import pretty_format
from stylesnap.replace import default_class_name_replacer
from stylesnap.serializer import create_serializer


class StyledSnapshotExtension(SingleFileSnapshotExtension):
    """Single-file extension for Node trees (.snap files).

    Subclasses may override ``serializer_options`` or ``indent``. Generated
    class names are renamed to ``emotion-<n>`` by default so snapshots do not
    depend on style hashes.
    """

    _write_mode = WriteMode.TEXT
    file_extension = "snap"

    serializer_options = SerializerOptions(class_name_replacer=default_class_name_replacer)
    indent = "  "

    def serialize(
        self,
        data: t.Any,
        *,
        exclude: t.Any = None,
        include: t.Any = None,
        matcher: t.Any = None,
    ) -> str:
        """Print Nodes (or lists of them) with their styles, other data with str()."""
        if isinstance(data, (Node, list)):
            serializer = create_serializer(self.serializer_options)
            return pretty_format(data, plugins=[serializer], indent=self.indent)
        return str(data)
