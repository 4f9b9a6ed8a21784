from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class SerializerOptions:
    class_name_replacer: Callable[[str, int], str] | None = None
    dom_elements: bool = True  # also accept raw markup trees
