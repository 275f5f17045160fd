from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def to_text_fragment(value: Any) -> str:
    """Coerce a buffer input to text the way TS interpolation would."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class TextBuffer:
    """
    Append-only sequence of text fragments.
    The final text is the fragments joined in order with no separators.
    """
    parts: list[str] = field(default_factory=list)

    def append(self, text: Any = "") -> "TextBuffer":
        self.parts.append(to_text_fragment(text))
        return self

    def append_line(self, text: Any = "") -> "TextBuffer":
        self.parts.append(to_text_fragment(text) + "\n")
        return self

    @property
    def length(self) -> int:
        return len(self.to_text())

    def to_text(self) -> str:
        return "".join(self.parts)

    def clear(self) -> None:
        self.parts.clear()

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return self.to_text()
