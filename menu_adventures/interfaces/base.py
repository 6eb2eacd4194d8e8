"""
Shared text handling for interfaces.
"""

import textwrap

from menu_adventures.config import get_text_width


class TextInterface:
    """Implements the write methods on top of a single `write`.

    Subclasses provide `write` and `present_menu`.
    """

    def __init__(self, width: int | None = None):
        self.width = width or get_text_width()

    def write(self, text: str) -> None:
        raise NotImplementedError

    def write_line(self, text: str = "") -> None:
        self.write(text + "\n")

    def write_wrapped(self, text: str) -> None:
        """Fill each paragraph to the width; keeps explicit line breaks."""
        lines = [textwrap.fill(line, self.width) if line else "" for line in text.split("\n")]
        self.write_line("\n".join(lines))
