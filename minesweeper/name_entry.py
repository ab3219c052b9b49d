"""Player name entry on the welcome screen."""

from __future__ import annotations

MAX_NAME_LENGTH = 10
CURSOR = "|"
BACKSPACE = 8


def _is_ascii_letter(codepoint: int) -> bool:
    return ord("A") <= codepoint <= ord("Z") or ord("a") <= codepoint <= ord("z")


class NameEntry:
    """Editable name with a trailing cursor.

    The field stays empty until it is clicked; after that it always shows the
    name followed by a cursor. Only ASCII letters are accepted, the first one
    upper-cased and the rest lower-cased, up to ten of them.
    """

    def __init__(self) -> None:
        self._name = ""
        self._active = False

    def click(self) -> None:
        """Activate the field, showing the cursor."""
        self._active = True

    def type_char(self, codepoint: int) -> None:
        """Handle one typed character given as a Unicode code point."""
        if not self._active:
            return
        if codepoint == BACKSPACE:
            self._name = self._name[:-1]
            return
        if len(self._name) >= MAX_NAME_LENGTH or not _is_ascii_letter(codepoint):
            return
        char = chr(codepoint)
        self._name += char.upper() if not self._name else char.lower()

    def can_submit(self) -> bool:
        """Whether Enter should accept the name."""
        return bool(self._name)

    def display(self) -> str:
        """Text to draw: the name and cursor, or nothing before activation."""
        return self._name + CURSOR if self._active else ""

    def name(self) -> str:
        """The entered name without the cursor."""
        return self._name