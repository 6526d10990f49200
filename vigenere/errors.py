"""Errors raised by the cipher when a call's inputs break its preconditions."""
from typing import Optional


class VigenereError(ValueError):
    """Base class for every cipher input error."""


class EmptyKeyError(VigenereError):
    """The key has no letters to cycle over."""

    def __init__(self):
        super().__init__("Key must contain at least one letter")


class InvalidCharacterError(VigenereError):
    """A character outside A-Z reached the alphabet mapper."""

    def __init__(self, char, position: Optional[int] = None, field: Optional[str] = None):
        self.char = char
        self.position = position
        self.field = field
        where = ""
        if field is not None:
            where = f" in {field}"
            if position is not None:
                where += f" at position {position}"
        super().__init__(f"Invalid character {char!r}{where}: expected an uppercase letter A-Z")
