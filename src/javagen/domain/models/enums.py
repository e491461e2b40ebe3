"""Enumerations shared by the Java entity models."""

from enum import Enum


class Visibility(str, Enum):
    """Java access modifiers."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    PACKAGE_PRIVATE = ""  # no keyword

    @property
    def text(self) -> str:
        """The keyword as written in a declaration."""
        return self.value
