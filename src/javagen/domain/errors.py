"""Domain errors for javagen.

Builders raise these at ``build()`` time; rendering never raises. They carry
no infrastructure dependencies.
"""

from __future__ import annotations

from typing import Iterable


class JavagenError(Exception):
    """Base exception for all javagen errors."""


class EntityValidationError(JavagenError, ValueError):
    """Raised when a builder holds an illegal combination of parameters.

    Every violated rule is collected before raising, so the message lists all
    of them, one per line, in the order the checks run.
    """

    def __init__(self, entity: str, errors: Iterable[str]):
        self.entity = entity
        self.errors = tuple(errors)
        super().__init__("\n".join(self.errors))


class ConfigurationError(JavagenError):
    """Raised when a style configuration file is invalid."""
