"""Common behaviour for the Java entities and their builders.

Entities are frozen pydantic models. Two entities are equal when they are the
same kind and render to the same text; how they were assembled does not
matter.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from javagen.config import StyleConfig, get_config
from javagen.domain.errors import EntityValidationError
from javagen.utils.text import is_not_blank

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound="CodeEntity")


class CodeEntity(BaseModel):
    """Base class for every renderable entity."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def render(self, style: Optional[StyleConfig] = None) -> str:
        """Render this entity as source text using *style*."""

    def __str__(self) -> str:
        return self.render(get_config())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CodeEntity) or type(other) is not type(self):
            return False
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, str(self)))


class EntityBuilder(ABC, Generic[EntityT]):
    """Collects parameters for one entity, then validates them all at once.

    Subclasses implement ``_check_for_errors`` (which must not mutate state)
    and ``_create``; setters only record values and return ``self``.
    """

    entity_name: ClassVar[str] = "entity"

    def _check_for_errors(self) -> list[str]:
        return []

    @abstractmethod
    def _create(self) -> EntityT:
        """Snapshot the current parameters into a new entity."""

    def build(self) -> EntityT:
        """Check for errors in the current parameters, then build the entity.

        Raises
        ------
        EntityValidationError
            If any rule is violated, or a value has the wrong shape (e.g. a
            None content line); the message lists every violation.
        """
        errors = self._check_for_errors()
        if errors:
            logger.debug("Rejected %s with %d error(s)", self.entity_name, len(errors))
            raise EntityValidationError(self.entity_name, errors)

        try:
            entity = self._create()
        except ValidationError as exc:
            errors = [_describe(error) for error in exc.errors()]
            logger.debug("Rejected %s with %d error(s)", self.entity_name, len(errors))
            raise EntityValidationError(self.entity_name, errors) from exc

        logger.debug("Built %s", self.entity_name)
        return entity


def _describe(error: dict[str, Any]) -> str:
    """One violation line for a pydantic error, e.g. ``Invalid content.1: ...``."""
    location = ".".join(str(part) for part in error["loc"])
    return f"Invalid {location}: {error['msg']}!"


def header_lines(
    section_comment: Optional[str],
    javadoc: Optional[CodeEntity],
    annotations: tuple[CodeEntity, ...],
    style: StyleConfig,
) -> list[str]:
    """Lines that precede a member declaration.

    In order: a section comment block followed by an empty line, the
    Javadoc, then one annotation per line. Absent pieces contribute nothing.
    """
    lines: list[str] = []
    if is_not_blank(section_comment):
        lines.extend(["/*", f" * {section_comment}", " */", ""])
    if javadoc is not None:
        lines.append(javadoc.render(style))
    lines.extend(annotation.render(style) for annotation in annotations)
    return lines
