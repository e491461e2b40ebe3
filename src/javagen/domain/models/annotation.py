"""Java annotation entity."""

from __future__ import annotations

from typing import Optional

from javagen.config import StyleConfig
from javagen.domain.models.base import CodeEntity, EntityBuilder
from javagen.utils.text import is_blank


class JavaAnnotation(CodeEntity):
    """An annotation marker such as ``@Override``."""

    name: str

    @classmethod
    def builder(cls) -> JavaAnnotationBuilder:
        return JavaAnnotationBuilder()

    def render(self, style: Optional[StyleConfig] = None) -> str:
        return f"@{self.name}"


class JavaAnnotationBuilder(EntityBuilder[JavaAnnotation]):
    """Builds a JavaAnnotation; ``name`` is required."""

    entity_name = "JavaAnnotation"

    def __init__(self) -> None:
        self._name: Optional[str] = None

    def name(self, name: str) -> JavaAnnotationBuilder:
        self._name = name
        return self

    def _check_for_errors(self) -> list[str]:
        errors: list[str] = []
        if is_blank(self._name):
            errors.append("Must specify name!")
        return errors

    def _create(self) -> JavaAnnotation:
        return JavaAnnotation(name=self._name)
