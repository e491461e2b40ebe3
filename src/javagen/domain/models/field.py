"""Java field entity."""

from __future__ import annotations

from typing import Optional, Sequence

from javagen.config import StyleConfig, get_config
from javagen.domain.models.annotation import JavaAnnotation
from javagen.domain.models.base import CodeEntity, EntityBuilder, header_lines
from javagen.domain.models.enums import Visibility
from javagen.domain.models.javadoc import Javadoc
from javagen.utils.text import is_blank, is_not_blank, join_lines


class JavaField(CodeEntity):
    """A field declared in a JavaClass, rendered without its trailing ``;``."""

    section_comment: Optional[str] = None
    javadoc: Optional[Javadoc] = None
    annotations: tuple[JavaAnnotation, ...] = ()
    visibility: Visibility = Visibility.PRIVATE
    is_static: bool = False
    is_final: bool = False
    type: str
    name: str
    value: Optional[str] = None

    @classmethod
    def builder(cls) -> JavaFieldBuilder:
        return JavaFieldBuilder()

    def declaration(self) -> str:
        """``<visibility> [static] [final] <type> <name>[ = <value>]``."""
        words = [
            self.visibility.text,
            "static" if self.is_static else "",
            "final" if self.is_final else "",
            self.type,
            self.name,
        ]
        declaration = " ".join(word for word in words if word)
        if is_not_blank(self.value):
            declaration += f" = {self.value}"
        return declaration

    def render(self, style: Optional[StyleConfig] = None) -> str:
        style = style or get_config()
        lines = header_lines(self.section_comment, self.javadoc, self.annotations, style)
        lines.append(self.declaration())
        return join_lines(lines)


class JavaFieldBuilder(EntityBuilder[JavaField]):
    """Builds a JavaField; ``type`` and ``name`` are required."""

    entity_name = "JavaField"

    def __init__(self) -> None:
        self._section_comment: Optional[str] = None
        self._javadoc: Optional[Javadoc] = None
        self._annotations: list[JavaAnnotation] = []
        self._visibility = Visibility.PRIVATE
        self._is_static = False
        self._is_final = False
        self._type: Optional[str] = None
        self._name: Optional[str] = None
        self._value: Optional[str] = None

    def section_comment(self, section_comment: Optional[str]) -> JavaFieldBuilder:
        self._section_comment = section_comment
        return self

    def javadoc(self, javadoc: Optional[Javadoc]) -> JavaFieldBuilder:
        self._javadoc = javadoc
        return self

    def annotations(self, annotations: Sequence[JavaAnnotation]) -> JavaFieldBuilder:
        self._annotations = list(annotations)
        return self

    def annotation(self, annotation: JavaAnnotation) -> JavaFieldBuilder:
        self._annotations.append(annotation)
        return self

    def visibility(self, visibility: Visibility) -> JavaFieldBuilder:
        self._visibility = visibility
        return self

    def is_static(self, is_static: bool = True) -> JavaFieldBuilder:
        self._is_static = is_static
        return self

    def is_final(self, is_final: bool = True) -> JavaFieldBuilder:
        self._is_final = is_final
        return self

    def type(self, type_: str) -> JavaFieldBuilder:
        self._type = type_
        return self

    def name(self, name: str) -> JavaFieldBuilder:
        self._name = name
        return self

    def value(self, value: Optional[str]) -> JavaFieldBuilder:
        self._value = value
        return self

    def _check_for_errors(self) -> list[str]:
        errors: list[str] = []
        if is_blank(self._type):
            errors.append("Must specify type!")
        if is_blank(self._name):
            errors.append("Must specify name!")
        return errors

    def _create(self) -> JavaField:
        return JavaField(
            section_comment=self._section_comment,
            javadoc=self._javadoc,
            annotations=tuple(self._annotations),
            visibility=self._visibility,
            is_static=self._is_static,
            is_final=self._is_final,
            type=self._type,
            name=self._name,
            value=self._value,
        )
