"""Java method entity.

A method without a name renders as a constructor: the return type stands in
for the class name, e.g. ``public AClassName(){``.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence, Union

from javagen.config import StyleConfig, get_config
from javagen.domain.models.annotation import JavaAnnotation
from javagen.domain.models.base import CodeEntity, EntityBuilder, header_lines
from javagen.domain.models.enums import Visibility
from javagen.domain.models.javadoc import Javadoc
from javagen.utils.text import is_blank, is_not_blank, join_lines


class Parameter(NamedTuple):
    """A method parameter: type first, then name."""

    type: str
    name: str


class JavaMethod(CodeEntity):
    """A method declared in a JavaClass, body lines included."""

    section_comment: Optional[str] = None
    javadoc: Optional[Javadoc] = None
    annotations: tuple[JavaAnnotation, ...] = ()
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False
    return_type: str
    name: Optional[str] = None
    parameters: tuple[Parameter, ...] = ()
    throw_types: tuple[str, ...] = ()
    lines: tuple[str, ...] = ()

    @classmethod
    def builder(cls) -> JavaMethodBuilder:
        return JavaMethodBuilder()

    def declaration(self) -> str:
        """The signature line, ending with the opening brace."""
        words = [self.visibility.text, "static" if self.is_static else "", self.return_type]
        if is_not_blank(self.name):
            words.append(self.name)
        signature = " ".join(word for word in words if word)

        params = ", ".join(f"{param.type} {param.name}" for param in self.parameters)
        declaration = f"{signature}({params})"
        if self.throw_types:
            declaration += " throws " + ", ".join(self.throw_types)
        return declaration + "{"

    def render(self, style: Optional[StyleConfig] = None) -> str:
        style = style or get_config()
        content = header_lines(self.section_comment, self.javadoc, self.annotations, style)
        content.append(self.declaration())
        content.extend(style.indent + line for line in self.lines)
        content.append("}")
        return join_lines(content)


class JavaMethodBuilder(EntityBuilder[JavaMethod]):
    """Builds a JavaMethod; only ``return_type`` is required."""

    entity_name = "JavaMethod"

    def __init__(self) -> None:
        self._section_comment: Optional[str] = None
        self._javadoc: Optional[Javadoc] = None
        self._annotations: list[JavaAnnotation] = []
        self._visibility = Visibility.PUBLIC
        self._is_static = False
        self._return_type: Optional[str] = None
        self._name: Optional[str] = None
        self._parameters: list[Parameter] = []
        self._throw_types: list[str] = []
        self._lines: list[str] = []

    def section_comment(self, section_comment: Optional[str]) -> JavaMethodBuilder:
        self._section_comment = section_comment
        return self

    def javadoc(self, javadoc: Optional[Javadoc]) -> JavaMethodBuilder:
        self._javadoc = javadoc
        return self

    def annotations(self, annotations: Sequence[JavaAnnotation]) -> JavaMethodBuilder:
        self._annotations = list(annotations)
        return self

    def annotation(self, annotation: JavaAnnotation) -> JavaMethodBuilder:
        self._annotations.append(annotation)
        return self

    def visibility(self, visibility: Visibility) -> JavaMethodBuilder:
        self._visibility = visibility
        return self

    def is_static(self, is_static: bool = True) -> JavaMethodBuilder:
        self._is_static = is_static
        return self

    def return_type(self, return_type: str) -> JavaMethodBuilder:
        self._return_type = return_type
        return self

    def name(self, name: Optional[str]) -> JavaMethodBuilder:
        self._name = name
        return self

    def parameters(self, parameters: Sequence[tuple[str, str]]) -> JavaMethodBuilder:
        self._parameters = [Parameter(*parameter) for parameter in parameters]
        return self

    def parameter(self, type_: Union[str, tuple[str, str]], name: Optional[str] = None) -> JavaMethodBuilder:
        """Add a parameter, given as ``(type, name)`` or a single pair."""
        if isinstance(type_, tuple):
            self._parameters.append(Parameter(*type_))
        else:
            self._parameters.append(Parameter(type_, name))
        return self

    def throw_types(self, throw_types: Sequence[str]) -> JavaMethodBuilder:
        self._throw_types = list(throw_types)
        return self

    def throw_type(self, throw_type: str) -> JavaMethodBuilder:
        self._throw_types.append(throw_type)
        return self

    def lines(self, lines: Sequence[str]) -> JavaMethodBuilder:
        self._lines = list(lines)
        return self

    def line(self, line: str) -> JavaMethodBuilder:
        self._lines.append(line)
        return self

    def _check_for_errors(self) -> list[str]:
        errors: list[str] = []
        if is_blank(self._return_type):
            errors.append("Must specify returnType!")
        return errors

    def _create(self) -> JavaMethod:
        return JavaMethod(
            section_comment=self._section_comment,
            javadoc=self._javadoc,
            annotations=tuple(self._annotations),
            visibility=self._visibility,
            is_static=self._is_static,
            return_type=self._return_type,
            name=self._name,
            parameters=tuple(self._parameters),
            throw_types=tuple(self._throw_types),
            lines=tuple(self._lines),
        )
