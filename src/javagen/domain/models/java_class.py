"""Java class entity, the root of the model.

An outer class renders as a whole compilation unit::

    package some.package;

    import com.example.*;

    public class AClassName{
    	
    	private int test;
    	
    	public String getSomething(int test){
    		return doSomething();
    	}
    }

An inner class skips the package and import sections and is indented into its
parent's body by the parent.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from javagen.config import StyleConfig, get_config
from javagen.domain.models.annotation import JavaAnnotation
from javagen.domain.models.base import CodeEntity, EntityBuilder
from javagen.domain.models.enums import Visibility
from javagen.domain.models.field import JavaField
from javagen.domain.models.javadoc import Javadoc
from javagen.domain.models.method import JavaMethod
from javagen.utils.text import has_items, indent_all_lines, is_blank, is_not_blank, join_lines

# Distinguishes `inner_class()` from `inner_class(None)`.
_MARK_INNER = object()


class JavaClass(CodeEntity):
    """A Java class with its nested classes, fields and methods."""

    is_inner_class: bool = False
    package_name: Optional[str] = None
    imports: tuple[Optional[str], ...] = ()
    static_imports: tuple[Optional[str], ...] = ()
    javadoc: Optional[Javadoc] = None
    annotations: tuple[JavaAnnotation, ...] = ()
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False
    class_name: str
    super_class_name: Optional[str] = None
    inner_classes: tuple[JavaClass, ...] = ()
    fields: tuple[JavaField, ...] = ()
    methods: tuple[JavaMethod, ...] = ()

    @classmethod
    def builder(cls) -> JavaClassBuilder:
        return JavaClassBuilder()

    # -- sections -----------------------------------------------------------

    def _import_lines(self, imports: tuple[Optional[str], ...], keyword: str) -> list[str]:
        """An empty separator line, then one line per import.

        Blank entries become empty lines, which lets callers group imports.
        """
        if not has_items(imports):
            return []
        lines = [""]
        for name in imports:
            lines.append(f"{keyword} {name};" if is_not_blank(name) else "")
        return lines

    def declaration(self) -> str:
        words = [self.visibility.text, "static" if self.is_static else "", "class", self.class_name]
        declaration = " ".join(word for word in words if word)
        if is_not_blank(self.super_class_name):
            declaration += f" extends {self.super_class_name}"
        return declaration + "{"

    def _body_lines(self, style: StyleConfig) -> list[str]:
        indent = style.indent
        # Marks the start of the body.
        lines = [indent]

        for inner_class in self.inner_classes:
            lines.append(indent_all_lines(inner_class.render(style), indent))

        for field in self.fields:
            lines.append(indent_all_lines(field.render(style), indent) + ";")

        if self.methods:
            if self.fields:
                lines.append(indent)
            for method in self.methods:
                lines.append(indent_all_lines(method.render(style), indent))
                lines.append(indent)
            lines.pop()
        return lines

    def render(self, style: Optional[StyleConfig] = None) -> str:
        style = style or get_config()
        content: list[str] = []

        if not self.is_inner_class:
            content.append(f"package {self.package_name};")
        content.extend(self._import_lines(self.imports, "import"))
        content.extend(self._import_lines(self.static_imports, "import static"))
        if not self.is_inner_class:
            content.append("")

        if self.javadoc is not None:
            content.append(self.javadoc.render(style))
        content.extend(annotation.render(style) for annotation in self.annotations)
        content.append(self.declaration())

        content.extend(self._body_lines(style))

        # Closing brace, then the newline that ends the file
        content.append("}")
        content.append("")
        return join_lines(content)


class JavaClassBuilder(EntityBuilder[JavaClass]):
    """Builds a JavaClass.

    ``class_name`` is always required. An outer class needs a package name
    and cannot be static; an inner class cannot have a package name or
    imports. Every class passed to ``inner_class`` must itself be built as an
    inner class.
    """

    entity_name = "JavaClass"

    def __init__(self) -> None:
        self._is_inner_class = False
        self._package_name: Optional[str] = None
        self._imports: list[Optional[str]] = []
        self._static_imports: list[Optional[str]] = []
        self._javadoc: Optional[Javadoc] = None
        self._annotations: list[JavaAnnotation] = []
        self._visibility = Visibility.PUBLIC
        self._is_static = False
        self._class_name: Optional[str] = None
        self._super_class_name: Optional[str] = None
        self._inner_classes: list[JavaClass] = []
        self._fields: list[JavaField] = []
        self._methods: list[JavaMethod] = []

    def is_inner_class(self, is_inner_class: bool = True) -> JavaClassBuilder:
        self._is_inner_class = is_inner_class
        return self

    def inner_class(self, inner_class: Any = _MARK_INNER) -> JavaClassBuilder:
        """Add a nested class, or with no argument mark this class as inner.

        An explicit None is added as a child and rejected by ``build()``.
        """
        if inner_class is _MARK_INNER:
            self._is_inner_class = True
        else:
            self._inner_classes.append(inner_class)
        return self

    def inner_classes(self, inner_classes: Sequence[JavaClass]) -> JavaClassBuilder:
        self._inner_classes = list(inner_classes)
        return self

    def package_name(self, package_name: Optional[str]) -> JavaClassBuilder:
        self._package_name = package_name
        return self

    def imports(self, imports: Sequence[Optional[str]]) -> JavaClassBuilder:
        self._imports = list(imports)
        return self

    def single_import(self, single_import: Optional[str]) -> JavaClassBuilder:
        self._imports.append(single_import)
        return self

    def static_imports(self, static_imports: Sequence[Optional[str]]) -> JavaClassBuilder:
        self._static_imports = list(static_imports)
        return self

    def static_import(self, static_import: Optional[str]) -> JavaClassBuilder:
        self._static_imports.append(static_import)
        return self

    def javadoc(self, javadoc: Optional[Javadoc]) -> JavaClassBuilder:
        self._javadoc = javadoc
        return self

    def annotations(self, annotations: Sequence[JavaAnnotation]) -> JavaClassBuilder:
        self._annotations = list(annotations)
        return self

    def annotation(self, annotation: JavaAnnotation) -> JavaClassBuilder:
        self._annotations.append(annotation)
        return self

    def visibility(self, visibility: Visibility) -> JavaClassBuilder:
        self._visibility = visibility
        return self

    def is_static(self, is_static: bool = True) -> JavaClassBuilder:
        self._is_static = is_static
        return self

    def class_name(self, class_name: str) -> JavaClassBuilder:
        self._class_name = class_name
        return self

    def super_class_name(self, super_class_name: Optional[str]) -> JavaClassBuilder:
        self._super_class_name = super_class_name
        return self

    def fields(self, fields: Sequence[JavaField]) -> JavaClassBuilder:
        self._fields = list(fields)
        return self

    def field(self, field: JavaField) -> JavaClassBuilder:
        self._fields.append(field)
        return self

    def methods(self, methods: Sequence[JavaMethod]) -> JavaClassBuilder:
        self._methods = list(methods)
        return self

    def method(self, method: JavaMethod) -> JavaClassBuilder:
        self._methods.append(method)
        return self

    def _check_for_errors(self) -> list[str]:
        errors: list[str] = []

        # General problems
        if is_blank(self._class_name):
            errors.append("Must specify className!")

        for inner_class in self._inner_classes:
            if inner_class is not None and not inner_class.is_inner_class:
                errors.append(f"Inner class '{inner_class.class_name}' is not an inner class!")

        if self._is_inner_class:
            if is_not_blank(self._package_name):
                errors.append("Not allowed to have packageName for an inner class!")
            if has_items(self._imports):
                errors.append("Not allowed to have imports for an inner class!")
            if has_items(self._static_imports):
                errors.append("Not allowed to have static imports for an inner class!")
        else:
            if is_blank(self._package_name):
                errors.append("Must specify packageName when not making an inner class!")
            if self._is_static:
                errors.append("Only inner classes can be static!")

        return errors

    def _create(self) -> JavaClass:
        return JavaClass(
            is_inner_class=self._is_inner_class,
            package_name=self._package_name,
            imports=tuple(self._imports),
            static_imports=tuple(self._static_imports),
            javadoc=self._javadoc,
            annotations=tuple(self._annotations),
            visibility=self._visibility,
            is_static=self._is_static,
            class_name=self._class_name,
            super_class_name=self._super_class_name,
            inner_classes=tuple(self._inner_classes),
            fields=tuple(self._fields),
            methods=tuple(self._methods),
        )
