"""javagen — immutable Java source entities that render to source text.

Build entities leaf-first and render the root::

    from javagen import JavaClass, JavaField

    clazz = (
        JavaClass.builder()
        .package_name("some.package")
        .class_name("AClassName")
        .field(JavaField.builder().type("int").name("test").build())
        .build()
    )
    source = str(clazz)
"""

from javagen.domain.errors import ConfigurationError, EntityValidationError, JavagenError
from javagen.domain.models import (
    DocParam,
    JavaAnnotation,
    JavaClass,
    JavaField,
    JavaMethod,
    Javadoc,
    Parameter,
    Visibility,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DocParam",
    "EntityValidationError",
    "JavaAnnotation",
    "JavaClass",
    "JavaField",
    "JavaMethod",
    "JavagenError",
    "Javadoc",
    "Parameter",
    "Visibility",
]
