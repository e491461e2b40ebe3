"""Domain models — public API.

Provides convenient imports for the entities and their builders.
"""

from javagen.domain.models.annotation import JavaAnnotation, JavaAnnotationBuilder
from javagen.domain.models.base import CodeEntity, EntityBuilder
from javagen.domain.models.enums import Visibility
from javagen.domain.models.field import JavaField, JavaFieldBuilder
from javagen.domain.models.java_class import JavaClass, JavaClassBuilder
from javagen.domain.models.javadoc import DocParam, Javadoc, JavadocBuilder
from javagen.domain.models.method import JavaMethod, JavaMethodBuilder, Parameter

__all__ = [
    # Base
    "CodeEntity",
    "EntityBuilder",
    # Enums
    "Visibility",
    # Entities
    "JavaAnnotation",
    "JavaClass",
    "JavaField",
    "JavaMethod",
    "Javadoc",
    # Builders
    "JavaAnnotationBuilder",
    "JavaClassBuilder",
    "JavaFieldBuilder",
    "JavaMethodBuilder",
    "JavadocBuilder",
    # Value pairs
    "DocParam",
    "Parameter",
]
