"""Javadoc comment entity.

A Javadoc renders in one of two layouts. Expanded::

    /**
     * content
     * 
     * @author someone
     */

Condensed keeps the opening and closing markers on the first and last lines::

    /** content
     * 
     * @author someone */

Sections appear in a fixed order: content, info tags (author, version, since),
code tags (params, return). Content is followed by a blank comment line when
any tag follows it, and the info and code groups are separated by one when
both are present.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence, Union

from javagen.config import StyleConfig
from javagen.domain.models.base import CodeEntity, EntityBuilder
from javagen.utils.text import any_not_blank, has_items, is_not_blank


class DocParam(NamedTuple):
    """A ``@param`` tag: parameter name and its description."""

    name: str
    description: Optional[str] = None


class Javadoc(CodeEntity):
    """A ``/** ... */`` documentation block."""

    condensed: bool = False
    content: tuple[str, ...] = ()
    author: Optional[str] = None
    version: Optional[str] = None
    since: Optional[str] = None
    params: tuple[DocParam, ...] = ()
    return_val: Optional[str] = None

    @classmethod
    def builder(cls) -> JavadocBuilder:
        return JavadocBuilder()

    def _content_lines(self) -> list[str]:
        """The logical lines between the opening and closing markers."""
        have_info = any_not_blank(self.author, self.version, self.since)
        have_code = has_items(self.params) or is_not_blank(self.return_val)

        lines: list[str] = []
        if has_items(self.content):
            lines.extend(self.content)
            if have_info or have_code:
                lines.append("")

        for tag, value in (("author", self.author), ("version", self.version), ("since", self.since)):
            if is_not_blank(value):
                lines.append(f"@{tag} {value}")

        if have_info and have_code:
            lines.append("")

        for param in self.params:
            if param.description is None:
                lines.append(f"@param {param.name}")
            else:
                lines.append(f"@param {param.name} {param.description}")
        if is_not_blank(self.return_val):
            lines.append(f"@return {self.return_val}")
        return lines

    def render(self, style: Optional[StyleConfig] = None) -> str:
        lines = self._content_lines()
        body = "\n *".join(f" {line}" for line in lines)
        if self.condensed:
            return f"/**{body} */"
        if lines:
            return f"/**\n *{body}\n */"
        return "/**\n */"


class JavadocBuilder(EntityBuilder[Javadoc]):
    """Builds a Javadoc. No parameter is required."""

    entity_name = "Javadoc"

    def __init__(self) -> None:
        self._condensed = False
        self._content: list[str] = []
        self._author: Optional[str] = None
        self._version: Optional[str] = None
        self._since: Optional[str] = None
        self._params: list[DocParam] = []
        self._return_val: Optional[str] = None

    def condensed(self, condensed: bool = True) -> JavadocBuilder:
        self._condensed = condensed
        return self

    def content(self, content: Union[str, Sequence[str]]) -> JavadocBuilder:
        """Append one line, or replace all content when given a list."""
        if isinstance(content, str):
            self._content.append(content)
        else:
            self._content = list(content)
        return self

    def author(self, author: Optional[str]) -> JavadocBuilder:
        self._author = author
        return self

    def version(self, version: Optional[str]) -> JavadocBuilder:
        self._version = version
        return self

    def since(self, since: Optional[str]) -> JavadocBuilder:
        self._since = since
        return self

    def params(self, params: Sequence[tuple[str, str]]) -> JavadocBuilder:
        self._params = [DocParam(*param) for param in params]
        return self

    def param(self, name: Union[str, tuple[str, str]], description: Optional[str] = None) -> JavadocBuilder:
        """Add a parameter, given as ``(name, description)`` or a single pair."""
        if isinstance(name, tuple):
            self._params.append(DocParam(*name))
        else:
            self._params.append(DocParam(name, description))
        return self

    def return_val(self, return_val: Optional[str]) -> JavadocBuilder:
        self._return_val = return_val
        return self

    def _create(self) -> Javadoc:
        return Javadoc(
            condensed=self._condensed,
            content=tuple(self._content),
            author=self._author,
            version=self._version,
            since=self._since,
            params=tuple(self._params),
            return_val=self._return_val,
        )
