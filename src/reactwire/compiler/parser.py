"""Template file parser.

A template file is a sequence of top-level ``<import>`` declarations and
``<template>`` elements::

    <import name="todo-item" from="./todo-item">

    <template name="empty-state">
      <p>Nothing to do</p>
    </template>

    <template>
      <ul class="todos">
        <loop template="todo-item" array="{{ props.todos }}" key="id" />
      </ul>
    </template>
"""

import logging
import re
from html.parser import HTMLParser
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from reactwire.compiler import constants
from reactwire.compiler.ast_nodes import (
    ElementNode,
    ImportDeclaration,
    LoopNode,
    Node,
    ParsedTemplateFile,
    TextNode,
)
from reactwire.compiler.exceptions import TemplateSyntaxError

logger = logging.getLogger(__name__)

_TAG_NAME = re.compile(r"<\s*([^\s/>]+)")
_ATTRIBUTE = re.compile(
    r"""([^\s/>"'=][^\s/>=]*)(?:\s*=\s*('[^']*'|"[^"]*"|[^'"\s>]*))?"""
)

Attributes = Dict[str, Optional[str]]


def _is_void(name: str) -> bool:
    # <Link>, <Input> and other capitalised names are components, never void.
    return name.islower() and name in constants.VOID_ELEMENTS


class _TreeBuilder(HTMLParser):
    """Builds a node tree while keeping the source case of tag and attribute names.

    ``HTMLParser`` lowercases names; component tags (``<TodoItem>``) and
    component props (``onToggle``) are recovered from the raw start tag text.
    """

    def __init__(self, file_path: str = "") -> None:
        super().__init__(convert_charrefs=False)
        self.file_path = file_path
        self.root = ElementNode(tag="#document")
        self.stack: List[Node] = [self.root]
        self._text: List[str] = []
        self._text_pos: Tuple[int, int] = (1, 0)

    def _syntax_error(
        self, message: str, line: Optional[int] = None
    ) -> TemplateSyntaxError:
        if line is None:
            line = self.getpos()[0]
        return TemplateSyntaxError(message, file_path=self.file_path, line=line)

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        self._add_element(tag, attrs, self_closing=False)

    def handle_startendtag(
        self, tag: str, attrs: List[Tuple[str, Optional[str]]]
    ) -> None:
        self._add_element(tag, attrs, self_closing=True)

    def handle_endtag(self, tag: str) -> None:
        self._flush_text()
        current = self.stack[-1]
        current_tag = getattr(current, "tag", "")
        if len(self.stack) > 1 and current_tag.lower() == tag:
            self.stack.pop()
            return

        # </input> and friends close nothing; void elements are never pushed.
        if tag in constants.VOID_ELEMENTS:
            return

        if len(self.stack) == 1:
            raise self._syntax_error(f"unexpected closing tag </{tag}>")

        raise self._syntax_error(
            f"expected </{current_tag}> (opened on line {current.line}), "
            f"found </{tag}>"
        )

    def handle_data(self, data: str) -> None:
        if not self._text:
            self._text_pos = self.getpos()
        self._text.append(data)

    def handle_entityref(self, name: str) -> None:
        self.handle_data(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self.handle_data(f"&#{name};")

    def close(self) -> None:
        super().close()
        self._flush_text()
        if len(self.stack) > 1:
            unclosed = self.stack[-1]
            raise self._syntax_error(
                f"unclosed tag <{getattr(unclosed, 'tag', '?')}>", line=unclosed.line
            )

    def _add_element(
        self,
        tag: str,
        attrs: List[Tuple[str, Optional[str]]],
        self_closing: bool,
    ) -> None:
        self._flush_text()
        line, column = self.getpos()
        name, attributes = self._recover_case(tag, attrs)

        node: Node
        if tag == constants.LOOP_TAG:
            node = LoopNode(attributes=attributes, line=line, column=column)
        else:
            node = ElementNode(tag=name, attributes=attributes, line=line, column=column)

        parent = self.stack[-1]
        parent.children.append(node)  # type: ignore[union-attr]

        if not self_closing and tag != constants.IMPORT_TAG and not _is_void(name):
            self.stack.append(node)

    def _recover_case(
        self, tag: str, attrs: List[Tuple[str, Optional[str]]]
    ) -> Tuple[str, Attributes]:
        raw = self.get_starttag_text() or ""
        match = _TAG_NAME.match(raw)
        name = match.group(1) if match and match.group(1).lower() == tag else tag

        rest = raw[match.end() :] if match else ""
        raw_names = [m.group(1) for m in _ATTRIBUTE.finditer(rest)]
        if [n.lower() for n in raw_names] != [n for n, _ in attrs]:
            raw_names = [n for n, _ in attrs]

        attributes: Attributes = {}
        for raw_name, (_, value) in zip(raw_names, attrs):
            attributes[raw_name] = value
        return name, attributes

    def _flush_text(self) -> None:
        if not self._text:
            return
        value = "".join(self._text).strip()
        self._text = []
        if value:
            line, column = self._text_pos
            self.stack[-1].children.append(  # type: ignore[union-attr]
                TextNode(value=value, line=line, column=column)
            )


class TemplateParser:
    """Parses template files into :class:`ParsedTemplateFile` objects."""

    def parse_file(self, file_path: Path) -> ParsedTemplateFile:
        """Parse a template file."""
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()

        return self.parse(content, str(file_path))

    def parse(self, content: str, file_path: str = "") -> ParsedTemplateFile:
        builder = _TreeBuilder(file_path)
        builder.feed(content)
        builder.close()

        default_template: Optional[ElementNode] = None
        named_templates: List[ElementNode] = []
        imports: List[ImportDeclaration] = []
        seen_names: Dict[str, int] = {}

        for node in builder.root.children:
            if isinstance(node, TextNode):
                raise TemplateSyntaxError(
                    f"unexpected text outside of <template>: {node.value[:30]!r}",
                    file_path=file_path,
                    line=node.line,
                )

            tag = node.tag.lower()
            if tag == constants.IMPORT_TAG:
                imports.append(self._parse_import(node, file_path))
                continue

            if tag != constants.TEMPLATE_TAG or not isinstance(node, ElementNode):
                raise TemplateSyntaxError(
                    f"<{node.tag}> is not allowed at the top level; "
                    "expected <import> or <template>",
                    file_path=file_path,
                    line=node.line,
                )

            self._validate_template(node, file_path)

            name = node.attributes.get(constants.TEMPLATE_NAME_ATTR)
            if name:
                if name in seen_names:
                    raise TemplateSyntaxError(
                        f"template '{name}' is already defined on line "
                        f"{seen_names[name]}",
                        file_path=file_path,
                        line=node.line,
                    )
                seen_names[name] = node.line
                named_templates.append(node)
            elif default_template is not None:
                raise TemplateSyntaxError(
                    "only one default (unnamed) <template> is allowed",
                    file_path=file_path,
                    line=node.line,
                )
            else:
                default_template = node

        if default_template is None:
            raise TemplateSyntaxError(
                "missing default (unnamed) <template>", file_path=file_path
            )

        logger.debug(
            "Parsed %s: %d named template(s), %d import(s)",
            file_path or "<string>",
            len(named_templates),
            len(imports),
        )
        return ParsedTemplateFile(
            default_template=default_template,
            named_templates=named_templates,
            imports=imports,
            file_path=file_path,
        )

    def _parse_import(self, node: Node, file_path: str) -> ImportDeclaration:
        attributes = getattr(node, "attributes", {})
        name = attributes.get(constants.IMPORT_NAME_ATTR)
        source = attributes.get(constants.IMPORT_FROM_ATTR)
        for attr, value in (
            (constants.IMPORT_NAME_ATTR, name),
            (constants.IMPORT_FROM_ATTR, source),
        ):
            if not value:
                raise TemplateSyntaxError(
                    f"<import> requires a '{attr}' attribute",
                    file_path=file_path,
                    line=node.line,
                )
        return ImportDeclaration(name=name or "", source=source or "", line=node.line)

    def _validate_template(self, node: ElementNode, file_path: str) -> None:
        """A template must wrap exactly one root node."""
        if len(node.children) != 1:
            label = node.attributes.get(constants.TEMPLATE_NAME_ATTR) or "default"
            raise TemplateSyntaxError(
                f"template '{label}' must have exactly one root node, "
                f"found {len(node.children)}",
                file_path=file_path,
                line=node.line,
            )
