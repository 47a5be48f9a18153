"""Template tree nodes produced by the parser and consumed by codegen."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from reactwire.compiler import constants


@dataclass
class TextNode:
    """Raw text between tags."""

    value: str
    line: int = 0
    column: int = 0


@dataclass
class ElementNode:
    """A regular tag (HTML element, component or template container)."""

    tag: str
    attributes: Dict[str, Optional[str]] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)
    line: int = 0
    column: int = 0


@dataclass
class LoopNode:
    """A ``<loop>`` directive.

    Its children describe the repeated element and are not rendered; the
    loop is replaced by a precomputed ``array.map(...)`` binding.
    """

    attributes: Dict[str, Optional[str]] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)
    line: int = 0
    column: int = 0

    tag = constants.LOOP_TAG

    @property
    def template(self) -> Optional[str]:
        return self.attributes.get(constants.LOOP_TEMPLATE_ATTR)

    @property
    def array(self) -> Optional[str]:
        return self.attributes.get(constants.LOOP_ARRAY_ATTR)

    @property
    def key(self) -> Optional[str]:
        return self.attributes.get(constants.LOOP_KEY_ATTR)


Node = Union[TextNode, ElementNode, LoopNode]


@dataclass
class ImportDeclaration:
    """``<import name="item" from="./item">`` at the top of a template file."""

    name: str
    source: str
    line: int = 0


@dataclass
class ParsedTemplateFile:
    """Everything the parser extracted from one template file."""

    default_template: ElementNode
    named_templates: List[ElementNode] = field(default_factory=list)
    imports: List[ImportDeclaration] = field(default_factory=list)
    file_path: str = ""

    def get_named_template(self, name: str) -> Optional[ElementNode]:
        for node in self.named_templates:
            if node.attributes.get(constants.TEMPLATE_NAME_ATTR) == name:
                return node
        return None
