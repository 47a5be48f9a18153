"""Template rendering code generation.

Turns a parsed template tree into the source of a React function component.
Rendering one template is a two-pass affair: loop directives are first
extracted into ``const loopN = ...`` statements, then the body is emitted,
replacing every loop with ``{ loopN }``. The first pass hands the generated
names to the second through an explicit side table keyed by node identity.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from reactwire.compiler import constants
from reactwire.compiler.ast_nodes import ElementNode, LoopNode, Node, TextNode
from reactwire.compiler.attributes import to_jsx
from reactwire.compiler.bindings import (
    render_attribute_value,
    render_text,
    strip_strict,
)
from reactwire.compiler.exceptions import (
    MalformedNodeError,
    MissingLoopAttributeError,
    RenderError,
    UnresolvedReferenceError,
)

logger = logging.getLogger(__name__)

INDENT = "  "
DEFAULT_TEMPLATE_LABEL = "default"

NodePath = Tuple[str, ...]
# id(loop node) -> generated variable name
LoopBindings = Dict[int, str]


def _segment(node: object, index: int) -> str:
    name = "#text" if isinstance(node, TextNode) else getattr(node, "tag", None)
    return f"{name or type(node).__name__}[{index}]"


class TemplateCodegen:
    """Generates JSX function components from template trees."""

    def __init__(
        self,
        attribute_mapper: Callable[[str], str] = to_jsx,
        indent: str = INDENT,
    ) -> None:
        self.attribute_mapper = attribute_mapper
        self.indent = indent

    def render_templates(
        self,
        default_node: ElementNode,
        named_nodes: Sequence[ElementNode],
        tag_to_var: Dict[str, str],
    ) -> List[str]:
        """
        Render every template of a file.
        Returns: named functions in input order, followed by the default one.
        """
        rendered = [
            self.render_named_template(node, tag_to_var) for node in named_nodes
        ]
        rendered.append(self.render_default_template(default_node, tag_to_var))
        return rendered

    def render_default_template(
        self, node: ElementNode, tag_to_var: Dict[str, str]
    ) -> str:
        content = self._render_labelled(node, tag_to_var, DEFAULT_TEMPLATE_LABEL)
        return f"export default function(props) {{\n{content}}}\n"

    def render_named_template(
        self, node: ElementNode, tag_to_var: Dict[str, str]
    ) -> str:
        name = node.attributes.get(constants.TEMPLATE_NAME_ATTR)
        if not name:
            raise MalformedNodeError(
                "named template has no 'name' attribute", path=(node.tag,)
            )

        var_name = tag_to_var.get(name)
        if var_name is None:
            raise UnresolvedReferenceError(
                name,
                path=(node.tag,),
                template=name,
                message=f"no identifier registered for template '{name}'",
            )

        content = self._render_labelled(node, tag_to_var, name)
        return f"export function {var_name}(props) {{\n{content}}}\n"

    def _render_labelled(
        self, node: ElementNode, tag_to_var: Dict[str, str], label: str
    ) -> str:
        try:
            content = self.render_template_body(node, tag_to_var)
        except RenderError as e:
            e.template = label
            raise
        logger.debug("Rendered template %r", label)
        return content

    def render_template_body(
        self, container: ElementNode, tag_to_var: Dict[str, str]
    ) -> str:
        """Loop bindings followed by the ``return (...)`` block."""
        container_tag = getattr(container, "tag", type(container).__name__)
        children = getattr(container, "children", None)
        if not isinstance(container, ElementNode) or not children:
            raise MalformedNodeError(
                "template container has no body", path=(container_tag,)
            )
        if len(children) != 1:
            raise MalformedNodeError(
                f"template container must have exactly one root node, "
                f"found {len(children)}",
                path=(container_tag,),
            )

        body = children[0]
        path = (container_tag, _segment(body, 0))

        loops, loop_bindings = self.extract_loops(body, tag_to_var, path)
        jsx = self.render_node(
            body, tag_to_var, self.indent * 2, loop_bindings, path
        )
        return f"{loops}{self.indent}return (\n{jsx}{self.indent});\n"

    # Loop extraction

    def extract_loops(
        self,
        node: Node,
        tag_to_var: Dict[str, str],
        path: NodePath = (),
    ) -> Tuple[str, LoopBindings]:
        """
        Emit one ``const loopN = ...`` statement per loop directive under node.
        Returns: (statements, side table of generated names)
        """
        statements = []
        loop_bindings: LoopBindings = {}

        for index, (loop, loop_path) in enumerate(
            self._collect_loops(node, path or (_segment(node, 0),))
        ):
            var_name = f"loop{index}"
            loop_bindings[id(loop)] = var_name
            statements.append(self._render_loop(loop, var_name, tag_to_var, loop_path))

        if loop_bindings:
            logger.debug("Extracted %d loop(s)", len(loop_bindings))
        return "".join(statements), loop_bindings

    def _collect_loops(
        self, node: Node, path: NodePath
    ) -> List[Tuple[LoopNode, NodePath]]:
        # Pre-order; a loop's own children are never searched.
        if isinstance(node, LoopNode):
            return [(node, path)]
        if isinstance(node, TextNode):
            return []
        if isinstance(node, ElementNode):
            found = []
            for index, child in enumerate(node.children):
                found.extend(
                    self._collect_loops(child, path + (_segment(child, index),))
                )
            return found
        raise MalformedNodeError(
            f"unsupported node type {type(node).__name__}", path=path
        )

    def _render_loop(
        self,
        node: LoopNode,
        var_name: str,
        tag_to_var: Dict[str, str],
        path: NodePath,
    ) -> str:
        for attr in constants.LOOP_REQUIRED_ATTRS:
            if not node.attributes.get(attr):
                raise MissingLoopAttributeError(attr, path=path)

        template = node.template or ""
        component = tag_to_var.get(template)
        if component is None:
            raise UnresolvedReferenceError(
                template,
                path=path,
                message=f"loop template '{template}' is neither imported nor defined",
            )

        array = strip_strict(node.array or "")
        key = strip_strict(node.key or "")
        i = self.indent
        return (
            f"{i}const {var_name} = {array}.map(e => (\n"
            f"{i}{i}<{component} {{ ...e }} key={{ e.{key} }} />\n"
            f"{i}));\n"
        )

    # Node rendering

    def render_node(
        self,
        node: Node,
        tag_to_var: Dict[str, str],
        indent: str,
        loop_bindings: Optional[LoopBindings] = None,
        path: NodePath = (),
    ) -> str:
        """Render node and its descendants as lines indented by ``indent``."""
        if loop_bindings is None:
            loop_bindings = {}

        if isinstance(node, TextNode):
            return f"{indent}{render_text(node.value)}\n"

        if isinstance(node, LoopNode):
            var_name = loop_bindings.get(id(node))
            if var_name is None:
                raise UnresolvedReferenceError(
                    constants.LOOP_TAG,
                    path=path,
                    message="loop was rendered before its binding was extracted",
                )
            return f"{indent}{{ {var_name} }}\n"

        if isinstance(node, ElementNode):
            return self._render_element(node, tag_to_var, indent, loop_bindings, path)

        raise MalformedNodeError(
            f"unsupported node type {type(node).__name__}", path=path
        )

    def _render_element(
        self,
        node: ElementNode,
        tag_to_var: Dict[str, str],
        indent: str,
        loop_bindings: LoopBindings,
        path: NodePath,
    ) -> str:
        name = tag_to_var.get(node.tag, node.tag)
        props = self._render_props(node)

        if not node.children:
            return f"{indent}<{name}{props} />\n"

        children = "".join(
            self.render_node(
                child,
                tag_to_var,
                indent + self.indent,
                loop_bindings,
                path + (_segment(child, index),),
            )
            for index, child in enumerate(node.children)
        )
        return f"{indent}<{name}{props}>\n{children}{indent}</{name}>\n"

    def _render_props(self, node: ElementNode) -> str:
        return "".join(
            f" {self.attribute_mapper(name)}={render_attribute_value(value)}"
            for name, value in node.attributes.items()
        )


def render_templates(
    default_node: ElementNode,
    named_nodes: Sequence[ElementNode],
    tag_to_var: Dict[str, str],
) -> List[str]:
    """Render a default template plus named templates with default settings."""
    return TemplateCodegen().render_templates(default_node, named_nodes, tag_to_var)
