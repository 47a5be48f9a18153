"""Main code generator: parsed template file -> JSX module source."""

import logging
import re
from typing import Dict, List, Optional

from jinja2 import Environment, PackageLoader

from reactwire.compiler import constants
from reactwire.compiler.ast_nodes import ParsedTemplateFile
from reactwire.compiler.codegen.template import TemplateCodegen
from reactwire.compiler.exceptions import TemplateSyntaxError
from reactwire.config import CompilerConfig

logger = logging.getLogger(__name__)

# Module layout lives in a Jinja2 template; output is JavaScript, not HTML.
_env = Environment(
    loader=PackageLoader("reactwire", "templates"),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")
_NAME_SEPARATORS = re.compile(r"[-_.:\s]+")

REACT_IDENTIFIER = "React"


def to_component_name(name: str) -> str:
    """PascalCase a tag or template name: ``todo-item`` -> ``TodoItem``."""
    parts = _NAME_SEPARATORS.split(name.strip())
    return "".join(part[:1].upper() + part[1:] for part in parts if part)


class CodeGenerator:
    """Resolves component names and assembles the final JSX module."""

    def __init__(
        self,
        config: Optional[CompilerConfig] = None,
        template_codegen: Optional[TemplateCodegen] = None,
    ) -> None:
        self.react_import = config.react_import if config is not None else True
        self.template_codegen = template_codegen or TemplateCodegen()

    def build_name_table(self, parsed: ParsedTemplateFile) -> Dict[str, str]:
        """Map every imported and named-template tag to its JS identifier."""
        tag_to_var: Dict[str, str] = {}
        owners: Dict[str, str] = {}
        if self.react_import:
            owners[REACT_IDENTIFIER] = "react"

        declared = [(imp.name, imp.line) for imp in parsed.imports] + [
            (node.attributes.get(constants.TEMPLATE_NAME_ATTR) or "", node.line)
            for node in parsed.named_templates
        ]

        for name, line in declared:
            identifier = to_component_name(name)
            if not _JS_IDENTIFIER.match(identifier):
                raise TemplateSyntaxError(
                    f"'{name}' does not form a valid component identifier",
                    file_path=parsed.file_path,
                    line=line,
                )
            if name in tag_to_var:
                raise TemplateSyntaxError(
                    f"'{name}' is declared more than once",
                    file_path=parsed.file_path,
                    line=line,
                )
            if identifier in owners:
                raise TemplateSyntaxError(
                    f"'{name}' and '{owners[identifier]}' both resolve to "
                    f"identifier '{identifier}'",
                    file_path=parsed.file_path,
                    line=line,
                )
            tag_to_var[name] = identifier
            owners[identifier] = name

        return tag_to_var

    def generate(self, parsed: ParsedTemplateFile) -> str:
        """Generate the JSX module for a parsed template file."""
        tag_to_var = self.build_name_table(parsed)
        functions: List[str] = self.template_codegen.render_templates(
            parsed.default_template, parsed.named_templates, tag_to_var
        )

        imports = [
            {"identifier": tag_to_var[imp.name], "source": imp.source}
            for imp in parsed.imports
        ]
        module = _env.get_template("module.jsx.j2").render(
            react_import=self.react_import,
            imports=imports,
            functions=functions,
        )

        logger.debug(
            "Generated module for %s with %d function(s)",
            parsed.file_path or "<string>",
            len(functions),
        )
        return module.lstrip("\n")


def compile_template(
    content: str, file_path: str = "", config: Optional[CompilerConfig] = None
) -> str:
    """Parse and compile template source into a JSX module in one call."""
    from reactwire.compiler.parser import TemplateParser

    parsed = TemplateParser().parse(content, file_path)
    return CodeGenerator(config).generate(parsed)
