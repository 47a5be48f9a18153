try:
    from ._version import __version__
except ImportError:
    from importlib.metadata import version, PackageNotFoundError

    try:
        __version__ = version("reactwire")
    except PackageNotFoundError:
        __version__ = "unknown"

from reactwire.compiler.codegen.generator import CodeGenerator, compile_template
from reactwire.compiler.codegen.template import TemplateCodegen, render_templates
from reactwire.compiler.exceptions import (
    MalformedNodeError,
    MissingLoopAttributeError,
    ReactWireError,
    RenderError,
    TemplateSyntaxError,
    UnresolvedReferenceError,
)
from reactwire.compiler.parser import TemplateParser
from reactwire.config import CompilerConfig

__all__ = [
    "CodeGenerator",
    "CompilerConfig",
    "TemplateCodegen",
    "TemplateParser",
    "compile_template",
    "render_templates",
    "ReactWireError",
    "TemplateSyntaxError",
    "RenderError",
    "MalformedNodeError",
    "MissingLoopAttributeError",
    "UnresolvedReferenceError",
]
