"""Compiler exceptions."""

from typing import Optional, Sequence


class ReactWireError(Exception):
    """Base class for every error raised by the compiler."""


class TemplateSyntaxError(ReactWireError):
    """Raised when a template file cannot be parsed."""

    def __init__(
        self, message: str, file_path: str = "", line: Optional[int] = None
    ) -> None:
        self.message = message
        self.file_path = file_path
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        location = self.file_path or "<template>"
        if self.line is not None:
            location = f"{location}:{self.line}"
        return f"{location}: {self.message}"


class RenderError(ReactWireError):
    """Raised when a parsed tree cannot be rendered.

    ``path`` points at the offending node (``template > div > loop[1]``) and
    ``template`` names the template whose rendering was aborted.
    """

    def __init__(
        self,
        message: str,
        path: Sequence[str] = (),
        template: Optional[str] = None,
    ) -> None:
        self.message = message
        self.path = tuple(path)
        self.template = template
        super().__init__(message)

    @property
    def node_path(self) -> str:
        return " > ".join(self.path)

    def __str__(self) -> str:
        parts = []
        if self.template is not None:
            parts.append(f"[{self.template}]")
        if self.path:
            parts.append(f"at {self.node_path}:")
        parts.append(self.message)
        return " ".join(parts)


class MalformedNodeError(RenderError):
    """Unknown node type, or a template container without a body."""


class MissingLoopAttributeError(RenderError):
    """A loop directive lacks one of its required attributes."""

    def __init__(
        self,
        attribute: str,
        path: Sequence[str] = (),
        template: Optional[str] = None,
    ) -> None:
        self.attribute = attribute
        super().__init__(
            f"<loop> is missing required attribute '{attribute}'", path, template
        )


class UnresolvedReferenceError(RenderError):
    """A name could not be resolved through the name-resolution table."""

    def __init__(
        self,
        name: str,
        path: Sequence[str] = (),
        template: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        self.name = name
        super().__init__(message or f"unresolved reference '{name}'", path, template)
