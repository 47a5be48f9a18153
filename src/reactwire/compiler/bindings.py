"""Classification and rendering of `{{ binding }}` values.

Rules are tried in order and the first match wins:

1. BOOLEAN       ``true`` / ``{{ False }}``       -> ``{ false }``
2. STRICT        ``{{ expr }}``                   -> ``{ expr }``
3. INTERPOLATED  ``btn {{ kind }}``               -> ``{ `btn ${ kind }` }``
4. LITERAL       ``plain``                        -> ``'plain'``

The order matters: ``{{ true }}`` is also a strict binding, and every strict
binding also matches the interpolation pattern.
"""

import enum
from dataclasses import dataclass
from typing import Optional

from reactwire.compiler.constants import (
    BINDING_PATTERN,
    BOOLEAN_PATTERN,
    STRICT_PATTERN,
)


class BindingKind(enum.Enum):
    BOOLEAN = "boolean"
    STRICT = "strict"
    INTERPOLATED = "interpolated"
    LITERAL = "literal"


@dataclass(frozen=True)
class Binding:
    kind: BindingKind
    value: str


def normalize_attribute_value(value: Optional[str]) -> str:
    """Bare (``disabled``) and empty (``disabled=""``) attributes mean ``true``."""
    return value or "true"


def classify(value: str) -> Binding:
    """Classify a raw attribute value."""
    match = BOOLEAN_PATTERN.match(value)
    if match:
        keyword = match.group(1) or match.group(2)
        return Binding(BindingKind.BOOLEAN, keyword.lower())

    match = STRICT_PATTERN.match(value)
    if match:
        return Binding(BindingKind.STRICT, match.group(1))

    if BINDING_PATTERN.search(value):
        return Binding(BindingKind.INTERPOLATED, value)

    return Binding(BindingKind.LITERAL, value)


def strip_strict(value: str) -> str:
    """Remove the braces of a strict binding; other values are only trimmed."""
    match = STRICT_PATTERN.match(value)
    if match:
        return match.group(1).strip()
    return value.strip()


def _escape_template_literal(text: str) -> str:
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def _escape_js_string(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def render_string_literal(value: str) -> str:
    """Quote a literal attribute value.

    JSX attribute strings have no escape sequences, so the value is emitted
    verbatim inside whichever quote it does not contain. A value holding
    both quote characters becomes a JS string in an expression container.
    """
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    return f"{{ '{_escape_js_string(value)}' }}"


def render_interpolation(value: str) -> str:
    """Turn ``a {{ b }} c`` into the template string ```a ${ b } c```."""
    parts = []
    position = 0
    for match in BINDING_PATTERN.finditer(value):
        parts.append(_escape_template_literal(value[position : match.start()]))
        parts.append(f"${{ {match.group(1)} }}")
        position = match.end()
    parts.append(_escape_template_literal(value[position:]))
    return "`" + "".join(parts) + "`"


def render_attribute_value(value: Optional[str]) -> str:
    """Render the right-hand side of ``name=...`` for a JSX attribute."""
    binding = classify(normalize_attribute_value(value))

    if binding.kind is BindingKind.BOOLEAN:
        return f"{{ {binding.value} }}"
    if binding.kind is BindingKind.STRICT:
        return f"{{ {binding.value} }}"
    if binding.kind is BindingKind.INTERPOLATED:
        return f"{{ {render_interpolation(binding.value)} }}"
    return render_string_literal(binding.value)


def _escape_jsx_text(text: str) -> str:
    # A lone brace would open a JSX expression container.
    return "".join(
        "{'{'}" if char == "{" else "{'}'}" if char == "}" else char
        for char in text
    )


def render_text(value: str) -> str:
    """Rewrite every ``{{ expr }}`` in a text node as ``{ expr }``."""
    parts = []
    position = 0
    for match in BINDING_PATTERN.finditer(value):
        parts.append(_escape_jsx_text(value[position : match.start()]))
        parts.append(f"{{ {match.group(1)} }}")
        position = match.end()
    parts.append(_escape_jsx_text(value[position:]))
    return "".join(parts)
