"""Reserved tag names, attribute names and binding patterns."""

import re

TEMPLATE_TAG = "template"
IMPORT_TAG = "import"
LOOP_TAG = "loop"

TEMPLATE_NAME_ATTR = "name"
IMPORT_NAME_ATTR = "name"
IMPORT_FROM_ATTR = "from"

LOOP_TEMPLATE_ATTR = "template"
LOOP_ARRAY_ATTR = "array"
LOOP_KEY_ATTR = "key"
LOOP_REQUIRED_ATTRS = (LOOP_TEMPLATE_ATTR, LOOP_ARRAY_ATTR, LOOP_KEY_ATTR)

# Expression body: anything that does not open or close another binding.
_EXPR = r"((?:(?!\{\{|\}\}).)*?)"

# Any `{{ expr }}` occurrence.
BINDING_PATTERN = re.compile(r"\{\{\s*" + _EXPR + r"\s*\}\}", re.DOTALL)

# A value that is exactly one `{{ expr }}`.
STRICT_PATTERN = re.compile(r"^\s*\{\{\s*" + _EXPR + r"\s*\}\}\s*$", re.DOTALL)

# `true` / `false`, bare or wrapped in a binding. Checked before STRICT_PATTERN.
BOOLEAN_PATTERN = re.compile(
    r"^\s*(?:\{\{\s*(true|false)\s*\}\}|(true|false))\s*$", re.IGNORECASE
)

# Elements that never have children or a closing tag.
VOID_ELEMENTS = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
    IMPORT_TAG,
}
