"""Code generators for scaffolding."""

from pathlib import Path
from typing import Optional

from reactwire.compiler.codegen.generator import to_component_name


def generate_template(name: str, directory: Optional[Path] = None) -> Path:
    """Generate a new component template."""
    templates_dir = directory or Path("templates")
    templates_dir.mkdir(parents=True, exist_ok=True)

    template_file = templates_dir / f"{name}.jsx.html"

    if template_file.exists():
        raise ValueError(f"Template {name} already exists")

    template = f"""<template name="{name}-item">
  <li>{{{{ props.label }}}}</li>
</template>

<template>
  <div class="{name}">
    <h1>{to_component_name(name)}</h1>
    <ul>
      <loop template="{name}-item" array="{{{{ props.items }}}}" key="id" />
    </ul>
  </div>
</template>
"""

    template_file.write_text(template, encoding="utf-8")
    return template_file
