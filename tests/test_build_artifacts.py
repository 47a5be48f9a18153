import json
from pathlib import Path

import pytest

from reactwire.compiler.build import build_project
from reactwire.compiler.build_artifacts import ArtifactBuilder, compile_file
from reactwire.compiler.exceptions import TemplateSyntaxError
from reactwire.config import CompilerConfig

CARD = "<template><div class='card'>{{ props.title }}</div></template>"
LIST = """
<template name="row">
  <li>{{ props.label }}</li>
</template>

<template>
  <ul>
    <loop template="row" array="{{ props.rows }}" key="id" />
  </ul>
</template>
"""


@pytest.fixture
def src_dir(tmp_path: Path) -> Path:
    src = tmp_path / "templates"
    (src / "nested").mkdir(parents=True)
    (src / "card.jsx.html").write_text(CARD, encoding="utf-8")
    (src / "nested" / "list.jsx.html").write_text(LIST, encoding="utf-8")
    (src / "_draft.jsx.html").write_text("<broken>", encoding="utf-8")
    (src / "notes.txt").write_text("not a template", encoding="utf-8")
    return src


def test_build_into_out_dir(src_dir: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"

    summary = build_project(src_dir=src_dir, out_dir=out_dir)

    assert summary.templates == 2
    assert summary.components == 3
    assert summary.out_dir == out_dir.resolve()
    assert (out_dir / "card.jsx").exists()
    assert (out_dir / "nested" / "list.jsx").exists()
    assert not (out_dir / "_draft.jsx").exists()

    card = (out_dir / "card.jsx").read_text(encoding="utf-8")
    assert card.startswith("import React from 'react';\n\nexport default function(props) {\n")
    assert "    <div className='card'>\n      { props.title }\n    </div>\n" in card

    listing = (out_dir / "nested" / "list.jsx").read_text(encoding="utf-8")
    assert "export function Row(props) {" in listing
    assert "const loop0 = props.rows.map(e => (" in listing

    manifest = json.loads((out_dir / "manifest.json").read_text(encoding="utf-8"))
    assert manifest["version"] == 1
    assert set(manifest["entries"]) == {"card.jsx.html", str(Path("nested") / "list.jsx.html")}
    assert manifest["entries"]["card.jsx.html"]["components"] == 1


def test_build_next_to_sources(src_dir: Path) -> None:
    summary = ArtifactBuilder(CompilerConfig(src_dir=src_dir, react_import=False)).build()

    assert summary.out_dir == src_dir.resolve()
    assert sorted(p.name for p in summary.outputs) == ["card.jsx", "list.jsx"]
    assert (src_dir / "nested" / "list.jsx").read_text(encoding="utf-8").startswith(
        "export function Row(props) {"
    )
    assert not (src_dir / "manifest.json").exists()


def test_build_stops_on_first_error(src_dir: Path, tmp_path: Path) -> None:
    (src_dir / "bad.jsx.html").write_text("<template><p></template>", encoding="utf-8")
    with pytest.raises(TemplateSyntaxError) as exc_info:
        build_project(src_dir=src_dir, out_dir=tmp_path / "out")
    assert exc_info.value.file_path.endswith("bad.jsx.html")


def test_missing_src_dir(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        build_project(src_dir=tmp_path / "nope")


def test_compile_file(src_dir: Path) -> None:
    module = compile_file(src_dir / "card.jsx.html", CompilerConfig(src_dir=src_dir))
    assert module.startswith("import React from 'react';")
