import pytest

from reactwire.compiler.ast_nodes import ElementNode, LoopNode, TextNode
from reactwire.compiler.exceptions import TemplateSyntaxError
from reactwire.compiler.parser import TemplateParser

SOURCE = """
<import name="todo-item" from="./todo-item">

<template name="empty-state">
  <p>Nothing to do</p>
</template>

<template>
  <div class="todos">
    <TodoCounter remainingCount="{{ props.remaining }}" onReset="{{ props.reset }}" />
    <ul>
      <loop template="todo-item" array="{{ props.todos }}" key="id" />
    </ul>
    <input type="checkbox" checked>
    <p>
      Tom &amp; Jerry
    </p>
  </div>
</template>
"""


@pytest.fixture
def parser() -> TemplateParser:
    return TemplateParser()


def test_top_level_structure(parser: TemplateParser) -> None:
    parsed = parser.parse(SOURCE, "todos.jsx.html")

    assert parsed.file_path == "todos.jsx.html"
    assert [(i.name, i.source) for i in parsed.imports] == [("todo-item", "./todo-item")]
    assert len(parsed.named_templates) == 1
    assert parsed.get_named_template("empty-state") is parsed.named_templates[0]
    assert parsed.get_named_template("missing") is None

    body = parsed.default_template.children
    assert len(body) == 1
    assert isinstance(body[0], ElementNode)
    assert body[0].tag == "div"
    assert body[0].attributes == {"class": "todos"}


def test_whitespace_is_dropped_and_void_elements_close(parser: TemplateParser) -> None:
    div = parser.parse(SOURCE).default_template.children[0]
    assert isinstance(div, ElementNode)

    assert [getattr(c, "tag", None) for c in div.children] == ["TodoCounter", "ul", "input", "p"]
    checkbox = div.children[2]
    assert isinstance(checkbox, ElementNode)
    assert checkbox.attributes == {"type": "checkbox", "checked": None}
    assert checkbox.children == []


def test_source_case_is_kept(parser: TemplateParser) -> None:
    div = parser.parse(SOURCE).default_template.children[0]
    counter = div.children[0]  # type: ignore[union-attr]
    assert isinstance(counter, ElementNode)
    assert counter.tag == "TodoCounter"
    assert counter.attributes == {
        "remainingCount": "{{ props.remaining }}",
        "onReset": "{{ props.reset }}",
    }


def test_loop_directive(parser: TemplateParser) -> None:
    div = parser.parse(SOURCE).default_template.children[0]
    ul = div.children[1]  # type: ignore[union-attr]
    directive = ul.children[0]  # type: ignore[union-attr]

    assert isinstance(directive, LoopNode)
    assert directive.template == "todo-item"
    assert directive.array == "{{ props.todos }}"
    assert directive.key == "id"
    assert directive.line == 12


def test_text_is_trimmed_and_entities_kept(parser: TemplateParser) -> None:
    div = parser.parse(SOURCE).default_template.children[0]
    p = div.children[3]  # type: ignore[union-attr]
    assert len(p.children) == 1  # type: ignore[union-attr]
    text = p.children[0]  # type: ignore[union-attr]
    assert isinstance(text, TextNode)
    assert text.value == "Tom &amp; Jerry"


def test_loop_with_children(parser: TemplateParser) -> None:
    source = """
<template>
  <ul>
    <loop template="row" array="{{ rows }}" key="id"><li>ignored</li></loop>
    <li>after</li>
  </ul>
</template>
"""
    ul = parser.parse(source).default_template.children[0]
    assert isinstance(ul.children[0], LoopNode)  # type: ignore[union-attr]
    assert len(ul.children[0].children) == 1  # type: ignore[union-attr]
    assert ul.children[1].tag == "li"  # type: ignore[union-attr]


def test_component_named_like_void_element(parser: TemplateParser) -> None:
    source = """
<template>
  <nav>
    <Link to="/">Home</Link>
    <input type="search">
    <Input value="x"></Input>
  </nav>
</template>
"""
    nav = parser.parse(source).default_template.children[0]
    assert isinstance(nav, ElementNode)
    assert [getattr(c, "tag", None) for c in nav.children] == ["Link", "input", "Input"]

    link, search, component = nav.children
    assert [c.value for c in link.children] == ["Home"]  # type: ignore[union-attr]
    assert search.children == []  # type: ignore[union-attr]
    assert component.children == []  # type: ignore[union-attr]


def test_component_named_like_void_element_as_root(parser: TemplateParser) -> None:
    root = parser.parse("<template><Link to='/'>Home</Link></template>").default_template
    assert len(root.children) == 1
    link = root.children[0]
    assert isinstance(link, ElementNode)
    assert link.tag == "Link"
    assert isinstance(link.children[0], TextNode)


def test_parse_file(parser: TemplateParser, tmp_path) -> None:
    path = tmp_path / "card.jsx.html"
    path.write_text("<template><div>{{ props.title }}</div></template>", encoding="utf-8")

    parsed = parser.parse_file(path)

    assert parsed.file_path == str(path)
    (text,) = parsed.default_template.children[0].children  # type: ignore[union-attr]
    assert isinstance(text, TextNode)
    assert text.value == "{{ props.title }}"
    assert text.line == 1


@pytest.mark.parametrize(
    "source, message",
    [
        ("<template name='a'><p></p></template>", "missing default"),
        ("<template><p></p></template><template><i></i></template>", "only one default"),
        (
            "<template name='a'><p></p></template><template name='a'><i></i></template><template><b></b></template>",
            "already defined",
        ),
        ("hello<template><p></p></template>", "unexpected text"),
        ("<div></div><template><p></p></template>", "not allowed at the top level"),
        ("<template><p></p><p></p></template>", "exactly one root node"),
        ("<template></template>", "exactly one root node"),
        ("<import name='x'><template><p></p></template>", "'from'"),
    ],
)
def test_structural_errors(parser: TemplateParser, source: str, message: str) -> None:
    with pytest.raises(TemplateSyntaxError) as exc_info:
        parser.parse(source, "broken.jsx.html")
    assert message in str(exc_info.value)
    assert exc_info.value.file_path == "broken.jsx.html"


def test_mismatched_closing_tag_reports_line(parser: TemplateParser) -> None:
    source = "<template>\n  <div>\n    <span>\n  </div>\n</template>\n"
    with pytest.raises(TemplateSyntaxError) as exc_info:
        parser.parse(source)
    assert exc_info.value.line == 4
    assert "expected </span>" in exc_info.value.message


def test_unclosed_tag(parser: TemplateParser) -> None:
    with pytest.raises(TemplateSyntaxError) as exc_info:
        parser.parse("<template>\n  <div>\n")
    assert "unclosed tag <div>" in str(exc_info.value)
    assert exc_info.value.line == 2


def test_stray_closing_tag(parser: TemplateParser) -> None:
    with pytest.raises(TemplateSyntaxError, match="unexpected closing tag"):
        parser.parse("</div><template><p></p></template>")
