"""Tests for the public API: Template, tplfn, child and render helpers."""

import pytest

import qtpl
from qtpl import (
    BufferSink,
    Template,
    TemplateConfig,
    TemplateSyntaxError,
    child,
    render_bytes,
    render_string,
    tplfn,
)


@tplfn("<h1>Hello, {name}!</h1>")
def greeting(name):
    pass


@tplfn("Copyright {owner}")
def notice(owner):
    pass


@tplfn(
    """
    <html>
        <body>{!c body}</body>
        <footer>{!c footer}</footer>
    </html>
    """
)
def page(body, footer):
    pass


class TestTemplate:
    """Template objects."""

    def test_render_string(self) -> None:
        hello = Template("Hello, <strong>{name}</strong>!", params=("name",))
        assert hello.render_string("<world>") == "Hello, <strong>&lt;world&gt;</strong>!"

    def test_render_bytes(self) -> None:
        assert Template("<b>{x}</b>").render_bytes(x=1) == b"<b>1</b>"

    def test_render_into_sink(self) -> None:
        sink = BufferSink()
        Template("<i>{x}</i>", params=("x",)).render(sink, "y")
        assert sink.getvalue() == b"<i>y</i>"

    def test_call(self) -> None:
        sink = BufferSink()
        Template("{x}", params=("x",))(sink, "called")
        assert sink.getvalue() == b"called"

    def test_params(self) -> None:
        template = Template("{a}{b}", params=["a", "b"])
        assert template.params == ("a", "b")
        assert template.render_string(1, b=2) == "12"

    def test_too_many_positional(self) -> None:
        with pytest.raises(TypeError, match="takes 1 positional arguments but 2 were given"):
            Template("{a}", params=("a",)).render_string(1, 2)

    def test_multiple_values(self) -> None:
        with pytest.raises(TypeError, match="multiple values for argument 'a'"):
            Template("{a}", params=("a",)).render_string(1, a=2)

    def test_program_exposed(self) -> None:
        template = Template("<b>{x}</b>")
        assert len(template.program) == 4

    def test_repr(self) -> None:
        assert repr(Template("x", name="page.html")) == "<Template page.html>"
        assert repr(Template("x")) == "<Template <template>>"

    def test_syntax_error_at_construction(self) -> None:
        with pytest.raises(TemplateSyntaxError, match="page.html"):
            Template("{!z x}", name="page.html")

    def test_reusable(self) -> None:
        template = Template("{n}", params=("n",))
        assert [template.render_string(i) for i in range(3)] == ["0", "1", "2"]


class TestTplfn:
    """The tplfn decorator."""

    def test_quoted_attribute(self) -> None:
        @tplfn("<a class={!q cls}>Hello!</a>")
        def link(cls):
            pass

        assert render_string(link, "world") == '<a class="world">Hello!</a>'

    def test_keyword_arguments(self) -> None:
        assert render_string(greeting, name="you") == "<h1>Hello, you!</h1>"

    def test_defaults_applied(self) -> None:
        @tplfn("<b>{name}</b>")
        def badge(name="anonymous"):
            pass

        assert render_string(badge) == "<b>anonymous</b>"

    def test_body_mapping_merged(self) -> None:
        @tplfn("{greeting}, {name}!")
        def hello(name):
            return {"greeting": "Hello"}

        assert render_string(hello, "world") == "Hello, world!"

    def test_body_runs_with_arguments(self) -> None:
        @tplfn("<span>{total}</span>")
        def total(prices):
            return {"total": sum(prices)}

        assert render_string(total, [1, 2, 3]) == "<span>6</span>"

    def test_bad_arguments(self) -> None:
        with pytest.raises(TypeError):
            render_string(greeting, "a", "b")

    def test_program_attribute(self) -> None:
        assert len(greeting.program) == 4

    def test_wraps(self) -> None:
        assert greeting.__name__ == "greeting"

    def test_syntax_error_at_decoration(self) -> None:
        with pytest.raises(TemplateSyntaxError, match="broken"):

            @tplfn("{!z x}")
            def broken(x):
                pass


class TestComposition:
    """Templates rendering other templates into the same sink."""

    def test_page(self) -> None:
        out = render_string(page, child(greeting, "world"), child(notice, "bigcorp"))
        assert out == (
            "<html><body><h1>Hello, world!</h1></body>"
            "<footer>Copyright bigcorp</footer></html>"
        )

    def test_child_call(self) -> None:
        @tplfn("<ul>{!t row(item) }</ul>")
        def one(item):
            return {"row": row}

        @tplfn("<li>{item}</li>")
        def row(item):
            pass

        assert render_string(one, "&") == "<ul><li>&amp;</li></ul>"

    def test_child_call_in_loop_value(self) -> None:
        @tplfn("<li>{item}</li>")
        def row(item):
            pass

        @tplfn("<ul>{!c rows}</ul>")
        def listing(items):
            def rows(sink):
                for item in items:
                    row(sink, item)

            return {"rows": rows}

        assert render_string(listing, ["a", "b"]) == "<ul><li>a</li><li>b</li></ul>"

    def test_nested_templates(self) -> None:
        inner = Template("<em>{x}</em>", params=("x",))
        outer = Template("<p>{!c body}</p>", params=("body",))
        assert outer.render_string(child(inner.render, "deep")) == "<p><em>deep</em></p>"


class TestRenderHelpers:
    """Module-level helpers."""

    def test_render_bytes(self) -> None:
        assert render_bytes(greeting, "x") == b"<h1>Hello, x!</h1>"

    def test_render_string(self) -> None:
        assert render_string(greeting, "é") == "<h1>Hello, é!</h1>"

    def test_render_string_uses_template_encoding(self) -> None:
        config = TemplateConfig(encoding="latin-1")

        @tplfn("<b>café {name}</b>", config=config)
        def latin(name):
            pass

        template = Template("<b>café {name}</b>", params=("name",), config=config)
        assert render_bytes(latin, "né") == b"<b>caf\xe9 n\xe9</b>"
        assert render_string(latin, "né") == "<b>café né</b>"
        assert render_string(template.render, "né") == template.render_string("né")

    def test_render_convenience(self) -> None:
        sink = BufferSink()
        qtpl.render("<b>{x}</b>", sink, {"x": "<"})
        assert sink.getvalue() == b"<b>&lt;</b>"

    def test_render_without_values(self) -> None:
        sink = BufferSink()
        qtpl.render("<br>", sink)
        assert sink.getvalue() == b"<br>"
