"""Tests for the instruction emitter.

One instruction per normalized item, literal text pre-encoded, and a
Finish marker at the end of every program.
"""

import pytest

from qtpl import compile_template
from qtpl.config import TemplateConfig
from qtpl.emitter import Emitter
from qtpl.instructions import (
    Finish,
    InvokeChild,
    Program,
    WriteEscaped,
    WriteLiteral,
    WriteQuoted,
    WriteRawBytes,
)
from qtpl.items import DirectiveItem, DirectiveKind, Expression, Literal, TagEnd
from qtpl.location import Span


class TestInstructionSelection:
    """Each directive kind maps to one instruction type."""

    def test_all_kinds(self) -> None:
        program = compile_template("<a>{x}{!q y}{!b z}{!t f()}{!c g}</a>")
        assert [type(i) for i in program] == [
            WriteLiteral,
            WriteEscaped,
            WriteQuoted,
            WriteRawBytes,
            InvokeChild,
            InvokeChild,
            WriteLiteral,
            Finish,
        ]
        assert program.instructions[4].call is True
        assert program.instructions[5].call is False

    def test_literal_bytes(self) -> None:
        program = compile_template("<a>{x}</a>")
        assert program.instructions[0] == WriteLiteral(b"<a>")
        assert program.instructions[2] == WriteLiteral(b"</a>")

    def test_expression_source_kept(self) -> None:
        program = compile_template("{ user.name }")
        instruction = program.instructions[0]
        assert isinstance(instruction, WriteEscaped)
        assert instruction.expression.source == "user.name"

    def test_empty_template(self) -> None:
        assert compile_template("").instructions == (Finish(),)

    def test_whitespace_only_template(self) -> None:
        assert compile_template(" \n\t ").instructions == (Finish(),)

    def test_finish_is_last(self) -> None:
        program = compile_template("<p>{a} and {b}</p>")
        assert isinstance(program.instructions[-1], Finish)
        assert sum(isinstance(i, Finish) for i in program) == 1


class TestEmitterDirect:
    """Emitter used without the rest of the pipeline."""

    def test_literal_only(self) -> None:
        program = Emitter().emit([Literal(Span(0, 2), "hi")])
        assert isinstance(program, Program)
        assert program.instructions == (WriteLiteral(b"hi"), Finish())

    def test_directive(self) -> None:
        code = compile("x", "<test>", "eval")
        expression = Expression("x", Span(1, 2), code)
        program = Emitter().emit([DirectiveItem(Span(0, 3), DirectiveKind.QUOTE, expression)])
        assert program.instructions == (WriteQuoted(expression), Finish())

    def test_source_file(self) -> None:
        program = Emitter(source_file="page.html").emit([])
        assert program.source_file == "page.html"
        assert len(program) == 1

    def test_rejects_unnormalized_items(self) -> None:
        with pytest.raises(TypeError, match="TagEnd"):
            Emitter().emit([TagEnd(Span(0, 1))])


class TestEncoding:
    """Literal text is encoded with the configured encoding."""

    def test_utf8_default(self) -> None:
        program = compile_template("<b>café</b>")
        assert program.instructions[0] == WriteLiteral("<b>café</b>".encode())
        assert program.encoding == "utf-8"

    def test_latin1(self) -> None:
        config = TemplateConfig(encoding="latin-1")
        program = compile_template("<b>café</b>", config=config)
        assert program.instructions[0] == WriteLiteral(b"<b>caf\xe9</b>")
        assert program.encoding == "latin-1"
