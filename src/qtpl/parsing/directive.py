"""Directive block parsing.

A directive is a brace group: ``{expr}`` or ``{!m expr}`` where ``m`` is a
formatting modifier. The expression is Python, rebuilt from the group's
tokens and compiled once here.

Errors never abort the parse. A bad modifier falls back to the default
kind; a bad expression drops the directive. Either way a diagnostic is
recorded and the parser moves on to find further errors.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from qtpl.errors import Diagnostic
from qtpl.instructions import DEFER_CALL_NAME
from qtpl.items import MODIFIERS, DirectiveItem, DirectiveKind, Expression, Item
from qtpl.location import Span
from qtpl.tokens import Token, TokenType, join_tokens
from qtpl.utils.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


def _is_path(node: ast.expr) -> bool:
    """Check for a dotted name such as ``body`` or ``self.footer``."""
    while isinstance(node, ast.Attribute):
        node = node.value
    return isinstance(node, ast.Name)


class DirectiveParsingMixin:
    """Mixin parsing brace groups into DirectiveItem.

    Required Host Attributes:
        - _items: list[Item]
        - _filename: str
        - diagnostics: list[Diagnostic]

    """

    _items: list[Item]
    _filename: str
    diagnostics: list[Diagnostic]

    def _error(self, span: Span, message: str) -> None:
        self.diagnostics.append(Diagnostic(span, message))

    def _parse_directive(self, group: Token) -> None:
        """Parse one GROUP token, appending a DirectiveItem on success."""
        children = group.children
        kind = DirectiveKind.DEFAULT
        start = 0

        if children and children[0].type == TokenType.PUNCT and children[0].value == "!":
            if len(children) < 2 or children[1].type != TokenType.IDENT:
                self._error(children[0].span, "expected formatting directive after '!'")
                return
            modifier = children[1]
            found = MODIFIERS.get(modifier.value)
            if found is None:
                self._error(modifier.span, f"invalid formatting directive: {modifier.value}")
            else:
                kind = found
            start = 2

        expr_tokens = children[start:]
        if not expr_tokens:
            self._error(group.span, "expected expression")
            return

        expression = self._compile_expression(kind, expr_tokens)
        if expression is None:
            logger.debug("Dropped directive at %d:%d", group.span.start, group.span.end)
            return
        self._items.append(DirectiveItem(group.span, kind, expression))

    def _compile_expression(
        self, kind: DirectiveKind, tokens: Sequence[Token]
    ) -> Expression | None:
        """Validate and compile the expression for a directive of ``kind``.

        Child calls are rewritten to collect their callee and arguments
        without calling; child capabilities must be a dotted path.
        """
        source = join_tokens(list(tokens))
        span = tokens[0].span.join(tokens[-1].span)

        try:
            tree = ast.parse(source, mode="eval")
        except (SyntaxError, ValueError) as exc:
            self._error(span, f"invalid expression: {getattr(exc, 'msg', exc)}")
            return None

        match kind:
            case DirectiveKind.CHILD_CALL:
                call = tree.body
                if not isinstance(call, ast.Call):
                    self._error(span, "expected call expression here")
                    return None
                tree.body = ast.Call(
                    func=ast.Name(id=DEFER_CALL_NAME, ctx=ast.Load()),
                    args=[call.func, *call.args],
                    keywords=call.keywords,
                )
            case DirectiveKind.CHILD_CAPABILITY:
                if not _is_path(tree.body):
                    self._error(span, "expected path expression here")
                    return None
        ast.fix_missing_locations(tree)

        try:
            code = compile(tree, self._filename, "eval")
        except (SyntaxError, ValueError) as exc:
            self._error(span, f"invalid expression: {getattr(exc, 'msg', exc)}")
            return None
        return Expression(source, span, code)
