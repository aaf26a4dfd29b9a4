"""
  Duo Parser

Precedence-climbing recursive descent over a fixed table of binary operator
levels, tightest first. Every operator application becomes a Message with the
left operand as receiver, so `1+2*3` reads as `1.+(2.*(3))`.

- numbers -> int
- strings -> str
- `name`        -> Message(None, name)            (slot reference, args None)
- `name(a, b)`  -> Message(None, name, (a, b))    (call, args a tuple)
- `x.name(...)` -> Message(x, name, ...)          ('.' is collapsed here)
- `x op y`      -> Message(x, op, (y,))
- `x name y`    -> Message(x, name, (y,))         (identifier as infix message)
"""

from __future__ import annotations

from typing import Optional

from duo import Node
from duo.errors import DuoSyntaxError
from duo.printer import MAX_SAFE_INTEGER, normalize_number, show
from duo.reader.lexer import Token, TokenKind, tokenize
from duo.types.message import Message


LEVELS: tuple[frozenset[str] | None, ...] = (
    frozenset({"."}),
    frozenset({"*", "/", "%"}),
    frozenset({"+", "-"}),
    frozenset({"<", ">", "<=", ">="}),
    frozenset({"==", "!="}),
    None,  # identifier used as an infix message: `obj setA 123`
    frozenset({"&&", "||"}),
    frozenset({":=", "="}),
    frozenset({";"}),
)

KEYWORD_LEVEL = LEVELS.index(None)
ASSIGNMENT_LEVEL = 7
TOP_LEVEL = len(LEVELS) - 1
ARGUMENT_SEPARATOR = ","


_SAFE_DIGITS = len(str(MAX_SAFE_INTEGER))


def _number_literal(text: str) -> int | float:
    # long literals go through float so huge ones read as Infinity
    if len(text) <= _SAFE_DIGITS:
        return normalize_number(int(text))
    return normalize_number(float(text))


def _binary(lhs: Node, op: str, rhs: Node) -> Message:
    if op != ".":
        return Message(lhs, op, (rhs,))
    # `lhs.name(args)` keeps rhs's name and args with lhs as receiver
    if not isinstance(rhs, Message) or rhs.receiver is not None:
        raise DuoSyntaxError(f"Expected a slot name after '.', got {show(rhs)}")
    return Message(lhs, rhs.name, rhs.args)


class TokenStream:
    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def expect(self, kind: TokenKind, text: str) -> Token:
        tok = self.advance()
        if tok is None:
            raise DuoSyntaxError(f"Expected '{text}' but input ended")
        if tok.kind is not kind or tok.text != text:
            raise DuoSyntaxError(f"Expected '{text}' but found '{tok.text}'")
        return tok

    def _at_level(self, level: int) -> bool:
        tok = self.peek()
        if tok is None:
            return False
        if level == KEYWORD_LEVEL:
            return tok.kind is TokenKind.SYMBOL
        return tok.kind is TokenKind.OPERATOR and tok.text in LEVELS[level]

    def parse_level(self, level: int = TOP_LEVEL) -> Node:
        if level < 0:
            return self.parse_factor()
        lhs = self.parse_level(level - 1)
        while self._at_level(level):
            op = self.advance().text
            if level == ASSIGNMENT_LEVEL:
                # right-associative: `a := b := 1` assigns b first
                return Message(lhs, op, (self.parse_level(level),))
            lhs = _binary(lhs, op, self.parse_level(level - 1))
        return lhs

    def parse_factor(self) -> Node:
        tok = self.advance()
        if tok is None:
            raise DuoSyntaxError("Unexpected end of input")

        if tok.kind is TokenKind.NUMBER:
            return _number_literal(tok.text)

        if tok.kind is TokenKind.STRING:
            return tok.text

        if tok.kind is TokenKind.LPAREN:
            expr = self.parse_level(TOP_LEVEL)
            self.expect(TokenKind.RPAREN, ")")
            return expr

        if tok.kind is TokenKind.SYMBOL:
            nxt = self.peek()
            if nxt is not None and nxt.kind is TokenKind.LPAREN:
                self.advance()
                return Message(None, tok.text, self.parse_arguments())
            return Message(None, tok.text)

        if tok.kind is TokenKind.RPAREN:
            raise DuoSyntaxError("Unmatched ')'")
        raise DuoSyntaxError(f"Unexpected operator '{tok.text}'")

    def parse_arguments(self) -> tuple[Node, ...]:
        """Read `a, b, c)` after an opening parenthesis."""
        nxt = self.peek()
        if nxt is not None and nxt.kind is TokenKind.RPAREN:
            self.advance()
            return ()
        args: list[Node] = []
        while True:
            args.append(self.parse_level(TOP_LEVEL))
            nxt = self.peek()
            if nxt is not None and nxt.kind is TokenKind.OPERATOR and nxt.text == ARGUMENT_SEPARATOR:
                self.advance()
                continue
            self.expect(TokenKind.RPAREN, ")")
            return tuple(args)

    def parse_program(self) -> Node:
        if self.at_end():
            raise DuoSyntaxError("Empty input")
        expr = self.parse_level(TOP_LEVEL)
        tok = self.peek()
        if tok is not None:
            raise DuoSyntaxError(f"Unexpected token '{tok.text}' after {show(expr)}")
        return expr


def parse(tokens: list[Token]) -> Node:
    """Parse a normalized token list into a single Message tree (or literal)."""
    return TokenStream(tokens).parse_program()


def read(source: str) -> Node:
    """Tokenize and parse source text."""
    return parse(tokenize(source))
