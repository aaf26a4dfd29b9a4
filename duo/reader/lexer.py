"""
  Duo Lexer

- Single regex with named groups, tried in a fixed priority order:
  number, string, '(', ')', operator (two-character forms first),
  terminator, whitespace, comment, identifier
- Newlines and ';' both become the terminator token ';'
- A normalization pass removes terminators that would only produce empty
  statements, so blank lines and stray semicolons are harmless:

    ";;abc;def;;zzz;;"  ->  abc ; def ; zzz
    "f(;a;,;b;)"        ->  f ( a , b )
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from duo.errors import DuoLexicalError


class TokenKind(Enum):
    NUMBER = "num"
    STRING = "str"
    LPAREN = "("
    RPAREN = ")"
    SYMBOL = "sym"
    OPERATOR = "binop"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    @property
    def is_terminator(self) -> bool:
        return self.kind is TokenKind.OPERATOR and self.text == TERMINATOR

    def __str__(self) -> str:
        return self.text


TERMINATOR = ";"

TOKEN_RE = re.compile(
    r"(?P<number>[0-9]+)"
    r'|"(?P<string>[^"]*)"'  # no escapes: content is verbatim
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<operator><=|>=|==|!=|:=|&&|\|\||[.*%+\-/<>=,])"
    r"|(?P<terminator>[\n;])"
    r"|(?P<whitespace>[ \t\r]+)"
    r"|(?P<comment>#[^\n]*)"  # runs up to, not including, the newline
    r"|(?P<symbol>[a-zA-Z_][a-zA-Z0-9_]*)"
)

_KINDS: dict[str, TokenKind] = {
    "number": TokenKind.NUMBER,
    "string": TokenKind.STRING,
    "lparen": TokenKind.LPAREN,
    "rparen": TokenKind.RPAREN,
    "operator": TokenKind.OPERATOR,
    "symbol": TokenKind.SYMBOL,
}


def lex(source: str) -> Iterator[Token]:
    """Raw token generator; terminators are not yet normalized."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            raise DuoLexicalError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        group = m.lastgroup
        if group in ("whitespace", "comment"):
            continue
        if group == "terminator":
            yield Token(TokenKind.OPERATOR, TERMINATOR)
        else:
            yield Token(_KINDS[group], m.group(group))


def normalize(tokens: list[Token]) -> list[Token]:
    """Drop terminators that cannot end a statement.

    A terminator is dropped when it is leading or trailing, when it follows
    '(' or any operator (a run of terminators included), or when it precedes
    ')' or any operator.
    """
    result: list[Token] = []
    for tok in tokens:
        if tok.is_terminator:
            if not result or result[-1].kind in (TokenKind.LPAREN, TokenKind.OPERATOR):
                continue
            result.append(tok)
            continue
        if tok.kind in (TokenKind.RPAREN, TokenKind.OPERATOR) and result and result[-1].is_terminator:
            result.pop()
        result.append(tok)
    if result and result[-1].is_terminator:
        result.pop()
    return result


def tokenize(source: str) -> list[Token]:
    """Convert source text into the normalized token list consumed by the parser."""
    return normalize(list(lex(source)))
