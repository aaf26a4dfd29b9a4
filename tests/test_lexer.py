import pytest
from hypothesis import given, strategies as st

from duo.errors import DuoLexicalError
from duo.reader.lexer import Token, TokenKind, lex, tokenize


def _texts(source):
    return "|".join(tok.text for tok in tokenize(source))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("123", [Token(TokenKind.NUMBER, "123")]),
        ("abc", [Token(TokenKind.SYMBOL, "abc")]),
        ('"abc def"', [Token(TokenKind.STRING, "abc def")]),
        ('""', [Token(TokenKind.STRING, "")]),
        ("(", [Token(TokenKind.LPAREN, "(")]),
        (")", [Token(TokenKind.RPAREN, ")")]),
        ("a_1", [Token(TokenKind.SYMBOL, "a_1")]),
        ("_x", [Token(TokenKind.SYMBOL, "_x")]),
        ("<=", [Token(TokenKind.OPERATOR, "<=")]),
        (":=", [Token(TokenKind.OPERATOR, ":=")]),
        ("||", [Token(TokenKind.OPERATOR, "||")]),
        (
            "a:=1",
            [
                Token(TokenKind.SYMBOL, "a"),
                Token(TokenKind.OPERATOR, ":="),
                Token(TokenKind.NUMBER, "1"),
            ],
        ),
        (
            "1==2",
            [
                Token(TokenKind.NUMBER, "1"),
                Token(TokenKind.OPERATOR, "=="),
                Token(TokenKind.NUMBER, "2"),
            ],
        ),
    ],
)
def test_lexer_basic(source, expected):
    assert tokenize(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("123", "123"),
        ("abc", "abc"),
        ('"abc def"', "abc def"),
        ('"abc "\n"def"', "abc |;|def"),
        (";;abc;def;;zzz;;", "abc|;|def|;|zzz"),
        (
            ';;;abc.f(;c;,;;a;;b;;)  ;;;;;  def(;;"a b c";) ; ; xxx; zzz ;;  ;',
            "abc|.|f|(|c|,|a|;|b|)|;|def|(|a b c|)|;|xxx|;|zzz",
        ),
        ("a\n\n\nb", "a|;|b"),
        ("a +\n b", "a|+|b"),
        ("a\n + b", "a|+|b"),
        ("f(\n1\n)", "f|(|1|)"),
    ],
)
def test_terminator_normalization(source, expected):
    assert _texts(source) == expected


def test_string_then_newline_yields_one_terminator():
    tokens = tokenize('"abc"\n"def"')
    assert [t.kind for t in tokens] == [TokenKind.STRING, TokenKind.OPERATOR, TokenKind.STRING]
    assert tokens[1].is_terminator


def test_newline_and_semicolon_become_the_same_token():
    assert tokenize("a\nb") == tokenize("a;b")


def test_string_content_is_verbatim():
    # no escape processing: backslashes and '#' survive untouched
    assert tokenize(r'"a\nb # c"') == [Token(TokenKind.STRING, r"a\nb # c")]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a # comment\nb", "a|;|b"),
        ("# only a comment", ""),
        ("x := 1 # trailing", "x|:=|1"),
        ("a\r\nb", "a|;|b"),
        ("  \t a \t ", "a"),
    ],
)
def test_comments_and_whitespace(source, expected):
    assert _texts(source) == expected


def test_only_separators_is_empty():
    assert tokenize(";;\n ;\n") == []
    assert tokenize("") == []


def test_raw_lex_keeps_every_terminator():
    raw = list(lex("a;;b"))
    assert [t.text for t in raw] == ["a", ";", ";", "b"]


@pytest.mark.parametrize("source", ["a @ b", "1 ! 2", '"unterminated', "x : y", "a & b", "$"])
def test_unrecognized_character_is_lexical_error(source):
    with pytest.raises(DuoLexicalError):
        tokenize(source)


def test_lexical_error_names_the_character_and_offset():
    with pytest.raises(DuoLexicalError, match=r"at 2: '@'"):
        tokenize("a @ b")


@pytest.mark.parametrize("source", ["٣ + 1", "1٣", "１"])
def test_non_ascii_digits_are_not_numbers(source):
    with pytest.raises(DuoLexicalError):
        tokenize(source)


# -------------------------------
# Hypothesis tests
# -------------------------------
_pieces = st.sampled_from(
    [
        "abc", "x1", "_", "42", '"s t"', "(", ")", ".", "*", "%", "+", "-", "/",
        "<", ">", "=", ",", "<=", ">=", "==", "!=", ":=", "&&", "||", ";", "\n",
        " ", "\t", "# note\n",
    ]
)


@given(st.lists(_pieces, max_size=40))
def test_lexer_no_crash(pieces):
    source = "".join(pieces)
    try:
        tokens = tokenize(source)
    except Exception as e:
        assert False, f"Lexer crashed on {source!r}: {e}"
    # normalization never leaves a terminator at either end or two in a row
    if tokens:
        assert not tokens[0].is_terminator
        assert not tokens[-1].is_terminator
    for prev, cur in zip(tokens, tokens[1:]):
        assert not (prev.is_terminator and cur.is_terminator)
