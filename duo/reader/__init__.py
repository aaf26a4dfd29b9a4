from duo.reader.lexer import Token, TokenKind, lex, normalize, tokenize
from duo.reader.parser import TokenStream, parse, read
