# regex_engine/lexer.py

from enum import Enum, auto


class TokenType(Enum):
    LPAREN = auto()     # (
    RPAREN = auto()     # )
    LBRACKET = auto()   # [
    RBRACKET = auto()   # ]
    STAR = auto()       # *
    PLUS = auto()       # +
    QUESTION = auto()   # ?
    UNION = auto()      # |
    DOT = auto()        # .
    CARET = auto()      # ^
    DOLLAR = auto()     # $
    BACKSLASH = auto()  # \
    CHAR = auto()       # literal character
    END = auto()        # end of pattern


SPECIAL = {
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '[': TokenType.LBRACKET,
    ']': TokenType.RBRACKET,
    '*': TokenType.STAR,
    '+': TokenType.PLUS,
    '?': TokenType.QUESTION,
    '|': TokenType.UNION,
    '.': TokenType.DOT,
    '^': TokenType.CARET,
    '$': TokenType.DOLLAR,
    '\\': TokenType.BACKSLASH,
}


class Token:
    def __init__(self, token_type: TokenType, ch: str, index: int):
        self.type = token_type
        self.ch = ch  # source character, '' for END
        self.index = index

    def is_digit(self) -> bool:
        return len(self.ch) == 1 and '0' <= self.ch <= '9'

    def __repr__(self):
        if self.type == TokenType.CHAR:
            return f"CHAR('{self.ch}')@{self.index}"
        return f"{self.type.name}@{self.index}"


class Lexer:
    def lex(self, pattern: str):
        if pattern is None:
            raise ValueError("pattern == None")

        out = []
        # str iteration is per character, so multi-byte input keeps char indices
        for i, c in enumerate(pattern):
            out.append(Token(SPECIAL.get(c, TokenType.CHAR), c, i))

        out.append(Token(TokenType.END, '', len(pattern)))
        return out
