# regex_engine/parser.py

from .lexer import Lexer, TokenType
from .ast import (
    RegexNode, CharNode, DotNode, DigitNode, WordNode, CharClassNode,
    StartAnchorNode, EndAnchorNode, ConcatNode, UnionNode,
    RepeatNode, RepeatKind, GroupNode, BackrefNode
)


QUANTIFIERS = {
    TokenType.QUESTION: RepeatKind.ZERO_OR_ONE,
    TokenType.PLUS: RepeatKind.ONE_OR_MORE,
    TokenType.STAR: RepeatKind.ZERO_OR_MORE,
}

# tokens that close a concat without being consumed by it
CONCAT_STOP = (TokenType.RPAREN, TokenType.UNION, TokenType.END)


class RegexParser:
    """
    Recursive descent, never raises on a pattern:
    unclosed '(' and '[' run to the end of the pattern, a stray ')' ends it.
    """

    def __init__(self):
        self.tokens = []
        self.pos = 0
        self.group_count = 0

    # ========= PUBLIC ==============
    def parse(self, pattern: str) -> RegexNode:
        self.tokens = Lexer().lex(pattern)
        self.pos = 0
        self.group_count = 0
        return self.parse_regex()   # regex := union

    # ========= Grammar ==========
    # regex := union
    def parse_regex(self):
        return self.parse_union()

    # union := concat { '|' concat }
    def parse_union(self):
        branches = [self.parse_concat()]
        while self.match(TokenType.UNION):
            branches.append(self.parse_concat())
        if len(branches) == 1:
            return branches[0]
        return UnionNode(branches)

    # concat := repeat*
    def parse_concat(self):
        nodes = []
        while self.peek().type not in CONCAT_STOP:
            nodes.append(self.parse_repeat())
        return ConcatNode(nodes)

    # repeat := atom ( '?' | '+' | '*' )?
    def parse_repeat(self):
        base = self.parse_atom()
        kind = QUANTIFIERS.get(self.peek().type)
        if kind is not None:
            self.next()
            return RepeatNode(base, kind)
        return base

    # atom := '(' regex ')' | '[' '^'? class ']' | '\' esc | '.' | '^' | '$' | CHAR
    def parse_atom(self):
        t = self.peek()
        if t.type == TokenType.LPAREN:
            self.next()  # consume '('
            # numbered on open, so outer groups come before inner ones
            self.group_count += 1
            group_id = self.group_count
            inside = self.parse_regex()
            self.match(TokenType.RPAREN)
            return GroupNode(group_id, inside)
        elif t.type == TokenType.LBRACKET:
            return self.parse_char_class()
        elif t.type == TokenType.BACKSLASH:
            self.next()
            return self.parse_escape()
        elif t.type == TokenType.DOT:
            self.next()
            return DotNode()
        elif t.type == TokenType.CARET:
            self.next()
            return StartAnchorNode()
        elif t.type == TokenType.DOLLAR:
            self.next()
            return EndAnchorNode()
        elif t.type == TokenType.END:
            return ConcatNode([])
        else:
            # quantifiers with nothing to repeat and ']' are plain characters here
            self.next()
            return CharNode(t.ch)

    # esc := 'd' | 'w' | DIGIT+ | any
    def parse_escape(self):
        t = self.peek()
        if t.type == TokenType.END:
            return CharNode('\\')
        self.next()
        if t.ch == 'd':
            return DigitNode()
        if t.ch == 'w':
            return WordNode()
        if t.is_digit():
            value = int(t.ch)
            while self.peek().is_digit():
                value = value * 10 + int(self.next().ch)
            if value == 0 or value > self.group_count:
                # the digits are consumed along with the backslash
                return CharNode('\\')
            return BackrefNode(value)
        return CharNode(t.ch)

    # class := '[' '^'? { any but ']' } ']'
    def parse_char_class(self):
        self.next()  # consume '['
        negated = self.match(TokenType.CARET)
        members = []
        while self.peek().type not in (TokenType.RBRACKET, TokenType.END):
            members.append(self.next().ch)
        self.match(TokenType.RBRACKET)
        return CharClassNode(members, negated)

    # ========= Helpers ==========

    def peek(self):
        return self.tokens[self.pos]

    def next(self):
        t = self.tokens[self.pos]
        self.pos = min(self.pos + 1, len(self.tokens) - 1)
        return t

    def match(self, token_type: TokenType):
        if self.peek().type == token_type:
            self.next()
            return True
        return False


def parse(pattern: str) -> RegexNode:
    return RegexParser().parse(pattern)
