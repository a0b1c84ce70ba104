# regex_engine/ast.py

from enum import Enum, auto


class RegexNode:
    """Base interface, every node compares by class and fields."""

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)


class CharNode(RegexNode):
    """Single literal character."""
    def __init__(self, ch: str):
        self.ch = ch  # a single character

    def __repr__(self):
        return f"'{self.ch}'"


class DotNode(RegexNode):
    """Wildcard '.' matches any character."""
    def __repr__(self):
        return "."


class DigitNode(RegexNode):
    r"""'\d' matches one decimal digit."""
    def __repr__(self):
        return "\\d"


class WordNode(RegexNode):
    r"""'\w' matches one alphanumeric character or '_'."""
    def __repr__(self):
        return "\\w"


class CharClassNode(RegexNode):
    """[abc] or [^abc]: membership test on one character."""
    def __init__(self, members, negated: bool = False):
        self.members = frozenset(members)
        self.negated = negated

    def __repr__(self):
        body = "".join(sorted(self.members))
        return f"[{'^' if self.negated else ''}{body}]"


class StartAnchorNode(RegexNode):
    """'^' zero-width, only at offset 0."""
    def __repr__(self):
        return "^"


class EndAnchorNode(RegexNode):
    """'$' zero-width, only at the end of input."""
    def __repr__(self):
        return "$"


class ConcatNode(RegexNode):
    """Concatenation: n1 · n2 · ... (may be empty)."""
    def __init__(self, nodes):
        self.nodes = list(nodes)

    def __repr__(self):
        return "(" + "·".join(repr(n) for n in self.nodes) + ")"


class UnionNode(RegexNode):
    """Alternation: b1 | b2 | ... evaluated left to right."""
    def __init__(self, branches):
        self.branches = list(branches)

    def __repr__(self):
        return "(" + "|".join(repr(b) for b in self.branches) + ")"


class RepeatKind(Enum):
    ZERO_OR_ONE = auto()   # ?
    ONE_OR_MORE = auto()   # +
    ZERO_OR_MORE = auto()  # *


REPEAT_SUFFIX = {
    RepeatKind.ZERO_OR_ONE: "?",
    RepeatKind.ONE_OR_MORE: "+",
    RepeatKind.ZERO_OR_MORE: "*",
}


class RepeatNode(RegexNode):
    """Quantified child: (child)? (child)+ (child)*"""
    def __init__(self, child: RegexNode, kind: RepeatKind):
        self.child = child
        self.kind = kind

    def __repr__(self):
        return f"({self.child}){REPEAT_SUFFIX[self.kind]}"


class GroupNode(RegexNode):
    """Capturing group, numbered by its opening parenthesis from 1."""
    def __init__(self, group_id: int, child: RegexNode):
        self.group_id = group_id
        self.child = child

    def __repr__(self):
        return f"#{self.group_id}{{{self.child}}}"


class BackrefNode(RegexNode):
    r"""'\N' repeats the text last captured by group N."""
    def __init__(self, group_id: int):
        self.group_id = group_id

    def __repr__(self):
        return f"\\{self.group_id}"
