# regex_engine/matcher.py

from typing import Dict, Set, Tuple, Sequence

from .ast import (
    RegexNode, CharNode, DotNode, DigitNode, WordNode, CharClassNode,
    StartAnchorNode, EndAnchorNode, ConcatNode, UnionNode,
    RepeatNode, RepeatKind, GroupNode, BackrefNode
)
from .parser import parse


# group id -> (start, end), half open, in characters
Captures = Dict[int, Tuple[int, int]]


# =========================================================
# single character predicates
# =========================================================

def char_matches(node: RegexNode, ch: str) -> bool:
    if isinstance(node, CharNode):
        return ch == node.ch
    if isinstance(node, DotNode):
        return True
    if isinstance(node, DigitNode):
        return ch.isdecimal()
    if isinstance(node, WordNode):
        return ch.isalnum() or ch == '_'
    if isinstance(node, CharClassNode):
        return (ch in node.members) != node.negated
    raise ValueError(f"Not a single character node: {type(node)}")


SINGLE_CHAR = (CharNode, DotNode, DigitNode, WordNode, CharClassNode)


# =========================================================
# match_node — every end offset reachable from pos
# =========================================================

def match_node(node: RegexNode, chars: Sequence[str], pos: int,
               captures: Captures) -> Set[int]:
    """
    Return the set of offsets where a match of `node` starting at `pos`
    can end. `captures` is updated in place with the spans of the groups
    that matched along the committed path.
    """
    if isinstance(node, SINGLE_CHAR):
        if pos < len(chars) and char_matches(node, chars[pos]):
            return {pos + 1}
        return set()

    if isinstance(node, StartAnchorNode):
        return {pos} if pos == 0 else set()

    if isinstance(node, EndAnchorNode):
        return {pos} if pos == len(chars) else set()

    if isinstance(node, ConcatNode):
        return match_concat(node, chars, pos, captures)

    if isinstance(node, UnionNode):
        return match_union(node, chars, pos, captures)

    if isinstance(node, RepeatNode):
        return match_repeat(node, chars, pos, captures)

    if isinstance(node, GroupNode):
        return match_group(node, chars, pos, captures)

    if isinstance(node, BackrefNode):
        return match_backref(node, chars, pos, captures)

    raise ValueError(f"Unknown AST node type: {type(node)}")


def step(node: RegexNode, chars, frontier: Set[int], captures: Captures) -> Set[int]:
    """Union of match_node over every position of the frontier."""
    out: Set[int] = set()
    for p in sorted(frontier):
        out |= match_node(node, chars, p, captures)
    return out


def match_concat(node: ConcatNode, chars, pos: int, captures: Captures) -> Set[int]:
    # all viable positions move forward together, no backtracking
    positions = {pos}
    for n in node.nodes:
        positions = step(n, chars, positions, captures)
        if not positions:
            return set()
    return positions


def match_union(node: UnionNode, chars, pos: int, captures: Captures) -> Set[int]:
    all_positions: Set[int] = set()
    chosen = None
    for branch in node.branches:
        local = dict(captures)
        res = match_node(branch, chars, pos, local)
        if res:
            all_positions |= res
            if chosen is None:
                chosen = local
    # first matching branch owns the captures
    if chosen is not None:
        captures.update(chosen)
    return all_positions


def match_repeat(node: RepeatNode, chars, pos: int, captures: Captures) -> Set[int]:
    if node.kind == RepeatKind.ZERO_OR_ONE:
        return {pos} | match_node(node.child, chars, pos, captures)

    results: Set[int] = set()
    if node.kind == RepeatKind.ZERO_OR_MORE:
        results.add(pos)

    frontier = match_node(node.child, chars, pos, captures)
    while frontier:
        results |= frontier
        # only positions not seen yet, so zero-width children terminate
        frontier = step(node.child, chars, frontier, captures) - results
    return results


def match_group(node: GroupNode, chars, pos: int, captures: Captures) -> Set[int]:
    local = dict(captures)
    ends = match_node(node.child, chars, pos, local)
    if not ends:
        return set()
    for end in sorted(ends):
        # last one wins: the longest span is what later backrefs see
        local[node.group_id] = (pos, end)
    captures.update(local)
    return ends


def match_backref(node: BackrefNode, chars, pos: int, captures: Captures) -> Set[int]:
    span = captures.get(node.group_id)
    if span is None:
        return set()
    start, end = span
    length = end - start
    if pos + length > len(chars):
        return set()
    if list(chars[pos:pos + length]) != list(chars[start:end]):
        return set()
    return {pos + length}


# =========================================================
# top level search
# =========================================================

def search(ast: RegexNode, line: str) -> bool:
    """True if `ast` matches `line` at some starting offset."""
    chars = list(line)
    for start in range(len(chars) + 1):
        if match_node(ast, chars, start, {}):
            return True
    return False


def match_pattern(line: str, pattern: str) -> bool:
    return search(parse(pattern), line)
