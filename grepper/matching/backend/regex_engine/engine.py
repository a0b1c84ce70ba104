import logging

from .parser import RegexParser
from .matcher import search

logger = logging.getLogger(__name__)


class RegexEngine:
    """Parse once, then test as many lines as needed against the same AST."""

    def __init__(self, pattern: str):
        self.pattern = pattern

        parser = RegexParser()
        self.ast = parser.parse(self.pattern)
        self.group_count = parser.group_count
        logger.debug("compiled %r -> %r (%d groups)", pattern, self.ast, self.group_count)

    def matches(self, line: str) -> bool:
        return search(self.ast, line)

    test = matches

    def __repr__(self):
        return f"RegexEngine({self.pattern!r})"


def compile(pattern: str) -> RegexEngine:
    return RegexEngine(pattern)
