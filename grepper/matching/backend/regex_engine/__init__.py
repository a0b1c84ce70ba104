from .parser import parse, RegexParser
from .matcher import match_pattern, match_node
from .engine import RegexEngine, compile

__all__ = ["parse", "RegexParser", "match_pattern", "match_node", "RegexEngine", "compile"]
