import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from django.conf import settings

from matching.backend.regex_engine.engine import RegexEngine

logger = logging.getLogger(__name__)


class GrepError(Exception):
    pass


class GrepFileError(GrepError):
    def __init__(self, path, reason):
        super().__init__(f"Error opening file {path}: {reason}")
        self.path = path
        self.reason = reason


class LineMatch:
    def __init__(self, source: Optional[str], line_no: int, line: str):
        self.source = source
        self.line_no = line_no
        self.line = line

    def render(self, with_source: bool = False) -> str:
        if with_source and self.source is not None:
            return f"{self.source}:{self.line}"
        return self.line

    def as_dict(self):
        return {"line_no": self.line_no, "line": self.line}

    def __repr__(self):
        return f"LineMatch({self.source!r}, {self.line_no}, {self.line!r})"


def grep_setting(key: str, default=None):
    return getattr(settings, "GREPPER", {}).get(key, default)


class GrepService:

    @staticmethod
    def iter_paths(paths: Iterable[str], recursive: bool = False) -> Iterator[Path]:
        for raw in paths:
            p = Path(raw)
            if p.is_dir():
                if not recursive:
                    raise GrepFileError(raw, "Is a directory")
                for child in sorted(p.rglob("*")):
                    if child.is_file():
                        yield child
            else:
                yield p

    @staticmethod
    def search_lines(engine: RegexEngine, lines: Iterable[str],
                     source: Optional[str] = None) -> List[LineMatch]:
        results = []
        for line_no, line in enumerate(lines, 1):
            # '$' must see the end of the text, not the newline
            text = line.rstrip("\r\n")
            if engine.matches(text):
                results.append(LineMatch(source, line_no, text))
        return results

    @staticmethod
    def search_files(engine: RegexEngine, paths: Iterable[str],
                     recursive: bool = False) -> Iterator[LineMatch]:
        """
        Yield matches file by file, in the order the paths are walked.
        Stops with GrepFileError on the first file that cannot be read.
        """
        encoding = grep_setting("ENCODING", "utf-8")
        for p in GrepService.iter_paths(paths, recursive):
            try:
                with p.open(encoding=encoding, errors="replace") as f:
                    found = GrepService.search_lines(engine, f, source=str(p))
            except OSError as e:
                logger.warning("cannot read %s: %s", p, e)
                raise GrepFileError(str(p), e.strerror or e) from e
            logger.debug("%s: %d matching lines", p, len(found))
            yield from found

    @staticmethod
    def search_text(pattern: str, text: str) -> List[LineMatch]:
        """All matching lines of a multi-line text, callers apply their own limit."""
        engine = RegexEngine(pattern)
        return GrepService.search_lines(engine, text.splitlines())
