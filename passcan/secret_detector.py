"""
Secret detection logic for Passcan

Files are evaluated line by line: every pattern is searched on each line
and a label is kept the first time it matches. Patterns therefore never
match across a newline; a secret split over two lines goes unreported.
Lines longer than MAX_LINE_LENGTH are evaluated in consecutive chunks so
the backtracking engine only ever sees bounded input.

A catch-all rule (Generic Token) is dropped for a line only when each of
its matches sits inside an AWS, OpenAI or Slack match on that line, so a
bare OpenAI key is reported once. Password matches never shadow it.
"""
import io
import re
from typing import Iterable, List, Tuple

from passcan.config import CATCH_ALL_PATTERNS, MAX_LINE_LENGTH, SECRET_PATTERNS, SHADOWING_PATTERNS
from passcan.models import ScanResult


class PatternCompileError(Exception):
    """A built-in secret pattern is not a valid regular expression"""


def compile_patterns(patterns) -> Tuple[Tuple[str, re.Pattern], ...]:
    compiled = []
    for label, source in patterns:
        try:
            compiled.append((label, re.compile(source)))
        except re.error as e:
            raise PatternCompileError(f"Pattern {label!r} does not compile: {e}") from e
    return tuple(compiled)


COMPILED_PATTERNS = compile_patterns(SECRET_PATTERNS)


def _covered(span, spans) -> bool:
    start, end = span
    return any(s <= start and end <= e for s, e in spans)


class SecretDetector:
    """Detects credential-like strings in text files"""

    def __init__(self, patterns=COMPILED_PATTERNS, catch_all=CATCH_ALL_PATTERNS,
                 shadowing=SHADOWING_PATTERNS, max_line_length: int = MAX_LINE_LENGTH):
        self.patterns = patterns
        self.max_line_length = max_line_length
        self._specific = [(label, regex) for label, regex in patterns if label not in catch_all]
        self._catch_all = [(label, regex) for label, regex in patterns if label in catch_all]
        self._shadowing = [regex for label, regex in patterns if label in shadowing]

    def analyze_file(self, file_path: str) -> ScanResult:
        """Scan one file; open and read failures become an Error result"""
        try:
            with open(file_path, 'r', encoding='utf-8', errors='ignore') as f:
                secrets = self.scan_lines(self._read_chunks(f))
        except OSError as e:
            return ScanResult.failed(file_path, f"{type(e).__name__}: {e.strerror or e}")

        if secrets:
            return ScanResult.alert(file_path, secrets)
        return ScanResult.clean(file_path)

    def scan_lines(self, lines: Iterable[str]) -> List[str]:
        """Distinct matching labels, in first-seen order"""
        found = []
        for line in lines:
            hits = self._match_line(line, found)
            # pattern order within a line
            found.extend(label for label, _ in self.patterns if label in hits)
            if len(found) == len(self.patterns):
                break
        return found

    def scan_text(self, content: str) -> List[str]:
        """Same line splitting and chunking as analyze_file, for in-memory text"""
        return self.scan_lines(self._read_chunks(io.StringIO(content, newline=None)))

    def _match_line(self, line: str, found: List[str]) -> set:
        hits = {label for label, regex in self._specific
                if label not in found and regex.search(line)}

        pending = [(label, regex) for label, regex in self._catch_all if label not in found]
        if pending:
            spans = [m.span() for regex in self._shadowing for m in regex.finditer(line)]
            for label, regex in pending:
                if any(not _covered(m.span(), spans) for m in regex.finditer(line)):
                    hits.add(label)
        return hits

    def _read_chunks(self, f):
        while True:
            chunk = f.readline(self.max_line_length)
            if not chunk:
                return
            yield chunk.rstrip('\r\n')
