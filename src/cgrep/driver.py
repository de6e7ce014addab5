"""Line and replace driver: one pass over one source.

A SourcePass wires the lexer, the chain accumulator and the suffix matcher
together and turns their output into what the configured mode asks for:

- LINES / FILES: a Hit per matching line, or the source name once
- FINDINGS: a Hit per matching chain suffix
- LITERALS: a Hit per string body and per line of a comment body
- REPLACE: the source text with matching bare identifiers rewritten

Everything a pass needs (lexer state, chain, suffixes, line buffer, line
number, marked lines) lives on the pass object; nothing is shared between
sources.

Usage:
    >>> config = SearchConfig(line_numbers=True)
    >>> run = SourcePass(config, compile_pattern("ptr->val"), "x.c")
    >>> [hit.format(line_numbers=True) for hit in run.scan(["a = ptr->val;\\n"])]
    ['x.c:    1: a = ptr->val;']

"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto

from cgrep.chain import ChainAccumulator
from cgrep.config import SearchConfig, SearchMode
from cgrep.errors import ConfigError
from cgrep.events import EventType
from cgrep.lexer import Lexer
from cgrep.matcher import MatchPolicy, SuffixMatcher
from cgrep.pattern import Pattern
from cgrep.utils.logger import get_logger
from cgrep.utils.stringbuilder import splice

logger = get_logger(__name__)


class HitKind(Enum):
    """What a Hit reports."""

    LINE = auto()  # A line holding a matching chain
    FILE = auto()  # A source with at least one match
    FINDING = auto()  # One matching chain suffix or literal, for review
    STRING = auto()  # A string literal body
    COMMENT = auto()  # A comment body


@dataclass(frozen=True, slots=True)
class Hit:
    """A single report record.

    Attributes:
        kind: What is being reported
        text: Line text, found chain, or one line of a literal body
        lineno: Line number (1-indexed)
        source_name: Source path, None for standard input

    """

    kind: HitKind
    text: str
    lineno: int
    source_name: str | None = None

    def format(self, *, line_numbers: bool = False) -> str:
        """Render the hit the way it is printed.

        Lines and literals render as ``[source: ][lineno: ]text``, findings
        as ``lineno: source: found 'text'``.
        """
        if self.kind is HitKind.FILE:
            return self.source_name or ""
        if self.kind is HitKind.FINDING:
            return f"{self.lineno}: {self.source_name or '-'}: found '{self.text}'"
        prefix = ""
        if self.source_name is not None:
            prefix = f"{self.source_name}: "
        if line_numbers:
            prefix += f"{self.lineno:4d}: "
        return prefix + self.text


_POLICIES = {
    SearchMode.LINES: MatchPolicy.FIRST,
    SearchMode.FILES: MatchPolicy.FIRST,
    SearchMode.FINDINGS: MatchPolicy.ALL,
    SearchMode.REPLACE: MatchPolicy.BARE,
}


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


class SourcePass:
    """One forward pass over one source.

    Instances are single-use: create one per source.

    Args:
        config: Validated search configuration
        pattern: Compiled pattern, None only for string/comment listings
        source_name: Path reported with each hit, None for standard input

    Raises:
        ConfigError: If the mode needs a pattern and none was given

    """

    __slots__ = (
        "_config",
        "_mode",
        "_source_name",
        "_lexer",
        "_chain",
        "_matcher",
        "_held",  # Completed lines not yet reported, (lineno, text)
        "_marked",  # Line numbers holding a match
        "_done",
        "changed",
    )

    def __init__(
        self,
        config: SearchConfig,
        pattern: Pattern | None = None,
        source_name: str | None = None,
    ) -> None:
        self._config = config
        self._mode = config.mode
        self._source_name = source_name
        self._lexer = Lexer()
        self._chain = ChainAccumulator()
        self._matcher: SuffixMatcher | None = None
        if self._mode is not SearchMode.LITERALS:
            if pattern is None:
                raise ConfigError("a pattern is required unless listing strings or comments")
            self._matcher = SuffixMatcher(pattern, _POLICIES[self._mode])
        self._held: deque[tuple[int, str]] = deque()
        self._marked: set[int] = set()
        self._done = False
        self.changed = False

    @property
    def lineno(self) -> int:
        """Number of the line being scanned."""
        return self._lexer.lineno

    def scan(self, chunks: Iterable[str]) -> Iterator[Hit]:
        """Search the source.

        Args:
            chunks: Source text, in any chunking

        Yields:
            Hits in source order. In FILES mode at most one hit is produced
            and scanning stops there.
        """
        if self._mode is SearchMode.REPLACE:
            raise ConfigError("replace mode rewrites text; use rewrite()")
        if self._mode is SearchMode.LITERALS:
            yield from self._scan_literals(chunks)
        elif self._mode is SearchMode.FINDINGS:
            yield from self._scan_findings(chunks)
        else:
            yield from self._scan_lines(chunks)
        logger.debug("%s: scanned %d lines", self._source_name or "<stdin>", self.lineno - 1)

    def rewrite(self, chunks: Iterable[str]) -> Iterator[str]:
        """Rewrite matching bare identifiers.

        A matching identifier is only rewritten if it stands alone: one
        followed by ``.`` or ``->`` is the head of a chain and left as is,
        as is every later component of a chain. Comments and line breaks
        between the identifier and the separator do not count, so lines
        are held back while a match waits for the next token.

        Args:
            chunks: Source text, in any chunking

        Yields:
            Each line of the source, rewritten, with its original line
            terminator. Concatenated they reproduce every byte of the input
            except the rewritten tokens. ``changed`` is set once any token
            was rewritten.
        """
        if self._mode is not SearchMode.REPLACE:
            raise ConfigError("rewrite() requires a replacement")
        assert self._matcher is not None
        replacement = self._config.replacement or ""
        chain = self._chain
        # Completed lines not yet written, with the spans to rewrite in each
        held: deque[tuple[str, list[tuple[int, int]]]] = deque()
        spans: list[tuple[int, int]] = []
        # Matching identifier waiting for the next token: (spans of its line, span)
        pending: tuple[list[tuple[int, int]], tuple[int, int]] | None = None

        for event in self._lexer.tokenize(chunks):
            event_type = event.type
            if event_type is EventType.COMMENT:
                continue
            if event_type is EventType.LINE_END:
                held.append((event.text, spans))
                spans = []
                if pending is None:
                    yield from self._flush(held, replacement)
                continue
            if pending is not None:
                line_spans, span = pending
                pending = None
                # A separator makes the identifier the head of a chain
                if event_type is not EventType.DOT:
                    line_spans.append(span)
                yield from self._flush(held, replacement)
            chain.advance(event)
            if event_type is EventType.WORD and self._matcher.check(chain.text, chain.suffixes):
                pending = (spans, (event.start, event.end))

        if pending is not None:
            line_spans, span = pending
            line_spans.append(span)
        yield from self._flush(held, replacement)

    def _flush(
        self, held: deque[tuple[str, list[tuple[int, int]]]], replacement: str
    ) -> Iterator[str]:
        """Write out held lines, applying their rewrites."""
        while held:
            line, spans = held.popleft()
            if spans:
                self.changed = True
                yield splice(line, spans, replacement)
            else:
                yield line

    # =========================================================================
    # Mode implementations
    # =========================================================================

    def _scan_lines(self, chunks: Iterable[str]) -> Iterator[Hit]:
        assert self._matcher is not None
        chain = self._chain
        check = self._matcher.check
        report_start = self._config.report_chain_start

        for event in self._lexer.tokenize(chunks):
            if event.type is EventType.LINE_END:
                self._held.append((event.lineno, _strip_newline(event.text)))
                # Lines a live chain started on may still be marked by it
                limit = chain.first_lineno if report_start else None
                yield from self._release(limit if limit is not None else event.lineno + 1)
                if self._done:
                    return
            elif chain.advance(event):
                hits = check(chain.text, chain.suffixes)
                if hits:
                    self._marked.add(hits[0].lineno if report_start else event.lineno)
        yield from self._release(None)

    def _release(self, limit: int | None) -> Iterator[Hit]:
        """Report held lines numbered below ``limit`` (all if None)."""
        held = self._held
        while held and not self._done and (limit is None or held[0][0] < limit):
            lineno, text = held.popleft()
            if lineno not in self._marked:
                continue
            self._marked.discard(lineno)
            if self._mode is SearchMode.FILES:
                self._done = True
                yield Hit(HitKind.FILE, self._source_name or "", lineno, self._source_name)
            else:
                yield Hit(HitKind.LINE, text, lineno, self._source_name)

    def _scan_findings(self, chunks: Iterable[str]) -> Iterator[Hit]:
        assert self._matcher is not None
        chain = self._chain
        check = self._matcher.check
        for event in self._lexer.tokenize(chunks):
            if chain.advance(event):
                for hit in check(chain.text, chain.suffixes):
                    yield Hit(HitKind.FINDING, hit.text, hit.lineno, self._source_name)

    def _scan_literals(self, chunks: Iterable[str]) -> Iterator[Hit]:
        config = self._config
        wanted: dict[EventType, HitKind] = {}
        if config.strings_only:
            wanted[EventType.STRING] = HitKind.STRING
        if config.comments_only:
            wanted[EventType.COMMENT] = HitKind.COMMENT
        for event in self._lexer.tokenize(chunks):
            kind = wanted.get(event.type)
            if kind is None:
                continue
            if config.interactive:
                kind = HitKind.FINDING
            # One report per physical line of a multi-line comment
            for offset, text in enumerate(event.text.split("\n")):
                yield Hit(kind, text, event.lineno + offset, self._source_name)
