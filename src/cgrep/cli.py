"""Command line interface.

    cgrep [-r NEW] [-clnsA] [-S] [pattern] [file ...]

cgrep checks every C identifier chain against a regular expression that
must match in full. ``cgrep tmp *.c`` finds ``tmp`` but not ``tmpname``,
nor ``tmp`` inside a string or comment. Identifiers joined by ``.`` or
``->`` are tested as a whole and by every trailing part, so ``ptr->val``
is found by ``val`` and by ``ptr->val`` even when split by comments,
spaces or line breaks.

Without files cgrep reads standard input; with ``-r`` and no files the
rewritten text goes to standard output.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from cgrep import __version__
from cgrep.config import SearchConfig, SearchMode
from cgrep.driver import Hit, SourcePass
from cgrep.editor import review_findings
from cgrep.errors import CgrepError, ConfigError, SourceError
from cgrep.files import iter_chunks, open_source, replace_file, stdin_source
from cgrep.pattern import Pattern, compile_pattern
from cgrep.utils.logger import configure_cli_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cgrep",
        description="egrep for C source: match whole identifiers and a.b->c chains",
    )
    parser.add_argument(
        "-r",
        "--replace",
        metavar="NEW",
        dest="replacement",
        help="replace matching bare identifiers with NEW (no other options allowed)",
    )
    parser.add_argument("-c", "--comments", action="store_true", help="list all comments; takes no pattern")
    parser.add_argument("-s", "--strings", action="store_true", help="list all strings; takes no pattern")
    parser.add_argument("-l", "--files-with-matches", action="store_true", help="list files with hits, not lines")
    parser.add_argument("-n", "--line-number", action="store_true", help="prefix found lines with line numbers")
    parser.add_argument(
        "-A",
        "--interactive",
        action="store_true",
        help="review each file's findings in an editor (see --editor)",
    )
    parser.add_argument(
        "-S",
        "--start",
        action="store_true",
        help="report chains split over several lines at their first line",
    )
    parser.add_argument("--editor", help="editor command for -A (default: $CGREP_EDITOR or 'me')")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug information")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("args", nargs="*", metavar="pattern file", help="pattern, then files")
    return parser


def config_from_args(args: argparse.Namespace) -> SearchConfig:
    options = {
        "list_files": args.files_with_matches,
        "line_numbers": args.line_number,
        "strings_only": args.strings,
        "comments_only": args.comments,
        "interactive": args.interactive,
        "replacement": args.replacement,
        "report_chain_start": args.start,
    }
    if args.editor is not None:
        options["editor"] = args.editor
    return SearchConfig.from_dict(options)


def _write(line: str) -> None:
    sys.stdout.write(line)
    sys.stdout.write("\n")


def _search(config: SearchConfig, pattern: Pattern | None, path: str | None) -> list[Hit]:
    """Scan one source, printing hits; returns findings for review."""
    findings: list[Hit] = []
    if path is None:
        stream = stdin_source()
    else:
        stream = open_source(path)
    with stream:
        for hit in SourcePass(config, pattern, path).scan(iter_chunks(stream)):
            if config.interactive:
                findings.append(hit)
            else:
                _write(hit.format(line_numbers=config.line_numbers))
    return findings


def _replace(config: SearchConfig, pattern: Pattern, path: str | None) -> None:
    if path is None:
        with stdin_source() as stream:
            sys.stdout.writelines(SourcePass(config, pattern).rewrite(iter_chunks(stream)))
        return
    run = SourcePass(config, pattern, path)
    with open_source(path) as stream:
        lines = list(run.rewrite(iter_chunks(stream)))
    if run.changed:
        replace_file(path, lines)
        logger.debug("%s: rewritten", path)


def run(config: SearchConfig, pattern: Pattern | None, sources: Sequence[str | None]) -> int:
    """Process ``sources`` in order; None stands for standard input.

    Unopenable sources are logged and skipped. Returns the exit status.
    """
    for path in sources:
        try:
            if config.mode is SearchMode.REPLACE:
                assert pattern is not None
                _replace(config, pattern, path)
                continue
            findings = _search(config, pattern, path)
        except SourceError as exc:
            logger.warning("warning %s", exc)
            continue
        if findings and path is not None:
            if not review_findings(findings, path, config.editor):
                break
    sys.stdout.flush()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_cli_logging(args.verbose)

    config = config_from_args(args)
    positional = list(args.args)
    pattern: Pattern | None = None
    try:
        if config.needs_pattern:
            if not positional:
                raise ConfigError("a pattern is required")
            pattern = compile_pattern(positional.pop(0))
        config.validate(has_sources=bool(positional))
    except ConfigError as exc:
        parser.error(str(exc))
    except CgrepError as exc:
        logger.error("%s", exc)
        return 1

    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")

    sources: list[str | None] = list(positional) if positional else [None]
    try:
        return run(config, pattern, sources)
    except CgrepError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
