"""Interactive review of findings in an external editor.

In interactive mode every matching chain suffix of a source becomes a
finding. When a source has findings they are written, one per line, to a
temporary error list in the same ``lineno: source: found 'text'`` shape a
compiler uses, and the editor is started as ``<editor> -e <list> <source>``
so editor macros can step through them and make systematic changes.

The editor's exit status decides whether the run goes on: zero continues
with the next source, anything else stops the run cleanly.

"""

from __future__ import annotations

import os
import shlex
import subprocess
import tempfile
from collections.abc import Sequence

from cgrep.driver import Hit
from cgrep.errors import EditorError
from cgrep.utils.logger import get_logger

logger = get_logger(__name__)

# Shell convention for "command not found"
_NOT_FOUND = 127


def write_findings(findings: Sequence[Hit], path: str) -> None:
    """Write ``findings`` as an error list to ``path``."""
    with open(path, "w", encoding="utf-8", errors="surrogateescape") as report:
        for finding in findings:
            report.write(finding.format())
            report.write("\n")


def review_findings(findings: Sequence[Hit], source_name: str, editor: str) -> bool:
    """Open ``source_name`` in ``editor`` with ``findings`` as error list.

    Args:
        findings: Findings of one source, in source order
        source_name: The source the findings refer to
        editor: Editor command line, split shell-style

    Returns:
        True to continue with the next source, False to stop the run.

    Raises:
        EditorError: If the editor cannot be executed
    """
    if not findings:
        return True
    try:
        argv = shlex.split(editor)
    except ValueError as exc:
        raise EditorError(editor, str(exc)) from exc
    if not argv:
        raise EditorError(editor, "empty command")

    fd, report_path = tempfile.mkstemp(prefix="cgr", suffix=".err")
    os.close(fd)
    try:
        write_findings(findings, report_path)
        logger.debug("%s: %d findings, starting %s", source_name, len(findings), argv[0])
        try:
            completed = subprocess.run([*argv, "-e", report_path, source_name], check=False)
        except OSError as exc:
            raise EditorError(editor, f"cannot execute: {exc}") from exc
    finally:
        os.unlink(report_path)

    if completed.returncode == _NOT_FOUND:
        raise EditorError(editor, "cannot execute")
    if completed.returncode != 0:
        logger.debug("editor exited with status %d, stopping", completed.returncode)
        return False
    return True
