"""Shared fixtures for cgrep tests."""

from __future__ import annotations

import shlex
import sys
from pathlib import Path

import pytest

FAKE_EDITOR = """\
import sys

flag, report, source = sys.argv[1:]
with open(sys.argv[0] + ".log", "a", encoding="utf-8") as log:
    log.write(f"{flag} {source}\\n")
    with open(report, encoding="utf-8") as findings:
        log.write(findings.read())
    log.write(f"report={report}\\n")
sys.exit({status})
"""


class FakeEditor:
    """An editor stand-in that logs its arguments and the findings it got."""

    def __init__(self, directory: Path, status: int = 0) -> None:
        self.script = directory / f"editor_{status}.py"
        self.script.write_text(FAKE_EDITOR.replace("{status}", str(status)), encoding="utf-8")
        self.log = Path(str(self.script) + ".log")
        self.command = f"{shlex.quote(sys.executable)} {shlex.quote(str(self.script))}"

    def calls(self) -> list[str]:
        if not self.log.exists():
            return []
        return self.log.read_text(encoding="utf-8").splitlines()


@pytest.fixture
def fake_editor(tmp_path: Path) -> FakeEditor:
    return FakeEditor(tmp_path)


@pytest.fixture
def failing_editor(tmp_path: Path) -> FakeEditor:
    return FakeEditor(tmp_path, status=1)


@pytest.fixture
def c_source(tmp_path: Path):
    """Factory writing a C source file under tmp_path."""

    def write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8", "surrogateescape"))
        return path

    return write
