"""Shared fixtures for go2rpm tests."""

from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import pytest

from go2rpm.exec import CommandResult


class FakeRunner:
    """
    Stand-in for CommandRunner that records argv lists and replays
    canned results matched by the longest argv prefix.
    """

    def __init__(self):
        self.calls: List[List[str]] = []
        self.cwds: List[Optional[Path]] = []
        self._responses: Dict[Tuple[str, ...], Callable[[List[str]], CommandResult]] = {}

    def on(
        self,
        prefix: Tuple[str, ...],
        exit_code: int = 0,
        stdout: str = "",
        stderr: str = "",
        error: Optional[dict] = None,
    ) -> None:
        def respond(argv: List[str]) -> CommandResult:
            return CommandResult(argv=argv, exit_code=exit_code, stdout=stdout, stderr=stderr, error=error)

        self._responses[tuple(prefix)] = respond

    def on_missing(self, prefix: Tuple[str, ...]) -> None:
        self.on(
            prefix,
            exit_code=127,
            error={"type": "command_not_found", "message": f"Command not found: {prefix[0]}", "context": {}},
        )

    def run(self, argv, cwd=None, timeout_sec=None) -> CommandResult:
        argv = [str(arg) for arg in argv]
        self.calls.append(argv)
        self.cwds.append(cwd)

        matches = [p for p in self._responses if tuple(argv[:len(p)]) == p]
        if not matches:
            return CommandResult(argv=argv, exit_code=0)
        return self._responses[max(matches, key=len)](argv)

    def called(self, *prefix: str) -> List[List[str]]:
        return [argv for argv in self.calls if tuple(argv[:len(prefix)]) == prefix]


@pytest.fixture
def fake_runner():
    """A FakeRunner with no canned responses (every command succeeds silently)."""
    return FakeRunner()


MIT_TEXT = """\
Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
"""

BSD_TEXT = """\
Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are met:

1. Redistributions of source code must retain the above copyright notice,
   this list of conditions and the following disclaimer.
2. Redistributions in binary form must reproduce the above copyright notice,
   this list of conditions and the following disclaimer in the documentation.
"""


@pytest.fixture
def mit_text():
    return MIT_TEXT


@pytest.fixture
def bsd_text():
    return BSD_TEXT


@pytest.fixture
def go_checkout(tmp_path):
    """
    A fake git checkout of a small Go package:
    README.md, LICENSE (MIT), two Go files and a vendored directory.
    """
    checkout = tmp_path / "golang-github-example-tail"
    (checkout / ".git").mkdir(parents=True)
    (checkout / ".git" / "HEAD").write_text("ref: refs/heads/master\n")
    (checkout / "README.md").write_text("# tail\n")
    (checkout / "LICENSE").write_text(MIT_TEXT)
    (checkout / "tail.go").write_text("package tail\n")
    (checkout / "watch").mkdir()
    (checkout / "watch" / "inotify.go").write_text("package watch\n")
    (checkout / "main.c").write_text("int main() {}\n")
    return checkout
