"""E2E: generate a spec for a real GitHub package."""

import pytest

from go2rpm.cli.main import main


@pytest.mark.e2e
def test_e2e_spec_for_github_package(e2e_enabled, e2e_workspace):
    spec = e2e_workspace / "tail.spec"

    exit_code = main([
        "--workspace", str(e2e_workspace),
        "--spec", str(spec),
        "github.com/ActiveState/tail",
    ])

    assert exit_code == 0
    text = spec.read_text()
    assert "Name:           golang-github-ActiveState-tail" in text
    assert "License:        MIT" in text
    assert (e2e_workspace / "golang-github-ActiveState-tail" / ".git").is_dir()


@pytest.mark.e2e
def test_e2e_clone_failure(e2e_enabled, e2e_workspace, monkeypatch):
    monkeypatch.setenv("GIT_TERMINAL_PROMPT", "0")
    exit_code = main([
        "--workspace", str(e2e_workspace),
        "--quiet",
        "github.com/go2rpm-e2e/definitely-does-not-exist",
    ])
    assert exit_code == 1
