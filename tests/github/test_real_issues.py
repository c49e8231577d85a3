"""Tests for RealGitHubIssues with a mocked subprocess."""

import json
import subprocess
from typing import Any

import pytest
from pytest import MonkeyPatch

from trellis.github.issues import IssueInfo, RealGitHubIssues


def test_list_issues_parses_gh_json(monkeypatch: MonkeyPatch) -> None:
    calls: list[list[str]] = []

    def mock_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
        calls.append(cmd)
        stdout = json.dumps(
            [
                {
                    "number": 12,
                    "title": "Epic 1: Onboarding",
                    "state": "OPEN",
                    "url": "https://github.com/acme/widgets/issues/12",
                    "labels": [{"name": "type:epic"}, {"name": "phase:1"}],
                },
                {
                    "number": 13,
                    "title": "No labels",
                    "state": "OPEN",
                    "url": "https://github.com/acme/widgets/issues/13",
                    "labels": [],
                },
            ]
        )
        return subprocess.CompletedProcess(args=cmd, returncode=0, stdout=stdout, stderr="")

    monkeypatch.setattr("subprocess.run", mock_run)

    issues = RealGitHubIssues().list_issues("acme/widgets", state="open", limit=500)

    assert issues == [
        IssueInfo(
            number=12,
            title="Epic 1: Onboarding",
            state="OPEN",
            url="https://github.com/acme/widgets/issues/12",
            labels=["type:epic", "phase:1"],
        ),
        IssueInfo(
            number=13,
            title="No labels",
            state="OPEN",
            url="https://github.com/acme/widgets/issues/13",
            labels=[],
        ),
    ]
    assert calls == [
        [
            "gh",
            "issue",
            "list",
            "--repo",
            "acme/widgets",
            "--json",
            "number,title,state,url,labels",
            "--state",
            "open",
            "--limit",
            "500",
        ]
    ]


def test_add_label_runs_issue_edit(monkeypatch: MonkeyPatch) -> None:
    calls: list[list[str]] = []

    def mock_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
        calls.append(cmd)
        return subprocess.CompletedProcess(args=cmd, returncode=0, stdout="", stderr="")

    monkeypatch.setattr("subprocess.run", mock_run)

    RealGitHubIssues().add_label("acme/widgets", 12, "type:epic")

    assert calls == [
        ["gh", "issue", "edit", "12", "--repo", "acme/widgets", "--add-label", "type:epic"]
    ]


def test_add_label_failure_raises_runtime_error(monkeypatch: MonkeyPatch) -> None:
    def mock_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
        raise subprocess.CalledProcessError(1, cmd, output="", stderr="HTTP 403: Forbidden\n")

    monkeypatch.setattr("subprocess.run", mock_run)

    with pytest.raises(RuntimeError, match="HTTP 403: Forbidden"):
        RealGitHubIssues().add_label("acme/widgets", 12, "type:epic")
