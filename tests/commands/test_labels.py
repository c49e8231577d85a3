"""Tests for the labels command."""

import dataclasses
from pathlib import Path

from click.testing import CliRunner

from trellis.cli.cli import cli
from trellis.cli.config import LoadedConfig
from trellis.core.context import TrellisContext
from trellis.github.labels import FakeGitHubLabels, LabelSpec
from trellis.github.repos import FakeGitHubRepos


def test_labels_creates_standard_set() -> None:
    runner = CliRunner()
    labels = FakeGitHubLabels(labels=["type:epic"])
    ctx = TrellisContext.for_test(labels=labels)

    result = runner.invoke(cli, ["labels", "--repo", "acme/widgets"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert len(labels.created_labels) == 19
    assert "Fetching existing labels in acme/widgets..." in result.output
    assert "=== Hierarchy Type Labels ===" in result.output
    assert "=== Phase Labels ===" in result.output
    assert "  [skip] type:epic (already exists)" in result.output
    assert "  [created] type:feature" in result.output
    assert "Done. All labels are in place." in result.output


def test_labels_dry_run() -> None:
    runner = CliRunner()
    labels = FakeGitHubLabels()
    ctx = TrellisContext.for_test(labels=labels)

    result = runner.invoke(cli, ["labels", "--repo", "acme/widgets", "--dry-run"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert labels.created_labels == []
    assert "[DRY RUN] Fetching existing labels" in result.output
    assert "  [would create] visualiser" in result.output


def test_labels_defaults_to_current_repo() -> None:
    runner = CliRunner()
    ctx = TrellisContext.for_test(repos=FakeGitHubRepos(current_repo="acme/here"))

    result = runner.invoke(cli, ["labels"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Fetching existing labels in acme/here..." in result.output


def test_labels_fails_outside_a_repository() -> None:
    runner = CliRunner()
    labels = FakeGitHubLabels()
    ctx = TrellisContext.for_test(labels=labels, repos=FakeGitHubRepos(current_repo=None))

    result = runner.invoke(cli, ["labels"], obj=ctx)

    assert result.exit_code == 1
    assert "Could not determine the repository" in result.output
    assert labels.list_calls == 0


def test_labels_from_file(tmp_path: Path) -> None:
    runner = CliRunner()
    labels_file = tmp_path / "labels.yml"
    labels_file.write_text("- name: area:docs\n  color: 0E8A16\n", encoding="utf-8")
    labels = FakeGitHubLabels()
    ctx = TrellisContext.for_test(labels=labels)

    result = runner.invoke(
        cli, ["labels", "--repo", "acme/widgets", "--labels-file", str(labels_file)], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert labels.created_labels == [LabelSpec("area:docs", "0E8A16", "")]
    assert "=== Labels from labels.yml ===" in result.output


def test_labels_rejects_malformed_file(tmp_path: Path) -> None:
    runner = CliRunner()
    labels_file = tmp_path / "labels.yml"
    labels_file.write_text("- name: no-color\n", encoding="utf-8")
    labels = FakeGitHubLabels()
    ctx = TrellisContext.for_test(labels=labels)

    result = runner.invoke(
        cli, ["labels", "--repo", "acme/widgets", "--labels-file", str(labels_file)], obj=ctx
    )

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert labels.list_calls == 0


def test_labels_includes_configured_extras() -> None:
    runner = CliRunner()
    labels = FakeGitHubLabels()
    config = dataclasses.replace(
        LoadedConfig.empty(), extra_labels=(LabelSpec("area:docs", "0E8A16", "Docs"),)
    )
    ctx = TrellisContext.for_test(labels=labels, config=config)

    result = runner.invoke(cli, ["labels", "--repo", "acme/widgets"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "=== Extra Labels ===" in result.output
    assert LabelSpec("area:docs", "0E8A16", "Docs") in labels.created_labels
    assert len(labels.created_labels) == 21
