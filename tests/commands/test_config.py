"""Tests for the config commands."""

import dataclasses
from pathlib import Path

from click.testing import CliRunner

from trellis.cli.cli import cli
from trellis.cli.config import LoadedConfig, load_config
from trellis.core.context import TrellisContext


def test_config_init_writes_defaults(tmp_path: Path) -> None:
    runner = CliRunner()
    ctx = TrellisContext.for_test(cwd=tmp_path)

    result = runner.invoke(
        cli,
        ["config", "init", "--repo", "acme/widgets", "--owner", "acme", "--mode", "team"],
        obj=ctx,
    )

    assert result.exit_code == 0, result.output
    config_file = tmp_path / ".trellis" / "config.toml"
    assert f"Wrote {config_file}" in result.output
    loaded = load_config(tmp_path / ".trellis")
    assert loaded.repo == "acme/widgets"
    assert loaded.owner == "acme"
    assert loaded.mode == "team"
    assert loaded.project_title is None


def test_config_init_refuses_to_overwrite(tmp_path: Path) -> None:
    runner = CliRunner()
    config_file = tmp_path / ".trellis" / "config.toml"
    config_file.parent.mkdir()
    config_file.write_text('[defaults]\nrepo = "acme/old"\n', encoding="utf-8")
    ctx = TrellisContext.for_test(cwd=tmp_path)

    result = runner.invoke(cli, ["config", "init", "--repo", "acme/new"], obj=ctx)

    assert result.exit_code == 1
    assert "already exists" in result.output
    assert load_config(tmp_path / ".trellis").repo == "acme/old"


def test_config_init_force_overwrites(tmp_path: Path) -> None:
    runner = CliRunner()
    config_file = tmp_path / ".trellis" / "config.toml"
    config_file.parent.mkdir()
    config_file.write_text('[defaults]\nrepo = "acme/old"\n', encoding="utf-8")
    ctx = TrellisContext.for_test(cwd=tmp_path)

    result = runner.invoke(cli, ["config", "init", "--repo", "acme/new", "--force"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert load_config(tmp_path / ".trellis").repo == "acme/new"


def test_config_show() -> None:
    runner = CliRunner()
    config = dataclasses.replace(LoadedConfig.empty(), repo="acme/widgets", mode="solo")
    ctx = TrellisContext.for_test(config=config)

    result = runner.invoke(cli, ["config", "show"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "defaults.repo=acme/widgets" in result.output
    assert "defaults.mode=solo" in result.output
    assert "defaults.owner=\n" in result.output
