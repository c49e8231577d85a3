"""Commands to write and inspect `.trellis/config.toml`."""

import click

from trellis.cli.config import (
    CONFIG_DIR_NAME,
    DEFAULT_KEYS,
    LoadedConfig,
    config_path,
    save_config,
)
from trellis.cli.ensure import Ensure
from trellis.core.context import TrellisContext
from trellis.output import user_output


@click.group("config")
def config_group() -> None:
    """Manage trellis configuration."""


@config_group.command("init")
@click.option("--repo", help="Default target repository (owner/name).")
@click.option("--owner", help="Default project owner.")
@click.option("--project-title", help="Default project board title.")
@click.option("--mode", type=click.Choice(["solo", "team"]), help="Default protection mode.")
@click.option("--branch", help="Branch to protect.")
@click.option("--source-repo", help="Repository to copy workflow templates from.")
@click.option("--source-branch", help="Branch of the template repository.")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing config file.")
@click.pass_obj
def config_init(
    ctx: TrellisContext,
    repo: str | None,
    owner: str | None,
    project_title: str | None,
    mode: str | None,
    branch: str | None,
    source_repo: str | None,
    source_branch: str | None,
    force: bool,
) -> None:
    """Write .trellis/config.toml in the current directory."""
    config_dir = ctx.cwd / CONFIG_DIR_NAME
    Ensure.invariant(
        force or not config_path(config_dir).exists(),
        f"{config_path(config_dir)} already exists (use --force to overwrite)",
    )

    config = LoadedConfig(
        repo=repo,
        owner=owner,
        project_title=project_title,
        mode=mode,
        branch=branch,
        source_repo=source_repo,
        source_branch=source_branch,
        extra_labels=ctx.config.extra_labels,
    )
    written = save_config(config_dir, config)
    user_output(f"Wrote {written}")


@config_group.command("show")
@click.pass_obj
def config_show(ctx: TrellisContext) -> None:
    """Print the configured defaults."""
    for key in DEFAULT_KEYS:
        value = getattr(ctx.config, key)
        user_output(f"defaults.{key}={value if value is not None else ''}")
    for label in ctx.config.extra_labels:
        user_output(f"labels.extra.{label.name}={label.color} {label.description}")
