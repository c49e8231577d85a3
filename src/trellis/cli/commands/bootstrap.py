"""Command to create and fully configure a new workflow repository."""

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from trellis.cli.commands.protect import resolve_mode
from trellis.cli.commands.setup_all import run_setup_steps
from trellis.cli.core import exit_with_gh_error, resolve_owner
from trellis.cli.rendering import dry_run_prefix, render_banner, render_items
from trellis.core.context import TrellisContext, with_dry_run
from trellis.core.provisioning import ItemStatus, ensure_repository, sync_template_files
from trellis.output import user_output

DEFAULT_SOURCE_BRANCH = "main"
TOTAL_STEPS = 5


def _completion_panel(repo: str, project_url: str) -> Panel:
    """Summary box with the links an operator needs next."""
    base = f"https://github.com/{repo}"
    lines = [
        Text(f"Repository:  {base}"),
        Text(f"Issues:      {base}/issues/new/choose"),
        Text(f"Labels:      {base}/labels"),
        Text(f"Actions:     {base}/actions"),
        Text(f"Project:     {project_url}"),
        Text(""),
        Text("Try creating your first Epic:", style="bold"),
        Text(
            f"  gh issue create --repo {repo} --label 'type:epic' "
            "--title 'Epic 1: My First Epic' --body 'Testing the workflow'"
        ),
    ]
    return Panel(
        Text("\n").join(lines), title="Setup Complete", border_style="green", padding=(1, 2)
    )


@click.command("bootstrap")
@click.argument("name")
@click.option("--owner", help="User or org to create the repository under (default: you).")
@click.option("--mode", help="Branch protection mode: solo (default) or team.")
@click.option("--private", is_flag=True, default=False, help="Create a private repository.")
@click.option("--project-title", help="Project board name (default: repository name).")
@click.option("--source-repo", help="Repository to copy workflow templates from (owner/name).")
@click.option("--source-branch", help="Branch of --source-repo to copy from (default: main).")
@click.option("--dry-run", is_flag=True, default=False, help="Show what would be done.")
@click.pass_obj
def bootstrap_cmd(
    ctx: TrellisContext,
    name: str,
    owner: str | None,
    mode: str | None,
    private: bool,
    project_title: str | None,
    source_repo: str | None,
    source_branch: str | None,
    dry_run: bool,
) -> None:
    """Create a new GitHub repository fully configured with the workflow.

    \b
    1. Creates the repository (reuses it if it already exists)
    2. Copies issue templates, PR template and workflows from --source-repo
    3. Creates the standard labels
    4. Configures branch protection on main
    5. Creates a project board with the standard fields
    """
    resolved_mode = resolve_mode(ctx, mode)
    if dry_run:
        ctx = with_dry_run(ctx)
    resolved_owner = resolve_owner(ctx, owner)
    full_repo = f"{resolved_owner}/{name}"
    title = project_title or name
    template_source = source_repo or ctx.config.source_repo
    template_branch = source_branch or ctx.config.source_branch or DEFAULT_SOURCE_BRANCH
    prefix = dry_run_prefix(ctx.dry_run)

    render_banner(f"{prefix}Workflow — Bootstrap")
    user_output(f"  Repository:    {full_repo}")
    user_output(f"  Visibility:    {'private' if private else 'public'}")
    user_output(f"  Protection:    {resolved_mode}")
    user_output(f"  Project board: {title}")
    user_output(f"  Templates:     {template_source or '(none)'}")
    user_output("")

    try:
        render_banner(f"Step 1/{TOTAL_STEPS}: Create Repository")
        repo_item = ensure_repository(ctx.repos, full_repo, private=private, dry_run=ctx.dry_run)
        render_items([repo_item])

        user_output("")
        if repo_item.status == ItemStatus.WOULD_CREATE:
            user_output(f"{prefix}Repository does not exist yet; remaining steps need it.")
            return

        render_banner(f"Step 2/{TOTAL_STEPS}: Workflow Files")
        if template_source is None:
            user_output("  [skip] no --source-repo given")
        else:
            items = sync_template_files(
                ctx.repos,
                template_source,
                template_branch,
                full_repo,
                dry_run=ctx.dry_run,
            )
            render_items(items)

        user_output("")
        project_url = run_setup_steps(
            ctx,
            full_repo,
            resolved_owner,
            title,
            resolved_mode,
            first_step=3,
            total_steps=TOTAL_STEPS,
        )
    except RuntimeError as e:
        exit_with_gh_error(e)

    user_output("")
    console = Console(width=100)
    console.print(_completion_panel(full_repo, project_url))
