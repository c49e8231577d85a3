"""Custom Click group: organized help output and exit code 1 on usage errors."""

from typing import Any

import click

# Usage errors (unknown option, missing or invalid value) exit with this code
USAGE_ERROR_EXIT_CODE = 1

HELP_REQUESTED_KEY = "trellis.help_requested"


def help_requested(ctx: click.Context) -> bool:
    """True if a help flag appears anywhere on the command line."""
    return bool(ctx.meta.get(HELP_REQUESTED_KEY, False))


def _as_usage_exit(error: click.UsageError) -> click.UsageError:
    error.exit_code = USAGE_ERROR_EXIT_CODE
    return error


class GroupedCommandGroup(click.Group):
    """Click Group that organizes commands into sections in help output.

    Also maps click usage errors, which normally exit with 2, to exit code 1 so
    every invalid invocation fails the same way. Groups using this class should
    set invoke_without_command=True and show help themselves; otherwise a bare
    invocation would count as a usage error.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[HELP_REQUESTED_KEY] = any(arg in ctx.help_option_names for arg in args)
        return super().parse_args(ctx, args)

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            raise _as_usage_exit(e) from e

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            raise _as_usage_exit(e) from e

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format commands into organized sections."""
        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands.append((subcommand, cmd))

        if not commands:
            return

        classification = ["classify", "rules"]
        provisioning = ["labels", "protect", "project", "setup-all", "bootstrap"]

        classify_cmds = []
        provision_cmds = []
        other_cmds = []
        for name, cmd in commands:
            if name in classification:
                classify_cmds.append((name, cmd))
            elif name in provisioning:
                provision_cmds.append((name, cmd))
            else:
                other_cmds.append((name, cmd))

        if classify_cmds:
            with formatter.section("Classification"):
                self._format_command_list(ctx, formatter, classify_cmds)

        if provision_cmds:
            with formatter.section("Provisioning"):
                self._format_command_list(ctx, formatter, provision_cmds)

        if other_cmds:
            with formatter.section("Other"):
                self._format_command_list(ctx, formatter, other_cmds)

    def _format_command_list(
        self,
        ctx: click.Context,
        formatter: click.HelpFormatter,
        commands: list[tuple[str, click.Command]],
    ) -> None:
        """Format a list of commands with their help text."""
        rows = []
        for name, cmd in commands:
            help_text = cmd.get_short_help_str(limit=formatter.width)
            rows.append((name, help_text))

        if rows:
            formatter.write_dl(rows)
