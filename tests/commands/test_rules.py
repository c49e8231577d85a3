"""Tests for the rules command."""

from click.testing import CliRunner

from trellis.cli.cli import cli
from trellis.core.context import TrellisContext


def test_rules_lists_every_rule() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["rules"], obj=TrellisContext.for_test())

    assert result.exit_code == 0, result.output
    for label in ("type:epic", "type:feature", "type:story", "type:pbs", "type:wbs"):
        assert label in result.output
    assert "[Registry]" in result.output
    assert r"^\[PBS\]" in result.output
    assert result.output.index("Epic") < result.output.index("Registry")
