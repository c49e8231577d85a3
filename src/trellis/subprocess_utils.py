"""Subprocess execution for GitHub CLI commands.

Every gateway funnels its ``gh`` invocations through ``execute_gh_command`` so
failures surface uniformly as RuntimeError with the command and stderr attached.
"""

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def execute_gh_command(cmd: list[str], cwd: Path | None = None, stdin: str | None = None) -> str:
    """Execute a gh CLI command and return stdout.

    Args:
        cmd: Command and arguments to execute
        cwd: Working directory for command execution (None = inherit)
        stdin: Optional text piped to the command (used with ``--input -``)

    Returns:
        stdout from the command

    Raises:
        RuntimeError: If the command fails or gh is not installed
    """
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
            input=stdin,
        )
        return result.stdout
    except subprocess.CalledProcessError as e:
        cmd_str = " ".join(cmd)
        error_msg = f"Failed to execute gh command '{cmd_str}'"
        if e.stderr:
            error_msg += f": {e.stderr.strip()}"
        raise RuntimeError(error_msg) from e
    except FileNotFoundError as e:
        cmd_str = " ".join(cmd)
        error_msg = f"Command not found: {cmd_str}"
        raise RuntimeError(error_msg) from e
