"""Production implementation of repository operations using gh CLI."""

import base64
import json
import subprocess
from pathlib import Path
from typing import Any

from trellis.github.repos.abc import GitHubRepos
from trellis.github.repos.types import RepoFile
from trellis.subprocess_utils import execute_gh_command


class RealGitHubRepos(GitHubRepos):
    """Production implementation using gh CLI."""

    def get_current_repo(self, cwd: Path) -> str:
        cmd = ["gh", "repo", "view", "--json", "nameWithOwner", "--jq", ".nameWithOwner"]
        return execute_gh_command(cmd, cwd).strip()

    def get_current_username(self) -> str | None:
        """Get current GitHub username via gh api user.

        Returns:
            GitHub username if authenticated, None otherwise
        """
        result = subprocess.run(
            ["gh", "api", "user", "--jq", ".login"],
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        return result.stdout.strip()

    def repo_exists(self, repo: str) -> bool:
        result = subprocess.run(
            ["gh", "repo", "view", repo, "--json", "name"],
            capture_output=True,
            text=True,
            check=False,
        )
        return result.returncode == 0

    def create_repo(self, repo: str, *, private: bool) -> None:
        visibility = "--private" if private else "--public"
        cmd = ["gh", "repo", "create", repo, visibility, "--add-readme"]
        execute_gh_command(cmd)

    def update_branch_protection(self, repo: str, branch: str, payload: dict[str, Any]) -> None:
        cmd = [
            "gh",
            "api",
            f"repos/{repo}/branches/{branch}/protection",
            "--method",
            "PUT",
            "--input",
            "-",
        ]
        execute_gh_command(cmd, stdin=json.dumps(payload))

    def get_file(self, repo: str, path: str, ref: str | None = None) -> RepoFile | None:
        endpoint = f"repos/{repo}/contents/{path}"
        if ref is not None:
            endpoint += f"?ref={ref}"
        cmd = ["gh", "api", endpoint]
        result = subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8", check=False)
        if result.returncode != 0:
            # gh prints "gh: Not Found (HTTP 404)" for missing paths
            if "HTTP 404" in result.stderr:
                return None
            error_msg = f"Failed to execute gh command '{' '.join(cmd)}'"
            if result.stderr:
                error_msg += f": {result.stderr.strip()}"
            raise RuntimeError(error_msg)

        data = json.loads(result.stdout)
        # Directories come back as a list of entries
        if not isinstance(data, dict) or data.get("type", "file") != "file":
            msg = f"Expected a file at {repo}:{path}, got a directory or other object"
            raise RuntimeError(msg)
        content = base64.b64decode(data["content"]).decode("utf-8")
        return RepoFile(path=path, content=content, sha=data["sha"])

    def put_file(
        self, repo: str, path: str, content: str, message: str, sha: str | None
    ) -> None:
        payload = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
        }
        if sha is not None:
            payload["sha"] = sha
        cmd = ["gh", "api", f"repos/{repo}/contents/{path}", "--method", "PUT", "--input", "-"]
        execute_gh_command(cmd, stdin=json.dumps(payload))
