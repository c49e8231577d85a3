"""Idempotent provisioning steps for a workflow repository.

Each step reads current state once, then creates only what is missing. Steps
return result values describing every item they touched so commands can render
them; hard gh failures propagate as RuntimeError.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from trellis.github.labels import GitHubLabels, LabelSpec
from trellis.github.projects import FieldSpec, GitHubProjects, ProjectInfo
from trellis.github.repos import GitHubRepos

logger = logging.getLogger(__name__)


class ItemStatus(Enum):
    """What a provisioning step did with one item."""

    CREATED = "created"
    UPDATED = "updated"
    WOULD_CREATE = "would create"
    WOULD_UPDATE = "would update"
    EXISTS = "skip"
    SOFT_FAILED = "soft failed"


@dataclass(frozen=True)
class ProvisionItem:
    """One label, field, file or repository handled by a step."""

    name: str
    status: ItemStatus
    detail: str | None = None


# --- Labels -----------------------------------------------------------------


@dataclass(frozen=True)
class LabelGroup:
    """A titled group of labels, created in order."""

    title: str
    labels: tuple[LabelSpec, ...]


HIERARCHY_COLOR = "BFD4F2"
DOMAIN_COLOR = "D4C5F9"
TIER_COLOR = "FBCA04"
PHASE_COLOR = "C2E0C6"
PROJECT_COLOR = "0075CA"

STANDARD_LABEL_GROUPS: tuple[LabelGroup, ...] = (
    LabelGroup(
        "Hierarchy Type Labels",
        (
            LabelSpec("type:epic", HIERARCHY_COLOR, "Epic-level customer problem"),
            LabelSpec("type:feature", HIERARCHY_COLOR, "Feature-level solution capability"),
            LabelSpec("type:story", HIERARCHY_COLOR, "User story"),
            LabelSpec("type:pbs", HIERARCHY_COLOR, "PBS Component (Deliverable)"),
            LabelSpec("type:wbs", HIERARCHY_COLOR, "WBS Task (Work Package)"),
            LabelSpec("type:registry", HIERARCHY_COLOR, "Registry Artifact"),
        ),
    ),
    LabelGroup(
        "Domain Labels",
        (
            LabelSpec("domain:pf-core", DOMAIN_COLOR, "PF Core domain"),
            LabelSpec("domain:baiv", DOMAIN_COLOR, "BAIV domain"),
            LabelSpec("domain:w4m", DOMAIN_COLOR, "W4M domain"),
            LabelSpec("domain:air", DOMAIN_COLOR, "AIR domain"),
        ),
    ),
    LabelGroup(
        "Tier Labels",
        (
            LabelSpec("tier:t1", TIER_COLOR, "Tier 1 — Core"),
            LabelSpec("tier:t2", TIER_COLOR, "Tier 2 — Extended"),
            LabelSpec("tier:t3", TIER_COLOR, "Tier 3 — Experimental"),
        ),
    ),
    LabelGroup(
        "Phase Labels",
        (
            LabelSpec("phase:0", PHASE_COLOR, "Phase 0 — Ideation"),
            LabelSpec("phase:1", PHASE_COLOR, "Phase 1 — Definition"),
            LabelSpec("phase:2", PHASE_COLOR, "Phase 2 — Design"),
            LabelSpec("phase:3", PHASE_COLOR, "Phase 3 — Build"),
            LabelSpec("phase:4", PHASE_COLOR, "Phase 4 — Test"),
            LabelSpec("phase:5", PHASE_COLOR, "Phase 5 — Deploy"),
        ),
    ),
    LabelGroup(
        "Project Labels",
        (LabelSpec("visualiser", PROJECT_COLOR, "Ontology Visualiser project"),),
    ),
)


def load_label_file(path: Path) -> tuple[LabelGroup, ...]:
    """Load label definitions from a YAML file.

    The file is a list of mappings, the same shape as ``.github/labels.yml``::

        - name: type:epic
          color: BFD4F2
          description: Epic-level customer problem

    Raises:
        ValueError: If the file is not valid YAML or an entry is malformed
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        msg = f"{path} is not valid YAML: {e}"
        raise ValueError(msg) from e

    if not isinstance(data, list):
        msg = f"{path} must contain a list of labels"
        raise ValueError(msg)

    labels: list[LabelSpec] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict) or "name" not in entry or "color" not in entry:
            msg = f"{path}: entry {index + 1} needs at least 'name' and 'color'"
            raise ValueError(msg)
        labels.append(
            LabelSpec(
                name=str(entry["name"]),
                color=str(entry["color"]).lstrip("#"),
                description=str(entry.get("description", "")),
            )
        )
    return (LabelGroup(f"Labels from {path.name}", tuple(labels)),)


@dataclass(frozen=True)
class LabelGroupResult:
    title: str
    items: tuple[ProvisionItem, ...]


def ensure_labels(
    labels: GitHubLabels,
    repo: str,
    groups: tuple[LabelGroup, ...],
    *,
    dry_run: bool,
) -> list[LabelGroupResult]:
    """Create every label of every group that does not exist yet.

    Existing labels are read once up front; names are compared exactly.
    """
    existing = set(labels.list_labels(repo))
    logger.debug("Repository %s has %d labels", repo, len(existing))

    results: list[LabelGroupResult] = []
    for group in groups:
        items: list[ProvisionItem] = []
        for label in group.labels:
            if label.name in existing:
                items.append(ProvisionItem(label.name, ItemStatus.EXISTS, "already exists"))
                continue
            if dry_run:
                items.append(ProvisionItem(label.name, ItemStatus.WOULD_CREATE))
            else:
                labels.create_label(repo, label)
                items.append(ProvisionItem(label.name, ItemStatus.CREATED))
            existing.add(label.name)
        results.append(LabelGroupResult(title=group.title, items=tuple(items)))
    return results


# --- Branch protection ------------------------------------------------------

PROTECTION_MODES = ("solo", "team")


def protection_payload(mode: str) -> dict[str, Any]:
    """Branch protection body for a protection mode.

    solo: no force pushes or deletions, pull requests with zero approvals.
    team: one approval, strict status checks, resolved conversations, admins
    included.

    Raises:
        ValueError: If mode is not "solo" or "team"
    """
    if mode == "solo":
        return {
            "required_pull_request_reviews": {"required_approving_review_count": 0},
            "enforce_admins": False,
            "required_status_checks": None,
            "restrictions": None,
            "allow_force_pushes": False,
            "allow_deletions": False,
        }
    if mode == "team":
        return {
            "required_pull_request_reviews": {
                "required_approving_review_count": 1,
                "require_code_owner_reviews": False,
                "dismiss_stale_reviews": True,
            },
            "enforce_admins": True,
            "required_status_checks": {"strict": True, "contexts": []},
            "required_conversation_resolution": True,
            "restrictions": None,
            "allow_force_pushes": False,
            "allow_deletions": False,
        }
    msg = f"--mode must be one of {', '.join(PROTECTION_MODES)}, got {mode!r}"
    raise ValueError(msg)


def apply_branch_protection(repos: GitHubRepos, repo: str, branch: str, mode: str) -> None:
    """Put the protection rules for mode on branch.

    Raises:
        ValueError: If mode is invalid (before any API call)
        RuntimeError: If gh CLI fails
    """
    payload = protection_payload(mode)
    logger.debug("Protecting %s@%s with mode %s", repo, branch, mode)
    repos.update_branch_protection(repo, branch, payload)


# --- Project board ----------------------------------------------------------

STANDARD_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("Type", "SINGLE_SELECT", ("Epic", "Feature", "Story", "PBS", "WBS", "Registry")),
    FieldSpec("Status", "SINGLE_SELECT", ("Backlog", "Ready", "In Progress", "In Review", "Done")),
    FieldSpec("Priority", "SINGLE_SELECT", ("P0", "P1", "P2", "P3")),
    FieldSpec("Estimate", "NUMBER"),
    FieldSpec("Registry ID", "TEXT"),
    FieldSpec("PBS ID", "TEXT"),
    FieldSpec("WBS Code", "TEXT"),
)


@dataclass(frozen=True)
class ProjectSetupResult:
    project: ProjectInfo
    created: bool
    fields: tuple[ProvisionItem, ...]
    link: ProvisionItem | None


def find_project(projects: GitHubProjects, owner: str, title: str) -> ProjectInfo | None:
    """Find an owner's project by exact title."""
    for project in projects.list_projects(owner):
        if project.title == title:
            return project
    return None


def setup_project(
    projects: GitHubProjects,
    owner: str,
    title: str,
    repo: str | None,
    *,
    dry_run: bool,
) -> ProjectSetupResult:
    """Find or create a project and give it the standard fields.

    Field creation and repository linking are soft: a failure there is
    reported as SOFT_FAILED, since gh cannot tell "already exists" apart from
    other errors for these calls.
    """
    project = find_project(projects, owner, title)
    created = project is None
    existing: set[str] = set()
    if project is None and dry_run:
        # Placeholder; a dry run never creates the project
        project = ProjectInfo(
            number=-1, title=title, url=f"https://github.com/users/{owner}/projects"
        )
    else:
        if project is None:
            project = projects.create_project(owner, title)
            logger.debug("Created project #%d for %s", project.number, owner)
        existing = set(projects.list_fields(owner, project.number))

    items: list[ProvisionItem] = []
    for field in STANDARD_FIELDS:
        if field.name in existing:
            items.append(ProvisionItem(field.name, ItemStatus.EXISTS, "already exists"))
            continue
        if dry_run:
            items.append(ProvisionItem(field.name, ItemStatus.WOULD_CREATE))
            continue
        try:
            projects.create_field(owner, project.number, field)
        except RuntimeError as e:
            logger.debug("Creating field %s failed: %s", field.name, e)
            items.append(ProvisionItem(field.name, ItemStatus.SOFT_FAILED, "may already exist"))
            continue
        items.append(ProvisionItem(field.name, ItemStatus.CREATED))

    link = None
    if repo is not None:
        if dry_run:
            link = ProvisionItem(repo, ItemStatus.WOULD_CREATE)
        else:
            try:
                projects.link_repo(owner, project.number, repo)
                link = ProvisionItem(repo, ItemStatus.CREATED)
            except RuntimeError as e:
                logger.debug("Linking %s failed: %s", repo, e)
                link = ProvisionItem(repo, ItemStatus.SOFT_FAILED, "may already be linked")

    return ProjectSetupResult(project=project, created=created, fields=tuple(items), link=link)


# --- Repository and template files -----------------------------------------

TEMPLATE_FILES: tuple[str, ...] = (
    ".github/ISSUE_TEMPLATE/epic.yml",
    ".github/ISSUE_TEMPLATE/feature.yml",
    ".github/ISSUE_TEMPLATE/story.yml",
    ".github/ISSUE_TEMPLATE/pbs.yml",
    ".github/ISSUE_TEMPLATE/wbs.yml",
    ".github/ISSUE_TEMPLATE/config.yml",
    ".github/pull_request_template.md",
    ".github/labels.yml",
    ".github/workflows/enforce-registry-link.yml",
    ".github/workflows/validate-issue-naming.yml",
    ".github/workflows/validate-labels.yml",
)

TEMPLATE_COMMIT_MESSAGE = "chore: sync workflow conventions"


def ensure_repository(
    repos: GitHubRepos, repo: str, *, private: bool, dry_run: bool
) -> ProvisionItem:
    """Create repo (with an initial README commit) unless it exists."""
    if repos.repo_exists(repo):
        return ProvisionItem(repo, ItemStatus.EXISTS, "already exists")
    if dry_run:
        return ProvisionItem(repo, ItemStatus.WOULD_CREATE)
    repos.create_repo(repo, private=private)
    return ProvisionItem(repo, ItemStatus.CREATED)


def sync_template_files(
    repos: GitHubRepos,
    source_repo: str,
    source_branch: str,
    target_repo: str,
    paths: tuple[str, ...] = TEMPLATE_FILES,
    *,
    dry_run: bool,
) -> list[ProvisionItem]:
    """Copy workflow files from source_repo into target_repo.

    Files whose content already matches are left alone, so re-running only
    commits what changed. A path missing from the source is skipped.
    """
    items: list[ProvisionItem] = []
    for path in paths:
        source = repos.get_file(source_repo, path, ref=source_branch)
        if source is None:
            items.append(ProvisionItem(path, ItemStatus.SOFT_FAILED, f"not found in {source_repo}"))
            continue

        target = repos.get_file(target_repo, path)
        if target is not None and target.content == source.content:
            items.append(ProvisionItem(path, ItemStatus.EXISTS, "up to date"))
            continue

        if dry_run:
            status = ItemStatus.WOULD_CREATE if target is None else ItemStatus.WOULD_UPDATE
            items.append(ProvisionItem(path, status))
            continue

        repos.put_file(
            target_repo,
            path,
            source.content,
            TEMPLATE_COMMIT_MESSAGE,
            sha=target.sha if target is not None else None,
        )
        status = ItemStatus.CREATED if target is None else ItemStatus.UPDATED
        items.append(ProvisionItem(path, status))
    return items
