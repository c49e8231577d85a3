"""Classify existing issues into the work hierarchy by title pattern.

Each rule pairs an anchored title pattern with a ``type:*`` label. Rules are
evaluated in a fixed order over a single snapshot of open issues; a matched
issue is labeled unless the snapshot shows it already carries the label.

Dry runs take exactly the same path and differ only at the point of mutation,
so the reported events of a dry run are a faithful preview of a live run.
"""

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from trellis.github.issues import GitHubIssues, IssueInfo
from trellis.github.projects import GitHubProjects

logger = logging.getLogger(__name__)

# gh issue list returns 30 issues unless told otherwise
OPEN_ISSUE_LIMIT = 500


@dataclass(frozen=True)
class ClassificationRule:
    """A title pattern and the label it implies.

    Attributes:
        type_name: Human-readable hierarchy level (e.g., "Epic")
        pattern: Regular expression searched in the issue title
        label: Label applied to matching issues
        example: Title prefix shown in help output
    """

    type_name: str
    pattern: str
    label: str
    example: str

    def matches(self, title: str) -> bool:
        return re.search(self.pattern, title) is not None


HIERARCHY_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("Epic", r"^Epic\s+\d+", "type:epic", "Epic N:"),
    ClassificationRule("Feature", r"^F\d+[A-Z]?\.\d+", "type:feature", "FN.x:"),
    ClassificationRule("Story", r"^S\d+[A-Z]?\.\d+\.\d+", "type:story", "SN.x.y:"),
    ClassificationRule("PBS", r"^\[PBS\]", "type:pbs", "[PBS]"),
    ClassificationRule("WBS", r"^\[WBS\]", "type:wbs", "[WBS]"),
    ClassificationRule("Registry", r"^\[Registry\]", "type:registry", "[Registry]"),
)


class ClassificationOutcome(Enum):
    """What happened to one matched issue for one rule."""

    ALREADY_LABELED = "already_labeled"
    LABELED = "labeled"
    WOULD_LABEL = "would_label"
    FAILED = "failed"


class BoardStatus(Enum):
    """Result of registering a matched issue with the tracking board."""

    ADDED = "added"
    WOULD_ADD = "would_add"
    FAILED = "failed"


@dataclass(frozen=True)
class BoardTarget:
    """The project board that matched issues are added to."""

    owner: str
    number: int


@dataclass(frozen=True)
class BoardRegistration:
    """Outcome of a best-effort board registration.

    A FAILED registration is a soft failure: it is reported and counted but
    never aborts classification.
    """

    status: BoardStatus
    error: str | None = None


@dataclass(frozen=True)
class ClassificationEvent:
    """One matched (rule, issue) pair and what was done about it."""

    rule: ClassificationRule
    issue: IssueInfo
    outcome: ClassificationOutcome
    error: str | None = None
    board: BoardRegistration | None = None

    @property
    def is_label_action(self) -> bool:
        """True for events that applied, or would apply, a label."""
        return self.outcome in (ClassificationOutcome.LABELED, ClassificationOutcome.WOULD_LABEL)


@dataclass(frozen=True)
class RuleReport:
    """Events produced by a single rule, in snapshot order."""

    rule: ClassificationRule
    events: tuple[ClassificationEvent, ...]

    def _count(self, *outcomes: ClassificationOutcome) -> int:
        return sum(1 for event in self.events if event.outcome in outcomes)

    @property
    def matched(self) -> int:
        return len(self.events)

    @property
    def labeled(self) -> int:
        return self._count(ClassificationOutcome.LABELED, ClassificationOutcome.WOULD_LABEL)

    @property
    def already_correct(self) -> int:
        return self._count(ClassificationOutcome.ALREADY_LABELED)

    @property
    def failed(self) -> int:
        return self._count(ClassificationOutcome.FAILED)


@dataclass(frozen=True)
class ClassificationSummary:
    """Aggregate result of a classification run.

    Totals are derived from the per-rule reports so they cannot drift apart.
    """

    reports: tuple[RuleReport, ...]
    not_matched: int
    dry_run: bool
    board_enabled: bool

    @property
    def events(self) -> list[ClassificationEvent]:
        return [event for report in self.reports for event in report.events]

    @property
    def scanned(self) -> int:
        return sum(report.matched for report in self.reports)

    @property
    def labeled(self) -> int:
        return sum(report.labeled for report in self.reports)

    @property
    def already_correct(self) -> int:
        return sum(report.already_correct for report in self.reports)

    @property
    def failed(self) -> int:
        return sum(report.failed for report in self.reports)

    @property
    def added_to_board(self) -> int:
        return sum(
            1
            for event in self.events
            if event.board is not None
            and event.board.status in (BoardStatus.ADDED, BoardStatus.WOULD_ADD)
        )

    @property
    def board_failures(self) -> int:
        return sum(
            1
            for event in self.events
            if event.board is not None and event.board.status == BoardStatus.FAILED
        )

    def label_actions(self) -> list[tuple[int, str]]:
        """(issue number, label) for every applied or intended label, in order."""
        return [
            (event.issue.number, event.rule.label)
            for event in self.events
            if event.is_label_action
        ]


def fetch_open_issues(issues: GitHubIssues, repo: str) -> list[IssueInfo]:
    """Take the single snapshot of open issues a classification run works from."""
    snapshot = issues.list_issues(repo, state="open", limit=OPEN_ISSUE_LIMIT)
    logger.debug("Fetched %d open issues from %s", len(snapshot), repo)
    return snapshot


def _apply_label(
    issues: GitHubIssues,
    repo: str,
    rule: ClassificationRule,
    issue: IssueInfo,
    *,
    dry_run: bool,
) -> tuple[ClassificationOutcome, str | None]:
    if issue.has_label(rule.label):
        return ClassificationOutcome.ALREADY_LABELED, None
    if dry_run:
        return ClassificationOutcome.WOULD_LABEL, None
    try:
        issues.add_label(repo, issue.number, rule.label)
    except RuntimeError as e:
        logger.debug("Labeling #%d with %s failed", issue.number, rule.label, exc_info=True)
        return ClassificationOutcome.FAILED, str(e)
    return ClassificationOutcome.LABELED, None


def _register_on_board(
    projects: GitHubProjects,
    board: BoardTarget,
    issue: IssueInfo,
    *,
    dry_run: bool,
) -> BoardRegistration:
    if dry_run:
        return BoardRegistration(BoardStatus.WOULD_ADD)
    try:
        projects.add_item(board.owner, board.number, issue.url)
    except RuntimeError as e:
        logger.debug("Adding #%d to project %d failed", issue.number, board.number, exc_info=True)
        return BoardRegistration(BoardStatus.FAILED, error=str(e))
    return BoardRegistration(BoardStatus.ADDED)


def classify_issues(
    issues: GitHubIssues,
    repo: str,
    snapshot: Sequence[IssueInfo],
    rules: Sequence[ClassificationRule] = HIERARCHY_RULES,
    *,
    dry_run: bool,
    projects: GitHubProjects | None = None,
    board: BoardTarget | None = None,
    on_rule: Callable[[ClassificationRule, int], None] | None = None,
    on_event: Callable[[ClassificationEvent], None] | None = None,
) -> ClassificationSummary:
    """Apply hierarchy labels to the issues of a snapshot.

    Args:
        issues: Gateway used to apply labels
        repo: Repository in "owner/name" form
        snapshot: Open issues read once before any label is applied
        rules: Rules in evaluation order
        dry_run: Report intended labels and board additions without mutating
        projects: Gateway used for board registration (required with board)
        board: Project board to add every matched issue to, if any
        on_rule: Called with (rule, match count) before a rule's events
        on_event: Called with each event as soon as it is decided

    Returns:
        ClassificationSummary with one RuleReport per rule
    """
    if board is not None and projects is None:
        msg = "A projects gateway is required when a board is configured"
        raise ValueError(msg)

    reports: list[RuleReport] = []
    matched_numbers: set[int] = set()

    for rule in rules:
        matches = [issue for issue in snapshot if rule.matches(issue.title)]
        logger.debug("Rule %s (%s) matched %d issues", rule.type_name, rule.pattern, len(matches))
        if on_rule is not None:
            on_rule(rule, len(matches))

        events: list[ClassificationEvent] = []
        for issue in matches:
            matched_numbers.add(issue.number)
            outcome, error = _apply_label(issues, repo, rule, issue, dry_run=dry_run)

            registration = None
            if board is not None and projects is not None:
                registration = _register_on_board(projects, board, issue, dry_run=dry_run)

            event = ClassificationEvent(
                rule=rule, issue=issue, outcome=outcome, error=error, board=registration
            )
            events.append(event)
            if on_event is not None:
                on_event(event)

        reports.append(RuleReport(rule=rule, events=tuple(events)))

    not_matched = sum(1 for issue in snapshot if issue.number not in matched_numbers)
    return ClassificationSummary(
        reports=tuple(reports),
        not_matched=not_matched,
        dry_run=dry_run,
        board_enabled=board is not None,
    )
