"""GitHub domain metadata — enumerated values plus label/color/description lookups.

This module is pure data — safe for `from` imports. Lookups are total over
any string: unknown values get a label derived from the raw value.
"""

from typing import NamedTuple


class Metadata(NamedTuple):
    label: str
    color: str | None = None
    description: str | None = None


# ─── Subject types ────────────────────────────────────────────────────────────

_SUBJECT_TYPES: dict[str, Metadata] = {
    "Branch": Metadata("Branch", "#6a737d"),
    "Commit": Metadata("Commit", "#6f42c1"),
    "Issue": Metadata("Issue", "#2cbe4e"),
    "PullRequest": Metadata("Pull Request", "#0366d6"),
    "PullRequestReview": Metadata("Pull Request Review", "#0366d6"),
    "Release": Metadata("Release", "#f66a0a"),
    "Repository": Metadata("Repository", "#586069"),
    "RepositoryInvitation": Metadata("Invitation", "#e36209"),
    "RepositoryVulnerabilityAlert": Metadata("Security Alert", "#cb2431"),
    "Tag": Metadata("Tag", "#b08800"),
    "User": Metadata("User", "#24292e"),
    "Wiki": Metadata("Wiki", "#28a745"),
}

event_subject_types: tuple[str, ...] = (
    "Repository",
    "Tag",
    "Branch",
    "Commit",
    "Issue",
    "PullRequest",
    "PullRequestReview",
    "Release",
    "User",
    "Wiki",
)

issue_or_pull_request_subject_types: tuple[str, ...] = ("Issue", "PullRequest")

notification_subject_types: tuple[str, ...] = (
    "Commit",
    "Issue",
    "PullRequest",
    "Release",
    "RepositoryInvitation",
    "RepositoryVulnerabilityAlert",
)


# ─── Event actions ────────────────────────────────────────────────────────────

_EVENT_ACTIONS: dict[str, Metadata] = {
    "added": Metadata("Added"),
    "closed": Metadata("Closed"),
    "commented": Metadata("Commented"),
    "created": Metadata("Created"),
    "deleted": Metadata("Deleted"),
    "forked": Metadata("Forked"),
    "merged": Metadata("Merged"),
    "opened": Metadata("Opened"),
    "pushed": Metadata("Pushed"),
    "released": Metadata("Released"),
    "reopened": Metadata("Reopened"),
    "reviewed": Metadata("Reviewed"),
    "starred": Metadata("Starred"),
    "updated": Metadata("Updated"),
}

event_actions: tuple[str, ...] = tuple(_EVENT_ACTIONS)


# ─── Notification reasons ─────────────────────────────────────────────────────

_NOTIFICATION_REASONS: dict[str, Metadata] = {
    "assign": Metadata("Assigned", "#f66a0a", "You were assigned to the issue"),
    "author": Metadata("Author", "#6a737d", "You created the thread"),
    "comment": Metadata("Commented", "#b08800", "You commented on the thread"),
    "invitation": Metadata(
        "Invited", "#e36209", "You accepted an invitation to contribute to the repository"
    ),
    "manual": Metadata("Manual", "#586069", "You subscribed to the thread"),
    "mention": Metadata("Mentioned", "#0366d6", "You were specifically @mentioned in the content"),
    "review_requested": Metadata(
        "Review requested", "#6f42c1", "You or a team you belong to were requested to review a pull request"
    ),
    "security_alert": Metadata(
        "Security alert", "#cb2431", "GitHub discovered a security vulnerability in your repository"
    ),
    "state_change": Metadata(
        "State changed", "#2cbe4e", "You changed the thread state, e.g. closed an issue or merged a pull request"
    ),
    "subscribed": Metadata("Watching", "#24292e", "You are watching the repository"),
    "team_mention": Metadata("Team mentioned", "#28a745", "You were on a team that was mentioned"),
}

notification_reasons: tuple[str, ...] = tuple(_NOTIFICATION_REASONS)


# ─── Lookups ──────────────────────────────────────────────────────────────────


def _fallback(value: str) -> Metadata:
    return Metadata(str(value).replace("_", " ").capitalize())


def subject_type_metadata(subject_type: str) -> Metadata:
    return _SUBJECT_TYPES.get(subject_type) or _fallback(subject_type)


def event_action_metadata(action: str) -> Metadata:
    return _EVENT_ACTIONS.get(action) or _fallback(action)


def notification_reason_metadata(reason: str) -> Metadata:
    return _NOTIFICATION_REASONS.get(reason) or _fallback(reason)
