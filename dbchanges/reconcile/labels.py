"""Keep the migrations label on a PR in sync with detected migrations."""

import logging

from dbchanges.adapters.base import GitPlatformAdapter, NotFoundError
from dbchanges.models import Label, PullRequest

LOG = logging.getLogger("dbchanges.reconcile.labels")

ADDED = "added"
REMOVED = "removed"
UNCHANGED = "unchanged"


def ensure_label_exists(adapter: GitPlatformAdapter, repo: str, label: Label) -> Label:
    """Return the repository label, creating it on first use."""
    try:
        return adapter.get_label(repo, label.name)
    except NotFoundError:
        LOG.info("Creating label %r in %s", label.name, repo)
        return adapter.create_label(repo, label.name, label.color, label.description or "")


def reconcile_label(
    adapter: GitPlatformAdapter,
    repo: str,
    pr: PullRequest,
    detected: bool,
    label: Label,
) -> str:
    """Add the label when migrations are detected, remove it otherwise.

    Returns:
        ADDED, REMOVED or UNCHANGED
    """
    has_label = pr.has_label(label.name)
    if detected:
        if has_label:
            return UNCHANGED
        ensure_label_exists(adapter, repo, label)
        adapter.add_labels(repo, pr.number, [label.name])
        LOG.info("PR #%s: label %r added", pr.number, label.name)
        return ADDED

    if not has_label:
        return UNCHANGED
    try:
        adapter.remove_label(repo, pr.number, label.name)
    except NotFoundError:
        LOG.debug("PR #%s: label %r already removed", pr.number, label.name)
    else:
        LOG.info("PR #%s: label %r removed", pr.number, label.name)
    return REMOVED
