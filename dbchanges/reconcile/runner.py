"""One reconciliation run for a pull request.

Lists changed files, detects added migrations, then updates the PR
description and the label. Both effects are derived from current remote
state only, so running again with the same files changes nothing. A
failure in either effect propagates; the other is not rolled back.
"""

import logging
from typing import List

from pydantic import BaseModel, Field

from dbchanges.adapters.base import GitPlatformAdapter
from dbchanges.config import MigrationsConfig
from dbchanges.migrations import detect_added_migrations, render_section
from dbchanges.migrations.summary import DEFAULT_HTML_URL
from dbchanges.models import Label, PullRequest
from dbchanges.reconcile.body import reconcile_body
from dbchanges.reconcile.labels import reconcile_label

LOG = logging.getLogger("dbchanges.reconcile.runner")


class ReconcileResult(BaseModel):
    """What a run found and changed."""

    pr_number: int
    migrations: List[str] = Field(default_factory=list)
    body_updated: bool = False
    label_action: str = "unchanged"


def reconcile_pull_request(
    adapter: GitPlatformAdapter,
    repo: str,
    pr_number: int,
    settings: MigrationsConfig | None = None,
    pr: PullRequest | None = None,
    html_url: str = DEFAULT_HTML_URL,
) -> ReconcileResult:
    """Reconcile description and label of one pull request.

    Args:
        adapter: Platform adapter
        repo: Repository in format owner/repo
        pr_number: Pull request number
        settings: Migration prefix, summary format and label definition
        pr: Current PR state (e.g. from a webhook payload); fetched if None
        html_url: Web base URL for file links
    """
    settings = settings or MigrationsConfig()
    if pr is None:
        pr = adapter.get_pr(repo, pr_number)

    files = adapter.list_pr_files(repo, pr_number)
    migrations = detect_added_migrations(files, settings.path_prefix)
    LOG.info("PR #%s: %s changed files, %s added migrations", pr_number, len(files), len(migrations))

    content = render_section(migrations, repo, pr.head_sha, settings.summary_format, html_url)
    body_updated = reconcile_body(adapter, repo, pr, content)

    label = Label(
        name=settings.label_name,
        color=settings.label_color,
        description=settings.label_description,
    )
    label_action = reconcile_label(adapter, repo, pr, bool(migrations), label)

    return ReconcileResult(
        pr_number=pr_number,
        migrations=[f.filename for f in migrations],
        body_updated=body_updated,
        label_action=label_action,
    )
