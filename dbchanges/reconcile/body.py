"""Maintain the delimited "Database changes" section of a PR description.

Everything between START_MARKER and END_MARKER belongs to this bot and is
regenerated on every run; text outside the markers is never touched. The
markers must not appear in the description for any other purpose.
"""

import logging
import re

from dbchanges.adapters.base import GitPlatformAdapter
from dbchanges.migrations.summary import HEADING
from dbchanges.models import PullRequest

START_MARKER = "<!-- DATABASE_CHANGES_START -->"
END_MARKER = "<!-- DATABASE_CHANGES_END -->"

SECTION_RE = re.compile(re.escape(START_MARKER) + r"[\s\S]*?" + re.escape(END_MARKER))

LOG = logging.getLogger("dbchanges.reconcile.body")


def strip_section(body: str) -> str:
    """Remove every delimited section and trailing whitespace."""
    return SECTION_RE.sub("", body or "").rstrip()


def wrap_section(content: str) -> str:
    """Wrap rendered content in markers and heading; "" stays ""."""
    if not content:
        return ""
    return f"{START_MARKER}\n{HEADING}\n\n{content}\n\n{END_MARKER}"


def build_body(old_body: str, content: str) -> str:
    """New description: old text without the section, then the new section."""
    parts = [strip_section(old_body), wrap_section(content)]
    return "\n\n".join(p for p in parts if p)


def reconcile_body(adapter: GitPlatformAdapter, repo: str, pr: PullRequest, content: str) -> bool:
    """Write the description if it changed.

    Returns:
        True if the PR body was updated
    """
    new_body = build_body(pr.body, content)
    if new_body == pr.body:
        LOG.debug("PR #%s: description already up to date", pr.number)
        return False
    adapter.update_pr_body(repo, pr.number, new_body)
    LOG.info("PR #%s: description updated", pr.number)
    return True
