"""Render detected migration files as markdown for the PR description.

Two formats:

- list: one bullet link per file.
- pairs: when the files form exactly one ``<timestamp>.do|undo.<name>.sql``
  group, a one-line "Do / Undo" summary followed by a permalink to the
  added lines of the "do" file (GitHub expands it into a code snippet).
  Anything else falls back to the list.
"""

import logging
import re
from typing import Dict, Literal, Sequence

from dbchanges.models import FileChange

HEADING = "### Database changes"
LIST_INTRO = "This PR adds the following migration files:"
DEFAULT_HTML_URL = "https://github.com"

MIGRATION_NAME_RE = re.compile(r"^(\d+)\.(do|undo)\..*\.sql$")

LOG = logging.getLogger("dbchanges.migrations.summary")


def blob_url(repo: str, head_sha: str, path: str, html_url: str = DEFAULT_HTML_URL) -> str:
    """URL of a file at the PR head commit (repo in format owner/repo)."""
    return f"{html_url.rstrip('/')}/{repo}/blob/{head_sha}/{path}"


def count_added_lines(patch: str | None) -> int:
    """Count lines starting with + in a unified diff, excluding the +++ header."""
    if not patch:
        return 0
    return sum(1 for line in patch.split("\n") if line.startswith("+") and not line.startswith("+++"))


def render_file_list(
    files: Sequence[FileChange],
    repo: str,
    head_sha: str,
    html_url: str = DEFAULT_HTML_URL,
) -> str:
    """Bullet list of links to the files, or "" when there are none."""
    if not files:
        return ""
    lines = "\n".join(f"- [{f.basename}]({blob_url(repo, head_sha, f.filename, html_url)})" for f in files)
    return f"{LIST_INTRO}\n\n{lines}"


def group_migrations(files: Sequence[FileChange]) -> Dict[str, Dict[str, FileChange]]:
    """Group files by timestamp and role (do/undo).

    Files not named <digits>.<do|undo>.<anything>.sql are left out. When
    two files share timestamp and role the later one replaces the earlier.
    """
    groups: Dict[str, Dict[str, FileChange]] = {}
    for f in files:
        match = MIGRATION_NAME_RE.match(f.basename)
        if not match:
            continue
        timestamp, role = match.group(1), match.group(2)
        group = groups.setdefault(timestamp, {})
        if role in group:
            LOG.warning(
                "Migration %s %s: %s replaces %s in summary",
                timestamp,
                role,
                f.filename,
                group[role].filename,
            )
        group[role] = f
    return groups


def _link(f: FileChange | None, repo: str, head_sha: str, html_url: str) -> str:
    if f is None:
        return ""
    return f"[{f.basename}]({blob_url(repo, head_sha, f.filename, html_url)})"


def _lines_url(f: FileChange | None, repo: str, head_sha: str, html_url: str) -> str:
    if f is None:
        return ""
    # Range ends one line past the added lines
    end = count_added_lines(f.patch) + 1
    return f"{blob_url(repo, head_sha, f.filename, html_url)}#L1-L{end}"


def render_migration_pairs(
    files: Sequence[FileChange],
    repo: str,
    head_sha: str,
    html_url: str = DEFAULT_HTML_URL,
) -> str:
    """Do/undo summary for a lone migration, file list otherwise."""
    if not files:
        return ""
    groups = group_migrations(files)
    if len(groups) != 1:
        return render_file_list(files, repo, head_sha, html_url)

    (pair,) = groups.values()
    undo_link = _link(pair.get("undo"), repo, head_sha, html_url)
    do_url = _lines_url(pair.get("do"), repo, head_sha, html_url)
    summary = " ".join(part for part in ("Do 👇 Undo 👉", undo_link) if part)
    return "\n".join(line for line in (summary, do_url) if line)


def render_section(
    files: Sequence[FileChange],
    repo: str,
    head_sha: str,
    summary_format: Literal["list", "pairs"] = "pairs",
    html_url: str = DEFAULT_HTML_URL,
) -> str:
    """Render section content with the configured format."""
    if summary_format == "list":
        return render_file_list(files, repo, head_sha, html_url)
    return render_migration_pairs(files, repo, head_sha, html_url)

