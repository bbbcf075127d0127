"""Shared fixtures: in-memory GitHub stand-in."""

from typing import Dict, List

import pytest

from dbchanges.adapters.base import GitPlatformAdapter, NotFoundError
from dbchanges.models import FileChange, Label, PullRequest


class FakeAdapter(GitPlatformAdapter):
    """Keeps one repository's PRs, files and labels in memory.

    Every mutating call is appended to ``calls`` as (method, args).
    """

    def __init__(self) -> None:
        self.prs: Dict[int, PullRequest] = {}
        self.files: Dict[int, List[FileChange]] = {}
        self.labels: Dict[str, Label] = {}
        self.calls: List[tuple] = []
        self.remove_label_missing = False

    def add_pr(self, number: int, body: str = "", labels: List[str] | None = None, head_sha: str = "abc123") -> None:
        self.prs[number] = PullRequest(number=number, body=body, head_sha=head_sha, labels=labels or [])
        self.files.setdefault(number, [])

    def list_pr_files(self, repo: str, pr_number: int) -> List[FileChange]:
        return list(self.files.get(pr_number, []))

    def get_pr(self, repo: str, pr_number: int) -> PullRequest:
        if pr_number not in self.prs:
            raise NotFoundError(f"Not found: pull {pr_number}")
        return self.prs[pr_number].model_copy(deep=True)

    def update_pr_body(self, repo: str, pr_number: int, body: str) -> None:
        self.calls.append(("update_pr_body", pr_number, body))
        self.prs[pr_number].body = body

    def add_labels(self, repo: str, issue_number: int, labels: List[str]) -> None:
        self.calls.append(("add_labels", issue_number, list(labels)))
        pr = self.prs[issue_number]
        pr.labels = pr.labels + [lb for lb in labels if lb not in pr.labels]

    def remove_label(self, repo: str, issue_number: int, name: str) -> None:
        self.calls.append(("remove_label", issue_number, name))
        pr = self.prs[issue_number]
        if self.remove_label_missing or name not in pr.labels:
            raise NotFoundError(f"Not found: label {name}")
        pr.labels = [lb for lb in pr.labels if lb != name]

    def get_label(self, repo: str, name: str) -> Label:
        self.calls.append(("get_label", name))
        if name not in self.labels:
            raise NotFoundError(f"Not found: label {name}")
        return self.labels[name]

    def create_label(self, repo: str, name: str, color: str, description: str = "") -> Label:
        self.calls.append(("create_label", name, color, description))
        self.labels[name] = Label(name=name, color=color, description=description)
        return self.labels[name]

    def writes(self) -> List[tuple]:
        return [c for c in self.calls if c[0] not in ("get_label",)]


@pytest.fixture
def fake() -> FakeAdapter:
    adapter = FakeAdapter()
    adapter.add_pr(7, body="Adds a column.")
    return adapter
