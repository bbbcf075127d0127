"""Data models for pull requests, changed files and labels (Pydantic)."""

from dbchanges.models.file_change import FileChange
from dbchanges.models.label import Label
from dbchanges.models.pr import PullRequest

__all__ = ["FileChange", "Label", "PullRequest"]
