"""Git platform adapters."""

from dbchanges.adapters.base import GitPlatformAdapter, GitPlatformError, NotFoundError
from dbchanges.adapters.github import GitHubAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "NotFoundError", "GitHubAdapter"]
