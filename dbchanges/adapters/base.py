"""Abstract base class for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import List

from dbchanges.models import FileChange, Label, PullRequest


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(GitPlatformError):
    """Raised when the requested resource does not exist (HTTP 404)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=404)


class GitPlatformAdapter(ABC):
    """Operations the reconciler needs from a Git hosting platform.

    Repository arguments are in format owner/repo. Implementations raise
    GitPlatformError on failure and NotFoundError where a missing
    resource is an expected outcome.
    """

    @abstractmethod
    def list_pr_files(self, repo: str, pr_number: int) -> List[FileChange]:
        """List every file changed in a pull request (all pages).

        Args:
            repo: Repository in format owner/repo
            pr_number: Pull request number

        Returns:
            FileChange list in platform order
        """

    @abstractmethod
    def get_pr(self, repo: str, pr_number: int) -> PullRequest:
        """Fetch a pull request by number.

        Raises:
            NotFoundError: If the PR does not exist
        """

    @abstractmethod
    def update_pr_body(self, repo: str, pr_number: int, body: str) -> None:
        """Replace the pull request description."""

    @abstractmethod
    def add_labels(self, repo: str, issue_number: int, labels: List[str]) -> None:
        """Add labels (by name) to an issue or pull request."""

    @abstractmethod
    def remove_label(self, repo: str, issue_number: int, name: str) -> None:
        """Remove one label from an issue or pull request.

        Raises:
            NotFoundError: If the label is not on the issue
        """

    @abstractmethod
    def get_label(self, repo: str, name: str) -> Label:
        """Fetch a repository label definition by name.

        Raises:
            NotFoundError: If the repository has no such label
        """

    @abstractmethod
    def create_label(self, repo: str, name: str, color: str, description: str = "") -> Label:
        """Create a repository label definition.

        Args:
            repo: Repository in format owner/repo
            name: Label name
            color: Hex color without leading #
            description: Short description

        Returns:
            Created Label
        """
