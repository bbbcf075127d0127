"""Pick newly added migration files out of a pull request's changed files."""

from typing import Iterable, List

from dbchanges.config import MIGRATIONS_PREFIX
from dbchanges.models import FileChange


def detect_added_migrations(files: Iterable[FileChange], prefix: str = MIGRATIONS_PREFIX) -> List[FileChange]:
    """Return files with status "added" whose path starts with prefix.

    Matching is an exact string prefix: no case folding or separator
    normalization. Input order is preserved.
    """
    return [f for f in files if f.status == "added" and f.filename.startswith(prefix)]
