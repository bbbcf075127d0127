"""Changed file in a pull request."""

from pydantic import BaseModel


class FileChange(BaseModel):
    """One entry of the pull request files listing.

    status is the platform's value as-is (added, modified, removed,
    renamed, ...). patch is the unified diff text; large or binary files
    have none.
    """

    filename: str
    status: str
    patch: str | None = None

    @property
    def basename(self) -> str:
        return self.filename.split("/")[-1]
