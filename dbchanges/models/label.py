"""Repository label definition."""

from pydantic import BaseModel


class Label(BaseModel):
    """Label as defined on the repository."""

    name: str
    color: str = ""
    description: str | None = ""
