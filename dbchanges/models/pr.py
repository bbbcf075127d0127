"""Pull request model."""

from typing import Any, List

from pydantic import BaseModel, Field, field_validator


class PullRequest(BaseModel):
    """Pull request state this bot reads and reconciles."""

    number: int
    body: str = ""
    head_sha: str
    labels: List[str] = Field(default_factory=list)

    @field_validator("body", mode="before")
    @classmethod
    def _body_or_empty(cls, value: Any) -> str:
        return value or ""

    @field_validator("labels", mode="before")
    @classmethod
    def _label_names(cls, value: Any) -> List[str]:
        """Accept plain names or label objects with a name key."""
        names: List[str] = []
        for lb in value or []:
            if isinstance(lb, str):
                names.append(lb)
            elif isinstance(lb, dict) and lb.get("name"):
                names.append(lb["name"])
        return names

    @classmethod
    def from_api(cls, data: dict) -> "PullRequest":
        """Build from a GitHub pull request object (API or webhook payload)."""
        head = data.get("head") or {}
        return cls(
            number=data["number"],
            body=data.get("body"),
            head_sha=head.get("sha", ""),
            labels=data.get("labels") or [],
        )

    def has_label(self, name: str) -> bool:
        return name in self.labels
