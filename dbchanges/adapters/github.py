"""GitHub API adapter."""

from typing import Any, Dict, List
from urllib.parse import quote

import requests

from dbchanges.adapters.base import GitPlatformAdapter, GitPlatformError, NotFoundError
from dbchanges.models import FileChange, Label, PullRequest

PER_PAGE = 100


def _label_from_api(data: Dict[str, Any]) -> Label:
    return Label(
        name=data["name"],
        color=data.get("color") or "",
        description=data.get("description") or "",
    )


def _file_from_api(data: Dict[str, Any]) -> FileChange:
    return FileChange(
        filename=data["filename"],
        status=data.get("status", ""),
        patch=data.get("patch"),
    )


class GitHubAdapter(GitPlatformAdapter):
    """GitHub REST API implementation of GitPlatformAdapter."""

    def __init__(
        self,
        token: str | None = None,
        api_url: str = "https://api.github.com",
    ) -> None:
        self.token = token
        self.api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = path if path.startswith("http") else f"{self.api_url}{path}"
        resp = self._session.request(method, url, timeout=30, **kwargs)
        if resp.status_code == 404:
            raise NotFoundError(f"Not found: {path}")
        if resp.status_code >= 400:
            msg = resp.text
            try:
                data = resp.json()
                if "message" in data:
                    msg = data["message"]
            except ValueError:
                pass
            raise GitPlatformError(f"GitHub API error {resp.status_code}: {msg}", status_code=resp.status_code)
        return resp

    def _paginate(self, path: str, params: Dict[str, Any] | None = None) -> List[Dict[str, Any]]:
        """GET every page of a list endpoint, following Link rel=next."""
        items: List[Dict[str, Any]] = []
        resp = self._request("GET", path, params={**(params or {}), "per_page": PER_PAGE})
        items.extend(resp.json() or [])
        next_link = (resp.links or {}).get("next")
        while next_link:
            # next URL already carries the query string
            resp = self._request("GET", next_link["url"])
            items.extend(resp.json() or [])
            next_link = (resp.links or {}).get("next")
        return items

    def list_pr_files(self, repo: str, pr_number: int) -> List[FileChange]:
        """List every file changed in a pull request (all pages)."""
        data_list = self._paginate(f"/repos/{repo}/pulls/{pr_number}/files")
        return [_file_from_api(d) for d in data_list]

    def get_pr(self, repo: str, pr_number: int) -> PullRequest:
        """Fetch a pull request by number."""
        resp = self._request("GET", f"/repos/{repo}/pulls/{pr_number}")
        return PullRequest.from_api(resp.json())

    def update_pr_body(self, repo: str, pr_number: int, body: str) -> None:
        self._request("PATCH", f"/repos/{repo}/pulls/{pr_number}", json={"body": body})

    def add_labels(self, repo: str, issue_number: int, labels: List[str]) -> None:
        self._request("POST", f"/repos/{repo}/issues/{issue_number}/labels", json={"labels": labels})

    def remove_label(self, repo: str, issue_number: int, name: str) -> None:
        self._request("DELETE", f"/repos/{repo}/issues/{issue_number}/labels/{quote(name, safe='')}")

    def get_label(self, repo: str, name: str) -> Label:
        resp = self._request("GET", f"/repos/{repo}/labels/{quote(name, safe='')}")
        return _label_from_api(resp.json())

    def create_label(self, repo: str, name: str, color: str, description: str = "") -> Label:
        resp = self._request(
            "POST",
            f"/repos/{repo}/labels",
            json={"name": name, "color": color.lstrip("#"), "description": description},
        )
        return _label_from_api(resp.json())
