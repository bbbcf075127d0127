"""Unit tests for GitHub adapter (mocked API)."""

from unittest.mock import Mock, patch

import pytest

from dbchanges.adapters.base import GitPlatformError, NotFoundError
from dbchanges.adapters.github import GitHubAdapter
from dbchanges.models import FileChange, Label, PullRequest


@pytest.fixture
def adapter() -> GitHubAdapter:
    return GitHubAdapter(token="test-token", api_url="https://api.github.com")


def _resp(status: int = 200, data=None, links=None) -> Mock:
    mock_resp = Mock()
    mock_resp.status_code = status
    mock_resp.json.return_value = data
    mock_resp.links = links or {}
    mock_resp.text = ""
    return mock_resp


def test_session_headers(adapter: GitHubAdapter) -> None:
    assert adapter._session.headers["Authorization"] == "Bearer test-token"
    assert adapter._session.headers["Accept"] == "application/vnd.github+json"


def test_list_pr_files_follows_pagination(adapter: GitHubAdapter) -> None:
    """list_pr_files requests per_page=100 and follows Link rel=next."""
    page1 = _resp(
        data=[{"filename": "a.sql", "status": "added", "patch": "+x"}],
        links={"next": {"url": "https://api.github.com/repositories/1/pulls/5/files?per_page=100&page=2"}},
    )
    page2 = _resp(data=[{"filename": "b.py", "status": "modified"}])

    with patch.object(adapter._session, "request", side_effect=[page1, page2]) as req:
        files = adapter.list_pr_files("owner/repo", 5)

    assert files == [
        FileChange(filename="a.sql", status="added", patch="+x"),
        FileChange(filename="b.py", status="modified", patch=None),
    ]
    first, second = req.call_args_list
    assert first[0] == ("GET", "https://api.github.com/repos/owner/repo/pulls/5/files")
    assert first[1]["params"] == {"per_page": 100}
    assert second[0] == ("GET", "https://api.github.com/repositories/1/pulls/5/files?per_page=100&page=2")


def test_get_pr(adapter: GitHubAdapter) -> None:
    data = {"number": 5, "body": "Text", "head": {"sha": "abc"}, "labels": [{"name": "bug"}]}
    with patch.object(adapter._session, "request", return_value=_resp(data=data)) as req:
        pr = adapter.get_pr("owner/repo", 5)
    assert pr == PullRequest(number=5, body="Text", head_sha="abc", labels=["bug"])
    assert req.call_args[0] == ("GET", "https://api.github.com/repos/owner/repo/pulls/5")


def test_update_pr_body(adapter: GitHubAdapter) -> None:
    with patch.object(adapter._session, "request", return_value=_resp(data={})) as req:
        adapter.update_pr_body("owner/repo", 5, "new body")
    assert req.call_args[0] == ("PATCH", "https://api.github.com/repos/owner/repo/pulls/5")
    assert req.call_args[1]["json"] == {"body": "new body"}


def test_add_labels(adapter: GitHubAdapter) -> None:
    with patch.object(adapter._session, "request", return_value=_resp(data=[])) as req:
        adapter.add_labels("owner/repo", 5, ["Database changes"])
    assert req.call_args[0] == ("POST", "https://api.github.com/repos/owner/repo/issues/5/labels")
    assert req.call_args[1]["json"] == {"labels": ["Database changes"]}


def test_remove_label_quotes_name(adapter: GitHubAdapter) -> None:
    with patch.object(adapter._session, "request", return_value=_resp(data=[])) as req:
        adapter.remove_label("owner/repo", 5, "Database changes")
    assert req.call_args[0] == (
        "DELETE",
        "https://api.github.com/repos/owner/repo/issues/5/labels/Database%20changes",
    )


def test_remove_label_404_raises_not_found(adapter: GitHubAdapter) -> None:
    with patch.object(adapter._session, "request", return_value=_resp(404)):
        with pytest.raises(NotFoundError) as exc_info:
            adapter.remove_label("owner/repo", 5, "Database changes")
    assert exc_info.value.status_code == 404


def test_get_label(adapter: GitHubAdapter) -> None:
    data = {"name": "Database changes", "color": "1778d3", "description": None}
    with patch.object(adapter._session, "request", return_value=_resp(data=data)) as req:
        label = adapter.get_label("owner/repo", "Database changes")
    assert label == Label(name="Database changes", color="1778d3", description="")
    assert req.call_args[0][1].endswith("/repos/owner/repo/labels/Database%20changes")


def test_get_label_404(adapter: GitHubAdapter) -> None:
    with patch.object(adapter._session, "request", return_value=_resp(404)):
        with pytest.raises(NotFoundError):
            adapter.get_label("owner/repo", "missing")


def test_create_label_strips_hash(adapter: GitHubAdapter) -> None:
    data = {"name": "Database changes", "color": "1778d3", "description": "d"}
    with patch.object(adapter._session, "request", return_value=_resp(201, data=data)) as req:
        label = adapter.create_label("owner/repo", "Database changes", "#1778d3", "d")
    assert label.color == "1778d3"
    assert req.call_args[0] == ("POST", "https://api.github.com/repos/owner/repo/labels")
    assert req.call_args[1]["json"] == {"name": "Database changes", "color": "1778d3", "description": "d"}


def test_api_error_uses_message(adapter: GitHubAdapter) -> None:
    """Non-404 errors raise GitPlatformError (not NotFoundError) with status."""
    resp = _resp(403, data={"message": "API rate limit exceeded"})
    with patch.object(adapter._session, "request", return_value=resp):
        with pytest.raises(GitPlatformError) as exc_info:
            adapter.get_pr("owner/repo", 1)
    assert not isinstance(exc_info.value, NotFoundError)
    assert exc_info.value.status_code == 403
    assert "rate limit" in str(exc_info.value)


def test_api_error_non_json_body(adapter: GitHubAdapter) -> None:
    resp = _resp(502)
    resp.text = "Bad Gateway"
    resp.json.side_effect = ValueError("no json")
    with patch.object(adapter._session, "request", return_value=resp):
        with pytest.raises(GitPlatformError, match="502: Bad Gateway"):
            adapter.update_pr_body("owner/repo", 1, "x")
