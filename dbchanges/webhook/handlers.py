"""Handle GitHub webhook events.

pull_request events that can change the file list or the description
trigger a reconciliation; everything else is ignored.
"""

import hashlib
import hmac
import logging
from typing import Any, Dict

from dbchanges.adapters.base import GitPlatformAdapter
from dbchanges.adapters.github import GitHubAdapter
from dbchanges.config import AppConfig
from dbchanges.models import PullRequest
from dbchanges.reconcile.runner import ReconcileResult, reconcile_pull_request

PR_ACTIONS = frozenset({"opened", "reopened", "synchronize", "edited", "ready_for_review"})


def verify_signature(secret: str, body: bytes, signature_header: str | None) -> bool:
    """Check X-Hub-Signature-256 against the webhook secret.

    An empty secret disables verification.
    """
    if not secret:
        return True
    if not signature_header or not signature_header.startswith("sha256="):
        return False
    expected = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return hmac.compare_digest(expected, signature_header.removeprefix("sha256="))


def handle_github_event(
    config: AppConfig,
    event: str,
    payload: Dict[str, Any],
    adapter: GitPlatformAdapter | None = None,
    log: logging.Logger | None = None,
) -> ReconcileResult | None:
    """Dispatch a GitHub webhook event.

    Returns the reconciliation result, or None when the event was ignored.
    """
    logger = log or logging.getLogger("dbchanges.webhook.handlers")
    if event != "pull_request":
        logger.debug("Ignoring event %s", event)
        return None
    action = payload.get("action")
    if action not in PR_ACTIONS:
        logger.debug("Ignoring pull_request action %s", action)
        return None

    pull = payload.get("pull_request") or {}
    if pull.get("number") is None:
        logger.warning("pull_request payload missing pull_request.number")
        return None
    repo_payload = payload.get("repository") or {}
    repo = repo_payload.get("full_name") or config.bot.repository
    if not repo:
        logger.warning("Could not determine repository from payload or config")
        return None
    if config.bot.repository and repo != config.bot.repository:
        logger.debug("Skipping PR: repository %s is not configured repo", repo)
        return None

    if adapter is None:
        token = config.github_token_resolved
        if not token:
            logger.warning("No GitHub token; cannot reconcile PR #%s", pull["number"])
            return None
        adapter = GitHubAdapter(token=token, api_url=config.github.api_url)

    pr = PullRequest.from_api(pull)
    logger.info("pull_request %s: reconciling %s#%s", action, repo, pr.number)
    return reconcile_pull_request(
        adapter,
        repo,
        pr.number,
        settings=config.migrations,
        pr=pr,
        html_url=config.github.html_url,
    )
