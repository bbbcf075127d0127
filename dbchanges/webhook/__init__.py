"""GitHub webhook intake."""

from dbchanges.webhook.handlers import PR_ACTIONS, handle_github_event, verify_signature
from dbchanges.webhook.server import run_webhook_server

__all__ = ["PR_ACTIONS", "handle_github_event", "run_webhook_server", "verify_signature"]
