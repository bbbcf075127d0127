"""dbchanges entry point.

Two modes: run (reconcile one pull request, e.g. from a GitHub Actions
workflow) and serve (webhook server). Usage: dbchanges run --pr N |
dbchanges run --event-path FILE | dbchanges serve.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from dbchanges.adapters.github import GitHubAdapter
from dbchanges.config import AppConfig, load_config
from dbchanges.logging import setup_logging
from dbchanges.models import PullRequest
from dbchanges.reconcile.runner import reconcile_pull_request


def build_parser() -> argparse.ArgumentParser:
    """CLI with subcommand (run | serve)."""
    parser = argparse.ArgumentParser(
        prog="dbchanges",
        description="Keep the Database changes section and label of pull requests in sync",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    sub = parser.add_subparsers(dest="subcommand")

    run = sub.add_parser("run", help="Reconcile one pull request")
    run.add_argument("--repo", help="Repository owner/repo (default: payload, GITHUB_REPOSITORY or config)")
    run.add_argument("--pr", type=int, help="Pull request number")
    run.add_argument(
        "--event-path",
        type=Path,
        default=None,
        help="GitHub event payload JSON (default: $GITHUB_EVENT_PATH)",
    )

    sub.add_parser("serve", help="Run the webhook server")
    return parser


def _load_event(path: Path | None) -> dict:
    """Read the pull_request event payload, if any."""
    if path is None:
        env_path = os.environ.get("GITHUB_EVENT_PATH")
        if not env_path:
            return {}
        path = Path(env_path)
    return json.loads(path.read_text())


def run_once(config: AppConfig, args: argparse.Namespace) -> int:
    """Reconcile a single pull request from --pr or an event payload."""
    log = logging.getLogger("dbchanges.main")
    event = _load_event(args.event_path) if args.pr is None else {}
    pull = event.get("pull_request") or {}
    repo = (event.get("repository") or {}).get("full_name") or args.repo or config.bot.repository
    pr_number = args.pr if args.pr is not None else pull.get("number")
    if not repo or pr_number is None:
        log.error("Need a repository and a pull request number (--repo/--pr or an event payload)")
        return 2

    token = config.github_token_resolved
    if not token:
        log.error("No GitHub token: set GITHUB_TOKEN or GITHUB_TOKEN_FILE")
        return 2

    adapter = GitHubAdapter(token=token, api_url=config.github.api_url)
    pr = PullRequest.from_api(pull) if pull else None
    result = reconcile_pull_request(
        adapter,
        repo,
        int(pr_number),
        settings=config.migrations,
        pr=pr,
        html_url=config.github.html_url,
    )
    log.info(
        "PR #%s: %s migrations, body updated=%s, label %s",
        result.pr_number,
        len(result.migrations),
        result.body_updated,
        result.label_action,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: dispatch to run or serve."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)
    setup_logging(config.logging)

    if args.check:
        print("Config OK:", config.bot.repository or "(any repository)", config.migrations.path_prefix)
        return 0

    if args.subcommand == "serve":
        from dbchanges.webhook.server import run_webhook_server

        if not config.webhook.enabled:
            logging.getLogger("dbchanges.main").warning("Webhook disabled in config; nothing to serve")
            return 0
        try:
            run_webhook_server(config)
        except KeyboardInterrupt:
            return 0
        except Exception as e:
            logging.getLogger("dbchanges.webhook").exception("Fatal error: %s", e)
            return 1
        return 0

    if args.subcommand != "run":
        parser.print_usage(sys.stderr)
        return 2

    try:
        return run_once(config, args)
    except Exception as e:
        logging.getLogger("dbchanges.main").exception("Fatal error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
