"""Minimal webhook HTTP server for GitHub events.

Serves a health check and the configured webhook path.
"""

import json
import logging
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any
from urllib.parse import parse_qs

from dbchanges.config import AppConfig
from dbchanges.webhook.handlers import handle_github_event, verify_signature

LOG = logging.getLogger("dbchanges.webhook")


class WebhookHandler(BaseHTTPRequestHandler):
    """Handle GET /health and POST <github.webhook_path>."""

    config: AppConfig

    def _send_json(self, status: int, data: dict) -> None:
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def do_GET(self) -> None:
        if self.path == "/health" or self.path == "/":
            self._send_json(200, {"status": "ok", "service": "dbchanges"})
            return
        self.send_response(404)
        self.end_headers()

    def do_POST(self) -> None:
        if self.path == self.config.github.webhook_path:
            self._handle_github_webhook()
            return
        self.send_response(404)
        self.end_headers()

    def _parse_webhook_body(self, body: bytes) -> dict:
        """Parse webhook body as JSON.

        Supports raw JSON and application/x-www-form-urlencoded (payload=...).
        """
        if not body:
            return {}
        content_type = self.headers.get("Content-Type", "")
        if "application/x-www-form-urlencoded" in content_type:
            parsed = parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)
            raw = (parsed.get("payload") or [None])[0]
            if raw is None:
                return {}
            return json.loads(raw)
        return json.loads(body.decode())

    def _handle_github_webhook(self) -> None:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length) if length else b""
        if not verify_signature(
            self.config.webhook_secret_resolved,
            body,
            self.headers.get("X-Hub-Signature-256"),
        ):
            LOG.warning("Rejected webhook with invalid signature")
            self._send_json(401, {"error": "invalid signature"})
            return
        try:
            payload = self._parse_webhook_body(body)
            event = self.headers.get("X-GitHub-Event", "")
            LOG.info("Webhook event: %s (action: %s)", event, payload.get("action"))
            handle_github_event(self.config, event, payload)
        except json.JSONDecodeError:
            LOG.warning("Invalid webhook JSON (%s bytes)", len(body))
        except Exception as e:
            LOG.exception("Webhook handling failed: %s", e)
        self._send_json(200, {"received": True})

    def log_message(self, format: str, *args: Any) -> None:
        LOG.debug(format, *args)


def run_webhook_server(config: AppConfig) -> None:
    """Run HTTP server for webhooks and health check."""
    host = config.webhook.host
    port = config.webhook.port
    WebhookHandler.config = config
    server = HTTPServer((host, port), WebhookHandler)
    LOG.info("Webhook server listening on %s:%s", host, port)
    server.serve_forever()
