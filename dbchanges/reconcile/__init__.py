"""Reconcile pull request body and labels with detected migrations."""

from dbchanges.reconcile.body import END_MARKER, START_MARKER, build_body, reconcile_body, strip_section, wrap_section
from dbchanges.reconcile.labels import ensure_label_exists, reconcile_label
from dbchanges.reconcile.runner import ReconcileResult, reconcile_pull_request

__all__ = [
    "END_MARKER",
    "START_MARKER",
    "ReconcileResult",
    "build_body",
    "ensure_label_exists",
    "reconcile_body",
    "reconcile_label",
    "reconcile_pull_request",
    "strip_section",
    "wrap_section",
]
