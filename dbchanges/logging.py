"""Root logger setup for the CLI and webhook server.

LOGGING_LEVEL / logging.level picks the verbosity of dbchanges loggers:
INFO reports body and label writes, DEBUG adds skipped events and no-op
runs. HTTP connection chatter from urllib3 (under requests) stays at
WARNING even at DEBUG so that API calls don't drown the reconciliation log.
"""

import logging

from dbchanges.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers capped at WARNING
QUIET_LOGGERS = ("urllib3",)


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names give INFO."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


def setup_logging(config: LoggingConfig) -> None:
    """Configure the root logger from LoggingConfig and quiet HTTP client logs."""
    logging.basicConfig(
        level=_resolve_level(config.level),
        format=config.format or DEFAULT_FORMAT,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
