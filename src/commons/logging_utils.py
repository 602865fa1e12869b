"""Logging setup. All loggers live under the 'ipguard' namespace; level and format come from config."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

LOGGER_NAMESPACE = "ipguard"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    cfg: Optional[Dict[str, Any]] = None,
    log_level: Optional[str] = None,
) -> None:
    """Configure root logging from the `logging` config section.

    Args:
        cfg: Full config dict (defaults to the loaded YAML config).
        log_level: Override level (e.g. "DEBUG"); wins over config.
    """
    if cfg is None:
        from commons.config import config as cfg
    section = (cfg or {}).get("logging") or {}
    level_name = (log_level or section.get("level") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=section.get("format") or DEFAULT_FORMAT,
    )
    logging.getLogger(LOGGER_NAMESPACE).setLevel(getattr(logging, level_name, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Get a namespaced logger, e.g. get_logger("decision.router") -> 'ipguard.decision.router'."""
    if name == LOGGER_NAMESPACE or name.startswith(LOGGER_NAMESPACE + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
