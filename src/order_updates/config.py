"""Runtime settings read from the environment.

Protean settings (databases, event processing) live in ``domain.toml``;
this module only covers the knobs specific to order update dispatch.
"""

import os

import structlog

logger = structlog.get_logger(__name__)

DEDUPE_WINDOW_ENV = "ORDER_UPDATES_DEDUPE_WINDOW"


def get_dedupe_window() -> float:
    """Seconds to remember a dispatched transition, or 0 when disabled."""
    raw = os.getenv(DEDUPE_WINDOW_ENV, "").strip()
    if not raw:
        return 0.0

    try:
        window = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid dedupe window", env=DEDUPE_WINDOW_ENV, value=raw)
        return 0.0

    return max(window, 0.0)
