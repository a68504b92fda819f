"""Runtime configuration for CBL Quest.

Secrets and endpoints are read from the environment so the scoring core
can be embedded without a settings framework.

Environment variables:
    DATADOG_API_KEY         - Datadog API key (optional)
    DATADOG_API_URL         - Datadog series endpoint
    METRIC_TIMEOUT_SECONDS  - HTTP timeout for metric sends (default: 5)
"""

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_METRIC_TIMEOUT_SECONDS = 5


def _int_from_env(name: str, default: int) -> int:
    """Read a positive integer setting, falling back to default on bad values."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}; using {default}")
        return default
    if value <= 0:
        logger.warning(f"Ignoring non-positive {name}={raw!r}; using {default}")
        return default
    return value


# Datadog metrics (optional - analytics is fail-open without a key)
DATADOG_API_KEY = os.getenv("DATADOG_API_KEY")
DATADOG_API_URL = os.getenv("DATADOG_API_URL", "https://api.datadoghq.com/api/v1/series")
METRIC_TIMEOUT_SECONDS = _int_from_env("METRIC_TIMEOUT_SECONDS", DEFAULT_METRIC_TIMEOUT_SECONDS)
