"""Analytics module for sending CBL phase metrics to Datadog.

This module implements fail-open analytics integration with Datadog HTTP API.
Metric failures are logged but never block the learner's flow.
"""

import logging
import time
from typing import Optional

import requests

from cblquest import config
from cblquest.progress import PHASES

logger = logging.getLogger(__name__)

PHASE_METRIC_NAME = "cblquest.phase_completed"


def build_phase_series(phase_name: str, timestamp: int, count: int = 1) -> dict:
    """Build a Datadog series entry counting completions of one phase."""
    return {
        "metric": PHASE_METRIC_NAME,
        "type": "count",
        "points": [[timestamp, count]],
        "tags": [f"phase:{phase_name}"],
    }


def send_phase_metric(phase_name: str, datadog_api_key: Optional[str] = None) -> bool:
    """Send a phase completion metric to Datadog.

    Unknown phases and a missing API key are logged and skipped without a
    request. Delivery failures are logged and reported as False; nothing
    here raises into the caller.

    Args:
        phase_name: The completed phase (engage, investigate, act)
        datadog_api_key: Datadog API key; falls back to DATADOG_API_KEY
            from the environment when omitted

    Returns:
        True if Datadog accepted the metric, False otherwise
    """
    if phase_name not in PHASES:
        logger.warning(f"Refusing to send metric for unknown phase: {phase_name}")
        return False

    api_key = datadog_api_key or config.DATADOG_API_KEY
    if not api_key:
        logger.warning("DATADOG_API_KEY is not configured; skipping phase metric")
        return False

    series = build_phase_series(phase_name, int(time.time()))

    try:
        response = requests.post(
            config.DATADOG_API_URL,
            json={"series": [series]},
            headers={"Content-Type": "application/json", "DD-API-KEY": api_key},
            timeout=config.METRIC_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.error(f"Datadog rejected phase metric {phase_name}: {e}")
        return False
    except Exception as e:
        logger.error(f"Unexpected error sending phase metric {phase_name}: {e}")
        return False

    logger.info(f"Sent phase metric: {phase_name}")
    return True
