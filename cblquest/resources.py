"""Resource and activity validation for the Investigate and Act phases.

Resource dict structure:
    {
        'title': str,
        'url': str,
        'type': str,          # article | video | book | website | other
        'credibility': str    # high | medium | low
    }

Activity dict structure:
    {
        'title': str,
        'description': str,
        'status': str         # not_started | in_progress | completed
    }

Dicts may be partial while a user is still filling in a form; missing
fields simply fail validation.
"""

import logging
from typing import Iterable
from urllib.parse import urlsplit

from cblquest.progress import percentage

logger = logging.getLogger(__name__)

RESOURCE_TYPES = ("article", "video", "book", "website", "other")
CREDIBILITY_LEVELS = ("high", "medium", "low")
ACTIVITY_STATUSES = ("not_started", "in_progress", "completed")

MIN_TITLE_LENGTH = 3
MIN_DESCRIPTION_LENGTH = 10


def _stripped_length(value) -> int:
    if not value or not isinstance(value, str):
        return 0
    return len(value.strip())


def is_valid_url(url: str | None) -> bool:
    """Check that a string is a well-formed absolute URL.

    Both a scheme and a host are required, so strings such as
    "not a url" or "www.example" are rejected.

    Args:
        url: The URL string to validate

    Returns:
        True if the URL is well-formed, False otherwise
    """
    if _stripped_length(url) == 0:
        return False

    try:
        parts = urlsplit(url.strip())
        # Accessing the port validates it and raises on garbage
        parts.port
    except ValueError as e:
        logger.debug(f"Rejected malformed URL {url!r}: {e}")
        return False

    if not parts.scheme or not parts.hostname:
        return False

    # Spaces in the path or query are percent-encoded by browsers; not in the host
    return not any(ch.isspace() for ch in parts.scheme + parts.netloc)


def is_valid_resource(resource: dict | None) -> bool:
    """Check that a research resource has all required fields.

    Validates:
        - title has at least 3 non-blank characters
        - url is a well-formed URL
        - type and credibility are present
    """
    if not resource or not isinstance(resource, dict):
        return False

    if _stripped_length(resource.get("title")) < MIN_TITLE_LENGTH:
        return False

    if not is_valid_url(resource.get("url")):
        return False

    if not resource.get("type"):
        return False

    if not resource.get("credibility"):
        return False

    return True


def is_valid_activity(activity: dict | None) -> bool:
    """Check that an activity has a title, a description and a status.

    Validates:
        - title has at least 3 non-blank characters
        - description has at least 10 non-blank characters
        - status is present
    """
    if not activity or not isinstance(activity, dict):
        return False

    if _stripped_length(activity.get("title")) < MIN_TITLE_LENGTH:
        return False

    if _stripped_length(activity.get("description")) < MIN_DESCRIPTION_LENGTH:
        return False

    if not activity.get("status"):
        return False

    return True


def count_resources_by_credibility(resources: Iterable[dict], credibility: str) -> int:
    """Count resources rated at the given credibility level."""
    if not resources:
        return 0
    return sum(
        1 for resource in resources
        if isinstance(resource, dict) and resource.get("credibility") == credibility
    )


def count_activities_by_status(activities: Iterable[dict], status: str) -> int:
    """Count activities in the given status."""
    if not activities:
        return 0
    return sum(
        1 for activity in activities
        if isinstance(activity, dict) and activity.get("status") == status
    )


def calculate_completion_rate(activities: list[dict]) -> int:
    """Calculate the percentage of activities that are completed.

    Returns:
        Integer percentage, 0 for an empty list
    """
    if not activities:
        return 0
    completed = count_activities_by_status(activities, "completed")
    return percentage(completed, len(activities))


def has_high_credibility_resources(resources: Iterable[dict]) -> bool:
    """Check whether at least one resource is rated high credibility."""
    if not resources:
        return False
    return any(
        isinstance(resource, dict) and resource.get("credibility") == "high"
        for resource in resources
    )
