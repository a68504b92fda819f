"""XP, level and badge calculations for CBL Quest.

Levels are driven by cumulative XP against a fixed threshold table.
Level N requires at least XP_PER_LEVEL[N - 1] experience points.
"""

from typing import Iterable

from cblquest.progress import percentage

# Cumulative XP required to reach each level (index 0 -> level 1)
XP_PER_LEVEL = [
    0,     # Level 1
    100,   # Level 2
    250,   # Level 3
    500,   # Level 4
    1000,  # Level 5
]

MAX_LEVEL = len(XP_PER_LEVEL)


def calculate_user_level(total_xp: int) -> int:
    """Calculate a user's level from total XP.

    Scans the thresholds from highest to lowest and returns the first level
    whose threshold has been reached.

    Args:
        total_xp: Total experience points

    Returns:
        Level between 1 and MAX_LEVEL (1 for zero or negative XP)
    """
    for index in range(len(XP_PER_LEVEL) - 1, -1, -1):
        if total_xp >= XP_PER_LEVEL[index]:
            return index + 1
    return 1


def xp_to_next_level(total_xp: int) -> int:
    """Calculate the XP still needed to reach the next level.

    Args:
        total_xp: Total experience points

    Returns:
        XP remaining until the next threshold, or 0 at max level
    """
    level = calculate_user_level(total_xp)
    if level >= MAX_LEVEL:
        return 0
    return XP_PER_LEVEL[level] - total_xp


def level_progress_percentage(total_xp: int) -> int:
    """Calculate progress through the current level as a percentage.

    Args:
        total_xp: Total experience points

    Returns:
        Integer percentage (0-100), 100 at max level
    """
    level = calculate_user_level(total_xp)
    if level >= MAX_LEVEL:
        return 100

    level_floor = XP_PER_LEVEL[level - 1]
    next_floor = XP_PER_LEVEL[level]
    return percentage(total_xp - level_floor, next_floor - level_floor)


def calculate_total_xp(badges: Iterable[dict]) -> int:
    """Sum the XP awarded by a collection of badges.

    Badge dict structure:
        {
            'id': str,
            'name': str,
            'xp': int
        }

    Returns:
        Total XP, 0 for an empty collection
    """
    if not badges:
        return 0
    return sum(
        badge.get("xp") or 0 for badge in badges
        if isinstance(badge, dict)
    )


def has_completed_all_phases(
    engage_complete: bool,
    investigate_complete: bool,
    act_complete: bool
) -> bool:
    """Check whether a user has finished Engage, Investigate and Act."""
    return bool(engage_complete and investigate_complete and act_complete)


def get_level_info(total_xp: int) -> dict:
    """Summarize level standing for profile display.

    Returns:
        {
            'level': int,
            'xp': int,
            'xp_to_next_level': int,
            'progress_percentage': int,
            'is_max_level': bool
        }
    """
    level = calculate_user_level(total_xp)
    return {
        "level": level,
        "xp": total_xp,
        "xp_to_next_level": xp_to_next_level(total_xp),
        "progress_percentage": level_progress_percentage(total_xp),
        "is_max_level": level >= MAX_LEVEL,
    }
