"""Project progress logic for CBL Quest.

A CBL project moves through three phases in a fixed order:
Engage -> Investigate -> Act. Nothing here tracks state; every function
computes its answer from the project dict it is given.

Project dict structure:
    {
        'phase': str,                  # 'engage' | 'investigate' | 'act'
        'engage_complete': bool,
        'investigate_complete': bool,
        'act_complete': bool
    }
"""

import math
from typing import Optional

PHASES = ("engage", "investigate", "act")

PHASE_COMPLETION_FIELDS = (
    "engage_complete",
    "investigate_complete",
    "act_complete",
)


def percentage(part: float, whole: float) -> int:
    """Return part/whole as an integer percent, rounding halves up.

    Python's built-in round() uses banker's rounding (round(12.5) == 12),
    so halves are rounded explicitly.

    Args:
        part: Completed amount
        whole: Total amount

    Returns:
        Integer percentage, or 0 when whole is 0
    """
    if not whole:
        return 0
    return math.floor(part * 100 / whole + 0.5)


def count_completed_phases(project: dict) -> int:
    """Count how many of the three phases are complete (0-3)."""
    if not project or not isinstance(project, dict):
        return 0
    return sum(1 for field in PHASE_COMPLETION_FIELDS if project.get(field))


def calculate_project_progress(project: dict) -> int:
    """Calculate project completion as a percentage of phases done.

    Args:
        project: Project progress dict

    Returns:
        0, 33, 67 or 100
    """
    return percentage(count_completed_phases(project), len(PHASES))


def get_next_phase(current_phase: str, current_phase_complete: bool) -> Optional[str]:
    """Determine the phase a project may advance to.

    Args:
        current_phase: The phase the project is in
        current_phase_complete: Whether that phase has been completed

    Returns:
        The next phase name, or None if the current phase is incomplete,
        the project is already in Act, or the phase is unknown
    """
    if not current_phase_complete:
        return None

    if current_phase not in PHASES:
        return None

    index = PHASES.index(current_phase)
    if index + 1 >= len(PHASES):
        return None
    return PHASES[index + 1]


def is_project_complete(project: dict) -> bool:
    """Check whether all three phases are complete."""
    return count_completed_phases(project) == len(PHASES)
