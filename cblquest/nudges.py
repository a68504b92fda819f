"""Contextual nudges for CBL Quest.

A nudge is a short hint shown to guide a user toward completing a CBL
artifact. Hints are grouped by category, and each phase only offers the
categories that belong to it.
"""

import logging
import random
from typing import Optional

logger = logging.getLogger(__name__)

# Hint table: category -> ordered list of hints
NUDGES = {
    "big_idea": [
        "Think of a broad theme that connects different areas of knowledge",
        "Which fundamental concept do you want to explore?",
        "Consider issues that matter to your community",
    ],
    "essential_question": [
        "Write an open question that has no single answer",
        "The question should provoke critical thinking",
        "Avoid questions that can be answered with yes or no",
    ],
    "challenge": [
        "Describe a concrete action the students should carry out",
        "The challenge should be specific and measurable",
        "Connect the challenge to real-world situations",
    ],
    "guiding_questions": [
        "Break the problem down into smaller questions",
        "Each question should lead to a specific investigation",
        "Make sure the questions can actually be researched",
    ],
    "resources": [
        "Look for academic and trustworthy sources",
        "Mix different kinds of resources (articles, videos, books)",
        "Critically assess the credibility of each source",
    ],
    "solution": [
        "Describe a creative and feasible solution",
        "Take available resources and constraints into account",
        "Think about how the solution affects stakeholders",
    ],
    "implementation": [
        "Split the implementation into clear steps",
        "Assign owners and realistic deadlines",
        "Consider risks and contingency plans",
    ],
}

# Phase -> categories offered in that phase (order matters)
PHASE_CATEGORIES = {
    "engage": ["big_idea", "essential_question", "challenge"],
    "investigate": ["guiding_questions", "resources"],
    "act": ["solution", "implementation"],
}


def get_random_nudge(category: str, rng: Optional[random.Random] = None) -> Optional[str]:
    """Pick one hint for a category at random.

    Args:
        category: Nudge category (e.g. "big_idea")
        rng: Optional random generator; pass a seeded random.Random for
            reproducible picks. Defaults to the global random module.

    Returns:
        A hint string, or None if the category is unknown or has no hints
    """
    nudges = NUDGES.get(category)
    if not nudges:
        logger.debug(f"No nudges available for category: {category}")
        return None

    chooser = rng if rng is not None else random
    return chooser.choice(nudges)


def get_nudges_for_category(category: str) -> list[str]:
    """Return every hint for a category, or an empty list if unknown."""
    return list(NUDGES.get(category, []))


def count_nudges_for_category(category: str) -> int:
    """Return how many hints a category has (0 if unknown)."""
    return len(NUDGES.get(category, []))


def is_category_valid_for_phase(phase: str, category: str) -> bool:
    """Check whether a nudge category belongs to a CBL phase."""
    return category in PHASE_CATEGORIES.get(phase, [])


def get_available_categories(phase: str) -> list[str]:
    """Return the nudge categories offered in a phase, in display order.

    Args:
        phase: CBL phase ("engage", "investigate" or "act")

    Returns:
        Ordered list of category names, empty for an unknown phase
    """
    if phase not in PHASE_CATEGORIES:
        logger.debug(f"Unknown phase requested for nudge categories: {phase}")
        return []
    return list(PHASE_CATEGORIES[phase])
