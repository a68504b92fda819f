"""Engage-phase field validation for CBL Quest.

The Engage phase requires three artifacts: a Big Idea, an Essential
Question and a Challenge. Each validator answers whether a free-text
field is complete enough to count; none of them raise.
"""

from typing import Tuple

MIN_BIG_IDEA_LENGTH = 10
MIN_ESSENTIAL_QUESTION_LENGTH = 10
MIN_CHALLENGE_LENGTH = 15


def _stripped_length(text) -> int:
    if not text or not isinstance(text, str):
        return 0
    return len(text.strip())


def is_valid_big_idea(big_idea: str | None) -> bool:
    """Check that a Big Idea has at least 10 non-blank characters."""
    return _stripped_length(big_idea) >= MIN_BIG_IDEA_LENGTH


def is_valid_essential_question(question: str | None) -> bool:
    """Check that an Essential Question is long enough and is a question.

    Args:
        question: The essential question text

    Returns:
        True if the stripped text has at least 10 characters and
        contains a '?', False otherwise
    """
    if _stripped_length(question) < MIN_ESSENTIAL_QUESTION_LENGTH:
        return False
    return "?" in question


def is_valid_challenge(challenge: str | None) -> bool:
    """Check that a Challenge has at least 15 non-blank characters."""
    return _stripped_length(challenge) >= MIN_CHALLENGE_LENGTH


def is_engage_phase_complete(
    big_idea: str | None,
    essential_question: str | None,
    challenge: str | None
) -> bool:
    """Check whether all three Engage artifacts are valid."""
    return (
        is_valid_big_idea(big_idea)
        and is_valid_essential_question(essential_question)
        and is_valid_challenge(challenge)
    )


def validate_engage_phase(
    big_idea: str | None,
    essential_question: str | None,
    challenge: str | None
) -> Tuple[bool, str]:
    """Validate the Engage artifacts and explain the first failure.

    Args:
        big_idea: The Big Idea text
        essential_question: The Essential Question text
        challenge: The Challenge text

    Returns:
        Tuple of (is_valid, error_message)
        - is_valid: True if all three artifacts pass validation
        - error_message: Empty string if valid, description of the first
          failing artifact otherwise
    """
    if not is_valid_big_idea(big_idea):
        return False, f"Big Idea must be at least {MIN_BIG_IDEA_LENGTH} characters"

    if not is_valid_essential_question(essential_question):
        return False, (
            f"Essential Question must be at least {MIN_ESSENTIAL_QUESTION_LENGTH} "
            "characters and contain a question mark"
        )

    if not is_valid_challenge(challenge):
        return False, f"Challenge must be at least {MIN_CHALLENGE_LENGTH} characters"

    return True, ""
