"""Unit tests for the nudge lookup."""

import random
from unittest.mock import Mock

import pytest
from cblquest.nudges import (
    get_random_nudge,
    get_nudges_for_category,
    count_nudges_for_category,
    is_category_valid_for_phase,
    get_available_categories,
    NUDGES,
    PHASE_CATEGORIES
)


class TestGetRandomNudge:
    """Test random nudge selection."""

    def test_known_category(self):
        """Test a hint is returned for a known category."""
        nudge = get_random_nudge("big_idea")
        assert isinstance(nudge, str)
        assert nudge in NUDGES["big_idea"]

    def test_unknown_category(self):
        """Test None is returned for an unknown category."""
        assert get_random_nudge("invalid_category") is None

    def test_seeded_generator_is_reproducible(self):
        """Test the same seed yields the same picks."""
        first = [get_random_nudge("challenge", rng=random.Random(7)) for _ in range(5)]
        second = [get_random_nudge("challenge", rng=random.Random(7)) for _ in range(5)]
        assert first == second

    def test_injected_generator_is_used(self):
        """Test the injected generator picks the hint."""
        rng = Mock()
        rng.choice.return_value = NUDGES["solution"][2]
        assert get_random_nudge("solution", rng=rng) == NUDGES["solution"][2]
        rng.choice.assert_called_once_with(NUDGES["solution"])

    def test_covers_multiple_hints(self):
        """Test repeated picks reach more than one hint."""
        rng = random.Random(1234)
        picks = {get_random_nudge("big_idea", rng=rng) for _ in range(50)}
        assert len(picks) >= 2


class TestGetNudgesForCategory:
    """Test listing nudges for a category."""

    def test_known_category(self):
        nudges = get_nudges_for_category("big_idea")
        assert len(nudges) == 3
        assert "Think of a broad theme that connects different areas of knowledge" in nudges

    def test_unknown_category(self):
        """Test an empty list is returned for an unknown category."""
        assert get_nudges_for_category("invalid") == []

    def test_returns_copy(self):
        """Test callers cannot mutate the hint table."""
        nudges = get_nudges_for_category("resources")
        nudges.append("extra")
        assert len(NUDGES["resources"]) == 3


class TestCountNudgesForCategory:
    """Test counting nudges."""

    def test_counts(self):
        assert count_nudges_for_category("big_idea") == 3
        assert count_nudges_for_category("essential_question") == 3
        assert count_nudges_for_category("resources") == 3

    def test_unknown_category(self):
        assert count_nudges_for_category("invalid") == 0

    def test_every_category_has_three(self):
        for category in NUDGES:
            assert count_nudges_for_category(category) == 3


class TestIsCategoryValidForPhase:
    """Test phase/category membership."""

    def test_engage_categories(self):
        assert is_category_valid_for_phase("engage", "big_idea") is True
        assert is_category_valid_for_phase("engage", "essential_question") is True
        assert is_category_valid_for_phase("engage", "challenge") is True

    def test_engage_rejects_other_categories(self):
        assert is_category_valid_for_phase("engage", "resources") is False
        assert is_category_valid_for_phase("engage", "solution") is False

    def test_investigate_categories(self):
        assert is_category_valid_for_phase("investigate", "guiding_questions") is True
        assert is_category_valid_for_phase("investigate", "resources") is True

    def test_act_categories(self):
        assert is_category_valid_for_phase("act", "solution") is True
        assert is_category_valid_for_phase("act", "implementation") is True

    def test_unknown_phase(self):
        assert is_category_valid_for_phase("reflect", "big_idea") is False


class TestGetAvailableCategories:
    """Test ordered categories per phase."""

    @pytest.mark.parametrize("phase, expected", [
        ("engage", ["big_idea", "essential_question", "challenge"]),
        ("investigate", ["guiding_questions", "resources"]),
        ("act", ["solution", "implementation"]),
    ])
    def test_categories_in_order(self, phase, expected):
        assert get_available_categories(phase) == expected

    def test_unknown_phase(self):
        assert get_available_categories("reflect") == []

    def test_every_phase_category_has_nudges(self):
        """Test every category offered in a phase has hints."""
        for categories in PHASE_CATEGORIES.values():
            for category in categories:
                assert category in NUDGES
