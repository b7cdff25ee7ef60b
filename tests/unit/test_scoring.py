"""Unit tests for the completeness score."""

import pytest

from cvembed.contexts.review.scoring import (
    CompletenessSignals,
    clamp_score,
    collect_completeness_signals,
    compute_score,
    round_half_away_from_zero,
)


def _findings(count):
    return [f"finding {i}" for i in range(count)]


@pytest.mark.unit
class TestComputeScore:
    """Penalty caps, bonus and clamping."""

    def test_no_findings_no_bonus(self):
        assert compute_score([], [], CompletenessSignals()) == 100

    def test_error_penalty(self):
        assert compute_score(_findings(2), [], CompletenessSignals()) == 80

    def test_error_penalty_is_capped(self):
        assert compute_score(_findings(12), [], CompletenessSignals()) == 30

    def test_warning_penalty_is_capped(self):
        assert compute_score([], _findings(20), CompletenessSignals()) == 76

    def test_worst_case_is_six(self):
        assert compute_score(_findings(50), _findings(50), CompletenessSignals()) == 6

    def test_bonus_cannot_exceed_100(self):
        signals = CompletenessSignals(
            meaningful_projects=2,
            meaningful_experience=1,
            has_summary=True,
            unique_skills=6,
            has_any_link=True,
        )
        assert signals.bonus == 10
        assert compute_score([], [], signals) == 100
        assert compute_score(_findings(1), [], signals) == 100
        assert compute_score(_findings(2), [], signals) == 90

    @pytest.mark.parametrize("errors", range(0, 9))
    def test_more_errors_never_raise_score(self, errors):
        signals = CompletenessSignals(has_summary=True)
        assert compute_score(_findings(errors + 1), [], signals) <= compute_score(
            _findings(errors), [], signals
        )

    @pytest.mark.parametrize("errors, warnings", [(0, 0), (3, 2), (7, 8), (100, 100)])
    def test_score_in_bounds(self, errors, warnings):
        score = compute_score(_findings(errors), _findings(warnings), CompletenessSignals())
        assert 0 <= score <= 100
        assert isinstance(score, int)


@pytest.mark.unit
class TestBonus:
    """Each signal contributes its weight once."""

    @pytest.mark.parametrize(
        "signals, expected",
        [
            (CompletenessSignals(meaningful_projects=1), 0),
            (CompletenessSignals(meaningful_projects=2), 3),
            (CompletenessSignals(meaningful_projects=5), 3),
            (CompletenessSignals(meaningful_experience=1), 2),
            (CompletenessSignals(has_summary=True), 2),
            (CompletenessSignals(unique_skills=5), 0),
            (CompletenessSignals(unique_skills=6), 2),
            (CompletenessSignals(has_any_link=True), 1),
        ],
    )
    def test_bonus_weights(self, signals, expected):
        assert signals.bonus == expected


@pytest.mark.unit
class TestRounding:
    """Half away from zero, then clamp."""

    @pytest.mark.parametrize(
        "value, expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (2.4, 2), (-0.5, -1), (-1.5, -2), (0.0, 0)],
    )
    def test_round_half_away_from_zero(self, value, expected):
        assert round_half_away_from_zero(value) == expected

    @pytest.mark.parametrize("value, expected", [(-3, 0), (104.6, 100), (55.5, 56)])
    def test_clamp_score(self, value, expected):
        assert clamp_score(value) == expected


@pytest.mark.unit
class TestSignals:
    """Signals measured from documents."""

    def test_empty_resume(self, empty_resume):
        signals = collect_completeness_signals(empty_resume)
        assert signals == CompletenessSignals()

    def test_complete_resume(self, complete_resume):
        signals = collect_completeness_signals(complete_resume)
        assert signals.meaningful_projects == 2
        assert signals.meaningful_experience == 1
        assert signals.has_summary
        assert signals.unique_skills == 6
        assert signals.has_any_link

    def test_whitespace_summary_is_not_a_summary(self, complete_resume):
        complete_resume["basics"]["summary"] = "  \n "
        assert not collect_completeness_signals(complete_resume).has_summary
