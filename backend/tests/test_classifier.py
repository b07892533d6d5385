"""Tests for distance-based classification."""

import itertools

import pytest

from answer_scoring.core.classifier import (
    Classification,
    Evaluation,
    Outcome,
    classify,
    evaluate_outcome,
)
from answer_scoring.core.exceptions import InvalidArgumentError


class TestClassify:
    """Decision rules, checked in order."""

    @pytest.mark.parametrize(
        "shown,associated,threshold,expected",
        [
            (1, 1, 3, Outcome.UNCLEAR),
            (2, 2, 3, Outcome.UNCLEAR),
            (0, 0, 3, Outcome.UNCLEAR),
            (0, 3, 3, Outcome.SHOWN_CARD),
            (2, 7, 3, Outcome.SHOWN_CARD),
            (3, 0, 3, Outcome.ASSOCIATED_CARD),
            (2, 1, 3, Outcome.ASSOCIATED_CARD),
            (3, 3, 3, Outcome.UNCLEAR_BUT_DISTANT),
            (9, 9, 3, Outcome.UNCLEAR_BUT_DISTANT),
            (0, 0, 0, Outcome.UNCLEAR_BUT_DISTANT),
            (3, 4, 3, Outcome.MAYBE_SHOWN_CARD),
            (4, 8, 3, Outcome.MAYBE_SHOWN_CARD),
            (5, 6, 3, Outcome.COMPLETELY_UNCLEAR),
            (4, 3, 3, Outcome.COMPLETELY_UNCLEAR),
            (8, 4, 3, Outcome.COMPLETELY_UNCLEAR),
        ],
    )
    def test_rules(self, shown, associated, threshold, expected):
        assert classify(shown, associated, threshold).outcome is expected

    def test_shown_card_below_threshold_only(self):
        assert classify(3, 5, 3).outcome is Outcome.MAYBE_SHOWN_CARD
        assert classify(3, 5, 4).outcome is Outcome.SHOWN_CARD

    def test_custom_margin(self):
        assert classify(4, 8, 3, near_miss_margin=1).outcome is Outcome.COMPLETELY_UNCLEAR
        assert classify(5, 8, 3, near_miss_margin=3).outcome is Outcome.MAYBE_SHOWN_CARD

    def test_maybe_associated_never_produced_by_default(self):
        for shown, associated, threshold in itertools.product(range(8), range(8), range(5)):
            outcome = classify(shown, associated, threshold).outcome
            assert outcome is not Outcome.MAYBE_ASSOCIATED_CARD

    def test_maybe_associated_when_enabled(self):
        result = classify(4, 3, 3, near_miss_associated=True)
        assert result.outcome is Outcome.MAYBE_ASSOCIATED_CARD
        assert result.evaluation is Evaluation.UNCLEAR

    def test_enabled_flag_leaves_other_rules_alone(self):
        assert classify(3, 4, 3, near_miss_associated=True).outcome is Outcome.MAYBE_SHOWN_CARD
        assert classify(8, 5, 3, near_miss_associated=True).outcome is Outcome.COMPLETELY_UNCLEAR
        assert classify(5, 0, 3, near_miss_associated=True).outcome is Outcome.ASSOCIATED_CARD

    def test_returns_classification(self):
        result = classify(0, 3, 3)
        assert result == Classification(Outcome.SHOWN_CARD, Evaluation.SHOWN_CARD)
        assert result.is_unclear is False


class TestEvaluation:
    """Outcome to evaluation mapping."""

    @pytest.mark.parametrize(
        "outcome,expected",
        [
            (Outcome.SHOWN_CARD, "shown card"),
            (Outcome.ASSOCIATED_CARD, "associated card"),
            (Outcome.UNCLEAR, "unclear"),
            (Outcome.UNCLEAR_BUT_DISTANT, "unclear"),
            (Outcome.MAYBE_SHOWN_CARD, "unclear"),
            (Outcome.MAYBE_ASSOCIATED_CARD, "unclear"),
            (Outcome.COMPLETELY_UNCLEAR, "unclear"),
        ],
    )
    def test_mapping(self, outcome, expected):
        assert evaluate_outcome(outcome).value == expected

    def test_is_unclear(self):
        assert classify(1, 1, 3).is_unclear is True
        assert classify(4, 0, 3).is_unclear is False


class TestClassifyErrors:
    """Malformed arguments are rejected before any comparison."""

    @pytest.mark.parametrize(
        "args,field",
        [
            ((-1, 0, 3), "distance_to_shown"),
            ((0, -2, 3), "distance_to_associated"),
            ((0, 0, -1), "threshold"),
        ],
    )
    def test_negative_values(self, args, field):
        with pytest.raises(InvalidArgumentError) as exc_info:
            classify(*args)
        assert exc_info.value.field == field

    @pytest.mark.parametrize("bad", [1.0, "1", None, True])
    def test_non_integers(self, bad):
        with pytest.raises(InvalidArgumentError):
            classify(bad, 0, 3)

    def test_negative_margin(self):
        with pytest.raises(InvalidArgumentError):
            classify(0, 0, 3, near_miss_margin=-1)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            classify(0, 0, -3)
