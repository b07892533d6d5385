"""Distance-based classification of a typed answer.

Two edit distances (typed answer vs. shown card, typed answer vs. associated
card) are turned into one outcome label. Rules are checked in order and the
first match wins:

  unclear              both below threshold and tied
  shown_card           shown below threshold and strictly closer
  associated_card      associated below threshold and strictly closer
  unclear_but_distant  tied at any distance
  maybe_shown_card     shown within threshold + margin and strictly closer
  maybe_associated_card
                       only with ``near_miss_associated=True``: associated
                       within threshold + margin and strictly closer
  completely_unclear   everything else

The associated near-miss rule is off by default, so ``maybe_associated_card``
is never produced unless a caller opts in.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from answer_scoring.core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

NEAR_MISS_MARGIN = 2


class Outcome(str, Enum):
    UNCLEAR = "unclear"
    SHOWN_CARD = "shown_card"
    ASSOCIATED_CARD = "associated_card"
    UNCLEAR_BUT_DISTANT = "unclear_but_distant"
    MAYBE_SHOWN_CARD = "maybe_shown_card"
    MAYBE_ASSOCIATED_CARD = "maybe_associated_card"
    COMPLETELY_UNCLEAR = "completely_unclear"


class Evaluation(str, Enum):
    UNCLEAR = "unclear"
    SHOWN_CARD = "shown card"
    ASSOCIATED_CARD = "associated card"


@dataclass(frozen=True)
class Classification:
    """Outcome label plus the evaluation shown to the experimenter."""

    outcome: Outcome
    evaluation: Evaluation

    @property
    def is_unclear(self) -> bool:
        return self.evaluation is Evaluation.UNCLEAR


def _require_non_negative_int(value: object, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{field} must be an integer, got {type(value).__name__}", field=field
        )
    if value < 0:
        raise InvalidArgumentError(f"{field} must not be negative, got {value}", field=field)


def evaluate_outcome(outcome: Outcome) -> Evaluation:
    """Map an outcome label to its evaluation."""
    if outcome is Outcome.SHOWN_CARD:
        return Evaluation.SHOWN_CARD
    if outcome is Outcome.ASSOCIATED_CARD:
        return Evaluation.ASSOCIATED_CARD
    return Evaluation.UNCLEAR


def classify(
    distance_to_shown: int,
    distance_to_associated: int,
    threshold: int,
    *,
    near_miss_margin: int = NEAR_MISS_MARGIN,
    near_miss_associated: bool = False,
) -> Classification:
    """Classify a pair of edit distances against ``threshold``.

    Raises:
        InvalidArgumentError: if any distance, the threshold or the margin is
            negative or not an integer.
    """
    _require_non_negative_int(distance_to_shown, "distance_to_shown")
    _require_non_negative_int(distance_to_associated, "distance_to_associated")
    _require_non_negative_int(threshold, "threshold")
    _require_non_negative_int(near_miss_margin, "near_miss_margin")

    shown, associated = distance_to_shown, distance_to_associated
    near_miss = threshold + near_miss_margin

    if shown < threshold and associated < threshold and shown == associated:
        outcome = Outcome.UNCLEAR
    elif shown < threshold and shown < associated:
        outcome = Outcome.SHOWN_CARD
    elif associated < threshold and associated < shown:
        outcome = Outcome.ASSOCIATED_CARD
    elif shown == associated:
        outcome = Outcome.UNCLEAR_BUT_DISTANT
    elif shown < near_miss and shown < associated:
        outcome = Outcome.MAYBE_SHOWN_CARD
    elif near_miss_associated and associated < near_miss and associated < shown:
        outcome = Outcome.MAYBE_ASSOCIATED_CARD
    else:
        outcome = Outcome.COMPLETELY_UNCLEAR

    logger.debug(
        "Classified distances shown=%d associated=%d threshold=%d as %s",
        shown, associated, threshold, outcome.value,
    )
    return Classification(outcome=outcome, evaluation=evaluate_outcome(outcome))
