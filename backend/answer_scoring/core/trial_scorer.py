"""Trial scoring: normalizes a typed answer and attributes it to a card.

Pipeline per trial:
  1. Lowercase, strip trailing spaces / submit tokens
  2. Collapse spelled-out special keys into sentinels (scoring preset)
  3. Apply backspace corrections
  4. Edit distance to the shown and to the associated card
  5. Classify, assemble the record, notify the host if the answer is unclear

The partner-facing echo runs steps 1-3 with the display preset instead, so
special keys other than backspace simply disappear.
"""

import logging

from answer_scoring.config import settings
from answer_scoring.core.backspace import resolve_backspaces
from answer_scoring.core.classifier import classify
from answer_scoring.core.edit_distance import levenshtein
from answer_scoring.core.exceptions import InvalidArgumentError
from answer_scoring.core.normalizer import (
    DISPLAY_KEYS,
    SCORING_KEYS,
    normalize_ending_and_case,
    render_sentinels,
    replace_special_tokens,
)
from answer_scoring.core.notices import UnclearCallback, build_unclear_notice
from answer_scoring.models.trial import TrialRecord, UnclearAnswerNotice

logger = logging.getLogger(__name__)


def correct_typed_word(raw: str) -> str:
    """Normalized answer used for scoring; inert sentinels stay in place."""
    text = normalize_ending_and_case(raw)
    text = replace_special_tokens(text, SCORING_KEYS)
    return resolve_backspaces(text)


def partner_output(raw: str) -> str:
    """Answer as the partner sees it: corrections applied, key names removed."""
    text = normalize_ending_and_case(raw)
    text = replace_special_tokens(text, DISPLAY_KEYS)
    return resolve_backspaces(text)


class TrialScorer:
    """Scores typed answers; the host holds one and calls :meth:`score`.

    Args:
        threshold: Default distance threshold when a trial does not set one.
        near_miss_margin: Extra distance still reported as a near miss.
        near_miss_associated: Enable the ``maybe_associated_card`` outcome.
        on_unclear: Called with an :class:`UnclearAnswerNotice` whenever the
            evaluation is ``"unclear"``.
        warning_template: Overrides ``settings.unclear_warning_template``.
    """

    def __init__(
        self,
        threshold: int | None = None,
        near_miss_margin: int | None = None,
        near_miss_associated: bool | None = None,
        on_unclear: UnclearCallback | None = None,
        warning_template: str | None = None,
    ) -> None:
        self.threshold = settings.distance_threshold if threshold is None else threshold
        self.near_miss_margin = (
            settings.near_miss_margin if near_miss_margin is None else near_miss_margin
        )
        self.near_miss_associated = (
            settings.near_miss_associated
            if near_miss_associated is None
            else near_miss_associated
        )
        self.on_unclear = on_unclear
        self.warning_template = warning_template

    def score(
        self,
        playing_card: str,
        associated: str,
        input: str = "",
        distance: int | None = None,
    ) -> TrialRecord:
        """Score one typed answer and return its record."""
        record, _ = self.score_with_notice(playing_card, associated, input, distance)
        return record

    def score_with_notice(
        self,
        playing_card: str,
        associated: str,
        input: str = "",
        distance: int | None = None,
    ) -> tuple[TrialRecord, UnclearAnswerNotice | None]:
        """Score one typed answer; also return the notice if one was raised."""
        threshold = self.threshold if distance is None else distance
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
            raise InvalidArgumentError(
                f"distance threshold must be a non-negative integer, got {threshold!r}",
                field="distance",
            )

        corrected = correct_typed_word(input)
        distance_shown = levenshtein(corrected, playing_card.lower())
        distance_associated = levenshtein(corrected, associated.lower())
        logger.debug(
            "Distance to shown card (%s): %d, to associated card (%s): %d",
            playing_card, distance_shown, associated, distance_associated,
        )

        result = classify(
            distance_shown,
            distance_associated,
            threshold,
            near_miss_margin=self.near_miss_margin,
            near_miss_associated=self.near_miss_associated,
        )

        record = TrialRecord(
            typed_word=input,
            corrected_typed_word=render_sentinels(corrected),
            levenshtein_distance_threshold=f"<{threshold}",
            distance_shown_card=distance_shown,
            distance_associated_card=distance_associated,
            distance_based_eval=result.outcome,
            evaluation=result.evaluation,
            outputforpartner=partner_output(input),
        )
        logger.info(
            "Scored trial: %r -> %s (%s)",
            record.corrected_typed_word, result.outcome.value, result.evaluation.value,
        )

        notice = None
        if result.is_unclear:
            notice = build_unclear_notice(playing_card, associated, self.warning_template)
            if self.on_unclear is not None:
                self.on_unclear(notice)
        return record, notice


def score_trial(
    playing_card: str,
    associated: str,
    input: str = "",
    distance: int | None = None,
) -> TrialRecord:
    """Score one typed answer with the configured defaults."""
    return TrialScorer().score(playing_card, associated, input, distance)
