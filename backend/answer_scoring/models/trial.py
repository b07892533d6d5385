"""Trial request/record models."""

from pydantic import BaseModel, ConfigDict, Field

from answer_scoring.config import settings
from answer_scoring.core.classifier import Evaluation, Outcome


class TrialRequest(BaseModel):
    """One typed answer to score against the shown and associated cards."""

    playing_card: str = Field(min_length=1, max_length=settings.max_label_length)
    associated: str = Field(min_length=1, max_length=settings.max_label_length)
    input: str = Field(default="", max_length=settings.max_input_length)
    distance: int | None = None  # falls back to settings.distance_threshold


class BatchTrialRequest(BaseModel):
    """Several trials scored in one call, e.g. when re-scoring exported data."""

    trials: list[TrialRequest] = Field(min_length=1)


class TrialRecord(BaseModel):
    """Scored trial as handed back to the experiment host."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    typed_word: str
    corrected_typed_word: str
    levenshtein_distance_threshold: str
    distance_shown_card: int
    distance_associated_card: int
    distance_based_eval: Outcome
    evaluation: Evaluation
    outputforpartner: str


class UnclearAnswerNotice(BaseModel):
    """Warning the host shows the respondent (never their partner)."""

    model_config = ConfigDict(frozen=True)

    shown: str
    associated: str
    message: str


class TrialResult(BaseModel):
    """Record plus the optional notice, as returned by the API."""

    record: TrialRecord
    notice: UnclearAnswerNotice | None = None
