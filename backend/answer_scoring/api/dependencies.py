"""API dependencies: the trial scorer used by route handlers."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from answer_scoring.config import settings
from answer_scoring.core.trial_scorer import TrialScorer


@lru_cache
def get_scorer() -> TrialScorer:
    """Shared scorer built from settings.

    Unclear notices are returned in the response body for the host to show,
    so no callback is registered here.
    """
    return TrialScorer(
        threshold=settings.distance_threshold,
        near_miss_margin=settings.near_miss_margin,
        near_miss_associated=settings.near_miss_associated,
    )


Scorer = Annotated[TrialScorer, Depends(get_scorer)]
