"""Trial scoring endpoints."""

import time

from fastapi import APIRouter, HTTPException

from answer_scoring.api.dependencies import Scorer
from answer_scoring.config import settings
from answer_scoring.core.normalizer import (
    DISPLAY_KEYS,
    KEY_NAMES,
    SCORING_KEYS,
    render_sentinels,
)
from answer_scoring.core.trial_scorer import TrialScorer
from answer_scoring.middleware.request_id import current_request_id
from answer_scoring.models.envelope import success_response
from answer_scoring.models.trial import BatchTrialRequest, TrialRequest, TrialResult

router = APIRouter()


def _scoring_meta(start: float, **extra: object) -> dict:
    """Build standard meta dict for scoring responses."""
    elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
    return {
        "request_id": current_request_id(),
        "processing_time_ms": elapsed_ms,
        **extra,
    }


def _score(scorer: TrialScorer, body: TrialRequest) -> TrialResult:
    record, notice = scorer.score_with_notice(
        playing_card=body.playing_card,
        associated=body.associated,
        input=body.input,
        distance=body.distance,
    )
    return TrialResult(record=record, notice=notice)


@router.post("/score")
async def score_trial_endpoint(body: TrialRequest, scorer: Scorer) -> dict:
    """Score one typed answer against the shown and associated cards."""
    start = time.perf_counter()
    result = _score(scorer, body)
    return success_response(result.model_dump(), **_scoring_meta(start))


@router.post("/score-batch")
async def score_batch_endpoint(body: BatchTrialRequest, scorer: Scorer) -> dict:
    """Score several typed answers; results keep the request order."""
    if len(body.trials) > settings.max_batch_size:
        raise HTTPException(
            status_code=413,
            detail=f"Batch exceeds {settings.max_batch_size} trials",
        )
    start = time.perf_counter()
    results = [_score(scorer, trial) for trial in body.trials]
    unclear = sum(1 for r in results if r.notice is not None)
    return success_response(
        {"results": [r.model_dump() for r in results]},
        **_scoring_meta(start, total=len(results), unclear=unclear),
    )


@router.get("/keys")
async def special_keys_endpoint() -> dict:
    """List recognized key names and how each preset rewrites them."""
    return success_response({
        "key_names": list(KEY_NAMES),
        "scoring": {name: render_sentinels(SCORING_KEYS[name]) for name in KEY_NAMES},
        "display": {name: render_sentinels(DISPLAY_KEYS[name]) for name in KEY_NAMES},
    })
