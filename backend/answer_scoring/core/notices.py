"""Respondent-facing warnings for answers that could not be attributed."""

from collections.abc import Callable

from answer_scoring.config import settings
from answer_scoring.models.trial import UnclearAnswerNotice

UnclearCallback = Callable[[UnclearAnswerNotice], None]


def build_unclear_notice(
    playing_card: str,
    associated: str,
    template: str | None = None,
) -> UnclearAnswerNotice:
    """Build the reminder naming both valid answers, in upper case."""
    shown = playing_card.upper()
    other = associated.upper()
    message = (template or settings.unclear_warning_template).format(
        shown=shown, associated=other,
    )
    return UnclearAnswerNotice(shown=shown, associated=other, message=message)
