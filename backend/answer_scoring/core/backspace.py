"""Backspace correction over a normalized keystroke stream."""

import logging
from collections.abc import Sequence

from answer_scoring.core.exceptions import InvalidArgumentError
from answer_scoring.core.normalizer import Sentinel

logger = logging.getLogger(__name__)


def resolve_backspaces(s: str | Sequence, backspace: object = Sentinel.BACKSPACE.symbol):
    """Apply every backspace in ``s``, leftmost first.

    Each backspace removes itself and the element right before it; a
    backspace at position 0 only removes itself. Strings come back as
    strings, any other sequence comes back as a list.
    """
    if isinstance(s, str):
        if not isinstance(backspace, str) or not backspace:
            raise InvalidArgumentError(
                "backspace must be a non-empty string for string input", field="backspace"
            )
        return _resolve_str(s, backspace)
    return _resolve_sequence(list(s), backspace)


def _resolve_str(text: str, backspace: str) -> str:
    index = text.find(backspace)
    while index != -1:
        if index == 0:
            text = text[len(backspace) :]
        else:
            text = text[: index - 1] + text[index + len(backspace) :]
        index = text.find(backspace)
    logger.debug("Backspace corrections applied: %r", text)
    return text


def _resolve_sequence(items: list, backspace: object) -> list:
    while backspace in items:
        index = items.index(backspace)
        start = index - 1 if index > 0 else 0
        items = items[:start] + items[index + 1 :]
    return items
