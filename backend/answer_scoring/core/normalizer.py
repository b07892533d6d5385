"""Keystroke normalization: submit-key trimming and special-key collapsing.

Raw captures spell out the names of pressed special keys inline
("ShiftHerzBackspacez Enter"). Special keys are collapsed
into sentinel code points from the Unicode private-use area so that a typed
digit is never confused with a key press.
"""

import logging
from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType

from answer_scoring.core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

_SENTINEL_BASE = 0xE000
_SUBMIT_TOKEN = "enter"


class Sentinel(IntEnum):
    """Key classes recorded in a normalized stream."""

    SHIFT = 1
    CAPSLOCK = 2
    OTHER_SPECIAL = 3
    BACKSPACE = 4

    @property
    def symbol(self) -> str:
        """Code point carrying this sentinel inside a normalized string."""
        return chr(_SENTINEL_BASE + self.value)


# Order matters: names are replaced one after another in this sequence.
KEY_NAMES: tuple[str, ...] = (
    "tab",
    "alt",
    "meta",
    "arrowleft",
    "arrowright",
    "arrowdown",
    "arrowup",
    "enter",
    "process",
    "delete",
    "dead",
    "shift",
    "capslock",
    "backspace",
)

KeyMapping = Mapping[str, str]

SCORING_KEYS: KeyMapping = MappingProxyType(
    {
        **{name: Sentinel.OTHER_SPECIAL.symbol for name in KEY_NAMES},
        "shift": Sentinel.SHIFT.symbol,
        "capslock": Sentinel.CAPSLOCK.symbol,
        "backspace": Sentinel.BACKSPACE.symbol,
    }
)

DISPLAY_KEYS: KeyMapping = MappingProxyType(
    {
        **{name: "" for name in KEY_NAMES},
        "backspace": Sentinel.BACKSPACE.symbol,
    }
)

_SYMBOL_TO_DIGIT = {ord(s.symbol): str(s.value) for s in Sentinel}


def normalize_ending_and_case(raw: str) -> str:
    """Lowercase the capture and strip trailing spaces and submit tokens."""
    text = raw.lower()
    while text:
        if text.endswith(" "):
            text = text[:-1]
        elif text.endswith(_SUBMIT_TOKEN):
            text = text[: max(len(text) - len(_SUBMIT_TOKEN), 0)]
        else:
            break
    logger.debug("Ending deleted: %r -> %r", raw, text)
    return text


def replace_special_tokens(s: str, mapping: KeyMapping) -> str:
    """Replace every spelled-out key name with the symbol from ``mapping``."""
    missing = [name for name in KEY_NAMES if name not in mapping]
    if missing:
        raise InvalidArgumentError(
            f"Key mapping is missing entries for: {', '.join(missing)}",
            field="mapping",
        )
    for name in KEY_NAMES:
        s = s.replace(name, mapping[name])
    logger.debug("Special characters replaced: %r", s)
    return s


def render_sentinels(s: str) -> str:
    """Render sentinel code points as their digit codes, e.g. ``"1herz"``."""
    return s.translate(_SYMBOL_TO_DIGIT)
