from __future__ import annotations

"""
Answer-vector normalization.

Design intent:
- Default to the lenient behavior: anything that is not a 0..4 answer scores 0.
- Offer a strict mode that rejects incomplete or out-of-range submissions.
- Never log answer content; only counts and item ids.
"""

import logging
import math
from typing import Any, Mapping, Sequence, Union

from sci90.questionnaire import ITEM_COUNT

logger = logging.getLogger(__name__)

MIN_ANSWER = 0
MAX_ANSWER = 4

AnswerInput = Union[Sequence[Any], Mapping[Any, Any]]

_MISSING = object()


class AnswerValidationError(ValueError):
    def __init__(self, message: str, item_ids: Sequence[int] = ()):
        super().__init__(message)
        self.item_ids: list[int] = list(item_ids)


def _coerce_answer(value: Any) -> int | None:
    # bool is an int subclass; a checkbox-style True is not a Likert answer.
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return None
        number = int(value)
    else:
        return None
    if MIN_ANSWER <= number <= MAX_ANSWER:
        return number
    return None


def _coerce_item_id(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str):
        text = key.strip()
        # isdigit() also matches superscripts and other non-ASCII digits int() rejects.
        if text.isascii() and text.isdecimal():
            return int(text)
    return None


def _raw_by_item(answers: AnswerInput | None) -> tuple[list[Any], list[Any]]:
    """Return (slots for items 1..90, ignored extras)."""
    slots: list[Any] = [_MISSING] * ITEM_COUNT
    extras: list[Any] = []
    if answers is None:
        return slots, extras

    if isinstance(answers, Mapping):
        for key, value in answers.items():
            item_id = _coerce_item_id(key)
            if item_id is None or not 1 <= item_id <= ITEM_COUNT:
                extras.append(key)
                continue
            slots[item_id - 1] = value
        return slots, extras

    if isinstance(answers, (str, bytes)):
        raise TypeError("answers must be a sequence or a mapping of item id to answer")

    for index, value in enumerate(answers):
        if index >= ITEM_COUNT:
            extras.append(index + 1)
            continue
        slots[index] = value
    return slots, extras


def normalize_answers(answers: AnswerInput | None, *, strict: bool = False) -> tuple[int, ...]:
    """
    Turn a raw submission into a 90-tuple of answers in 0..4.

    Sequences are positional (index 0 is item 1); mappings are keyed by item id.
    Lenient mode substitutes 0 for missing or invalid entries and drops extras.
    Strict mode raises AnswerValidationError instead.
    """
    slots, extras = _raw_by_item(answers)

    normalized: list[int] = []
    missing: list[int] = []
    invalid: list[int] = []
    for item_id, raw in enumerate(slots, start=1):
        if raw is _MISSING or raw is None:
            missing.append(item_id)
            normalized.append(0)
            continue
        value = _coerce_answer(raw)
        if value is None:
            invalid.append(item_id)
            normalized.append(0)
            continue
        normalized.append(value)

    if strict:
        if invalid:
            raise AnswerValidationError(
                f"Answers must be integers in {MIN_ANSWER}..{MAX_ANSWER}; invalid items: {invalid}",
                invalid,
            )
        if missing:
            raise AnswerValidationError(f"Missing answers for items: {missing}", missing)
        if extras:
            raise AnswerValidationError(
                f"Expected exactly {ITEM_COUNT} answers; unexpected entries: {extras}"
            )
    elif invalid or extras:
        logger.warning(
            "answers_normalized invalid=%s missing=%s extras=%s",
            len(invalid),
            len(missing),
            len(extras),
        )

    return tuple(normalized)


def answered_count(answers: AnswerInput | None) -> int:
    """Number of items carrying a valid 0..4 answer."""
    slots, _ = _raw_by_item(answers)
    return sum(1 for raw in slots if raw is not _MISSING and _coerce_answer(raw) is not None)
