from __future__ import annotations

"""
SCI-90 scoring and risk classification.

Design intent:
- Map one answer submission to per-factor averages and an overall risk tier.
- Keep every threshold explicit; these values drive the advice shown to users.
- Stay pure: read static tables, never mutate them, stamp only the timestamp.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping, Sequence

from sci90.internal_core.contracts import RiskLevelName
from sci90.questionnaire import FACTOR_INDEX_MAP, ITEM_COUNT

from .answers import AnswerInput, normalize_answers

logger = logging.getLogger(__name__)

HIGH_FACTOR_AVERAGE = 3.0
POSITIVE_ITEM_THRESHOLD = 1


@dataclass(frozen=True)
class FactorResult:
    factor: str
    score: int
    average: float
    item_count: int


@dataclass(frozen=True)
class RiskLevel:
    level: RiskLevelName
    label: str
    color: str
    description: str
    advice: str
    main_issue: str | None
    recommend_professional: bool
    high_factor_count: int


@dataclass(frozen=True)
class ResultRecord:
    total_score: int
    total_average: float
    positive_items: int
    factors: tuple[FactorResult, ...]
    risk_level: RiskLevel
    timestamp: str

    def factor(self, key: str) -> FactorResult:
        for item in self.factors:
            if item.factor == key:
                return item
        raise KeyError(key)


@dataclass(frozen=True)
class _LevelText:
    label: str
    color: str
    description: str
    advice: str
    recommend_professional: bool


_LEVEL_TEXT: dict[RiskLevelName, _LevelText] = {
    "severe": _LevelText(
        label="Severe",
        color="#e74c3c",
        description="Your level of psychological distress is relatively severe.",
        advice=(
            "Please seek help from a qualified mental health professional as soon as possible "
            "for counseling or treatment. Your current state needs professional attention and support."
        ),
        recommend_professional=True,
    ),
    "moderate": _LevelText(
        label="Moderate",
        color="#e67e22",
        description="You are experiencing some psychological distress.",
        advice=(
            "Your mental state deserves attention. Consider talking with a professional counselor "
            "to learn how to better adjust and cope."
        ),
        recommend_professional=True,
    ),
    "mild": _LevelText(
        label="Mild",
        color="#f39c12",
        description="You are experiencing mild psychological distress.",
        advice=(
            "Overall your mental state is fair, but some areas need attention. Keep a regular "
            "routine, exercise and make time to relax. If the distress persists, consider seeking "
            "professional help."
        ),
        recommend_professional=False,
    ),
    "normal": _LevelText(
        label="No significant distress",
        color="#27ae60",
        description="Your mental state is good.",
        advice=(
            "Your mental state is generally good. Keep up a healthy lifestyle, take care of "
            "yourself and keep paying attention to your mental health."
        ),
        recommend_professional=False,
    ),
}


def compute_result(
    answers: AnswerInput | None,
    *,
    factor_index_map: Mapping[str, Sequence[int]] = FACTOR_INDEX_MAP,
    strict: bool = False,
    now: datetime | None = None,
) -> ResultRecord:
    """
    Score one completed submission.

    Callers resolve `strict` from SCI90_STRICT_ANSWERS at their boundary.
    Factors are scored in the iteration order of `factor_index_map`, which
    decides main-issue ties.
    """
    vector = normalize_answers(answers, strict=strict)

    total_score = sum(vector)
    total_average = total_score / ITEM_COUNT
    positive_items = sum(1 for value in vector if value > POSITIVE_ITEM_THRESHOLD)
    factors = score_factors(vector, factor_index_map)
    risk_level = classify_risk(total_score, factors)

    stamp = (now or datetime.now(timezone.utc)).isoformat()
    logger.info(
        "result_computed total=%s positive=%s level=%s high_factors=%s",
        total_score,
        positive_items,
        risk_level.level,
        risk_level.high_factor_count,
    )
    return ResultRecord(
        total_score=total_score,
        total_average=total_average,
        positive_items=positive_items,
        factors=factors,
        risk_level=risk_level,
        timestamp=stamp,
    )


def score_factors(
    vector: Sequence[int],
    factor_index_map: Mapping[str, Sequence[int]] = FACTOR_INDEX_MAP,
) -> tuple[FactorResult, ...]:
    results: list[FactorResult] = []
    for factor_key, item_ids in factor_index_map.items():
        score = sum(_answer_at(vector, item_id) for item_id in item_ids)
        results.append(
            FactorResult(
                factor=factor_key,
                score=score,
                average=score / len(item_ids),
                item_count=len(item_ids),
            )
        )
    return tuple(results)


def classify_risk(total_score: int, factors: Sequence[FactorResult]) -> RiskLevel:
    max_average = 0.0
    main_issue: str | None = None
    high_factor_count = 0
    for item in factors:
        if item.average >= HIGH_FACTOR_AVERAGE:
            high_factor_count += 1
            # Strictly greater: the first factor wins a tie.
            if item.average > max_average:
                max_average = item.average
                main_issue = item.factor

    level: RiskLevelName
    if total_score >= 250 or high_factor_count >= 3:
        level = "severe"
    elif total_score >= 200 or high_factor_count >= 2:
        level = "moderate"
    elif total_score >= 160 or high_factor_count >= 1:
        level = "mild"
    else:
        level = "normal"

    text = _LEVEL_TEXT[level]
    return RiskLevel(
        level=level,
        label=text.label,
        color=text.color,
        description=text.description,
        advice=text.advice,
        main_issue=main_issue,
        recommend_professional=text.recommend_professional,
        high_factor_count=high_factor_count,
    )


def _answer_at(vector: Sequence[int], item_id: int) -> int:
    index = item_id - 1
    if 0 <= index < len(vector):
        return vector[index]
    return 0
