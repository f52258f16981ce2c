"""
Scoring boundary for SCI-90.

Design intent:
- Turn one answer submission into factor scores, a risk tier and advice.
- Keep results deterministic apart from the creation timestamp.
"""
from __future__ import annotations

from .answers import AnswerValidationError, answered_count, normalize_answers
from .engine import FactorResult, ResultRecord, RiskLevel, classify_risk, compute_result, score_factors
from .interpretation import FactorInterpretation, FactorReportEntry, build_factor_report, interpret_factor
from .share import (
    build_share_link,
    decode_share_payload,
    encode_share_payload,
    result_from_document,
    result_to_document,
)

__all__ = [
    "AnswerValidationError",
    "FactorInterpretation",
    "FactorReportEntry",
    "FactorResult",
    "ResultRecord",
    "RiskLevel",
    "answered_count",
    "build_factor_report",
    "build_share_link",
    "classify_risk",
    "compute_result",
    "decode_share_payload",
    "encode_share_payload",
    "interpret_factor",
    "normalize_answers",
    "result_from_document",
    "result_to_document",
    "score_factors",
]
