from __future__ import annotations

"""
Result documents and share payloads.

Design intent:
- Serialize a ResultRecord to the nested camelCase document callers store.
- Rebuild records from stored documents or share links for re-display.
- Treat a broken share payload as "no result", never as a crash.
"""

import base64
import binascii
import json
import logging
from typing import Any, Mapping

from pydantic import ValidationError

from sci90.internal_core.contracts import (
    FactorScoreDocument,
    ResultDocument,
    RiskLevelDocument,
)

from .engine import HIGH_FACTOR_AVERAGE, FactorResult, ResultRecord, RiskLevel

logger = logging.getLogger(__name__)

SHARE_FRAGMENT_PREFIX = "#result="


def result_to_document(record: ResultRecord) -> dict[str, Any]:
    risk = record.risk_level
    document = ResultDocument(
        total_score=record.total_score,
        total_average=record.total_average,
        positive_items=record.positive_items,
        factors={
            item.factor: FactorScoreDocument(
                score=item.score,
                average=item.average,
                item_count=item.item_count,
            )
            for item in record.factors
        },
        risk_level=RiskLevelDocument(
            level=risk.level,
            label=risk.label,
            color=risk.color,
            description=risk.description,
            advice=risk.advice,
            main_issue=risk.main_issue,
            recommend_professional=risk.recommend_professional,
            high_factor_count=risk.high_factor_count,
        ),
        timestamp=record.timestamp,
    )
    return document.model_dump(by_alias=True)


def result_from_document(document: Mapping[str, Any]) -> ResultRecord:
    """Validate a stored document and rebuild the record; raises ValidationError."""
    parsed = ResultDocument.model_validate(dict(document))
    factors = tuple(
        FactorResult(
            factor=key,
            score=value.score,
            average=value.average,
            item_count=value.item_count,
        )
        for key, value in parsed.factors.items()
    )
    risk = parsed.risk_level
    high_factor_count = risk.high_factor_count
    if high_factor_count is None:
        # Older documents did not store the count.
        high_factor_count = sum(1 for item in factors if item.average >= HIGH_FACTOR_AVERAGE)
    return ResultRecord(
        total_score=parsed.total_score,
        total_average=parsed.total_average,
        positive_items=parsed.positive_items,
        factors=factors,
        risk_level=RiskLevel(
            level=risk.level,
            label=risk.label,
            color=risk.color,
            description=risk.description,
            advice=risk.advice,
            main_issue=risk.main_issue or None,
            recommend_professional=risk.recommend_professional,
            high_factor_count=high_factor_count,
        ),
        timestamp=parsed.timestamp,
    )


def encode_share_payload(record: ResultRecord) -> str:
    raw = json.dumps(result_to_document(record), ensure_ascii=False, separators=(",", ":"))
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii")


def build_share_link(record: ResultRecord, base_url: str) -> str:
    base = str(base_url or "").split("#", 1)[0]
    return f"{base}{SHARE_FRAGMENT_PREFIX}{encode_share_payload(record)}"


def decode_share_payload(payload: str) -> ResultRecord | None:
    """
    Decode a bare payload, a `#result=` fragment or a full share link.

    Returns None when the payload is missing or cannot be decoded.
    """
    text = str(payload or "").strip()
    if SHARE_FRAGMENT_PREFIX in text:
        text = text.split(SHARE_FRAGMENT_PREFIX, 1)[1]
    if not text:
        return None

    padded = text + "=" * (-len(text) % 4)
    # Links built by browsers use the standard alphabet.
    decode = base64.b64decode if ("+" in text or "/" in text) else base64.urlsafe_b64decode
    try:
        raw = decode(padded.encode("ascii"))
        document = json.loads(raw.decode("utf-8"))
        if not isinstance(document, dict):
            raise ValueError("share payload is not a JSON object")
        return result_from_document(document)
    except (binascii.Error, UnicodeError, ValueError, ValidationError) as exc:
        logger.warning("share_payload_decode_failed error=%s", type(exc).__name__)
        return None
