import base64
import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from sci90.scoring.engine import compute_result
from sci90.scoring.share import (
    build_share_link,
    decode_share_payload,
    encode_share_payload,
    result_from_document,
    result_to_document,
)

_STAMP = datetime(2025, 5, 1, 8, 30, tzinfo=timezone.utc)


def _sample_record():
    vector = [0] * 90
    for item_id in (11, 24, 63, 67, 74, 81):
        vector[item_id - 1] = 4
    return compute_result(vector, now=_STAMP)


def test_result_document_uses_camel_case_plain_values() -> None:
    document = result_to_document(_sample_record())
    assert document["totalScore"] == 24
    assert document["positiveItems"] == 6
    assert document["factors"]["hostility"] == {"score": 24, "average": 4.0, "itemCount": 6}
    risk = document["riskLevel"]
    assert risk["level"] == "mild"
    assert risk["mainIssue"] == "hostility"
    assert risk["recommendProfessional"] is False
    assert risk["highFactorCount"] == 1
    assert document["timestamp"] == _STAMP.isoformat()
    json.dumps(document)


def test_result_document_rebuilds_the_same_record() -> None:
    record = _sample_record()
    assert result_from_document(result_to_document(record)) == record


def test_result_from_legacy_document_derives_high_factor_count() -> None:
    document = result_to_document(_sample_record())
    del document["riskLevel"]["highFactorCount"]
    del document["riskLevel"]["label"]
    document["riskLevel"]["mainIssue"] = ""
    record = result_from_document(document)
    assert record.risk_level.high_factor_count == 1
    assert record.risk_level.main_issue is None


def test_result_from_document_rejects_unknown_level() -> None:
    document = result_to_document(_sample_record())
    document["riskLevel"]["level"] = "catastrophic"
    with pytest.raises(ValidationError):
        result_from_document(document)


def test_share_link_decodes_back_to_record() -> None:
    record = _sample_record()
    link = build_share_link(record, "https://example.test/result#old")
    assert link.startswith("https://example.test/result#result=")
    assert decode_share_payload(link) == record
    assert decode_share_payload(encode_share_payload(record)) == record


def test_share_payload_accepts_standard_base64() -> None:
    record = _sample_record()
    raw = json.dumps(result_to_document(record)).encode("utf-8")
    payload = base64.b64encode(raw).decode("ascii")
    assert decode_share_payload(f"#result={payload}") == record


@pytest.mark.parametrize("payload", ["", "#result=", "not base64 at all!", base64.b64encode(b"[1, 2]").decode()])
def test_invalid_share_payload_returns_none(payload: str) -> None:
    assert decode_share_payload(payload) is None
