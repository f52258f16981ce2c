from __future__ import annotations

"""
Stateless HTTP surface for the SCI-90 scoring engine.

Design intent:
- Keep API orchestration thin; scoring logic lives in sci90.scoring.
- Own no tokens and no storage; callers persist the returned documents.
- Map domain validation failures to predictable 400 responses.
"""

import logging
from typing import Any, Union

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from sci90.internal_core.config import load_config
from sci90.questionnaire import FACTORS, ITEMS
from sci90.scoring import (
    AnswerValidationError,
    FactorInterpretation,
    ResultRecord,
    answered_count,
    build_factor_report,
    build_share_link,
    compute_result,
    decode_share_payload,
    interpret_factor,
    result_to_document,
)


class QuestionItem(BaseModel):
    id: int
    text: str
    factor: str


class QuestionsResponse(BaseModel):
    total: int
    items: list[QuestionItem]


class FactorItem(BaseModel):
    key: str
    label: str
    label_zh: str
    item_ids: list[int]


class FactorsResponse(BaseModel):
    factors: list[FactorItem]


class ScoreRequest(BaseModel):
    answers: Union[list[Any], dict[str, Any]] = Field(default_factory=list)
    strict: bool | None = None


class InterpretationPayload(BaseModel):
    factor: str | None
    description: str
    high_score: str
    suggestions: list[str]
    level: str
    status: str


class FactorReportItem(BaseModel):
    factor: str
    label: str
    label_zh: str
    score: int
    average: float
    item_count: int
    interpretation: InterpretationPayload


class ScoreResponse(BaseModel):
    result: dict[str, Any]
    report: list[FactorReportItem] = Field(default_factory=list)
    answered: int
    share_link: str | None = Field(default=None, serialization_alias="shareLink")


class ShareDecodeRequest(BaseModel):
    payload: str = Field(min_length=1)


class ShareDecodeResponse(BaseModel):
    result: dict[str, Any]
    report: list[FactorReportItem] = Field(default_factory=list)


config = load_config()
logging.basicConfig(level=getattr(logging, config.SCI90_LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)

app = FastAPI(title="sci90 scoring service")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.SCI90_CORS_ORIGINS),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


def _interpretation_payload(item: FactorInterpretation) -> InterpretationPayload:
    return InterpretationPayload(
        factor=item.factor,
        description=item.description,
        high_score=item.high_score,
        suggestions=list(item.suggestions),
        level=item.level,
        status=item.status,
    )


def _report_payload(record: ResultRecord) -> list[FactorReportItem]:
    return [
        FactorReportItem(
            factor=entry.factor,
            label=entry.label,
            label_zh=entry.label_zh,
            score=entry.score,
            average=entry.average,
            item_count=entry.item_count,
            interpretation=_interpretation_payload(entry.interpretation),
        )
        for entry in build_factor_report(record)
    ]


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/questions", response_model=QuestionsResponse)
async def questions() -> QuestionsResponse:
    return QuestionsResponse(
        total=len(ITEMS),
        items=[QuestionItem(id=item.item_id, text=item.text, factor=item.factor) for item in ITEMS],
    )


@app.get("/factors", response_model=FactorsResponse)
async def factors() -> FactorsResponse:
    return FactorsResponse(
        factors=[
            FactorItem(
                key=factor.key,
                label=factor.label,
                label_zh=factor.label_zh,
                item_ids=list(factor.item_ids),
            )
            for factor in FACTORS
        ]
    )


@app.get("/factors/{name}/interpretation", response_model=InterpretationPayload)
async def factor_interpretation(name: str, average: float = Query(default=0.0, ge=0.0, le=4.0)) -> InterpretationPayload:
    return _interpretation_payload(interpret_factor(name, average))


@app.post("/score", response_model=ScoreResponse)
async def score(payload: ScoreRequest) -> ScoreResponse:
    try:
        strict = config.SCI90_STRICT_ANSWERS if payload.strict is None else payload.strict
        record = compute_result(payload.answers, strict=strict)
    except AnswerValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    share_link = None
    if config.share_links_enabled():
        share_link = build_share_link(record, config.SCI90_SHARE_BASE_URL)
    return ScoreResponse(
        result=result_to_document(record),
        report=_report_payload(record),
        answered=answered_count(payload.answers),
        share_link=share_link,
    )


@app.post("/share/decode", response_model=ShareDecodeResponse)
async def share_decode(payload: ShareDecodeRequest) -> ShareDecodeResponse:
    record = decode_share_payload(payload.payload)
    if record is None:
        raise HTTPException(status_code=400, detail="Invalid share payload.")
    return ShareDecodeResponse(result=result_to_document(record), report=_report_payload(record))
