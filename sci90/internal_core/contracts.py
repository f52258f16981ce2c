from __future__ import annotations

"""
Serialized result documents.

Design intent:
- Keep the stored/re-displayed result shape explicit and validated.
- Use camelCase keys so documents match the questionnaire front-end payloads.
"""

from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RiskLevelName = Literal["severe", "moderate", "mild", "normal"]


class _Document(BaseModel):
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)


class FactorScoreDocument(_Document):
    score: int = Field(ge=0)
    average: float = Field(ge=0.0)
    item_count: int = Field(gt=0)


class RiskLevelDocument(_Document):
    level: RiskLevelName
    label: str = ""
    color: str
    description: str
    advice: str
    main_issue: Optional[str] = None
    recommend_professional: bool
    high_factor_count: Optional[int] = Field(default=None, ge=0)


class ResultDocument(_Document):
    total_score: int = Field(ge=0)
    total_average: float = Field(ge=0.0)
    positive_items: int = Field(ge=0)
    factors: Dict[str, FactorScoreDocument] = Field(default_factory=dict)
    risk_level: RiskLevelDocument
    timestamp: str
