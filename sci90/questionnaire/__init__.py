"""
Static questionnaire tables for SCI-90.

Design intent:
- Define the 90 items and the factor partition once, at import time.
- Fail process startup when the tables are inconsistent.
"""
from __future__ import annotations

from .items import (
    FACTOR_INDEX_MAP,
    FACTOR_ORDER,
    FACTORS,
    ITEM_COUNT,
    ITEMS,
    Factor,
    Item,
    QuestionnaireConfigError,
    get_factor,
    get_item,
    resolve_factor,
    validate_factor_index_map,
)

__all__ = [
    "FACTOR_INDEX_MAP",
    "FACTOR_ORDER",
    "FACTORS",
    "ITEM_COUNT",
    "ITEMS",
    "Factor",
    "Item",
    "QuestionnaireConfigError",
    "get_factor",
    "get_item",
    "resolve_factor",
    "validate_factor_index_map",
]
