import pytest

from sci90.questionnaire import (
    FACTOR_INDEX_MAP,
    FACTOR_ORDER,
    ITEM_COUNT,
    ITEMS,
    QuestionnaireConfigError,
    get_item,
    resolve_factor,
    validate_factor_index_map,
)


def test_factor_index_map_partitions_all_items() -> None:
    all_ids = [item_id for ids in FACTOR_INDEX_MAP.values() for item_id in ids]
    assert len(all_ids) == ITEM_COUNT
    assert sorted(all_ids) == list(range(1, ITEM_COUNT + 1))
    assert len(FACTOR_INDEX_MAP) == 9


def test_factor_order_is_declaration_order() -> None:
    assert FACTOR_ORDER == (
        "somatization",
        "obsessive_compulsive",
        "interpersonal_sensitivity",
        "depression",
        "anxiety",
        "hostility",
        "phobic_anxiety",
        "paranoid_ideation",
        "psychoticism",
    )
    assert tuple(FACTOR_INDEX_MAP) == FACTOR_ORDER


def test_factor_index_map_is_read_only() -> None:
    with pytest.raises(TypeError):
        FACTOR_INDEX_MAP["somatization"] = (1,)  # type: ignore[index]


def test_items_carry_their_factor() -> None:
    assert len(ITEMS) == ITEM_COUNT
    assert get_item(1).text == "Headaches"
    assert get_item(1).factor == "somatization"
    assert get_item(15).factor == "depression"
    assert get_item(44).factor == "depression"
    assert get_item(90).factor == "psychoticism"
    for item in ITEMS:
        assert item.item_id in FACTOR_INDEX_MAP[item.factor]


def test_get_item_rejects_out_of_range_ids() -> None:
    with pytest.raises(KeyError):
        get_item(0)
    with pytest.raises(KeyError):
        get_item(91)


def test_resolve_factor_accepts_key_and_labels() -> None:
    assert resolve_factor("depression") == "depression"
    assert resolve_factor("Obsessive-Compulsive") == "obsessive_compulsive"
    assert resolve_factor("  phobic anxiety ") == "phobic_anxiety"
    assert resolve_factor("抑郁") == "depression"
    assert resolve_factor("精神病性") == "psychoticism"
    assert resolve_factor("other") is None
    assert resolve_factor("") is None


def test_validate_factor_index_map_rejects_overlap() -> None:
    with pytest.raises(QuestionnaireConfigError, match="belongs to both"):
        validate_factor_index_map({"a": (1, 2), "b": (2, 3)}, item_count=3)


def test_validate_factor_index_map_rejects_gap() -> None:
    with pytest.raises(QuestionnaireConfigError, match="without a factor"):
        validate_factor_index_map({"a": (1,), "b": (3,)}, item_count=3)


def test_validate_factor_index_map_rejects_empty_factor() -> None:
    with pytest.raises(QuestionnaireConfigError, match="has no items"):
        validate_factor_index_map({"a": (1, 2, 3), "b": ()}, item_count=3)


def test_validate_factor_index_map_rejects_out_of_range_id() -> None:
    with pytest.raises(QuestionnaireConfigError, match="invalid item id"):
        validate_factor_index_map({"a": (1, 2, 4)}, item_count=3)
