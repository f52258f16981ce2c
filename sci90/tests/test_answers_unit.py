import logging

import pytest

from sci90.scoring.answers import AnswerValidationError, answered_count, normalize_answers


def test_normalize_pads_short_sequences_with_zero() -> None:
    vector = normalize_answers([4, 3, 2])
    assert len(vector) == 90
    assert vector[:3] == (4, 3, 2)
    assert set(vector[3:]) == {0}


def test_normalize_substitutes_zero_for_invalid_entries() -> None:
    raw = [None, -1, 5, 2.5, "3", True, float("nan"), 3.0, 4] + [1] * 81
    vector = normalize_answers(raw)
    assert vector[:9] == (0, 0, 0, 0, 0, 0, 0, 3, 4)
    assert vector[9:] == (1,) * 81


def test_normalize_ignores_entries_beyond_ninety(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="sci90.scoring.answers"):
        vector = normalize_answers([2] * 95)
    assert vector == (2,) * 90
    assert "extras=5" in caplog.text


def test_normalize_accepts_item_id_mapping() -> None:
    vector = normalize_answers({1: 4, "90": 3, "x": 2, 0: 1, 91: 1})
    assert vector[0] == 4
    assert vector[89] == 3
    assert sum(vector) == 7


def test_normalize_none_is_all_zero() -> None:
    assert normalize_answers(None) == (0,) * 90


def test_normalize_rejects_string_input() -> None:
    with pytest.raises(TypeError):
        normalize_answers("1234")


def test_strict_mode_rejects_out_of_range_answers() -> None:
    raw = [1] * 90
    raw[9] = 7
    with pytest.raises(AnswerValidationError) as excinfo:
        normalize_answers(raw, strict=True)
    assert excinfo.value.item_ids == [10]


def test_strict_mode_requires_every_item() -> None:
    with pytest.raises(AnswerValidationError) as excinfo:
        normalize_answers([1] * 88, strict=True)
    assert excinfo.value.item_ids == [89, 90]


def test_strict_mode_rejects_extra_entries() -> None:
    with pytest.raises(AnswerValidationError, match="exactly 90"):
        normalize_answers([1] * 91, strict=True)


def test_strict_mode_accepts_complete_vector() -> None:
    assert normalize_answers([0, 1, 2, 3, 4] * 18, strict=True) == (0, 1, 2, 3, 4) * 18


def test_answered_count_counts_valid_present_answers() -> None:
    assert answered_count([0, 1, None, 9, 4]) == 3
    assert answered_count({"1": 2, "2": None, "3": 0}) == 2
    assert answered_count(None) == 0


def test_normalize_ignores_non_ascii_digit_item_ids(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="sci90.scoring.answers"):
        vector = normalize_answers({"²": 1, "١": 2, "1": 4})
    assert vector[0] == 4
    assert sum(vector) == 4
    assert "extras=2" in caplog.text
    assert answered_count({"²": 1, "1": 4}) == 1


def test_strict_mode_rejects_non_ascii_digit_item_ids() -> None:
    answers = {str(item_id): 1 for item_id in range(1, 91)}
    answers["²"] = 1
    with pytest.raises(AnswerValidationError, match="exactly 90"):
        normalize_answers(answers, strict=True)
