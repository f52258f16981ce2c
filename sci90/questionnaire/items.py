from __future__ import annotations

"""
SCI-90 item bank and factor partition.

Design intent:
- Keep the 90 items and 9 factors as immutable import-time constants.
- Declare factors in one canonical order; scoring iterates in this order.
- Validate the factor partition once so a broken table fails startup.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

ITEM_COUNT = 90


class QuestionnaireConfigError(RuntimeError):
    """Static questionnaire tables are inconsistent."""


@dataclass(frozen=True)
class Factor:
    key: str
    label: str
    label_zh: str
    item_ids: tuple[int, ...]


@dataclass(frozen=True)
class Item:
    item_id: int
    text: str
    factor: str


# Declaration order is the canonical iteration order (main-issue tie-break).
FACTORS: tuple[Factor, ...] = (
    Factor("somatization", "Somatization", "躯体化", (1, 4, 12, 27, 40, 42, 48, 49, 52, 53, 56, 58)),
    Factor("obsessive_compulsive", "Obsessive-Compulsive", "强迫症状", (3, 9, 10, 28, 38, 45, 46, 51, 55, 65)),
    Factor("interpersonal_sensitivity", "Interpersonal Sensitivity", "人际关系敏感", (6, 21, 34, 36, 37, 41, 61, 69, 73)),
    # Sleep and appetite items (19, 44, 59, 60, 64, 66, 89) are scored with depression.
    Factor(
        "depression",
        "Depression",
        "抑郁",
        (5, 14, 15, 19, 20, 22, 26, 29, 30, 31, 32, 44, 54, 59, 60, 64, 66, 71, 79, 89),
    ),
    Factor("anxiety", "Anxiety", "焦虑", (2, 17, 23, 33, 39, 57, 72, 78, 80, 86)),
    Factor("hostility", "Hostility", "敌对", (11, 24, 63, 67, 74, 81)),
    Factor("phobic_anxiety", "Phobic Anxiety", "恐怖", (13, 25, 47, 50, 70, 75, 82)),
    Factor("paranoid_ideation", "Paranoid Ideation", "偏执", (8, 18, 43, 68, 76, 83)),
    Factor("psychoticism", "Psychoticism", "精神病性", (7, 16, 35, 62, 77, 84, 85, 87, 88, 90)),
)

FACTOR_ORDER: tuple[str, ...] = tuple(factor.key for factor in FACTORS)

_ITEM_TEXTS: tuple[str, ...] = (
    "Headaches",
    "Nervousness or shakiness inside",
    "Repeated unpleasant thoughts that won't leave your mind",
    "Faintness or dizziness",
    "Loss of sexual interest or pleasure",
    "Feeling critical of others",
    "The idea that someone else can control your thoughts",
    "Feeling others are to blame for most of your troubles",
    "Trouble remembering things",
    "Worried about sloppiness or carelessness",
    "Feeling easily annoyed or irritated",
    "Pains in heart or chest",
    "Feeling afraid in open spaces or on the streets",
    "Feeling low in energy or slowed down",
    "Thoughts of ending your life",
    "Hearing voices that other people do not hear",
    "Trembling",
    "Feeling that most people cannot be trusted",
    "Poor appetite",
    "Crying easily",
    "Feeling shy or uneasy with the opposite sex",
    "Feelings of being trapped or caught",
    "Suddenly scared for no reason",
    "Temper outbursts that you could not control",
    "Feeling afraid to go out of your house alone",
    "Blaming yourself for things",
    "Pains in lower back",
    "Feeling blocked in getting things done",
    "Feeling lonely",
    "Feeling blue",
    "Worrying too much about things",
    "Feeling no interest in things",
    "Feeling fearful",
    "Your feelings being easily hurt",
    "Other people being aware of your private thoughts",
    "Feeling others do not understand you or are unsympathetic",
    "Feeling that people are unfriendly or dislike you",
    "Having to do things very slowly to insure correctness",
    "Heart pounding or racing",
    "Nausea or upset stomach",
    "Feeling inferior to others",
    "Soreness of your muscles",
    "Feeling that you are watched or talked about by others",
    "Trouble falling asleep",
    "Having to check and double-check what you do",
    "Difficulty making decisions",
    "Feeling afraid to travel on buses, subways, or trains",
    "Trouble getting your breath",
    "Hot or cold spells",
    "Having to avoid certain things, places, or activities because they frighten you",
    "Your mind going blank",
    "Numbness or tingling in parts of your body",
    "A lump in your throat",
    "Feeling hopeless about the future",
    "Trouble concentrating",
    "Feeling weak in parts of your body",
    "Feeling tense or keyed up",
    "Heavy feelings in your arms or legs",
    "Thoughts of death or dying",
    "Overeating",
    "Feeling uneasy when people are watching or talking about you",
    "Having thoughts that are not your own",
    "Having urges to beat, injure, or harm someone",
    "Awakening in the early morning",
    "Having to repeat the same actions such as touching, counting, or washing",
    "Sleep that is restless or disturbed",
    "Having urges to break or smash things",
    "Having ideas or beliefs that others do not share",
    "Feeling very self-conscious with others",
    "Feeling uneasy in crowds, such as shopping or at a movie",
    "Feeling everything is an effort",
    "Spells of terror or panic",
    "Feeling uncomfortable about eating or drinking in public",
    "Getting into frequent arguments",
    "Feeling nervous when you are left alone",
    "Others not giving you proper credit for your achievements",
    "Feeling lonely even when you are with people",
    "Feeling so restless you couldn't sit still",
    "Feelings of worthlessness",
    "Feeling that familiar things are strange or unreal",
    "Shouting or throwing things",
    "Feeling afraid you will faint in public",
    "Feeling that people will take advantage of you if you let them",
    "Having thoughts about sex that bother you a lot",
    "The idea that you should be punished for your sins",
    "Feeling pushed to get things done",
    "The idea that something serious is wrong with your body",
    "Never feeling close to another person",
    "Feelings of guilt",
    "The idea that something is wrong with your mind",
)


def validate_factor_index_map(
    factor_index_map: Mapping[str, Sequence[int]],
    *,
    item_count: int = ITEM_COUNT,
) -> None:
    """
    Check that the factor item sets partition 1..item_count.

    Raises QuestionnaireConfigError on empty factors, out-of-range ids,
    overlaps or gaps.
    """
    seen: dict[int, str] = {}
    for factor_key, item_ids in factor_index_map.items():
        if not item_ids:
            raise QuestionnaireConfigError(f"Factor '{factor_key}' has no items.")
        for item_id in item_ids:
            if not isinstance(item_id, int) or not 1 <= item_id <= item_count:
                raise QuestionnaireConfigError(
                    f"Factor '{factor_key}' references invalid item id {item_id!r}."
                )
            owner = seen.get(item_id)
            if owner is not None:
                raise QuestionnaireConfigError(
                    f"Item {item_id} belongs to both '{owner}' and '{factor_key}'."
                )
            seen[item_id] = factor_key

    missing = sorted(set(range(1, item_count + 1)) - set(seen))
    if missing:
        raise QuestionnaireConfigError(f"Items without a factor: {missing}.")


def _build_items() -> tuple[Item, ...]:
    if len(_ITEM_TEXTS) != ITEM_COUNT:
        raise QuestionnaireConfigError(
            f"Expected {ITEM_COUNT} item texts, found {len(_ITEM_TEXTS)}."
        )
    owner = {item_id: factor.key for factor in FACTORS for item_id in factor.item_ids}
    return tuple(
        Item(item_id=index, text=text, factor=owner[index])
        for index, text in enumerate(_ITEM_TEXTS, start=1)
    )


FACTOR_INDEX_MAP: Mapping[str, tuple[int, ...]] = MappingProxyType(
    {factor.key: factor.item_ids for factor in FACTORS}
)
validate_factor_index_map(FACTOR_INDEX_MAP)

ITEMS: tuple[Item, ...] = _build_items()

_FACTOR_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        alias: factor.key
        for factor in FACTORS
        for alias in (factor.key, factor.label.lower(), factor.label_zh)
    }
)
_FACTORS_BY_KEY: Mapping[str, Factor] = MappingProxyType({factor.key: factor for factor in FACTORS})


def get_item(item_id: int) -> Item:
    if not 1 <= item_id <= ITEM_COUNT:
        raise KeyError(item_id)
    return ITEMS[item_id - 1]


def get_factor(key: str) -> Factor:
    return _FACTORS_BY_KEY[key]


def resolve_factor(name: str) -> str | None:
    """Map a factor key, English label or Chinese label to its canonical key."""
    normalized = str(name or "").strip()
    if not normalized:
        return None
    return _FACTOR_ALIASES.get(normalized) or _FACTOR_ALIASES.get(normalized.lower())
