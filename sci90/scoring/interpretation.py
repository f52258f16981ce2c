from __future__ import annotations

"""
Per-factor interpretation text.

Design intent:
- Static, user-facing explanations keyed by canonical factor.
- Total over any input: unknown names get the generic interpretation.
- Use supportive, non-diagnostic language.
"""

from dataclasses import dataclass
from typing import Literal

from sci90.questionnaire import get_factor, resolve_factor

from .engine import ResultRecord

FactorLevel = Literal["elevated", "moderate", "normal"]
FactorStatus = Literal["warning", "attention", "normal"]


@dataclass(frozen=True)
class FactorInterpretation:
    factor: str | None
    description: str
    high_score: str
    suggestions: tuple[str, ...]
    level: FactorLevel
    status: FactorStatus


@dataclass(frozen=True)
class FactorReportEntry:
    factor: str
    label: str
    label_zh: str
    score: int
    average: float
    item_count: int
    interpretation: FactorInterpretation


@dataclass(frozen=True)
class _FactorText:
    description: str
    high_score: str
    suggestions: tuple[str, ...]


_FACTOR_TEXT: dict[str, _FactorText] = {
    "somatization": _FactorText(
        description=(
            "Reflects subjective bodily discomfort, including cardiovascular, gastrointestinal "
            "and respiratory complaints."
        ),
        high_score=(
            "You may have many physical complaints such as headaches, stomach aches or chest "
            "tightness, which can be related to psychological stress."
        ),
        suggestions=(
            "Try relaxation training such as deep breathing or meditation",
            "Keep up regular exercise",
            "If symptoms persist, get a medical check-up to rule out physical illness",
        ),
    ),
    "obsessive_compulsive": _FactorText(
        description=(
            "Thoughts, impulses and actions that are experienced as unnecessary yet hard to stop."
        ),
        high_score=(
            "You may have obsessive thoughts or behaviors, such as repeated checking or "
            "repeatedly going over certain problems."
        ),
        suggestions=(
            "Recognize and accept your obsessive tendencies",
            "Practice delaying compulsive actions",
            "Shift your attention to reduce compulsive urges",
            "If severe, seek professional cognitive behavioral therapy",
        ),
    ),
    "interpersonal_sensitivity": _FactorText(
        description=(
            "Feelings of unease and inferiority in social interaction, especially when comparing "
            "yourself with others."
        ),
        high_score=(
            "You may lack confidence with others, care a lot about how they judge you and feel "
            "tense in social situations."
        ),
        suggestions=(
            "Build self-acceptance and self-affirmation",
            "Learn effective communication skills",
            "Practice social contact in small, comfortable settings",
            "Remember that other people feel nervous too",
        ),
    ),
    "depression": _FactorText(
        description=(
            "Low mood, pessimism, loss of interest, and related sleep and appetite changes."
        ),
        high_score=(
            "You may be experiencing low mood, loss of interest or hopelessness, which deserve "
            "special attention."
        ),
        suggestions=(
            "Keep a regular sleep schedule and exercise",
            "Try doing things you used to enjoy",
            "Talk with someone you trust",
            "If symptoms last more than two weeks, seeking professional help is strongly advised",
        ),
    ),
    "anxiety": _FactorText(
        description="Restlessness, nervousness, tension and the bodily signs that come with them.",
        high_score=(
            "You may have noticeable anxiety symptoms such as tension, palpitations or constant worry."
        ),
        suggestions=(
            "Learn relaxation techniques such as progressive muscle relaxation",
            "Practice mindfulness meditation",
            "Identify and challenge anxious thoughts",
            "Avoid too much caffeine",
        ),
    ),
    "hostility": _FactorText(
        description="Hostility expressed through thoughts, feelings and behavior.",
        high_score=(
            "You may be prone to hostile feelings, shown as irritability, temper outbursts or "
            "even aggressive urges."
        ),
        suggestions=(
            "Learn to recognize early signs of anger",
            "Find healthy ways to express emotions",
            "Release tension through physical activity",
            "Practice calming techniques such as deep breathing",
        ),
    ),
    "phobic_anxiety": _FactorText(
        description="Fear and avoidance of particular places, objects or social situations.",
        high_score=(
            "You may feel marked fear of, and avoid, certain situations or objects."
        ),
        suggestions=(
            "Gradually expose yourself to feared situations (systematic desensitization)",
            "Use relaxation skills to cope with fear",
            "Write down and examine fearful thoughts",
            "If severe, seek professional treatment",
        ),
    ),
    "paranoid_ideation": _FactorText(
        description="Projective thinking, suspiciousness, mistrust and feelings of being targeted.",
        high_score=(
            "You may tend to be suspicious, distrust others or feel singled out."
        ),
        suggestions=(
            "Check whether your suspicions are supported by evidence",
            "Practice seeing things from other people's point of view",
            "Build basic trust in others",
            "Discuss your thoughts with a trusted friend",
        ),
    ),
    "psychoticism": _FactorText(
        description=(
            "A range of unusual experiences and thoughts, from mild withdrawal to more acute symptoms."
        ),
        high_score=(
            "You may have some unusual thought experiences or perceptions that warrant a "
            "professional assessment."
        ),
        suggestions=(
            "Keep a regular daily routine",
            "Avoid psychoactive substances",
            "Reduce stress where you can",
            "Seek help from a psychiatrist",
        ),
    ),
}

_GENERIC_TEXT = _FactorText(
    description="One of the dimensions of the mental health assessment.",
    high_score="This dimension scored relatively high and deserves attention.",
    suggestions=(
        "Maintain healthy daily habits",
        "Make time for self-care and adjustment",
        "Seek professional help when needed",
    ),
)


def factor_level(average_score: float) -> tuple[FactorLevel, FactorStatus]:
    if average_score >= 3:
        return "elevated", "warning"
    if average_score >= 2:
        return "moderate", "attention"
    return "normal", "normal"


def interpret_factor(factor_name: str, average_score: float) -> FactorInterpretation:
    key = resolve_factor(factor_name) if isinstance(factor_name, str) else None
    text = _FACTOR_TEXT.get(key, _GENERIC_TEXT) if key else _GENERIC_TEXT
    level, status = factor_level(average_score)
    return FactorInterpretation(
        factor=key,
        description=text.description,
        high_score=text.high_score,
        suggestions=text.suggestions,
        level=level,
        status=status,
    )


def build_factor_report(record: ResultRecord) -> list[FactorReportEntry]:
    entries: list[FactorReportEntry] = []
    for item in record.factors:
        key = resolve_factor(item.factor)
        factor = get_factor(key) if key else None
        entries.append(
            FactorReportEntry(
                factor=item.factor,
                label=factor.label if factor else item.factor,
                label_zh=factor.label_zh if factor else "",
                score=item.score,
                average=item.average,
                item_count=item.item_count,
                interpretation=interpret_factor(item.factor, item.average),
            )
        )
    return entries
