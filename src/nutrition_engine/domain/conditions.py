"""Medical condition vocabulary and payload normalization."""

import json
from collections.abc import Iterable
from enum import Enum


class ConditionTag(str, Enum):
    """Self-reported medical condition, in declaration (priority) order."""

    DIABETES = "diabetes"
    HYPERTENSION = "hypertension"
    HIGH_CHOLESTEROL = "high-cholesterol"
    GOUT = "gout"
    REFLUX = "reflux"
    KIDNEY = "kidney"
    HEART = "heart"


ConditionSet = frozenset[ConditionTag]

NO_CONDITIONS: ConditionSet = frozenset()

_ALIASES: dict[str, ConditionTag] = {
    "diabetes": ConditionTag.DIABETES,
    "diabetic": ConditionTag.DIABETES,
    "diabetes mellitus": ConditionTag.DIABETES,
    "hypertension": ConditionTag.HYPERTENSION,
    "high blood pressure": ConditionTag.HYPERTENSION,
    "hipertensi": ConditionTag.HYPERTENSION,
    "darah tinggi": ConditionTag.HYPERTENSION,
    "high cholesterol": ConditionTag.HIGH_CHOLESTEROL,
    "cholesterol": ConditionTag.HIGH_CHOLESTEROL,
    "hypercholesterolemia": ConditionTag.HIGH_CHOLESTEROL,
    "kolesterol": ConditionTag.HIGH_CHOLESTEROL,
    "gout": ConditionTag.GOUT,
    "uric acid": ConditionTag.GOUT,
    "asam urat": ConditionTag.GOUT,
    "reflux": ConditionTag.REFLUX,
    "acid reflux": ConditionTag.REFLUX,
    "gerd": ConditionTag.REFLUX,
    "maag": ConditionTag.REFLUX,
    "maag/gerd": ConditionTag.REFLUX,
    "kidney": ConditionTag.KIDNEY,
    "kidney disease": ConditionTag.KIDNEY,
    "ckd": ConditionTag.KIDNEY,
    "ginjal": ConditionTag.KIDNEY,
    "heart": ConditionTag.HEART,
    "heart disease": ConditionTag.HEART,
    "cardiovascular": ConditionTag.HEART,
    "jantung": ConditionTag.HEART,
}


def parse_condition(value: object) -> ConditionTag | None:
    """Resolve one raw condition label to a tag, or None when unknown."""
    if isinstance(value, ConditionTag):
        return value
    if not isinstance(value, str):
        return None
    key = " ".join(value.replace("_", " ").replace("-", " ").lower().split())
    key = key.replace(" / ", "/")
    return _ALIASES.get(key)


def normalize_conditions(raw: object) -> ConditionSet:
    """Normalize a condition payload to a set of tags.

    Accepts None, a single tag, a list/tuple/set of labels, a comma-separated
    string, or a JSON-encoded string or list. Anything unparsable yields the
    empty set: a profile with corrupted conditions is evaluated as having no
    known conditions. Unknown labels are dropped.
    """
    if raw is None:
        return NO_CONDITIONS
    if isinstance(raw, ConditionTag):
        return frozenset({raw})
    if isinstance(raw, str):
        labels = _labels_from_text(raw)
    elif isinstance(raw, list | tuple | set | frozenset):
        labels = list(raw)
    else:
        return NO_CONDITIONS
    return frozenset(tag for tag in map(parse_condition, labels) if tag is not None)


def ordered(conditions: Iterable[ConditionTag]) -> list[ConditionTag]:
    """Return conditions in vocabulary declaration order."""
    present = set(conditions)
    return [tag for tag in ConditionTag if tag in present]


def _labels_from_text(text: str) -> list[object]:
    cleaned = text.strip()
    if not cleaned:
        return []
    try:
        decoded = json.loads(cleaned)
    except json.JSONDecodeError:
        if cleaned[0] in "[{\"":
            return []
        return _split_labels(cleaned)
    if isinstance(decoded, str):
        return _split_labels(decoded)
    if isinstance(decoded, list):
        return decoded
    return []


def _split_labels(text: str) -> list[object]:
    return [chunk for chunk in text.split(",") if chunk.strip()]
