"""Meal-analysis confidence: qualitative level and the reasons shown to the user."""

from __future__ import annotations

from app.engine.models import Level

HIGH_THRESHOLD = 0.8
MEDIUM_THRESHOLD = 0.5

# Photo reason reads "clear" only at or above this score (not the 0.8 band).
CLEAR_PHOTO_THRESHOLD = 0.85

MAX_REASONS = 2

_RECOGNIZABILITY: dict[Level, str] = {
    Level.high: "Recognizable, common food items detected",
    Level.medium: "Some portions or ingredients are estimated",
    Level.low: "Complex or obscured meal — rough estimate",
}

_TITLES: dict[Level, str] = {
    Level.high: "High Confidence",
    Level.medium: "Good Estimate",
    Level.low: "Rough Estimate",
}


def classify(confidence: float) -> Level:
    """Map a 0-1 score to a level. Lower bounds are inclusive."""
    if confidence >= HIGH_THRESHOLD:
        return Level.high
    if confidence >= MEDIUM_THRESHOLD:
        return Level.medium
    return Level.low


def explain(confidence: float, has_photo: bool, has_description: bool) -> list[str]:
    """Return at most two reasons, most relevant first.

    Order: photo quality, then information richness, then recognizability.
    """
    reasons: list[str] = []

    if has_photo and confidence >= CLEAR_PHOTO_THRESHOLD:
        reasons.append("Clear, well-lit photo of the meal")
    elif has_photo:
        reasons.append("Photo quality or angle could be improved")
    else:
        reasons.append("No photo provided — estimation is text-based only")

    if has_description:
        reasons.append("Description helps identify ingredients")
    elif not has_photo:
        reasons.append("Limited information provided")

    reasons.append(_RECOGNIZABILITY[classify(confidence)])

    return reasons[:MAX_REASONS]


def title(confidence: float) -> str:
    return _TITLES[classify(confidence)]
