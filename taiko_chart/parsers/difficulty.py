"""Classify free-text difficulty labels into tiers."""

from taiko_chart.schemas.normalized import DifficultyTier

DIFFICULTY_LABEL_MAP = {
    "easy": DifficultyTier.EASY,
    "normal": DifficultyTier.NORMAL,
    "hard": DifficultyTier.HARD,
    "edit": DifficultyTier.EDIT,
}

# Every label not in DIFFICULTY_LABEL_MAP, "oni" included, becomes this tier.
# Misspelled labels ("Easy", "hrad") therefore silently load as Oni. Existing
# charts depend on the fallback, so it is kept as a named policy.
FALLBACK_TIER = DifficultyTier.ONI


def classify_difficulty(label: str | None) -> DifficultyTier:
    """Map a course ``difficulty`` label to its tier. Matching is case-sensitive."""
    return DIFFICULTY_LABEL_MAP.get(label, FALLBACK_TIER)
