"""Password strength scoring.

The score is a heuristic in ``[0, 5]`` and is independent of pass/fail
validation: ``validate_password`` decides whether a password is accepted,
``check_password_strength`` decides how good it looks.
"""

from dataclasses import dataclass
from enum import StrEnum

from authpanel.validation.rules import (
    PASSWORD_MIN_LENGTH,
    has_digit,
    has_lowercase,
    has_special,
    has_uppercase,
)

MAX_SCORE = 5


class Strength(StrEnum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"

    @classmethod
    def from_score(cls, score: int) -> "Strength":
        if score <= 2:
            return cls.WEAK
        if score == 3:
            return cls.MEDIUM
        return cls.STRONG


@dataclass(frozen=True, slots=True)
class PasswordStrength:
    """Score, label, and the criteria the password does not yet meet.

    A score of 0 means "show no indicator".
    """

    score: int
    strength: Strength
    feedback: tuple[str, ...] = ()


EMPTY_STRENGTH = PasswordStrength(score=0, strength=Strength.WEAK)

# (met?, label shown when not met), in reporting order
_CRITERIA = (
    (lambda p: len(p) >= PASSWORD_MIN_LENGTH, f"At least {PASSWORD_MIN_LENGTH} characters"),
    (has_uppercase, "Uppercase letter"),
    (has_lowercase, "Lowercase letter"),
    (has_digit, "Number"),
    (has_special, "Special character"),
)


def check_password_strength(password: str) -> PasswordStrength:
    """Score *password* one point per satisfied criterion."""
    if not password:
        return EMPTY_STRENGTH

    score = 0
    feedback: list[str] = []
    for met, label in _CRITERIA:
        if met(password):
            score += 1
        else:
            feedback.append(label)

    return PasswordStrength(
        score=score,
        strength=Strength.from_score(score),
        feedback=tuple(feedback),
    )


# ---------------------------------------------------------------------------
# Meter view-model
# ---------------------------------------------------------------------------

_LABELS = {
    Strength.WEAK: ("Weak", "red"),
    Strength.MEDIUM: ("Medium", "yellow"),
    Strength.STRONG: ("Strong", "green"),
}


@dataclass(frozen=True, slots=True)
class StrengthMeter:
    """Display data for a strength bar under the password input."""

    label: str
    color: str
    percent: float
    feedback: tuple[str, ...]


def strength_meter(strength: PasswordStrength) -> StrengthMeter | None:
    """Return what a strength bar should show, or ``None`` to hide it."""
    if strength.score == 0:
        return None
    label, color = _LABELS[strength.strength]
    return StrengthMeter(
        label=label,
        color=color,
        percent=strength.score * 100 / MAX_SCORE,
        feedback=strength.feedback,
    )
