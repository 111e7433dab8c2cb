"""Rule-based password strength analyzer.

The score is a heuristic proxy built from additive rules, not an entropy
estimate, and is no substitute for a breach or dictionary check.
"""

import logging
from typing import List, Tuple
from shared.domain.models import StrengthReport
from shared.domain.consts import StrengthLabel, StrengthColor, Feedback

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100

# Length tiers
LONG_LENGTH = 12
MIN_LENGTH = 8
EXTRA_LONG_LENGTH = 16

LONG_POINTS = 25
MIN_LENGTH_POINTS = 15
LOWERCASE_POINTS = 15
UPPERCASE_POINTS = 15
DIGIT_POINTS = 15
SYMBOL_POINTS = 20
EXTRA_LONG_BONUS = 10

REPEAT_RUN = 3
REPEAT_PENALTY = 10
COMMON_SEQUENCES = ("123", "abc", "qwe")
SEQUENCE_PENALTY = 15

# Evaluated top-down, first match wins
TIERS: List[Tuple[int, StrengthLabel, StrengthColor]] = [
    (80, StrengthLabel.VERY_STRONG, StrengthColor.GREEN),
    (60, StrengthLabel.STRONG, StrengthColor.BLUE),
    (40, StrengthLabel.MEDIUM, StrengthColor.YELLOW),
    (20, StrengthLabel.WEAK, StrengthColor.ORANGE),
]
FLOOR_TIER = (StrengthLabel.VERY_WEAK, StrengthColor.RED)


def is_lowercase(char: str) -> bool:
    return "a" <= char <= "z"


def is_uppercase(char: str) -> bool:
    return "A" <= char <= "Z"


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_symbol(char: str) -> bool:
    """Anything outside [A-Za-z0-9], including non-ASCII and control characters."""
    return not (is_lowercase(char) or is_uppercase(char) or is_digit(char))


def has_repeated_run(password: str, run: int = REPEAT_RUN) -> bool:
    """True if some character appears `run` or more times in a row."""
    count = 0
    previous = None
    for char in password:
        count = count + 1 if char == previous else 1
        if count >= run:
            return True
        previous = char
    return False


def has_common_sequence(password: str) -> bool:
    lowered = password.lower()
    return any(sequence in lowered for sequence in COMMON_SEQUENCES)


def classify(score: int) -> Tuple[StrengthLabel, StrengthColor]:
    """Map a clamped score to its tier label and color."""
    for threshold, label, color in TIERS:
        if score >= threshold:
            return label, color
    return FLOOR_TIER


def analyze_strength(password: str) -> StrengthReport:
    """
    Score a password and collect improvement suggestions.

    Feedback follows the order the checks run in, not their impact.
    Deterministic: the same input always yields the same report.
    """
    score = 0
    feedback: List[str] = []
    length = len(password)

    if length >= LONG_LENGTH:
        score += LONG_POINTS
    elif length >= MIN_LENGTH:
        score += MIN_LENGTH_POINTS
    else:
        feedback.append(Feedback.TOO_SHORT)

    class_checks = (
        (is_lowercase, LOWERCASE_POINTS, Feedback.NO_LOWERCASE),
        (is_uppercase, UPPERCASE_POINTS, Feedback.NO_UPPERCASE),
        (is_digit, DIGIT_POINTS, Feedback.NO_DIGITS),
        (is_symbol, SYMBOL_POINTS, Feedback.NO_SYMBOLS),
    )
    for predicate, points, message in class_checks:
        if any(predicate(char) for char in password):
            score += points
        else:
            feedback.append(message)

    if length >= EXTRA_LONG_LENGTH:
        score += EXTRA_LONG_BONUS

    if has_repeated_run(password):
        score -= REPEAT_PENALTY
        feedback.append(Feedback.REPETITIVE)

    if has_common_sequence(password):
        score -= SEQUENCE_PENALTY
        feedback.append(Feedback.COMMON_SEQUENCE)

    score = max(MIN_SCORE, min(MAX_SCORE, score))
    label, color = classify(score)

    logger.debug(f"Strength analysis: length={length}, score={score}, label={label.value}")
    return StrengthReport(score=score, label=label, color=color, feedback=feedback)
