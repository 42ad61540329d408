"""
pwforge.evaluator

Password strength rating:
- evaluate_strength(selected_class_count, length): coarse Weak/Medium/Strong
  rating from the decision table below (first matching row wins)
- estimate_entropy(pool, length): theoretical entropy (bits) of a password
  drawn uniformly from pool

    length >= 12 and classes >= 3  -> Strong
    length >= 8  and classes >= 2  -> Medium
    otherwise                      -> Weak

The rating never looks at the generated characters, only at the inputs.
"""

import math
from enum import Enum

from .generator import GenerationOptions


class StrengthRating(Enum):
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"

    def __str__(self) -> str:
        return self.value


# (min length, min classes, rating), checked top to bottom
RULES = (
    (12, 3, StrengthRating.STRONG),
    (8, 2, StrengthRating.MEDIUM),
)


def evaluate_strength(selected_class_count: int, length: int) -> StrengthRating:
    # length alone never lifts a single-class password out of Weak
    for min_length, min_classes, rating in RULES:
        if length >= min_length and selected_class_count >= min_classes:
            return rating
    return StrengthRating.WEAK


def rate_options(options: GenerationOptions, length: int) -> StrengthRating:
    return evaluate_strength(len(options.classes), length)


def estimate_entropy(pool: str, length: int) -> float:
    """
    Entropy bits = length * log2(distinct characters in pool).
    Duplicates are counted once, so this is an upper bound when the pool
    repeats characters.
    """
    distinct = len(set(pool))
    if distinct < 2 or length <= 0:
        return 0.0
    return length * math.log2(distinct)
