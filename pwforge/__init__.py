"""pwforge: random passwords from selected character classes, with a coarse strength rating."""

from .errors import EmptySelectionError, InvalidLengthError, PasswordEngineError
from .evaluator import StrengthRating, estimate_entropy, evaluate_strength, rate_options
from .generator import (
    AMBIGUOUS,
    CLASS_ORDER,
    MAX_LENGTH,
    MIN_LENGTH,
    CharacterClass,
    GenerationOptions,
    build_pool,
    generate,
    generate_password,
)

__version__ = "0.1.0"
