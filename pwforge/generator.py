"""
pwforge.generator
Character-pool assembly and secure password generation using Python's secrets module.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from secrets import randbelow
from typing import FrozenSet

from .errors import EmptySelectionError, InvalidLengthError

logger = logging.getLogger(__name__)

MIN_LENGTH = 4
MAX_LENGTH = 128

# visually confusable: 0/O, 1/l/I
AMBIGUOUS = "O0Il1"


class CharacterClass(Enum):
    LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
    UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    DIGITS = "0123456789"
    SYMBOLS = "!@#$%^&*()-_=+[{]};:'\"\\|,<.>/?"

    @property
    def alphabet(self) -> str:
        return self.value


# pool concatenation order
CLASS_ORDER = (
    CharacterClass.LOWERCASE,
    CharacterClass.UPPERCASE,
    CharacterClass.DIGITS,
    CharacterClass.SYMBOLS,
)


@dataclass(frozen=True)
class GenerationOptions:
    classes: FrozenSet[CharacterClass]
    avoid_ambiguous: bool = False

    def __post_init__(self):
        # accept any iterable of classes, store it frozen
        classes = frozenset(self.classes)
        for c in classes:
            if not isinstance(c, CharacterClass):
                raise TypeError(f"expected a CharacterClass, got {c!r}")
        object.__setattr__(self, "classes", classes)

    @classmethod
    def from_flags(
        cls,
        lower: bool = True,
        upper: bool = True,
        digits: bool = True,
        symbols: bool = True,
        avoid_ambiguous: bool = False,
    ) -> "GenerationOptions":
        flags = (lower, upper, digits, symbols)
        classes = [c for c, on in zip(CLASS_ORDER, flags) if on]
        return cls(classes=frozenset(classes), avoid_ambiguous=bool(avoid_ambiguous))


def _strip_ambiguous(pool: str) -> str:
    return "".join(c for c in pool if c not in AMBIGUOUS)


def build_pool(options: GenerationOptions) -> str:
    """
    Concatenate the alphabets of the selected classes in CLASS_ORDER,
    optionally dropping every ambiguous character.

    Raises EmptySelectionError instead of returning an empty pool.
    """
    pool = "".join(c.alphabet for c in CLASS_ORDER if c in options.classes)
    if options.avoid_ambiguous:
        pool = _strip_ambiguous(pool)
    if not pool:
        raise EmptySelectionError()
    logger.debug(
        "built pool of %d characters from %d class(es), avoid_ambiguous=%s",
        len(pool), len(options.classes), options.avoid_ambiguous,
    )
    return pool


def _check_length(length) -> None:
    # bool is an int subclass, but True is not a length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(length, MIN_LENGTH, MAX_LENGTH)
    if length < MIN_LENGTH:
        raise InvalidLengthError(length, MIN_LENGTH, MAX_LENGTH, bound="minimum")
    if length > MAX_LENGTH:
        raise InvalidLengthError(length, MIN_LENGTH, MAX_LENGTH, bound="maximum")


def generate(pool: str, length: int) -> str:
    """
    Draw `length` characters from `pool`, each index chosen independently and
    uniformly by the OS CSPRNG. Repeats are allowed.
    """
    _check_length(length)
    if not pool:
        raise EmptySelectionError()

    size = len(pool)
    password_chars = [pool[randbelow(size)] for _ in range(length)]
    return "".join(password_chars)


def generate_password(options: GenerationOptions, length: int) -> str:
    """Build the pool for `options` and generate one password from it."""
    return generate(build_pool(options), length)

