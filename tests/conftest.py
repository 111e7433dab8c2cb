"""Pytest configuration and fixtures."""

import itertools
import pytest
from shared.domain.models import GenerationConfig


# bcrypt at the minimum cost keeps the suite fast
FAST_BCRYPT_COST = 4


@pytest.fixture
def fast_cost():
    """Lowest supported bcrypt cost."""
    return FAST_BCRYPT_COST


@pytest.fixture
def all_classes_config():
    """Generation options with every character class enabled and no exclusions."""
    return GenerationConfig(
        length=16,
        include_uppercase=True,
        include_lowercase=True,
        include_digits=True,
        include_symbols=True,
        exclude_similar=False,
        exclude_ambiguous=False,
    )


@pytest.fixture
def cycling_randbelow():
    """
    Deterministic stand-in for secrets.randbelow.

    Returns 0, 1, 2, ... modulo n so generated passwords are predictable.
    """
    counter = itertools.count()

    def randbelow(n: int) -> int:
        return next(counter) % n

    return randbelow
