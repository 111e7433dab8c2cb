"""Charset builder: turns generation options into a candidate alphabet."""

import logging
from shared.domain.models import GenerationConfig
from shared.domain.consts import CharacterPool, ExcludedCharacters
from shared.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

EXCLUDED_SIMILAR = frozenset(ExcludedCharacters.SIMILAR)
EXCLUDED_AMBIGUOUS = frozenset(ExcludedCharacters.AMBIGUOUS)


def build_charset(options: GenerationConfig) -> str:
    """
    Build the character pool for the given options.

    Pools are appended in a fixed order (lowercase, uppercase, digits,
    symbols), then the exclusion filters remove literal characters.
    Order only matters for reproducible tests.

    Returns:
        Non-empty string of unique candidate characters.

    Raises:
        ConfigurationError: If no character survives the options.
    """
    pools = []
    if options.include_lowercase:
        pools.append(CharacterPool.LOWERCASE)
    if options.include_uppercase:
        pools.append(CharacterPool.UPPERCASE)
    if options.include_digits:
        pools.append(CharacterPool.DIGITS)
    if options.include_symbols:
        pools.append(CharacterPool.SYMBOLS)

    excluded = set()
    if options.exclude_similar:
        excluded |= EXCLUDED_SIMILAR
    if options.exclude_ambiguous:
        excluded |= EXCLUDED_AMBIGUOUS

    # dict.fromkeys dedupes while keeping first-seen order
    charset = "".join(dict.fromkeys(c for c in "".join(pools) if c not in excluded))

    if not charset:
        raise ConfigurationError("No characters available: enable at least one character class")

    logger.debug(f"Built charset of {len(charset)} characters from {len(pools)} classes")
    return charset
