"""Password generator backed by a cryptographically secure random source."""

import logging
import secrets
from typing import Callable, Tuple
from shared.domain.models import GenerationConfig
from shared.domain.errors import ConfigurationError
from engine.services.charset_builder import build_charset

logger = logging.getLogger(__name__)

# Returns a uniform integer in [0, n). secrets.randbelow uses rejection
# sampling over os.urandom, so there is no modulo bias.
RandBelow = Callable[[int], int]


def generate_password(pool: str, length: int, randbelow: RandBelow = secrets.randbelow) -> str:
    """
    Draw `length` characters independently and uniformly from `pool`.

    Args:
        pool: Candidate characters (must be non-empty)
        length: Number of characters to draw (must be positive)
        randbelow: Secure index source; only overridden in tests

    Raises:
        ConfigurationError: If pool is empty or length is not positive.
    """
    if not pool:
        raise ConfigurationError("Character pool is empty")
    if length <= 0:
        raise ConfigurationError(f"Password length must be positive, got {length}")

    size = len(pool)
    return "".join(pool[randbelow(size)] for _ in range(length))


def generate_from_config(options: GenerationConfig, randbelow: RandBelow = secrets.randbelow) -> Tuple[str, str]:
    """
    Build the charset for `options` and generate a password from it.

    Returns:
        Tuple of (password, pool) so callers can report the pool size.
    """
    pool = build_charset(options)
    logger.debug(f"Generating password: length={options.length}, pool_size={len(pool)}")
    return generate_password(pool, options.length, randbelow=randbelow), pool
