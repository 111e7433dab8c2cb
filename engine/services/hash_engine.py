"""Hash engine: direct digests and bcrypt behind a single entry point."""

import asyncio
import logging
from shared.config.config import config
from shared.domain.models import HashRequest, HashResult
from shared.domain.errors import HashError, InvalidCostError
from shared.factories.scheme_factory import create_scheme

logger = logging.getLogger(__name__)


def validate_cost(cost: int) -> None:
    """
    Check the bcrypt work factor against the supported range.

    Raises:
        InvalidCostError: If cost is outside [MIN_BCRYPT_COST, MAX_BCRYPT_COST].
    """
    if not config.MIN_BCRYPT_COST <= cost <= config.MAX_BCRYPT_COST:
        raise InvalidCostError(
            f"bcrypt cost must be between {config.MIN_BCRYPT_COST} and "
            f"{config.MAX_BCRYPT_COST}, got {cost}"
        )


def is_insecure(algorithm: str) -> bool:
    """True if the algorithm is offered only for legacy comparison."""
    return create_scheme(algorithm).insecure


def hash_password(request: HashRequest) -> HashResult:
    """
    Hash the request's password with the selected algorithm.

    Direct digests are deterministic. bcrypt draws a fresh salt on every
    call, so two calls with the same password produce different strings
    that both verify.

    Raises:
        HashError: If the algorithm is unsupported or the digest fails.
        InvalidCostError: If the bcrypt cost is out of range.
    """
    scheme = create_scheme(request.algorithm)
    if scheme.uses_cost:
        validate_cost(request.cost)

    try:
        digest = scheme.hash(request.password, request.cost)
    except Exception as e:
        # The password never goes into the message
        logger.error(f"Digest failure for algorithm {request.algorithm.value}: {type(e).__name__}")
        raise HashError(f"Failed to compute {request.algorithm.value} digest") from e

    logger.info(
        f"Hashed password with {request.algorithm.value}"
        + (f" (cost {request.cost})" if scheme.uses_cost else "")
    )
    if scheme.insecure:
        logger.warning(f"{request.algorithm.value} is not suitable for password storage")

    return HashResult(
        algorithm=request.algorithm,
        digest=digest,
        cost=request.cost if scheme.uses_cost else None,
        insecure=scheme.insecure,
    )


async def hash_password_async(request: HashRequest) -> HashResult:
    """Run hash_password on a worker thread so bcrypt does not block the event loop."""
    return await asyncio.to_thread(hash_password, request)


def verify_password(password: str, digest: str, algorithm: str) -> bool:
    """
    Check a password against a digest produced by hash_password.

    Returns:
        True on match, False on mismatch or malformed digest.

    Raises:
        HashError: If the algorithm is unsupported.
    """
    return create_scheme(algorithm).verify(password, digest)


async def verify_password_async(password: str, digest: str, algorithm: str) -> bool:
    """Run verify_password on a worker thread so bcrypt does not block the event loop."""
    return await asyncio.to_thread(verify_password, password, digest, algorithm)
