"""bcrypt adaptive-cost hash scheme."""

import logging
from typing import Optional
import bcrypt
from shared.config.config import config
from shared.interfaces.hash_scheme import HashScheme
from shared.domain.consts import BcryptFormat

logger = logging.getLogger(__name__)


def _password_bytes(password: str) -> bytes:
    """Encode password for bcrypt, keeping only the bytes bcrypt consumes.

    bcrypt only reads the first 72 bytes of its input. Recent releases of
    the bcrypt package raise on longer input instead of truncating, so the
    truncation is applied here for both hashing and verification.
    """
    data = password.encode("utf-8", "surrogatepass")
    return data[:BcryptFormat.MAX_PASSWORD_BYTES]


def digest_cost(digest: str) -> Optional[int]:
    """Return the work factor embedded in a bcrypt digest, or None if the shape is wrong.

    Expected layout: $2x$NN$ followed by 22 salt and 31 hash characters.
    """
    if len(digest) != BcryptFormat.TOTAL_LENGTH:
        return None
    if not digest.startswith(BcryptFormat.VERSION_PREFIXES) or digest[6] != "$":
        return None
    cost = digest[4:6]
    if not (cost.isascii() and cost.isdigit()):
        return None
    return int(cost)


class BcryptScheme(HashScheme):
    """bcrypt with a fresh random salt per call.

    Output format: $2b$<cost:02d>$<22-char salt><31-char hash> (60 chars).
    """

    uses_cost = True

    def hash(self, password: str, cost: int) -> str:
        """Hash with bcrypt at the given work factor."""
        salt = bcrypt.gensalt(rounds=cost, prefix=b"2b")
        return bcrypt.hashpw(_password_bytes(password), salt).decode("ascii")

    def verify(self, password: str, digest: str) -> bool:
        """Verify using bcrypt's own check; malformed digests never match.

        Digests whose cost lies outside the supported range are rejected
        without hashing.
        """
        cost = digest_cost(digest)
        if cost is None:
            logger.debug("Rejected malformed bcrypt digest")
            return False
        if not config.MIN_BCRYPT_COST <= cost <= config.MAX_BCRYPT_COST:
            logger.warning(f"Rejected bcrypt digest with unsupported cost {cost}")
            return False
        try:
            return bcrypt.checkpw(_password_bytes(password), digest.encode("ascii"))
        except (ValueError, UnicodeEncodeError) as e:
            logger.debug(f"Rejected malformed bcrypt digest: {e}")
            return False
