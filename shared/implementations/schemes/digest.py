"""Direct-digest hash schemes (SHA-256, SHA-512, MD5)."""

import hashlib
import hmac
from shared.interfaces.hash_scheme import HashScheme
from shared.domain.consts import HashAlgorithm, DigestLength


class DigestScheme(HashScheme):
    """Fixed-cost hashlib digest rendered as lowercase hex.

    The cost parameter is accepted for interface compatibility and ignored.
    """

    algorithm: HashAlgorithm
    digest_length: int

    def hash(self, password: str, cost: int) -> str:
        """Return the hex digest of the UTF-8 encoded password."""
        # surrogatepass keeps lone surrogates (valid in str) encodable
        data = password.encode("utf-8", "surrogatepass")
        return hashlib.new(self.algorithm.value, data).hexdigest()

    def verify(self, password: str, digest: str) -> bool:
        """Constant-time comparison against a stored hex digest."""
        stored = digest.strip().lower()
        if len(stored) != self.digest_length:
            return False
        expected = self.hash(password, 0).encode("ascii")
        return hmac.compare_digest(expected, stored.encode("utf-8", "surrogatepass"))


class Sha256Scheme(DigestScheme):
    """SHA-256, 64 hex characters."""
    algorithm = HashAlgorithm.SHA256
    digest_length = DigestLength.SHA256


class Sha512Scheme(DigestScheme):
    """SHA-512, 128 hex characters."""
    algorithm = HashAlgorithm.SHA512
    digest_length = DigestLength.SHA512


class Md5Scheme(DigestScheme):
    """MD5, 32 hex characters. Legacy comparison only."""
    algorithm = HashAlgorithm.MD5
    digest_length = DigestLength.MD5
    insecure = True
