"""Abstract hash scheme interface."""

from abc import ABC, abstractmethod


class HashScheme(ABC):
    """Abstract hash scheme interface.

    All hash schemes must implement:
    - hash: Compute the encoded digest of a password
    - verify: Check a password against a previously computed digest
    """

    #: True when the scheme must be flagged as unfit for password storage
    insecure: bool = False

    #: True when the scheme uses the cost parameter
    uses_cost: bool = False

    @abstractmethod
    def hash(self, password: str, cost: int) -> str:
        """Hash a password.

        Args:
            password: Password text, any Unicode string (may be empty)
            cost: Work factor; ignored by schemes that do not use it

        Returns:
            Encoded digest string

        Raises:
            HashError: If the digest cannot be computed
        """
        pass

    @abstractmethod
    def verify(self, password: str, digest: str) -> bool:
        """Check a password against a digest produced by this scheme.

        Returns:
            True if the password matches, False otherwise (including
            malformed digests)
        """
        pass
