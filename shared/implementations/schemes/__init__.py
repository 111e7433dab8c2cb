"""Hash scheme implementations.

This package contains concrete implementations of hash schemes.
"""

from shared.implementations.schemes.digest import DigestScheme, Sha256Scheme, Sha512Scheme, Md5Scheme
from shared.implementations.schemes.bcrypt_scheme import BcryptScheme

__all__ = ["DigestScheme", "Sha256Scheme", "Sha512Scheme", "Md5Scheme", "BcryptScheme"]
