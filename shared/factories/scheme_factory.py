"""Factory for creating hash scheme instances."""

from shared.interfaces.hash_scheme import HashScheme
from shared.implementations.schemes import Sha256Scheme, Sha512Scheme, Md5Scheme, BcryptScheme
from shared.domain.consts import HashAlgorithm
from shared.domain.errors import HashError


SCHEMES: dict[str, type[HashScheme]] = {
    HashAlgorithm.SHA256: Sha256Scheme,
    HashAlgorithm.SHA512: Sha512Scheme,
    HashAlgorithm.MD5: Md5Scheme,
    HashAlgorithm.BCRYPT: BcryptScheme,
}


def create_scheme(algorithm: str) -> HashScheme:
    """Factory for creating hash schemes.

    Returns:
        HashScheme instance

    Raises:
        HashError: If algorithm is unknown
    """
    try:
        scheme_cls = SCHEMES[algorithm]
    except KeyError:
        raise HashError(f"Unsupported hash algorithm: {algorithm}")
    return scheme_cls()
