"""Configuration loaded from environment variables."""

import os


def _get_env_int(key: str, default: str) -> int:
    """Get integer environment variable with validation."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid integer value for {key}")


class Config:
    """Centralized configuration from environment variables."""

    # Password generation
    DEFAULT_PASSWORD_LENGTH: int = _get_env_int("DEFAULT_PASSWORD_LENGTH", "16")
    MIN_PASSWORD_LENGTH: int = _get_env_int("MIN_PASSWORD_LENGTH", "4")
    MAX_PASSWORD_LENGTH: int = _get_env_int("MAX_PASSWORD_LENGTH", "128")

    # Hashing
    DEFAULT_HASH_ALGORITHM: str = os.getenv("DEFAULT_HASH_ALGORITHM", "bcrypt")

    # bcrypt work factor is logarithmic: each step doubles the hashing time
    DEFAULT_BCRYPT_COST: int = _get_env_int("DEFAULT_BCRYPT_COST", "12")
    MIN_BCRYPT_COST: int = _get_env_int("MIN_BCRYPT_COST", "4")
    MAX_BCRYPT_COST: int = _get_env_int("MAX_BCRYPT_COST", "15")

    # Batch hashing from the CLI: maximum number of hashes computed in parallel
    MAX_CONCURRENT_HASHES: int = _get_env_int("MAX_CONCURRENT_HASHES", "4")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


config = Config()
