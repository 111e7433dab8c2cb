"""Domain models and entities."""

from shared.domain.models import (
    GenerationConfig,
    StrengthReport,
    HashRequest,
    HashResult,
    AnalyzeRequest,
    VerifyRequest,
    GenerateResponse,
)
from shared.domain.errors import (
    PrimePassError,
    ConfigurationError,
    HashError,
    InvalidCostError,
)
from shared.domain.consts import (
    HashAlgorithm,
    DigestLength,
    BcryptFormat,
    CharacterPool,
    ExcludedCharacters,
    StrengthLabel,
    StrengthColor,
    Feedback,
    HealthStatus,
)

__all__ = [
    "GenerationConfig",
    "StrengthReport",
    "HashRequest",
    "HashResult",
    "AnalyzeRequest",
    "VerifyRequest",
    "GenerateResponse",
    "PrimePassError",
    "ConfigurationError",
    "HashError",
    "InvalidCostError",
    "HashAlgorithm",
    "DigestLength",
    "BcryptFormat",
    "CharacterPool",
    "ExcludedCharacters",
    "StrengthLabel",
    "StrengthColor",
    "Feedback",
    "HealthStatus",
]
