"""Domain models for generation options, strength reports and hashing."""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict
from shared.config.config import config
from shared.domain.consts import HashAlgorithm, StrengthLabel, StrengthColor


class GenerationConfig(BaseModel):
    """Options for a single password generation call."""
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "length": 16,
                "include_uppercase": True,
                "include_lowercase": True,
                "include_digits": True,
                "include_symbols": True,
                "exclude_similar": False,
                "exclude_ambiguous": False,
            }
        },
    )

    length: int = Field(
        default=config.DEFAULT_PASSWORD_LENGTH,
        ge=config.MIN_PASSWORD_LENGTH,
        le=config.MAX_PASSWORD_LENGTH,
        description="Number of characters to generate",
    )
    include_uppercase: bool = Field(True, description="Include A-Z")
    include_lowercase: bool = Field(True, description="Include a-z")
    include_digits: bool = Field(True, description="Include 0-9")
    include_symbols: bool = Field(True, description="Include punctuation symbols")
    exclude_similar: bool = Field(False, description="Drop look-alike characters (i l 1 L o 0 O)")
    exclude_ambiguous: bool = Field(False, description="Drop brackets, quotes and separators")


class StrengthReport(BaseModel):
    """Result of a strength analysis."""
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "score": 45,
                "label": "medium",
                "color": "yellow",
                "feedback": ["add uppercase letters", "add symbols"],
            }
        },
    )

    score: int = Field(..., ge=0, le=100, description="Strength score in [0, 100]")
    label: StrengthLabel = Field(..., description="Strength tier")
    color: StrengthColor = Field(..., description="Severity tag mirroring the tier")
    feedback: List[str] = Field(default_factory=list, description="Suggestions in check order")


class HashRequest(BaseModel):
    """Request to hash a password."""
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "password": "correct horse battery staple",
                "algorithm": HashAlgorithm.BCRYPT,
                "cost": 12,
            }
        },
    )

    password: str = Field(..., repr=False, description="Password to hash (never logged)")
    algorithm: HashAlgorithm = Field(default=HashAlgorithm(config.DEFAULT_HASH_ALGORITHM))
    # Range is enforced by the hash engine so the error kind stays consistent
    cost: int = Field(default=config.DEFAULT_BCRYPT_COST, description="bcrypt work factor (log2 rounds)")


class HashResult(BaseModel):
    """Encoded hash produced by the hash engine."""
    model_config = ConfigDict(frozen=True)

    algorithm: HashAlgorithm
    digest: str = Field(..., description="Hex digest or bcrypt modular-crypt string")
    cost: Optional[int] = Field(None, description="Work factor, bcrypt only")
    insecure: bool = Field(False, description="True for algorithms unfit for password storage")


class AnalyzeRequest(BaseModel):
    """Payload for the analyze endpoint."""
    password: str = Field(..., repr=False)


class VerifyRequest(BaseModel):
    """Payload for the verify endpoint."""
    password: str = Field(..., repr=False)
    digest: str
    algorithm: HashAlgorithm


class GenerateResponse(BaseModel):
    """Response of the generate endpoint."""
    password: str
    pool_size: int = Field(..., ge=1)
    strength: StrengthReport
