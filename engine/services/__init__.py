"""Generation, scoring and hashing services."""

from engine.services.charset_builder import build_charset
from engine.services.password_generator import generate_password, generate_from_config
from engine.services.strength_analyzer import analyze_strength
from engine.services.hash_engine import (
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
    is_insecure,
)

__all__ = [
    "build_charset",
    "generate_password",
    "generate_from_config",
    "analyze_strength",
    "hash_password",
    "hash_password_async",
    "verify_password",
    "verify_password_async",
    "is_insecure",
]
