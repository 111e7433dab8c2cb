"""Constants to avoid string typos and magic numbers."""

from enum import Enum


class HashAlgorithm(str, Enum):
    """Supported hash algorithm selectors."""
    SHA256 = "sha256"
    SHA512 = "sha512"
    MD5 = "md5"
    BCRYPT = "bcrypt"


class DigestLength:
    """Hex digest lengths of the direct-digest algorithms."""
    SHA256 = 64
    SHA512 = 128
    MD5 = 32


class BcryptFormat:
    """Layout of a bcrypt modular-crypt string: $2b$NN$<22-char salt><31-char hash>."""
    PREFIX = "$2b$"
    # Prefixes bcrypt.checkpw understands
    VERSION_PREFIXES = ("$2a$", "$2b$", "$2y$")
    TOTAL_LENGTH = 60
    # bcrypt ignores input bytes beyond this length
    MAX_PASSWORD_BYTES = 72


class CharacterPool:
    """Fixed character pools, appended in this order."""
    LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
    UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    DIGITS = "0123456789"
    SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


class ExcludedCharacters:
    """Characters removed by the exclusion flags."""
    SIMILAR = "il1Lo0O"
    AMBIGUOUS = "{}[]()/\\'\"~,;<>."


class StrengthLabel(str, Enum):
    """Strength tiers, weakest first."""
    VERY_WEAK = "very weak"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very strong"


class StrengthColor(str, Enum):
    """Severity tag mirroring the strength tier."""
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    BLUE = "blue"
    GREEN = "green"


class Feedback:
    """Feedback messages emitted by the strength analyzer."""
    TOO_SHORT = "use at least 8 characters"
    NO_LOWERCASE = "add lowercase letters"
    NO_UPPERCASE = "add uppercase letters"
    NO_DIGITS = "add digits"
    NO_SYMBOLS = "add symbols"
    REPETITIVE = "avoid repetitive characters"
    COMMON_SEQUENCE = "avoid common sequences"


class HealthStatus:
    """Health endpoint status strings."""
    OK = "ok"
