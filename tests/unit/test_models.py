"""Tests for domain models."""

import pytest
from pydantic import ValidationError
from shared.domain.models import GenerationConfig, StrengthReport, HashRequest, HashResult
from shared.domain.consts import HashAlgorithm, StrengthLabel, StrengthColor


class TestGenerationConfig:
    """Tests for GenerationConfig model."""

    def test_defaults(self):
        """Test defaults: length 16, every class on, no exclusions."""
        options = GenerationConfig()
        assert options.length == 16
        assert options.include_uppercase is True
        assert options.include_lowercase is True
        assert options.include_digits is True
        assert options.include_symbols is True
        assert options.exclude_similar is False
        assert options.exclude_ambiguous is False

    @pytest.mark.parametrize("length", [4, 128])
    def test_length_bounds_inclusive(self, length):
        """Test that the practical bounds are accepted."""
        assert GenerationConfig(length=length).length == length

    @pytest.mark.parametrize("length", [0, 3, 129, -5])
    def test_length_out_of_bounds(self, length):
        """Test that lengths outside [4, 128] fail validation."""
        with pytest.raises(ValidationError):
            GenerationConfig(length=length)

    def test_frozen(self):
        """Test that options are immutable once built."""
        options = GenerationConfig()
        with pytest.raises(ValidationError):
            options.length = 20


class TestStrengthReport:
    """Tests for StrengthReport model."""

    def test_creation(self):
        """Test creating a StrengthReport."""
        report = StrengthReport(
            score=45,
            label=StrengthLabel.MEDIUM,
            color=StrengthColor.YELLOW,
            feedback=["add symbols"],
        )
        assert report.score == 45
        assert report.label == "medium"
        assert report.color == "yellow"
        assert report.feedback == ["add symbols"]

    @pytest.mark.parametrize("score", [-1, 101])
    def test_score_bounds(self, score):
        """Test that scores outside [0, 100] are rejected."""
        with pytest.raises(ValidationError):
            StrengthReport(score=score, label=StrengthLabel.WEAK, color=StrengthColor.ORANGE)

    def test_serializes_enum_values(self):
        """Test that the JSON form uses plain strings."""
        report = StrengthReport(score=90, label=StrengthLabel.VERY_STRONG, color=StrengthColor.GREEN)
        data = report.model_dump(mode="json")
        assert data == {"score": 90, "label": "very strong", "color": "green", "feedback": []}


class TestHashRequest:
    """Tests for HashRequest model."""

    def test_defaults(self):
        """Test default algorithm and cost."""
        request = HashRequest(password="pw")
        assert request.algorithm == HashAlgorithm.BCRYPT
        assert request.cost == 12

    def test_algorithm_from_string(self):
        """Test that plain strings are coerced to the enum."""
        assert HashRequest(password="pw", algorithm="sha512").algorithm is HashAlgorithm.SHA512

    def test_unknown_algorithm_rejected(self):
        """Test that unsupported selectors fail validation."""
        with pytest.raises(ValidationError):
            HashRequest(password="pw", algorithm="sha1")

    def test_password_hidden_from_repr(self):
        """Test that the password does not show up in repr."""
        request = HashRequest(password="hunter2", algorithm=HashAlgorithm.SHA256)
        assert "hunter2" not in repr(request)


class TestHashResult:
    """Tests for HashResult model."""

    def test_defaults(self):
        """Test that cost and insecure default to None and False."""
        result = HashResult(algorithm=HashAlgorithm.SHA256, digest="ab" * 32)
        assert result.cost is None
        assert result.insecure is False
