"""Tests for compiler configuration."""

import pytest
from pydantic import ValidationError

from route_resolver import CompilerConfig


class TestCompilerConfig:
    """Test CompilerConfig model"""

    def test_defaults(self):
        """Test default configuration"""
        config = CompilerConfig()

        assert config.separator == "/"
        assert config.optional_leading_separator is True
        assert config.optional_trailing_separator is True

    def test_custom_values(self):
        """Test custom configuration"""
        config = CompilerConfig(separator=":", optional_leading_separator=False)

        assert config.separator == ":"
        assert config.optional_leading_separator is False

    @pytest.mark.parametrize("separator", [".", "*", "?", "{", "$", "|", '"'])
    def test_reserved_separator(self, separator):
        """Test separators with special meaning in patterns are rejected"""
        with pytest.raises(ValidationError) as exc_info:
            CompilerConfig(separator=separator)

        assert "reserved" in str(exc_info.value)

    def test_separator_length(self):
        """Test separator must be a single character"""
        with pytest.raises(ValidationError):
            CompilerConfig(separator="")

        with pytest.raises(ValidationError):
            CompilerConfig(separator="//")

    def test_extra_fields_forbidden(self):
        """Test unknown fields are rejected"""
        with pytest.raises(ValidationError):
            CompilerConfig(case_sensitive=False)

    def test_validate_assignment(self):
        """Test assignments are validated"""
        config = CompilerConfig()

        with pytest.raises(ValidationError):
            config.separator = "*"
