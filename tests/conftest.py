"""
Shared pytest fixtures for the converter tests.

This module provides:
- Fixtures for the pattern table, settings and converter
- A helper for asserting structural conversion errors
- A helper for asserting Pydantic validation failures on span models
"""

import pytest
from typing import Any, Type
from pydantic import BaseModel, ValidationError

from texshort.core.config import Settings, get_settings
from texshort.core.errors import ConversionError
from texshort.pipeline import Converter, get_converter
from texshort.substitute.patterns import default_patterns


@pytest.fixture(autouse=True)
def _clear_caches():
    """Settings, pattern table and converter are cached per process."""
    get_settings.cache_clear()
    default_patterns.cache_clear()
    get_converter.cache_clear()
    yield
    get_settings.cache_clear()
    default_patterns.cache_clear()
    get_converter.cache_clear()


@pytest.fixture
def patterns():
    """The bundled pattern table."""
    return default_patterns()


@pytest.fixture
def settings() -> Settings:
    """Settings with no environment overrides."""
    return Settings(_env_file=None)


@pytest.fixture
def converter(patterns, settings) -> Converter:
    """Converter on the bundled patterns and default bounds."""
    return Converter(patterns=patterns, settings=settings)


@pytest.fixture
def assert_conversion_error():
    """Helper to assert that a call raises a given ConversionError subclass."""
    def _assert_error(
        error_class: Type[ConversionError],
        func,
        *args: Any,
        position: int | None = None,
    ) -> ConversionError:
        """
        Assert that ``func(*args)`` raises ``error_class``.

        Args:
            error_class: Expected exception type
            func: Callable under test
            position: Expected buffer position (optional)

        Returns:
            The raised error
        """
        with pytest.raises(error_class) as exc_info:
            func(*args)

        error = exc_info.value
        if position is not None:
            assert error.position == position, f"Expected position {position}, got {error.position}"
            assert error.details["position"] == position

        return error

    return _assert_error


@pytest.fixture
def assert_validation_error():
    """Helper to assert that creating a model raises ValidationError."""
    def _assert_validation(model_class: Type[BaseModel], data: dict[str, Any]) -> ValidationError:
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)
        return exc_info.value

    return _assert_validation
