"""Shared test fixtures."""

import pytest

from fieldrules.core.config import ValidatorConfig
from fieldrules.core.engine import Validator
from fieldrules.core.registry import RuleRegistry


@pytest.fixture
def registry() -> RuleRegistry:
    """Fixture providing a registry with no custom rules."""
    return RuleRegistry()


@pytest.fixture
def validator(registry) -> Validator:
    """Fixture providing a validator with default configuration."""
    return Validator(registry=registry)


@pytest.fixture
def strict_validator() -> Validator:
    """Fixture providing a validator that resolves every rule up front."""
    return Validator(config=ValidatorConfig(strict_rules=True))
