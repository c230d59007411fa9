"""
Validation Reporter Components

This module provides components for formatting and outputting validation results
in various formats. It supports:
- Human-readable string formatting
- Dictionary conversion
- JSON serialization
"""

import json
from typing import Any, Dict

from ..core.models import ValidationResult


class ValidationReporter:
    """
    Reporter for formatting and outputting validation results.

    This class provides static methods for converting ValidationResult instances
    into formats suitable for terminals, API responses or logs.
    """

    @staticmethod
    def format_result(result: ValidationResult) -> str:
        """
        Format a validation result as a human-readable string.

        Every failure is listed as ``field: message``, grouped by field in the
        order the fields were validated.

        Args:
            result: ValidationResult instance to format

        Returns:
            str: Formatted string representation of the validation result

        Example:
            >>> result = ValidationResult(False, {"email": ["Invalid Email provided"]})
            >>> print(ValidationReporter.format_result(result))
            Validation failed with the following errors:
              - email: Invalid Email provided
        """
        if result.is_valid:
            return "Validation passed successfully"

        lines = ["Validation failed with the following errors:"]
        for field, messages in result.errors.items():
            for message in messages:
                lines.append(f"  - {field}: {message}")
        return "\n".join(lines)

    @staticmethod
    def to_dict(result: ValidationResult) -> Dict[str, Any]:
        """
        Convert a validation result to a dictionary.

        Args:
            result: ValidationResult instance to convert

        Returns:
            Dict[str, Any]: Dictionary representation of the validation result

        Example:
            >>> result = ValidationResult(True, {}, {"validated_fields": ["name"]})
            >>> ValidationReporter.to_dict(result)
            {'is_valid': True, 'errors': {}, 'context': {'validated_fields': ['name']}}
        """
        return {
            "is_valid": result.is_valid,
            "errors": result.errors,
            "context": result.context,
        }

    @staticmethod
    def to_json(result: ValidationResult) -> str:
        """
        Convert a validation result to JSON with two-space indentation.

        Args:
            result: ValidationResult instance to convert

        Returns:
            str: JSON string representation of the validation result
        """
        return json.dumps(ValidationReporter.to_dict(result), indent=2)
