"""
Utilities Module for fieldrules

Helpers around the validation core:

- Loading rule documents (rules plus message overrides) checked with jsonschema
- Formatting validation results for terminals and JSON output
"""

from .reporter import ValidationReporter
from .schema import RULE_DOCUMENT_SCHEMA, RuleDocument, load_rule_document, parse_json_input

__all__ = [
    "ValidationReporter",
    "RULE_DOCUMENT_SCHEMA",
    "RuleDocument",
    "load_rule_document",
    "parse_json_input",
]
