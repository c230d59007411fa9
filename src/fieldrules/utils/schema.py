"""
Rule Document Loading

A rule document bundles the rules of every field with optional message
overrides, so a schema can live in a JSON file:

    {
      "rules": {"email": "required|email", "code": ["regex:^(a|b)$"]},
      "messages": {"required.email": "Email please"}
    }

Documents are checked against RULE_DOCUMENT_SCHEMA with jsonschema before use.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

RULE_DOCUMENT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "rules": {
            "type": "object",
            "additionalProperties": {
                "oneOf": [
                    {"type": "string"},
                    {"type": "array", "items": {"type": "string"}},
                ]
            },
        },
        "messages": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
    },
    "required": ["rules"],
    "additionalProperties": False,
}


@dataclass
class RuleDocument:
    """
    Rules and message overrides loaded from a rule document.

    Attributes:
        rules (Dict[str, Union[str, List[str]]]): Field names mapped to rule expressions
        messages (Dict[str, str]): Message overrides keyed by rule or ``rule.field``
    """

    rules: Dict[str, Union[str, List[str]]]
    messages: Dict[str, str] = field(default_factory=dict)


def parse_json_input(json_str: str) -> Any:
    """
    Parse JSON input from either a string or file.

    Args:
        json_str: Either a JSON string or a file path prefixed with '@'.
            Relative paths are resolved against the current directory.

    Returns:
        The parsed JSON value

    Raises:
        ConfigurationError: If the JSON is invalid or the file is not found
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)
        if not os.path.exists(file_path):
            raise ConfigurationError(f"File not found: {file_path}")
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {file_path}: {e}") from e

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON input: {e}") from e


def load_rule_document(source: Union[str, Mapping[str, Any]]) -> RuleDocument:
    """
    Load and check a rule document.

    Args:
        source: A mapping, a JSON string, or a file path prefixed with '@'.
            A bare path without '@' is parsed as JSON text.

    Returns:
        RuleDocument: The document's rules and messages

    Raises:
        ConfigurationError: If the document cannot be read or does not match
            RULE_DOCUMENT_SCHEMA

    Example:
        >>> doc = load_rule_document({"rules": {"name": "required"}})
        >>> doc.rules
        {'name': 'required'}
    """
    document = parse_json_input(source) if isinstance(source, str) else source

    try:
        json_validate(instance=document, schema=RULE_DOCUMENT_SCHEMA)
    except JsonSchemaError as e:
        logger.error(f"Rule document failed schema validation: {e.message}")
        raise ConfigurationError(f"Invalid rule document: {e.message}") from e

    return RuleDocument(
        rules=dict(document["rules"]),
        messages=dict(document.get("messages", {})),
    )
