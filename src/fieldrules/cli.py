"""Command Line Interface for the fieldrules validation engine.

This module provides a CLI for validating JSON data records against rule
documents and for inspecting the built-in rules.

The CLI supports the following commands:
    - validate: Validate a data record against a rule document
    - rules: List built-in rules and their default messages

JSON input can be provided either as a direct string or as a file path prefixed with '@'.

Example Usage:
    python -m fieldrules validate @data/user.json @schemas/user.json
    python -m fieldrules validate '{"email": "x"}' '{"rules": {"email": "required|email"}}'
    python -m fieldrules rules
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core.config import ValidatorConfig
from .core.engine import Validator
from .core.exceptions import ConfigurationError, FieldRulesError
from .core.messages import default_message
from .core.predicates import BUILTIN_PREDICATES
from .utils.reporter import ValidationReporter
from .utils.schema import load_rule_document, parse_json_input

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def run_validate(args: argparse.Namespace) -> int:
    """Validate a data record and print the report.

    Returns:
        int: Exit status, EXIT_VALID or EXIT_INVALID
    """
    data = parse_json_input(args.data)
    if not isinstance(data, dict):
        raise ConfigurationError("Data to validate must be a JSON object")

    document = load_rule_document(args.schema)
    messages = dict(document.messages)
    if args.messages:
        extra = parse_json_input(args.messages)
        if not isinstance(extra, dict):
            raise ConfigurationError("Messages must be a JSON object")
        messages.update(extra)

    validator = Validator(config=ValidatorConfig(strict_rules=args.strict))
    result = validator.validate(data, document.rules, messages)

    if args.format == "json":
        print(ValidationReporter.to_json(result))
    else:
        print(ValidationReporter.format_result(result))

    return EXIT_VALID if result.is_valid else EXIT_INVALID


def run_rules(args: argparse.Namespace) -> int:
    """Print every built-in rule with its default message."""
    for name in BUILTIN_PREDICATES:
        print(f"{name}: {default_message(name, ('N',))}")
    return EXIT_VALID


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="fieldrules", description="Declarative field validation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    validate = subparsers.add_parser("validate", help="Validate a data record against a rule document")
    validate.add_argument("data", help="JSON string or @filename containing the data record")
    validate.add_argument("schema", help="JSON string or @filename containing the rule document")
    validate.add_argument("--messages", help="JSON string or @filename with extra message overrides")
    validate.add_argument("--format", choices=("text", "json"), default="text", help="Report format")
    validate.add_argument(
        "--strict", action="store_true", help="Reject unknown rules even on fields that were not provided"
    )
    validate.set_defaults(handler=run_validate)

    rules = subparsers.add_parser("rules", help="List built-in rules")
    rules.set_defaults(handler=run_rules)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Args:
        argv: Arguments to parse, defaulting to sys.argv[1:]

    Returns:
        int: Process exit status
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    try:
        return args.handler(args)
    except FieldRulesError as e:
        logger.debug(f"Command '{args.command}' failed: {e}")
        print(str(e), file=sys.stderr)
        return EXIT_ERROR
