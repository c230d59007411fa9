"""
Built-in Rule Predicates

This module provides the fixed library of named checks shipped with fieldrules.
Every predicate has the signature ``predicate(value, params) -> bool`` and works
on the text form of the value, so numbers and other scalars are checked as the
string they render to.

Built-in rules:
- required: value has a non-zero length
- email: value looks like a single email address
- max / min: value length compared with a numeric parameter
- json: value is syntactically valid JSON
- url: value looks like a URL, host name or IPv4 address
- date: value parses as a calendar date or date-time
- integer: value is an integer literal, optionally with a zero fraction
- regex: value matches the pattern given as the rule parameters
"""

import json
import math
import re
from datetime import datetime
from email.utils import parsedate_to_datetime
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping, Sequence, Tuple

from .exceptions import RuleParameterError
from .models import Predicate

EMAIL_PATTERN = re.compile(
    r"(([^<>()\[\]\\.,;:\s@\"]+(\.[^<>()\[\]\\.,;:\s@\"]+)*)|(\".+\"))@"
    r"((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))"
)

URL_PATTERN = re.compile(
    r"(?:(?:ht|f)tp(?:s?)://|~/|/)?"
    r"(?:\w+:\w+@)?"
    r"((?:(?:[-\w\d{1-3}]+\.)+"
    r"(?:com|org|net|gov|mil|biz|info|mobi|name|aero|jobs|edu|co\.uk|ac\.uk|it|fr|tv|museum"
    r"|asia|local|travel|[a-z]{2}))"
    r"|((\b25[0-5]\b|\b[2][0-4][0-9]\b|\b[0-1]?[0-9]?[0-9]\b)"
    r"(\.(\b25[0-5]\b|\b[2][0-4][0-9]\b|\b[0-1]?[0-9]?[0-9]\b)){3}))"
    r"(?::[\d]{1,5})?"
    r"(?:(?:(?:/(?:[-\w~!$+|.,=]|%[a-f\d]{2})+)+|/)+|\?|#)?"
    r"(?:(?:\?(?:[-\w~!$+|.,*:]|%[a-f\d{2}])+=?(?:[-\w~!$+|.,*:=]|%[a-f\d]{2})*)"
    r"(?:&(?:[-\w~!$+|.,*:]|%[a-f\d{2}])+=?(?:[-\w~!$+|.,*:=]|%[a-f\d]{2})*)*)*"
    r"(?:#(?:[-\w~!$ |/.,*:;=]|%[a-f\d]{2})*)?",
    re.ASCII,
)

INTEGER_PATTERN = re.compile(r"-?[0-9][0-9]*(?:\.?0+)?")

# Non-ISO layouts accepted by the date rule, tried after ISO 8601 and RFC 2822.
DATE_FORMATS: Tuple[str, ...] = (
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def as_text(value: Any) -> str:
    """Render a value as the text the predicates operate on."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _length_param(params: Sequence[str]) -> float:
    # Missing or non-numeric lengths compare false; an empty length is zero.
    if not params:
        return math.nan
    text = params[0].strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return math.nan


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


@lru_cache(maxsize=256)
def _compile(pattern: str) -> "re.Pattern[str]":
    try:
        return re.compile(pattern)
    except re.error as e:
        raise RuleParameterError(f"Invalid regular expression {pattern!r}: {e}", rule="regex") from e


def required(value: Any, params: Sequence[str]) -> bool:
    return len(as_text(value)) > 0


def email(value: Any, params: Sequence[str]) -> bool:
    return EMAIL_PATTERN.fullmatch(as_text(value)) is not None


def max_length(value: Any, params: Sequence[str]) -> bool:
    return len(as_text(value)) <= _length_param(params)


def min_length(value: Any, params: Sequence[str]) -> bool:
    return len(as_text(value)) >= _length_param(params)


def json_text(value: Any, params: Sequence[str]) -> bool:
    try:
        json.loads(as_text(value), parse_constant=_reject_constant)
    except ValueError:
        return False
    return True


def url(value: Any, params: Sequence[str]) -> bool:
    return URL_PATTERN.fullmatch(as_text(value)) is not None


def date(value: Any, params: Sequence[str]) -> bool:
    """
    Check that a value parses as a calendar date or date-time.

    ISO 8601 text is tried first, then RFC 2822 (``Tue, 15 Nov 1994 08:12:31 GMT``),
    then the layouts in DATE_FORMATS.
    """
    if isinstance(value, datetime):
        return True
    text = as_text(value).strip()
    if not text:
        return False
    try:
        datetime.fromisoformat(text)
        return True
    except ValueError:
        pass
    try:
        parsedate_to_datetime(text)
        return True
    except (TypeError, ValueError, IndexError):
        pass
    for layout in DATE_FORMATS:
        try:
            datetime.strptime(text, layout)
            return True
        except ValueError:
            continue
    return False


def integer(value: Any, params: Sequence[str]) -> bool:
    return INTEGER_PATTERN.fullmatch(as_text(value)) is not None


def regex(value: Any, params: Sequence[str]) -> bool:
    """
    Check a value against the pattern carried by the rule parameters.

    The parameters are joined back with ``:`` so a pattern may contain colons,
    e.g. ``regex:^\\d{2}:\\d{2}$``. The pattern may match anywhere in the value;
    anchor it to require a full match.
    """
    pattern = ":".join(params)
    if not pattern:
        raise RuleParameterError("Rule 'regex' requires a pattern parameter", rule="regex")
    return _compile(pattern).search(as_text(value)) is not None


BUILTIN_PREDICATES: Mapping[str, Predicate] = MappingProxyType(
    {
        "required": required,
        "email": email,
        "max": max_length,
        "min": min_length,
        "json": json_text,
        "url": url,
        "date": date,
        "integer": integer,
        "regex": regex,
    }
)
