"""Filter rendering and escaping for directory queries.

Every filter value reaches the remote service through one of the escape
functions below. Values are never interpolated raw, so a mail address such as
``o'brien@example.com`` cannot terminate the quoted literal and inject extra
predicates.

Dialects:
- OData (Microsoft Graph ``$filter``): ``mail eq 'value'``, single quotes
  doubled inside the literal.
- Google Admin SDK ``query``: ``email:'value'``, backslashes and single quotes
  backslash-escaped inside the literal. ``*`` is a prefix wildcard in this
  syntax and cannot be escaped, so values containing it are rejected.
"""

import re
from typing import Mapping, Optional

from modules.directory.domain.errors import InvalidFilterValue
from modules.directory.domain.models import EqualsFilter

_ATTRIBUTE_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_./]*$")
_CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f\x7f]")

GOOGLE_ATTRIBUTES: Mapping[str, str] = {"mail": "email", "displayName": "name"}
GOOGLE_WILDCARD = "*"


def validate_filter_value(value: object) -> str:
    """Return value unchanged if it can be embedded in a filter.

    Raises:
        InvalidFilterValue: If value is not a string, is blank, or contains
            control characters.
    """
    if not isinstance(value, str):
        raise InvalidFilterValue(
            f"filter value must be a string, got {type(value).__name__}"
        )
    if not value.strip():
        raise InvalidFilterValue("filter value must not be blank")
    if _CONTROL_CHARACTERS.search(value):
        raise InvalidFilterValue("filter value must not contain control characters")
    return value


def _validate_attribute(attribute: str) -> str:
    if not isinstance(attribute, str) or not _ATTRIBUTE_PATTERN.match(attribute):
        raise InvalidFilterValue(f"invalid filter attribute: {attribute!r}")
    return attribute


def escape_odata_string(value: str) -> str:
    """Escape a value for use inside an OData single-quoted string literal."""
    return validate_filter_value(value).replace("'", "''")


def escape_google_query_value(value: str) -> str:
    """Escape a value for use inside a Google Admin SDK quoted query term.

    Raises:
        InvalidFilterValue: If value contains the ``*`` wildcard.
    """
    validated = validate_filter_value(value)
    if GOOGLE_WILDCARD in validated:
        raise InvalidFilterValue("filter value must not contain the '*' wildcard")
    return validated.replace("\\", "\\\\").replace("'", "\\'")


def render_odata_filter(equals: EqualsFilter) -> str:
    """Render an EqualsFilter as an OData ``$filter`` expression.

    Example:
        >>> render_odata_filter(EqualsFilter("mail", "o'brien@example.com"))
        "mail eq 'o''brien@example.com'"
    """
    attribute = _validate_attribute(equals.attribute)
    return f"{attribute} eq '{escape_odata_string(equals.value)}'"


def render_google_query(
    equals: EqualsFilter, attributes: Optional[Mapping[str, str]] = None
) -> str:
    """Render an EqualsFilter as a Google Admin SDK ``query`` term.

    Canonical attribute names are translated through ``attributes``
    (``mail`` becomes ``email``).

    Example:
        >>> render_google_query(EqualsFilter("mail", "o'brien@example.com"))
        "email:'o\\\\'brien@example.com'"
    """
    mapping = GOOGLE_ATTRIBUTES if attributes is None else attributes
    attribute = _validate_attribute(mapping.get(equals.attribute, equals.attribute))
    return f"{attribute}:'{escape_google_query_value(equals.value)}'"
