"""Filter expression builder for Meilisearch.

Meilisearch filters are plain strings (``genre = 'Drama'``). Attribute names
and values are quoted here when needed; anything that cannot be quoted safely
is rejected instead of being interpolated.

Inside a quoted literal the filter parser only unescapes ``\\'``; every other
backslash is taken literally. So quotes are escaped, other backslashes are
left alone, and a trailing backslash (which would escape the closing quote)
is rejected.
"""

import re
import unicodedata

from .exceptions import InvalidFilterError

# Names matching this can be written unquoted on the left-hand side.
_BARE_ATTRIBUTE_RE = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.\-]*$")


def _has_control_characters(value: str) -> bool:
    return any(unicodedata.category(ch) == "Cc" for ch in value)


def quote_filter_value(value: str, argument: str = "filter_word") -> str:
    """Return ``value`` as a single-quoted Meilisearch filter literal.

    Raises:
        InvalidFilterError: If the value contains control characters or ends
            with a backslash
    """
    if _has_control_characters(value):
        raise InvalidFilterError(
            argument,
            f"argument '{argument}' must not contain control characters",
            context={"value": value},
        )
    if value.endswith("\\"):
        raise InvalidFilterError(
            argument,
            f"argument '{argument}' must not end with a backslash",
            context={"value": value},
        )
    return "'" + value.replace("'", "\\'") + "'"


def format_attribute_name(attribute: str, argument: str = "filterable_attribute") -> str:
    """Return ``attribute`` ready for the left-hand side of a filter.

    Plain (optionally dotted) ASCII names are kept bare; any other name, such
    as ``année`` or ``release date``, is quoted like a value.

    Raises:
        InvalidFilterError: If the name cannot be quoted safely
    """
    if _BARE_ATTRIBUTE_RE.match(attribute):
        return attribute
    return quote_filter_value(attribute, argument)


def build_equality_filter(attribute: str | None, value: str | None) -> str | None:
    """Build ``attribute = 'value'`` or return None.

    A filter is only produced when both parts are non-empty strings; any other
    combination means "no filter" and is not an error.

    Examples:
        >>> build_equality_filter("genre", "Drama")
        "genre = 'Drama'"

        >>> build_equality_filter("genre", None) is None
        True
    """
    if not isinstance(attribute, str) or not isinstance(value, str):
        return None
    if not attribute.strip() or not value:
        return None

    name = format_attribute_name(attribute.strip())
    return f"{name} = {quote_filter_value(value)}"
