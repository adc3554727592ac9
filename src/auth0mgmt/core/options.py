"""Request options contributing to a Management API query string."""

from collections.abc import Iterable
from typing import Any, NamedTuple, TypeAlias
from urllib.parse import urlencode


class RequestOption(NamedTuple):
    """A single query-string key/value pair."""

    key: str
    value: str


# A single option, or a helper result such as include_fields(...)
OptionArg: TypeAlias = RequestOption | Iterable[RequestOption]


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parameter(key: str, value: Any) -> RequestOption:
    """Create an arbitrary query parameter option.

    Booleans render as ``true``/``false``, everything else through ``str``.
    """
    return RequestOption(key, _render(value))


def page(number: int) -> RequestOption:
    """Zero-based page index of a paginated list."""
    return parameter("page", number)


def per_page(count: int) -> RequestOption:
    """Number of results per page."""
    return parameter("per_page", count)


def include_totals(include: bool = True) -> RequestOption:
    """Ask for a totals envelope instead of a bare array."""
    return parameter("include_totals", include)


def include_fields(*names: str) -> list[RequestOption]:
    """Return only the given fields."""
    return [parameter("fields", ",".join(names)), parameter("include_fields", True)]


def exclude_fields(*names: str) -> list[RequestOption]:
    """Return everything except the given fields."""
    return [parameter("fields", ",".join(names)), parameter("include_fields", False)]


def flatten_options(
    options: Iterable[OptionArg],
) -> list[RequestOption]:
    """Flatten options, expanding helpers that return several pairs."""
    flat: list[RequestOption] = []
    for option in options:
        if isinstance(option, RequestOption):
            flat.append(option)
        else:
            flat.extend(option)
    return flat


def build_query(options: Iterable[OptionArg]) -> str:
    """Build a query string from request options.

    Keys are sorted and a repeated key keeps the last value given.

    Args:
        options: Request options, possibly nested one level

    Returns:
        str: ``""`` when there are no options, otherwise ``"?k=v&..."``
    """
    values: dict[str, str] = {}
    for option in flatten_options(options):
        values[option.key] = option.value

    if not values:
        return ""
    return "?" + urlencode(sorted(values.items()))
