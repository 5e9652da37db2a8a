from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import urlencode


def _stringify(value: Any) -> str:
    # Match the API's expectations: lowercase booleans, enum values not names.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _stringify(value.value)
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query_string(params: Optional[Mapping[str, Any]]) -> str:
    """
    Serialize a mapping into a percent-encoded query string (no leading "?").
    - None values are omitted
    - list/tuple values repeat the key once per element, None items as "null"
    - integral floats drop the fraction: 1.0 -> "1"
    Example: build_query_string({"page": 1, "is_active": True}) -> "page=1&is_active=true"
    """
    if not params:
        return ""

    pairs: List[Tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _stringify(item)) for item in value)
        else:
            pairs.append((key, _stringify(value)))
    return urlencode(pairs)


def append_query_params(url: str, params: Optional[Mapping[str, Any]]) -> str:
    """Append serialized params to url, using "&" if url already has a query."""
    query_string = build_query_string(params)
    if not query_string:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query_string}"


__all__ = ["build_query_string", "append_query_params"]
