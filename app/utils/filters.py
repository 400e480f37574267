"""
Query filter builder.

Translates query-string parameters into a MongoDB filter document.

    fields = [FilterField("category"), FilterField("language", exact=True)]
    build_filter({"category": "Farm", "page": "2"}, fields)
    # {"category": {"$regex": "Farm", "$options": "i"}}
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence


@dataclass(frozen=True)
class FilterField:
    """A query key the listing endpoint recognises."""
    name: str
    exact: bool = False


def contains(value: str) -> Dict[str, str]:
    """Case-insensitive literal substring match."""
    return {"$regex": re.escape(value), "$options": "i"}


def build_filter(params: Mapping[str, Any], fields: Iterable[FilterField]) -> Dict[str, Any]:
    """
    AND together every recognised, non-empty parameter.
    Unknown keys are ignored.
    """
    query: Dict[str, Any] = {}
    for field in fields:
        value = params.get(field.name)
        if value is None or value == "":
            continue
        query[field.name] = value if field.exact else contains(str(value))
    return query


def build_search_filter(
    text: str,
    search_fields: Sequence[str],
    language: Optional[str] = None,
) -> Dict[str, Any]:
    """Match text in any of search_fields, optionally pinned to a language."""
    query: Dict[str, Any] = {
        "$or": [{name: contains(text)} for name in search_fields]
    }
    if language:
        query["language"] = language
    return query
