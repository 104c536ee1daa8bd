"""
Utility functions for the application.
"""
from typing import Any, Dict, Mapping


def merge_fields(existing: Mapping[str, Any], changes: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge a partial update into an existing record's fields.

    Every key present in ``changes`` wins, including when its value is None.
    Keys absent from ``changes`` keep the existing value. ``changes`` must only
    contain the keys the client actually sent.
    """
    merged = dict(existing)
    for field, value in changes.items():
        if field == "id":
            continue
        merged[field] = value
    return merged


def format_error(details: Any) -> Dict[str, Any]:
    """Format error response."""
    return {"error": details}
