"""
Helpers for turning MongoDB documents into JSON-safe dictionaries.
"""

from typing import Any, Dict, Iterable, List

from bson import ObjectId


def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of `document` with ObjectId values rendered as strings."""
    return {key: str(value) if isinstance(value, ObjectId) else value for key, value in document.items()}


def serialize_documents(documents: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [serialize_document(document) for document in documents]
