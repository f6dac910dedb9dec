"""records.py — The Record model and its JSON / DynamoDB mappings."""
from __future__ import annotations

import base64
import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .errors import RecordDecodeError, ValidationError
from .serialization import _deserialize, _new_id, _now_z, _serialize_item

__all__ = [
    "INVALID_BODY_DETAIL",
    "Record",
    "parse_create_payload",
]

INVALID_BODY_DETAIL = "Request body is invalid. Please see the documentation."

_FIELDS = ("id", "author", "title", "body", "createdAt")
_REQUIRED_ON_CREATE = ("author", "title", "body")


@dataclass
class Record:
    id: str
    author: str
    title: str
    body: str
    createdAt: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    def to_item(self) -> Dict[str, Any]:
        """DynamoDB attribute map for put_item."""
        return _serialize_item(self.to_dict())

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "Record":
        """Decode a DynamoDB attribute map.

        Missing and NULL attributes decode as empty strings; any other
        non-string value is an error. Names match exactly first, then
        case-insensitively. Unknown attributes are ignored.
        """
        try:
            plain = _deserialize(item)
        except (AttributeError, TypeError, ValueError, ArithmeticError) as exc:
            raise RecordDecodeError(f"malformed attribute value: {exc}") from exc

        values: Dict[str, str] = {}
        for name in _FIELDS:
            value = _lookup(plain, name)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise RecordDecodeError(
                    f"cannot decode attribute {name!r} of type {type(value).__name__} into string"
                )
            values[name] = value
        return cls(**values)


def _lookup(values: Dict[str, Any], name: str) -> Any:
    """Exact key if present, else the first key equal to ``name`` ignoring case."""
    if name in values:
        return values[name]
    folded = name.casefold()
    for key, value in values.items():
        if isinstance(key, str) and key.casefold() == folded:
            return value
    return None


def _decode_body(raw: Optional[str], is_base64: bool) -> str:
    if raw is None:
        return ""
    if is_base64:
        try:
            return base64.b64decode(raw).decode("utf-8")
        except ValueError as exc:
            # binascii.Error, UnicodeDecodeError and non-ASCII input
            raise ValidationError(INVALID_BODY_DETAIL) from exc
    return raw


def parse_create_payload(raw: Optional[str], is_base64: bool = False) -> Record:
    """Validate a create request body and stamp a new id and createdAt.

    Raises ValidationError when the body is not a JSON object or any of
    author/title/body is missing, empty, or not a string.
    """
    text = _decode_body(raw, is_base64)
    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, TypeError, RecursionError) as exc:
        raise ValidationError(INVALID_BODY_DETAIL) from exc
    if not isinstance(payload, dict):
        raise ValidationError(INVALID_BODY_DETAIL)

    fields: Dict[str, str] = {}
    for name in _REQUIRED_ON_CREATE:
        value = _lookup(payload, name)
        if not isinstance(value, str) or value == "":
            raise ValidationError(INVALID_BODY_DETAIL)
        fields[name] = value

    # id and createdAt are always server-generated
    return Record(id=_new_id(), createdAt=_now_z(), **fields)
