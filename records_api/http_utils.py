"""http_utils.py — Response envelope, error replies, request accessors."""
from __future__ import annotations

import json
from typing import Any, Dict, Optional, Tuple

__all__ = [
    "_cors_headers",
    "_error",
    "_path_method",
    "_raw_body",
    "_response",
]


def _cors_headers(origin: str) -> Dict[str, str]:
    if not origin:
        return {}
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Headers": "*",
        "Access-Control-Allow-Methods": "OPTIONS,GET,POST,PUT,PATCH,DELETE",
        "Access-Control-Allow-Credentials": "true",
    }


def _response(status_code: int, body: Any, cors_origin: str = "") -> Dict[str, Any]:
    """Build an API Gateway proxy response with a JSON body."""
    return {
        "statusCode": status_code,
        "headers": {**_cors_headers(cors_origin), "Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def _error(status_code: int, message: str, detail: str, cors_origin: str = "") -> Dict[str, Any]:
    """Build an error response.

    Args:
        status_code: HTTP status code.
        message: Short human-readable summary.
        detail: Longer explanation or underlying error text.
    """
    return _response(status_code, {"message": message, "detail": detail}, cors_origin)


def _path_method(event: Dict[str, Any]) -> Tuple[str, str]:
    """Extract (method, path) from a REST (v1) or HTTP API (v2) event."""
    http = (event.get("requestContext") or {}).get("http") or {}
    method = event.get("httpMethod") or http.get("method") or ""
    path = event.get("path") or event.get("rawPath") or http.get("path") or ""
    return method, path


def _raw_body(event: Dict[str, Any]) -> Tuple[Optional[str], bool]:
    return event.get("body"), bool(event.get("isBase64Encoded"))
