"""lambda_function.py

Lambda API for the records table.

Routes (via API Gateway proxy):
    GET    /records          — list all records
    POST   /records          — create a record
    GET    /records/{id}     — fetch one record

Anything else gets a 404 naming the unsupported method or path.

Environment variables:
    AWS_REGION             required
    RECORDS_TABLE_NAME     required
    CORS_ORIGIN            default: "" (no CORS headers)
    LOG_LEVEL              default: INFO
"""
from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, Optional

from .config import RECORD_PATH_PREFIX, RECORDS_PATH, ApiConfig
from .errors import RoutingError
from .handlers import _handle_create, _handle_get, _handle_list
from .http_utils import _error, _path_method
from .serialization import _now_z
from .store import RecordStore

__all__ = [
    "lambda_handler",
    "route",
]

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Process-wide state (built on first invocation, reused while warm)
# ---------------------------------------------------------------------------

_config: Optional[ApiConfig] = None
_store: Optional[RecordStore] = None


def _get_config() -> ApiConfig:
    global _config
    if _config is None:
        _config = ApiConfig.from_env()
        _config.apply_logging()
    return _config


def _get_store(config: ApiConfig) -> RecordStore:
    global _store
    if _store is None:
        _store = RecordStore.from_config(config)
    return _store


# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------


def _unhandled_method(method: str, path: str) -> RoutingError:
    return RoutingError("Try again", message=f"{method} method is not supported for {path} path")


def _unhandled_path(path: str) -> RoutingError:
    return RoutingError("Try valid paths", message=f"Invalid path {path}")


def route(event: Dict[str, Any], store: RecordStore, config: ApiConfig) -> Dict[str, Any]:
    """Dispatch one gateway event to its handler and return the response."""
    method, path = _path_method(event)
    normalized = path.lower()

    try:
        if normalized == RECORDS_PATH:
            if method == "GET":
                return _handle_list(store, config)
            if method == "POST":
                return _handle_create(event, store, config)
            raise _unhandled_method(method, path)
        if normalized.startswith(RECORD_PATH_PREFIX):
            if method == "GET":
                return _handle_get(path, store, config)
            raise _unhandled_method(method, path)
        raise _unhandled_path(path)
    except RoutingError as exc:
        return _error(exc.status_code, exc.message, exc.detail, config.cors_origin)


def _emit_request_log(method: str, path: str, status_code: int, started: float) -> None:
    payload = {
        "timestamp": _now_z(),
        "component": "records_api",
        "event": "request_complete",
        "method": method,
        "path": path,
        "status_code": status_code,
        "latency_ms": int(max(0, (time.monotonic() - started) * 1000)),
    }
    logger.info("[OBSERVABILITY] %s", json.dumps(payload, sort_keys=True))


# ---------------------------------------------------------------------------
# Handler
# ---------------------------------------------------------------------------


def lambda_handler(event: Dict[str, Any], _context: Any) -> Dict[str, Any]:
    config = _get_config()
    store = _get_store(config)

    started = time.monotonic()
    method, path = _path_method(event)
    logger.info("[INFO] route method=%s path=%s", method, path)
    try:
        resp = route(event, store, config)
    except Exception:
        logger.exception("unhandled error: method=%s path=%s", method, path)
        raise
    _emit_request_log(method, path, resp["statusCode"], started)
    return resp
