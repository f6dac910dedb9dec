"""handlers.py — list / create / get handlers.

Each handler calls the store once and converts any taxonomy error into an
error reply. Nothing is retried.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

from .config import RECORD_PATH_PREFIX, ApiConfig
from .errors import NotFoundError, StoreError, ValidationError
from .http_utils import _error, _raw_body, _response
from .records import parse_create_payload
from .store import RecordStore

__all__ = [
    "_handle_create",
    "_handle_get",
    "_handle_list",
]

logger = logging.getLogger(__name__)


def _handle_list(store: RecordStore, config: ApiConfig) -> Dict[str, Any]:
    """GET /records"""
    try:
        records = store.scan()
    except StoreError as exc:
        return _error(500, "Internal server error", exc.detail, config.cors_origin)
    return _response(200, [r.to_dict() for r in records], config.cors_origin)


def _handle_create(event: Dict[str, Any], store: RecordStore, config: ApiConfig) -> Dict[str, Any]:
    """POST /records"""
    raw, is_base64 = _raw_body(event)
    try:
        record = parse_create_payload(raw, is_base64)
    except ValidationError as exc:
        return _error(400, exc.message, exc.detail, config.cors_origin)

    try:
        store.put(record)
    except StoreError as exc:
        return _error(500, "Unable to store new record", exc.detail, config.cors_origin)

    logger.info("record created: %s", record.id)
    return _response(200, record.to_dict(), config.cors_origin)


def _handle_get(path: str, store: RecordStore, config: ApiConfig) -> Dict[str, Any]:
    """GET /records/{id}

    The id is the received path with the first ``/records/`` removed.
    """
    record_id = path.replace(RECORD_PATH_PREFIX, "", 1)
    try:
        record = store.get(record_id)
    except NotFoundError:
        return _error(404, "Not found", f"{path} does not exist", config.cors_origin)
    except StoreError as exc:
        # RecordDecodeError lands here too
        return _error(500, "Unable to get record", exc.detail, config.cors_origin)
    return _response(200, record.to_dict(), config.cors_origin)
