"""store.py — DynamoDB-backed record store.

``RecordStore`` is the only code that talks to the table. It exposes three
operations (scan, get, put) in terms of ``Record`` and translates botocore
failures into ``StoreError``.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from botocore.exceptions import BotoCoreError, ClientError

from .aws_clients import _get_ddb
from .config import RECORD_KEY, ApiConfig
from .errors import NotFoundError, RecordDecodeError, StoreError
from .records import Record
from .serialization import _serialize

__all__ = [
    "RecordStore",
]

logger = logging.getLogger(__name__)


class RecordStore:
    def __init__(self, table_name: str, client: Any) -> None:
        self.table_name = table_name
        self.client = client

    @classmethod
    def from_config(cls, config: ApiConfig) -> "RecordStore":
        return cls(config.table_name, _get_ddb(config.region))

    def _key(self, record_id: str) -> Dict[str, Any]:
        return {RECORD_KEY: _serialize(record_id)}

    def scan(self) -> List[Record]:
        """Return every record in the table.

        Items that cannot be decoded are skipped; the rest are returned.
        """
        records: List[Record] = []
        try:
            paginator = self.client.get_paginator("scan")
            for page in paginator.paginate(TableName=self.table_name, Select="ALL_ATTRIBUTES"):
                for item in page.get("Items", []):
                    try:
                        records.append(Record.from_item(item))
                    except RecordDecodeError as exc:
                        logger.warning("skipping undecodable item in %s: %s", self.table_name, exc.detail)
        except (BotoCoreError, ClientError) as exc:
            logger.exception("DynamoDB scan failed")
            raise StoreError(str(exc)) from exc
        return records

    def get(self, record_id: str) -> Record:
        """Fetch one record.

        Raises NotFoundError when no item exists, RecordDecodeError when the
        item exists but is malformed, StoreError on any other failure.
        """
        try:
            resp = self.client.get_item(TableName=self.table_name, Key=self._key(record_id))
        except (BotoCoreError, ClientError) as exc:
            logger.exception("DynamoDB get_item failed")
            raise StoreError(str(exc)) from exc

        item = resp.get("Item")
        if not item:
            raise NotFoundError()
        return Record.from_item(item)

    def put(self, record: Record) -> None:
        try:
            self.client.put_item(TableName=self.table_name, Item=record.to_item())
        except (BotoCoreError, ClientError) as exc:
            logger.exception("DynamoDB put_item failed")
            raise StoreError(str(exc)) from exc
