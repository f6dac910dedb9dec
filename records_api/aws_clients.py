"""aws_clients.py — Lazy-singleton DynamoDB client.

The boto3 client is created on first use and cached for warm invocations.
"""
from __future__ import annotations

from typing import Any, Optional

import boto3
from botocore.config import Config

__all__ = [
    "_get_ddb",
    "_reset_clients",
]

_ddb = None
_ddb_region: Optional[str] = None


def _get_ddb(region: str) -> Any:
    """Get (or create) the DynamoDB client singleton for ``region``."""
    global _ddb, _ddb_region
    if _ddb is None or _ddb_region != region:
        _ddb = boto3.client(
            "dynamodb",
            region_name=region,
            config=Config(retries={"mode": "standard"}),
        )
        _ddb_region = region
    return _ddb


def _reset_clients() -> None:
    global _ddb, _ddb_region
    _ddb = None
    _ddb_region = None
