import math
from datetime import datetime, timezone


def unix_timestamp(value: datetime) -> int:
    """Whole Unix seconds; naive values are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return math.floor(value.timestamp())


def contract_event_to_dto(body: str, block_timestamp: datetime) -> dict:
    return {
        "body": body,
        "timestamp": unix_timestamp(block_timestamp),
    }
