from __future__ import annotations

from datetime import datetime

from src.chain.models import Event

# Hard cap, not a page size: the route exposes no cursor.
CONTRACT_EVENTS_LIMIT = 25


def contract_event_list(*, account: bytes) -> list[tuple[str, datetime]]:
    """
    Most recent events recorded against ``account`` as (body, block_timestamp).

    Newest first; events sharing a block timestamp come in reverse insertion
    order. Unknown accounts give an empty list.
    """
    qs = (
        Event.objects.filter(account=bytes(account))
        .order_by("-block_timestamp", "-id")
        .values_list("body", "block_timestamp")[:CONTRACT_EVENTS_LIMIT]
    )
    return list(qs.iterator(chunk_size=CONTRACT_EVENTS_LIMIT))
