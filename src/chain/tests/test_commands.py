import json
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from src.chain.models import Event
from src.common.ss58 import ss58_encode

pytestmark = pytest.mark.django_db


def test_contract_events_json(node, utc):
    Event.objects.create(
        node=node,
        account=b"\x01" * 32,
        event_type=Event.EventType.TERMINATION,
        body='"Termination"',
        block_timestamp=utc(5),
    )
    out = StringIO()

    call_command("contract_events", ss58_encode(b"\x01" * 32), "--json", stdout=out)

    assert json.loads(out.getvalue()) == [{"body": '"Termination"', "timestamp": 5}]


def test_contract_events_empty(db):
    out = StringIO()

    call_command("contract_events", ss58_encode(b"\x01" * 32), stdout=out)

    assert "No events." in out.getvalue()


def test_contract_events_rejects_bad_account(db):
    with pytest.raises(CommandError):
        call_command("contract_events", "nope")
