from datetime import datetime, timedelta, timezone

from src.chain.presenters import contract_event_to_dto, unix_timestamp


def test_naive_timestamp_is_read_as_utc():
    assert unix_timestamp(datetime(1970, 1, 1, 0, 1)) == 60


def test_aware_timestamp_is_normalized():
    plus_two = timezone(timedelta(hours=2))
    assert unix_timestamp(datetime(1970, 1, 1, 2, 0, tzinfo=plus_two)) == 0


def test_sub_second_precision_is_floored():
    assert unix_timestamp(datetime(1970, 1, 1, 0, 0, 1, 900_000, tzinfo=timezone.utc)) == 1
    assert unix_timestamp(datetime(1969, 12, 31, 23, 59, 59, 500_000, tzinfo=timezone.utc)) == -1


def test_event_dto():
    dto = contract_event_to_dto('"Termination"', datetime(1970, 1, 2, tzinfo=timezone.utc))
    assert dto == {"body": '"Termination"', "timestamp": 86_400}
