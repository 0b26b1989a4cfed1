import logging

import pytest
import structlog
from django.db import DatabaseError

from config.settings.logging import _pre_chain
from src.keys.models import PublicKey
from src.keys.selectors import public_key_list
from src.keys.services import public_key_delete

pytestmark = pytest.mark.django_db

ADDRESS = b"\x01" * 32


def test_delete_reports_removed_rows(user):
    PublicKey.objects.create(user=user, address=ADDRESS)

    assert public_key_delete(user=user, address=ADDRESS) == 1
    assert public_key_delete(user=user, address=ADDRESS) == 0


def test_delete_is_scoped_to_user(make_user):
    owner, other = make_user(), make_user()
    PublicKey.objects.create(user=owner, address=ADDRESS)

    assert public_key_delete(user=other, address=ADDRESS) == 0
    assert list(public_key_list(user=owner).values_list("user_id", flat=True)) == [owner.id]


def test_delete_rolls_back_on_failure(user, monkeypatch):
    PublicKey.objects.create(user=user, address=ADDRESS)

    def _fail(*args, **kwargs):
        raise DatabaseError("boom")

    # fails after the DELETE statement ran, inside the atomic block
    monkeypatch.setattr("src.keys.services.logger.info", _fail)

    with pytest.raises(DatabaseError):
        public_key_delete(user=user, address=ADDRESS)

    assert PublicKey.objects.filter(user=user).count() == 1


def test_list_empty_for_new_user(user):
    assert list(public_key_list(user=user)) == []


def test_delete_log_line_carries_user_and_count(user, caplog, monkeypatch):
    PublicKey.objects.create(user=user, address=ADDRESS)
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.LogfmtRenderer(),
        foreign_pre_chain=_pre_chain,
    )

    # the "src" logger does not propagate to the root handler caplog listens on
    monkeypatch.setattr(logging.getLogger("src"), "propagate", True)

    with caplog.at_level("INFO", logger="src.keys.services"):
        public_key_delete(user=user, address=ADDRESS)

    records = [r for r in caplog.records if r.getMessage() == "public_key_delete"]
    assert len(records) == 1
    line = formatter.format(records[0])
    assert f"user_id={user.pk}" in line
    assert "deleted=1" in line
