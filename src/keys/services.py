import logging

from django.db import transaction

from src.keys.models import PublicKey

logger = logging.getLogger(__name__)


@transaction.atomic
def public_key_delete(*, user, address: bytes) -> int:
    """
    Unlink ``address`` from ``user``.

    The filter is always scoped to ``user``. Returns the number of removed rows,
    which callers must not expose: the HTTP answer is the same either way.
    """

    deleted, _ = PublicKey.objects.filter(user=user, address=bytes(address)).delete()

    logger.info("public_key_delete", extra={"user_id": user.pk, "deleted": deleted})
    return deleted
