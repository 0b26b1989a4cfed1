from django.db.models import QuerySet

from src.keys.models import PublicKey


def public_key_list(*, user) -> QuerySet[PublicKey]:
    """Public keys linked to ``user``, oldest first"""

    return PublicKey.objects.filter(user=user).only("id", "address").order_by("id")
