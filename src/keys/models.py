from django.db import models

from src.common.models import BaseModel


class PublicKey(BaseModel):
    """Chain account linked to a user. ``address`` is the raw 32-byte account id."""

    user = models.ForeignKey(
        "users.User", on_delete=models.CASCADE, related_name="public_keys"
    )
    address = models.BinaryField(max_length=32)

    class Meta:
        db_table = "public_keys"
        constraints = [
            models.UniqueConstraint(
                fields=["user", "address"], name="public_key_user_address_unique"
            ),
        ]

    def __str__(self):
        return f"public_key:{self.pk} (user:{self.user_id})"
