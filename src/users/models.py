import hashlib
import secrets

from django.db import models

from src.common.models import BaseModel


class User(BaseModel):
    """Opaque identity. Rows are created by the registration flow."""

    class Meta:
        db_table = "users"

    def __str__(self):
        return f"user:{self.pk}"


class Token(BaseModel):
    """Bearer credential bound to a user. Only the hash of the token is stored."""

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="tokens")
    token_hash = models.CharField(max_length=64)

    class Meta:
        db_table = "tokens"
        constraints = [
            models.UniqueConstraint(fields=["token_hash"], name="token_hash_unique"),
        ]

    def __str__(self):
        return f"token:{self.pk} (user:{self.user_id})"

    @staticmethod
    def hash_token(plain_token: str) -> str:
        return hashlib.sha256(plain_token.encode()).hexdigest()

    @classmethod
    def generate(cls, user: User) -> tuple["Token", str]:
        """
        Build an unsaved token for ``user``.

        Returns (token, plain_token); the plain value is not recoverable afterwards.
        """
        plain_token = secrets.token_urlsafe(32)
        return cls(user=user, token_hash=cls.hash_token(plain_token)), plain_token
