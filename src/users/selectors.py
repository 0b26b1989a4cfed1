from src.users.models import Token, User


def user_get_by_token(*, token: str) -> User | None:
    """Resolve a plain bearer token to its user - returns None if unknown"""
    if not token:
        return None
    try:
        return (
            Token.objects.select_related("user")
            .get(token_hash=Token.hash_token(token))
            .user
        )
    except Token.DoesNotExist:
        return None
