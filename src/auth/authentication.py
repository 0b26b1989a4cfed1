from ninja.security import HttpBearer

from src.users.selectors import user_get_by_token


class TokenAuth(HttpBearer):
    """
    Resolve ``Authorization: Bearer <token>`` to a user before the handler runs.

    The resolved user lands on ``request.auth``; a missing or unknown token makes
    ninja answer 401 without calling the handler.
    """

    def authenticate(self, request, token: str):
        return user_get_by_token(token=token)
