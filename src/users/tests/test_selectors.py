import pytest

from src.users.models import Token
from src.users.selectors import user_get_by_token

pytestmark = pytest.mark.django_db


def test_resolves_issued_token(user, make_token):
    plain = make_token(user)

    assert user_get_by_token(token=plain) == user


def test_stores_only_hash(user):
    token, plain = Token.generate(user)
    token.save()

    assert token.token_hash != plain
    assert token.token_hash == Token.hash_token(plain)


@pytest.mark.parametrize("plain", ["", "unknown-token"])
def test_unknown_token_resolves_to_none(user, make_token, plain):
    make_token(user)

    assert user_get_by_token(token=plain) is None
