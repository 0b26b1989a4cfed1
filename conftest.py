from datetime import datetime, timezone

import pytest


@pytest.fixture
def make_user(db):
    from src.users.models import User

    def _make():
        return User.objects.create()

    return _make


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def make_token(db):
    from src.users.models import Token

    def _make(user) -> str:
        token, plain = Token.generate(user)
        token.save()
        return plain

    return _make


@pytest.fixture
def auth_header(user, make_token):
    return {"HTTP_AUTHORIZATION": f"Bearer {make_token(user)}"}


@pytest.fixture
def node(db):
    from src.chain.models import Node

    return Node.objects.create(name="test", url="ws://localhost:9944", confirmed_block=0)


@pytest.fixture
def utc():
    def _at(seconds: int) -> datetime:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)

    return _at
