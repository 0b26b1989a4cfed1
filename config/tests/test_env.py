from config import env as env_module


def test_env_get_prefers_environment(monkeypatch):
    monkeypatch.setenv("CHAIN_API_TEST_VALUE", "from-env")
    monkeypatch.setattr(env_module, "bao_read_kv", lambda path=None: {"CHAIN_API_TEST_VALUE": "from-kv"})

    assert env_module.env_get("CHAIN_API_TEST_VALUE") == "from-env"


def test_env_get_falls_back_to_kv(monkeypatch):
    monkeypatch.setattr(env_module, "OPENBAO_TOKEN", "dev-token")
    monkeypatch.delenv("CHAIN_API_TEST_VALUE", raising=False)
    monkeypatch.setattr(env_module, "bao_read_kv", lambda path=None: {"CHAIN_API_TEST_VALUE": "from-kv"})

    assert env_module.env_get("CHAIN_API_TEST_VALUE") == "from-kv"


def test_env_get_returns_default_when_kv_unreachable(monkeypatch):
    def _unreachable(path=None):
        raise ConnectionError("connection refused")

    monkeypatch.setattr(env_module, "OPENBAO_TOKEN", "dev-token")
    monkeypatch.delenv("CHAIN_API_TEST_VALUE", raising=False)
    monkeypatch.setattr(env_module, "bao_read_kv", _unreachable)

    assert env_module.env_get("CHAIN_API_TEST_VALUE", default="fallback") == "fallback"


def test_env_get_skips_kv_without_credentials(monkeypatch):
    def _must_not_be_called(path=None):
        raise AssertionError("OpenBao should not be queried")

    monkeypatch.delenv("CHAIN_API_TEST_VALUE", raising=False)
    monkeypatch.setattr(env_module, "OPENBAO_TOKEN", "")
    monkeypatch.setattr(env_module, "OPENBAO_ROLE_ID", "")
    monkeypatch.setattr(env_module, "bao_read_kv", _must_not_be_called)

    assert env_module.env_get("CHAIN_API_TEST_VALUE", default="fallback") == "fallback"
