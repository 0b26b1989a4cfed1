import environ
from django.core.exceptions import ImproperlyConfigured
import logging
from functools import lru_cache

import hvac

log = logging.getLogger(__name__)

env = environ.Env()

BASE_DIR = environ.Path(__file__) - 2
APPS_DIR = BASE_DIR.path("src")


def env_to_int(name: str, default: int, *, minimum: int = 0, maximum: int | None = None) -> int:
    value = env.int(name, default=default)
    if value < minimum or (maximum is not None and value > maximum):
        raise ImproperlyConfigured(
            f"Env value {name}={value!r} is out of range [{minimum}, {maximum}]"
        )
    return value


# OpenBao / Vault KV v2, used for secrets in production
OPENBAO_ADDR = env("OPENBAO_ADDR", default="http://127.0.0.1:8200")
OPENBAO_TOKEN = env("OPENBAO_TOKEN", default="")
OPENBAO_ROLE_ID = env("OPENBAO_ROLE_ID", default="")
OPENBAO_SECRET_ID = env("OPENBAO_SECRET_ID", default="")
OPENBAO_KV_MOUNT = env("OPENBAO_KV_MOUNT", default="secret")
OPENBAO_KV_PATH = env("OPENBAO_KV_PATH", default="chain-api")


def bao_enabled() -> bool:
    return bool(OPENBAO_TOKEN or (OPENBAO_ROLE_ID and OPENBAO_SECRET_ID))


def _bao_client() -> hvac.Client:
    client = hvac.Client(url=OPENBAO_ADDR, timeout=5)
    if OPENBAO_TOKEN:
        client.token = OPENBAO_TOKEN
    elif OPENBAO_ROLE_ID and OPENBAO_SECRET_ID:
        resp = client.auth.approle.login(role_id=OPENBAO_ROLE_ID, secret_id=OPENBAO_SECRET_ID)
        client.token = resp["auth"]["client_token"]
    return client


@lru_cache(maxsize=8)
def bao_read_kv(path=None) -> dict:
    """
    Read the KV v2 secret at {OPENBAO_KV_MOUNT}/{path or OPENBAO_KV_PATH}.
    Cached per process.
    """
    resp = _bao_client().secrets.kv.v2.read_secret_version(
        mount_point=OPENBAO_KV_MOUNT, path=path or OPENBAO_KV_PATH
    )
    return resp["data"]["data"] or {}


def env_get(name: str, default=None, *, kv_path=None, prefer_env: bool = True):
    """
    Lookup order:
      1) process environment / .env (django-environ)
      2) OpenBao KV v2, when credentials are configured
      3) default
    """
    if prefer_env:
        val = env(name, default=None)
        if val is not None:
            return val
    if not bao_enabled():
        return default
    try:
        data = bao_read_kv(kv_path)
    except Exception as e:
        log.warning("env_get: OpenBao lookup failed for %s: %s (using default)", name, e)
        return default
    return data.get(name, default)
