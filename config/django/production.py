from .base import *  # noqa

env.read_env(BASE_DIR(".env.backend"))

DEBUG = env.bool("DEBUG", default=False)

SECRET_KEY = env_get("DJANGO_SECRET_KEY")

DATABASES = {
    "default": env.db_url_config(env_get("DATABASE_URL")),
}
DATABASES["default"]["CONN_MAX_AGE"] = env.int("CONN_MAX_AGE", default=60)
DATABASES["default"]["CONN_HEALTH_CHECKS"] = True

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=[])

USE_X_FORWARDED_HOST = True
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_CONTENT_TYPE_NOSNIFF = True
