import structlog

from config.env import env

LOG_LEVEL = env("LOG_LEVEL", default="INFO")
LOG_RENDERER = env("LOG_RENDERER", default="logfmt")  # logfmt | console | json

_renderers = {
    "logfmt": structlog.processors.LogfmtRenderer(),
    "console": structlog.dev.ConsoleRenderer(colors=False),
    "json": structlog.processors.JSONRenderer(),
}

_pre_chain = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.ExtraAdder(),
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "structured": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": _renderers.get(LOG_RENDERER, _renderers["logfmt"]),
            "foreign_pre_chain": _pre_chain,
        },
    },
    "handlers": {
        "default": {
            "class": "logging.StreamHandler",
            "formatter": "structured",
        },
    },
    "root": {"level": LOG_LEVEL, "handlers": ["default"]},
    "loggers": {
        "django_structlog": {"level": LOG_LEVEL, "handlers": ["default"], "propagate": False},
        "src": {"level": LOG_LEVEL, "handlers": ["default"], "propagate": False},
    },
}

structlog.configure(
    processors=[
        *_pre_chain,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)
