import multiprocessing
import os

import structlog


cpu_count = multiprocessing.cpu_count()
workers = int(os.environ.get("GUNICORN_WORKERS", min(cpu_count * 2 + 1, 10)))
worker_class = "sync"

# Request lifecycle (and any open transaction) is bounded here, not in the app
timeout = 60
graceful_timeout = 30
keepalive = 5

max_requests = 1000
max_requests_jitter = 50
preload_app = True

loglevel = os.environ.get("LOG_LEVEL", "info").lower()
errorlog = "-"
accesslog = "-"
access_log_format = '%(h)s "%(r)s" %(s)s %(b)s %(M)sms "%(a)s"'


def gunicorn_event_name_mapper(logger, name, event_dict):
    """Tag gunicorn's own lines so they can be filtered apart from app logs."""
    logger_name = event_dict.get("logger")
    raw_event = event_dict.get("event")
    if logger_name not in ("gunicorn.error", "gunicorn.access") or not isinstance(raw_event, str):
        return event_dict

    event_dict["message"] = raw_event
    if logger_name == "gunicorn.access":
        event_dict["event"] = "gunicorn.request_handling"
    elif raw_event.lower().startswith(("starting", "listening", "using", "booting")):
        event_dict["event"] = "gunicorn.booting"
    elif raw_event.lower().startswith("handling signal"):
        event_dict["event"] = "gunicorn.signal_handling"
    return event_dict


pre_chain = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    gunicorn_event_name_mapper,
]

logconfig_dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "root": {"level": "INFO", "handlers": ["default"]},
    "loggers": {
        "gunicorn.error": {"level": "INFO", "handlers": ["default"], "propagate": False},
        "gunicorn.access": {"level": "INFO", "handlers": ["default"], "propagate": False},
    },
    "handlers": {
        "default": {"class": "logging.StreamHandler", "formatter": "logfmt_formatter"},
    },
    "formatters": {
        "logfmt_formatter": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.processors.LogfmtRenderer(),
            "foreign_pre_chain": pre_chain,
        }
    },
}
