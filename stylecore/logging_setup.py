# stylecore/logging_setup.py
from __future__ import annotations

import logging
import logging.handlers
import queue
import sys
import threading
from dataclasses import dataclass
from pathlib import Path

from stylecore.json_store import ensure_dir
from stylecore.logging_context import corr_id_var, attribute_var, action_var

LOG_FORMAT = (
    "%(asctime)s %(levelname)s "
    "[pid=%(process)d tid=%(thread)d] "
    "%(name)s:%(funcName)s:%(lineno)d "
    "corr=%(corr_id)s attr=%(attribute)s action=%(action)s - %(message)s"
)

class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # formatter references these fields, so they must always exist;
        # values passed via extra= win over the context vars
        if not hasattr(record, "corr_id"):
            record.corr_id = corr_id_var.get()
        if not hasattr(record, "attribute"):
            record.attribute = attribute_var.get()
        if not hasattr(record, "action"):
            record.action = action_var.get()
        return True

@dataclass
class LoggingRuntime:
    listener: logging.handlers.QueueListener

    def stop(self) -> None:
        try:
            self.listener.stop()
        except Exception:
            logging.getLogger(__name__).debug("log listener already stopped")

def setup_logging(
    *,
    app_data_dir: Path,
    level: str = "INFO",
    keep_days_app: int = 14,
    keep_days_error: int = 30,
    console: bool = False,
) -> LoggingRuntime:
    logs_dir = app_data_dir / "logs"
    ensure_dir(logs_dir)

    log_q: queue.Queue[logging.LogRecord] = queue.Queue(maxsize=20_000)
    formatter = logging.Formatter(fmt=LOG_FORMAT)

    app_fh = logging.handlers.TimedRotatingFileHandler(
        filename=str(logs_dir / "app.log"),
        when="midnight",
        backupCount=int(keep_days_app),
        encoding="utf-8",
    )
    app_fh.setLevel(logging.INFO)
    app_fh.setFormatter(formatter)
    app_fh.addFilter(ContextFilter())

    err_fh = logging.handlers.TimedRotatingFileHandler(
        filename=str(logs_dir / "error.log"),
        when="midnight",
        backupCount=int(keep_days_error),
        encoding="utf-8",
    )
    err_fh.setLevel(logging.ERROR)
    err_fh.setFormatter(formatter)
    err_fh.addFilter(ContextFilter())

    handlers: list[logging.Handler] = [app_fh, err_fh]

    if console:
        ch = logging.StreamHandler(stream=sys.stderr)
        ch.setLevel(logging.DEBUG)
        ch.setFormatter(formatter)
        ch.addFilter(ContextFilter())
        handlers.append(ch)

    # root only gets the QueueHandler; the listener thread does the writing
    qh = logging.handlers.QueueHandler(log_q)
    qh.setLevel(logging.DEBUG)
    qh.addFilter(ContextFilter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(qh)

    listener = logging.handlers.QueueListener(
        log_q,
        *handlers,
        respect_handler_level=True,
    )
    listener.start()

    _install_global_exception_hooks()

    logging.getLogger(__name__).info(
        "logging initialized",
        extra={"action": "boot"},
    )

    return LoggingRuntime(listener=listener)

def _install_global_exception_hooks() -> None:
    log = logging.getLogger("unhandled")

    def excepthook(exc_type, exc, tb):
        log.critical("unhandled exception (main thread)", exc_info=(exc_type, exc, tb))

    sys.excepthook = excepthook

    def th_excepthook(args: threading.ExceptHookArgs):
        log.critical(
            "unhandled exception (thread)",
            extra={"action": "thread_excepthook"},
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )

    threading.excepthook = th_excepthook
