import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


LOG_FILE_NAME = "todo_manager.log"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5
# Library loggers that stay at WARNING unless debug logging is on.
_QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "uvicorn.access")
_MARKER = "_todo_log_file"


def _quiet_libraries(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level)


def setup_logging(log_dir: Path, debug: bool = False) -> Path:
    """Send app logs to stdout and to a rotating file under ``log_dir``.

    Safe to call more than once: later calls only change the level. Returns
    the path of the log file in use.
    """
    level = logging.DEBUG if debug else logging.INFO
    root = logging.getLogger()
    _quiet_libraries(debug)

    configured = getattr(root, _MARKER, None)
    if configured is not None:
        root.setLevel(level)
        for handler in root.handlers:
            handler.setLevel(level)
        return configured

    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = [
        logging.StreamHandler(sys.stdout),
        RotatingFileHandler(log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"),
    ]
    root.handlers.clear()
    root.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    setattr(root, _MARKER, log_file)
    logging.getLogger(__name__).debug("logging.configured file=%s", log_file)
    return log_file
