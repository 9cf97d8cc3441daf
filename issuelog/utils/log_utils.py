"""
Library logging — one ``issuelog`` root logger shared by every module.

The console handler writes to stderr so stdout carries only the offset
printed by the CLI.  ``log_enabled`` / ``log_level`` in ``.issuelog.yaml``
control it.
"""
import logging
import sys
import threading
from typing import Optional

_DATEFMT = "%Y-%m-%d %H:%M:%S"
_CONSOLE_FORMAT = "\033[32m%(asctime)s \033[33m[%(levelname)s] \033[34m%(name)s:%(lineno)d \033[0m%(message)s"
_FILE_FORMAT = "%(asctime)s [%(levelname)s %(name)s:%(funcName)s:%(lineno)d] %(message)s"

_LOGGER_LOCK = threading.RLock()
_ROOT_LOGGER: Optional[logging.Logger] = None


def get_library_root() -> str:
    return __name__.split(".")[0]


def _root_logger() -> logging.Logger:
    """Create and configure the ``issuelog`` logger on first use."""
    global _ROOT_LOGGER

    with _LOGGER_LOCK:
        if _ROOT_LOGGER is not None:
            return _ROOT_LOGGER

        from issuelog.utils.settings import get as _get_setting

        root = logging.getLogger(get_library_root())
        root.propagate = False

        if not _get_setting("log_enabled", True):
            # log calls short-circuit after an int compare
            root.setLevel(logging.CRITICAL + 1)
        else:
            console = logging.StreamHandler(sys.stderr)
            console.setFormatter(logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATEFMT))
            console.setLevel(str(_get_setting("log_level", "WARNING")).upper())
            root.addHandler(console)
            root.setLevel(logging.DEBUG)

        _ROOT_LOGGER = root
        return root


def attach_file_handler(log_path: str, level: str = "DEBUG") -> logging.Handler:
    """Also write library logs to ``log_path``; returns the new handler.

    Works even when console logging is disabled in settings.
    """
    root = _root_logger()
    handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATEFMT))
    handler.setLevel(level)
    root.addHandler(handler)
    if root.level > handler.level:
        root.setLevel(handler.level)
    return handler


def get_logger(name: str = None) -> logging.Logger:
    if name == "__main__":
        name = get_library_root() + ".__main__"
    _root_logger()
    return logging.getLogger(name)
