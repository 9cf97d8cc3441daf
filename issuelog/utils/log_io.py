"""
Low-level log file I/O: read the not-yet-uploaded tail of a file.
"""
import os

from issuelog._config import MAX_UNREAD_BYTES
from issuelog.errors import ContentNotFoundError, ContentReadError, ContentTooLargeError
from issuelog.utils import get_logger

logger = get_logger(__name__)


def read_content(log_path: str, offset: int) -> bytes:
    """
    Read everything in `log_path` from byte `offset` to end of file.

    Raises:
        ContentNotFoundError: the file is missing or cannot be opened.
        ContentTooLargeError: more than ``MAX_UNREAD_BYTES`` remain unread.
            Checked before seeking, so nothing is read.
        ContentReadError: stat, seek or read failed, including an offset
            past the current end of file (e.g. the file was truncated).
    """
    try:
        f = open(log_path, "rb")
    except OSError as exc:
        raise ContentNotFoundError(log_path, cause=exc) from exc

    with f:
        try:
            size = os.fstat(f.fileno()).st_size
        except OSError as exc:
            raise ContentReadError(f"cannot stat {log_path!r}: {exc}", cause=exc) from exc

        unread = size - offset
        if unread > MAX_UNREAD_BYTES:
            logger.debug("Refusing %s: %d unread bytes at offset %d", log_path, unread, offset)
            raise ContentTooLargeError(log_path, unread, MAX_UNREAD_BYTES)

        # A truncated file leaves the stored offset past EOF; report it
        # instead of resetting to 0.
        if offset < 0 or offset > size:
            raise ContentReadError(
                f"cannot seek {log_path!r} to offset {offset} (file size {size})"
            )
        try:
            f.seek(offset, os.SEEK_SET)
            content = f.read()
        except OSError as exc:
            raise ContentReadError(f"cannot read {log_path!r}: {exc}", cause=exc) from exc

    logger.debug("Read %d bytes from %s at offset %d", len(content), log_path, offset)
    return content
