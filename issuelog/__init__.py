"""issuelog — stream a growing log file into GitHub issue comments."""
from importlib.metadata import version, PackageNotFoundError

from ._config import MAX_UNREAD_BYTES  # noqa: F401
from .errors import (  # noqa: F401
    IssueLogError, ConfigError, ContentNotFoundError, ContentReadError,
    ContentTooLargeError, PostFailedError,
)
from .core.comment_client import CommentClient, GitHubCommentClient  # noqa: F401
from .core.uploader import format_as_code_block, upload_result  # noqa: F401
from .utils.ansi_utils import sanitize  # noqa: F401

try:
    __version__ = version("issuelog")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
