"""
Upload the unread tail of a file as a fenced comment on an issue.

One call = read → sanitize → fence → post.  The returned offset counts
raw bytes consumed from the file, not characters posted, so the next call
resumes exactly where this one stopped even when sanitizing shrank the
text.  Any exception means nothing was uploaded.
"""
from issuelog._config import CODE_FENCE
from issuelog.core.comment_client import CommentClient
from issuelog.errors import PostFailedError
from issuelog.utils import get_logger
from issuelog.utils.ansi_utils import sanitize
from issuelog.utils.log_io import read_content

logger = get_logger(__name__)


def format_as_code_block(content: str) -> str:
    """Wrap ``content`` in a triple-backtick fence.

    Fences inside ``content`` are not escaped and will close the block early.
    """
    return f"{CODE_FENCE}\n{content}\n{CODE_FENCE}\n"


def upload_result(
    client: CommentClient,
    issue: int,
    filepath: str,
    offset: int,
    remove_esc_sequences: bool,
) -> int:
    """Post ``filepath[offset:]`` to ``issue`` and return the next offset.

    :raises ContentNotFoundError, ContentReadError, ContentTooLargeError:
        from reading the file; nothing is posted.
    :raises PostFailedError: the client failed; the caller must keep
        its old offset.
    """
    raw = read_content(filepath, offset)
    bytes_read = len(raw)

    content = sanitize(raw.decode("utf-8", errors="replace"), remove_esc_sequences)
    comment = format_as_code_block(content)

    try:
        client.post_comment(issue, comment)
    except PostFailedError:
        raise
    except Exception as exc:
        raise PostFailedError(f"posting to issue #{issue} failed: {exc}", cause=exc) from exc

    logger.info(
        "Posted %d bytes of %s (offset %d) to issue #%s",
        bytes_read, filepath, offset, issue,
    )
    return offset + bytes_read
