"""
CLI entry point — ``issuelog <issue> <file>`` or ``issuelog help``.
"""

import argparse
import sys
import textwrap
from typing import List, Optional

from . import __version__ as _VERSION
from .core.comment_client import GitHubCommentClient
from .core.uploader import upload_result
from .errors import IssueLogError
from .utils import get_logger
from .utils.offset_store import load_offset, save_offset
from .utils.settings import load_settings, state_path

logger = get_logger(__name__)

# ─── Help text ────────────────────────────────────────────────

_HELP = textwrap.dedent(
    f"""
issuelog v{_VERSION}

USAGE
    issuelog <issue> <file>            Post the new part of <file> to <issue>
    issuelog help | version            Show help / version

OPTIONS
    --offset N          Start at byte N instead of the remembered offset
    --state PATH        Offset state file (default from .issuelog.yaml)
    --keep-escapes      Do not strip ANSI escape sequences / backspaces
    --repo OWNER/NAME   Target repository (default: $GITHUB_REPOSITORY)

ENVIRONMENT
    GITHUB_TOKEN        API token used to post the comment

EXAMPLES
    Run it after every build step; each call posts only what was appended
    since the previous call and prints the new offset:
       $ issuelog 42 build.log
    """.strip()
)


def _print_help():
    print(_HELP)
    sys.exit(0)


def _print_version():
    print(f"issuelog {_VERSION}")
    sys.exit(0)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="issuelog", add_help=False)
    parser.add_argument("issue", type=int)
    parser.add_argument("file")
    parser.add_argument("--offset", type=int, default=None)
    parser.add_argument("--state", default=None)
    parser.add_argument("--keep-escapes", action="store_true")
    parser.add_argument("--repo", default=None)
    return parser


# ─── Main entry ───────────────────────────────────────────────


def main(argv: Optional[List[str]] = None) -> int:
    """``issuelog <issue> <file>`` — upload one chunk, print the next offset."""
    argv = sys.argv[1:] if argv is None else argv

    if not argv or argv[0] in ("help", "-h", "--help"):
        _print_help()
    if argv[0] in ("version", "-v", "--version"):
        _print_version()

    args = _build_parser().parse_args(argv)
    settings = dict(load_settings())
    if args.repo:
        settings["repo"] = args.repo
    state_file = args.state or state_path()

    try:
        client = GitHubCommentClient.from_env(settings)
        offset = args.offset
        if offset is None:
            offset = load_offset(state_file, args.issue, args.file)

        remove_esc = settings.get("remove_esc_sequences", True) and not args.keep_escapes
        next_offset = upload_result(client, args.issue, args.file, offset, remove_esc)
    except IssueLogError as exc:
        logger.debug("Upload failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    # The comment is already posted; losing the offset here means the next
    # run repeats it unless the user resumes by hand.
    try:
        save_offset(state_file, args.issue, args.file, next_offset)
    except OSError as exc:
        logger.debug("Saving offset failed", exc_info=True)
        print(
            f"Error: comment posted but offset {next_offset} was not saved to "
            f"{state_file}: {exc}\n"
            f"Resume with --offset {next_offset}",
            file=sys.stderr,
        )
        return 1

    print(next_offset)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
