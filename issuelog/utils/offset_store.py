"""
Offset persistence for the command-line caller.

The upload pipeline itself is stateless; whoever drives it remembers how
far each file has been posted.  State is a flat JSON object keyed by
``"<issue>:<absolute path>"``.
"""
import json
import os
import tempfile
from typing import Any, Dict

from issuelog.utils import get_logger

logger = get_logger(__name__)


def _state_key(issue: int, path: str) -> str:
    return f"{int(issue)}:{os.path.abspath(path)}"


def _read_raw(state_path: str) -> Dict[str, Any]:
    if not os.path.exists(state_path):
        return {}
    try:
        with open(state_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable state file %s: %s", state_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_state(state_path: str) -> Dict[str, int]:
    """Load the valid offsets; missing or corrupt files read as empty."""
    return {
        k: v for k, v in _read_raw(state_path).items()
        if isinstance(v, int) and not isinstance(v, bool) and v >= 0
    }


def load_offset(state_path: str, issue: int, path: str) -> int:
    """Return the stored offset for (issue, path), or 0."""
    return load_state(state_path).get(_state_key(issue, path), 0)


def save_offset(state_path: str, issue: int, path: str, offset: int) -> None:
    """Record ``offset`` for (issue, path).

    The file is rewritten through a temp file and ``os.replace`` so a
    crash never leaves half-written JSON behind.  Entries this module
    does not understand are written back untouched.
    """
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")
    state = _read_raw(state_path)
    state[_state_key(issue, path)] = offset

    directory = os.path.dirname(os.path.abspath(state_path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".issuelog_", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(state, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, state_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
    logger.debug("Saved offset %d for issue #%s, %s", offset, issue, path)
