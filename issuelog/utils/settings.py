"""
Workspace settings — loads / generates ``.issuelog.yaml`` in the root dir.

The root is the current working directory unless ``ISSUELOG_ROOT`` points
elsewhere.  Users can edit the file to change the target repository,
request timeout and logging defaults.
"""
import os
import yaml
from typing import Any, Dict

from issuelog._config import (
    SETTINGS_FILENAME, STATE_FILENAME, ROOT_DIR,
    DEFAULT_API_URL, DEFAULT_TIMEOUT,
)


_DEFAULTS: Dict[str, Any] = {
    # GitHub
    "api_url": DEFAULT_API_URL,
    "repo": None,                       # "owner/name"; GITHUB_REPOSITORY wins
    "timeout": DEFAULT_TIMEOUT,         # seconds per request
    # Upload
    "remove_esc_sequences": True,
    "state_file": STATE_FILENAME,       # relative to the root dir
    # Logging
    "log_enabled": True,
    "log_level": "WARNING",             # DEBUG | INFO | WARNING | ERROR | CRITICAL
}

_TEMPLATE = """\
# ═══════════════════════════════════════════════════════════════
#  issuelog settings
#  Delete this file to reset all values to defaults.
# ═══════════════════════════════════════════════════════════════

# ── GitHub ──────────────────────────────────────────────────
api_url: https://api.github.com
# repo: owner/name                 # GITHUB_REPOSITORY takes precedence
timeout: 30                        # seconds per request

# ── Upload ──────────────────────────────────────────────────
remove_esc_sequences: true         # strip ANSI colour codes and backspaces
state_file: .issuelog_state.json   # where uploaded offsets are remembered

# ── Logging ─────────────────────────────────────────────────
log_enabled: true
log_level: WARNING                 # DEBUG | INFO | WARNING | ERROR | CRITICAL
"""

# ── Module-level cache ───────────────────────────────────────
_cached: Dict[str, Any] = {}


def _settings_path(root_dir: str = ROOT_DIR) -> str:
    return os.path.join(root_dir, SETTINGS_FILENAME)


def ensure_settings_file(root_dir: str = ROOT_DIR) -> str:
    """Create ``.issuelog.yaml`` with defaults if it doesn't exist.

    Returns the file path.
    """
    path = _settings_path(root_dir)
    if not os.path.exists(path):
        os.makedirs(root_dir, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(_TEMPLATE)
    return path


def load_settings(root_dir: str = ROOT_DIR) -> Dict[str, Any]:
    """Load settings from ``root_dir``, falling back to defaults.

    Result is cached in-process; call ``reload_settings`` to refresh.
    """
    global _cached
    path = _settings_path(root_dir)
    merged = dict(_DEFAULTS)
    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if isinstance(data, dict):
                merged.update(data)
        except (OSError, yaml.YAMLError):
            pass  # unreadable file -> defaults
    _cached = merged
    return merged


def get(key: str, default: Any = None) -> Any:
    """Quick accessor for a single setting (uses cache)."""
    if not _cached:
        load_settings(ROOT_DIR)
    return _cached.get(key, _DEFAULTS.get(key, default))


def reload_settings(root_dir: str = ROOT_DIR) -> Dict[str, Any]:
    """Force reload from disk."""
    return load_settings(root_dir)


def state_path(root_dir: str = ROOT_DIR) -> str:
    """Absolute path of the offset state file."""
    name = get("state_file") or STATE_FILENAME
    if os.path.isabs(name):
        return name
    return os.path.join(root_dir, name)
