"""
Internal configuration constants for issuelog.

All environment variable names, file naming conventions and system
constraints are defined here.  Changing a constant in this file
propagates everywhere automatically.
"""
import os

# ═══════════════════════════════════════════════════════════════
#  Environment Variable Names
# ═══════════════════════════════════════════════════════════════
ENV_KEY_ROOT = "ISSUELOG_ROOT"             # directory holding .issuelog.yaml
ENV_KEY_TOKEN = "GITHUB_TOKEN"             # API token used to post comments
ENV_KEY_REPO = "GITHUB_REPOSITORY"         # "owner/name"

# ═══════════════════════════════════════════════════════════════
#  Directory / File Names
# ═══════════════════════════════════════════════════════════════
ROOT_DIR = os.getenv(ENV_KEY_ROOT, os.getcwd())

SETTINGS_FILENAME = ".issuelog.yaml"
STATE_FILENAME = ".issuelog_state.json"

# ═══════════════════════════════════════════════════════════════
#  System Constraints & Constants
# ═══════════════════════════════════════════════════════════════
# A GitHub issue comment holds at most 65536 characters; keep some
# headroom for the code fence.
MAX_UNREAD_BYTES = 65000

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0

CODE_FENCE = "```"
