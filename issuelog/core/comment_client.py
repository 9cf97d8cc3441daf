"""
Comment sinks: anything with ``post_comment(issue, body)``.

``GitHubCommentClient`` posts through the GitHub REST API with
``requests``.  Authentication and transport live here; the upload
pipeline only sees the single operation.
"""
import os
from typing import Any, Dict, Optional, Protocol

import requests

from issuelog._config import ENV_KEY_REPO, ENV_KEY_TOKEN, DEFAULT_API_URL, DEFAULT_TIMEOUT
from issuelog.errors import ConfigError, PostFailedError
from issuelog.utils import get_logger

logger = get_logger(__name__)


class CommentClient(Protocol):
    def post_comment(self, issue: int, body: str) -> None:
        """Post ``body`` as a new comment on ``issue``; raise on failure."""
        ...


class GitHubCommentClient:
    """Posts issue comments to a single GitHub repository."""

    def __init__(
        self,
        repo: str,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.repo = repo
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._headers = {
            "Authorization": f"token {token}",
            "Accept": "application/vnd.github.v3+json",
        }

    @classmethod
    def from_env(cls, settings: Optional[Dict[str, Any]] = None) -> "GitHubCommentClient":
        """Build a client from ``GITHUB_TOKEN`` / ``GITHUB_REPOSITORY``.

        ``settings`` (see ``issuelog.utils.settings``) supplies ``repo``,
        ``api_url`` and ``timeout`` when the environment does not.
        """
        settings = settings or {}
        token = os.environ.get(ENV_KEY_TOKEN)
        if not token:
            raise ConfigError(f"{ENV_KEY_TOKEN} is not set")
        repo = os.environ.get(ENV_KEY_REPO) or settings.get("repo")
        if not repo:
            raise ConfigError(f"no repository: set {ENV_KEY_REPO} or 'repo' in settings")
        timeout = settings.get("timeout") or DEFAULT_TIMEOUT
        try:
            timeout = float(timeout)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"invalid timeout {timeout!r}") from exc
        if timeout <= 0:
            raise ConfigError(f"invalid timeout {timeout!r}")
        return cls(
            repo,
            token,
            api_url=settings.get("api_url") or DEFAULT_API_URL,
            timeout=timeout,
        )

    def comments_url(self, issue: int) -> str:
        return f"{self.api_url}/repos/{self.repo}/issues/{int(issue)}/comments"

    def post_comment(self, issue: int, body: str) -> None:
        url = self.comments_url(issue)
        logger.debug("POST %s (%d chars)", url, len(body))
        try:
            resp = self._session.post(
                url, headers=self._headers, json={"body": body}, timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise PostFailedError(f"posting to issue #{issue} failed: {exc}", cause=exc) from exc

        if not resp.ok:
            raise PostFailedError(
                f"posting to issue #{issue} failed: {resp.status_code} {resp.text}",
                status_code=resp.status_code,
            )
