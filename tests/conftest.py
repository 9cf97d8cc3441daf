"""
Shared fixtures for issuelog tests.
"""
import pytest

import issuelog.utils.settings as settings


class RecordingClient:
    """Comment sink that remembers every post."""

    def __init__(self, error: Exception = None):
        self.posts = []
        self.error = error

    def post_comment(self, issue, body):
        if self.error is not None:
            raise self.error
        self.posts.append((issue, body))


@pytest.fixture()
def client():
    return RecordingClient()


@pytest.fixture()
def failing_client():
    return RecordingClient(error=RuntimeError("boom"))


@pytest.fixture()
def log_file(tmp_path):
    """Return a helper that writes raw bytes to ``build.log`` and returns its path."""
    path = tmp_path / "build.log"

    def _write(data: bytes, append: bool = False) -> str:
        with open(path, "ab" if append else "wb") as f:
            f.write(data)
        return str(path)

    return _write


@pytest.fixture(autouse=True)
def reset_settings_cache():
    yield
    settings._cached.clear()


@pytest.fixture()
def github_env(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "t0ken")
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo/repo")
