"""
Tests for the ``issuelog`` command line.
"""
import pytest
from unittest.mock import patch

from issuelog import __version__
from issuelog.cli import main
from issuelog.core.comment_client import GitHubCommentClient
from issuelog.errors import PostFailedError
from issuelog.utils.offset_store import load_offset, save_offset


@pytest.fixture()
def state(tmp_path):
    return str(tmp_path / "state.json")


def test_help_and_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["help"])
    assert exc_info.value.code == 0
    assert "USAGE" in capsys.readouterr().out

    with pytest.raises(SystemExit):
        main([])
    capsys.readouterr()

    with pytest.raises(SystemExit):
        main(["--version"])
    assert capsys.readouterr().out.strip() == f"issuelog {__version__}"


def test_upload_and_remember_offset(github_env, log_file, state, capsys):
    path = log_file(b"\x1b[33mwarn\x1b[0m\n")

    with patch.object(GitHubCommentClient, "post_comment") as mock_post:
        assert main(["7", path, "--state", state]) == 0
        mock_post.assert_called_once_with(7, "```\nwarn\n\n```\n")

    assert capsys.readouterr().out.strip() == "14"
    assert load_offset(state, 7, path) == 14

    log_file(b"more\n", append=True)
    with patch.object(GitHubCommentClient, "post_comment") as mock_post:
        assert main(["7", path, "--state", state]) == 0
        mock_post.assert_called_once_with(7, "```\nmore\n\n```\n")
    assert load_offset(state, 7, path) == 19


def test_explicit_offset_and_keep_escapes(github_env, log_file, state, capsys):
    path = log_file(b"skip\x1b[1mkeep\n")

    with patch.object(GitHubCommentClient, "post_comment") as mock_post:
        assert main(["3", path, "--offset", "4", "--keep-escapes", "--state", state]) == 0
        mock_post.assert_called_once_with(3, "```\n\x1b[1mkeep\n\n```\n")
    assert capsys.readouterr().out.strip() == "13"


def test_repo_flag(monkeypatch, log_file, state):
    monkeypatch.setenv("GITHUB_TOKEN", "t0ken")
    monkeypatch.delenv("GITHUB_REPOSITORY", raising=False)
    path = log_file(b"x\n")

    with patch.object(GitHubCommentClient, "post_comment"):
        assert main(["1", path, "--repo", "me/mine", "--state", state]) == 0


def test_failed_post_keeps_offset(github_env, log_file, state, capsys):
    path = log_file(b"new output\n")
    save_offset(state, 2, path, 4)

    with patch.object(GitHubCommentClient, "post_comment", side_effect=PostFailedError("503")):
        assert main(["2", path, "--state", state]) == 1

    assert "Error:" in capsys.readouterr().err
    assert load_offset(state, 2, path) == 4


def test_too_large_exits_nonzero(github_env, log_file, state, capsys):
    path = log_file(b"q" * 65001)

    with patch.object(GitHubCommentClient, "post_comment") as mock_post:
        assert main(["2", path, "--state", state]) == 1
        mock_post.assert_not_called()

    assert "too large" in capsys.readouterr().err
    assert load_offset(state, 2, path) == 0


def test_missing_token(monkeypatch, log_file, state, capsys):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo/repo")
    path = log_file(b"x\n")

    assert main(["1", path, "--state", state]) == 1
    assert "GITHUB_TOKEN" in capsys.readouterr().err


def test_unsaved_offset_reports_resume_point(github_env, log_file, tmp_path, capsys):
    path = log_file(b"posted once\n")
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    state = str(blocker / "state.json")

    with patch.object(GitHubCommentClient, "post_comment") as mock_post:
        assert main(["4", path, "--state", state]) == 1
        assert mock_post.called

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "comment posted but offset 12 was not saved" in captured.err
    assert "--offset 12" in captured.err


def test_invalid_timeout_setting_exits_nonzero(github_env, log_file, state, capsys):
    path = log_file(b"x\n")
    bad_settings = {"timeout": "abc", "remove_esc_sequences": True}

    with patch("issuelog.cli.load_settings", return_value=bad_settings), \
            patch.object(GitHubCommentClient, "post_comment") as mock_post:
        assert main(["1", path, "--state", state]) == 1
        mock_post.assert_not_called()

    assert "invalid timeout 'abc'" in capsys.readouterr().err
