"""Tests for reading repository remotes."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from gitlinks.git import list_remotes


class TestListRemotes:
    """Tests for `git remote -v` parsing."""

    def test_parses_fetch_urls(self):
        output = (
            "origin\tgit@github.com:owner/repo.git (fetch)\n"
            "origin\tgit@github.com:owner/repo.git (push)\n"
            "upstream\thttps://gitlab.com/group/project.git (fetch)\n"
            "upstream\thttps://gitlab.com/group/project.git (push)\n"
        )
        with patch("gitlinks.git.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0, stdout=output, stderr="")
            remotes = list_remotes("/repo")

        assert remotes == [
            ("origin", "git@github.com:owner/repo.git"),
            ("upstream", "https://gitlab.com/group/project.git"),
        ]
        assert mock_run.call_args.args[0] == ["git", "remote", "-v"]
        assert mock_run.call_args.kwargs["cwd"] == "/repo"

    def test_no_remotes(self):
        with patch("gitlinks.git.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
            assert list_remotes("/repo") == []

    def test_not_a_repository(self):
        with patch("gitlinks.git.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=128, stdout="", stderr="fatal: not a git repository")
            with pytest.raises(ValueError, match="Not a git repository"):
                list_remotes("/tmp")

    def test_git_missing(self):
        with patch("gitlinks.git.subprocess.run", side_effect=FileNotFoundError("git")):
            with pytest.raises(ValueError, match="Failed to run git"):
                list_remotes("/repo")

    def test_timeout(self):
        with patch("gitlinks.git.subprocess.run", side_effect=subprocess.TimeoutExpired("git", 10)):
            with pytest.raises(ValueError, match="Failed to run git"):
                list_remotes("/repo")
