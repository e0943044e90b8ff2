"""Tests for the provider registry."""

from unittest.mock import MagicMock

from gitlinks.remotes import DEFAULT_PROVIDERS, RemoteProviderRegistry
from gitlinks.remotes.github import GitHubRemote
from gitlinks.remotes.gitlab import GitLabRemote
from gitlinks.types import RemotesConfig


class TestRemoteProviderRegistry:
    """Tests for table ownership and reloads."""

    def test_default_table(self):
        registry = RemoteProviderRegistry()
        assert registry.table == DEFAULT_PROVIDERS
        assert isinstance(registry.resolve("github.com", "owner/repo"), GitHubRemote)

    def test_reload_swaps_table(self):
        """Reload publishes a new table; the old one is left intact."""
        registry = RemoteProviderRegistry()
        old_table = registry.table

        new_table = registry.reload([RemotesConfig(type="GitLab", domain="git.corp.com")])

        assert registry.table is new_table
        assert new_table is not old_table
        assert old_table == DEFAULT_PROVIDERS
        assert isinstance(registry.resolve("git.corp.com", "team/repo"), GitLabRemote)

    def test_reload_to_empty(self):
        registry = RemoteProviderRegistry([RemotesConfig(type="GitLab", domain="git.corp.com")])
        registry.reload(None)
        assert registry.resolve("git.corp.com", "team/repo") is None

    def test_resolve_url(self):
        registry = RemoteProviderRegistry()
        provider = registry.resolve_url("git@gitlab.com:group/project.git")
        assert isinstance(provider, GitLabRemote)
        assert provider.path == "group/project"

    def test_resolve_url_unparseable(self):
        assert RemoteProviderRegistry().resolve_url("/local/path") is None

    def test_reporter_passed_through(self):
        reporter = MagicMock()
        registry = RemoteProviderRegistry([RemotesConfig(type="GitHub", matcher="([")], reporter=reporter)
        assert registry.resolve("github.com", "owner/repo") is None
        reporter.error.assert_called_once()
