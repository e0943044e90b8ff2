"""Provider table construction and remote provider resolution.

The provider table is an ordered tuple of (matcher, config, creator) rows.
User-defined remotes come first, in the order they were configured, and the
built-in hosts always follow in a fixed order. Resolution walks the table
and the first matching row creates the provider.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Protocol

from ..types import CustomRemoteType, RemotesConfig
from .azure_devops import AzureDevOpsRemote
from .bitbucket import BitbucketRemote
from .bitbucket_server import BitbucketServerRemote
from .custom import CustomRemote
from .github import GitHubRemote
from .gitlab import GitLabRemote
from .provider import RemoteProvider

# Source tag attached to errors reported by the resolver
RESOLVER_SOURCE = "RemoteProviderFactory"

logger = logging.getLogger(__name__)

ProviderCreator = Callable[[str, str], RemoteProvider]
ProviderResolver = Callable[[str, str], RemoteProvider | None]


class ErrorReporter(Protocol):
    """Receives exceptions the resolver absorbs."""

    def error(self, ex: BaseException, source: str) -> None: ...


class LoggingErrorReporter:
    """Report absorbed exceptions through the standard logging module."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def error(self, ex: BaseException, source: str) -> None:
        self._log.error("[%s] %s", source, ex, exc_info=(type(ex), ex, ex.__traceback__))


@dataclass(frozen=True)
class Matcher:
    """Exact domain or regex pattern used to select a table row.

    Exactly one of `domain` and `pattern` is set. Both are compared against
    the lower-cased runtime domain, so patterns carry no case flags.
    """
    domain: str | None = None
    pattern: str | None = None

    def __post_init__(self):
        if (self.domain is None) == (self.pattern is None):
            raise ValueError("Matcher needs exactly one of 'domain' or 'pattern'")

    @classmethod
    def exact(cls, domain: str) -> "Matcher":
        return cls(domain=domain.lower())

    @classmethod
    def regex(cls, pattern: str) -> "Matcher":
        return cls(pattern=pattern)

    def matches(self, key: str) -> bool:
        """Test a lower-cased domain.

        Raises:
            re.error: If the pattern text is not a valid regular expression
        """
        if self.domain is not None:
            return self.domain == key
        return re.search(self.pattern, key) is not None


@dataclass(frozen=True)
class ProviderTableEntry:
    """One row of the provider table."""
    matcher: Matcher
    config: RemotesConfig | None
    create: ProviderCreator


ProviderTable = tuple[ProviderTableEntry, ...]


# Built-in hosts, appended after user-defined remotes. Order matters:
# exact domains first, then the looser patterns.
DEFAULT_PROVIDERS: ProviderTable = (
    ProviderTableEntry(Matcher.exact("bitbucket.org"), None, BitbucketRemote),
    ProviderTableEntry(Matcher.exact("github.com"), None, GitHubRemote),
    ProviderTableEntry(Matcher.exact("gitlab.com"), None, GitLabRemote),
    ProviderTableEntry(Matcher.regex(r"\bdev\.azure\.com$"), None, AzureDevOpsRemote),
    ProviderTableEntry(Matcher.regex(r"\bbitbucket\b"), None, BitbucketServerRemote),
    ProviderTableEntry(Matcher.regex(r"\bgitlab\b"), None, GitLabRemote),
    ProviderTableEntry(
        Matcher.regex(r"\bvisualstudio\.com$"),
        None,
        lambda domain, path: AzureDevOpsRemote(domain, path, legacy=True),
    ),
)


def _bitbucket_creator(config: RemotesConfig) -> ProviderCreator:
    def create(domain: str, path: str) -> RemoteProvider:
        return BitbucketRemote(domain, path, config.protocol, config.name, custom=True)
    return create


def _bitbucket_server_creator(config: RemotesConfig) -> ProviderCreator:
    def create(domain: str, path: str) -> RemoteProvider:
        return BitbucketServerRemote(domain, path, config.protocol, config.name, custom=True)
    return create


def _custom_creator(config: RemotesConfig) -> ProviderCreator:
    def create(domain: str, path: str) -> RemoteProvider:
        return CustomRemote(domain, path, config.urls, config.protocol, config.name)
    return create


def _github_creator(config: RemotesConfig) -> ProviderCreator:
    def create(domain: str, path: str) -> RemoteProvider:
        return GitHubRemote(domain, path, config.protocol, config.name, custom=True)
    return create


def _gitlab_creator(config: RemotesConfig) -> ProviderCreator:
    def create(domain: str, path: str) -> RemoteProvider:
        return GitLabRemote(domain, path, config.protocol, config.name, custom=True)
    return create


_CUSTOM_CREATORS: dict[str, Callable[[RemotesConfig], ProviderCreator]] = {
    CustomRemoteType.BITBUCKET.value: _bitbucket_creator,
    CustomRemoteType.BITBUCKET_SERVER.value: _bitbucket_server_creator,
    CustomRemoteType.CUSTOM.value: _custom_creator,
    CustomRemoteType.GITHUB.value: _github_creator,
    CustomRemoteType.GITLAB.value: _gitlab_creator,
}


def get_custom_provider(config: RemotesConfig) -> ProviderCreator | None:
    """Return the creator for a user-defined remote.

    Args:
        config: The configured remote

    Returns:
        A ``(domain, path) -> RemoteProvider`` function, or None if the
        remote's type is not one this version knows
    """
    factory = _CUSTOM_CREATORS.get(config.type)
    if factory is None:
        return None
    return factory(config)


def build_provider_table(configs: Iterable[RemotesConfig] | None) -> ProviderTable:
    """Build the provider table from user-defined remotes.

    Args:
        configs: Configured remotes; None or empty yields only the built-ins

    Returns:
        User rows in input order followed by `DEFAULT_PROVIDERS`
    """
    rows: list[ProviderTableEntry] = []

    for config in configs or ():
        create = get_custom_provider(config)
        if create is None:
            logger.debug("Skipping remote with unknown type %r", config.type)
            continue

        if config.matcher:
            matcher = Matcher.regex(config.matcher)
        elif config.domain:
            matcher = Matcher.exact(config.domain)
        else:
            logger.debug("Skipping %s remote with neither domain nor matcher", config.type)
            continue

        rows.append(ProviderTableEntry(matcher, config, create))

    return tuple(rows) + DEFAULT_PROVIDERS


def resolve_provider(
    table: ProviderTable,
    domain: str,
    path: str,
    reporter: ErrorReporter | None = None,
) -> RemoteProvider | None:
    """Find and create the provider for a remote.

    A matched user-defined remote with a configured domain gets that domain
    rather than the runtime one; `path` is passed through unchanged.

    Args:
        table: Provider table from `build_provider_table`
        domain: Host as it appears in the remote URL
        path: Repository path portion of the remote URL
        reporter: Receives any exception raised while matching or creating;
            defaults to logging

    Returns:
        The provider, or None if nothing matches or resolution failed
    """
    try:
        key = domain.lower()
        for entry in table:
            if entry.matcher.matches(key):
                if entry.config is not None and entry.config.domain:
                    return entry.create(entry.config.domain, path)
                return entry.create(domain, path)
        return None
    except Exception as e:
        (reporter or LoggingErrorReporter()).error(e, RESOLVER_SOURCE)
        return None


def bind_resolver(
    table: ProviderTable, reporter: ErrorReporter | None = None
) -> ProviderResolver:
    """Bind a table so callers can resolve with just ``(domain, path)``."""
    def resolve(domain: str, path: str) -> RemoteProvider | None:
        return resolve_provider(table, domain, path, reporter)
    return resolve
