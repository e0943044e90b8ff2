"""Registry holding the active provider table."""

import logging
from typing import Iterable

from ..types import RemotesConfig
from .factory import (
    ErrorReporter,
    ProviderTable,
    build_provider_table,
    resolve_provider,
)
from .parser import parse_remote_url
from .provider import RemoteProvider

logger = logging.getLogger(__name__)


class RemoteProviderRegistry:
    """Owns the provider table for one configuration epoch.

    `reload` builds the replacement table in full before swapping it in, so
    a resolution that is already running keeps the table it started with.
    """

    def __init__(
        self,
        configs: Iterable[RemotesConfig] | None = None,
        reporter: ErrorReporter | None = None,
    ) -> None:
        self._reporter = reporter
        self._table: ProviderTable = build_provider_table(configs)

    @property
    def table(self) -> ProviderTable:
        return self._table

    def reload(self, configs: Iterable[RemotesConfig] | None) -> ProviderTable:
        """Rebuild the table from new configuration and publish it."""
        table = build_provider_table(configs)
        self._table = table
        logger.info("Loaded provider table with %d entries", len(table))
        return table

    def resolve(self, domain: str, path: str) -> RemoteProvider | None:
        return resolve_provider(self._table, domain, path, self._reporter)

    def resolve_url(self, remote_url: str) -> RemoteProvider | None:
        """Resolve a full remote URL like ``git@github.com:owner/repo.git``.

        Args:
            remote_url: A git remote URL

        Returns:
            The provider, or None if the URL can't be parsed or no provider
            matches it
        """
        parsed = parse_remote_url(remote_url)
        if parsed is None:
            logger.debug("Unrecognized remote URL: %s", remote_url)
            return None
        return self.resolve(parsed.domain, parsed.path)
