"""Remote hosting providers for gitlinks.

Supports GitHub, GitLab, Bitbucket (cloud + server), Azure DevOps and
template-driven custom hosts.
"""

from .factory import (
    DEFAULT_PROVIDERS,
    ProviderTable,
    bind_resolver,
    build_provider_table,
    resolve_provider,
)
from .parser import parse_remote_url
from .provider import RemoteProvider
from .registry import RemoteProviderRegistry

__all__ = [
    "DEFAULT_PROVIDERS",
    "ProviderTable",
    "RemoteProvider",
    "RemoteProviderRegistry",
    "bind_resolver",
    "build_provider_table",
    "parse_remote_url",
    "resolve_provider",
]
