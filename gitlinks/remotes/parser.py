"""Parse git remote URLs into scheme, domain and repository path."""

import re

from ..types import ParsedRemote

# scheme://[user[:password]@]host[:port]/path
_URL_PATTERN = re.compile(
    r"^(?P<scheme>https?|git|ssh|git\+ssh)://(?:[^@/]+@)?(?P<host>[^:/]+)(?::\d*)?/(?P<path>.+)$",
    re.IGNORECASE,
)
# scp-like syntax: [user@]host:path
_SCP_PATTERN = re.compile(r"^(?:[^@/]+@)?(?P<host>[^:/]+):(?P<path>.+)$")


def _clean_path(path: str) -> str:
    path = path.strip().strip("/")
    if path.lower().endswith(".git"):
        path = path[:-4]
    return path.rstrip("/")


def parse_remote_url(url: str) -> ParsedRemote | None:
    """Split a remote URL into its web-relevant parts.

    Supports:
    - https://github.com/owner/repo.git
    - ssh://git@host:2222/owner/repo.git
    - git://host/owner/repo
    - git@github.com:owner/repo.git

    Args:
        url: A git remote URL as printed by ``git remote -v``

    Returns:
        ParsedRemote, or None for local paths and unrecognized formats
    """
    url = (url or "").strip()
    if not url:
        return None

    match = _URL_PATTERN.match(url)
    if match:
        scheme = match.group("scheme").lower()
        path = _clean_path(match.group("path"))
        if not path:
            return None
        return ParsedRemote(scheme=scheme, domain=match.group("host"), path=path)

    # Anything else with "://" is a scheme we don't handle (file://, etc.)
    if "://" in url:
        return None

    match = _SCP_PATTERN.match(url)
    if match:
        host = match.group("host")
        # Exclude Windows drive letters (e.g., C:\repo)
        if len(host) == 1:
            return None
        path = _clean_path(match.group("path"))
        if not path:
            return None
        return ParsedRemote(scheme="ssh", domain=host, path=path)

    return None
