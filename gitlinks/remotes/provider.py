"""Abstract base class for remote hosting providers."""

from abc import ABC, abstractmethod
from typing import ClassVar

from ..types import LineRange

DEFAULT_PROTOCOL = "https"


class RemoteProvider(ABC):
    """Abstract base for hosting providers (GitHub, GitLab, etc.).

    A provider is bound to one remote (domain + repository path) and builds
    web links into that repository:
    - repository, branches and branch pages
    - commit pages
    - file views, optionally pinned to a branch or commit and a line range
    - comparisons between two refs, where the host supports them
    """

    # Provider identifier (e.g., "github", "gitlab")
    key: ClassVar[str] = "unknown"

    # Display name used when no name is configured
    default_name: ClassVar[str] = "Unknown"

    def __init__(
        self,
        domain: str,
        path: str,
        protocol: str | None = None,
        name: str | None = None,
        custom: bool = False,
    ) -> None:
        self.domain = domain
        self.path = path.strip("/")
        self.protocol = protocol or DEFAULT_PROTOCOL
        self.custom = custom
        self._name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(domain={self.domain!r}, path={self.path!r})"

    @property
    def name(self) -> str:
        """Display name, e.g. ``GitHub`` or ``GitHub (git.corp.com)``."""
        if self._name:
            return self._name
        if self.custom:
            return f"{self.default_name} ({self.domain})"
        return self.default_name

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.domain}/{self.path}"

    @property
    def owner(self) -> str:
        owner, _, _ = self.path.rpartition("/")
        return owner

    @property
    def repo_name(self) -> str:
        return self.path.rpartition("/")[2]

    def get_url_for_repository(self) -> str:
        return self.base_url

    @abstractmethod
    def get_url_for_branches(self) -> str:
        pass

    @abstractmethod
    def get_url_for_branch(self, branch: str) -> str:
        pass

    @abstractmethod
    def get_url_for_commit(self, sha: str) -> str:
        pass

    @abstractmethod
    def get_url_for_file(
        self,
        file_name: str,
        branch: str | None = None,
        sha: str | None = None,
        line_range: LineRange | None = None,
    ) -> str:
        """Return a URL for viewing a file.

        Args:
            file_name: Path of the file relative to the repository root
            branch: Branch to view the file on
            sha: Commit to view the file at (wins over `branch`)
            line_range: Lines to highlight

        Returns:
            The file URL
        """
        pass

    def get_url_for_comparison(self, base: str, compare: str) -> str | None:
        """Return a URL comparing two refs, or None if unsupported."""
        return None

    def get_links(
        self,
        file_name: str | None = None,
        branch: str | None = None,
        sha: str | None = None,
        line_range: LineRange | None = None,
    ) -> dict[str, str]:
        """Build every link available for the given inputs.

        Args:
            file_name: Optional file path; adds a ``file`` link
            branch: Optional branch; adds a ``branch`` link
            sha: Optional commit; adds a ``commit`` link
            line_range: Optional lines for the ``file`` link

        Returns:
            Mapping of link kind to URL
        """
        links = {
            "repository": self.get_url_for_repository(),
            "branches": self.get_url_for_branches(),
        }
        if branch:
            links["branch"] = self.get_url_for_branch(branch)
        if sha:
            links["commit"] = self.get_url_for_commit(sha)
        if file_name:
            links["file"] = self.get_url_for_file(
                file_name.lstrip("/"), branch=branch, sha=sha, line_range=line_range
            )
        return links

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "name": self.name,
            "domain": self.domain,
            "path": self.path,
            "protocol": self.protocol,
            "custom": self.custom,
        }
