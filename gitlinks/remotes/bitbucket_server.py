"""Bitbucket Server (Data Center) remote provider.

Clone URLs look like ``https://host/scm/PROJ/repo.git`` while the web UI
lives under ``https://host/projects/PROJ/repos/repo``.
"""

from ..types import LineRange
from .provider import RemoteProvider

SCM_PREFIX = "scm/"


class BitbucketServerRemote(RemoteProvider):
    """Self-hosted Bitbucket Server provider."""

    key = "bitbucket-server"
    default_name = "Bitbucket Server"

    def __init__(
        self,
        domain: str,
        path: str,
        protocol: str | None = None,
        name: str | None = None,
        custom: bool = False,
    ) -> None:
        path = path.strip("/")
        if path.lower().startswith(SCM_PREFIX):
            path = path[len(SCM_PREFIX):]
        super().__init__(domain, path, protocol, name, custom)

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.domain}/projects/{self.owner}/repos/{self.repo_name}"

    def get_url_for_branches(self) -> str:
        return f"{self.base_url}/branches"

    def get_url_for_branch(self, branch: str) -> str:
        return f"{self.base_url}/commits?until={branch}"

    def get_url_for_commit(self, sha: str) -> str:
        return f"{self.base_url}/commits/{sha}"

    def get_url_for_file(
        self,
        file_name: str,
        branch: str | None = None,
        sha: str | None = None,
        line_range: LineRange | None = None,
    ) -> str:
        line = ""
        if line_range is not None:
            line = f"#{line_range.start}"
            if not line_range.is_single_line:
                line += f"-{line_range.end}"

        ref = sha or branch
        if ref:
            return f"{self.base_url}/browse/{file_name}?at={ref}{line}"
        return f"{self.base_url}/browse/{file_name}{line}"

    def get_url_for_comparison(self, base: str, compare: str) -> str | None:
        return f"{self.base_url}/compare/commits?sourceBranch={compare}&targetBranch={base}"
