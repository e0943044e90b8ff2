"""GitHub remote provider.

Covers github.com and GitHub Enterprise hosts bound through custom config.
"""

from ..types import LineRange
from .provider import RemoteProvider


class GitHubRemote(RemoteProvider):
    """GitHub provider.

    Supports:
    - https://github.com/owner/repo
    - https://github.enterprise.com/owner/repo
    """

    key = "github"
    default_name = "GitHub"

    @staticmethod
    def _line_anchor(line_range: LineRange | None) -> str:
        if line_range is None:
            return ""
        if line_range.is_single_line:
            return f"#L{line_range.start}"
        return f"#L{line_range.start}-L{line_range.end}"

    def get_url_for_branches(self) -> str:
        return f"{self.base_url}/branches"

    def get_url_for_branch(self, branch: str) -> str:
        return f"{self.base_url}/commits/{branch}"

    def get_url_for_commit(self, sha: str) -> str:
        return f"{self.base_url}/commit/{sha}"

    def get_url_for_file(
        self,
        file_name: str,
        branch: str | None = None,
        sha: str | None = None,
        line_range: LineRange | None = None,
    ) -> str:
        line = self._line_anchor(line_range)
        ref = sha or branch
        if ref:
            return f"{self.base_url}/blob/{ref}/{file_name}{line}"
        return f"{self.base_url}?path={file_name}{line}"

    def get_url_for_comparison(self, base: str, compare: str) -> str | None:
        return f"{self.base_url}/compare/{base}...{compare}"
