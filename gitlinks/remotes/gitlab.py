"""GitLab remote provider.

Covers gitlab.com and self-hosted GitLab instances.
"""

from ..types import LineRange
from .provider import RemoteProvider


class GitLabRemote(RemoteProvider):
    """GitLab provider.

    Supports:
    - https://gitlab.com/owner/repo
    - https://gitlab.com/group/subgroup/project
    - https://gitlab.example.com/project
    """

    key = "gitlab"
    default_name = "GitLab"

    @staticmethod
    def _line_anchor(line_range: LineRange | None) -> str:
        if line_range is None:
            return ""
        if line_range.is_single_line:
            return f"#L{line_range.start}"
        # GitLab drops the second "L" in ranges
        return f"#L{line_range.start}-{line_range.end}"

    def get_url_for_branches(self) -> str:
        return f"{self.base_url}/-/branches"

    def get_url_for_branch(self, branch: str) -> str:
        return f"{self.base_url}/-/commits/{branch}"

    def get_url_for_commit(self, sha: str) -> str:
        return f"{self.base_url}/-/commit/{sha}"

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
            return f"{self.base_url}/-/blob/{ref}/{file_name}{line}"
        return f"{self.base_url}?path={file_name}{line}"

    def get_url_for_comparison(self, base: str, compare: str) -> str | None:
        return f"{self.base_url}/-/compare/{base}...{compare}"
