"""Bitbucket Cloud remote provider."""

from ..types import LineRange
from .provider import RemoteProvider


class BitbucketRemote(RemoteProvider):
    """Bitbucket Cloud provider (bitbucket.org)."""

    key = "bitbucket"
    default_name = "Bitbucket"

    def get_url_for_branches(self) -> str:
        return f"{self.base_url}/branches"

    def get_url_for_branch(self, branch: str) -> str:
        return f"{self.base_url}/commits/branch/{branch}"

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
            line = f"#lines-{line_range.start}"
            if not line_range.is_single_line:
                line += f":{line_range.end}"

        ref = sha or branch
        if ref:
            return f"{self.base_url}/src/{ref}/{file_name}{line}"
        return f"{self.base_url}?path={file_name}{line}"

    def get_url_for_comparison(self, base: str, compare: str) -> str | None:
        return f"{self.base_url}/branches/compare/{compare}%0D{base}"
