"""Template-driven provider for hosts without built-in support."""

from string import Template

from ..types import LineRange, RemoteUrls
from .provider import RemoteProvider


class CustomRemote(RemoteProvider):
    """Provider whose URLs come from user-supplied templates.

    Templates use ``${name}`` placeholders:
    - ``${repo}``: repository path
    - ``${branch}``: branch name
    - ``${id}``: commit sha
    - ``${file}``: file path, with the line fragment already appended
    - ``${line}``, ``${start}``, ``${end}``: line numbers in line templates
    """

    key = "custom"
    default_name = "Custom"

    def __init__(
        self,
        domain: str,
        path: str,
        urls: RemoteUrls,
        protocol: str | None = None,
        name: str | None = None,
    ) -> None:
        super().__init__(domain, path, protocol, name, custom=True)
        self.urls = urls

    def _render(self, template: str, **values: str) -> str:
        return Template(template).safe_substitute(repo=self.path, **values)

    def _line_fragment(self, line_range: LineRange | None) -> str:
        if line_range is None:
            return ""
        if line_range.is_single_line and self.urls.file_line:
            return self._render(self.urls.file_line, line=str(line_range.start))
        if self.urls.file_range:
            return self._render(
                self.urls.file_range, start=str(line_range.start), end=str(line_range.end)
            )
        return ""

    def get_url_for_repository(self) -> str:
        return self._render(self.urls.repository)

    def get_url_for_branches(self) -> str:
        if not self.urls.branches:
            return self.get_url_for_repository()
        return self._render(self.urls.branches)

    def get_url_for_branch(self, branch: str) -> str:
        if not self.urls.branch:
            return self.get_url_for_repository()
        return self._render(self.urls.branch, branch=branch)

    def get_url_for_commit(self, sha: str) -> str:
        if not self.urls.commit:
            return self.get_url_for_repository()
        return self._render(self.urls.commit, id=sha)

    def get_url_for_file(
        self,
        file_name: str,
        branch: str | None = None,
        sha: str | None = None,
        line_range: LineRange | None = None,
    ) -> str:
        file = f"{file_name}{self._line_fragment(line_range)}"
        if sha and self.urls.file_in_commit:
            return self._render(self.urls.file_in_commit, id=sha, file=file)
        if branch and self.urls.file_in_branch:
            return self._render(self.urls.file_in_branch, branch=branch, file=file)
        if self.urls.file:
            return self._render(self.urls.file, file=file)
        return self.get_url_for_repository()
