"""Azure DevOps remote provider.

Handles both dev.azure.com and the legacy ``<org>.visualstudio.com`` hosts,
including their SSH clone forms (``ssh.dev.azure.com:v3/org/project/repo``
and ``vs-ssh.visualstudio.com:v3/org/project/repo``).
"""

import re

from ..types import LineRange
from .provider import RemoteProvider

_SSH_DOMAIN_PATTERN = re.compile(r"^(ssh|vs-ssh)\.", re.IGNORECASE)
_SSH_PATH_PATTERN = re.compile(r"^v\d+/", re.IGNORECASE)
_ORG_PROJECT_PATTERN = re.compile(r"^(.*?)/(.*?)/(.*)")
_DEFAULT_COLLECTION_PATTERN = re.compile(r"^DefaultCollection/", re.IGNORECASE)


class AzureDevOpsRemote(RemoteProvider):
    """Azure DevOps (Azure Repos) provider.

    Args:
        legacy: True for repositories on the old ``visualstudio.com`` hosts,
            where the organization is part of the domain.
    """

    key = "azure-devops"
    default_name = "Azure DevOps"

    def __init__(
        self,
        domain: str,
        path: str,
        protocol: str | None = None,
        name: str | None = None,
        legacy: bool = False,
        custom: bool = False,
    ) -> None:
        path = path.strip("/")
        if _SSH_DOMAIN_PATTERN.match(domain):
            domain = _SSH_DOMAIN_PATTERN.sub("", domain)
            path = _SSH_PATH_PATTERN.sub("", path)

            # SSH paths omit the /_git/ segment the web UI needs
            match = _ORG_PROJECT_PATTERN.match(path)
            if match:
                org, project, repo = match.groups()
                if legacy:
                    domain = f"{org}.{domain}"
                    path = f"{project}/_git/{repo}"
                else:
                    path = f"{org}/{project}/_git/{repo}"
        elif legacy:
            path = _DEFAULT_COLLECTION_PATTERN.sub("", path)

        super().__init__(domain, path, protocol, name, custom)
        self.legacy = legacy

    @staticmethod
    def _line_params(line_range: LineRange | None) -> str:
        if line_range is None:
            return ""
        return (
            f"&line={line_range.start}&lineEnd={line_range.end + 1}"
            "&lineStartColumn=1&lineEndColumn=1"
        )

    def get_url_for_branches(self) -> str:
        return f"{self.base_url}/branches"

    def get_url_for_branch(self, branch: str) -> str:
        return f"{self.base_url}/?version=GB{branch}&_a=history"

    def get_url_for_commit(self, sha: str) -> str:
        return f"{self.base_url}/commit/{sha}"

    def get_url_for_file(
        self,
        file_name: str,
        branch: str | None = None,
        sha: str | None = None,
        line_range: LineRange | None = None,
    ) -> str:
        line = self._line_params(line_range)
        if sha:
            return f"{self.base_url}/?path=/{file_name}&version=GC{sha}{line}"
        if branch:
            return f"{self.base_url}/?path=/{file_name}&version=GB{branch}{line}"
        return f"{self.base_url}/?path=/{file_name}{line}"

    def get_url_for_comparison(self, base: str, compare: str) -> str | None:
        return f"{self.base_url}/branchCompare?baseVersion=GB{base}&targetVersion=GB{compare}"

    def to_dict(self) -> dict:
        return {**super().to_dict(), "legacy": self.legacy}
