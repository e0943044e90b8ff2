"""Type definitions for remote configuration and resolution."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CustomRemoteType(str, Enum):
    """Hosting kinds a user can bind to a custom domain."""
    BITBUCKET = "Bitbucket"
    BITBUCKET_SERVER = "BitbucketServer"
    CUSTOM = "Custom"
    GITHUB = "GitHub"
    GITLAB = "GitLab"


class RemoteUrls(BaseModel):
    """URL templates for a `Custom` remote.

    Templates use ``${name}`` placeholders: repo, branch, id, file, line,
    start, end.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    repository: str
    branches: str | None = None
    branch: str | None = None
    commit: str | None = None
    file: str | None = None
    file_in_branch: str | None = Field(default=None, alias="fileInBranch")
    file_in_commit: str | None = Field(default=None, alias="fileInCommit")
    file_line: str | None = Field(default=None, alias="fileLine")
    file_range: str | None = Field(default=None, alias="fileRange")


class RemotesConfig(BaseModel):
    """A user-defined remote hosting entry.

    `type` stays a plain string so entries with kinds this version does not
    know about still load; the provider table skips them.
    """
    model_config = ConfigDict(frozen=True)

    type: str
    domain: str | None = None
    matcher: str | None = None
    protocol: str | None = None
    name: str | None = None
    urls: RemoteUrls | None = None

    @model_validator(mode="after")
    def _check_required(self) -> "RemotesConfig":
        if not self.domain and not self.matcher:
            raise ValueError("either 'domain' or 'matcher' is required")
        if self.type == CustomRemoteType.CUSTOM.value and self.urls is None:
            raise ValueError("'urls' is required for Custom remotes")
        return self


@dataclass(frozen=True)
class LineRange:
    """1-based, inclusive line range within a file."""
    start: int
    end: int | None = None

    def __post_init__(self):
        if self.start < 1:
            raise ValueError(f"Line numbers start at 1, got {self.start}")
        if self.end is None:
            object.__setattr__(self, "end", self.start)
        elif self.end < self.start:
            raise ValueError(f"Invalid line range: {self.start}-{self.end}")

    @property
    def is_single_line(self) -> bool:
        return self.start == self.end

    @classmethod
    def parse(cls, value: str) -> "LineRange":
        """Parse ``"12"`` or ``"12-20"`` into a range."""
        try:
            if "-" in value:
                start, end = value.split("-", 1)
                return cls(start=int(start), end=int(end))
            return cls(start=int(value))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid line range '{value}': {e}") from e


@dataclass(frozen=True)
class ParsedRemote:
    """A git remote URL split into its web-relevant parts."""
    scheme: str
    domain: str
    path: str
