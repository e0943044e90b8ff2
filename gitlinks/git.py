"""Read remotes from a local git repository."""

import subprocess
from pathlib import Path


def list_remotes(repo_path: Path | str) -> list[tuple[str, str]]:
    """List a repository's remotes.

    Args:
        repo_path: Path inside a git working tree

    Returns:
        List of (name, fetch_url) pairs in the order git reports them

    Raises:
        ValueError: If git isn't installed or the path isn't a repository
    """
    try:
        result = subprocess.run(
            ["git", "remote", "-v"],
            cwd=str(repo_path),
            capture_output=True,
            text=True,
            timeout=10,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired) as e:
        raise ValueError(f"Failed to run git: {e}") from e

    if result.returncode != 0:
        raise ValueError(f"Not a git repository: {repo_path} ({result.stderr.strip()})")

    remotes: list[tuple[str, str]] = []
    seen: set[str] = set()
    for line in result.stdout.splitlines():
        # origin\tgit@github.com:owner/repo.git (fetch)
        parts = line.split()
        if len(parts) < 2 or parts[0] in seen:
            continue
        if len(parts) > 2 and parts[2] != "(fetch)":
            continue
        seen.add(parts[0])
        remotes.append((parts[0], parts[1]))
    return remotes
