#!/usr/bin/env python3
"""CLI for resolving git remotes into hosting links."""

import argparse
import logging
import sys
from pathlib import Path

from .config import LOG_LEVEL, load_remotes_config
from .git import list_remotes
from .remotes import RemoteProviderRegistry
from .render import print_error, print_info, print_links, print_provider, print_remotes
from .types import LineRange


def _load_registry(config_path: str | None) -> RemoteProviderRegistry:
    try:
        configs = load_remotes_config(config_path)
    except ValueError as e:
        print_error(str(e))
        sys.exit(1)
    return RemoteProviderRegistry(configs)


def run_resolve(args: argparse.Namespace):
    """Resolve one remote URL and print its links."""
    registry = _load_registry(args.config)

    line_range = None
    if args.line:
        try:
            line_range = LineRange.parse(args.line)
        except ValueError as e:
            print_error(str(e))
            sys.exit(1)

    provider = registry.resolve_url(args.remote_url)
    if provider is None:
        print_error(f"No provider found for remote: {args.remote_url}")
        sys.exit(1)

    print_provider(provider)
    print_links(
        provider.get_links(
            file_name=args.file, branch=args.branch, sha=args.sha, line_range=line_range
        )
    )


def run_remotes(args: argparse.Namespace):
    """List a repository's remotes with their providers."""
    registry = _load_registry(args.config)
    repo_path = Path(args.repo).resolve()

    try:
        remotes = list_remotes(repo_path)
    except ValueError as e:
        print_error(str(e))
        sys.exit(1)

    if not remotes:
        print_info(f"No remotes configured in {repo_path}")
        return

    print_remotes([(name, url, registry.resolve_url(url)) for name, url in remotes])


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Resolve git remotes into hosting web links",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # resolve command
    resolve_parser = subparsers.add_parser("resolve", help="Print links for a remote URL")
    resolve_parser.add_argument("remote_url", help="Remote URL, e.g. git@github.com:owner/repo.git")
    resolve_parser.add_argument("--file", "-f", type=str, default=None, help="File path within the repository")
    resolve_parser.add_argument("--branch", "-b", type=str, default=None, help="Branch name")
    resolve_parser.add_argument("--sha", "-s", type=str, default=None, help="Commit sha")
    resolve_parser.add_argument("--line", "-l", type=str, default=None, help="Line or range, e.g. 12 or 12-20")
    resolve_parser.add_argument("--config", "-c", type=str, default=None, help="Remotes config file (JSON)")

    # remotes command
    remotes_parser = subparsers.add_parser("remotes", help="List a repository's remotes and providers")
    remotes_parser.add_argument("--repo", "-r", type=str, default=".", help="Path to repository (default: .)")
    remotes_parser.add_argument("--config", "-c", type=str, default=None, help="Remotes config file (JSON)")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", type=str, default=None, help="Host to bind (default: from .env or 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to bind (default: from .env or 8000)")

    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "resolve":
        run_resolve(args)
    elif args.command == "remotes":
        run_remotes(args)
    elif args.command == "serve":
        from .config import API_HOST, API_PORT
        from .server import app
        import uvicorn

        host = args.host or API_HOST
        port = args.port or API_PORT
        print_info(f"Starting API server at http://{host}:{port}")
        uvicorn.run(app, host=host, port=port)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
