"""
GitHub boundary modules.

Exports: GitHubClient, parse_repo_url
"""

from .github_client import GitHubClient, parse_repo_url

__all__ = ["GitHubClient", "parse_repo_url"]
