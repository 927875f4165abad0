"""
Repository browsing service.

Resolves a pasted GitHub URL, fetches repository metadata and directory
listings, and decodes single files for display and analysis.

Dependencies: backend.boundary.github, backend.models.github
System role: Repository browsing orchestration layer
"""

import base64
import binascii
import logging

from backend.boundary.github import GitHubClient, parse_repo_url
from backend.core.exceptions import GitHubAPIError, NotAFileError
from backend.models.github import (
    FileContentResponse,
    FileTreeNode,
    RepositoryContentsResponse,
    RepositoryInfo,
)

logger = logging.getLogger(__name__)

REPOSITORY_FETCH_FAILED = "Failed to fetch repository data"
FILE_FETCH_FAILED = "Failed to fetch file content"


def sort_tree(nodes: list[FileTreeNode]) -> list[FileTreeNode]:
    """Order directories before everything else, then by case-insensitive name."""
    return sorted(nodes, key=lambda node: (node.type != "dir", node.name.lower()))


class RepositoryService:
    """Service for browsing a GitHub repository."""

    def __init__(self, github_client: GitHubClient) -> None:
        """
        Initialize repository service.

        Args:
            github_client: Shared GitHub REST client
        """
        self.github_client = github_client

    async def list_repository(self, repo_url: str, path: str = "") -> RepositoryContentsResponse:
        """
        Fetch repository summary and one directory level.

        Args:
            repo_url: URL containing github.com/<owner>/<repo>
            path: Directory inside the repository, "" for the root

        Returns:
            RepositoryContentsResponse: Summary plus sorted entries

        Raises:
            InvalidRepositoryUrlError: URL is not a GitHub repository URL
            GitHubAPIError: GitHub call failed
        """
        owner, repo = parse_repo_url(repo_url)
        logger.info(f"{__name__}:list_repository - owner={owner} repo={repo} path={path!r}")

        try:
            repo_data = await self.github_client.get_repository(owner, repo)
            contents = await self.github_client.get_contents(owner, repo, path)
        except GitHubAPIError as e:
            raise GitHubAPIError(
                REPOSITORY_FETCH_FAILED,
                upstream_status=e.upstream_status,
            ) from e

        items = contents if isinstance(contents, list) else [contents]
        return RepositoryContentsResponse(
            repo=RepositoryInfo.from_github(repo_data),
            contents=sort_tree([FileTreeNode.from_github(item) for item in items]),
        )

    async def get_file(self, repo_url: str, file_path: str) -> FileContentResponse:
        """
        Fetch and decode one file.

        Args:
            repo_url: URL containing github.com/<owner>/<repo>
            file_path: Path of the file inside the repository

        Returns:
            FileContentResponse: Name, path, UTF-8 text and size

        Raises:
            InvalidRepositoryUrlError: URL is not a GitHub repository URL
            NotAFileError: Path is a directory or another non-file entry
            GitHubAPIError: GitHub call failed
        """
        owner, repo = parse_repo_url(repo_url)
        logger.info(f"{__name__}:get_file - owner={owner} repo={repo} path={file_path!r}")

        try:
            file_data = await self.github_client.get_contents(owner, repo, file_path)
        except GitHubAPIError as e:
            raise GitHubAPIError(FILE_FETCH_FAILED, upstream_status=e.upstream_status) from e

        if isinstance(file_data, list) or file_data.get("type") != "file":
            raise NotAFileError(file_path)

        try:
            raw = base64.b64decode(file_data.get("content") or "")
        except (binascii.Error, ValueError) as e:
            logger.error(f"{__name__}:get_file - undecodable content for {file_path}: {e}")
            raise GitHubAPIError(FILE_FETCH_FAILED) from e

        return FileContentResponse(
            name=file_data["name"],
            path=file_data["path"],
            content=raw.decode("utf-8", errors="replace"),
            size=file_data.get("size") or len(raw),
        )
