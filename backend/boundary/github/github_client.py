"""
GitHub REST client for read-only repository access.

Fetches repository metadata and contents listings. Requests are sent
with the configured token first; a 401/403 answer to an authenticated
request is retried once anonymously so public repositories keep working
with a missing or revoked token.

Dependencies: httpx
System role: GitHub contents API boundary
"""

import logging
import re
from typing import Any
from urllib.parse import quote

import httpx

from backend.core.exceptions import GitHubAPIError, InvalidRepositoryUrlError

logger = logging.getLogger(__name__)

GITHUB_ACCEPT = "application/vnd.github.v3+json"
_REPO_URL = re.compile(r"github\.com/([^/]+)/([^/]+)")


def parse_repo_url(repo_url: str) -> tuple[str, str]:
    """
    Extract owner and repository name from a GitHub URL.

    Args:
        repo_url: e.g. "https://github.com/octocat/Hello-World.git"

    Returns:
        tuple[str, str]: (owner, repo) with any ".git" suffix removed

    Raises:
        InvalidRepositoryUrlError: If the URL has no github.com/<owner>/<repo> part
    """
    match = _REPO_URL.search(repo_url or "")
    if not match:
        raise InvalidRepositoryUrlError(repo_url)
    owner, repo = match.groups()
    # Drop query strings and fragments pasted along with the URL
    repo = re.split(r"[?#]", repo, maxsplit=1)[0]
    repo = re.sub(r"\.git$", "", repo)
    if not repo:
        raise InvalidRepositoryUrlError(repo_url)
    return owner, repo


class GitHubClient:
    """Async client for the GitHub repositories and contents endpoints."""

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        token: str | None = None,
        timeout: float = 30.0,
        user_agent: str = "monkeycode",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize GitHub client.

        Args:
            api_url: REST API base URL
            token: Optional bearer token
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
            transport: Optional httpx transport (tests inject MockTransport)
        """
        self._token = token
        self._client = httpx.AsyncClient(
            base_url=api_url.rstrip("/"),
            timeout=timeout,
            headers={"Accept": GITHUB_ACCEPT, "User-Agent": user_agent},
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def _get(self, url: str) -> httpx.Response:
        """
        GET with auth, falling back to an anonymous request on 401/403.

        Args:
            url: Path relative to the API base URL

        Returns:
            httpx.Response: Final response (not status-checked)

        Raises:
            GitHubAPIError: On transport failure
        """
        try:
            if not self._token:
                return await self._client.get(url)

            response = await self._client.get(
                url, headers={"Authorization": f"Bearer {self._token}"}
            )
            if response.status_code in (401, 403):
                logger.warning(
                    "GitHub rejected token (status=%s), retrying unauthenticated: %s",
                    response.status_code, url,
                )
                response = await self._client.get(url)
            return response
        except httpx.HTTPError as e:
            logger.error("GitHub request failed: url=%s error=%s", url, e)
            raise GitHubAPIError(f"GitHub request failed: {type(e).__name__}", url=url) from e

    async def _get_json(self, url: str, what: str) -> Any:
        """GET and decode JSON, raising GitHubAPIError on a non-2xx status or a non-JSON body."""
        response = await self._get(url)
        if response.is_error:
            logger.error(
                "GitHub %s fetch failed: status=%s body=%s",
                what, response.status_code, response.text[:500],
            )
            raise GitHubAPIError(
                f"GitHub {what} fetch failed: {response.status_code}",
                upstream_status=response.status_code,
                url=url,
            )
        try:
            return response.json()
        except ValueError as e:
            logger.error("GitHub %s response is not JSON: url=%s body=%s", what, url, response.text[:200])
            raise GitHubAPIError(
                f"GitHub {what} response is not JSON",
                upstream_status=response.status_code,
                url=url,
            ) from e

    async def get_repository(self, owner: str, repo: str) -> dict[str, Any]:
        """
        Fetch repository metadata.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            dict: Body of GET /repos/{owner}/{repo}
        """
        return await self._get_json(f"/repos/{quote(owner)}/{quote(repo)}", "repo")

    async def get_contents(
        self,
        owner: str,
        repo: str,
        path: str = "",
    ) -> list[dict[str, Any]] | dict[str, Any]:
        """
        Fetch a directory listing or a single file object.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Path inside the repository, "" for the root

        Returns:
            list for directories, dict for files (content base64-encoded)
        """
        clean_path = quote(path.strip("/"))
        return await self._get_json(
            f"/repos/{quote(owner)}/{quote(repo)}/contents/{clean_path}",
            "contents",
        )
