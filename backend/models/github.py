"""
Repository browsing models.

Shapes returned by the GitHub proxy endpoints: repository summary,
file-tree nodes and decoded file content.

Dependencies: pydantic
System role: Repository API contracts
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class RepositoryInfo(BaseModel):
    """Summary of a GitHub repository."""

    name: str = Field(description="Full repository name, owner/repo")
    description: str | None = None
    stars: int = 0
    branch: str | None = Field(default=None, description="Default branch")

    @classmethod
    def from_github(cls, payload: dict[str, Any]) -> "RepositoryInfo":
        """Build from a /repos/{owner}/{repo} response body."""
        return cls(
            name=payload.get("full_name") or payload.get("name", ""),
            description=payload.get("description"),
            stars=payload.get("stargazers_count") or 0,
            branch=payload.get("default_branch"),
        )


class FileTreeNode(BaseModel):
    """Single entry of a repository directory listing."""

    name: str
    path: str
    type: Literal["file", "dir", "symlink", "submodule"]
    size: int = 0
    sha: str | None = None
    download_url: str | None = None
    children: list["FileTreeNode"] | None = None

    @classmethod
    def from_github(cls, payload: dict[str, Any]) -> "FileTreeNode":
        """Build from one item of a /contents response body."""
        return cls(
            name=payload["name"],
            path=payload["path"],
            type=payload.get("type", "file"),
            size=payload.get("size") or 0,
            sha=payload.get("sha"),
            download_url=payload.get("download_url"),
        )


class RepositoryContentsResponse(BaseModel):
    """Response for GET /api/github."""

    repo: RepositoryInfo
    contents: list[FileTreeNode]


class FileContentResponse(BaseModel):
    """Response for GET /api/github/file."""

    name: str
    path: str
    content: str
    size: int


FileTreeNode.model_rebuild()
