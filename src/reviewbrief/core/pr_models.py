from __future__ import annotations
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

FileStatus = Literal["added", "modified", "removed", "renamed", "copied", "changed", "unchanged"]


class FileChange(BaseModel):
    """One file touched by a pull request."""
    model_config = ConfigDict(frozen=True)

    path: str
    status: FileStatus
    additions: int = Field(ge=0)
    deletions: int = Field(ge=0)
    patch: Optional[str] = None  # GitHub omits it for binary and oversized diffs


class PullRequestRecord(BaseModel):
    """
    Normalized pull request metadata plus its file list.
    Files keep the order GitHub returned them in.
    """
    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    state: str
    body: str = ""
    created_at: datetime
    updated_at: datetime
    author_login: str
    files: tuple[FileChange, ...] = ()
