from __future__ import annotations

import asyncio
from typing import Optional

import httpx
from pydantic import ValidationError

from reviewbrief.core.config_models import GitHubSettings
from reviewbrief.core.errors import ConfigurationMissing, FetchError, TransportError, UpstreamError, describe
from reviewbrief.core.pr_models import FileChange, PullRequestRecord
from reviewbrief.github.client.github_client import GitHubClient
from reviewbrief.github.client.pr_api import get_pr, get_pr_files

SOURCE = "GitHub"


def _to_file_change(gh_file: dict) -> FileChange:
    return FileChange(
        path=gh_file["filename"],
        status=gh_file["status"],
        additions=gh_file.get("additions", 0),
        deletions=gh_file.get("deletions", 0),
        patch=gh_file.get("patch"),
    )


def _to_pull_request(gh_pr: dict, gh_files: list[dict]) -> PullRequestRecord:
    user = gh_pr.get("user") or {}
    return PullRequestRecord(
        number=gh_pr["number"],
        title=gh_pr["title"],
        state=gh_pr["state"],
        body=gh_pr.get("body") or "",
        created_at=gh_pr["created_at"],
        updated_at=gh_pr["updated_at"],
        author_login=user.get("login") or "unknown",
        files=tuple(_to_file_change(gh_file) for gh_file in gh_files),
    )


async def load_pull_request(
    pr_number: int,
    repo: str,
    settings: GitHubSettings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> PullRequestRecord:
    """
    Fetch PR metadata and its file list concurrently.

    Both requests must succeed; otherwise UpstreamError reports both status
    codes and nothing is returned. Raises FetchError subclasses.
    """
    missing = settings.missing()
    if missing:
        raise ConfigurationMissing(SOURCE, missing)

    gh = GitHubClient(settings.token, api_url=settings.api_url, transport=transport)

    try:
        async with gh.session() as http:
            pr_resp, files_resp = await asyncio.gather(
                get_pr(settings.owner, repo, pr_number, http),
                get_pr_files(settings.owner, repo, pr_number, http),
            )
    except httpx.HTTPError as http_error:
        raise TransportError(SOURCE, f"request failed: {http_error}") from http_error

    if not (pr_resp.is_success and files_resp.is_success):
        failed_body = pr_resp.text if not pr_resp.is_success else files_resp.text
        raise UpstreamError(
            SOURCE,
            {"pull_request": pr_resp.status_code, "files": files_resp.status_code},
            failed_body,
        )

    try:
        gh_pr = pr_resp.json()
        gh_files = files_resp.json()
    except ValueError as parse_error:
        raise TransportError(SOURCE, f"invalid JSON: {parse_error}") from parse_error

    try:
        return _to_pull_request(gh_pr, gh_files)
    except (AttributeError, KeyError, TypeError, ValidationError) as shape_error:
        raise TransportError(SOURCE, f"unexpected response shape: {shape_error}") from shape_error


async def fetch_pull_request(
    pr_number: int,
    repo: str,
    settings: GitHubSettings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> PullRequestRecord | None:
    """Fetch a pull request, printing any failure and returning None instead of raising."""
    print(f"[ReviewBrief] 🔎 Fetching PR: {settings.owner or '?'}/{repo} #{pr_number}")
    try:
        return await load_pull_request(pr_number, repo, settings, transport)
    except FetchError as error:
        print(describe(error))
        return None

