"""
Raw GitHub pull request endpoints.

These return the httpx.Response untouched so the caller can judge both
status codes of a paired fetch together.
"""
from __future__ import annotations

import httpx

FILES_PER_PAGE = 100


async def get_pr(owner: str, repo: str, pr_number: int, http: httpx.AsyncClient) -> httpx.Response:
    return await http.get(f"/repos/{owner}/{repo}/pulls/{pr_number}")


async def get_pr_files(owner: str, repo: str, pr_number: int, http: httpx.AsyncClient) -> httpx.Response:
    return await http.get(
        f"/repos/{owner}/{repo}/pulls/{pr_number}/files",
        params={"per_page": FILES_PER_PAGE},
    )
