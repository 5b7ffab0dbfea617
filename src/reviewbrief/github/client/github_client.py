from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass(frozen=True)
class GitHubClient:
    token: str
    api_url: str = "https://api.github.com"
    transport: Optional[httpx.AsyncBaseTransport] = None

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    def session(self) -> httpx.AsyncClient:
        """One client per PR fetch; both requests share its connection pool."""
        return httpx.AsyncClient(
            base_url=self.api_url,
            headers=self.headers(),
            timeout=30,
            transport=self.transport,
        )
