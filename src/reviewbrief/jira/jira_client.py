from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Optional

import httpx

SEARCH_FIELDS = "summary,description,status"


@dataclass(frozen=True)
class JiraClient:
    email: str
    api_token: str
    domain: str
    transport: Optional[httpx.AsyncBaseTransport] = None

    def headers(self) -> dict[str, str]:
        auth = base64.b64encode(f"{self.email}:{self.api_token}".encode()).decode()
        return {
            "Authorization": f"Basic {auth}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def session(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=f"https://{self.domain}",
            headers=self.headers(),
            timeout=30,
            transport=self.transport,
        )

    async def search(self, jql: str, max_results: int) -> httpx.Response:
        async with self.session() as http:
            return await http.get(
                "/rest/api/2/search/jql",
                params={"jql": jql, "maxResults": max_results, "fields": SEARCH_FIELDS},
            )
