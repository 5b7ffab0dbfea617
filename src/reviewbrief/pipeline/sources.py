"""
Source strategies for the review pipeline.

Each source wraps one upstream API behind an async `fetch` that returns a
record or None. Failures are reported by the source itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

import httpx

from reviewbrief.core.config_models import GitHubSettings, JiraSettings
from reviewbrief.core.pr_models import PullRequestRecord
from reviewbrief.core.types import TicketRecord
from reviewbrief.github.pr import fetch_pull_request
from reviewbrief.jira.issue import fetch_ticket


class TicketSource(Protocol):
    async def fetch(self, ticket_id: str) -> TicketRecord | None: ...


class PullRequestSource(Protocol):
    async def fetch(self, pr_number: int, repo: str) -> PullRequestRecord | None: ...


@dataclass(frozen=True)
class JiraTicketSource:
    settings: JiraSettings
    transport: Optional[httpx.AsyncBaseTransport] = None

    async def fetch(self, ticket_id: str) -> TicketRecord | None:
        return await fetch_ticket(ticket_id, self.settings, self.transport)


@dataclass(frozen=True)
class GitHubPullRequestSource:
    settings: GitHubSettings
    transport: Optional[httpx.AsyncBaseTransport] = None

    async def fetch(self, pr_number: int, repo: str) -> PullRequestRecord | None:
        return await fetch_pull_request(pr_number, repo, self.settings, self.transport)
