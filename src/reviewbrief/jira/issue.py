"""
Jira issue lookups over the v2 search endpoint.

v2 returns descriptions as plain wiki text, which goes into the prompt as-is.
"""
from __future__ import annotations

from typing import Optional

import httpx
from pydantic import ValidationError

from reviewbrief.core.config_models import JiraSettings
from reviewbrief.core.errors import (
    ConfigurationMissing,
    FetchError,
    NotFound,
    TransportError,
    UpstreamError,
    describe,
)
from reviewbrief.core.types import NO_DESCRIPTION, TicketRecord
from reviewbrief.jira.jira_client import JiraClient

SOURCE = "Jira"


def _quote_jql(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _to_ticket(issue: dict) -> TicketRecord:
    fields = issue.get("fields") or {}
    status = fields.get("status") or {}
    return TicketRecord(
        key=issue["key"],
        summary=fields.get("summary") or "",
        description=fields.get("description") or NO_DESCRIPTION,
        status=status.get("name") or "Unknown",
    )


def _client(settings: JiraSettings, transport: Optional[httpx.AsyncBaseTransport]) -> JiraClient:
    missing = settings.missing()
    if missing:
        raise ConfigurationMissing(SOURCE, missing)
    return JiraClient(settings.email, settings.api_token, settings.domain, transport=transport)


async def _search_issues(client: JiraClient, jql: str, max_results: int) -> list[dict]:
    """Run a search and return the issue list. Raises FetchError subclasses."""
    try:
        resp = await client.search(jql, max_results)
    except httpx.HTTPError as http_error:
        raise TransportError(SOURCE, f"request failed: {http_error}") from http_error

    if not resp.is_success:
        raise UpstreamError(SOURCE, {"search": resp.status_code}, resp.text)

    try:
        envelope = resp.json()
    except ValueError as parse_error:
        raise TransportError(SOURCE, f"invalid JSON: {parse_error}") from parse_error

    issues = envelope.get("issues") if isinstance(envelope, dict) else None
    if not isinstance(issues, list):
        raise TransportError(SOURCE, "response has no 'issues' list")
    return issues


async def load_ticket(
    ticket_id: str,
    settings: JiraSettings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> TicketRecord:
    """Look up one issue by key. Raises FetchError subclasses."""
    client = _client(settings, transport)
    issues = await _search_issues(client, f"key = {_quote_jql(ticket_id)}", max_results=1)
    if not issues:
        raise NotFound(SOURCE, ticket_id)

    try:
        return _to_ticket(issues[0])
    except (AttributeError, KeyError, TypeError, ValidationError) as shape_error:
        raise TransportError(SOURCE, f"unexpected response shape: {shape_error}") from shape_error


async def fetch_ticket(
    ticket_id: str,
    settings: JiraSettings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> TicketRecord | None:
    """Fetch a ticket, printing any failure and returning None instead of raising."""
    print(f"[ReviewBrief] 🔎 Fetching Jira ticket: {ticket_id}")
    try:
        return await load_ticket(ticket_id, settings, transport)
    except FetchError as error:
        print(describe(error))
        return None


# =============================================================================
# PROJECT LISTING
# =============================================================================
# Newest-first listing of a project's issues, used by scripts/list_recent_tickets.py.
# =============================================================================


async def search_recent_tickets(
    project_key: str,
    settings: JiraSettings,
    limit: int = 20,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> list[TicketRecord]:
    """Return up to `limit` issues of a project, newest first. Raises FetchError subclasses."""
    client = _client(settings, transport)
    jql = f"project = {_quote_jql(project_key)} ORDER BY created DESC"
    issues = await _search_issues(client, jql, max_results=limit)

    try:
        return [_to_ticket(issue) for issue in issues]
    except (AttributeError, KeyError, TypeError, ValidationError) as shape_error:
        raise TransportError(SOURCE, f"unexpected response shape: {shape_error}") from shape_error

